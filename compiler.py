"""
Safe outputs compilation pass

One synchronous pass per workflow: resolve dispatch targets (so their file
extensions land in the runtime config), then produce the runtime config
JSON and the tool catalog JSON from the same aggregate.
"""

from dataclasses import dataclass
from typing import Optional

import structlog

from config_builder import generate_safe_outputs_config
from dispatch_workflows import (
    InputExtractor,
    WorkflowLocator,
    extract_workflow_dispatch_inputs,
    find_workflow_file,
    populate_dispatch_workflow_files,
)
from models import SafeOutputsConfig
from tool_filter import generate_filtered_tools_json

logger = structlog.get_logger()


@dataclass(frozen=True)
class CompiledSafeOutputs:
    """The two artifacts of a compilation pass"""
    config_json: str
    tools_json: str


def compile_safe_outputs(
    safe_outputs: Optional[SafeOutputsConfig],
    markdown_path: str,
    locator: WorkflowLocator = find_workflow_file,
    extractor: InputExtractor = extract_workflow_dispatch_inputs,
) -> CompiledSafeOutputs:
    """
    Compile the safe-outputs section of one workflow

    Args:
        safe_outputs: The aggregate, or None when the workflow has none
        markdown_path: Path of the compiling workflow
        locator: Sibling workflow locator
        extractor: workflow_dispatch input extractor

    Returns:
        CompiledSafeOutputs with both JSON artifacts

    Raises:
        SafeOutputsSerializationError: If either artifact cannot be encoded
    """
    if safe_outputs is None:
        return CompiledSafeOutputs(config_json="", tools_json="[]")

    logger.info("safe_outputs_compiling", workflow=markdown_path)

    # Aggregate is owned by this pass; copy so the caller's instance stays untouched
    safe_outputs = safe_outputs.model_copy(deep=True)

    dispatch_targets = populate_dispatch_workflow_files(
        safe_outputs, markdown_path, locator, extractor
    )

    config_json = generate_safe_outputs_config(safe_outputs)
    tools_json = generate_filtered_tools_json(
        safe_outputs, markdown_path, dispatch_targets=dispatch_targets
    )

    logger.info("safe_outputs_compiled", workflow=markdown_path)
    return CompiledSafeOutputs(config_json=config_json, tools_json=tools_json)
