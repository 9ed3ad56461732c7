"""
Tool catalog filtering and enhancement

Selects the enabled tools from the static universe, enriches them with
the workflow's configuration, and appends the generated custom-job and
dispatch-workflow tools.
"""

import json
from typing import Any, Dict, List, Optional

import structlog
from mcp.types import Tool

import handlers  # noqa: F401  (registers every kind)
from config import get_settings
from config_builder import dumps_artifact
from dispatch_workflows import (
    DispatchTarget,
    InputExtractor,
    WorkflowLocator,
    extract_workflow_dispatch_inputs,
    find_workflow_file,
    resolve_dispatch_workflows,
)
from models import SafeOutputsConfig
from repo_parameters import add_repo_parameter_if_needed
from schemas.universe import get_safe_outputs_tools
from tool_definitions import generate_custom_job_tool_definition, generate_dispatch_workflow_tool
from tool_descriptions import enhance_tool_description
from tools_registry import build_enabled_tools_set

logger = structlog.get_logger()


def add_custom_job_tools(tools: List[Dict[str, Any]], safe_outputs: SafeOutputsConfig) -> None:
    """Append one tool per custom job, sorted by job name"""
    if not safe_outputs.jobs:
        return

    logger.debug("custom_job_tools_adding", count=len(safe_outputs.jobs))
    for job_name in sorted(safe_outputs.jobs):
        tool = generate_custom_job_tool_definition(job_name, safe_outputs.jobs[job_name])
        tools.append(tool.to_dict())


def add_dispatch_workflow_tools(tools: List[Dict[str, Any]], targets: List[DispatchTarget]) -> None:
    """Append one tool per dispatch target, in configured order"""
    for target in targets:
        tool = generate_dispatch_workflow_tool(target.workflow_name, target.inputs)
        tools.append(tool.to_dict())


def generate_filtered_tools(
    safe_outputs: SafeOutputsConfig, dispatch_targets: List[DispatchTarget]
) -> List[Dict[str, Any]]:
    """Build the tool catalog as a list of MCP tool mappings"""
    all_tools = get_safe_outputs_tools()
    enabled_tools = build_enabled_tools_set(safe_outputs)

    filtered_tools = []
    for tool in all_tools:
        tool_name = tool.get("name")
        if tool_name not in enabled_tools:
            continue

        # get_safe_outputs_tools returns fresh copies; the universe is untouched
        tool["description"] = enhance_tool_description(tool_name, tool["description"], safe_outputs)
        add_repo_parameter_if_needed(tool, tool_name, safe_outputs)
        filtered_tools.append(tool)

    add_custom_job_tools(filtered_tools, safe_outputs)
    add_dispatch_workflow_tools(filtered_tools, dispatch_targets)

    logger.info(
        "safe_outputs_tools_filtered",
        tools=len(filtered_tools),
        universe=len(all_tools),
        custom_jobs=len(safe_outputs.jobs),
        dispatch_workflows=len(dispatch_targets),
    )
    return filtered_tools


def generate_filtered_tools_json(
    safe_outputs: Optional[SafeOutputsConfig],
    markdown_path: str,
    dispatch_targets: Optional[List[DispatchTarget]] = None,
    locator: WorkflowLocator = find_workflow_file,
    extractor: InputExtractor = extract_workflow_dispatch_inputs,
) -> str:
    """
    Generate the tool catalog JSON for a workflow

    Args:
        safe_outputs: The aggregate, or None
        markdown_path: Path of the compiling workflow (for dispatch lookup)
        dispatch_targets: Already-resolved dispatch targets; resolved here when None
        locator: Sibling workflow locator
        extractor: workflow_dispatch input extractor

    Returns:
        Indented JSON array; "[]" when nothing is configured

    Raises:
        SafeOutputsSerializationError: If encoding fails
    """
    if safe_outputs is None:
        return "[]"

    if dispatch_targets is None:
        dispatch_targets = resolve_dispatch_workflows(
            safe_outputs.dispatch_workflow, markdown_path, locator, extractor
        )

    tools = generate_filtered_tools(safe_outputs, dispatch_targets)
    return dumps_artifact(tools, indent=get_settings().tools_json_indent)


def load_mcp_tools(tools_json: str) -> List[Tool]:
    """
    Convert a generated catalog into MCP ``Tool`` objects

    Internal routing fields (keys starting with ``_``) are not part of the
    protocol and are dropped.
    """
    return [
        Tool(
            name=tool["name"],
            description=tool.get("description"),
            inputSchema=tool["inputSchema"],
        )
        for tool in json.loads(tools_json)
    ]
