"""
Runtime configuration builder for safe outputs

Assembles the JSON object consumed by the execution-time enforcement
layer: one entry per enabled kind (via the tool registry), plus custom
jobs, the mentions policy and the dispatch-workflow policy.
"""

import json
from typing import Any, Dict, Optional

import structlog

import handlers  # noqa: F401  (registers every kind)
from models import (
    DispatchWorkflowConfig,
    MentionsConfig,
    SafeJobConfig,
    SafeOutputsConfig,
)
from tools_registry import evaluate_registry

logger = structlog.get_logger()


class SafeOutputsSerializationError(RuntimeError):
    """A generated artifact could not be encoded as JSON"""


def dumps_artifact(value: Any, indent: Optional[int] = None) -> str:
    """
    Encode a generated artifact deterministically

    Keys are sorted so repeated compilations produce byte-identical output.

    Raises:
        SafeOutputsSerializationError: If the value is not JSON-encodable
    """
    separators = (",", ":") if indent is None else (",", ": ")
    try:
        return json.dumps(
            value,
            indent=indent,
            separators=separators,
            sort_keys=True,
            ensure_ascii=False,
            allow_nan=False,
        )
    except (TypeError, ValueError) as e:
        logger.error("safe_outputs_serialization_failed", error=str(e))
        raise SafeOutputsSerializationError(f"Failed to serialize safe outputs artifact: {e}") from e


def build_custom_job_config(job: SafeJobConfig) -> Dict[str, Any]:
    """Runtime entry for one custom job"""
    job_config: Dict[str, Any] = {}
    if job.description:
        job_config["description"] = job.description
    if job.output:
        job_config["output"] = job.output

    if job.inputs:
        inputs_config = {}
        for input_name in sorted(job.inputs):
            input_def = job.inputs[input_name]
            input_config: Dict[str, Any] = {
                "type": input_def.type,
                "description": input_def.description,
                "required": input_def.required,
            }
            if input_def.default is not None and input_def.default != "":
                input_config["default"] = input_def.default
            if input_def.options:
                input_config["options"] = list(input_def.options)
            inputs_config[input_name] = input_config
        job_config["inputs"] = inputs_config

    return job_config


def build_mentions_config(mentions: MentionsConfig) -> Dict[str, Any]:
    """Only explicitly set fields; unset fields never leak as false/0"""
    config: Dict[str, Any] = {}
    if mentions.enabled is not None:
        config["enabled"] = mentions.enabled
    if mentions.allow_team_members is not None:
        config["allowTeamMembers"] = mentions.allow_team_members
    if mentions.allow_context is not None:
        config["allowContext"] = mentions.allow_context
    if mentions.allowed:
        config["allowed"] = list(mentions.allowed)
    if mentions.max is not None:
        config["max"] = mentions.max
    return config


def build_dispatch_workflow_config(dispatch: DispatchWorkflowConfig) -> Dict[str, Any]:
    config: Dict[str, Any] = {}
    if dispatch.workflows:
        config["workflows"] = list(dispatch.workflows)
    if dispatch.workflow_files:
        config["workflow_files"] = dict(dispatch.workflow_files)
    config["max"] = dispatch.max if dispatch.max > 0 else 1
    return config


def build_safe_outputs_config(safe_outputs: SafeOutputsConfig) -> Dict[str, Any]:
    """Assemble the runtime configuration mapping"""
    config: Dict[str, Any] = dict(evaluate_registry(safe_outputs))

    for job_name in sorted(safe_outputs.jobs):
        config[job_name] = build_custom_job_config(safe_outputs.jobs[job_name])

    if safe_outputs.mentions is not None:
        mentions_config = build_mentions_config(safe_outputs.mentions)
        if mentions_config:
            config["mentions"] = mentions_config

    if safe_outputs.dispatch_workflow is not None:
        config["dispatch_workflow"] = build_dispatch_workflow_config(safe_outputs.dispatch_workflow)

    return config


def generate_safe_outputs_config(safe_outputs: Optional[SafeOutputsConfig]) -> str:
    """
    Generate the safe outputs runtime configuration JSON

    Args:
        safe_outputs: The aggregate, or None when the workflow has no safe outputs

    Returns:
        Compact JSON string, or "" when there is nothing configured

    Raises:
        SafeOutputsSerializationError: If encoding fails
    """
    if safe_outputs is None:
        return ""

    logger.info("safe_outputs_config_generating")
    config = build_safe_outputs_config(safe_outputs)
    logger.debug("safe_outputs_config_generated", keys=sorted(config))
    return dumps_artifact(config)
