"""
MCP tool definitions for custom jobs and dispatch workflows

These tools are not part of the static universe; their schemas are built
from the declared inputs. Input types map to JSON Schema as follows:

    choice             -> string (+ enum from options)
    boolean            -> boolean
    number             -> number
    string / empty     -> string
    environment        -> string
    anything else      -> string
"""

from typing import Any, Dict, Mapping

import structlog

from models import SafeJobConfig, WorkflowInput
from schemas import ToolSchema, object_schema
from utils.identifiers import normalize_safe_output_identifier

logger = structlog.get_logger()

_SCHEMA_TYPES = {
    "choice": "string",
    "boolean": "boolean",
    "number": "number",
    "string": "string",
    "environment": "string",
}


def map_input_type(input_type: str) -> str:
    """JSON Schema type for a declared input type; unknown types fall back to string"""
    return _SCHEMA_TYPES.get(input_type, "string")


def build_input_property(input_def: WorkflowInput) -> Dict[str, Any]:
    """Property descriptor for one declared input (description not included)"""
    prop: Dict[str, Any] = {"type": map_input_type(input_def.type)}
    if input_def.type == "choice" and input_def.options:
        prop["enum"] = list(input_def.options)
    return prop


def generate_custom_job_tool_definition(job_name: str, job: SafeJobConfig) -> ToolSchema:
    """
    Create the tool definition for a custom safe-output job

    Args:
        job_name: Job identifier as written by the author
        job: The job definition

    Returns:
        ToolSchema with a strict inputSchema (additionalProperties=false)
    """
    tool_name = normalize_safe_output_identifier(job_name)
    logger.debug("custom_job_tool_generating", job=job_name, tool_name=tool_name)

    description = job.description or f"Execute the {tool_name} custom job"

    properties: Dict[str, Any] = {}
    required = []
    for input_name in sorted(job.inputs):
        input_def = job.inputs[input_name]
        prop = build_input_property(input_def)
        if input_def.description:
            prop["description"] = input_def.description
        if input_def.default is not None:
            prop["default"] = input_def.default
        if input_def.required:
            required.append(input_name)
        properties[input_name] = prop

    logger.debug(
        "custom_job_tool_generated",
        tool_name=tool_name,
        inputs=len(properties),
        required=len(required),
    )

    return ToolSchema(
        name=tool_name,
        description=description,
        input_schema=object_schema(properties, required),
    )


def generate_dispatch_workflow_tool(
    workflow_name: str, workflow_inputs: Mapping[str, WorkflowInput]
) -> ToolSchema:
    """
    Create the tool definition for dispatching a sibling workflow

    The exposed name is normalized; the original workflow identifier is
    kept as routing metadata (``_workflow_name``).
    """
    tool_name = normalize_safe_output_identifier(workflow_name)

    description = (
        f"Dispatch the '{workflow_name}' workflow with workflow_dispatch trigger. "
        "This workflow must support workflow_dispatch and be in .github/workflows/ "
        "directory in the same repository."
    )

    properties: Dict[str, Any] = {}
    required = []
    for input_name in sorted(workflow_inputs):
        input_def = workflow_inputs[input_name]
        prop = build_input_property(input_def)
        prop["description"] = (
            input_def.description
            or f"Input parameter '{input_name}' for workflow {workflow_name}"
        )
        # choice inputs with options carry the enum instead of a default
        if input_def.default is not None and "enum" not in prop:
            prop["default"] = input_def.default
        if input_def.required:
            required.append(input_name)
        properties[input_name] = prop

    return ToolSchema(
        name=tool_name,
        description=description,
        input_schema=object_schema(properties, required),
        workflow_name=workflow_name,
    )
