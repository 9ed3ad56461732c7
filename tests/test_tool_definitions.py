"""
Tests for custom job and dispatch workflow tool definitions
"""

import pytest

from models import SafeJobConfig, WorkflowInput
from tool_definitions import (
    build_input_property,
    generate_custom_job_tool_definition,
    generate_dispatch_workflow_tool,
    map_input_type,
)
from utils.identifiers import normalize_safe_output_identifier


@pytest.mark.parametrize("raw,expected", [
    ("deploy-app", "deploy_app"),
    ("Deploy App", "deploy_app"),
    ("  release.notes  ", "release_notes"),
    ("already_normal", "already_normal"),
    ("MIXED-Case.name", "mixed_case_name"),
])
def test_normalize_identifier(raw, expected):
    assert normalize_safe_output_identifier(raw) == expected


@pytest.mark.parametrize("input_type,expected", [
    ("choice", "string"),
    ("boolean", "boolean"),
    ("number", "number"),
    ("string", "string"),
    ("environment", "string"),
    ("", "string"),
    ("datetime", "string"),
])
def test_map_input_type(input_type, expected):
    assert map_input_type(input_type) == expected


def test_choice_with_options_gets_enum():
    prop = build_input_property(WorkflowInput(type="choice", options=["a", "b"]))

    assert prop == {"type": "string", "enum": ["a", "b"]}


def test_choice_without_options_has_no_enum():
    assert build_input_property(WorkflowInput(type="choice")) == {"type": "string"}


def test_unknown_type_is_string_without_extras():
    assert build_input_property(WorkflowInput(type="datetime", options=["x"])) == {"type": "string"}


# ============================================================================
# CUSTOM JOBS
# ============================================================================

def test_custom_job_tool():
    job = SafeJobConfig.model_validate({
        "description": "Deploy the application",
        "inputs": {
            "z": {"type": "string", "required": True},
            "a": {"type": "boolean", "required": True, "default": False},
            "m": {"type": "choice", "options": ["x", "y"], "required": True,
                  "description": "Mode"},
            "optional": {"type": "number"},
        },
    })

    tool = generate_custom_job_tool_definition("Deploy-App", job).to_dict()

    assert tool == {
        "name": "deploy_app",
        "description": "Deploy the application",
        "inputSchema": {
            "type": "object",
            "properties": {
                "a": {"type": "boolean", "default": False},
                "m": {"type": "string", "enum": ["x", "y"], "description": "Mode"},
                "optional": {"type": "number"},
                "z": {"type": "string"},
            },
            "required": ["a", "m", "z"],
            "additionalProperties": False,
        },
    }


def test_custom_job_default_description():
    tool = generate_custom_job_tool_definition("release-notes", SafeJobConfig())

    assert tool.description == "Execute the release_notes custom job"


def test_custom_job_without_required_inputs_omits_required():
    job = SafeJobConfig.model_validate({"inputs": {"note": {"type": "string"}}})

    schema = generate_custom_job_tool_definition("notes", job).input_schema

    assert "required" not in schema
    assert schema["additionalProperties"] is False


def test_custom_job_has_no_routing_metadata():
    tool = generate_custom_job_tool_definition("notes", SafeJobConfig()).to_dict()

    assert "_workflow_name" not in tool


# ============================================================================
# DISPATCH WORKFLOWS
# ============================================================================

def test_dispatch_tool_routing_and_description():
    tool = generate_dispatch_workflow_tool("deploy-prod", {}).to_dict()

    assert tool["name"] == "deploy_prod"
    assert tool["_workflow_name"] == "deploy-prod"
    assert tool["description"].startswith("Dispatch the 'deploy-prod' workflow")
    assert tool["inputSchema"] == {
        "type": "object",
        "properties": {},
        "additionalProperties": False,
    }


def test_dispatch_tool_inputs():
    inputs = {
        "environment": WorkflowInput(
            type="choice",
            options=["staging", "production"],
            default="staging",
            required=True,
            description="Target environment",
        ),
        "dry_run": WorkflowInput(type="boolean", default=False),
        "region": WorkflowInput(type="environment"),
    }

    schema = generate_dispatch_workflow_tool("deploy", inputs).input_schema

    assert schema["properties"] == {
        "dry_run": {
            "type": "boolean",
            "description": "Input parameter 'dry_run' for workflow deploy",
            "default": False,
        },
        "environment": {
            "type": "string",
            "enum": ["staging", "production"],
            "description": "Target environment",
        },
        "region": {
            "type": "string",
            "description": "Input parameter 'region' for workflow deploy",
        },
    }
    assert schema["required"] == ["environment"]
