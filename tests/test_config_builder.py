"""
Tests for the runtime configuration builder
"""

import json

import pytest

from config_builder import (
    SafeOutputsSerializationError,
    build_custom_job_config,
    dumps_artifact,
    generate_safe_outputs_config,
)
from models import SafeJobConfig, SafeOutputsConfig


def test_no_safe_outputs_emits_nothing():
    assert generate_safe_outputs_config(None) == ""


def test_empty_aggregate_emits_empty_object():
    assert generate_safe_outputs_config(SafeOutputsConfig()) == "{}"


def test_registry_kinds_are_folded_in(make_safe_outputs):
    safe_outputs = make_safe_outputs(**{
        "create-issue": {"max": 2, "allowed-labels": ["bug"]},
        "add-labels": {"allowed": ["triage"]},
        "noop": {},
    })

    config = json.loads(generate_safe_outputs_config(safe_outputs))

    assert config == {
        "create_issue": {"max": 2, "allowed_labels": ["bug"]},
        "add_labels": {"max": 3, "allowed": ["triage"]},
        "noop": {"max": 1},
    }


def test_output_is_compact_with_sorted_keys(make_safe_outputs):
    safe_outputs = make_safe_outputs(**{"noop": {}, "add-comment": {"target": "*"}})

    assert generate_safe_outputs_config(safe_outputs) == (
        '{"add_comment":{"max":1,"target":"*"},"noop":{"max":1}}'
    )


def test_shadow_kind_reaches_runtime_config(make_safe_outputs):
    safe_outputs = make_safe_outputs(**{"missing-tool": {"create-issue": True}})

    config = json.loads(generate_safe_outputs_config(safe_outputs))

    assert config["missing_tool"] == {}
    assert config["create_missing_tool_issue"] == {"max": 1}


# ============================================================================
# CUSTOM JOBS
# ============================================================================

def test_custom_job_config(make_safe_outputs):
    safe_outputs = make_safe_outputs(jobs={
        "deploy-app": {
            "description": "Deploy the application",
            "output": "Deployment started",
            "inputs": {
                "environment": {
                    "type": "choice",
                    "description": "Where to deploy",
                    "required": True,
                    "default": "staging",
                    "options": ["staging", "production"],
                },
                "notes": {"description": "Release notes"},
            },
        }
    })

    config = json.loads(generate_safe_outputs_config(safe_outputs))

    assert config["deploy-app"] == {
        "description": "Deploy the application",
        "output": "Deployment started",
        "inputs": {
            "environment": {
                "type": "choice",
                "description": "Where to deploy",
                "required": True,
                "default": "staging",
                "options": ["staging", "production"],
            },
            "notes": {"type": "", "description": "Release notes", "required": False},
        },
    }


def test_custom_job_without_inputs():
    assert build_custom_job_config(SafeJobConfig()) == {}
    assert build_custom_job_config(SafeJobConfig(description="Ping")) == {"description": "Ping"}


def test_empty_string_default_is_omitted():
    job = SafeJobConfig.model_validate({"inputs": {"name": {"type": "string", "default": ""}}})

    assert "default" not in build_custom_job_config(job)["inputs"]["name"]


# ============================================================================
# MENTIONS
# ============================================================================

def test_mentions_only_explicit_fields(make_safe_outputs):
    safe_outputs = make_safe_outputs(mentions={"allow-team-members": False, "max": 0})

    config = json.loads(generate_safe_outputs_config(safe_outputs))

    assert config["mentions"] == {"allowTeamMembers": False, "max": 0}


def test_mentions_all_fields(make_safe_outputs):
    safe_outputs = make_safe_outputs(mentions={
        "enabled": True,
        "allow-team-members": True,
        "allow-context": False,
        "allowed": ["octocat"],
        "max": 5,
    })

    config = json.loads(generate_safe_outputs_config(safe_outputs))

    assert config["mentions"] == {
        "enabled": True,
        "allowTeamMembers": True,
        "allowContext": False,
        "allowed": ["octocat"],
        "max": 5,
    }


@pytest.mark.parametrize("enabled", [True, False])
def test_mentions_boolean_shorthand(make_safe_outputs, enabled):
    safe_outputs = make_safe_outputs(mentions=enabled)

    config = json.loads(generate_safe_outputs_config(safe_outputs))

    assert config["mentions"] == {"enabled": enabled}


def test_mentions_disabled_runtime_config(make_safe_outputs):
    assert generate_safe_outputs_config(make_safe_outputs(mentions=False)) == '{"mentions":{"enabled":false}}'


def test_mentions_block_omitted_when_nothing_set(make_safe_outputs):
    safe_outputs = make_safe_outputs(mentions={})

    assert "mentions" not in json.loads(generate_safe_outputs_config(safe_outputs))


# ============================================================================
# DISPATCH WORKFLOW
# ============================================================================

@pytest.mark.parametrize("max_value,expected", [(None, 1), (0, 1), (-3, 1), (4, 4)])
def test_dispatch_workflow_max_default(make_safe_outputs, max_value, expected):
    dispatch = {"workflows": ["deploy"]}
    if max_value is not None:
        dispatch["max"] = max_value
    safe_outputs = make_safe_outputs(**{"dispatch-workflow": dispatch})

    config = json.loads(generate_safe_outputs_config(safe_outputs))

    assert config["dispatch_workflow"] == {"workflows": ["deploy"], "max": expected}


def test_dispatch_workflow_files_included_when_resolved(make_safe_outputs):
    safe_outputs = make_safe_outputs(**{"dispatch-workflow": ["deploy", "notify"]})
    safe_outputs.dispatch_workflow.workflow_files["deploy"] = ".lock.yml"

    config = json.loads(generate_safe_outputs_config(safe_outputs))

    assert config["dispatch_workflow"] == {
        "workflows": ["deploy", "notify"],
        "workflow_files": {"deploy": ".lock.yml"},
        "max": 1,
    }


# ============================================================================
# DETERMINISM & ERRORS
# ============================================================================

def test_deterministic_across_insertion_orders():
    first = SafeOutputsConfig.model_validate({
        "jobs": {"zeta": {"inputs": {"b": {}, "a": {}}}, "alpha": {}},
        "create-issue": {},
        "add-comment": {},
    })
    second = SafeOutputsConfig.model_validate({
        "add-comment": {},
        "create-issue": {},
        "jobs": {"alpha": {}, "zeta": {"inputs": {"a": {}, "b": {}}}},
    })

    assert generate_safe_outputs_config(first) == generate_safe_outputs_config(second)
    assert generate_safe_outputs_config(first) == generate_safe_outputs_config(first)


def test_serialization_failure_is_surfaced():
    safe_outputs = SafeOutputsConfig.model_validate({
        "jobs": {"broken": {"inputs": {"value": {"default": object()}}}}
    })

    with pytest.raises(SafeOutputsSerializationError):
        generate_safe_outputs_config(safe_outputs)


def test_dumps_artifact_rejects_nan():
    with pytest.raises(SafeOutputsSerializationError):
        dumps_artifact({"max": float("nan")})
