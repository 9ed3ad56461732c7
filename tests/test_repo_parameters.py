"""
Tests for repo parameter injection
"""

import typing

import pytest

from models import CrossRepositoryTarget, SafeOutputsConfig
from repo_parameters import (
    REPO_DESCRIPTION,
    REPO_PARAMETER_POLICIES,
    add_repo_parameter_if_needed,
    get_cross_repository_policy,
)
from schemas.universe import ALL_TOOL_SCHEMAS


def _tool(name):
    return ALL_TOOL_SCHEMAS[name].to_dict()


def test_repo_added_when_allowed_repos_configured():
    safe_outputs = SafeOutputsConfig.model_validate({
        "create-issue": {"allowed-repos": ["octo-org/other"]}
    })
    tool = _tool("create_issue")

    add_repo_parameter_if_needed(tool, "create_issue", safe_outputs)

    assert tool["inputSchema"]["properties"]["repo"] == {
        "type": "string",
        "description": REPO_DESCRIPTION,
    }
    # repo is never required
    assert "repo" not in tool["inputSchema"]["required"]


def test_repo_description_names_default_target():
    safe_outputs = SafeOutputsConfig.model_validate({
        "add-comment": {"target-repo": "octo-org/main", "allowed-repos": ["octo-org/docs"]}
    })
    tool = _tool("add_comment")

    add_repo_parameter_if_needed(tool, "add_comment", safe_outputs)

    assert 'Default is "octo-org/main"' in tool["inputSchema"]["properties"]["repo"]["description"]


@pytest.mark.parametrize("policy", [
    {},
    {"allowed-repos": []},
    {"target-repo": "octo-org/main"},
])
def test_repo_not_added_without_allowed_repos(policy):
    safe_outputs = SafeOutputsConfig.model_validate({"create-issue": policy})
    tool = _tool("create_issue")

    add_repo_parameter_if_needed(tool, "create_issue", safe_outputs)

    assert "repo" not in tool["inputSchema"]["properties"]


def test_kind_without_cross_repo_fields_untouched():
    safe_outputs = SafeOutputsConfig.model_validate({"noop": {"allowed-repos": ["octo-org/other"]}})
    tool = _tool("noop")

    add_repo_parameter_if_needed(tool, "noop", safe_outputs)

    assert tool == _tool("noop")
    assert get_cross_repository_policy("noop", safe_outputs) is None


def test_no_aggregate_is_a_no_op():
    tool = _tool("create_issue")

    add_repo_parameter_if_needed(tool, "create_issue", None)

    assert tool == _tool("create_issue")


def test_universe_not_mutated():
    safe_outputs = SafeOutputsConfig.model_validate({
        "close-issue": {"allowed-repos": ["octo-org/other"]}
    })

    add_repo_parameter_if_needed(_tool("close_issue"), "close_issue", safe_outputs)

    assert "repo" not in ALL_TOOL_SCHEMAS["close_issue"].input_schema["properties"]


def test_table_covers_every_cross_repository_policy():
    cross_repo_fields = set()
    for name, field in SafeOutputsConfig.model_fields.items():
        for arg in typing.get_args(field.annotation):
            if isinstance(arg, type) and issubclass(arg, CrossRepositoryTarget):
                cross_repo_fields.add(name)

    assert set(REPO_PARAMETER_POLICIES.values()) == cross_repo_fields
    assert set(REPO_PARAMETER_POLICIES) <= set(ALL_TOOL_SCHEMAS)
