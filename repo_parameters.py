"""
Repo parameter injection

Adds a ``repo`` input to a tool's schema when that tool's policy declares
allowed target repositories. The association between tool name and
policy is a hand-maintained table: a new cross-repository kind must be
added here as well as given the ``CrossRepositoryTarget`` base.
"""

from types import MappingProxyType
from typing import Any, Dict, Optional

import structlog

from models import CrossRepositoryTarget, SafeOutputsConfig

logger = structlog.get_logger()

# tool name -> SafeOutputsConfig attribute holding its cross-repo fields
REPO_PARAMETER_POLICIES = MappingProxyType({
    "create_issue": "create_issue",
    "create_discussion": "create_discussion",
    "add_comment": "add_comment",
    "create_pull_request": "create_pull_request",
    "create_pull_request_review_comment": "create_pull_request_review_comment",
    "create_agent_session": "create_agent_session",
    "close_issue": "close_issue",
    "update_issue": "update_issue",
    "close_discussion": "close_discussion",
    "update_discussion": "update_discussion",
    "close_pull_request": "close_pull_request",
    "update_pull_request": "update_pull_request",
    "add_labels": "add_labels",
    "remove_labels": "remove_labels",
    "hide_comment": "hide_comment",
    "link_sub_issue": "link_sub_issue",
    "mark_pull_request_as_ready_for_review": "mark_pull_request_as_ready_for_review",
    "add_reviewer": "add_reviewer",
    "assign_milestone": "assign_milestone",
    "assign_to_agent": "assign_to_agent",
    "assign_to_user": "assign_to_user",
})

REPO_DESCRIPTION = (
    "Target repository for this operation in 'owner/repo' format. "
    "Must be the target-repo or in the allowed-repos list."
)
REPO_DESCRIPTION_WITH_DEFAULT = (
    "Target repository for this operation in 'owner/repo' format. "
    "Default is \"{slug}\". Must be the target-repo or in the allowed-repos list."
)


def get_cross_repository_policy(
    tool_name: str, safe_outputs: SafeOutputsConfig
) -> Optional[CrossRepositoryTarget]:
    """The policy governing ``tool_name``'s repo parameter, if any"""
    attribute = REPO_PARAMETER_POLICIES.get(tool_name)
    if attribute is None:
        return None
    policy = getattr(safe_outputs, attribute, None)
    if not isinstance(policy, CrossRepositoryTarget):
        return None
    return policy


def add_repo_parameter_if_needed(
    tool: Dict[str, Any], tool_name: str, safe_outputs: Optional[SafeOutputsConfig]
) -> None:
    """
    Add a ``repo`` property to ``tool["inputSchema"]`` in place

    Only when the tool's policy has a non-empty allowed-repos list. Must
    run on a copy of a universe tool, after its base schema is complete.
    """
    if safe_outputs is None:
        return

    policy = get_cross_repository_policy(tool_name, safe_outputs)
    if policy is None or not policy.allowed_repos:
        return

    input_schema = tool.get("inputSchema")
    if not isinstance(input_schema, dict):
        return
    properties = input_schema.get("properties")
    if not isinstance(properties, dict):
        return

    if policy.target_repo_slug:
        description = REPO_DESCRIPTION_WITH_DEFAULT.format(slug=policy.target_repo_slug)
    else:
        description = REPO_DESCRIPTION

    properties["repo"] = {
        "type": "string",
        "description": description,
    }

    logger.debug("repo_parameter_added", tool_name=tool_name)
