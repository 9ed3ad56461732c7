"""
Tool description enhancement

Appends the configured constraints of a policy to the base description of
its universe tool, so the agent sees the limits it will be held to.
"""

from typing import List, Optional

from models import MissingReportConfig, SafeOutputPolicy, SafeOutputsConfig

_MAX_PHRASES = {
    "create_issue": "issue(s) can be created",
    "create_agent_session": "agent session(s) can be created",
    "add_comment": "comment(s) can be added",
    "create_discussion": "discussion(s) can be created",
    "close_discussion": "discussion(s) can be closed",
    "close_issue": "issue(s) can be closed",
    "close_pull_request": "pull request(s) can be closed",
    "create_pull_request_review_comment": "review comment(s) can be created",
    "create_code_scanning_alert": "alert(s) can be reported",
    "autofix_code_scanning_alert": "autofix(es) can be proposed",
    "add_labels": "label(s) can be added",
    "remove_labels": "label(s) can be removed",
    "add_reviewer": "reviewer(s) can be requested",
    "assign_milestone": "milestone assignment(s) can be made",
    "assign_to_agent": "agent assignment(s) can be made",
    "assign_to_user": "user assignment(s) can be made",
    "update_issue": "issue(s) can be updated",
    "update_discussion": "discussion(s) can be updated",
    "update_pull_request": "pull request(s) can be updated",
    "mark_pull_request_as_ready_for_review": "pull request(s) can be marked ready for review",
    "push_to_pull_request_branch": "push(es) can be made",
    "upload_asset": "asset(s) can be uploaded",
    "update_project": "project update(s) can be made",
    "create_project_status_update": "status update(s) can be posted",
    "create_project": "project(s) can be created",
    "update_release": "release(s) can be updated",
    "link_sub_issue": "sub-issue link(s) can be created",
    "noop": "message(s) can be logged",
    "hide_comment": "comment(s) can be hidden",
    "missing_tool": "missing tool report(s) can be submitted",
    "missing_data": "missing data report(s) can be submitted",
}


def _format_list(values) -> str:
    return "[" + ", ".join(str(v) for v in values) + "]"


def describe_constraints(tool_name: str, policy: SafeOutputPolicy) -> List[str]:
    """Constraint sentences for a policy, in a fixed order"""
    constraints = []

    if policy.max > 0:
        phrase = _MAX_PHRASES.get(tool_name, "operation(s) allowed")
        constraints.append(f"Maximum {policy.max} {phrase}.")

    # Report policies only carry issue settings for their shadow kinds
    if isinstance(policy, MissingReportConfig):
        return constraints

    title_prefix = getattr(policy, "title_prefix", "")
    if title_prefix:
        constraints.append(f'Title will be prefixed with "{title_prefix}".')

    labels = getattr(policy, "labels", None)
    if labels:
        constraints.append(f"Labels {_format_list(labels)} will be automatically added.")

    allowed_labels = getattr(policy, "allowed_labels", None)
    if allowed_labels:
        constraints.append(f"Only these labels are allowed: {_format_list(allowed_labels)}.")

    allowed = getattr(policy, "allowed", None)
    if allowed:
        constraints.append(f"Only these values are allowed: {_format_list(allowed)}.")

    reviewers = getattr(policy, "reviewers", None)
    if reviewers:
        constraints.append(f"Only these reviewers can be requested: {_format_list(reviewers)}.")

    allowed_reasons = getattr(policy, "allowed_reasons", None)
    if allowed_reasons:
        constraints.append(f"Only these reasons are allowed: {_format_list(allowed_reasons)}.")

    category = getattr(policy, "category", "")
    if category:
        constraints.append(f'Discussions will be created in category "{category}".')

    required_category = getattr(policy, "required_category", "")
    if required_category:
        constraints.append(f'Only discussions in category "{required_category}" can be targeted.')

    required_labels = getattr(policy, "required_labels", None)
    if required_labels:
        constraints.append(f"Only items labeled {_format_list(required_labels)} can be targeted.")

    required_title_prefix = getattr(policy, "required_title_prefix", "")
    if required_title_prefix:
        constraints.append(f'Only items with title prefix "{required_title_prefix}" can be targeted.')

    target = getattr(policy, "target", "")
    if target:
        constraints.append(f"Target: {target}.")

    target_repo = getattr(policy, "target_repo_slug", "")
    if target_repo:
        constraints.append(f'Operations target repository "{target_repo}" by default.')

    return constraints


def enhance_tool_description(
    tool_name: str, description: str, safe_outputs: Optional[SafeOutputsConfig]
) -> str:
    """
    Append ``CONSTRAINTS:`` to a tool description

    Returns the description unchanged when the policy sets no constraint.
    """
    if safe_outputs is None:
        return description

    policy = getattr(safe_outputs, tool_name, None)
    if not isinstance(policy, SafeOutputPolicy):
        return description

    constraints = describe_constraints(tool_name, policy)
    if not constraints:
        return description

    return f"{description} CONSTRAINTS: {' '.join(constraints)}"
