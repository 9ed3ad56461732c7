"""
Pull request handlers
"""

from handlers.config_helpers import (
    generate_max_config,
    generate_max_with_required_fields_config,
    generate_max_with_reviewers_config,
    generate_max_with_target_config,
    generate_pull_request_config,
)
from models import SafeOutputsConfig
from tools_registry import register_tool


@register_tool("create_pull_request")
def handle_create_pull_request(safe_outputs: SafeOutputsConfig):
    policy = safe_outputs.create_pull_request
    if policy is None:
        return None, False
    return generate_pull_request_config(
        policy.allowed_labels, policy.allow_empty, policy.auto_merge, policy.expires
    ), True


@register_tool("create_pull_request_review_comment")
def handle_create_pull_request_review_comment(safe_outputs: SafeOutputsConfig):
    policy = safe_outputs.create_pull_request_review_comment
    if policy is None:
        return None, False
    return generate_max_config(policy.max, 10), True


@register_tool("close_pull_request")
def handle_close_pull_request(safe_outputs: SafeOutputsConfig):
    policy = safe_outputs.close_pull_request
    if policy is None:
        return None, False
    return generate_max_with_required_fields_config(
        policy.max, 1, policy.required_labels, policy.required_title_prefix
    ), True


@register_tool("update_pull_request")
def handle_update_pull_request(safe_outputs: SafeOutputsConfig):
    policy = safe_outputs.update_pull_request
    if policy is None:
        return None, False
    return generate_max_config(policy.max, 1), True


@register_tool("mark_pull_request_as_ready_for_review")
def handle_mark_pull_request_as_ready_for_review(safe_outputs: SafeOutputsConfig):
    policy = safe_outputs.mark_pull_request_as_ready_for_review
    if policy is None:
        return None, False
    return generate_max_config(policy.max, 10), True


@register_tool("push_to_pull_request_branch")
def handle_push_to_pull_request_branch(safe_outputs: SafeOutputsConfig):
    policy = safe_outputs.push_to_pull_request_branch
    if policy is None:
        return None, False
    # default 0: unlimited
    return generate_max_with_target_config(policy.max, 0, policy.target), True


@register_tool("add_reviewer")
def handle_add_reviewer(safe_outputs: SafeOutputsConfig):
    policy = safe_outputs.add_reviewer
    if policy is None:
        return None, False
    return generate_max_with_reviewers_config(policy.max, 3, policy.reviewers), True
