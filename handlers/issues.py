"""
Issue, comment, label and assignment handlers
"""

from handlers.config_helpers import (
    generate_assign_to_agent_config,
    generate_hide_comment_config,
    generate_max_config,
    generate_max_with_allowed_config,
    generate_max_with_allowed_labels_config,
    generate_max_with_required_fields_config,
    generate_max_with_target_config,
)
from models import SafeOutputsConfig
from tools_registry import register_tool


@register_tool("create_issue")
def handle_create_issue(safe_outputs: SafeOutputsConfig):
    policy = safe_outputs.create_issue
    if policy is None:
        return None, False
    config = generate_max_with_allowed_labels_config(policy.max, 1, policy.allowed_labels)
    if policy.group:
        config["group"] = True
    # 0 means unset or explicitly disabled
    if policy.expires > 0:
        config["expires"] = policy.expires
    return config, True


@register_tool("create_agent_session")
def handle_create_agent_session(safe_outputs: SafeOutputsConfig):
    policy = safe_outputs.create_agent_session
    if policy is None:
        return None, False
    return generate_max_config(policy.max, 1), True


@register_tool("add_comment")
def handle_add_comment(safe_outputs: SafeOutputsConfig):
    policy = safe_outputs.add_comment
    if policy is None:
        return None, False
    return generate_max_with_target_config(policy.max, 1, policy.target), True


@register_tool("close_issue")
def handle_close_issue(safe_outputs: SafeOutputsConfig):
    policy = safe_outputs.close_issue
    if policy is None:
        return None, False
    return generate_max_with_required_fields_config(
        policy.max, 1, policy.required_labels, policy.required_title_prefix
    ), True


@register_tool("update_issue")
def handle_update_issue(safe_outputs: SafeOutputsConfig):
    policy = safe_outputs.update_issue
    if policy is None:
        return None, False
    return generate_max_config(policy.max, 1), True


@register_tool("add_labels")
def handle_add_labels(safe_outputs: SafeOutputsConfig):
    policy = safe_outputs.add_labels
    if policy is None:
        return None, False
    return generate_max_with_allowed_config(policy.max, 3, policy.allowed), True


@register_tool("remove_labels")
def handle_remove_labels(safe_outputs: SafeOutputsConfig):
    policy = safe_outputs.remove_labels
    if policy is None:
        return None, False
    return generate_max_with_allowed_config(policy.max, 3, policy.allowed), True


@register_tool("assign_milestone")
def handle_assign_milestone(safe_outputs: SafeOutputsConfig):
    policy = safe_outputs.assign_milestone
    if policy is None:
        return None, False
    return generate_max_with_allowed_config(policy.max, 1, policy.allowed), True


@register_tool("assign_to_agent")
def handle_assign_to_agent(safe_outputs: SafeOutputsConfig):
    policy = safe_outputs.assign_to_agent
    if policy is None:
        return None, False
    return generate_assign_to_agent_config(
        policy.max, policy.default_agent, policy.target, policy.allowed
    ), True


@register_tool("assign_to_user")
def handle_assign_to_user(safe_outputs: SafeOutputsConfig):
    policy = safe_outputs.assign_to_user
    if policy is None:
        return None, False
    return generate_max_with_allowed_config(policy.max, 1, policy.allowed), True


@register_tool("link_sub_issue")
def handle_link_sub_issue(safe_outputs: SafeOutputsConfig):
    policy = safe_outputs.link_sub_issue
    if policy is None:
        return None, False
    return generate_max_config(policy.max, 5), True


@register_tool("hide_comment")
def handle_hide_comment(safe_outputs: SafeOutputsConfig):
    policy = safe_outputs.hide_comment
    if policy is None:
        return None, False
    return generate_hide_comment_config(policy.max, 5, policy.allowed_reasons), True
