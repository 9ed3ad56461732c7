"""
Discussion, code scanning, asset, release, project and reporting handlers

The missing-tool / missing-data reports each have a shadow kind that
files an issue. The shadow kind is gated on the report's ``create_issue``
flag, not just on the report policy being present.
"""

from handlers.config_helpers import (
    generate_max_config,
    generate_max_with_allowed_labels_config,
    generate_max_with_discussion_fields_config,
    generate_missing_report_issue_config,
)
from models import SafeOutputsConfig
from tools_registry import ToolCategory, register_tool


# ============================================================================
# DISCUSSIONS
# ============================================================================

@register_tool("create_discussion")
def handle_create_discussion(safe_outputs: SafeOutputsConfig):
    policy = safe_outputs.create_discussion
    if policy is None:
        return None, False
    config = generate_max_with_allowed_labels_config(policy.max, 1, policy.allowed_labels)
    if policy.expires > 0:
        config["expires"] = policy.expires
    return config, True


@register_tool("close_discussion")
def handle_close_discussion(safe_outputs: SafeOutputsConfig):
    policy = safe_outputs.close_discussion
    if policy is None:
        return None, False
    return generate_max_with_discussion_fields_config(
        policy.max,
        1,
        policy.required_category,
        policy.required_labels,
        policy.required_title_prefix,
    ), True


@register_tool("update_discussion")
def handle_update_discussion(safe_outputs: SafeOutputsConfig):
    policy = safe_outputs.update_discussion
    if policy is None:
        return None, False
    return generate_max_with_allowed_labels_config(policy.max, 1, policy.allowed_labels), True


# ============================================================================
# CODE SCANNING, ASSETS, RELEASES
# ============================================================================

@register_tool("create_code_scanning_alert")
def handle_create_code_scanning_alert(safe_outputs: SafeOutputsConfig):
    policy = safe_outputs.create_code_scanning_alert
    if policy is None:
        return None, False
    return generate_max_config(policy.max, 0), True


@register_tool("autofix_code_scanning_alert")
def handle_autofix_code_scanning_alert(safe_outputs: SafeOutputsConfig):
    policy = safe_outputs.autofix_code_scanning_alert
    if policy is None:
        return None, False
    return generate_max_config(policy.max, 10), True


@register_tool("upload_asset")
def handle_upload_asset(safe_outputs: SafeOutputsConfig):
    policy = safe_outputs.upload_asset
    if policy is None:
        return None, False
    return generate_max_config(policy.max, 0), True


@register_tool("update_release")
def handle_update_release(safe_outputs: SafeOutputsConfig):
    policy = safe_outputs.update_release
    if policy is None:
        return None, False
    return generate_max_config(policy.max, 1), True


# ============================================================================
# PROJECTS
# ============================================================================

@register_tool("update_project")
def handle_update_project(safe_outputs: SafeOutputsConfig):
    policy = safe_outputs.update_project
    if policy is None:
        return None, False
    return generate_max_config(policy.max, 10), True


@register_tool("create_project_status_update")
def handle_create_project_status_update(safe_outputs: SafeOutputsConfig):
    policy = safe_outputs.create_project_status_update
    if policy is None:
        return None, False
    return generate_max_config(policy.max, 10), True


@register_tool("create_project")
def handle_create_project(safe_outputs: SafeOutputsConfig):
    policy = safe_outputs.create_project
    if policy is None:
        return None, False
    config = generate_max_config(policy.max, 1)
    if policy.target_owner:
        config["target_owner"] = policy.target_owner
    if policy.title_prefix:
        config["title_prefix"] = policy.title_prefix
    return config, True


# ============================================================================
# REPORTING
# ============================================================================

@register_tool("missing_tool")
def handle_missing_tool(safe_outputs: SafeOutputsConfig):
    policy = safe_outputs.missing_tool
    if policy is None:
        return None, False
    config = {}
    if policy.max > 0:
        config["max"] = policy.max
    return config, True


@register_tool("missing_data")
def handle_missing_data(safe_outputs: SafeOutputsConfig):
    policy = safe_outputs.missing_data
    if policy is None:
        return None, False
    config = {}
    if policy.max > 0:
        config["max"] = policy.max
    return config, True


@register_tool("noop")
def handle_noop(safe_outputs: SafeOutputsConfig):
    policy = safe_outputs.noop
    if policy is None:
        return None, False
    return generate_max_config(policy.max, 1), True


@register_tool("create_missing_tool_issue", category=ToolCategory.SHADOW)
def handle_create_missing_tool_issue(safe_outputs: SafeOutputsConfig):
    policy = safe_outputs.missing_tool
    if policy is None or not policy.create_issue:
        return None, False
    return generate_missing_report_issue_config(policy.title_prefix, policy.labels), True


@register_tool("create_missing_data_issue", category=ToolCategory.SHADOW)
def handle_create_missing_data_issue(safe_outputs: SafeOutputsConfig):
    policy = safe_outputs.missing_data
    if policy is None or not policy.create_issue:
        return None, False
    return generate_missing_report_issue_config(policy.title_prefix, policy.labels), True
