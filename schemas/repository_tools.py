"""
Schema definitions for DISCUSSION, SECURITY, RELEASE, PROJECT and REPORTING safe outputs
"""

from schemas import ToolSchema


# ============================================================================
# DISCUSSIONS
# ============================================================================

CREATE_DISCUSSION_SCHEMA = ToolSchema(
    name="create_discussion",
    description="Create a GitHub discussion for announcements, questions, reports, or conversations that are not actionable work items.",
    input_schema={
        "type": "object",
        "properties": {
            "title": {
                "type": "string",
                "description": "Discussion title."
            },
            "body": {
                "type": "string",
                "description": "Discussion content in Markdown."
            },
            "category": {
                "type": "string",
                "description": "Discussion category name or slug. If omitted, uses the configured category."
            }
        },
        "required": ["body", "title"],
        "additionalProperties": False
    }
)

CLOSE_DISCUSSION_SCHEMA = ToolSchema(
    name="close_discussion",
    description="Close a GitHub discussion with a closing comment and optional resolution reason.",
    input_schema={
        "type": "object",
        "properties": {
            "body": {
                "type": "string",
                "description": "Closing comment in Markdown."
            },
            "reason": {
                "type": "string",
                "enum": ["RESOLVED", "DUPLICATE", "OUTDATED", "ANSWERED"],
                "description": "Resolution reason."
            },
            "discussion_number": {
                "type": ["number", "string"],
                "description": "Discussion number. If omitted, closes the triggering discussion."
            }
        },
        "required": ["body"],
        "additionalProperties": False
    }
)

UPDATE_DISCUSSION_SCHEMA = ToolSchema(
    name="update_discussion",
    description="Update the title, body or labels of an existing GitHub discussion.",
    input_schema={
        "type": "object",
        "properties": {
            "title": {
                "type": "string",
                "description": "New discussion title."
            },
            "body": {
                "type": "string",
                "description": "New discussion body in Markdown."
            },
            "labels": {
                "type": "array",
                "items": {"type": "string"},
                "description": "Labels to set on the discussion."
            },
            "discussion_number": {
                "type": ["number", "string"],
                "description": "Discussion number. If omitted, updates the triggering discussion."
            }
        },
        "additionalProperties": False
    }
)

# ============================================================================
# CODE SCANNING
# ============================================================================

CREATE_CODE_SCANNING_ALERT_SCHEMA = ToolSchema(
    name="create_code_scanning_alert",
    description="Report a security finding as a code scanning alert (SARIF).",
    input_schema={
        "type": "object",
        "properties": {
            "file": {
                "type": "string",
                "description": "File path where the issue was found."
            },
            "line": {
                "type": ["number", "string"],
                "description": "Line number of the finding."
            },
            "severity": {
                "type": "string",
                "enum": ["error", "warning", "info", "note"],
                "description": "Severity of the finding."
            },
            "message": {
                "type": "string",
                "description": "Description of the finding."
            },
            "column": {
                "type": ["number", "string"],
                "description": "Column number of the finding."
            },
            "ruleIdSuffix": {
                "type": "string",
                "description": "Suffix appended to the generated rule identifier."
            }
        },
        "required": ["file", "line", "message", "severity"],
        "additionalProperties": False
    }
)

AUTOFIX_CODE_SCANNING_ALERT_SCHEMA = ToolSchema(
    name="autofix_code_scanning_alert",
    description="Propose an autofix for an existing code scanning alert.",
    input_schema={
        "type": "object",
        "properties": {
            "alert_number": {
                "type": ["number", "string"],
                "description": "Code scanning alert number."
            },
            "fix_description": {
                "type": "string",
                "description": "Description of the fix."
            },
            "fix_code": {
                "type": "string",
                "description": "Code change implementing the fix."
            }
        },
        "required": ["alert_number", "fix_code", "fix_description"],
        "additionalProperties": False
    }
)

# ============================================================================
# ASSETS & RELEASES
# ============================================================================

UPLOAD_ASSET_SCHEMA = ToolSchema(
    name="upload_asset",
    description="Upload a file from the workspace as a published asset and return its URL.",
    input_schema={
        "type": "object",
        "properties": {
            "path": {
                "type": "string",
                "description": "Path of the file to upload."
            }
        },
        "required": ["path"],
        "additionalProperties": False
    }
)

UPDATE_RELEASE_SCHEMA = ToolSchema(
    name="update_release",
    description="Update the description of a GitHub release.",
    input_schema={
        "type": "object",
        "properties": {
            "tag": {
                "type": "string",
                "description": "Release tag. If omitted, uses the triggering release."
            },
            "operation": {
                "type": "string",
                "enum": ["replace", "append", "prepend"],
                "description": "How to apply the new body."
            },
            "body": {
                "type": "string",
                "description": "Release notes content in Markdown."
            }
        },
        "required": ["body", "operation"],
        "additionalProperties": False
    }
)

# ============================================================================
# PROJECTS
# ============================================================================

UPDATE_PROJECT_SCHEMA = ToolSchema(
    name="update_project",
    description="Add an issue or pull request to a GitHub Project and update its fields.",
    input_schema={
        "type": "object",
        "properties": {
            "project": {
                "type": "string",
                "description": "Project URL."
            },
            "content_type": {
                "type": "string",
                "enum": ["issue", "pull_request", "draft_issue"],
                "description": "Type of item to add."
            },
            "content_number": {
                "type": ["number", "string"],
                "description": "Issue or pull request number."
            },
            "fields": {
                "type": "object",
                "description": "Project field values to set, keyed by field name."
            }
        },
        "required": ["project"],
        "additionalProperties": False
    }
)

CREATE_PROJECT_STATUS_UPDATE_SCHEMA = ToolSchema(
    name="create_project_status_update",
    description="Post a status update to a GitHub Project.",
    input_schema={
        "type": "object",
        "properties": {
            "project": {
                "type": "string",
                "description": "Project URL."
            },
            "status": {
                "type": "string",
                "enum": ["ON_TRACK", "AT_RISK", "OFF_TRACK", "COMPLETE", "INACTIVE"],
                "description": "Project status."
            },
            "body": {
                "type": "string",
                "description": "Status update content in Markdown."
            }
        },
        "required": ["body", "project"],
        "additionalProperties": False
    }
)

CREATE_PROJECT_SCHEMA = ToolSchema(
    name="create_project",
    description="Create a new GitHub Project.",
    input_schema={
        "type": "object",
        "properties": {
            "title": {
                "type": "string",
                "description": "Project title."
            },
            "owner": {
                "type": "string",
                "description": "Organization or user that owns the project."
            }
        },
        "required": ["title"],
        "additionalProperties": False
    }
)

# ============================================================================
# REPORTING
# ============================================================================

MISSING_TOOL_SCHEMA = ToolSchema(
    name="missing_tool",
    description="Report that a tool or capability needed to complete the task is not available.",
    input_schema={
        "type": "object",
        "properties": {
            "tool": {
                "type": "string",
                "description": "Name of the missing tool."
            },
            "reason": {
                "type": "string",
                "description": "Why the tool is needed."
            },
            "alternatives": {
                "type": "string",
                "description": "Possible alternatives or workarounds."
            }
        },
        "required": ["reason", "tool"],
        "additionalProperties": False
    }
)

MISSING_DATA_SCHEMA = ToolSchema(
    name="missing_data",
    description="Report that data needed to complete the task is not available.",
    input_schema={
        "type": "object",
        "properties": {
            "data_type": {
                "type": "string",
                "description": "Kind of data that is missing."
            },
            "reason": {
                "type": "string",
                "description": "Why the data is needed."
            },
            "context": {
                "type": "string",
                "description": "Where the data was expected."
            }
        },
        "required": ["data_type", "reason"],
        "additionalProperties": False
    }
)

NOOP_SCHEMA = ToolSchema(
    name="noop",
    description="Log a message when no other action is needed, to record that the task completed without changes.",
    input_schema={
        "type": "object",
        "properties": {
            "message": {
                "type": "string",
                "description": "Status message."
            }
        },
        "required": ["message"],
        "additionalProperties": False
    }
)

# ============================================================================
# REGISTRY
# ============================================================================

REPOSITORY_TOOL_SCHEMAS = {
    "create_discussion": CREATE_DISCUSSION_SCHEMA,
    "close_discussion": CLOSE_DISCUSSION_SCHEMA,
    "update_discussion": UPDATE_DISCUSSION_SCHEMA,
    "create_code_scanning_alert": CREATE_CODE_SCANNING_ALERT_SCHEMA,
    "autofix_code_scanning_alert": AUTOFIX_CODE_SCANNING_ALERT_SCHEMA,
    "upload_asset": UPLOAD_ASSET_SCHEMA,
    "update_release": UPDATE_RELEASE_SCHEMA,
    "update_project": UPDATE_PROJECT_SCHEMA,
    "create_project_status_update": CREATE_PROJECT_STATUS_UPDATE_SCHEMA,
    "create_project": CREATE_PROJECT_SCHEMA,
    "missing_tool": MISSING_TOOL_SCHEMA,
    "missing_data": MISSING_DATA_SCHEMA,
    "noop": NOOP_SCHEMA,
}
