"""
Schema definitions for ISSUE and COMMENT safe outputs

These tools create or modify issues, labels, assignments and comments.
"""

from schemas import ToolSchema


ISSUE_OR_PR_NUMBER = {
    "type": ["number", "string"],
    "description": "Issue or pull request number. If omitted, uses the triggering issue or pull request."
}


# ============================================================================
# ISSUES
# ============================================================================

CREATE_ISSUE_SCHEMA = ToolSchema(
    name="create_issue",
    description="Create a new GitHub issue for tracking bugs, feature requests, or tasks. Use this for actionable work items that need assignment, labeling, and status tracking.",
    input_schema={
        "type": "object",
        "properties": {
            "title": {
                "type": "string",
                "description": "Concise issue title summarizing the bug, feature, or task."
            },
            "body": {
                "type": "string",
                "description": "Detailed issue description in Markdown."
            },
            "labels": {
                "type": "array",
                "items": {"type": "string"},
                "description": "Labels to categorize the issue (e.g., 'bug', 'enhancement')."
            },
            "parent": {
                "type": ["number", "string"],
                "description": "Parent issue number for creating sub-issues."
            },
            "temporary_id": {
                "type": "string",
                "description": "Temporary identifier for referencing this issue before it is created."
            }
        },
        "required": ["body", "title"],
        "additionalProperties": False
    }
)

CLOSE_ISSUE_SCHEMA = ToolSchema(
    name="close_issue",
    description="Close a GitHub issue with a closing comment.",
    input_schema={
        "type": "object",
        "properties": {
            "body": {
                "type": "string",
                "description": "Closing comment explaining why the issue is being closed."
            },
            "issue_number": {
                "type": ["number", "string"],
                "description": "Issue number to close. If omitted, closes the triggering issue."
            }
        },
        "required": ["body"],
        "additionalProperties": False
    }
)

UPDATE_ISSUE_SCHEMA = ToolSchema(
    name="update_issue",
    description="Update an existing GitHub issue's status, title, or body.",
    input_schema={
        "type": "object",
        "properties": {
            "status": {
                "type": "string",
                "enum": ["open", "closed"],
                "description": "New issue status."
            },
            "title": {
                "type": "string",
                "description": "New issue title."
            },
            "body": {
                "type": "string",
                "description": "New issue body in Markdown."
            },
            "issue_number": {
                "type": ["number", "string"],
                "description": "Issue number to update. If omitted, updates the triggering issue."
            }
        },
        "additionalProperties": False
    }
)

LINK_SUB_ISSUE_SCHEMA = ToolSchema(
    name="link_sub_issue",
    description="Link an issue as a sub-issue of a parent issue.",
    input_schema={
        "type": "object",
        "properties": {
            "parent_issue_number": {
                "type": ["number", "string"],
                "description": "Parent issue number."
            },
            "sub_issue_number": {
                "type": ["number", "string"],
                "description": "Issue number to link as a sub-issue."
            }
        },
        "required": ["parent_issue_number", "sub_issue_number"],
        "additionalProperties": False
    }
)

CREATE_AGENT_SESSION_SCHEMA = ToolSchema(
    name="create_agent_session",
    description="Create a coding agent session to delegate a task to an asynchronous coding agent.",
    input_schema={
        "type": "object",
        "properties": {
            "body": {
                "type": "string",
                "description": "Task description for the coding agent in Markdown."
            }
        },
        "required": ["body"],
        "additionalProperties": False
    }
)

# ============================================================================
# COMMENTS
# ============================================================================

ADD_COMMENT_SCHEMA = ToolSchema(
    name="add_comment",
    description="Add a comment to an existing GitHub issue, pull request, or discussion.",
    input_schema={
        "type": "object",
        "properties": {
            "body": {
                "type": "string",
                "description": "Comment content in Markdown."
            },
            "item_number": {
                "type": "number",
                "description": "Issue, pull request or discussion number. If omitted, comments on the triggering item."
            }
        },
        "required": ["body"],
        "additionalProperties": False
    }
)

HIDE_COMMENT_SCHEMA = ToolSchema(
    name="hide_comment",
    description="Hide (minimize) a comment on an issue, pull request or discussion.",
    input_schema={
        "type": "object",
        "properties": {
            "comment_id": {
                "type": "string",
                "description": "GraphQL node ID of the comment to hide."
            },
            "reason": {
                "type": "string",
                "enum": ["SPAM", "ABUSE", "OFF_TOPIC", "OUTDATED", "RESOLVED"],
                "description": "Reason for hiding the comment."
            }
        },
        "required": ["comment_id"],
        "additionalProperties": False
    }
)

# ============================================================================
# LABELS & ASSIGNMENTS
# ============================================================================

ADD_LABELS_SCHEMA = ToolSchema(
    name="add_labels",
    description="Add labels to a GitHub issue or pull request.",
    input_schema={
        "type": "object",
        "properties": {
            "labels": {
                "type": "array",
                "items": {"type": "string"},
                "description": "Label names to add."
            },
            "item_number": ISSUE_OR_PR_NUMBER
        },
        "required": ["labels"],
        "additionalProperties": False
    }
)

REMOVE_LABELS_SCHEMA = ToolSchema(
    name="remove_labels",
    description="Remove labels from a GitHub issue or pull request.",
    input_schema={
        "type": "object",
        "properties": {
            "labels": {
                "type": "array",
                "items": {"type": "string"},
                "description": "Label names to remove."
            },
            "item_number": ISSUE_OR_PR_NUMBER
        },
        "required": ["labels"],
        "additionalProperties": False
    }
)

ASSIGN_MILESTONE_SCHEMA = ToolSchema(
    name="assign_milestone",
    description="Assign a GitHub issue to a milestone.",
    input_schema={
        "type": "object",
        "properties": {
            "issue_number": {
                "type": ["number", "string"],
                "description": "Issue number to assign."
            },
            "milestone_number": {
                "type": ["number", "string"],
                "description": "Milestone number to assign the issue to."
            }
        },
        "required": ["issue_number", "milestone_number"],
        "additionalProperties": False
    }
)

ASSIGN_TO_AGENT_SCHEMA = ToolSchema(
    name="assign_to_agent",
    description="Assign a coding agent to a GitHub issue.",
    input_schema={
        "type": "object",
        "properties": {
            "issue_number": {
                "type": ["number", "string"],
                "description": "Issue number to assign the agent to."
            },
            "agent": {
                "type": "string",
                "description": "Agent name to assign."
            }
        },
        "required": ["issue_number"],
        "additionalProperties": False
    }
)

ASSIGN_TO_USER_SCHEMA = ToolSchema(
    name="assign_to_user",
    description="Assign a user to a GitHub issue.",
    input_schema={
        "type": "object",
        "properties": {
            "issue_number": {
                "type": ["number", "string"],
                "description": "Issue number to assign."
            },
            "assignee": {
                "type": "string",
                "description": "GitHub username to assign."
            }
        },
        "required": ["assignee"],
        "additionalProperties": False
    }
)

# ============================================================================
# REGISTRY
# ============================================================================

ISSUE_TOOL_SCHEMAS = {
    "create_issue": CREATE_ISSUE_SCHEMA,
    "create_agent_session": CREATE_AGENT_SESSION_SCHEMA,
    "add_comment": ADD_COMMENT_SCHEMA,
    "close_issue": CLOSE_ISSUE_SCHEMA,
    "update_issue": UPDATE_ISSUE_SCHEMA,
    "add_labels": ADD_LABELS_SCHEMA,
    "remove_labels": REMOVE_LABELS_SCHEMA,
    "assign_milestone": ASSIGN_MILESTONE_SCHEMA,
    "assign_to_agent": ASSIGN_TO_AGENT_SCHEMA,
    "assign_to_user": ASSIGN_TO_USER_SCHEMA,
    "link_sub_issue": LINK_SUB_ISSUE_SCHEMA,
    "hide_comment": HIDE_COMMENT_SCHEMA,
}
