"""
Schema definitions for PULL REQUEST safe outputs
"""

from schemas import ToolSchema


PULL_REQUEST_NUMBER = {
    "type": ["number", "string"],
    "description": "Pull request number. If omitted, uses the triggering pull request."
}


CREATE_PULL_REQUEST_SCHEMA = ToolSchema(
    name="create_pull_request",
    description="Create a new GitHub pull request to propose code changes. Use this after making file edits to submit them for review and merging. The changes in the workspace are committed to a new branch.",
    input_schema={
        "type": "object",
        "properties": {
            "title": {
                "type": "string",
                "description": "Concise pull request title describing the changes."
            },
            "body": {
                "type": "string",
                "description": "Detailed pull request description in Markdown."
            },
            "branch": {
                "type": "string",
                "description": "Source branch name containing the changes. If omitted, uses the current working branch."
            },
            "labels": {
                "type": "array",
                "items": {"type": "string"},
                "description": "Labels to categorize the pull request."
            }
        },
        "required": ["body", "title"],
        "additionalProperties": False
    }
)

CREATE_PULL_REQUEST_REVIEW_COMMENT_SCHEMA = ToolSchema(
    name="create_pull_request_review_comment",
    description="Create a review comment on a specific line of code in a pull request.",
    input_schema={
        "type": "object",
        "properties": {
            "path": {
                "type": "string",
                "description": "File path relative to the repository root."
            },
            "line": {
                "type": ["number", "string"],
                "description": "Line number for the comment."
            },
            "body": {
                "type": "string",
                "description": "Review comment content in Markdown."
            },
            "start_line": {
                "type": ["number", "string"],
                "description": "Start line for multi-line comments."
            },
            "side": {
                "type": "string",
                "enum": ["LEFT", "RIGHT"],
                "description": "Side of the diff to comment on."
            }
        },
        "required": ["body", "line", "path"],
        "additionalProperties": False
    }
)

CLOSE_PULL_REQUEST_SCHEMA = ToolSchema(
    name="close_pull_request",
    description="Close a pull request without merging it, with a closing comment.",
    input_schema={
        "type": "object",
        "properties": {
            "body": {
                "type": "string",
                "description": "Closing comment explaining why the pull request is being closed."
            },
            "pull_request_number": PULL_REQUEST_NUMBER
        },
        "required": ["body"],
        "additionalProperties": False
    }
)

UPDATE_PULL_REQUEST_SCHEMA = ToolSchema(
    name="update_pull_request",
    description="Update the title or body of an existing pull request.",
    input_schema={
        "type": "object",
        "properties": {
            "title": {
                "type": "string",
                "description": "New pull request title."
            },
            "body": {
                "type": "string",
                "description": "New pull request body in Markdown."
            },
            "operation": {
                "type": "string",
                "enum": ["replace", "append", "prepend"],
                "description": "How to apply the new body (default: append)."
            },
            "pull_request_number": PULL_REQUEST_NUMBER
        },
        "additionalProperties": False
    }
)

MARK_PULL_REQUEST_AS_READY_FOR_REVIEW_SCHEMA = ToolSchema(
    name="mark_pull_request_as_ready_for_review",
    description="Mark a draft pull request as ready for review.",
    input_schema={
        "type": "object",
        "properties": {
            "reason": {
                "type": "string",
                "description": "Comment explaining why the pull request is ready."
            },
            "pull_request_number": PULL_REQUEST_NUMBER
        },
        "required": ["reason"],
        "additionalProperties": False
    }
)

PUSH_TO_PULL_REQUEST_BRANCH_SCHEMA = ToolSchema(
    name="push_to_pull_request_branch",
    description="Push committed changes from the workspace to the branch of an existing pull request.",
    input_schema={
        "type": "object",
        "properties": {
            "branch": {
                "type": "string",
                "description": "Branch to push to. If omitted, uses the pull request head branch."
            },
            "message": {
                "type": "string",
                "description": "Commit message."
            },
            "pull_request_number": PULL_REQUEST_NUMBER
        },
        "required": ["message"],
        "additionalProperties": False
    }
)

ADD_REVIEWER_SCHEMA = ToolSchema(
    name="add_reviewer",
    description="Request reviews on a pull request from GitHub users.",
    input_schema={
        "type": "object",
        "properties": {
            "reviewers": {
                "type": "array",
                "items": {"type": "string"},
                "description": "GitHub usernames to request reviews from."
            },
            "pull_request_number": PULL_REQUEST_NUMBER
        },
        "required": ["reviewers"],
        "additionalProperties": False
    }
)

# ============================================================================
# REGISTRY
# ============================================================================

PULL_REQUEST_TOOL_SCHEMAS = {
    "create_pull_request": CREATE_PULL_REQUEST_SCHEMA,
    "create_pull_request_review_comment": CREATE_PULL_REQUEST_REVIEW_COMMENT_SCHEMA,
    "close_pull_request": CLOSE_PULL_REQUEST_SCHEMA,
    "update_pull_request": UPDATE_PULL_REQUEST_SCHEMA,
    "mark_pull_request_as_ready_for_review": MARK_PULL_REQUEST_AS_READY_FOR_REVIEW_SCHEMA,
    "push_to_pull_request_branch": PUSH_TO_PULL_REQUEST_BRANCH_SCHEMA,
    "add_reviewer": ADD_REVIEWER_SCHEMA,
}
