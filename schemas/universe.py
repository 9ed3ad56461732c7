"""
Static universe of safe output tools

Every tool the compiler can ever expose, independent of any workflow's
configuration. The tool filter selects from this universe; callers get
deep copies and never mutate the shared descriptors.
"""

from types import MappingProxyType
from typing import Any, Dict, List

from schemas.issue_tools import ISSUE_TOOL_SCHEMAS
from schemas.pull_request_tools import PULL_REQUEST_TOOL_SCHEMAS
from schemas.repository_tools import REPOSITORY_TOOL_SCHEMAS

ALL_TOOL_SCHEMAS = MappingProxyType({
    **ISSUE_TOOL_SCHEMAS,
    **PULL_REQUEST_TOOL_SCHEMAS,
    **REPOSITORY_TOOL_SCHEMAS,
})


def get_safe_outputs_tools() -> List[Dict[str, Any]]:
    """Return fresh MCP-format copies of every tool in the universe"""
    return [schema.to_dict() for schema in ALL_TOOL_SCHEMAS.values()]
