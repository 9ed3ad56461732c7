"""
Tool descriptors for the safe outputs tool catalog
"""

import copy
from typing import Any, Dict, Optional


class ToolSchema:
    """
    Descriptor of one tool exposed to the agent (MCP format).

    ``workflow_name`` is internal routing metadata for dispatch tools: the
    exposed name is normalized, the original workflow identifier is kept
    so the dispatcher can route the call.
    """

    def __init__(
        self,
        name: str,
        description: str,
        input_schema: Dict[str, Any],
        workflow_name: Optional[str] = None
    ):
        self.name = name
        self.description = description
        self.input_schema = input_schema
        self.workflow_name = workflow_name

    def to_dict(self) -> Dict[str, Any]:
        """Convert to MCP tool format (deep copy, safe to mutate)"""
        tool = {
            "name": self.name,
            "description": self.description,
            "inputSchema": copy.deepcopy(self.input_schema)
        }
        if self.workflow_name is not None:
            tool["_workflow_name"] = self.workflow_name
        return tool


def object_schema(properties: Dict[str, Any], required=None) -> Dict[str, Any]:
    """Build a strict object inputSchema"""
    schema = {
        "type": "object",
        "properties": properties,
    }
    if required:
        schema["required"] = sorted(required)
    schema["additionalProperties"] = False
    return schema
