"""
Tool registry for safe output kinds

Each output kind has exactly one handler. A handler inspects the
aggregate and returns ``(config, include)``; when ``include`` is false the
kind is disabled and ``config`` is ignored. Handlers are pure: no I/O, no
global state. Adding a kind means registering one more handler, the
builders iterate the registry and need no change.
"""

from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Dict, Optional, Tuple
from dataclasses import dataclass

import structlog

from models import SafeOutputsConfig

logger = structlog.get_logger()

HandlerResult = Tuple[Optional[Dict[str, Any]], bool]


class ToolCategory(str, Enum):
    """How a registered kind reaches the tool catalog"""
    STANDARD = "standard"
    # Activated by a flag nested in another policy; runtime config only
    SHADOW = "shadow"


@dataclass(frozen=True)
class ToolHandler:
    """Metadata for a registered output kind"""
    name: str
    category: ToolCategory
    handler: Callable[[SafeOutputsConfig], HandlerResult]

    def evaluate(self, safe_outputs: SafeOutputsConfig) -> HandlerResult:
        """Run the handler and enforce its contract"""
        config, include = self.handler(safe_outputs)
        if not include:
            return None, False
        if not isinstance(config, dict):
            raise TypeError(
                f"Handler for {self.name} signalled inclusion without a config mapping"
            )
        return config, True


# Populated at import time by @register_tool, read-only afterwards
_HANDLERS: Dict[str, ToolHandler] = {}

TOOL_REGISTRY = MappingProxyType(_HANDLERS)


def register_tool(name: str, category: ToolCategory = ToolCategory.STANDARD):
    """
    Decorator to register a safe output handler

    Usage:
        @register_tool("add_labels")
        def handle_add_labels(safe_outputs: SafeOutputsConfig):
            if safe_outputs.add_labels is None:
                return None, False
            return generate_max_config(safe_outputs.add_labels.max, 3), True

    Args:
        name: Output kind identifier (snake_case tool name)
        category: STANDARD or SHADOW

    Returns:
        Decorator function that registers the handler
    """
    def decorator(handler_func):
        if name in _HANDLERS:
            logger.warning("tool_already_registered", tool_name=name)
            return handler_func

        _HANDLERS[name] = ToolHandler(
            name=name,
            category=category,
            handler=handler_func
        )

        logger.debug(
            "tool_registered",
            tool_name=name,
            category=category.value
        )

        return handler_func

    return decorator


def evaluate_registry(safe_outputs: SafeOutputsConfig) -> Dict[str, Dict[str, Any]]:
    """
    Run every registered handler against the aggregate

    Returns:
        Mapping of enabled kind -> runtime config, in sorted kind order
    """
    enabled = {}
    for name in sorted(TOOL_REGISTRY):
        config, include = TOOL_REGISTRY[name].evaluate(safe_outputs)
        if include:
            logger.debug("tool_config_added", tool_name=name)
            enabled[name] = config
    return enabled


def build_enabled_tools_set(safe_outputs: Optional[SafeOutputsConfig]) -> frozenset:
    """
    Names of the kinds exposed directly in the tool catalog

    Shadow kinds are excluded: they only ever reach the runtime config.
    """
    if safe_outputs is None:
        return frozenset()

    return frozenset(
        name
        for name in evaluate_registry(safe_outputs)
        if TOOL_REGISTRY[name].category is ToolCategory.STANDARD
    )


def get_tool_info(tool_name: str) -> Optional[Dict[str, str]]:
    """
    Get metadata for a registered kind

    Args:
        tool_name: Name of the kind

    Returns:
        Kind metadata or None if not registered
    """
    tool = TOOL_REGISTRY.get(tool_name)

    if not tool:
        return None

    return {
        "name": tool.name,
        "category": tool.category.value,
    }
