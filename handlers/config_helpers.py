"""
Runtime config fragments shared by the safe output handlers.

Key names are a contract with the enforcement layer and must not change.
Optional keys are emitted only when set.
"""

from typing import Any, Dict, List


def generate_max_config(max_value: int, default_max: int) -> Dict[str, Any]:
    """``{"max": N}`` where N falls back to the kind's default when unset"""
    return {"max": max_value if max_value > 0 else default_max}


def generate_max_with_allowed_labels_config(
    max_value: int, default_max: int, allowed_labels: List[str]
) -> Dict[str, Any]:
    config = generate_max_config(max_value, default_max)
    if allowed_labels:
        config["allowed_labels"] = list(allowed_labels)
    return config


def generate_max_with_target_config(max_value: int, default_max: int, target: str) -> Dict[str, Any]:
    config = generate_max_config(max_value, default_max)
    if target:
        config["target"] = target
    return config


def generate_max_with_allowed_config(
    max_value: int, default_max: int, allowed: List[str]
) -> Dict[str, Any]:
    config = generate_max_config(max_value, default_max)
    if allowed:
        config["allowed"] = list(allowed)
    return config


def generate_max_with_reviewers_config(
    max_value: int, default_max: int, reviewers: List[str]
) -> Dict[str, Any]:
    config = generate_max_config(max_value, default_max)
    if reviewers:
        config["reviewers"] = list(reviewers)
    return config


def generate_max_with_required_fields_config(
    max_value: int,
    default_max: int,
    required_labels: List[str],
    required_title_prefix: str,
) -> Dict[str, Any]:
    config = generate_max_config(max_value, default_max)
    if required_labels:
        config["required_labels"] = list(required_labels)
    if required_title_prefix:
        config["required_title_prefix"] = required_title_prefix
    return config


def generate_max_with_discussion_fields_config(
    max_value: int,
    default_max: int,
    required_category: str,
    required_labels: List[str],
    required_title_prefix: str,
) -> Dict[str, Any]:
    config = generate_max_with_required_fields_config(
        max_value, default_max, required_labels, required_title_prefix
    )
    if required_category:
        config["required_category"] = required_category
    return config


def generate_pull_request_config(
    allowed_labels: List[str], allow_empty: bool, auto_merge: bool, expires: int
) -> Dict[str, Any]:
    """A pull request run creates at most one PR, so no max is emitted"""
    config: Dict[str, Any] = {}
    if allowed_labels:
        config["allowed_labels"] = list(allowed_labels)
    if allow_empty:
        config["allow_empty"] = True
    if auto_merge:
        config["auto_merge"] = True
    if expires > 0:
        config["expires"] = expires
    return config


def generate_assign_to_agent_config(
    max_value: int, default_agent: str, target: str, allowed: List[str]
) -> Dict[str, Any]:
    config = generate_max_with_target_config(max_value, 1, target)
    if allowed:
        config["allowed"] = list(allowed)
    if default_agent:
        config["default_agent"] = default_agent
    return config


def generate_hide_comment_config(
    max_value: int, default_max: int, allowed_reasons: List[str]
) -> Dict[str, Any]:
    config = generate_max_config(max_value, default_max)
    if allowed_reasons:
        config["allowed_reasons"] = list(allowed_reasons)
    return config


def generate_missing_report_issue_config(title_prefix: str, labels: List[str]) -> Dict[str, Any]:
    # One issue per workflow run
    config: Dict[str, Any] = {"max": 1}
    if title_prefix:
        config["title_prefix"] = title_prefix
    if labels:
        config["labels"] = list(labels)
    return config
