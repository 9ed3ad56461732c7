"""
Identifier helpers shared by the tool generators
"""

import re

_SEPARATORS = re.compile(r"[-\s.]+")


def normalize_safe_output_identifier(identifier: str) -> str:
    """
    Normalize a job or workflow identifier to a tool name.

    Tool names are lower snake case: ``Deploy-Staging`` -> ``deploy_staging``.
    """
    return _SEPARATORS.sub("_", identifier.strip()).lower()
