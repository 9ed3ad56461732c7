"""
Safe output handlers - Registration Hub

Importing this package triggers the @register_tool decorators of every
domain module, filling the tool registry.

Domain modules:
- issues: issues, comments, labels, assignments (12 kinds)
- pull_requests: pull requests and reviews (7 kinds)
- repository: discussions, code scanning, assets, releases, projects,
  reporting (13 kinds + 2 shadow kinds)
"""

import handlers.issues  # noqa: F401
import handlers.pull_requests  # noqa: F401
import handlers.repository  # noqa: F401
