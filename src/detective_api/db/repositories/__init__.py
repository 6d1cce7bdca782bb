"""
detective_api.db.repositories

Repository package.

Responsibilities:
- Group data-access code that does not fit the generic gateway.
"""

# Package marker; repositories are imported directly from submodules.
