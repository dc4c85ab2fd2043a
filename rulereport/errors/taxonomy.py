"""
errors/taxonomy.py - Component resolution errors

Raised when a rule or report type cannot be resolved by name. Rendering never
raises; these only surface from rule construction and report type lookup.
"""

from __future__ import annotations
from typing import Optional


class ComponentError(Exception):
    """Raised when a named component cannot be resolved."""

    def __init__(self, message: str, name: Optional[str] = None):
        self.name = name
        super().__init__(message)


class UnresolvedRuleType(ComponentError):
    """Raised when a rule name does not resolve to a rule class."""

    def __init__(self, name: str, type_name: Optional[str] = None):
        self.type_name = type_name
        if type_name is None:
            message = f'"{name}" is not a valid rule name'
        else:
            message = f'"{type_name}" is not a valid rule'
        super().__init__(message, name)


class UnresolvedReportType(ComponentError):
    """Raised when a provider's report type is not a ReportNode."""

    def __init__(self, name: str, type_name: str):
        self.type_name = type_name
        super().__init__(f'"{type_name}" is not a report node', name)
