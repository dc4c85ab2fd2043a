"""
errors/ - Component resolution errors

Constructor errors (incompatible rule settings) are not wrapped: the TypeError
raised by the rule class propagates to the caller unchanged.
"""

from .taxonomy import (
    ComponentError,
    UnresolvedRuleType,
    UnresolvedReportType,
)

__all__ = [
    "ComponentError",
    "UnresolvedRuleType",
    "UnresolvedReportType",
]
