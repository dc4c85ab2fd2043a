"""
core/presence.py - Presence check for rule inputs

An input is "optional" (absent) when it is None or an empty string. Rules that
are not marked as required are skipped for absent inputs.
"""

from typing import Any


def is_not_optional(value: Any) -> bool:
    """True when the value counts as a present input."""
    if value is None:
        return False
    if isinstance(value, str) and value == "":
        return False
    return True
