"""
core/enums.py - Outcome enumerations

Modes and template keys shared by outcome nodes and report nodes.
"""

from enum import Enum


class Mode(str, Enum):
    """
    Expectation a rule is evaluated under.

    Selects which template family a report renders from.
    """
    AFFIRMATIVE = "affirmative"  # Rule expected to pass
    NEGATIVE = "negative"        # Rule expected to fail (negated)


class TemplateKey(str, Enum):
    """Well-known template keys inside a mode's template family."""
    STANDARD = "standard"
