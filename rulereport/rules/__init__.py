"""
rules/ - Rule contract consumed by the outcome tree.
"""

from .base import Rule

__all__ = [
    "Rule",
]
