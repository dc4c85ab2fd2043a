"""
registry/ - Ordered name to type resolution for rules and reports.
"""

from .providers import (
    Provider,
    ProviderChain,
)

__all__ = [
    "Provider",
    "ProviderChain",
]
