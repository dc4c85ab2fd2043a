"""
rulereport core

Outcome tree foundation:
- Mode / TemplateKey enumerations
- OutcomeNode and the presence check used for optional inputs
- Iterative traversal helpers
"""

from rulereport.core.enums import Mode, TemplateKey
from rulereport.core.presence import is_not_optional
from rulereport.core.outcome import OutcomeNode, BASE_PROPERTIES
from rulereport.core.traversal import iter_children, walk_preorder, first_leaf, first_failure

__all__ = [
    "Mode",
    "TemplateKey",
    "is_not_optional",
    "OutcomeNode",
    "BASE_PROPERTIES",
    "iter_children",
    "walk_preorder",
    "first_leaf",
    "first_failure",
]
