"""
core/outcome.py - Outcome tree

An OutcomeNode records how one rule evaluated one input. Composite rules attach
one child node per sub-rule through create_child(), so evaluating a rule
composition produces a tree rooted at the top-level rule's outcome.
"""

from __future__ import annotations
from typing import Any, Dict, Iterator, List, Mapping, TYPE_CHECKING
import logging

from .enums import Mode
from .presence import is_not_optional

if TYPE_CHECKING:
    from ..reporting.factory import ReportFactory
    from ..rules.base import Rule

logger = logging.getLogger(__name__)


# Properties every outcome carries, lowest priority
BASE_PROPERTIES: Dict[str, Any] = {
    "mode": Mode.AFFIRMATIVE,
    "validation": True,
    "input": None,
}


class OutcomeNode:
    """
    Result of applying a rule to an input.

    Properties are a plain ordered dict. A node owns its children exclusively;
    children are stored in insertion order and are unique by identity.
    """

    def __init__(
        self,
        rule: "Rule",
        properties: Mapping[str, Any],
        factory: "ReportFactory",
    ):
        self.rule = rule
        self.factory = factory
        self._properties: Dict[str, Any] = {**BASE_PROPERTIES, **properties}
        self._children: List[OutcomeNode] = []

    def __repr__(self) -> str:
        return (
            f"OutcomeNode(rule={type(self.rule).__name__}, "
            f"valid={self.is_valid()}, children={len(self._children)})"
        )

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def properties(self) -> Dict[str, Any]:
        """Copy of the current properties."""
        return dict(self._properties)

    @property
    def input(self) -> Any:
        return self.get_property("input")

    def get_property(self, name: str, default: Any = None) -> Any:
        """Stored value for name, or default when not set."""
        return self._properties.get(name, default)

    def set_property(self, name: str, value: Any) -> None:
        self._properties[name] = value

    def set_properties(self, properties: Mapping[str, Any]) -> None:
        for name, value in properties.items():
            self.set_property(name, value)

    def is_valid(self) -> bool:
        return bool(self.get_property("validation", True))

    # =========================================================================
    # RULE APPLICATION
    # =========================================================================

    def apply_rule(self) -> None:
        """
        Evaluate the bound rule against this node.

        Rules that are not required are skipped for absent inputs, which
        count as valid.
        """
        if not getattr(self.rule, "required", False) and not is_not_optional(self.input):
            self.set_property("validation", True)
            logger.debug(f"Skipped {type(self.rule).__name__}: input is absent")
            return

        self.rule.apply(self)

    # =========================================================================
    # CHILDREN
    # =========================================================================

    def create_child(self, rule: "Rule") -> OutcomeNode:
        """Create a child that inherits a copy of this node's properties."""
        child = self.factory.create_result(rule, self._properties)
        child.append_to(self)
        return child

    def append_to(self, parent: OutcomeNode) -> None:
        parent.append_child(self)

    def append_child(self, child: OutcomeNode) -> None:
        """Attach child; attaching the same object twice is a no-op."""
        if any(existing is child for existing in self._children):
            return
        self._children.append(child)

    @property
    def children(self) -> List[OutcomeNode]:
        return list(self._children)

    def iter_children(self) -> Iterator[OutcomeNode]:
        return iter(self._children)

    def has_children(self) -> bool:
        return len(self._children) > 0

    def child_count(self) -> int:
        return len(self._children)
