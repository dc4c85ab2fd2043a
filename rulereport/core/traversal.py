"""
core/traversal.py - Outcome tree traversal

Iterative walks over an outcome tree. Rule compositions can nest arbitrarily
deep, so nothing here recurses.
"""

from __future__ import annotations
from typing import Iterator, List, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .outcome import OutcomeNode


def iter_children(node: "OutcomeNode") -> Iterator["OutcomeNode"]:
    """Children of node in insertion order."""
    return node.iter_children()


def walk_preorder(root: "OutcomeNode") -> Iterator[Tuple["OutcomeNode", int]]:
    """
    Yield (node, raw_depth) for every descendant of root in pre-order.

    The root itself is not yielded. Its children have raw depth 1, their
    children raw depth 2, and so on. A node is yielded before its children
    and siblings keep their insertion order.
    """
    # Children are pushed reversed so the leftmost child is popped first
    stack: List[Tuple["OutcomeNode", int]] = [
        (child, 1) for child in reversed(list(iter_children(root)))
    ]
    while stack:
        node, depth = stack.pop()
        yield node, depth
        stack.extend(
            (child, depth + 1) for child in reversed(list(iter_children(node)))
        )


def first_leaf(root: "OutcomeNode") -> "OutcomeNode":
    """Follow the first child until a node without children is reached."""
    node = root
    while node.has_children():
        node = next(iter_children(node))
    return node


def first_failure(root: "OutcomeNode") -> "OutcomeNode":
    """
    Follow the first failing child until a node has no failing children.

    Passing siblings are skipped, so the returned node is root itself or an
    invalid descendant of it.
    """
    node = root
    while True:
        failing = next(
            (child for child in iter_children(node) if not child.is_valid()), None
        )
        if failing is None:
            return node
        node = failing
