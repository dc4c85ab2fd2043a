"""
rules/base.py - Rule contract

Concrete predicates live outside this package. A rule only needs to evaluate
itself against an OutcomeNode: read the input and inherited properties, set
"validation" (and optionally "message"), and attach sub-rule outcomes with
create_child().
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import ClassVar, TYPE_CHECKING

if TYPE_CHECKING:
    from ..core.outcome import OutcomeNode


class Rule(ABC):
    """
    Base class for validation rules.

    Set required = True on rules that must run even when the input is absent
    (None or an empty string).
    """

    required: ClassVar[bool] = False

    @abstractmethod
    def apply(self, outcome: "OutcomeNode") -> None:
        pass
