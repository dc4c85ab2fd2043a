"""
reporting/report_node.py - Rendered failure reports

A ReportNode wraps one failing OutcomeNode and renders its message once, at
construction. Failing descendants are flattened lazily on first access and
cached for the lifetime of the report.

ReportNode is an exception, so a report can be raised as-is by callers that
want validation failures to propagate.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, Tuple, TYPE_CHECKING
import os

from ..core.enums import Mode, TemplateKey
from .renderer import TemplateRenderer

if TYPE_CHECKING:
    from ..core.outcome import OutcomeNode


@dataclass(frozen=True)
class DepthInfo:
    """Depth metadata attached to each flattened descendant report."""

    display_depth: int
    raw_depth: int
    previous_display_depth: int
    previous_raw_depth: int

    def to_dict(self) -> Dict[str, int]:
        return {
            "display_depth": self.display_depth,
            "raw_depth": self.raw_depth,
            "previous_display_depth": self.previous_display_depth,
            "previous_raw_depth": self.previous_raw_depth,
        }


class ReportNode(ValueError):
    """
    Human-readable report for one failing outcome.

    Subclasses customise wording by overriding template_catalog(). The
    factory picks the subclass named "<RuleClass>Report" when a provider
    registers one.
    """

    MARKER = "-"
    INDENT = 2

    def __init__(self, outcome: "OutcomeNode"):
        self.outcome = outcome
        self.message: str = TemplateRenderer(self.template_catalog()).render(
            outcome.properties
        )
        self._descendants: Optional[List[Tuple[ReportNode, DepthInfo]]] = None
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"

    def template_catalog(self) -> Dict[Any, Dict[Any, str]]:
        """
        Templates by mode, then by template key.

        Override in subclasses for rule-specific wording. When the outcome's
        mode/key combination is missing, the first template listed is used.
        """
        return {
            Mode.AFFIRMATIVE: {
                TemplateKey.STANDARD: "{{placeholder}} must be valid",
            },
            Mode.NEGATIVE: {
                TemplateKey.STANDARD: "{{placeholder}} must not be valid",
            },
        }

    @property
    def mode(self) -> Any:
        return self.outcome.get_property("mode")

    @property
    def template_key(self) -> Any:
        return self.outcome.get_property("template_key") or TemplateKey.STANDARD

    # =========================================================================
    # DESCENDANTS
    # =========================================================================

    def descendants(self) -> List[Tuple[ReportNode, DepthInfo]]:
        """Flattened failing descendants; computed once, then cached."""
        if self._descendants is None:
            self._descendants = self.outcome.factory.flatten_failures(self.outcome)
        return list(self._descendants)

    def __iter__(self) -> Iterator[ReportNode]:
        return (report for report, _ in self.descendants())

    # =========================================================================
    # OUTPUT
    # =========================================================================

    def _line(self, message: str, display_depth: int) -> str:
        prefix = " " * (display_depth * self.INDENT)
        return f"{prefix}{self.MARKER} {message}"

    def full_report(self) -> str:
        """One indented, marked line for this report and each descendant."""
        lines = [self._line(self.message, 0)]
        for report, depth in self.descendants():
            lines.append(self._line(report.message, depth.display_depth))
        return os.linesep.join(lines)

    def flat_messages(self) -> List[str]:
        """Messages of this report and its descendants, unindented."""
        return [self.message] + [report.message for report, _ in self.descendants()]
