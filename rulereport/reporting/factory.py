"""
reporting/factory.py - Rule, outcome and report factory

Creates rules by name, root outcomes with default properties, and report nodes
for outcomes. Also owns the flattening pass that turns an outcome tree into an
ordered list of failing descendant reports with compressed display depths.
"""

from __future__ import annotations
from typing import Any, Dict, List, Mapping, Optional, Tuple, Type
import logging

from ..core.outcome import OutcomeNode
from ..core.traversal import first_failure, first_leaf, walk_preorder
from ..errors.taxonomy import UnresolvedReportType, UnresolvedRuleType
from ..registry.providers import Provider, ProviderChain
from ..rules.base import Rule
from .report_node import DepthInfo, ReportNode

logger = logging.getLogger(__name__)

REPORT_SUFFIX = "Report"


class ReportFactory:
    """
    Entry point for building outcomes and reports.

    Providers are searched in order when resolving names; use
    prepend_provider() to override types from providers already registered.
    """

    def __init__(
        self,
        providers: Optional[List[Provider]] = None,
        default_result_properties: Optional[Mapping[str, Any]] = None,
    ):
        self._providers = ProviderChain(providers)
        self._default_result_properties: Dict[str, Any] = dict(
            default_result_properties or {}
        )

    # =========================================================================
    # CONFIGURATION
    # =========================================================================

    @property
    def providers(self) -> List[Provider]:
        return list(self._providers)

    def append_provider(self, provider: Provider) -> None:
        self._providers.append(provider)

    def prepend_provider(self, provider: Provider) -> None:
        self._providers.prepend(provider)

    @property
    def default_result_properties(self) -> Dict[str, Any]:
        return dict(self._default_result_properties)

    def set_default_result_properties(self, properties: Mapping[str, Any]) -> None:
        """Properties applied to every new outcome, below caller properties."""
        self._default_result_properties = dict(properties)

    # =========================================================================
    # RULES AND OUTCOMES
    # =========================================================================

    def create_rule(self, rule_name: str, *args: Any, **kwargs: Any) -> Rule:
        """
        Instantiate the rule registered as rule_name.

        The first letter of rule_name is upper-cased to form the class name.
        Constructor errors (TypeError on bad settings) propagate unchanged.
        """
        class_name = rule_name[:1].upper() + rule_name[1:]
        rule_type = self._providers.find_rule(class_name)
        if rule_type is None:
            raise UnresolvedRuleType(rule_name)

        if not (isinstance(rule_type, type) and issubclass(rule_type, Rule)):
            raise UnresolvedRuleType(rule_name, getattr(rule_type, "__name__", repr(rule_type)))

        return rule_type(*args, **kwargs)

    def create_result(self, rule: Rule, properties: Mapping[str, Any]) -> OutcomeNode:
        """New outcome for rule; caller properties win over the defaults."""
        return OutcomeNode(rule, {**self._default_result_properties, **properties}, self)

    def evaluate(self, rule: Rule, value: Any, **properties: Any) -> OutcomeNode:
        """Apply rule to input and return the root outcome."""
        outcome = self.create_result(rule, {**properties, "input": value})
        outcome.apply_rule()
        return outcome

    def check(self, rule: Rule, value: Any, **properties: Any) -> OutcomeNode:
        """Evaluate and raise the report of the first deepest failure, if any."""
        outcome = self.evaluate(rule, value, **properties)
        if not outcome.is_valid():
            raise self.create_report(first_failure(outcome))
        return outcome

    def assert_valid(self, rule: Rule, value: Any, **properties: Any) -> OutcomeNode:
        """Evaluate and raise the full report, if the input is invalid."""
        outcome = self.evaluate(rule, value, **properties)
        if not outcome.is_valid():
            raise self.create_report(outcome)
        return outcome

    # =========================================================================
    # REPORTS
    # =========================================================================

    def resolve_report_type(self, rule: Rule) -> Type[ReportNode]:
        """
        Report class for rule: "<RuleClass>Report" from the first provider
        that registers it, else the base ReportNode.
        """
        report_name = type(rule).__name__ + REPORT_SUFFIX
        report_type = self._providers.find_report(report_name)
        if report_type is None:
            logger.debug(f"No {report_name} registered, using ReportNode")
            return ReportNode

        if not (isinstance(report_type, type) and issubclass(report_type, ReportNode)):
            raise UnresolvedReportType(
                report_name, getattr(report_type, "__qualname__", repr(report_type))
            )

        return report_type

    def create_report(self, outcome: OutcomeNode) -> ReportNode:
        report_type = self.resolve_report_type(outcome.rule)
        return report_type(outcome)

    def create_filtered_report(self, outcome: OutcomeNode) -> ReportNode:
        """Report for the leftmost deepest outcome below (or at) outcome."""
        return self.create_report(first_leaf(outcome))

    def flatten_failures(self, outcome: OutcomeNode) -> List[Tuple[ReportNode, DepthInfo]]:
        """
        Reports for the failing descendants of outcome, in pre-order.

        Valid outcomes are skipped, as are outcomes with exactly one child
        (single-rule wrappers). The display depth of each emitted report is
        compressed so it never grows by more than one per step, and a raw
        depth keeps the display depth it was first given for the rest of the
        traversal, across branches.
        """
        reports: List[Tuple[ReportNode, DepthInfo]] = []
        known_depths: Dict[int, int] = {}
        last_display_depth = 0
        last_raw_depth = 0

        for node, raw_depth in walk_preorder(outcome):
            if node.is_valid():
                continue

            if node.has_children() and node.child_count() < 2:
                continue

            if raw_depth in known_depths:
                display_depth = known_depths[raw_depth]
            elif raw_depth > last_raw_depth:
                display_depth = last_display_depth + 1
            else:
                display_depth = last_display_depth

            known_depths.setdefault(raw_depth, display_depth)

            depth = DepthInfo(
                display_depth=display_depth,
                raw_depth=raw_depth,
                previous_display_depth=last_display_depth,
                previous_raw_depth=last_raw_depth,
            )
            last_display_depth = display_depth
            last_raw_depth = raw_depth

            reports.append((self.create_report(node), depth))

        logger.debug(f"Flattened {len(reports)} failing outcomes")
        return reports
