"""
Integration tests for the report pipeline

Evaluates sample rule compositions end to end: outcome tree construction,
report type resolution, flattening and message output.
"""

import os
import pytest

from rulereport.core.enums import Mode
from rulereport.errors.taxonomy import UnresolvedRuleType
from rulereport.registry.providers import Provider
from rulereport.reporting.report_node import ReportNode

from conftest import (
    AllOf,
    Between,
    BetweenReport,
    Not,
    NotEmpty,
    Positive,
    PositiveReport,
    Stub,
    add_child,
    make_root,
)


class TestScenarios:
    """Reference scenarios."""

    def test_negative_root_without_children(self, factory):
        """Scenario A: negative-mode failure renders the negative template."""
        root = make_root(factory, input=17, mode=Mode.NEGATIVE)
        assert factory.create_report(root).message == "17 must not be valid"

    def test_child_with_two_failing_grandchildren(self, factory):
        """Scenario B: the child is kept, followed by both grandchildren."""
        root = make_root(factory, input=1)
        child = add_child(root, label="child")
        add_child(child, label="g1")
        add_child(child, label="g2")

        descendants = factory.create_report(root).descendants()

        assert len(descendants) == 3
        assert [d.display_depth for _, d in descendants] == [1, 2, 2]

    def test_label_replaces_scalar_input(self, factory):
        """Scenario C: a label wins over a scalar input."""
        root = make_root(factory, input=17, label="Age")
        assert factory.create_report(root).message == "Age must be valid"

    def test_unknown_rule_name(self, factory):
        """Scenario D: unregistered rule names fail."""
        with pytest.raises(UnresolvedRuleType):
            factory.create_rule("leapYear")


class TestEvaluate:
    """Test rule evaluation through the factory."""

    def test_valid_composition(self, factory):
        outcome = factory.evaluate(AllOf(Positive(), Between(1, 10)), 5)

        assert outcome.is_valid() == True
        assert outcome.child_count() == 2
        assert all(child.is_valid() for child in outcome.children)

    def test_invalid_composition_full_report(self, factory):
        rule = AllOf(Positive(), Between(1, 10))
        outcome = factory.evaluate(rule, 15)
        report = factory.create_report(outcome)

        assert report.full_report() == os.linesep.join([
            "- 15 must be valid",
            "  - 15 must be between 1 and 10",
        ])
        assert isinstance(report.descendants()[0][0], BetweenReport)

    def test_properties_passed_through(self, factory):
        outcome = factory.evaluate(Between(1, 10), 15, label="Quantity")
        report = factory.create_report(outcome)
        assert report.message == "Quantity must be between 1 and 10"

    def test_negation_uses_negative_templates(self, factory):
        outcome = factory.evaluate(Not(Positive()), 5)
        report = factory.create_report(outcome)

        assert report.flat_messages() == [
            "5 must be valid",
            "5 must not be positive",
        ]

    def test_absent_input_in_composition(self, factory):
        """Optional sub-rules pass on absent input; required ones still run."""
        outcome = factory.evaluate(AllOf(Positive(), NotEmpty()), "")

        assert outcome.is_valid() == False
        assert [child.is_valid() for child in outcome.children] == [True, False]

    def test_nested_composition(self, factory):
        rule = AllOf(
            AllOf(Positive(), Between(1, 3)),
            AllOf(Between(10, 20)),
            Stub(),
        )
        outcome = factory.evaluate(rule, -4)
        report = factory.create_report(outcome)

        assert report.full_report() == os.linesep.join([
            "- -4 must be valid",
            "  - -4 must be valid",
            "    - -4 must be positive",
            "    - -4 must be between 1 and 3",
            "    - -4 must be between 10 and 20",
        ])


class TestCheckAndAssert:
    """Test the raising helpers."""

    def test_check_passes(self, factory):
        outcome = factory.check(Positive(), 3)
        assert outcome.is_valid() == True

    def test_check_raises_first_deepest(self, factory):
        with pytest.raises(BetweenReport) as exc_info:
            factory.check(AllOf(Between(1, 10), Positive()), 15)

        assert str(exc_info.value) == "15 must be between 1 and 10"

    def test_check_skips_passing_first_rule(self, factory):
        """The raised report belongs to a failing outcome."""
        with pytest.raises(BetweenReport) as exc_info:
            factory.check(AllOf(Positive(), Between(1, 10)), 15)

        report = exc_info.value
        assert report.message == "15 must be between 1 and 10"
        assert report.outcome.is_valid() == False

    def test_check_nested_failure_after_passing_group(self, factory):
        rule = AllOf(AllOf(Positive(), Between(1, 20)), AllOf(Stub(), Between(1, 10)))
        with pytest.raises(BetweenReport, match="15 must be between 1 and 10"):
            factory.check(rule, 15)

    def test_assert_valid_passes(self, factory):
        outcome = factory.assert_valid(Between(1, 10), 4)
        assert outcome.is_valid() == True

    def test_assert_valid_raises_full_report(self, factory):
        with pytest.raises(ReportNode) as exc_info:
            factory.assert_valid(AllOf(Positive(), Between(1, 10)), -1)

        report = exc_info.value
        assert report.flat_messages() == [
            "-1 must be valid",
            "-1 must be positive",
            "-1 must be between 1 and 10",
        ]


class TestCustomReports:
    """Test domain wording supplied by report subclasses."""

    def test_custom_wording_by_rule_name(self, factory):
        with pytest.raises(PositiveReport, match="-2 must be positive"):
            factory.assert_valid(Positive(), -2)

    def test_default_properties_apply(self, factory):
        factory.set_default_result_properties({"label": "Amount", "mode": Mode.NEGATIVE})
        with pytest.raises(PositiveReport, match="Amount must not be positive"):
            factory.check(Not(Positive()), 5, mode=Mode.AFFIRMATIVE)

    def test_module_provider(self, factory, rules_module):
        factory.append_provider(Provider.from_module(rules_module))
        rule = factory.create_rule("even")

        with pytest.raises(ReportNode, match="3 must be even"):
            factory.assert_valid(rule, 3)
