"""
rulereport Test Configuration and Fixtures

Sample rules standing in for concrete predicates, plus helpers for building
outcome trees by hand.
"""

import pytest
from typing import Any

from rulereport.core.enums import Mode
from rulereport.core.outcome import OutcomeNode
from rulereport.registry.providers import Provider
from rulereport.reporting.factory import ReportFactory
from rulereport.reporting.report_node import ReportNode
from rulereport.rules.base import Rule


# =============================================================================
# SAMPLE RULES
# =============================================================================

class Stub(Rule):
    """Leaves the outcome untouched."""

    def apply(self, outcome):
        pass


class Positive(Rule):
    """Input must be greater than zero."""

    def apply(self, outcome):
        outcome.set_property("validation", outcome.input > 0)


class Between(Rule):
    """Input must lie in [minimum, maximum]."""

    def __init__(self, minimum, maximum):
        self.minimum = minimum
        self.maximum = maximum

    def apply(self, outcome):
        outcome.set_properties({"minimum": self.minimum, "maximum": self.maximum})
        outcome.set_property(
            "validation", self.minimum <= outcome.input <= self.maximum
        )


class NotEmpty(Rule):
    """Input must be present; runs even for absent inputs."""

    required = True

    def apply(self, outcome):
        outcome.set_property("validation", bool(outcome.input))


class AllOf(Rule):
    """Every sub-rule must pass; sub-rules decide how to treat absent input."""

    required = True

    def __init__(self, *rules):
        self.rules = rules

    def apply(self, outcome):
        valid = True
        for rule in self.rules:
            child = outcome.create_child(rule)
            child.apply_rule()
            valid = valid and child.is_valid()
        outcome.set_property("validation", valid)


class Not(Rule):
    """Inverts a single sub-rule."""

    def __init__(self, rule):
        self.rule = rule

    def apply(self, outcome):
        child = outcome.create_child(self.rule)
        child.set_property("mode", Mode.NEGATIVE)
        child.apply_rule()
        child.set_property("validation", not child.is_valid())
        outcome.set_property("validation", child.is_valid())


class PositiveReport(ReportNode):
    """Custom wording for Positive."""

    def template_catalog(self):
        return {
            Mode.AFFIRMATIVE: {
                "standard": "{{placeholder}} must be positive",
                "strict": "{{placeholder}} must be strictly greater than zero",
            },
            Mode.NEGATIVE: {
                "standard": "{{placeholder}} must not be positive",
            },
        }


class BetweenReport(ReportNode):
    """Custom wording for Between."""

    def template_catalog(self):
        return {
            Mode.AFFIRMATIVE: {
                "standard": "{{placeholder}} must be between {{minimum}} and {{maximum}}",
            },
            Mode.NEGATIVE: {
                "standard": "{{placeholder}} must not be between {{minimum}} and {{maximum}}",
            },
        }


# =============================================================================
# HELPERS
# =============================================================================

def add_child(parent: OutcomeNode, valid: bool = False, **properties: Any) -> OutcomeNode:
    """Attach a Stub child with the given validity and properties."""
    child = parent.create_child(Stub())
    child.set_property("validation", valid)
    child.set_properties(properties)
    return child


def make_root(factory: ReportFactory, valid: bool = False, **properties: Any) -> OutcomeNode:
    """Root outcome bound to a Stub rule."""
    return factory.create_result(Stub(), {"validation": valid, **properties})


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def sample_provider():
    """Provider holding the sample rules and reports."""
    provider = Provider(name="samples")
    for rule_type in (Stub, Positive, Between, NotEmpty, AllOf, Not):
        provider.register_rule(rule_type)
    provider.register_report(PositiveReport)
    provider.register_report(BetweenReport)
    return provider


@pytest.fixture
def factory(sample_provider):
    """ReportFactory searching the sample provider."""
    return ReportFactory(providers=[sample_provider])


@pytest.fixture
def bare_factory():
    """ReportFactory with no providers."""
    return ReportFactory()


RULES_MODULE_SOURCE = '''
from rulereport.reporting.report_node import ReportNode
from rulereport.rules.base import Rule


class Even(Rule):
    def apply(self, outcome):
        outcome.set_property("validation", outcome.input % 2 == 0)


class Odd(Rule):
    def apply(self, outcome):
        outcome.set_property("validation", outcome.input % 2 == 1)


class EvenReport(ReportNode):
    def template_catalog(self):
        return {"affirmative": {"standard": "{{placeholder}} must be even"}}


class OddReport:
    """Named like a report but not a ReportNode."""


class Helper:
    pass
'''


@pytest.fixture
def rules_module(tmp_path, monkeypatch):
    """Importable module defining rules and reports; returns its dotted name."""
    (tmp_path / "parity_rules.py").write_text(RULES_MODULE_SOURCE)
    monkeypatch.syspath_prepend(str(tmp_path))
    return "parity_rules"
