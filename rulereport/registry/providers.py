"""
registry/providers.py - Name to type providers

A provider maps short names to rule classes and report classes. The factory
consults its providers in order and the first provider that knows a name wins,
so prepending a provider lets it override types registered further down.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from types import ModuleType
from typing import Dict, Iterator, List, Optional, Union
import importlib
import inspect
import logging

logger = logging.getLogger(__name__)


@dataclass
class Provider:
    """Named set of rule and report types."""

    name: str
    rules: Dict[str, type] = field(default_factory=dict)
    reports: Dict[str, type] = field(default_factory=dict)

    def register_rule(self, rule_type: type, name: Optional[str] = None) -> None:
        """Register a rule type under name (defaults to the class name)."""
        self.rules[name or rule_type.__name__] = rule_type

    def register_report(self, report_type: type, name: Optional[str] = None) -> None:
        """Register a report type under name (defaults to the class name)."""
        self.reports[name or report_type.__name__] = report_type

    def lookup_rule(self, name: str) -> Optional[type]:
        return self.rules.get(name)

    def lookup_report(self, name: str) -> Optional[type]:
        return self.reports.get(name)

    @classmethod
    def from_module(cls, module: Union[str, ModuleType]) -> "Provider":
        """
        Build a provider from the classes defined in a module.

        Concrete Rule subclasses are registered as rules. ReportNode subclasses,
        and any other class whose name ends in "Report", are registered as
        reports; the factory rejects the latter when it resolves them.
        """
        from ..reporting.report_node import ReportNode
        from ..rules.base import Rule

        if isinstance(module, str):
            module = importlib.import_module(module)

        provider = cls(name=module.__name__)
        for attr_name, obj in inspect.getmembers(module, inspect.isclass):
            if obj.__module__ != module.__name__:
                continue
            if issubclass(obj, Rule):
                if not inspect.isabstract(obj):
                    provider.register_rule(obj, attr_name)
            elif issubclass(obj, ReportNode) or attr_name.endswith("Report"):
                provider.register_report(obj, attr_name)

        logger.debug(
            f"Provider {provider.name}: {len(provider.rules)} rules, "
            f"{len(provider.reports)} reports"
        )
        return provider


class ProviderChain:
    """Ordered list of providers searched front to back."""

    def __init__(self, providers: Optional[List[Provider]] = None):
        self._providers: List[Provider] = list(providers or [])

    def __iter__(self) -> Iterator[Provider]:
        return iter(list(self._providers))

    def __len__(self) -> int:
        return len(self._providers)

    def append(self, provider: Provider) -> None:
        self._providers.append(provider)
        logger.debug(f"Appended provider {provider.name}")

    def prepend(self, provider: Provider) -> None:
        self._providers.insert(0, provider)
        logger.debug(f"Prepended provider {provider.name}")

    def names(self) -> List[str]:
        return [provider.name for provider in self._providers]

    def find_rule(self, name: str) -> Optional[type]:
        """First rule type registered under name, or None."""
        for provider in self._providers:
            found = provider.lookup_rule(name)
            if found is not None:
                return found
        return None

    def find_report(self, name: str) -> Optional[type]:
        """First report type registered under name, or None."""
        for provider in self._providers:
            found = provider.lookup_report(name)
            if found is not None:
                return found
        return None
