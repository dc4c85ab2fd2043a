"""
rulereport - Validation outcome trees and failure reports

Rules record how they evaluated an input in a tree of OutcomeNode objects.
ReportFactory turns failing outcomes into ReportNode exceptions whose messages
are rendered from per-rule templates, with failing descendants flattened into
an indented multi-line report.
"""

from rulereport.core import Mode, TemplateKey, OutcomeNode
from rulereport.rules import Rule
from rulereport.errors import ComponentError, UnresolvedRuleType, UnresolvedReportType
from rulereport.registry import Provider, ProviderChain
from rulereport.reporting import DepthInfo, ReportNode, ReportFactory, TemplateRenderer

__version__ = "1.0.0"

__all__ = [
    "Mode",
    "TemplateKey",
    "OutcomeNode",
    "Rule",
    "ComponentError",
    "UnresolvedRuleType",
    "UnresolvedReportType",
    "Provider",
    "ProviderChain",
    "DepthInfo",
    "ReportNode",
    "ReportFactory",
    "TemplateRenderer",
]
