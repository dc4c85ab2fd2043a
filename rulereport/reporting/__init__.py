"""
reporting/ - Failure reports

Turns outcome trees into human-readable messages:
- TemplateRenderer: template selection and {{token}} substitution
- ReportNode: one rendered failure plus its flattened failing descendants
- ReportFactory: rule/outcome/report creation and depth-compressing flattening
"""

from .renderer import (
    TemplateRenderer,
    render_placeholder,
    substitute,
    TOKEN_PATTERN,
)
from .report_node import (
    DepthInfo,
    ReportNode,
)
from .factory import (
    ReportFactory,
)

__all__ = [
    # Renderer
    "TemplateRenderer",
    "render_placeholder",
    "substitute",
    "TOKEN_PATTERN",
    # Report nodes
    "DepthInfo",
    "ReportNode",
    # Factory
    "ReportFactory",
]
