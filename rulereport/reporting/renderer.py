"""
reporting/renderer.py - Message template rendering

Turns an outcome's properties into a message:
1. Pick a template (explicit "message" property, else catalog[mode][key])
2. Apply the optional "message_filter" hook to the template
3. Substitute {{name}} tokens from the properties plus a computed placeholder

Every lookup has a fallback, so rendering never fails on missing data.
"""

from __future__ import annotations
from enum import Enum
from typing import Any, Callable, Dict, Mapping, Optional
import logging
import re

from ..core.enums import Mode, TemplateKey

logger = logging.getLogger(__name__)

TemplateCatalog = Mapping[Any, Mapping[Any, str]]

TOKEN_PATTERN = re.compile(r"\{\{(\w+)\}\}")

SCALAR_TYPES = (str, bytes, int, float, bool, type(None))
ARRAY_TYPES = (list, tuple, dict, set, frozenset)

# Used when a catalog lists no templates at all
GENERIC_TEMPLATE = "{{placeholder}} must be valid"


def render_placeholder(value: Any, label: Any = None) -> str:
    """
    Human-readable stand-in for the validated input.

    Scalar inputs render as their repr. A non-empty label replaces the input
    and is used as-is when scalar. Containers render as `Array` and other
    objects as their type name in backticks.
    """
    placeholder = value
    if isinstance(placeholder, SCALAR_TYPES):
        placeholder = repr(placeholder)

    if label:
        placeholder = label

    if isinstance(placeholder, ARRAY_TYPES):
        return "`Array`"
    if isinstance(placeholder, SCALAR_TYPES):
        return str(placeholder)
    return f"`{type(placeholder).__name__}`"


def _plain(value: Any) -> Any:
    """Enum members compare and render by value."""
    if isinstance(value, Enum):
        return value.value
    return value


def _stringify(value: Any) -> str:
    return str(_plain(value))


def substitute(template: str, params: Mapping[str, Any]) -> str:
    """Replace {{name}} tokens with params[name]; unknown tokens stay as-is."""

    def _replace(match: "re.Match[str]") -> str:
        name = match.group(1)
        if name in params:
            return _stringify(params[name])
        return match.group(0)

    return TOKEN_PATTERN.sub(_replace, template)


class TemplateRenderer:
    """Renders messages from a template catalog keyed by mode and template key."""

    def __init__(self, catalog: TemplateCatalog):
        self.catalog = catalog

    def fallback_template(self) -> str:
        """First template listed in the catalog, else the generic template."""
        for family in self.catalog.values():
            for template in family.values():
                return template
        logger.debug("Empty template catalog, using generic template")
        return GENERIC_TEMPLATE

    def select_template(
        self,
        mode: Any,
        template_key: Any = None,
        message: Optional[str] = None,
    ) -> str:
        if message:
            return _stringify(message)

        key = _plain(template_key or TemplateKey.STANDARD)
        mode = _plain(mode)

        # Keys may be enum members or their plain values
        for family_mode, family in self.catalog.items():
            if _plain(family_mode) != mode:
                continue
            for family_key, template in family.items():
                if _plain(family_key) == key:
                    return template
            break

        logger.debug(f"No template for mode={mode!r} key={key!r}, using fallback")
        return self.fallback_template()

    def render(self, properties: Mapping[str, Any]) -> str:
        params: Dict[str, Any] = dict(properties)
        params["placeholder"] = render_placeholder(
            properties.get("input"), properties.get("label")
        )

        template = self.select_template(
            properties.get("mode", Mode.AFFIRMATIVE),
            properties.get("template_key"),
            properties.get("message"),
        )

        message_filter: Optional[Callable[[str], str]] = properties.get("message_filter")
        if message_filter is not None:
            template = message_filter(template)

        return substitute(template, params)
