"""Render registered scripts as markup fragments."""

from __future__ import annotations

from html import escape
from typing import Any, List

from critical_assets.models import AttributedSource, PlainSource, Scope, ScriptEntry
from critical_assets.registry import AssetRegistry
from critical_assets.resolver import unique


def _attribute_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return escape(str(value), quote=True)


def render_attributes(entry: AttributedSource) -> str:
    parts = []
    for key, value in entry.attributes:
        if value is True:
            parts.append(key)
        else:
            parts.append(f'{key}="{_attribute_value(value)}"')
    return " ".join(parts)


def render_script_tag(entry: ScriptEntry) -> str:
    """Render one entry as an external ``<script>`` include."""
    if isinstance(entry, AttributedSource):
        return f"<script {render_attributes(entry)}></script>"
    if isinstance(entry, PlainSource):
        return f'<script src="{_attribute_value(entry.src)}"></script>'
    raise TypeError(f"Unsupported script entry type: {type(entry).__name__}")


def render_scripts(registry: AssetRegistry, scope: Any, identifier: str) -> str:
    """Return the scripts registered for ``identifier`` in ``scope``.

    Critical scripts come back as their bare source URLs, one per line, for
    the caller to inline. Async scripts come back as ``<script>`` tags.
    Duplicate lines are dropped in both cases.
    """
    scope = Scope.parse(scope)
    entries = registry.scripts_for(scope, identifier)
    if not entries:
        return ""

    if scope is Scope.CRITICAL:
        lines: List[str] = [entry.src for entry in entries]
    else:
        lines = [render_script_tag(entry) for entry in entries]
    return "\n".join(unique(lines))
