"""
Built-in field types.
Spec shape per type_id:
{
  "label": "Sidebar",
  "factory": callable(sidebar_source=..., placeholders=...) -> FieldType,
  "aliases": ["token1", "token2", ...]
}
Factories receive the registry's injected dependencies as keyword arguments
and ignore the ones they don't need.
"""
from __future__ import annotations
from typing import Any, Dict, Optional

from fields import SelectField, SidebarField, DEFAULT_PLACEHOLDER
from fields.protocol import FieldType, SidebarSource


def make_select(**deps: Any) -> FieldType:
    return SelectField()


def make_sidebar(sidebar_source: Optional[SidebarSource] = None,
                 placeholders: Optional[Dict[str, str]] = None, **deps: Any) -> FieldType:
    placeholder = (placeholders or {}).get("sidebar") or DEFAULT_PLACEHOLDER
    return SidebarField(source=sidebar_source, placeholder=placeholder)


BUILTIN_TYPES: Dict[str, Dict[str, Any]] = {
    "select": {
        "label": "Select",
        "factory": make_select,
        "aliases": ["dropdown"],
    },
    "sidebar": {
        "label": "Sidebar",
        "factory": make_sidebar,
        "aliases": ["sidebars", "widget_area"],
    },
}
