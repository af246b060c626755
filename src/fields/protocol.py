from __future__ import annotations
from typing import Protocol, Any, Dict, Sequence

from .model import FieldConfig, Sidebar


class SidebarSource(Protocol):
    """
    Read-only view of the host's sidebars, injected into the sidebar field.

    Implementations must provide:
      - registered_sidebars() -> sidebars in registration order
      - is_active_sidebar(sidebar_id) -> True when the sidebar holds widgets
      - render_sidebar(sidebar_id) -> rendered widget content as a string
    """
    def registered_sidebars(self) -> Sequence[Sidebar]: ...
    def is_active_sidebar(self, sidebar_id: str) -> bool: ...
    def render_sidebar(self, sidebar_id: str) -> str: ...


class FieldType(Protocol):
    """Contract every registered field type fulfils."""
    def normalize(self, field: FieldConfig) -> FieldConfig: ...
    def query(self, field: FieldConfig) -> Dict[str, Dict[str, Any]]: ...
    def get_option_label(self, field: FieldConfig, value: Any) -> str: ...
