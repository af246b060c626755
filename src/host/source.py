from __future__ import annotations
from typing import Dict, Iterable, Mapping, Optional, Protocol, Sequence, Tuple

from fields.model import Sidebar
from .capture import capture_output


class PrintingHost(Protocol):
    """A host whose sidebar rendering only prints (see WidgetAreas)."""
    def registered_sidebars(self) -> Sequence[Sidebar]: ...
    def is_active_sidebar(self, sidebar_id: str) -> bool: ...
    def dynamic_sidebar(self, sidebar_id: str) -> bool: ...


class PrintingSidebarSource:
    """
    SidebarSource over a print-only host. This is the single place where
    printed output is buffered and handed back as a value.
    """

    def __init__(self, host: PrintingHost):
        self.host = host

    def registered_sidebars(self) -> Sequence[Sidebar]:
        return tuple(self.host.registered_sidebars())

    def is_active_sidebar(self, sidebar_id: str) -> bool:
        return self.host.is_active_sidebar(sidebar_id)

    def render_sidebar(self, sidebar_id: str) -> str:
        return capture_output(self.host.dynamic_sidebar, sidebar_id)


class StaticSidebarSource:
    """Immutable snapshot; `rendered` maps each active sidebar id to its content."""

    def __init__(self, sidebars: Iterable[Sidebar], rendered: Optional[Mapping[str, str]] = None):
        self._sidebars: Tuple[Sidebar, ...] = tuple(sidebars)
        self._rendered: Dict[str, str] = dict(rendered or {})

    def registered_sidebars(self) -> Sequence[Sidebar]:
        return self._sidebars

    def is_active_sidebar(self, sidebar_id: str) -> bool:
        if not any(s.id == sidebar_id for s in self._sidebars):
            return False
        return bool(self._rendered.get(sidebar_id))

    def render_sidebar(self, sidebar_id: str) -> str:
        return self._rendered.get(sidebar_id, "")
