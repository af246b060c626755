from __future__ import annotations
import logging
import sys
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from fields.model import Sidebar

logger = logging.getLogger(__name__)


@dataclass
class WidgetAreas:
    """
    In-process stand-in for the host's sidebar registry.

    Sidebars keep their registration order; re-registering an id renames it
    in place. Rendering is print-style, like the host's own hook: use
    host.capture.capture_output (or PrintingSidebarSource) to get a string.
    """
    _sidebars: Dict[str, Sidebar] = field(default_factory=dict)
    _widgets: Dict[str, List[str]] = field(default_factory=dict)

    def register_sidebar(self, sidebar_id: str, name: str, description: str = "") -> Sidebar:
        if not sidebar_id:
            raise ValueError("register_sidebar requires an id.")
        sidebar = Sidebar(id=sidebar_id, name=name, description=description)
        self._sidebars[sidebar_id] = sidebar
        self._widgets.setdefault(sidebar_id, [])
        logger.debug("registered sidebar %s (%s)", sidebar_id, sidebar.name)
        return sidebar

    def unregister_sidebar(self, sidebar_id: str) -> None:
        self._sidebars.pop(sidebar_id, None)
        self._widgets.pop(sidebar_id, None)

    def add_widget(self, sidebar_id: str, html: str) -> None:
        if sidebar_id not in self._sidebars:
            raise ValueError(f"Unknown sidebar: {sidebar_id}")
        self._widgets[sidebar_id].append(html)

    def registered_sidebars(self) -> Tuple[Sidebar, ...]:
        return tuple(self._sidebars.values())

    def is_active_sidebar(self, sidebar_id: str) -> bool:
        return bool(self._widgets.get(sidebar_id))

    def dynamic_sidebar(self, sidebar_id: str) -> bool:
        """Print the widgets of a sidebar to stdout; False when nothing was printed."""
        widgets = self._widgets.get(sidebar_id) or []
        for html in widgets:
            sys.stdout.write(html)
        return bool(widgets)
