"""
Host-side adapters: an in-memory sidebar registry and the sources that
expose it to field types.
    from host import WidgetAreas, PrintingSidebarSource
"""
from .widgets import WidgetAreas
from .capture import capture_output
from .source import PrintingSidebarSource, StaticSidebarSource

__all__ = ["WidgetAreas", "capture_output", "PrintingSidebarSource", "StaticSidebarSource"]
