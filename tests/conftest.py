# tests/conftest.py
import sys
from pathlib import Path
import pytest

# Make "src" importable
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from host import WidgetAreas, PrintingSidebarSource
from registry import FieldRegistry

@pytest.fixture
def widget_areas():
    # Footer holds a widget (active), Header is empty (inactive)
    areas = WidgetAreas()
    areas.register_sidebar("sidebar-1", "Footer")
    areas.register_sidebar("sidebar-2", "Header")
    areas.add_widget("sidebar-1", "<div>footer</div>")
    return areas

@pytest.fixture
def sidebar_source(widget_areas):
    return PrintingSidebarSource(widget_areas)

@pytest.fixture
def registry(sidebar_source):
    return FieldRegistry(sidebar_source=sidebar_source)
