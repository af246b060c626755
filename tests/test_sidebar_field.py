import pytest
from fields import SidebarField, Sidebar, DEFAULT_PLACEHOLDER
from host import StaticSidebarSource


def test_example_single_sidebar():
    src = StaticSidebarSource([Sidebar("sidebar-1", "Footer")])
    field = SidebarField(src)
    assert field.query({}) == {"sidebar-1": {"value": "sidebar-1", "label": "Footer"}}


@pytest.mark.parametrize("ids", [
    [],
    ["a"],
    ["zeta", "alpha", "mid"],
    ["sidebar-3", "sidebar-1", "sidebar-2", "footer-wide"],
])
def test_query_keys_follow_registration_order(ids):
    src = StaticSidebarSource([Sidebar(i, i.upper()) for i in ids])
    options = SidebarField(src).query({"id": "area"})
    assert list(options) == ids
    for i in ids:
        assert options[i] == {"value": i, "label": i.upper()}


def test_normalize_fills_placeholder_and_choice_defaults(sidebar_source):
    field = SidebarField(sidebar_source).normalize({"id": "area", "type": "sidebar"})

    assert field["placeholder"] == DEFAULT_PLACEHOLDER
    assert list(field["options"]) == ["sidebar-1", "sidebar-2"]
    assert field["options"]["sidebar-1"]["label"] == "Footer"
    assert field["field_type"] == "select_advanced"
    assert field["walker"] == "select"
    assert field["multiple"] is False
    assert field["flatten"] is True
    assert field["name"] == "area"
    assert field["js_options"]["placeholder"] == DEFAULT_PLACEHOLDER


def test_normalize_keeps_caller_placeholder(sidebar_source):
    field = SidebarField(sidebar_source).normalize({"id": "area", "placeholder": "Pick one"})
    assert field["placeholder"] == "Pick one"
    assert field["js_options"]["placeholder"] == "Pick one"


def test_normalize_overwrites_caller_options(sidebar_source):
    raw = {"id": "area", "options": {"bogus": "Nope"}}
    field = SidebarField(sidebar_source).normalize(raw)
    assert "bogus" not in field["options"]
    assert list(field["options"]) == ["sidebar-1", "sidebar-2"]
    # caller's mapping is untouched
    assert raw == {"id": "area", "options": {"bogus": "Nope"}}


def test_normalize_without_sidebars_still_succeeds():
    for source in (None, StaticSidebarSource([])):
        field = SidebarField(source).normalize({"id": "area"})
        assert field["options"] == {}
        assert field["placeholder"] == DEFAULT_PLACEHOLDER


def test_normalize_is_a_fixed_point(sidebar_source):
    field = SidebarField(sidebar_source)
    for raw in (
        {"id": "area"},
        {"id": "areas", "multiple": True},
        {"id": "tree", "field_type": "checkbox_tree"},
        {"id": "pick", "field_type": "radio_list", "js_options": {"width": "100%"}},
    ):
        once = field.normalize(raw)
        assert field.normalize(once) == once


def test_options_reflect_live_registry(widget_areas, sidebar_source):
    field = SidebarField(sidebar_source)
    assert len(field.query({})) == 2
    widget_areas.register_sidebar("sidebar-3", "Shop")
    assert list(field.query({})) == ["sidebar-1", "sidebar-2", "sidebar-3"]
    widget_areas.unregister_sidebar("sidebar-1")
    assert list(field.query({})) == ["sidebar-2", "sidebar-3"]


def test_option_label_renders_active_sidebar(sidebar_source):
    field = SidebarField(sidebar_source)
    assert field.get_option_label({}, "sidebar-1") == "<div>footer</div>"


@pytest.mark.parametrize("value", ["sidebar-2", "missing", "", 42])
def test_option_label_empty_when_inactive(sidebar_source, value):
    assert SidebarField(sidebar_source).get_option_label({}, value) == ""


def test_option_label_does_not_leak_to_stdout(sidebar_source, capsys):
    SidebarField(sidebar_source).get_option_label({}, "sidebar-1")
    assert capsys.readouterr().out == ""


def test_option_label_without_source():
    assert SidebarField().get_option_label({}, "sidebar-1") == ""


def test_static_source_ignores_unregistered_render_entries():
    src = StaticSidebarSource([Sidebar("a", "A")], rendered={"a": "<p>a</p>", "ghost": "<p>g</p>"})
    field = SidebarField(src)
    assert field.get_option_label({}, "a") == "<p>a</p>"
    assert field.get_option_label({}, "ghost") == ""


@pytest.mark.parametrize("raw", [
    {"id": "a", "attributes": "readonly"},
    {"id": "a", "attributes": 5},
    {"id": "a", "attributes": ["disabled"]},
    {"id": "a", "js_options": "x"},
    {"id": "a", "js_options": 5},
    {"id": "a", "options": 5},
    {"id": "a", "name": None},
])
def test_normalize_tolerates_odd_values(sidebar_source, raw):
    field = SidebarField(sidebar_source)
    once = field.normalize(raw)

    assert once["attributes"] == {}
    assert isinstance(once["js_options"], dict)
    assert once["js_options"]["allowClear"] is True
    assert list(once["options"]) == ["sidebar-1", "sidebar-2"]
    assert once["name"] == "a"
    assert field.normalize(once) == once


def test_normalize_defaults_type_to_sidebar(sidebar_source):
    assert SidebarField(sidebar_source).normalize({"id": "a"})["type"] == "sidebar"
    assert SidebarField(sidebar_source).normalize({"id": "a", "type": "widget_area"})["type"] == "widget_area"


def test_query_keeps_empty_display_name(widget_areas, sidebar_source):
    widget_areas.register_sidebar("s1", "")
    assert SidebarField(sidebar_source).query({})["s1"] == {"value": "s1", "label": ""}
