"""
Generic choice-field normalization shared by every field type that offers
a list of options (static selects, sidebars, ...).

Concrete types build their own options first, then call into
`normalize_object_choice` / `normalize_choice` to finish the config:

    field = parse_args(field, {"placeholder": "Select a sidebar"})
    field["options"] = query(field)
    field = normalize_object_choice(field)
"""
from __future__ import annotations
from typing import Any, Dict, Iterable, Mapping

from .base import normalize_field, parse_args
from .model import FieldConfig

CHOICE_DEFAULTS: Dict[str, Any] = {
    "flatten": True,
    "options": {},
    "multiple": False,
    "select_all_none": False,
}

OBJECT_CHOICE_DEFAULTS: Dict[str, Any] = {
    "field_type": "select_advanced",
    "query_args": {},
    "add_new": False,
}

SELECT_ADVANCED_JS: Dict[str, Any] = {
    "allowClear": True,
    "dropdownAutoWidth": True,
    "width": "style",
}


def transform_options(options: Any) -> Dict[str, Dict[str, Any]]:
    """
    Bring any accepted options shape into {value: {"value", "label"[, "parent"]}}.

    Accepted: {value: label}, {value: {"label": ...}}, or a list of
    {"value", "label"} records (bare scalars are used as value and label).
    Anything else yields no options.
    """
    out: Dict[str, Dict[str, Any]] = {}
    if isinstance(options, Mapping):
        items: Iterable = (_record(k, v) for k, v in options.items())
    elif isinstance(options, (list, tuple)):
        items = (_record(None, v) for v in options)
    else:
        # scalars and strings carry no options
        return out
    for rec in items:
        out[rec["value"]] = rec
    return out


def _record(key: Any, item: Any) -> Dict[str, Any]:
    if isinstance(item, Mapping):
        value = str(item.get("value", key if key is not None else ""))
        rec = {"value": value, "label": str(item.get("label", value))}
        if item.get("parent") not in (None, ""):
            rec["parent"] = str(item["parent"])
        return rec
    if key is None:
        return {"value": str(item), "label": str(item)}
    return {"value": str(key), "label": str(item)}


def _pick_walker(field: FieldConfig) -> str:
    field_type = field.get("field_type")
    if field_type in ("checkbox_list", "radio"):
        return field_type
    return "select" if field["flatten"] else "select_tree"


def normalize_choice(field: FieldConfig) -> FieldConfig:
    field = parse_args(field, CHOICE_DEFAULTS)
    field.setdefault("field_type", "select")
    field["options"] = transform_options(field["options"])
    field.setdefault("walker", _pick_walker(field))

    if field["field_type"] == "select_advanced":
        js = dict(SELECT_ADVANCED_JS)
        js["placeholder"] = field.get("placeholder", "")
        custom = field.get("js_options")
        if isinstance(custom, Mapping):
            js.update(custom)
        field["js_options"] = js

    return normalize_field(field)


def normalize_object_choice(field: FieldConfig) -> FieldConfig:
    """Defaults for choices pulled from host objects, then the generic ones."""
    field = parse_args(field, OBJECT_CHOICE_DEFAULTS)
    if field["field_type"] == "checkbox_tree":
        field["field_type"] = "checkbox_list"
        field["flatten"] = False
    elif field["field_type"] == "radio_list":
        field["field_type"] = "radio"
    return normalize_choice(field)


def option_label(field: FieldConfig, value: Any) -> str:
    """Label of a stored value among the field's options, '' when unknown."""
    rec = (field.get("options") or {}).get(str(value))
    return rec["label"] if rec else ""
