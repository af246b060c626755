from __future__ import annotations
from typing import Any, Dict, Mapping

from .model import FieldConfig

FIELD_DEFAULTS: Dict[str, Any] = {
    "id": "",
    "type": "text",
    "std": "",
    "desc": "",
    "placeholder": "",
    "clone": False,
    "required": False,
    "disabled": False,
    "multiple": False,
}


def parse_args(field: FieldConfig, defaults: Dict[str, Any]) -> FieldConfig:
    """Copy of `field` with `defaults` filled in where a key is missing."""
    merged = dict(defaults)
    merged.update(field or {})
    return merged


def normalize_field(field: FieldConfig) -> FieldConfig:
    """
    Fill the attributes every field carries, whatever its type.
    The input mapping is never mutated; safe to call on its own output.
    """
    field = parse_args(field, FIELD_DEFAULTS)
    attributes = field.get("attributes")
    field["attributes"] = dict(attributes) if isinstance(attributes, Mapping) else {}
    if field.get("name") is None:
        field["name"] = field["id"]

    # multiple-value inputs post as lists: name[]
    name = str(field["name"])
    if field["multiple"] and name and not name.endswith("[]"):
        name += "[]"
    field["name"] = name
    return field
