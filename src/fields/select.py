from __future__ import annotations
from typing import Any, Dict

from .base import parse_args
from .choice import normalize_choice, option_label, transform_options
from .model import FieldConfig


class SelectField:
    """Plain select: options come from the field definition itself."""

    def normalize(self, field: FieldConfig) -> FieldConfig:
        field = parse_args(field, {"type": "select", "field_type": "select"})
        return normalize_choice(field)

    def query(self, field: FieldConfig) -> Dict[str, Dict[str, Any]]:
        return transform_options(field.get("options"))

    def get_option_label(self, field: FieldConfig, value: Any) -> str:
        return option_label({"options": self.query(field)}, value)
