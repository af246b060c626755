"""
Public API for the fields package.
Usage:
    from fields import SidebarField, SelectField, Option, Sidebar
"""
from .model import FieldConfig, Option, Sidebar
from .protocol import FieldType, SidebarSource
from .base import normalize_field, parse_args
from .choice import (
    normalize_choice, normalize_object_choice, option_label, transform_options,
)
from .select import SelectField
from .sidebar import SidebarField, DEFAULT_PLACEHOLDER

__all__ = [
    # model
    "FieldConfig", "Option", "Sidebar",
    # protocols
    "FieldType", "SidebarSource",
    # normalizers
    "normalize_field", "parse_args",
    "normalize_choice", "normalize_object_choice", "option_label", "transform_options",
    # field types
    "SelectField", "SidebarField", "DEFAULT_PLACEHOLDER",
]
