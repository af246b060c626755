from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict

# A field definition as the form renderer sees it: a plain mapping of attributes.
FieldConfig = Dict[str, Any]


@dataclass(frozen=True)
class Option:
    """One selectable choice of a choice-type field."""
    value: str
    label: str

    def as_dict(self) -> Dict[str, str]:
        return {"value": self.value, "label": self.label}


@dataclass(frozen=True)
class Sidebar:
    """A registered widget area of the host (id + display name)."""
    id: str
    name: str
    description: str = ""
