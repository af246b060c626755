from __future__ import annotations
import logging
from typing import Dict, Any, Optional, Iterable, List
from pathlib import Path

from fields.base import parse_args
from fields.model import FieldConfig
from fields.protocol import FieldType, SidebarSource
from .specs import BUILTIN_TYPES
from .loader import load_type_overrides

logger = logging.getLogger(__name__)


def _lc(x: Any) -> str:
    return str(x).strip().lower()


class FieldRegistry:
    """
    Explicit table of field types, built once at startup:
      - Built-in types (select, sidebar)
      - Optional extra_types dict injection (plugins, tests)
      - Optional YAML overrides (extra defaults and aliases per type)

    Dependencies such as the sidebar source are handed to every type factory;
    nothing is looked up from global state.
    """

    def __init__(self,
                 sidebar_source: Optional[SidebarSource] = None,
                 extra_types: Optional[Dict[str, Dict[str, Any]]] = None,
                 overrides_dir: Optional[str | Path] = None,
                 placeholders: Optional[Dict[str, str]] = None):
        self._types: Dict[str, FieldType] = {}
        self._specs: Dict[str, Dict[str, Any]] = {}
        self._defaults: Dict[str, Dict[str, Any]] = {}
        self._aliases: Dict[str, str] = {}
        self._deps: Dict[str, Any] = {
            "sidebar_source": sidebar_source,
            "placeholders": dict(placeholders or {}),
        }

        # 1) built-ins
        for tid, spec in BUILTIN_TYPES.items():
            self._register_type(tid, spec)

        # 2) caller-provided types (override/extend)
        if extra_types:
            for tid, spec in extra_types.items():
                self._register_type(tid, spec)

        # 3) YAML overrides (defaults/aliases for known types only)
        for tid, override in load_type_overrides(overrides_dir).items():
            if tid not in self._types:
                raise ValueError(f"Override for unknown field type: {tid}")
            self._defaults[tid] = dict(override["defaults"])
            self._specs[tid]["aliases"].extend(override["aliases"])

        self._rebuild_alias_index()

    # ----- lookup -----

    def resolve_type(self, token: Any) -> Optional[str]:
        if not token:
            return None
        return self._aliases.get(_lc(token))

    def get_type(self, type_id: Any) -> FieldType:
        tid = self.resolve_type(type_id)
        if tid is None:
            raise ValueError(f"Unknown field type: {type_id}")
        return self._types[tid]

    def types(self) -> List[Dict[str, Any]]:
        return [
            {"type_id": tid, "label": spec["label"], "aliases": list(spec["aliases"])}
            for tid, spec in self._specs.items()
        ]

    # ----- field operations -----

    def normalize(self, field: FieldConfig) -> FieldConfig:
        tid = self.resolve_type(field.get("type"))
        if tid is None:
            raise ValueError(f"Unknown field type: {field.get('type')}")
        field = parse_args(field, self._defaults.get(tid, {}))
        field["type"] = tid
        return self._types[tid].normalize(field)

    def normalize_all(self, fields: Iterable[FieldConfig]) -> List[FieldConfig]:
        return [self.normalize(f) for f in fields]

    def query(self, field: FieldConfig) -> Dict[str, Dict[str, Any]]:
        return self.get_type(field.get("type")).query(field)

    def get_option_label(self, field: FieldConfig, value: Any) -> str:
        return self.get_type(field.get("type")).get_option_label(field, value)

    # ----- internal plumbing -----

    def _register_type(self, type_id: str, spec: Dict[str, Any]) -> None:
        spec = dict(spec)
        spec.setdefault("label", type_id)
        spec["aliases"] = list(spec.get("aliases", []))

        if "instance" in spec:
            ftype = spec["instance"]
        elif callable(spec.get("factory")):
            ftype = spec["factory"](**self._deps)
        else:
            raise ValueError(f"Field type {type_id} needs a 'factory' or an 'instance'")

        self._types[type_id] = ftype
        self._specs[type_id] = spec
        logger.debug("registered field type %s", type_id)

    def _rebuild_alias_index(self) -> None:
        self._aliases.clear()
        for tid in self._specs:
            self._aliases[_lc(tid)] = tid  # ids always resolve to themselves
        for tid, spec in self._specs.items():
            tokens: Iterable[str] = list(spec.get("aliases", [])) + [spec.get("label", "")]
            for t in tokens:
                if not t:
                    continue
                self._aliases.setdefault(_lc(t), tid)  # first writer wins
