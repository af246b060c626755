from __future__ import annotations
from typing import Dict, Any, Optional
from pathlib import Path

import yaml


def load_type_overrides(path: Optional[str | Path]) -> Dict[str, Dict[str, Any]]:
    """
    Load YAML field-type overrides from a directory (optional).
    Returns a dict {type_id: {"defaults": {...}, "aliases": [...]}}.
    Safe no-op if the path is missing; malformed files raise ValueError.
    """
    overrides: Dict[str, Dict[str, Any]] = {}
    if not path:
        return overrides
    p = Path(path)
    if not p.exists() or not p.is_dir():
        return overrides
    for yml in sorted(p.glob("*.yaml")):
        try:
            data = (yaml.safe_load(yml.read_text(encoding="utf-8")) or {})
        except yaml.YAMLError as e:
            raise ValueError(f"{yml}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"{yml}: expected a mapping at the top level")
        # Allow single or multi-type files
        if "types" in data:
            entries = data["types"]
            if not isinstance(entries, list):
                raise ValueError(f"{yml}: 'types' must be a list")
        else:
            entries = [data]
        for entry in entries:
            if not isinstance(entry, dict):
                raise ValueError(f"{yml}: each type override must be a mapping")
            tid = entry.get("type_id")
            if not tid:
                raise ValueError(f"{yml}: override missing 'type_id'")
            defaults = entry.get("defaults") or {}
            if not isinstance(defaults, dict):
                raise ValueError(f"{yml}: 'defaults' for {tid} must be a mapping")
            aliases = entry.get("aliases") or []
            if not isinstance(aliases, list):
                raise ValueError(f"{yml}: 'aliases' for {tid} must be a list")
            overrides[str(tid)] = {
                "defaults": defaults,
                "aliases": [str(a) for a in aliases],
            }
    return overrides
