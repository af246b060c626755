# src/app.py
from __future__ import annotations

import argparse
import copy
import json
import logging
import sys
from pathlib import Path
from typing import Dict, Any, List, Optional

import yaml

# local imports
from host import WidgetAreas, PrintingSidebarSource
from registry import FieldRegistry

logger = logging.getLogger("app")


# ---------------------------
# Config loading
# ---------------------------

DEFAULT_CONFIG: Dict[str, Any] = {
    # widget areas the in-process host starts with
    "sidebars": [
        # {"id": "sidebar-1", "name": "Footer", "widgets": ["<p>hi</p>"]}
    ],
    "placeholders": {
        # type_id → placeholder text, e.g. "sidebar": "Pick a widget area"
    },
    "overrides_dir": None,
    "output": {
        "pretty": True,
    },
}


def load_config(path: Optional[str]) -> Dict[str, Any]:
    cfg = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if not p.exists():
            logger.info("config not found: %s (using defaults)", p)
            return cfg
        try:
            with p.open("r", encoding="utf-8") as f:
                user = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"{p}: {e}") from e
        if not isinstance(user, dict):
            raise ValueError(f"{p}: expected a mapping at the top level")
        # shallow merge is enough here; empty sections keep their defaults
        for k, v in user.items():
            if v is None and k in cfg:
                continue
            if isinstance(v, dict) and k in cfg and isinstance(cfg[k], dict):
                cfg[k].update(v)
            else:
                cfg[k] = v
        _check_config(cfg, p)
    return cfg


def _check_config(cfg: Dict[str, Any], p: Path) -> None:
    for key in ("placeholders", "output"):
        if not isinstance(cfg[key], dict):
            raise ValueError(f"{p}: '{key}' must be a mapping")
    if not isinstance(cfg["sidebars"], list) or not all(isinstance(s, dict) for s in cfg["sidebars"]):
        raise ValueError(f"{p}: 'sidebars' must be a list of mappings")
    for entry in cfg["sidebars"]:
        if not isinstance(entry.get("widgets") or [], list):
            raise ValueError(f"{p}: widgets of sidebar {entry.get('id')!r} must be a list")
    if cfg["overrides_dir"] is not None and not isinstance(cfg["overrides_dir"], str):
        raise ValueError(f"{p}: 'overrides_dir' must be a path")


def build_widget_areas(config: Dict[str, Any]) -> WidgetAreas:
    areas = WidgetAreas()
    for entry in config.get("sidebars") or []:
        sidebar = areas.register_sidebar(
            str(entry.get("id", "")),
            str(entry.get("name", "")),
            str(entry.get("description", "")),
        )
        for html in entry.get("widgets") or []:
            areas.add_widget(sidebar.id, str(html))
    return areas


def build_registry(config: Dict[str, Any], areas: Optional[WidgetAreas] = None) -> FieldRegistry:
    areas = areas if areas is not None else build_widget_areas(config)
    return FieldRegistry(
        sidebar_source=PrintingSidebarSource(areas),
        overrides_dir=config.get("overrides_dir"),
        placeholders=config.get("placeholders") or {},
    )


def load_fields(path: str) -> List[Dict[str, Any]]:
    """Read field definitions from YAML or JSON: a list, or {"fields": [...]}."""
    p = Path(path)
    if not p.is_file():
        raise ValueError(f"Fields file not found: {p}")
    try:
        data = yaml.safe_load(p.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"{p}: {e}") from e
    if isinstance(data, dict) and "fields" in data:
        data = data["fields"]
    if not isinstance(data, list) or not all(isinstance(f, dict) for f in data):
        raise ValueError(f"{p}: expected a list of field definitions")
    return data


# ---------------------------
# Commands
# ---------------------------

def _cmd_normalize(args, registry: FieldRegistry, config: Dict[str, Any]) -> int:
    fields = registry.normalize_all(load_fields(args.fields))
    pretty = bool(config["output"].get("pretty", True))
    print(json.dumps(fields, indent=2 if pretty else None, ensure_ascii=False))
    return 0


def _cmd_label(args, registry: FieldRegistry, config: Dict[str, Any]) -> int:
    field: Dict[str, Any] = {"type": args.type}
    if args.fields:
        if not args.id:
            raise ValueError("--fields needs --id to pick a field")
        matches = [f for f in load_fields(args.fields) if f.get("id") == args.id]
        if not matches:
            raise ValueError(f"No field with id {args.id!r} in {args.fields}")
        field = matches[0]
        if registry.resolve_type(field.get("type")) != registry.resolve_type(args.type):
            raise ValueError(f"Field {args.id!r} has type {field.get('type')!r}, not {args.type!r}")
    field = registry.normalize(field)
    print(registry.get_option_label(field, args.value))
    return 0


def _cmd_types(args, registry: FieldRegistry, config: Dict[str, Any]) -> int:
    for entry in registry.types():
        print(f"{entry['type_id']}\t{entry['label']}\t{', '.join(entry['aliases'])}")
    return 0


# ---------------------------
# App bootstrap
# ---------------------------

def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Normalize admin field definitions")
    parser.add_argument("--config", "-c", help="Path to config.yaml", default=None)
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p_norm = sub.add_parser("normalize", help="Print fully defaulted field definitions as JSON")
    p_norm.add_argument("fields", help="YAML/JSON file with field definitions")
    p_norm.set_defaults(func=_cmd_normalize)

    p_label = sub.add_parser("label", help="Print the display label of a stored value")
    p_label.add_argument("type", help="Field type id or alias")
    p_label.add_argument("value", help="Stored option value")
    p_label.add_argument("--fields", help="Take the field definition from this file", default=None)
    p_label.add_argument("--id", help="Field id to pick from --fields", default=None)
    p_label.set_defaults(func=_cmd_label)

    p_types = sub.add_parser("types", help="List registered field types")
    p_types.set_defaults(func=_cmd_types)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(name)s] %(message)s",
    )

    try:
        config = load_config(args.config)
        registry = build_registry(config)
        return args.func(args, registry, config)
    except ValueError as e:
        print(f"[app] error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
