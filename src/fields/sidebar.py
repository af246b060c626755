from __future__ import annotations
import logging
from typing import Any, Dict, Optional

from .base import parse_args
from .choice import normalize_object_choice
from .model import FieldConfig, Option
from .protocol import SidebarSource

logger = logging.getLogger(__name__)

DEFAULT_PLACEHOLDER = "Select a sidebar"


class SidebarField:
    """
    Choice field whose options are the host's registered sidebars.

    Options are re-read from the injected source on every call; nothing is cached.
    """

    def __init__(self, source: Optional[SidebarSource] = None, placeholder: str = DEFAULT_PLACEHOLDER):
        self.source = source
        self.placeholder = placeholder

    def normalize(self, field: FieldConfig) -> FieldConfig:
        field = parse_args(field, {"type": "sidebar", "placeholder": self.placeholder})
        # caller-supplied options are always replaced by the live sidebars
        field["options"] = self.query(field)
        return normalize_object_choice(field)

    def query(self, field: FieldConfig) -> Dict[str, Dict[str, Any]]:
        options: Dict[str, Dict[str, Any]] = {}
        if self.source is None:
            return options
        for sidebar in self.source.registered_sidebars():
            options[sidebar.id] = Option(value=sidebar.id, label=sidebar.name).as_dict()
        logger.debug("sidebar field %r: %d option(s)", field.get("id", ""), len(options))
        return options

    def get_option_label(self, field: FieldConfig, value: Any) -> str:
        """Rendered widgets of sidebar `value`, or '' when it is not active."""
        if self.source is None or not self.source.is_active_sidebar(str(value)):
            return ""
        return self.source.render_sidebar(str(value))
