"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from xmldoc2md.deep_merge import deep_merge
from xmldoc2md.render_config import (
    DEFAULT_KIND_ORDER,
    DEFAULT_KIND_TEMPLATES,
    DEFAULT_KIND_TITLES,
)

DEFAULT_CONFIG: dict[str, Any] = {
    "input_folders": [],
    "output_folder": "",
    "source_patterns": ["*.cs"],
    "render": {
        "write_title": True,
        "generate_table_of_contents": True,
        "write_attributes": False,
        "inline_classes": False,
        "kind_order": list(DEFAULT_KIND_ORDER),
        "kind_templates": list(DEFAULT_KIND_TEMPLATES),
        "kind_titles": list(DEFAULT_KIND_TITLES),
        "code_language": "csharp",
    },
    "plugins": [],
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)
    return config
