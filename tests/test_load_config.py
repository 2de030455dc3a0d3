"""Tests for configuration loading and merging."""

from pathlib import Path

import yaml

from xmldoc2md.deep_merge import deep_merge
from xmldoc2md.load_config import DEFAULT_CONFIG, load_config


def test_deep_merge_scalars() -> None:
    """Verify scalar replacement in deep merge."""
    base = {"a": 1, "b": 2}
    update = {"b": 3, "c": 4}
    merged = deep_merge(base, update)
    assert merged == {"a": 1, "b": 3, "c": 4}


def test_deep_merge_nested() -> None:
    """Verify recursive merging of dictionaries."""
    base = {"nested": {"x": 1, "y": 2}}
    update = {"nested": {"y": 3, "z": 4}}
    merged = deep_merge(base, update)
    assert merged == {"nested": {"x": 1, "y": 3, "z": 4}}
    assert base == {"nested": {"x": 1, "y": 2}}


def test_deep_merge_arrays_replace() -> None:
    """Verify that arrays are replaced."""
    base = {"kind_order": ["enum", "method"]}
    update = {"kind_order": ["field"]}
    assert deep_merge(base, update) == {"kind_order": ["field"]}


def test_load_config_defaults() -> None:
    """Verify that the default config is loaded when no path is provided."""
    config = load_config(None)
    assert config["input_folders"] == []
    assert config["output_folder"] == ""
    assert config["source_patterns"] == ["*.cs"]
    assert config["render"]["write_title"] is True
    assert config["render"]["kind_titles"] == [
        "Enums",
        "Methods",
        "Properties",
        "Fields",
    ]


def test_load_config_missing_file(tmp_path: Path) -> None:
    """Verify that a missing file means defaults."""
    assert load_config(str(tmp_path / "absent.yml")) == DEFAULT_CONFIG


def test_load_config_does_not_share_defaults() -> None:
    """Verify that mutating a loaded config leaves the defaults alone."""
    config = load_config(None)
    config["render"]["kind_order"].append("event")
    config["input_folders"].append("Assets")
    assert DEFAULT_CONFIG["render"]["kind_order"] == [
        "enum",
        "method",
        "property",
        "field",
    ]
    assert DEFAULT_CONFIG["input_folders"] == []


def test_load_config_with_file(tmp_path: Path) -> None:
    """Verify that user config correctly overrides defaults."""
    config_file = tmp_path / "config.yml"
    config_data = {
        "input_folders": ["Assets/Scripts", {"path": "Packages", "enabled": False}],
        "output_folder": "Docs",
        "render": {"inline_classes": True},
        "plugins": [{"name": "KindAttributePlugin", "settings": {"items": []}}],
    }
    config_file.write_text(yaml.dump(config_data), encoding="utf-8")

    loaded = load_config(str(config_file))
    assert loaded["input_folders"][1] == {"path": "Packages", "enabled": False}
    assert loaded["output_folder"] == "Docs"
    assert loaded["render"]["inline_classes"] is True
    assert loaded["render"]["generate_table_of_contents"] is True  # Default
    assert loaded["plugins"][0]["name"] == "KindAttributePlugin"


def test_load_config_empty_file(tmp_path: Path) -> None:
    """Verify that an empty YAML document is treated as no overrides."""
    config_file = tmp_path / "config.yml"
    config_file.write_text("", encoding="utf-8")
    assert load_config(str(config_file)) == DEFAULT_CONFIG
