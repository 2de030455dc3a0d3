"""Rendering options consumed by the Markdown renderer."""

import logging
from dataclasses import dataclass, field
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_KIND_ORDER = ["enum", "method", "property", "field"]
DEFAULT_KIND_TEMPLATES = ["enum {0}", "method {0}", "property {0}", "field {0}"]
DEFAULT_KIND_TITLES = ["Enums", "Methods", "Properties", "Fields"]


@dataclass
class RenderConfig:
    """Toggles plus the index-aligned kind order/template/title tables."""

    write_title: bool = True
    generate_table_of_contents: bool = True
    write_attributes: bool = False
    inline_classes: bool = False
    kind_order: list[str] = field(default_factory=lambda: list(DEFAULT_KIND_ORDER))
    kind_templates: list[str] = field(
        default_factory=lambda: list(DEFAULT_KIND_TEMPLATES)
    )
    kind_titles: list[str] = field(default_factory=lambda: list(DEFAULT_KIND_TITLES))
    code_language: str = "csharp"

    def __post_init__(self) -> None:
        """Keep the three kind tables index-aligned."""
        if not self.kind_order:
            self.kind_order = list(DEFAULT_KIND_ORDER)
            self.kind_templates = list(DEFAULT_KIND_TEMPLATES)
            self.kind_titles = list(DEFAULT_KIND_TITLES)
        if len(self.kind_templates) != len(self.kind_order):
            self.kind_templates = [f"{k} {{0}}" for k in self.kind_order]
        if len(self.kind_titles) != len(self.kind_order):
            self.kind_titles = [f"{k}s" for k in self.kind_order]

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> "RenderConfig":
        """Build from the ``render`` section of a loaded configuration."""
        render = config.get("render") or {}
        return cls(
            write_title=bool(render.get("write_title", True)),
            generate_table_of_contents=bool(
                render.get("generate_table_of_contents", True)
            ),
            write_attributes=bool(render.get("write_attributes", False)),
            inline_classes=bool(render.get("inline_classes", False)),
            kind_order=[str(k) for k in render.get("kind_order") or []],
            kind_templates=[str(t) for t in render.get("kind_templates") or []],
            kind_titles=[str(t) for t in render.get("kind_titles") or []],
            code_language=str(render.get("code_language") or "csharp"),
        )

    def kind_index(self, kind: str) -> int | None:
        """Position of ``kind`` in the configured order, or None if absent."""
        try:
            return self.kind_order.index(kind)
        except ValueError:
            return None

    def title_for(self, kind: str) -> str | None:
        index = self.kind_index(kind)
        return self.kind_titles[index] if index is not None else None

    def format_name(self, name: str, kind: str) -> str:
        """Apply the kind's name template; ``{0}`` is the name, ``{1}`` the kind."""
        index = self.kind_index(kind)
        if index is None:
            return name
        template = self.kind_templates[index]
        try:
            return template.format(name, kind)
        except (IndexError, KeyError, ValueError):
            logger.warning("Invalid template %r for kind %r", template, kind)
            return name
