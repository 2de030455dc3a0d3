"""Logic for rendering one documentation page in Markdown."""

from xmldoc2md.format_inline import InlineFormatter
from xmldoc2md.generation_report import (
    EMPTY_DOCUMENTATION,
    EMPTY_NAME,
    GenerationReport,
)
from xmldoc2md.models import DocumentationItem
from xmldoc2md.render_config import RenderConfig
from xmldoc2md.render_prose import ProseRenderer
from xmldoc2md.sort_items import group_by_kind, sort_items
from xmldoc2md.tokenizer import Tokenizer


def _heading(level: int) -> str:
    return "#" * max(1, min(level, 6))


def _documented(item: DocumentationItem) -> bool:
    return bool(item.name.strip()) and bool(item.raw_tag_markup.strip())


class PageRenderer:
    """Renders a container item (and, inline, its nested containers) to Markdown.

    Heading levels relative to an item rendered at level L: kind groups and
    inline nested containers at L+1, member headings and the item's own
    sections at L+2, member sections at L+3.
    """

    def __init__(
        self,
        config: RenderConfig,
        report: GenerationReport | None = None,
        tokenizer: Tokenizer | None = None,
    ) -> None:
        """Initialize the renderer from the rendering configuration."""
        self.config = config
        self.report = report or GenerationReport()
        self.tokenizer = tokenizer or Tokenizer()
        self.prose = ProseRenderer(
            InlineFormatter(config.code_language),
            self.report,
            write_attributes=config.write_attributes,
        )

    def is_renderable(self, item: DocumentationItem) -> bool:
        """Check name and markup, reporting why an item is skipped."""
        if not item.name.strip():
            self.report.add(
                EMPTY_NAME,
                item.parent.full_name if item.parent else "<namespace>",
                f"Skipping {item.kind} with empty name",
            )
            return False
        if not item.raw_tag_markup.strip():
            self.report.add(
                EMPTY_DOCUMENTATION, item.full_name, "Empty documentation, skipped"
            )
            return False
        return True

    def file_name(self, item: DocumentationItem, parent_file_name: str = "") -> str:
        """File name (without extension), prefixed by the parent's file name."""
        name = self.tokenizer.file_name(item.name)
        return f"{parent_file_name}-{name}" if parent_file_name else name

    def render_page(self, item: DocumentationItem, file_name: str) -> str:
        """Render the page for ``item``, whose file is ``<file_name>.md``."""
        parts: list[str] = []
        if self.config.write_title:
            parts += [f"# {item.full_name}", ""]

        if self.config.generate_table_of_contents:
            parts.append("## Table of Contents")
            parts.extend(self._render_toc(item, file_name, depth=0))
            parts.append("")

        parts.extend(self._render_body(item, level=1))
        return "\n".join(parts).rstrip() + "\n"

    def _toc_entry(
        self, item: DocumentationItem, indent: str, heading: str | None
    ) -> str:
        label = f"{item.kind} {item.name}"
        # Anchors follow the heading text actually emitted for the item
        if heading is None:
            return f"{indent}- {label}"
        return f"{indent}- [{label}](#{self.tokenizer.anchor(heading)})"

    def _render_toc(
        self,
        item: DocumentationItem,
        file_name: str,
        depth: int,
        heading: str | None = None,
    ) -> list[str]:
        indent = "  " * depth
        if depth == 0 and heading is None and self.config.write_title:
            heading = item.full_name
        lines = [self._toc_entry(item, indent, heading)]
        members = sort_items(
            [m for m in item.members if _documented(m)], self.config.kind_order
        )

        for member in members:
            if not member.is_container:
                name = self.config.format_name(member.name, member.kind)
                lines.append(self._toc_entry(member, indent + "  ", name))

        for nested in members:
            if not nested.is_container:
                continue
            if self.config.inline_classes:
                name = self.config.format_name(nested.name, nested.kind)
                lines.extend(self._render_toc(nested, file_name, depth + 1, name))
            else:
                nested_file = self.file_name(nested, file_name)
                lines.append(
                    f"{indent}  - [{nested.kind} {nested.name}]({nested_file}.md)"
                )
        return lines

    def _render_body(self, item: DocumentationItem, level: int) -> list[str]:
        parts = self.prose.render(item, level + 1)

        members = [
            m for m in item.members if not m.is_container and self.is_renderable(m)
        ]
        for kind, group in group_by_kind(members, self.config.kind_order):
            title = self.config.title_for(kind)
            if title:
                parts += [f"{_heading(level + 1)} {title}", ""]
            for member in group:
                name = self.config.format_name(member.name, member.kind)
                parts += [f"{_heading(level + 2)} {name}", ""]
                parts.extend(self.prose.render(member, level + 2))

        if self.config.inline_classes:
            nested_items = [
                m for m in item.members if m.is_container and self.is_renderable(m)
            ]
            for nested in sort_items(nested_items, self.config.kind_order):
                name = self.config.format_name(nested.name, nested.kind)
                parts += [f"{_heading(level + 1)} {name}", ""]
                parts.extend(self._render_body(nested, level + 1))

        return parts
