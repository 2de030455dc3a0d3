"""Logic for rendering an item's documentation markup as Markdown sections."""

from xmldoc2md.errors import TagMarkupError
from xmldoc2md.format_cref import format_cref
from xmldoc2md.format_inline import InlineFormatter
from xmldoc2md.generation_report import (
    EMPTY_DOCUMENTATION,
    MARKUP_ERROR,
    GenerationReport,
)
from xmldoc2md.md_codeblock import md_codeblock
from xmldoc2md.models import Attribute, DocumentationItem
from xmldoc2md.tag_markup import TagElement, parse_tag_markup

# Tags rendered as bullet lists under one shared heading.
_LIST_HEADINGS = {
    "param": "Parameters",
    "typeparam": "Typeparameters",
    "exception": "Exceptions",
    "seealso": "See Also",
}

# Sections with a fixed meaning that are left out when empty
_TEXT_SECTIONS = frozenset({"returns", "value", "remarks", "example"})


def _capitalize(name: str) -> str:
    return name[:1].upper() + name[1:]


def _heading(level: int) -> str:
    return "#" * max(1, min(level, 6))


def format_attribute(attr: Attribute) -> str:
    """Format an attribute as ``Name`` or ``Name(value, key = value)``."""
    if not attr.arguments:
        return attr.name
    args = ", ".join(
        f"{key} = {value}" if key else value for key, value in attr.arguments.items()
    )
    return f"{attr.name}({args})"


class ProseRenderer:
    """Renders the tag markup of one item into Markdown lines."""

    def __init__(
        self,
        formatter: InlineFormatter,
        report: GenerationReport,
        *,
        write_attributes: bool = False,
    ) -> None:
        """Initialize the renderer with its inline formatter and report."""
        self.formatter = formatter
        self.report = report
        self.write_attributes = write_attributes

    def render(self, item: DocumentationItem, level: int) -> list[str]:
        """Render ``item``'s markup; section headings use ``level + 1``."""
        if not item.raw_tag_markup.strip():
            self.report.add(
                EMPTY_DOCUMENTATION, item.full_name, "Empty documentation, skipped"
            )
            return []

        parts: list[str] = []
        if self.write_attributes and item.attributes:
            parts.extend(f"*{format_attribute(a)}*" for a in item.attributes)
            parts.append("")

        try:
            root = parse_tag_markup(item.raw_tag_markup)
        except TagMarkupError as e:
            self.report.add(
                MARKUP_ERROR, item.full_name, f"Error parsing documentation: {e}"
            )
            parts += [
                f"**Error parsing documentation markup:** {e}",
                "",
                md_codeblock("xml", item.raw_tag_markup),
                "",
            ]
            return parts

        for element in root.elements():
            parts.extend(self._render_element(element, root, level))
        return parts

    def _render_element(
        self, el: TagElement, parent: TagElement, level: int
    ) -> list[str]:
        heading = _heading(level + 1)
        name = el.name

        if name in _LIST_HEADINGS:
            siblings = parent.elements(name)
            parts = []
            if el is siblings[0]:
                parts.append(f"{heading} {_LIST_HEADINGS[name]}")
            parts.append(self._list_entry(el))
            if el is siblings[-1]:
                parts.append("")
            return parts

        if name == "summary":
            text = self.formatter.format(el)
            return [text, ""] if text else []

        # returns/value, remarks/example and any custom tag get their own heading
        text = self.formatter.format(el, bold_code=name == "returns")
        if text:
            return [f"{heading} {_capitalize(name)}", text, ""]
        # empty custom tags (<inheritdoc/>) keep their heading
        if name in _TEXT_SECTIONS:
            return []
        return [f"{heading} {_capitalize(name)}", ""]

    def _list_entry(self, el: TagElement) -> str:
        text = self.formatter.format(el)
        if el.name in ("param", "typeparam"):
            return f"- {el.get('name') or ''}: {text}"
        if el.name == "exception":
            return f"- {format_cref(el.get('cref'))}: {text}"

        # seealso
        cref = el.get("cref")
        href = el.get("href")
        if cref:
            return f"- {format_cref(cref)}"
        if href:
            return f"- [{text or href}]({href})"
        return f"- {text}"
