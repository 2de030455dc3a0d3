"""Logic for converting inline documentation tags to Markdown."""

import re

from xmldoc2md.format_cref import format_cref
from xmldoc2md.md_codeblock import md_codeblock
from xmldoc2md.md_table import md_table
from xmldoc2md.tag_markup import TagElement

_BLANK_RUN_RE = re.compile(r"\n[ \t]*\n(?:[ \t]*\n)+")


class InlineFormatter:
    """Renders the content of one tag element as inline Markdown.

    ``c``, ``see``, ``paramref`` and ``typeparamref`` become code spans,
    ``code`` becomes a fenced block, ``para`` its own paragraph and ``list``
    a bullet, numbered or table list. Unknown tags contribute their content.
    """

    def __init__(self, code_language: str = "csharp") -> None:
        """Initialize the formatter with the fence language for ``code`` blocks."""
        self.code_language = code_language

    def format(self, element: TagElement | None, *, bold_code: bool = False) -> str:
        """Format the children of ``element``; ``bold_code`` renders ``c`` as bold."""
        if element is None:
            return ""

        out: list[str] = []
        for node in element.children:
            if isinstance(node, str):
                out.append(node)
            else:
                out.append(self._format_element(node, bold_code=bold_code))
        return _BLANK_RUN_RE.sub("\n\n", "".join(out)).strip()

    def _format_element(self, el: TagElement, *, bold_code: bool) -> str:
        name = el.name
        if name == "c":
            return f"**{el.text.strip()}**" if bold_code else f"`{el.text.strip()}`"
        if name == "code":
            return f"\n{md_codeblock(self.code_language, el.text)}\n"
        if name == "para":
            return f"\n\n{self.format(el, bold_code=bold_code)}\n\n"
        if name == "see":
            return self._format_see(el)
        if name in ("paramref", "typeparamref"):
            return f"`{el.get('name') or ''}`"
        if name == "list":
            return self.format_list(el)
        if name == "br":
            return "\n"
        return self.format(el, bold_code=bold_code)

    def _format_see(self, el: TagElement) -> str:
        cref = el.get("cref")
        href = el.get("href")
        langword = el.get("langword")
        if cref:
            return f"`{format_cref(cref)}`"
        if href:
            return f"[{self.format(el) or href}]({href})"
        if langword:
            return f"`{langword}`"
        return self.format(el)

    def _term_and_description(self, item: TagElement) -> tuple[str, str]:
        term = self.format(item.element("term"))
        description_el = item.element("description")
        # <item>text</item> without term/description
        if description_el is None and item.element("term") is None:
            return "", self.format(item)
        return term, self.format(description_el)

    def format_list(self, el: TagElement) -> str:
        """Format a ``list`` element; surrounded by blank lines."""
        list_type = (el.get("type") or "bullet").lower()
        items = [self._term_and_description(i) for i in el.elements("item")]

        if list_type == "table":
            header = el.element("listheader")
            headers = ["Term", "Description"]
            if header is not None:
                h_term, h_desc = self._term_and_description(header)
                headers = [h_term or "Term", h_desc or "Description"]
            body = md_table(headers, [[t, d] for t, d in items])
        else:
            lines = []
            for index, (term, description) in enumerate(items, start=1):
                marker = f"{index}." if list_type == "number" else "-"
                label = f"**{term}**: " if term else ""
                lines.append(f"{marker} {label}{description}")
            body = "\n".join(lines)

        return f"\n\n{body}\n\n"
