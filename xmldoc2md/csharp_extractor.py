"""Lightweight C# declaration scanner.

Finds namespaces, types and their documented members together with the
``///`` (or ``/** */``) documentation comment and attribute lists preceding
each declaration. It is a tolerant scanner, not a compiler front end: method
bodies, accessor blocks and initializers are skipped as opaque blocks.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass

from xmldoc2md.declaration import Declaration, DeclarationExtractor
from xmldoc2md.errors import ExtractionError
from xmldoc2md.models import Attribute

_MODIFIERS = (
    "public|private|protected|internal|static|readonly|const|volatile|virtual|"
    "override|abstract|sealed|extern|unsafe|new|async|partial|required|fixed|"
    "ref|file"
)
_MODIFIERS_RE = re.compile(rf"^(?:(?:{_MODIFIERS})\s+)*")
_NAMESPACE_RE = re.compile(r"^namespace\s+([\w.]+)$")
_TYPE_RE = re.compile(
    rf"^(?:(?:{_MODIFIERS})\s+)*"
    r"(class|struct|interface|enum|record(?:\s+(?:class|struct))?)\s+(@?\w+)"
)
_TYPED_NAME_RE = re.compile(r"^(.*\S)\s+(@?[\w.]+)$", re.S)
_METHOD_NAME_RE = re.compile(r"(~?@?\w+)\s*(?:<[^()]*>)?\s*$")
_IDENT_RE = re.compile(r"^@?[A-Za-z_]\w*$")
_SKIPPED_MEMBER_RE = re.compile(
    r"\b(?:operator|delegate|event|implicit|explicit)\b|\bthis\s*\["
)
_NAMED_ARG_RE = re.compile(r"^(@?\w+)\s*=(?![=>])\s*(.*)$", re.S)

_KIND_BY_KEYWORD = {
    "class": "class",
    "record": "class",
    "record class": "class",
    "struct": "struct",
    "record struct": "struct",
    "interface": "interface",
    "enum": "enum",
}

_OPEN = "([{<"
_CLOSE = ")]}>"


def _scan_top_level(text: str) -> Iterator[tuple[int, str]]:
    """Yield ``(index, char)`` for characters outside brackets and literals."""
    depth = 0
    quote = ""
    i = 0
    while i < len(text):
        ch = text[i]
        if quote:
            if ch == "\\":
                i += 2
                continue
            if ch == quote:
                quote = ""
        elif ch in "\"'":
            quote = ch
        elif ch in _OPEN:
            depth += 1
        elif ch in _CLOSE:
            depth = max(depth - 1, 0)
        elif depth == 0:
            yield i, ch
        i += 1


def split_top_level(text: str, sep: str = ",") -> list[str]:
    """Split at separators outside brackets and string literals."""
    parts = []
    start = 0
    for i, ch in _scan_top_level(text):
        if ch == sep:
            parts.append(text[start:i])
            start = i + 1
    parts.append(text[start:])
    return [p.strip() for p in parts if p.strip()]


def _find_top_level(text: str, token: str) -> int:
    """Index of a top-level ``=>`` or assignment ``=``, or -1."""
    for i, ch in _scan_top_level(text):
        if token == "=>" and text.startswith("=>", i):
            return i
        if token == "=" and ch == "=":
            prev = text[i - 1] if i else ""
            nxt = text[i + 1] if i + 1 < len(text) else ""
            if (not prev or prev not in "=!<>") and (not nxt or nxt not in "=>"):
                return i
    return -1


def _matching_bracket(text: str, start: int) -> int:
    """Index of the bracket closing ``text[start]``, or -1."""
    depth = 0
    quote = ""
    i = start
    while i < len(text):
        ch = text[i]
        if quote:
            if ch == "\\":
                i += 2
                continue
            if ch == quote:
                quote = ""
        elif ch in "\"'":
            quote = ch
        elif ch in "([":
            depth += 1
        elif ch in ")]":
            depth -= 1
            if depth == 0:
                return i
        i += 1
    return -1


def parse_attribute_list(inner: str) -> list[Attribute]:
    """Parse the inside of ``[...]`` into attributes.

    ``[field: A, B(1, Name = "x")]`` -> ``A``, ``B`` with arguments
    ``{"": "1", "Name": '"x"'}``. Positional arguments share the "" key,
    joined with ", ".
    """
    inner = re.sub(r"^\s*\w+\s*:(?!:)", "", inner)
    attributes = []
    for part in split_top_level(inner):
        paren = part.find("(")
        name = (part[:paren] if paren >= 0 else part).strip()
        if not name:
            continue
        arguments: dict[str, str] = {}
        if paren >= 0:
            close = _matching_bracket(part, paren)
            args_text = part[paren + 1 : close if close >= 0 else len(part)]
            for arg in split_top_level(args_text):
                m = _NAMED_ARG_RE.match(arg)
                if m:
                    arguments[m.group(1)] = m.group(2).strip()
                elif "" in arguments:
                    arguments[""] += f", {arg}"
                else:
                    arguments[""] = arg
        attributes.append(Attribute(name=name, arguments=arguments))
    return attributes


@dataclass
class _Frame:
    kind: str  # "namespace", "type" or "opaque"
    name: str = ""
    declaration: Declaration | None = None


class _Scanner:
    """Single-use scanner state for one file."""

    def __init__(self, text: str, path: str) -> None:
        self.text = text
        self.path = path
        self.line = 1
        self.frames: list[_Frame] = []
        self.file_namespace = ""
        self.header: list[str] = []
        self.header_line = 0
        self.doc_lines: list[str] = []
        self.doc_closed = False
        self.declarations: list[Declaration] = []

    # -- helpers ---------------------------------------------------------

    def _error(self, message: str) -> ExtractionError:
        return ExtractionError(self.path, message, self.line)

    @property
    def _opaque(self) -> bool:
        return bool(self.frames) and self.frames[-1].kind == "opaque"

    @property
    def _header_empty(self) -> bool:
        return not "".join(self.header).strip()

    def _append(self, chunk: str) -> None:
        if self._opaque:
            return
        if self._header_empty and chunk.strip():
            self.header_line = self.line
        self.header.append(chunk)

    def _reset(self) -> None:
        self.header = []
        self.doc_lines = []
        self.doc_closed = False

    def _namespace(self) -> str:
        names = [f.name for f in self.frames if f.kind == "namespace"]
        if self.file_namespace:
            names.insert(0, self.file_namespace)
        return ".".join(names)

    def _enclosing_type(self) -> Declaration | None:
        if self.frames and self.frames[-1].kind == "type":
            return self.frames[-1].declaration
        return None

    def _comment(self, raw: str, is_doc: bool) -> None:
        if self._opaque or not self._header_empty:
            return
        if is_doc and not self.doc_closed:
            self.doc_lines.append(raw)
        elif not is_doc and self.doc_lines:
            # An ordinary comment ends the documentation comment.
            self.doc_closed = True

    def _emit(
        self,
        names: list[str],
        kind: str,
        attributes: list[Attribute],
        base_types: list[str] | None = None,
    ) -> Declaration:
        decl = Declaration(
            names=[n.lstrip("@") for n in names],
            kind=kind,
            comment="\n".join(self.doc_lines),
            attributes=attributes,
            base_types=base_types or [],
            parent=self._enclosing_type(),
            namespace=self._namespace(),
            line=self.header_line,
        )
        self.declarations.append(decl)
        return decl

    # -- scanning --------------------------------------------------------

    def run(self) -> list[Declaration]:
        text = self.text
        n = len(text)
        i = 0
        at_line_start = True
        while i < n:
            ch = text[i]
            if ch == "\n":
                self.line += 1
                at_line_start = True
                self._append(ch)
                i += 1
                continue
            if at_line_start and ch == "#":
                end = text.find("\n", i)
                i = n if end < 0 else end
                continue
            if not ch.isspace():
                at_line_start = False

            if text.startswith("//", i):
                end = text.find("\n", i)
                end = n if end < 0 else end
                comment = text[i:end]
                is_doc = comment.startswith("///") and not comment.startswith("////")
                self._comment(comment, is_doc)
                i = end
            elif text.startswith("/*", i):
                end = text.find("*/", i + 2)
                if end < 0:
                    raise self._error("Unterminated block comment")
                comment = text[i : end + 2]
                self._comment(comment, comment.startswith("/**") and comment != "/**/")
                self.line += comment.count("\n")
                i = end + 2
            elif ch == '"':
                i = self._skip_string(i)
            elif ch == "'":
                i = self._skip_char(i)
            elif ch == "{":
                self._open_block()
                i += 1
            elif ch == "}":
                if not self.frames:
                    raise self._error("Unbalanced '}'")
                self.frames.pop()
                self._reset()
                i += 1
            elif ch == ";":
                if not self._opaque:
                    self._statement()
                    self._reset()
                i += 1
            else:
                self._append(ch)
                i += 1

        if self.frames:
            raise self._error("Unbalanced '{' at end of file")
        return self.declarations

    def _skip_string(self, i: int) -> int:
        text = self.text
        if text.startswith('"""', i):
            end = text.find('"""', i + 3)
            if end < 0:
                raise self._error("Unterminated raw string literal")
            j = end + 2
            while j + 1 < len(text) and text[j + 1] == '"':
                j += 1
        else:
            verbatim = "@" in text[max(i - 2, 0) : i]
            j = i + 1
            while True:
                if j >= len(text):
                    raise self._error("Unterminated string literal")
                ch = text[j]
                if verbatim and ch == '"':
                    if text.startswith('""', j):
                        j += 2
                        continue
                    break
                if not verbatim and ch == "\\":
                    j += 2
                    continue
                if not verbatim and ch == "\n":
                    raise self._error("Newline in string literal")
                if ch == '"':
                    break
                j += 1
        literal = text[i : j + 1]
        self._append(literal)
        self.line += literal.count("\n")
        return j + 1

    def _skip_char(self, i: int) -> int:
        j = i + 2 if self.text.startswith("\\", i + 1) else i + 1
        end = self.text.find("'", j + 1)
        if end < 0 or "\n" in self.text[i:end]:
            raise self._error("Unterminated character literal")
        self._append(self.text[i : end + 1])
        return end + 1

    # -- classification --------------------------------------------------

    def _split_header(self) -> tuple[list[Attribute], str]:
        text = "".join(self.header).strip()
        attributes: list[Attribute] = []
        while text.startswith("["):
            close = _matching_bracket(text, 0)
            if close < 0:
                break
            attributes.extend(parse_attribute_list(text[1:close]))
            text = text[close + 1 :].strip()
        return attributes, " ".join(text.split())

    def _open_block(self) -> None:
        if self._opaque:
            self.frames.append(_Frame("opaque"))
            return

        attributes, text = self._split_header()
        ns = _NAMESPACE_RE.match(text)
        type_match = _TYPE_RE.match(text)
        if ns:
            self.frames.append(_Frame("namespace", name=ns.group(1)))
        elif type_match:
            decl = self._declare_type(type_match, text, attributes)
            if decl.is_container:
                self.frames.append(_Frame("type", name=decl.name, declaration=decl))
            else:
                self.frames.append(_Frame("opaque"))
        else:
            if self._enclosing_type() is not None:
                self._declare_member(text, attributes, block=True)
            self.frames.append(_Frame("opaque"))
        self._reset()

    def _statement(self) -> None:
        attributes, text = self._split_header()
        if not text:
            return
        ns = _NAMESPACE_RE.match(text)
        type_match = _TYPE_RE.match(text)
        if ns and not self.frames:
            self.file_namespace = ns.group(1)
        elif type_match:
            # Body-less declaration such as `record Point(int X, int Y);`
            self._declare_type(type_match, text, attributes)
        elif self._enclosing_type() is not None:
            self._declare_member(text, attributes, block=False)

    def _declare_type(
        self, m: re.Match, text: str, attributes: list[Attribute]
    ) -> Declaration:
        keyword = " ".join(m.group(1).split())
        rest = text[m.end() :].strip()
        # Skip generic parameters and record primary-constructor parameters.
        while rest[:1] in ("<", "("):
            if rest[0] == "(":
                close = _matching_bracket(rest, 0)
            else:
                close = _matching_angle(rest)
            if close < 0:
                break
            rest = rest[close + 1 :].strip()
        base_types: list[str] = []
        if rest.startswith(":"):
            base_text = re.split(r"\bwhere\b", rest[1:], maxsplit=1)[0]
            base_types = split_top_level(base_text)
        kind = _KIND_BY_KEYWORD[keyword]
        return self._emit([m.group(2)], kind, attributes, base_types)

    def _declare_member(
        self, text: str, attributes: list[Attribute], *, block: bool
    ) -> None:
        if not text or _SKIPPED_MEMBER_RE.search(text):
            return

        arrow = _find_top_level(text, "=>")
        decl = text[:arrow].strip() if arrow >= 0 else text
        assign = _find_top_level(decl, "=")

        paren = self._method_paren(decl) if assign < 0 else -1
        if paren >= 0:
            head = decl[:paren]
            m = _METHOD_NAME_RE.search(head)
            if not m or m.group(1).startswith("~"):
                return
            return_type = _MODIFIERS_RE.sub("", head[: m.start()]).strip()
            owner = self._enclosing_type()
            if not return_type or (owner is not None and m.group(1) == owner.name):
                return  # constructor
            self._emit([m.group(1)], "method", attributes)
            return

        if assign < 0 and (block or arrow >= 0):
            m = _TYPED_NAME_RE.match(_MODIFIERS_RE.sub("", decl))
            if m:
                self._emit([m.group(2).split(".")[-1]], "property", attributes)
            return

        names = self._field_names(decl)
        if names:
            self._emit(names, "field", attributes)

    @staticmethod
    def _method_paren(decl: str) -> int:
        for i, ch in enumerate(decl):
            if ch == "(" and _METHOD_NAME_RE.search(decl[:i]):
                return i
        return -1

    @staticmethod
    def _field_names(decl: str) -> list[str]:
        segments = split_top_level(_MODIFIERS_RE.sub("", decl))
        names = []
        for index, seg in enumerate(segments):
            assign = _find_top_level(seg, "=")
            target = (seg[:assign] if assign >= 0 else seg).strip()
            if index == 0:
                m = _TYPED_NAME_RE.match(target)
                if not m:
                    return []
                target = m.group(2)
            if not _IDENT_RE.match(target):
                return []
            names.append(target)
        return names


def _matching_angle(text: str) -> int:
    depth = 0
    for i, ch in enumerate(text):
        if ch == "<":
            depth += 1
        elif ch == ">":
            depth -= 1
            if depth == 0:
                return i
    return -1


class CSharpDeclarationExtractor(DeclarationExtractor):
    """Declaration extractor for C# source files."""

    patterns = ("*.cs",)

    def extract(self, text: str, path: str) -> list[Declaration]:
        """Scan ``text``; raises ExtractionError on unbalanced braces or literals."""
        return _Scanner(text, path).run()
