"""Logic for shortening cross-reference (cref) tokens for display."""

import re

_ARITY_RE = re.compile(r"``?\d+")


def _split_top_level_dots(name: str) -> list[str]:
    """Split at dots that are not inside generic braces or argument lists."""
    parts = []
    depth = 0
    start = 0
    for i, ch in enumerate(name):
        if ch in "{<([":
            depth += 1
        elif ch in "}>)]":
            depth = max(depth - 1, 0)
        elif ch == "." and depth == 0:
            parts.append(name[start:i])
            start = i + 1
    parts.append(name[start:])
    return parts


def format_cref(cref: str | None) -> str:
    """Shorten a cref for display.

    ``T:System.Collections.Generic.List`1`` -> ``List``,
    ``M:Foo.Bar.Run(System.Int32)`` -> ``Run(System.Int32)``,
    ``Dictionary{TKey,TValue}`` -> ``Dictionary<TKey,TValue>``.
    """
    if not cref:
        return ""

    # Remove the member-type prefix (T:, M:, P:, F:, E:, N:)
    name = cref.split(":", 1)[1] if re.match(r"^[A-Z!]:", cref) else cref
    name = _ARITY_RE.sub("", name)

    args = ""
    paren = name.find("(")
    if paren >= 0:
        name, args = name[:paren], name[paren:]

    short = _split_top_level_dots(name)[-1] or name
    return (short + args).replace("{", "<").replace("}", ">")
