"""Logic for stripping comment decoration from documentation comments."""

import re

_LINE_SPLIT_RE = re.compile(r"\r\n|\r|\n")


def clean_comment(raw: str) -> str:
    """Strip comment markers from each line and drop lines left blank.

    Handles ``///`` line comments as well as ``/** ... */`` blocks with
    ``*`` continuation prefixes. Returns "" when nothing but decoration remains.
    """
    if not raw or not raw.strip():
        return ""

    # `*` is only decoration inside a /** */ block
    block = raw.lstrip().startswith("/**")
    cleaned = []
    for line in _LINE_SPLIT_RE.split(raw):
        text = line.strip().lstrip("/").strip()
        if block:
            if text.endswith("*/"):
                text = text[:-2].rstrip()
            text = text.lstrip("*").strip()
        if text:
            cleaned.append(text)
    return "\n".join(cleaned)
