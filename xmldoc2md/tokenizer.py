"""Logic for splitting identifiers into file-name and anchor tokens."""

import re

_TOKEN_RE = re.compile(
    r"""
    [A-Z][a-z]*     # TitleCase word or lone capital (ID -> I, D)
    | [a-z]+        # lower-case run (already tokenized names, m_score)
    | [0-9]+        # digit run
    """,
    re.VERBOSE,
)


class Tokenizer:
    """Splits CamelCase, underscored and hyphenated identifiers into tokens."""

    def tokenize(self, text: str) -> list[str]:
        """Split an identifier at case transitions and digit boundaries."""
        # Strip generic arity `1
        text = re.sub(r"`\d+", "", text)
        return _TOKEN_RE.findall(text)

    def file_name(self, name: str) -> str:
        """Join tokens with "-" preserving case: GetUserById -> Get-User-By-Id."""
        return "-".join(self.tokenize(name)) or "Unknown"

    def anchor(self, name: str) -> str:
        """Lower-case form of ``file_name`` for in-page anchors."""
        return self.file_name(name).lower()


def format_directory_name(name: str) -> str:
    """Turn a dotted namespace into a relative path: Foo.Bar -> Foo/Bar."""
    return "/".join(p for p in name.split(".") if p)
