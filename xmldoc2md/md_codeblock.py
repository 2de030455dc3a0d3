"""Utility for generating Markdown code blocks."""


def md_codeblock(lang: str, code: str) -> str:
    """Generate a fenced Markdown code block."""
    return f"```{lang}\n{code.strip()}\n```"
