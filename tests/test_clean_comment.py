"""Tests for comment decoration stripping."""

from xmldoc2md.clean_comment import clean_comment


def test_clean_comment_triple_slash() -> None:
    """Verify that /// markers and surrounding whitespace are removed."""
    raw = "    /// <summary>\n    /// Fetches a user.\n    /// </summary>"
    assert clean_comment(raw) == "<summary>\nFetches a user.\n</summary>"


def test_clean_comment_drops_blank_lines() -> None:
    """Verify that lines left empty after cleanup are dropped, order kept."""
    raw = "/// first\n///\n///    \n/// second"
    assert clean_comment(raw) == "first\nsecond"


def test_clean_comment_block_comment() -> None:
    """Verify /** */ blocks with * continuation prefixes."""
    raw = "/**\n * <summary>Hi</summary>\n */"
    assert clean_comment(raw) == "<summary>Hi</summary>"


def test_clean_comment_keeps_markup() -> None:
    """Verify that content inside tags is not altered."""
    raw = '/// <see cref="T:Foo.Bar"/> and <c>a / b</c>'
    assert clean_comment(raw) == '<see cref="T:Foo.Bar"/> and <c>a / b</c>'


def test_clean_comment_tabs_and_crlf() -> None:
    """Verify tab indentation and Windows line endings."""
    raw = "///\t<item>One</item>\r\n///\t<item>Two</item>"
    assert clean_comment(raw) == "<item>One</item>\n<item>Two</item>"


def test_clean_comment_all_decoration() -> None:
    """Verify that decoration-only input yields an empty string."""
    assert clean_comment("") == ""
    assert clean_comment("   ") == ""
    assert clean_comment("///\n///   \n//") == ""


def test_clean_comment_keeps_leading_asterisk_in_line_comments() -> None:
    """Verify that * starting a /// line is content, not decoration."""
    raw = "/// <summary>\n/// *Important*: value\n/// </summary>"
    assert clean_comment(raw) == "<summary>\n*Important*: value\n</summary>"
