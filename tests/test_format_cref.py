"""Tests for cross-reference shortening."""

from xmldoc2md.format_cref import format_cref


def test_format_cref_strips_prefix_and_namespace() -> None:
    """Verify member-type prefix and namespace removal."""
    assert format_cref("T:System.String") == "String"
    assert format_cref("P:Demo.Core.User.Name") == "Name"
    assert format_cref("test") == "test"


def test_format_cref_generics() -> None:
    """Verify arity removal and brace conversion."""
    assert format_cref("T:System.Collections.Generic.List`1") == "List"
    assert format_cref("T:System.Collections.Generic.List{T}") == "List<T>"
    cref = "T:System.Collections.Generic.Dictionary{System.String,System.Int32}"
    assert format_cref(cref) == "Dictionary<System.String,System.Int32>"


def test_format_cref_method_arguments() -> None:
    """Verify that method argument lists are kept intact."""
    assert format_cref("M:Foo.Bar.Run(System.Int32)") == "Run(System.Int32)"


def test_format_cref_empty() -> None:
    """Verify missing crefs."""
    assert format_cref(None) == ""
    assert format_cref("") == ""
