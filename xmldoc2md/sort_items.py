"""Logic for ordering and grouping sibling items by configured kind order."""

from itertools import groupby

from xmldoc2md.models import DocumentationItem


def sort_items(
    items: list[DocumentationItem], kind_order: list[str]
) -> list[DocumentationItem]:
    """Sort by kind position, then name.

    Kinds missing from ``kind_order`` sort after all known kinds, in the order
    they are first encountered.
    """
    unknown: dict[str, int] = {}
    for it in items:
        if it.kind not in kind_order and it.kind not in unknown:
            unknown[it.kind] = len(unknown)

    def key(it: DocumentationItem) -> tuple[int, str]:
        if it.kind in kind_order:
            return (kind_order.index(it.kind), it.name)
        return (len(kind_order) + unknown[it.kind], it.name)

    return sorted(items, key=key)


def group_by_kind(
    items: list[DocumentationItem], kind_order: list[str]
) -> list[tuple[str, list[DocumentationItem]]]:
    """Return ``(kind, members)`` groups in sorted order."""
    return [
        (kind, list(group))
        for kind, group in groupby(sort_items(items, kind_order), key=lambda m: m.kind)
    ]
