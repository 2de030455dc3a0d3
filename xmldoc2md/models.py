"""Data models for the documentation tree built from source declarations."""

from __future__ import annotations

import weakref
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

CONTAINER_KINDS = frozenset({"class", "struct", "interface"})


@dataclass(frozen=True)
class Attribute:
    """A metadata attribute attached to a declaration, e.g. ``[Output(Order = 1)]``."""

    name: str
    # Argument name -> literal text; positional arguments use "".
    arguments: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        """Freeze the argument mapping so attributes stay immutable after parse."""
        object.__setattr__(self, "arguments", MappingProxyType(dict(self.arguments)))


@dataclass(eq=False)
class DocumentationItem:
    """Represents one documented declaration (type or member)."""

    name: str
    kind: str  # class/struct/interface/method/property/field or a plugin kind
    raw_tag_markup: str
    attributes: list[Attribute] = field(default_factory=list)
    base_types: list[str] = field(default_factory=list)
    members: list[DocumentationItem] = field(default_factory=list)
    _parent_ref: weakref.ReferenceType[DocumentationItem] | None = field(
        default=None, repr=False
    )

    @property
    def parent(self) -> DocumentationItem | None:
        """Enclosing item, or None for items declared directly in a namespace."""
        return self._parent_ref() if self._parent_ref is not None else None

    @property
    def full_name(self) -> str:
        """Dot-joined chain of ancestor names ending with this item's name."""
        parent = self.parent
        if parent is None:
            return self.name
        return f"{parent.full_name}.{self.name}"

    @property
    def is_container(self) -> bool:
        return self.kind in CONTAINER_KINDS

    def add_member(self, member: DocumentationItem) -> None:
        """Append a child; the child only keeps a weak reference back."""
        member._parent_ref = weakref.ref(self)
        self.members.append(member)


@dataclass
class Namespace:
    """A namespace scope grouping top-level documented items."""

    name: str  # "" for the global namespace
    package_name: str
    directory: str  # dotted sub-path used for the output folder
    items: list[DocumentationItem] = field(default_factory=list)


@dataclass
class DocumentationProject:
    """Root container for one generation run."""

    namespaces: list[Namespace] = field(default_factory=list)

    def namespace(self, name: str, package_name: str) -> Namespace:
        """Return the namespace called ``name``, creating it on first use."""
        for ns in self.namespaces:
            if ns.name == name:
                return ns
        ns = Namespace(name=name, package_name=package_name, directory=name)
        self.namespaces.append(ns)
        return ns

    def iter_items(self) -> list[DocumentationItem]:
        """Return every item in the tree, depth-first in declaration order."""
        out: list[DocumentationItem] = []

        def walk(items: list[DocumentationItem]) -> None:
            for it in items:
                out.append(it)
                walk(it.members)

        for ns in self.namespaces:
            walk(ns.items)
        return out
