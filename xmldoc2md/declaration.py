"""Declaration records produced by a source-language declaration extractor."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from xmldoc2md.models import CONTAINER_KINDS, Attribute


@dataclass(eq=False)
class Declaration:
    """One declared construct with its raw documentation comment.

    ``names`` holds more than one entry for statements such as ``int a, b;``.
    ``parent`` is the enclosing container declaration, or None at namespace level.
    """

    names: list[str]
    kind: str
    comment: str = ""
    attributes: list[Attribute] = field(default_factory=list)
    base_types: list[str] = field(default_factory=list)
    parent: Declaration | None = None
    namespace: str = ""
    line: int = 0

    @property
    def name(self) -> str:
        return self.names[0] if self.names else ""

    @property
    def is_container(self) -> bool:
        return self.kind in CONTAINER_KINDS


class DeclarationExtractor(ABC):
    """Scans one source file and yields its declarations in source order."""

    # Glob patterns of files this extractor understands.
    patterns: tuple[str, ...] = ()

    @abstractmethod
    def extract(self, text: str, path: str) -> list[Declaration]:
        """Return the declarations of ``text``; raise ExtractionError if unparseable."""
