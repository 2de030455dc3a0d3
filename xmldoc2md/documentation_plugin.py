"""Interface for classification plugins run between building and rendering."""

from abc import ABC, abstractmethod
from typing import Any

from xmldoc2md.models import DocumentationProject


class DocumentationPlugin(ABC):
    """A post-parse pass that may change ``kind`` on any item of the tree.

    Plugins must not rename items, add or remove members, or move items
    between parents. Settings are an opaque text blob owned by the plugin.
    """

    def __init__(self) -> None:
        """Start with clean (not dirty) settings."""
        self._dirty = False

    @property
    def name(self) -> str:
        """Registry name of the plugin."""
        return type(self).__name__

    @abstractmethod
    def generate(self, project: DocumentationProject) -> None:
        """Mutate item kinds in place."""

    def provide_configuration_ui(self) -> dict[str, Any] | None:
        """Describe editable settings for a host UI; None when nothing to edit."""
        return None

    @abstractmethod
    def serialize_settings(self) -> str:
        """Return the plugin's settings as text."""

    @abstractmethod
    def deserialize_settings(self, text: str) -> None:
        """Replace the settings from text produced by ``serialize_settings``."""

    def is_dirty(self) -> bool:
        return self._dirty

    def clear_dirty(self) -> None:
        self._dirty = False

    def mark_dirty(self) -> None:
        self._dirty = True
