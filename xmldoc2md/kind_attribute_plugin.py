"""Plugin that reclassifies items carrying a given attribute."""

import json
import logging
from dataclasses import asdict, dataclass
from typing import Any

from xmldoc2md.documentation_plugin import DocumentationPlugin
from xmldoc2md.models import DocumentationItem, DocumentationProject

logger = logging.getLogger(__name__)


@dataclass
class KindReplacement:
    """Items of ``old_kind`` with attribute ``attribute_name`` become ``new_kind``."""

    old_kind: str = ""
    attribute_name: str = ""
    new_kind: str = ""


def _attribute_matches(attribute_name: str, wanted: str) -> bool:
    """``Output`` matches both ``[Output]`` and ``[OutputAttribute]``."""
    if attribute_name == wanted:
        return True
    return attribute_name.removesuffix("Attribute") == wanted.removesuffix("Attribute")


class KindAttributePlugin(DocumentationPlugin):
    """Rewrites kinds by attribute; the first matching replacement wins."""

    def __init__(self, replacements: list[KindReplacement] | None = None) -> None:
        """Initialize with an optional list of replacement rules."""
        super().__init__()
        self.replacements: list[KindReplacement] = list(replacements or [])

    def generate(self, project: DocumentationProject) -> None:
        """Apply the replacements to every item, recursing into members."""
        for ns in project.namespaces:
            self._process_items(ns.items)

    def _process_items(self, items: list[DocumentationItem]) -> None:
        for item in items:
            for rule in self.replacements:
                if item.kind == rule.old_kind and any(
                    _attribute_matches(a.name, rule.attribute_name)
                    for a in item.attributes
                ):
                    logger.debug(
                        "Reclassifying %s: %s -> %s",
                        item.full_name,
                        item.kind,
                        rule.new_kind,
                    )
                    item.kind = rule.new_kind
                    break
            self._process_items(item.members)

    def add_replacement(self, replacement: KindReplacement) -> None:
        self.replacements.append(replacement)
        self.mark_dirty()

    def remove_replacement(self, index: int) -> None:
        del self.replacements[index]
        self.mark_dirty()

    def provide_configuration_ui(self) -> dict[str, Any]:
        """Describe the replacement table as a list of editable text fields."""
        return {
            "title": "Replacements",
            "fields": [
                {"key": "old_kind", "label": "Old Kind"},
                {"key": "attribute_name", "label": "Attribute Name"},
                {"key": "new_kind", "label": "New Kind"},
            ],
            "items": [asdict(r) for r in self.replacements],
        }

    def serialize_settings(self) -> str:
        return json.dumps({"items": [asdict(r) for r in self.replacements]})

    def deserialize_settings(self, text: str) -> None:
        """Load replacements from JSON; empty or "{}" text means no rules."""
        data = json.loads(text) if text and text.strip() else {}
        items = (data.get("items") or []) if isinstance(data, dict) else []
        self.replacements = [
            KindReplacement(
                old_kind=str(i.get("old_kind", "")),
                attribute_name=str(i.get("attribute_name", "")),
                new_kind=str(i.get("new_kind", "")),
            )
            for i in items
            if isinstance(i, dict)
        ]
