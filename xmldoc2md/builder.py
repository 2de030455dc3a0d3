"""Logic for building the documentation tree from extracted declarations."""

import logging
from collections.abc import Iterable
from pathlib import Path

from xmldoc2md.clean_comment import clean_comment
from xmldoc2md.declaration import Declaration, DeclarationExtractor
from xmldoc2md.errors import ExtractionError
from xmldoc2md.generation_report import EMPTY_NAME, FILE_ERROR, GenerationReport
from xmldoc2md.models import DocumentationItem, DocumentationProject

logger = logging.getLogger(__name__)


class DocumentationBuilder:
    """Builds one ``DocumentationProject`` from any number of input folders.

    Undocumented declarations are dropped together with everything declared
    inside them. Namespaces are merged by name across files and folders.
    """

    def __init__(
        self,
        extractor: DeclarationExtractor,
        project: DocumentationProject | None = None,
        report: GenerationReport | None = None,
    ) -> None:
        """Initialize the builder with the extractor used for every source file."""
        self.extractor = extractor
        self.project = project or DocumentationProject()
        self.report = report or GenerationReport()

    def add_folder(self, folder: Path, patterns: Iterable[str] | None = None) -> int:
        """Scan every matching file under ``folder``; returns files processed."""
        package_name = folder.resolve().name
        files: set[Path] = set()
        for pattern in patterns or self.extractor.patterns:
            files.update(p for p in folder.rglob(pattern) if p.is_file())

        processed = 0
        for path in sorted(files):
            try:
                text = path.read_text(encoding="utf-8-sig")
                declarations = self.extractor.extract(text, str(path))
            except (ExtractionError, OSError, UnicodeDecodeError) as e:
                self.report.add(FILE_ERROR, str(path), f"Skipping file: {e}")
                continue
            self.add_declarations(declarations, package_name)
            processed += 1
        logger.info("Processed %d source files from %s", processed, folder)
        return processed

    def add_declarations(
        self, declarations: Iterable[Declaration], package_name: str
    ) -> None:
        """Attach one file's declarations (in source order) to the tree."""
        # (declaration, item) for open containers; item is None when dropped.
        stack: list[tuple[Declaration, DocumentationItem | None]] = []

        for decl in declarations:
            while stack and stack[-1][0] is not decl.parent:
                stack.pop()

            if decl.parent is not None and not stack:
                logger.warning(
                    "Declaration %s refers to a parent that was not seen; skipped",
                    decl.name,
                )
                continue

            if stack and stack[-1][1] is None:
                # Enclosing container was dropped; so is everything inside it.
                if decl.is_container:
                    stack.append((decl, None))
                continue

            items = self._create_items(decl)
            if not items:
                if decl.is_container:
                    stack.append((decl, None))
                continue

            parent_item = stack[-1][1] if stack else None
            for item in items:
                if parent_item is not None:
                    parent_item.add_member(item)
                else:
                    ns = self.project.namespace(decl.namespace, package_name)
                    ns.items.append(item)

            if decl.is_container:
                stack.append((decl, items[0]))

    def _create_items(self, decl: Declaration) -> list[DocumentationItem]:
        markup = clean_comment(decl.comment)
        if not markup:
            return []

        items = []
        for name in decl.names:
            if not name.strip():
                self.report.add(
                    EMPTY_NAME,
                    f"{decl.namespace or '<global>'} line {decl.line}",
                    f"Skipping {decl.kind} with empty name",
                )
                continue
            items.append(
                DocumentationItem(
                    name=name,
                    kind=decl.kind,
                    raw_tag_markup=markup,
                    attributes=list(decl.attributes),
                    base_types=list(decl.base_types),
                )
            )
        return items
