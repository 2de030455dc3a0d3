"""Logic for writing documentation pages to disk."""

from pathlib import Path

from xmldoc2md.generation_report import DUPLICATE_PAGE
from xmldoc2md.models import DocumentationItem, DocumentationProject, Namespace
from xmldoc2md.render_page import PageRenderer
from xmldoc2md.sort_items import sort_items
from xmldoc2md.tokenizer import format_directory_name


def output_dir_for_namespace(out_root: Path, namespace: Namespace) -> Path:
    """<out_root>/<package>/<Namespace/As/Path>/"""
    sub_path = format_directory_name(namespace.directory)
    return out_root / namespace.package_name / sub_path


def write_pages(
    project: DocumentationProject,
    out_root: Path,
    renderer: PageRenderer,
) -> int:
    """Write one page per top-level item (and per nested container when linked)."""
    written = 0
    written_paths: set[Path] = set()
    for ns in project.namespaces:
        ns_dir = output_dir_for_namespace(out_root, ns)
        print(f"Writing pages for namespace {ns.name or '<global>'} into {ns_dir}...")
        for item in sort_items(ns.items, renderer.config.kind_order):
            written += _write_item_page(
                item, ns_dir, renderer, parent_file_name="", written_paths=written_paths
            )
    renderer.report.pages_written += written
    return written


def _write_item_page(
    item: DocumentationItem,
    folder: Path,
    renderer: PageRenderer,
    parent_file_name: str,
    written_paths: set[Path],
) -> int:
    if not renderer.is_renderable(item):
        return 0

    file_name = renderer.file_name(item, parent_file_name)
    path = folder / f"{file_name}.md"
    # First item to claim a path keeps it
    if path in written_paths:
        renderer.report.add(
            DUPLICATE_PAGE,
            item.full_name,
            f"Page {path} was already written for another item, skipped",
        )
        return 0
    md = renderer.render_page(item, file_name)
    folder.mkdir(parents=True, exist_ok=True)
    path.write_text(md, encoding="utf-8")
    written_paths.add(path)
    written = 1

    if not renderer.config.inline_classes:
        nested_items = [m for m in item.members if m.is_container]
        for nested in sort_items(nested_items, renderer.config.kind_order):
            written += _write_item_page(
                nested, folder, renderer, file_name, written_paths
            )
    return written
