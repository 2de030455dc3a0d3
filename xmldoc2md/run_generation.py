"""Orchestration logic for generating Markdown pages from documented sources."""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from xmldoc2md.builder import DocumentationBuilder
from xmldoc2md.csharp_extractor import CSharpDeclarationExtractor
from xmldoc2md.declaration import DeclarationExtractor
from xmldoc2md.documentation_plugin import DocumentationPlugin
from xmldoc2md.errors import MissingConfigurationError
from xmldoc2md.generation_report import FILE_ERROR, GenerationReport
from xmldoc2md.models import DocumentationProject
from xmldoc2md.render_config import RenderConfig
from xmldoc2md.render_page import PageRenderer
from xmldoc2md.run_plugins import load_plugins, run_plugins
from xmldoc2md.write_pages import write_pages

logger = logging.getLogger(__name__)


def enabled_input_folders(config: Mapping[str, Any]) -> list[Path]:
    """Input folders in configured order, leaving out disabled entries."""
    folders: list[Path] = []
    for entry in config.get("input_folders") or []:
        if isinstance(entry, Mapping):
            if not entry.get("enabled", True):
                continue
            path = str(entry.get("path") or "")
        else:
            path = str(entry)
        if path.strip():
            folders.append(Path(path))
    return folders


def build_project(
    folders: list[Path],
    extractor: DeclarationExtractor,
    report: GenerationReport,
    patterns: list[str] | None = None,
) -> DocumentationProject:
    """Parse every folder into one tree; namespaces merge across folders."""
    builder = DocumentationBuilder(extractor, report=report)
    for folder in folders:
        if not folder.is_dir():
            report.add(FILE_ERROR, str(folder), "Input folder does not exist")
            continue
        builder.add_folder(folder, patterns)
    return builder.project


def run_generation(
    config: Mapping[str, Any],
    report: GenerationReport | None = None,
    extractor: DeclarationExtractor | None = None,
    plugin_registry: Mapping[str, type[DocumentationPlugin]] | None = None,
) -> int:
    """Execute the full pipeline: parse, reclassify, render; returns pages written."""
    folders = enabled_input_folders(config)
    if not folders:
        msg = "No input folders configured"
        raise MissingConfigurationError(msg)
    output_folder = str(config.get("output_folder") or "")
    if not output_folder.strip():
        msg = "No output folder configured"
        raise MissingConfigurationError(msg)

    report = report or GenerationReport()
    extractor = extractor or CSharpDeclarationExtractor()
    patterns = list(config.get("source_patterns") or []) or None

    logger.info("Building documentation from %d input folders", len(folders))
    project = build_project(folders, extractor, report, patterns)

    plugins = load_plugins(config.get("plugins") or [], report, plugin_registry)
    run_plugins(project, plugins, report)

    out_root = Path(output_folder).resolve()
    out_root.mkdir(parents=True, exist_ok=True)
    renderer = PageRenderer(RenderConfig.from_config(dict(config)), report)
    written = write_pages(project, out_root, renderer)

    print(f"Generated {written} Markdown pages into: {out_root}")
    return written
