"""Command-line entry point for generating Markdown documentation."""

import argparse
import logging
from collections.abc import Sequence
from typing import Any

from xmldoc2md.errors import MissingConfigurationError
from xmldoc2md.generation_report import GenerationReport
from xmldoc2md.load_config import load_config
from xmldoc2md.run_generation import run_generation

_RENDER_FLAGS = {
    "title": "write_title",
    "toc": "generate_table_of_contents",
    "attributes": "write_attributes",
    "inline_classes": "inline_classes",
}


def apply_overrides(config: dict[str, Any], args: argparse.Namespace) -> None:
    """Let command-line values take precedence over the configuration file."""
    if args.input_folders:
        config["input_folders"] = [str(p) for p in args.input_folders]
    if args.out:
        config["output_folder"] = args.out
    render = config.setdefault("render", {})
    for arg_name, key in _RENDER_FLAGS.items():
        value = getattr(args, arg_name)
        if value is not None:
            render[key] = value


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        description="Generate Markdown pages from XML documentation comments.",
    )
    ap.add_argument(
        "input_folders",
        nargs="*",
        help="Source folders to scan (overrides input_folders in the config)",
    )
    ap.add_argument("--out", help="Output folder (overrides output_folder)")
    ap.add_argument("--config", help="Path to configuration file")
    ap.add_argument(
        "--title",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Write the item's full name as the page title",
    )
    ap.add_argument(
        "--toc",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Generate a table of contents on each page",
    )
    ap.add_argument(
        "--attributes",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Show attributes above each item's documentation",
    )
    ap.add_argument(
        "--inline-classes",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Render nested classes inline instead of as separate pages",
    )
    ap.add_argument("--report", help="Write a JSON report of skipped items here")
    ap.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return ap


def main(argv: Sequence[str] | None = None) -> int:
    """Run the generation process."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)
    apply_overrides(config, args)

    report = GenerationReport()
    try:
        run_generation(config, report)
    except MissingConfigurationError as e:
        raise SystemExit(str(e)) from e

    if args.report:
        report.generate_report(args.report)
        print(f"Report written to: {args.report}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
