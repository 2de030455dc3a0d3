"""Tests for the end-to-end generation pipeline and command line."""

import json
from pathlib import Path

import pytest
import yaml

from xmldoc2md.errors import MissingConfigurationError
from xmldoc2md.generate_docs import main
from xmldoc2md.generation_report import DUPLICATE_PAGE, FILE_ERROR, GenerationReport
from xmldoc2md.load_config import load_config
from xmldoc2md.run_generation import enabled_input_folders, run_generation

NODE_SOURCE = """\
namespace Demo.Nodes
{
    /// <summary>A processing node.</summary>
    public class Node
    {
        /// <summary>Input mass.</summary>
        [Input] public float Mass;

        /// <summary>Output speed.</summary>
        [Output] public float Speed;

        /// <summary>Runs the node.</summary>
        /// <param name="dt">time step</param>
        public void Run(float dt) { }

        /// <summary>Nested settings.</summary>
        public class Settings
        {
            /// <summary>Enabled flag.</summary>
            public bool Enabled;
        }

        public int Undocumented;
    }
}
"""


def _source_folder(root: Path, name: str, files: dict[str, str]) -> Path:
    folder = root / name
    folder.mkdir(parents=True)
    for file_name, text in files.items():
        (folder / file_name).write_text(text, encoding="utf-8")
    return folder


def _config(inputs: list, out: Path, **extra: object) -> dict:
    config = load_config(None)
    config["input_folders"] = inputs
    config["output_folder"] = str(out)
    config.update(extra)
    return config


def test_generate_linked_pages(tmp_path: Path) -> None:
    """Verify the output layout with nested classes in separate files."""
    scripts = _source_folder(tmp_path, "Scripts", {"Node.cs": NODE_SOURCE})
    out = tmp_path / "docs"

    written = run_generation(_config([str(scripts)], out))

    page_dir = out / "Scripts" / "Demo" / "Nodes"
    assert written == 2  # noqa: PLR2004
    assert sorted(p.name for p in page_dir.iterdir()) == ["Node-Settings.md", "Node.md"]

    node_md = (page_dir / "Node.md").read_text(encoding="utf-8")
    assert node_md.startswith("# Node\n")
    assert "  - [class Settings](Node-Settings.md)" in node_md
    assert "### method Run\n\nRuns the node.\n\n#### Parameters\n- dt: time step" in (
        node_md
    )
    assert "Undocumented" not in node_md

    settings_md = (page_dir / "Node-Settings.md").read_text(encoding="utf-8")
    assert settings_md.startswith("# Node.Settings\n")
    assert "### field Enabled" in settings_md


def test_generate_inline_pages(tmp_path: Path) -> None:
    """Verify that inlining nested classes writes a single page."""
    scripts = _source_folder(tmp_path, "Scripts", {"Node.cs": NODE_SOURCE})
    out = tmp_path / "docs"
    config = _config([str(scripts)], out)
    config["render"]["inline_classes"] = True

    assert run_generation(config) == 1
    node_md = (out / "Scripts" / "Demo" / "Nodes" / "Node.md").read_text(
        encoding="utf-8"
    )
    assert "## Settings\n\nNested settings." in node_md


def test_generate_with_plugin(tmp_path: Path) -> None:
    """Verify that reclassified fields group under their new kind."""
    scripts = _source_folder(tmp_path, "Scripts", {"Node.cs": NODE_SOURCE})
    out = tmp_path / "docs"
    config = _config(
        [str(scripts)],
        out,
        plugins=[
            {
                "name": "KindAttributePlugin",
                "enabled": True,
                "settings": {
                    "items": [
                        {
                            "old_kind": "field",
                            "attribute_name": "Output",
                            "new_kind": "output-field",
                        }
                    ]
                },
            }
        ],
    )
    config["render"]["kind_order"] = ["method", "field", "output-field"]
    config["render"]["kind_titles"] = ["Methods", "Inputs", "Outputs"]

    run_generation(config)
    node_md = (out / "Scripts" / "Demo" / "Nodes" / "Node.md").read_text(
        encoding="utf-8"
    )
    assert "## Inputs\n\n### field Mass" in node_md
    assert "## Outputs\n\n### output-field Speed" in node_md


def test_namespaces_merge_across_input_folders(tmp_path: Path) -> None:
    """Verify that two folders sharing a namespace write into one directory."""
    folder_a = _source_folder(
        tmp_path,
        "A",
        {"Alpha.cs": "namespace Foo {\n/// <summary>A.</summary>\nclass Alpha { }\n}"},
    )
    folder_b = _source_folder(
        tmp_path,
        "B",
        {"Beta.cs": "namespace Foo {\n/// <summary>B.</summary>\nclass Beta { }\n}"},
    )
    disabled = _source_folder(
        tmp_path,
        "C",
        {"Gamma.cs": "namespace Foo {\n/// <summary>C.</summary>\nclass Gamma { }\n}"},
    )
    out = tmp_path / "docs"
    inputs = [
        str(folder_a),
        {"path": str(folder_b)},
        {"path": str(disabled), "enabled": False},
    ]

    assert run_generation(_config(inputs, out)) == 2  # noqa: PLR2004
    ns_dir = out / "A" / "Foo"
    assert sorted(p.name for p in ns_dir.iterdir()) == ["Alpha.md", "Beta.md"]
    assert not (out / "C").exists()


def test_file_errors_do_not_stop_generation(tmp_path: Path) -> None:
    """Verify that an unparseable file is reported and others are written."""
    scripts = _source_folder(
        tmp_path,
        "Scripts",
        {"Broken.cs": "public class Broken {", "Node.cs": NODE_SOURCE},
    )
    report = GenerationReport()
    config = _config([str(scripts)], tmp_path / "docs")
    assert run_generation(config, report) == 2  # noqa: PLR2004
    assert len(report.by_category(FILE_ERROR)) == 1


def test_colliding_file_names_are_reported(tmp_path: Path) -> None:
    """Verify that a second item mapping to an existing page is reported."""
    source = (
        "namespace Demo\n{\n"
        "    /// <summary>First.</summary>\n"
        "    public class FooBar { }\n\n"
        "    /// <summary>Second.</summary>\n"
        "    public class Foo_Bar { }\n"
        "}\n"
    )
    scripts = _source_folder(tmp_path, "Scripts", {"Foo.cs": source})
    out = tmp_path / "docs"
    report = GenerationReport()

    assert run_generation(_config([str(scripts)], out), report) == 1
    page_dir = out / "Scripts" / "Demo"
    assert [p.name for p in page_dir.iterdir()] == ["Foo-Bar.md"]
    duplicates = report.by_category(DUPLICATE_PAGE)
    assert len(duplicates) == 1
    assert duplicates[0].subject in ("FooBar", "Foo_Bar")


def test_missing_configuration_is_fatal(tmp_path: Path) -> None:
    """Verify that missing inputs or output abort before anything is written."""
    scripts = _source_folder(tmp_path, "Scripts", {"Node.cs": NODE_SOURCE})
    out = tmp_path / "docs"

    with pytest.raises(MissingConfigurationError, match="input folders"):
        run_generation(_config([], out))
    with pytest.raises(MissingConfigurationError, match="input folders"):
        run_generation(_config([{"path": str(scripts), "enabled": False}], out))
    no_output = _config([str(scripts)], out)
    no_output["output_folder"] = ""
    with pytest.raises(MissingConfigurationError, match="output folder"):
        run_generation(no_output)
    assert not out.exists()


def test_enabled_input_folders() -> None:
    """Verify folder entry normalization."""
    config = {
        "input_folders": [
            "Assets",
            {"path": "Packages"},
            {"path": "Old", "enabled": False},
            "",
        ]
    }
    assert enabled_input_folders(config) == [Path("Assets"), Path("Packages")]


def test_cli_writes_pages_and_report(tmp_path: Path) -> None:
    """Verify command-line overrides and the JSON report."""
    scripts = _source_folder(tmp_path, "Scripts", {"Node.cs": NODE_SOURCE})
    out = tmp_path / "docs"
    report_path = tmp_path / "report.json"
    config_file = tmp_path / "config.yml"
    config_file.write_text(
        yaml.dump({"render": {"write_title": True}}), encoding="utf-8"
    )

    exit_code = main(
        [
            str(scripts),
            "--out",
            str(out),
            "--config",
            str(config_file),
            "--no-title",
            "--no-toc",
            "--report",
            str(report_path),
        ]
    )

    assert exit_code == 0
    node_md = (out / "Scripts" / "Demo" / "Nodes" / "Node.md").read_text(
        encoding="utf-8"
    )
    assert node_md.startswith("A processing node.\n")
    content = json.loads(report_path.read_text(encoding="utf-8"))
    assert content["meta"]["pages_written"] == 2  # noqa: PLR2004
    assert "issues" in content
    assert "category_counts" in content["stats"]


def test_cli_missing_configuration_exits(tmp_path: Path) -> None:
    """Verify that the command line turns missing configuration into an exit."""
    with pytest.raises(SystemExit, match="No input folders configured"):
        main(["--out", str(tmp_path / "docs")])
