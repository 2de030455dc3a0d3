"""Logic for instantiating and running the classification plugin pipeline."""

import json
import logging
from collections.abc import Iterable, Mapping
from typing import Any

from xmldoc2md.documentation_plugin import DocumentationPlugin
from xmldoc2md.generation_report import PLUGIN_FAILURE, GenerationReport
from xmldoc2md.models import DocumentationProject
from xmldoc2md.plugin_registry import PLUGIN_REGISTRY

logger = logging.getLogger(__name__)


def _settings_text(settings: Any) -> str:
    if settings is None:
        return ""
    if isinstance(settings, str):
        return settings
    return json.dumps(settings)


def load_plugins(
    entries: Iterable[Mapping[str, Any]],
    report: GenerationReport,
    registry: Mapping[str, type[DocumentationPlugin]] | None = None,
) -> list[DocumentationPlugin]:
    """Instantiate the enabled plugins in configured order.

    Disabled entries are never instantiated. A plugin whose construction or
    settings load fails is reported and left out.
    """
    registry = PLUGIN_REGISTRY if registry is None else registry
    plugins: list[DocumentationPlugin] = []
    for entry in entries:
        name = str(entry.get("name", ""))
        if not entry.get("enabled", True):
            logger.debug("Plugin %s is disabled; skipped", name)
            continue

        plugin_cls = registry.get(name)
        if plugin_cls is None:
            report.add(PLUGIN_FAILURE, name or "<unnamed>", "Unknown plugin; skipped")
            continue

        try:
            plugin = plugin_cls()
            plugin.deserialize_settings(_settings_text(entry.get("settings")))
            plugin.clear_dirty()
        except Exception as e:
            logger.exception("Failed to load plugin %s", name)
            report.add(PLUGIN_FAILURE, name, f"Failed to load: {e}")
            continue
        plugins.append(plugin)
    return plugins


def run_plugins(
    project: DocumentationProject,
    plugins: Iterable[DocumentationPlugin],
    report: GenerationReport,
) -> list[DocumentationPlugin]:
    """Run each plugin over the whole tree in order; returns those that succeeded.

    Each plugin sees the kinds left by the previous ones. A failing plugin is
    reported and excluded; the remaining plugins still run.
    """
    succeeded: list[DocumentationPlugin] = []
    for plugin in plugins:
        logger.info("Running plugin %s", plugin.name)
        try:
            plugin.generate(project)
        except Exception as e:
            logger.exception("Plugin %s failed", plugin.name)
            report.add(PLUGIN_FAILURE, plugin.name, f"Failed during generate: {e}")
            continue
        succeeded.append(plugin)
    return succeeded
