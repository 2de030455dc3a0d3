"""Registry of classification plugins that can be enabled by name."""

from xmldoc2md.documentation_plugin import DocumentationPlugin
from xmldoc2md.kind_attribute_plugin import KindAttributePlugin

PLUGIN_REGISTRY: dict[str, type[DocumentationPlugin]] = {
    "KindAttributePlugin": KindAttributePlugin,
}
