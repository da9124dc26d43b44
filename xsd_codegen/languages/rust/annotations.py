"""
yaserde annotation synthesis.

Derives the target namespace of a schema node and renders the yaserde
directives that keep generated structs faithful to the schema's namespace
layout. The three struct cases (no namespace, namespace without prefix,
prefixed namespace) render differently because yaserde treats default
namespace documents and prefixed ones differently on the wire.
"""

from typing import List, Optional

from ...core.nodes import Namespace, SchemaNode
from ...core.templates import TemplateEngine, create_template_engine
from ...logging_config import get_logger
from .config import DEFAULT_DERIVES

logger = get_logger(__name__)

TARGET_NAMESPACE_ATTRIBUTE = "targetNamespace"

STRUCT_TEMPLATE = (
    "#[derive({{ derives | join(', ') }})]\n"
    "#[yaserde("
    "{%- if prefix %}prefix = \"{{ prefix }}\", namespace = \"{{ prefix }}: {{ uri }}\""
    "{%- elif uri %}namespace = \"{{ uri }}\""
    "{%- endif %})]\n"
)

ELEMENT_TEMPLATE = (
    "  #[yaserde("
    "{%- if prefix %}prefix = \"{{ prefix }}\", {% endif -%}"
    "rename = \"{{ name }}\")]\n"
)

ATTRIBUTE_TEMPLATE = (
    "  #[yaserde(attribute, "
    "{%- if prefix %} prefix = \"{{ prefix }}\",{% endif %} "
    "rename = \"{{ name }}\")]\n"
)

TUPLE_STRUCT_TEMPLATE = "#[derive({{ derives | join(', ') }})]\n"

ANNOTATION_TEMPLATES = {
    "struct.rs.j2": STRUCT_TEMPLATE,
    "element.rs.j2": ELEMENT_TEMPLATE,
    "attribute.rs.j2": ATTRIBUTE_TEMPLATE,
    "tuple_struct.rs.j2": TUPLE_STRUCT_TEMPLATE,
}


def target_namespace(node: SchemaNode) -> Optional[Namespace]:
    """
    Namespace declaration whose URI matches the node's ``targetNamespace``.

    A prefixed declaration is preferred when the default namespace binds
    the same URI.
    """
    uri = node.attribute(TARGET_NAMESPACE_ATTRIBUTE)
    if uri is None:
        return None

    matches = [ns for ns in node.namespaces() if ns.uri == uri]
    if not matches:
        logger.debug("targetNamespace %s has no matching declaration", uri)
        return None

    return next((ns for ns in matches if ns.prefix), matches[0])


class AnnotationRenderer:
    """Renders yaserde directives through Jinja2 templates."""

    def __init__(self, derives: Optional[List[str]] = None,
                 template_engine: Optional[TemplateEngine] = None):
        self.derives = list(derives or DEFAULT_DERIVES)
        self.template_engine = template_engine or create_template_engine()
        for name, content in ANNOTATION_TEMPLATES.items():
            if not self.template_engine.template_exists(name):
                self.template_engine.add_template(name, content)

    def struct_annotation(self, target_ns: Optional[Namespace]) -> str:
        """Derive line plus the struct-level yaserde namespace directive."""
        context = {
            "derives": self.derives,
            "prefix": target_ns.prefix if target_ns is not None else None,
            "uri": target_ns.uri if target_ns is not None else None,
        }
        return self.template_engine.render_template("struct.rs.j2", context)

    def element_annotation(self, name: str, target_ns: Optional[Namespace]) -> str:
        """Field directive for a child element serialized as ``name``."""
        context = {
            "name": name,
            "prefix": target_ns.prefix if target_ns is not None else None,
        }
        return self.template_engine.render_template("element.rs.j2", context)

    def attribute_annotation(self, name: str) -> str:
        """Field directive for an attribute, splitting ``prefix:local`` names."""
        prefix, separator, local = name.partition(":")
        if not separator:
            prefix, local = None, name
        context = {"name": local, "prefix": prefix}
        return self.template_engine.render_template("attribute.rs.j2", context)

    def tuple_struct_macros(self) -> str:
        """Derive line for tuple structs wrapping a single value."""
        return self.template_engine.render_template(
            "tuple_struct.rs.j2", {"derives": self.derives}
        )


_default_renderer = None


def get_default_renderer() -> AnnotationRenderer:
    """Get the default annotation renderer instance."""
    global _default_renderer
    if _default_renderer is None:
        _default_renderer = AnnotationRenderer()
    return _default_renderer


def struct_annotation(target_ns: Optional[Namespace]) -> str:
    return get_default_renderer().struct_annotation(target_ns)


def element_annotation(name: str, target_ns: Optional[Namespace]) -> str:
    return get_default_renderer().element_annotation(name, target_ns)


def attribute_annotation(name: str) -> str:
    return get_default_renderer().attribute_annotation(name)


def tuple_struct_macros() -> str:
    return get_default_renderer().tuple_struct_macros()
