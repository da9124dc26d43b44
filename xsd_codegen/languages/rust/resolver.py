"""
Rust resolver implementation.

Answers the tree walker's questions about names, types, comments and
yaserde annotations for Rust output.
"""

from typing import List, Optional

from ...core.config import GeneratorConfig
from ...core.naming import NamingCase
from ...core.nodes import Namespace, SchemaNode, describe_node
from ...core.resolver import EntityParser, SchemaResolver
from ...core.templates import create_template_engine
from .annotations import AnnotationRenderer, target_namespace
from .config import RustConfig
from .entities import StructField
from .fields import AttributeParseError, any_attribute_field, attributes_to_fields
from .naming import create_rust_sanitizer
from .types import RustType, RustTypeMapper


class RustResolver(SchemaResolver):
    """Resolver for Rust structs with yaserde annotations."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize Rust resolver with configuration."""
        super().__init__(RustConfig.from_config(config or RustConfig()))

        # Initialize naming
        self.sanitizer = create_rust_sanitizer()

        # Initialize type system
        self.type_mapper = RustTypeMapper(
            builtin_prefix=self.config.builtin_prefix,
            type_overrides=self.config.type_overrides,
        )

        # Templates get the naming rules as filters
        template_engine = create_template_engine()
        template_engine.add_filter("field_name", self.field_name)
        template_engine.add_filter("type_name", self.type_name)
        self.annotations = AnnotationRenderer(self.config.derives, template_engine)

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "rust"

    def field_name(self, name: str) -> str:
        return self.sanitizer.sanitize_name(name, NamingCase.SNAKE_CASE)

    def type_name(self, name: str) -> str:
        return self.sanitizer.sanitize_name(name, NamingCase.PASCAL_CASE)

    def map_type(self, type_token: str, target_ns: Optional[Namespace]) -> RustType:
        return self.type_mapper.map_type(type_token, target_ns)

    def resolve_type(self, type_token: str, target_ns: Optional[Namespace]) -> str:
        return self.type_mapper.resolve_type(type_token, target_ns)

    def target_namespace(self, node: SchemaNode) -> Optional[Namespace]:
        return target_namespace(node)

    def struct_annotation(self, target_ns: Optional[Namespace]) -> str:
        return self.annotations.struct_annotation(target_ns)

    def element_annotation(self, name: str, target_ns: Optional[Namespace]) -> str:
        return self.annotations.element_annotation(name, target_ns)

    def attribute_annotation(self, name: str) -> str:
        return self.annotations.attribute_annotation(name)

    def tuple_struct_macros(self) -> str:
        return self.annotations.tuple_struct_macros()

    def attributes_to_fields(self, node: SchemaNode, target_ns: Optional[Namespace],
                             parse_node: EntityParser) -> List[StructField]:
        return attributes_to_fields(node, target_ns, parse_node)

    def any_attribute_field(self) -> StructField:
        return any_attribute_field()

    def attribute_field(self, node: SchemaNode, target_ns: Optional[Namespace]) -> StructField:
        """
        Build the field for an ``xs:attribute`` declaration.

        Named attributes take ``type``; references (``ref``) resolve the
        referenced attribute's name as its type. Missing types fall back
        to ``String``.
        """
        raw_name = node.attribute("name") or node.attribute("ref")
        if raw_name is None:
            raise AttributeParseError(
                f"Attribute without name or ref: {describe_node(node)}", node
            )

        type_token = node.attribute("type") or node.attribute("ref")

        if type_token is not None:
            type_name = self.resolve_type(type_token, target_ns)
        else:
            type_name = self.resolve_type(f"{self.config.builtin_prefix}:string", target_ns)

        return StructField(
            name=self.field_name(raw_name),
            type_name=type_name,
            comment=self.field_comment(node, indent=2) or None,
            macros=self.attribute_annotation(raw_name),
        )


# Factory functions
def create_rust_resolver(config: Optional[GeneratorConfig] = None) -> RustResolver:
    """Create a Rust resolver with default configuration."""
    return RustResolver(config)
