"""
Rust resolver module.

Resolves XSD names and types to Rust identifiers and renders yaserde
annotations for the generated structs.
"""

from .annotations import (
    AnnotationRenderer,
    attribute_annotation,
    element_annotation,
    struct_annotation,
    target_namespace,
    tuple_struct_macros,
)
from .config import RustConfig, load_rust_config
from .entities import Struct, StructField
from .fields import AttributeParseError, any_attribute_field, attributes_to_fields
from .naming import RUST_RESERVED_WORDS, create_rust_sanitizer, field_name, type_name
from .resolver import RustResolver, create_rust_resolver
from .types import XSD_BUILTIN_TYPES, RustType, RustTypeMapper, resolve_type

__all__ = [
    "RustResolver",
    "RustConfig",
    "RustType",
    "RustTypeMapper",
    "AnnotationRenderer",
    "AttributeParseError",
    "Struct",
    "StructField",
    "RUST_RESERVED_WORDS",
    "XSD_BUILTIN_TYPES",
    # Naming
    "create_rust_sanitizer",
    "field_name",
    "type_name",
    # Types
    "resolve_type",
    # Annotations
    "target_namespace",
    "struct_annotation",
    "element_annotation",
    "attribute_annotation",
    "tuple_struct_macros",
    # Fields
    "attributes_to_fields",
    "any_attribute_field",
    # Factory functions
    "create_rust_resolver",
    "load_rust_config",
]
