"""
Core resolution components.

Provides base classes and utilities shared by all target languages.
"""

from .comments import format_comment, split_comment_line
from .config import ConfigError, ConfigManager, GeneratorConfig, load_config
from .naming import NameSanitizer, NamingCase
from .navigation import (
    SCHEMA_ELEMENT_NAME,
    UNSUPPORTED_NAME,
    find_child,
    get_documentation,
    get_parent_name,
)
from .nodes import (
    LxmlSchemaNode,
    Namespace,
    SchemaLoadError,
    SchemaNode,
    XsdElementType,
    parse_schema,
)
from .resolver import EntityParser, ResolutionError, SchemaResolver
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base resolver interface
    "SchemaResolver",
    "ResolutionError",
    "EntityParser",
    # Schema nodes
    "SchemaNode",
    "LxmlSchemaNode",
    "Namespace",
    "XsdElementType",
    "SchemaLoadError",
    "parse_schema",
    # Navigation
    "find_child",
    "get_documentation",
    "get_parent_name",
    "SCHEMA_ELEMENT_NAME",
    "UNSUPPORTED_NAME",
    # Comments
    "format_comment",
    "split_comment_line",
    # Naming utilities - language-agnostic
    "NameSanitizer",
    "NamingCase",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
