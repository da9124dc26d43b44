"""
XSD to Rust resolution engine.

Decides Rust identifiers, types, comments and yaserde annotations for the
nodes of a parsed XML Schema document.
"""

from collections import deque

from .core import (
    ConfigError,
    GeneratorConfig,
    Namespace,
    ResolutionError,
    SchemaNode,
    format_comment,
    load_config,
    parse_schema,
)
from .languages.rust import (
    AttributeParseError,
    RustResolver,
    StructField,
    create_rust_resolver,
    load_rust_config,
)
from .logging_config import configure_logging, get_logger, reset_logging

logger = get_logger(__name__)

# Version info
__version__ = "0.1.0"


def resolve_schema_types(source, config=None):
    """
    Resolve the declared types of every named element and attribute.

    Args:
        source: Schema document as text or bytes
        config: Optional resolver configuration

    Returns:
        Dict mapping "Parent.name" to the resolved Rust type. When two
        declarations share a key the one visited last (breadth-first) wins.
    """
    resolver = create_rust_resolver(config)
    root = parse_schema(source)
    target_ns = resolver.target_namespace(root)

    resolved = {}
    pending = deque(root.children())
    while pending:
        node = pending.popleft()
        name = node.attribute("name")
        type_token = node.attribute("type")
        if name is not None and type_token is not None:
            key = f"{resolver.parent_name(node)}.{name}"
            if key in resolved:
                logger.debug("Duplicate declaration %s overrides earlier type %s", key, resolved[key])
            resolved[key] = resolver.resolve_type(type_token, target_ns)
        pending.extend(node.children())

    return resolved


# Export main interfaces
__all__ = [
    "RustResolver",
    "StructField",
    "Namespace",
    "SchemaNode",
    "GeneratorConfig",
    "ResolutionError",
    "AttributeParseError",
    "ConfigError",
    "configure_logging",
    "reset_logging",
    "create_rust_resolver",
    "format_comment",
    "get_logger",
    "load_config",
    "load_rust_config",
    "parse_schema",
    "resolve_schema_types",
]
