"""
Base resolver interface for all code generation targets.

Defines the contract the schema tree walker relies on when it asks what
type, name, comment or annotation belongs to a schema node.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional

from .comments import format_comment
from .config import GeneratorConfig
from .navigation import UNSUPPORTED_NAME, get_documentation, get_parent_name
from .nodes import Namespace, SchemaNode, describe_node
from ..logging_config import get_logger

logger = get_logger(__name__)

# (child, parent, target namespace) -> entity built by the tree walker
EntityParser = Callable[[SchemaNode, SchemaNode, Optional[Namespace]], Any]


class ResolutionError(Exception):
    """Base exception for schema resolution errors."""

    pass


class SchemaResolver(ABC):
    """Abstract base class for target-language resolvers."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize resolver with optional configuration."""
        self.config = config or GeneratorConfig()
        self.warnings: List[str] = []

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'rust')."""
        pass

    @abstractmethod
    def field_name(self, name: str) -> str:
        """Sanitized field identifier for a raw schema name."""
        pass

    @abstractmethod
    def type_name(self, name: str) -> str:
        """Sanitized type identifier for a raw schema name."""
        pass

    @abstractmethod
    def resolve_type(self, type_token: str, target_ns: Optional[Namespace]) -> str:
        """Target type for a raw XSD type token."""
        pass

    @abstractmethod
    def target_namespace(self, node: SchemaNode) -> Optional[Namespace]:
        """Namespace declaration matching the node's targetNamespace."""
        pass

    def format_comment(self, doc: Optional[str], indent: Optional[int] = None) -> str:
        """Render documentation text as a comment block using configured widths."""
        if indent is None:
            indent = self.config.comment_indent
        return format_comment(doc, indent=indent, max_width=self.config.comment_width)

    def field_comment(self, node: SchemaNode, indent: Optional[int] = None) -> str:
        """Comment block for the documentation attached to a node."""
        return self.format_comment(get_documentation(node), indent)

    def parent_name(self, node: SchemaNode) -> str:
        """
        Closest named ancestor of a node.

        An unsupported result is recorded in ``warnings`` so the caller can
        report it with the rest of the generation output.
        """
        name = get_parent_name(node, self.config.max_parent_depth)
        if name == UNSUPPORTED_NAME:
            self.warnings.append(
                f"Cannot derive a parent name for {describe_node(node)}"
            )
        return name
