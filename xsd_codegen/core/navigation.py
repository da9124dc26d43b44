"""
Helpers for moving around a schema node tree.
"""

from typing import Optional

from .nodes import SchemaNode, XsdElementType
from ..logging_config import get_logger

logger = get_logger(__name__)

SCHEMA_ELEMENT_NAME = "SchemaElement"
UNSUPPORTED_NAME = "UnsupportedName"
DEFAULT_MAX_PARENT_DEPTH = 256


def find_child(node: SchemaNode, tag_name: str) -> Optional[SchemaNode]:
    """Return the first element child with the given local tag name."""
    return next(
        (child for child in node.children() if child.tag_name == tag_name), None
    )


def get_documentation(node: SchemaNode) -> Optional[str]:
    """Return the text of ``annotation/documentation`` under the node, if any."""
    annotation = find_child(node, "annotation")
    if annotation is None:
        return None

    documentation = find_child(annotation, "documentation")
    if documentation is None:
        return None

    return documentation.text


def get_parent_name(node: SchemaNode, max_depth: int = DEFAULT_MAX_PARENT_DEPTH) -> str:
    """
    Name of the closest named ancestor of a node.

    Top-level declarations (parent is the schema root) get
    ``SCHEMA_ELEMENT_NAME``. Running out of ancestors, or exceeding
    ``max_depth`` steps, gives ``UNSUPPORTED_NAME``.
    """
    parent = node.parent()
    depth = 0

    while parent is not None and depth < max_depth:
        if parent.xsd_type == XsdElementType.SCHEMA:
            return SCHEMA_ELEMENT_NAME

        name = parent.attribute("name")
        if name is not None:
            return name

        parent = parent.parent()
        depth += 1

    if parent is not None:
        logger.warning(
            "Gave up resolving parent name of <%s> after %d ancestors",
            node.tag_name, max_depth,
        )
    else:
        logger.warning("No named ancestor found for <%s>", node.tag_name)
    return UNSUPPORTED_NAME
