"""
Extraction of attribute declarations as struct fields.
"""

from typing import List, Optional

from ...core.nodes import Namespace, SchemaNode, XsdElementType, describe_node
from ...core.resolver import EntityParser, ResolutionError
from ...logging_config import get_logger
from .entities import StructField

logger = get_logger(__name__)


class AttributeParseError(ResolutionError):
    """Raised when an attribute declaration does not parse into a field."""

    def __init__(self, message: str, node: SchemaNode):
        super().__init__(message)
        self.node = node


def attributes_to_fields(node: SchemaNode, target_ns: Optional[Namespace],
                         parse_node: EntityParser) -> List[StructField]:
    """
    Parse the attribute children of a node into struct fields.

    Args:
        node: Node whose direct ``attribute`` children are collected
        target_ns: Target namespace passed through to the parser
        parse_node: Tree walker callback turning one child into an entity

    Returns:
        Fields in document order

    Raises:
        AttributeParseError: If the parser returns anything but a StructField
    """
    fields = []

    for child in node.children():
        if child.xsd_type != XsdElementType.ATTRIBUTE:
            continue

        entity = parse_node(child, node, target_ns)
        if not isinstance(entity, StructField):
            message = (
                f"Invalid attribute parsing: {describe_node(child)} produced "
                f"{type(entity).__name__}, expected StructField"
            )
            logger.error("%s", message)
            raise AttributeParseError(message, child)

        fields.append(entity)

    logger.debug("Collected %d attribute field(s) from %s", len(fields), describe_node(node))
    return fields


def any_attribute_field() -> StructField:
    """Field standing in for an ``xs:anyAttribute`` wildcard."""
    return StructField(
        name="any_attribute",
        type_name="AnyAttribute",
        comment="//",
        macros="",
    )
