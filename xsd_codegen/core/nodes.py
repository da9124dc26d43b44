"""
Schema node abstraction.

Resolution code reads XSD documents only through the ``SchemaNode``
protocol, so it can run over lxml trees or over in-memory fixtures.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Protocol, Sequence, Union

from lxml import etree

from ..logging_config import get_logger

logger = get_logger(__name__)

XSD_NAMESPACE = "http://www.w3.org/2001/XMLSchema"

# Bound to the xml prefix in every document, never listed in nsmap
XML_PREFIX = "xml"
XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"


class SchemaLoadError(Exception):
    """Raised when schema text cannot be parsed into a node tree."""

    pass


class XsdElementType(Enum):
    """Kinds of XSD elements, keyed by their local tag name."""

    ALL = "all"
    ANNOTATION = "annotation"
    ANY = "any"
    ANY_ATTRIBUTE = "anyAttribute"
    APP_INFO = "appinfo"
    ATTRIBUTE = "attribute"
    ATTRIBUTE_GROUP = "attributeGroup"
    CHOICE = "choice"
    COMPLEX_CONTENT = "complexContent"
    COMPLEX_TYPE = "complexType"
    DOCUMENTATION = "documentation"
    ELEMENT = "element"
    ENUMERATION = "enumeration"
    EXTENSION = "extension"
    GROUP = "group"
    IMPORT = "import"
    INCLUDE = "include"
    LIST = "list"
    RESTRICTION = "restriction"
    SCHEMA = "schema"
    SEQUENCE = "sequence"
    SIMPLE_CONTENT = "simpleContent"
    SIMPLE_TYPE = "simpleType"
    UNION = "union"
    UNKNOWN = "unknown"

    @classmethod
    def from_tag(cls, tag_name: str) -> "XsdElementType":
        """Classify a local tag name; unrecognised tags map to UNKNOWN."""
        try:
            return cls(tag_name)
        except ValueError:
            return cls.UNKNOWN


@dataclass(frozen=True)
class Namespace:
    """A namespace declaration visible at a node."""

    prefix: Optional[str]
    uri: str


class SchemaNode(Protocol):
    """Read-only view of one element of a parsed XSD document."""

    @property
    def tag_name(self) -> str:
        """Local part of the element tag."""
        ...

    @property
    def xsd_type(self) -> XsdElementType:
        """Kind of XSD element this node is."""
        ...

    @property
    def text(self) -> Optional[str]:
        """Text content directly inside the element, if any."""
        ...

    def attribute(self, name: str) -> Optional[str]:
        """Attribute value by (optionally prefixed) name."""
        ...

    def children(self) -> Iterator["SchemaNode"]:
        """Element children in document order."""
        ...

    def parent(self) -> Optional["SchemaNode"]:
        """Parent element, or None for the document root."""
        ...

    def namespaces(self) -> Sequence[Namespace]:
        """Namespace declarations in scope at this node."""
        ...


@dataclass(frozen=True)
class LxmlSchemaNode:
    """``SchemaNode`` backed by an ``lxml.etree`` element."""

    element: etree._Element

    @property
    def tag_name(self) -> str:
        return etree.QName(self.element).localname

    @property
    def xsd_type(self) -> XsdElementType:
        if etree.QName(self.element).namespace != XSD_NAMESPACE:
            return XsdElementType.UNKNOWN
        return XsdElementType.from_tag(self.tag_name)

    @property
    def text(self) -> Optional[str]:
        return self.element.text

    @property
    def sourceline(self) -> Optional[int]:
        return self.element.sourceline

    def attribute(self, name: str) -> Optional[str]:
        if ":" not in name:
            return self.element.get(name)

        prefix, local = name.split(":", 1)
        if prefix == XML_PREFIX:
            uri = XML_NAMESPACE
        else:
            uri = self.element.nsmap.get(prefix)
        if uri is None:
            return None
        return self.element.get(f"{{{uri}}}{local}")

    def children(self) -> Iterator["LxmlSchemaNode"]:
        for child in self.element:
            # Comments and processing instructions have non-string tags
            if isinstance(child.tag, str):
                yield LxmlSchemaNode(child)

    def parent(self) -> Optional["LxmlSchemaNode"]:
        parent = self.element.getparent()
        return LxmlSchemaNode(parent) if parent is not None else None

    def namespaces(self) -> Sequence[Namespace]:
        return tuple(
            Namespace(prefix=prefix, uri=uri)
            for prefix, uri in self.element.nsmap.items()
        )


def describe_node(node: SchemaNode) -> str:
    """Short human-readable description of a node for diagnostics."""
    description = f"<{node.tag_name}"
    name = node.attribute("name")
    if name is not None:
        description += f' name="{name}"'
    description += ">"

    line = getattr(node, "sourceline", None)
    if line is not None:
        description += f" (line {line})"
    return description


def parse_schema(source: Union[str, bytes]) -> LxmlSchemaNode:
    """
    Parse XSD text into a node tree.

    Args:
        source: Schema document as text or bytes

    Returns:
        Root node of the parsed document

    Raises:
        SchemaLoadError: If the text is not well-formed XML
    """
    if isinstance(source, str):
        # Text is already decoded; ignore any encoding in the XML declaration
        source = source.encode("utf-8")
        parser = etree.XMLParser(remove_comments=False, encoding="utf-8")
    else:
        parser = etree.XMLParser(remove_comments=False)

    try:
        root = etree.fromstring(source, parser)
    except etree.XMLSyntaxError as e:
        logger.error("Invalid schema document: %s", e)
        raise SchemaLoadError(f"Invalid schema document: {e}") from e

    logger.debug("Parsed schema root <%s>", etree.QName(root).localname)
    return LxmlSchemaNode(root)
