"""Shared fixtures: sample schemas and an in-memory node implementation."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

import pytest

from xsd_codegen.core.nodes import Namespace, XsdElementType, parse_schema

ORDERS_URI = "http://example.com/orders"

ORDERS_XSD = f"""<?xml version="1.0" encoding="UTF-8"?>
<xs:schema xmlns:xs="http://www.w3.org/2001/XMLSchema"
           xmlns:tns="{ORDERS_URI}"
           targetNamespace="{ORDERS_URI}">
  <xs:complexType name="Order">
    <xs:annotation>
      <xs:documentation>An order placed by a customer.</xs:documentation>
    </xs:annotation>
    <xs:sequence>
      <xs:element name="item" type="tns:Item"/>
      <xs:element name="note" type="xs:string"/>
    </xs:sequence>
    <!-- attributes follow -->
    <xs:attribute name="id" type="xs:ID"/>
    <xs:attribute ref="xml:lang"/>
    <xs:attribute name="status" type="tns:Status">
      <xs:annotation>
        <xs:documentation>Processing state.</xs:documentation>
      </xs:annotation>
    </xs:attribute>
  </xs:complexType>
  <xs:element name="Root">
    <xs:complexType>
      <xs:sequence>
        <xs:element name="child" type="xs:int"/>
      </xs:sequence>
      <xs:attribute name="version" type="xs:token"/>
    </xs:complexType>
  </xs:element>
</xs:schema>
"""


@dataclass
class FakeNode:
    """In-memory SchemaNode used to exercise the protocol without lxml."""

    tag_name: str
    attributes: Dict[str, str] = field(default_factory=dict)
    child_nodes: List["FakeNode"] = field(default_factory=list)
    declared: Tuple[Namespace, ...] = ()
    text: Optional[str] = None
    parent_node: Optional["FakeNode"] = field(default=None, repr=False, compare=False)

    def __post_init__(self):
        for child in self.child_nodes:
            child.parent_node = self

    @property
    def xsd_type(self) -> XsdElementType:
        return XsdElementType.from_tag(self.tag_name)

    def attribute(self, name):
        return self.attributes.get(name)

    def children(self):
        return iter(self.child_nodes)

    def parent(self):
        return self.parent_node

    def namespaces(self):
        inherited = self.parent_node.namespaces() if self.parent_node else ()
        return tuple(self.declared) + tuple(inherited)


@pytest.fixture
def orders_schema():
    """Root node of the sample orders schema."""
    return parse_schema(ORDERS_XSD)


@pytest.fixture
def orders_ns():
    return Namespace(prefix="tns", uri=ORDERS_URI)


@pytest.fixture
def order_type(orders_schema):
    """The top-level Order complexType."""
    return next(orders_schema.children())
