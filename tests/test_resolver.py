"""
Tests for the Rust resolver facade and the package entry points.
"""

import logging

from rich.logging import RichHandler

from xsd_codegen import resolve_schema_types
from xsd_codegen.core.config import GeneratorConfig
from xsd_codegen.core.navigation import UNSUPPORTED_NAME, find_child
from xsd_codegen.languages.rust import RustConfig, RustResolver, create_rust_resolver
from xsd_codegen.logging_config import configure_logging, get_logger, reset_logging

from conftest import ORDERS_XSD


class TestRustResolver:
    """Test RustResolver."""

    def test_language_name(self):
        assert create_rust_resolver().language_name == "rust"

    def test_naming(self):
        resolver = RustResolver()
        assert resolver.field_name("OrderId") == "order_id"
        assert resolver.type_name("order-id") == "OrderId"

    def test_struct_description(self, orders_schema, order_type):
        resolver = RustResolver()
        target_ns = resolver.target_namespace(orders_schema)

        assert resolver.struct_annotation(target_ns).endswith(
            '#[yaserde(prefix = "tns", namespace = "tns: http://example.com/orders")]\n'
        )
        assert resolver.field_comment(order_type) == "// An order placed by a customer.\n"
        assert resolver.parent_name(order_type) == "SchemaElement"
        assert resolver.resolve_type("tns:Item", target_ns) == "Item"
        assert resolver.map_type("xs:IDREFS", target_ns).is_sequence

    def test_unsupported_parent_name_is_recorded(self, orders_schema):
        resolver = RustResolver()
        assert resolver.parent_name(orders_schema) == UNSUPPORTED_NAME
        assert len(resolver.warnings) == 1
        assert "<schema>" in resolver.warnings[0]

    def test_comment_settings_come_from_config(self):
        resolver = RustResolver(GeneratorConfig(comment_width=12, comment_indent=2))
        assert resolver.format_comment("aaa bbb ccc") == "  // aaa\n  // bbb\n  // ccc\n"

    def test_type_overrides_from_config(self):
        resolver = RustResolver(RustConfig(type_overrides={"xs:decimal": "Decimal"}))
        assert resolver.resolve_type("xs:decimal", None) == "Decimal"

    def test_custom_derives(self):
        resolver = RustResolver(RustConfig(derives=["Debug"]))
        assert resolver.struct_annotation(None) == "#[derive(Debug)]\n#[yaserde()]\n"
        assert resolver.tuple_struct_macros() == "#[derive(Debug)]\n"

    def test_naming_filters_in_templates(self):
        engine = RustResolver().annotations.template_engine
        rendered = engine.render_string(
            "{{ 'OrderLine' | field_name }}: {{ 'order-line' | type_name }}", {}
        )
        assert rendered == "order_line: OrderLine"

    def test_comment_filter_in_templates(self):
        engine = RustResolver().annotations.template_engine
        assert engine.render_string("{{ doc | comment }}", {"doc": "Hi there"}) == (
            "// Hi there\n"
        )

    def test_any_attribute_field(self):
        assert RustResolver().any_attribute_field().name == "any_attribute"

    def test_attributes_to_fields(self, order_type, orders_ns):
        resolver = RustResolver()
        fields = resolver.attributes_to_fields(
            order_type,
            orders_ns,
            lambda child, parent, ns: resolver.attribute_field(child, ns),
        )
        assert len(fields) == 3

    def test_nested_attribute_parent(self, orders_schema):
        resolver = RustResolver()
        root_element = find_child(orders_schema, "element")
        version = find_child(find_child(root_element, "complexType"), "attribute")
        assert resolver.parent_name(version) == "Root"
        assert resolver.warnings == []


class TestResolveSchemaTypes:
    """Test the whole-schema convenience function."""

    def test_resolves_typed_declarations(self):
        assert resolve_schema_types(ORDERS_XSD) == {
            "Order.item": "Item",
            "Order.note": "String",
            "Order.id": "String",
            "Order.status": "Status",
            "Root.child": "i32",
            "Root.version": "String",
        }

    def test_later_duplicate_declaration_wins(self, caplog):
        source = (
            '<xs:schema xmlns:xs="http://www.w3.org/2001/XMLSchema">'
            '<xs:complexType name="Pair"><xs:sequence>'
            '<xs:element name="value" type="xs:int"/>'
            '<xs:element name="value" type="xs:string"/>'
            "</xs:sequence></xs:complexType>"
            "</xs:schema>"
        )
        with caplog.at_level(logging.DEBUG, logger="xsd_codegen"):
            resolved = resolve_schema_types(source)

        assert resolved == {"Pair.value": "String"}
        assert "Duplicate declaration Pair.value" in caplog.text


class TestLogging:
    """Test logging helpers."""

    def test_loggers_live_under_package(self):
        assert get_logger("custom").name == "xsd_codegen.custom"
        assert get_logger("xsd_codegen.core").name == "xsd_codegen.core"

    def teardown_method(self):
        reset_logging()

    def test_configure_logging_sets_level(self):
        configure_logging(logging.DEBUG, rich_output=False)
        assert logging.getLogger("xsd_codegen").level == logging.DEBUG
        configure_logging(logging.WARNING, rich_output=False)
        assert logging.getLogger("xsd_codegen").level == logging.WARNING

    def test_configure_logging_swaps_handler_kind(self):
        root = logging.getLogger("xsd_codegen")

        configure_logging(rich_output=False)
        configure_logging(rich_output=True)

        rich_handlers = [h for h in root.handlers if isinstance(h, RichHandler)]
        plain_handlers = [h for h in root.handlers if type(h) is logging.StreamHandler]
        assert len(rich_handlers) == 1
        assert plain_handlers == []

    def test_reset_logging_removes_handler(self):
        root = logging.getLogger("xsd_codegen")
        before = list(root.handlers)

        configure_logging(rich_output=False)
        reset_logging()

        assert root.handlers == before
        assert root.level == logging.NOTSET
