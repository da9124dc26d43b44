"""
Rust-specific naming utilities and sanitization.

Handles Rust reserved words and naming conventions.
"""

from ...core.naming import NameSanitizer, NamingCase


# Rust keywords, strict and reserved
RUST_RESERVED_WORDS = frozenset(
    {
        "Self",
        "abstract",
        "alignof",
        "as",
        "async",
        "await",
        "become",
        "box",
        "break",
        "const",
        "continue",
        "crate",
        "do",
        "dyn",
        "else",
        "enum",
        "extern",
        "false",
        "final",
        "fn",
        "for",
        "if",
        "impl",
        "in",
        "let",
        "loop",
        "macro",
        "match",
        "mod",
        "move",
        "mut",
        "offsetof",
        "override",
        "priv",
        "proc",
        "pub",
        "pure",
        "ref",
        "return",
        "self",
        "sizeof",
        "static",
        "struct",
        "super",
        "trait",
        "true",
        "try",
        "type",
        "typeof",
        "unsafe",
        "unsized",
        "use",
        "virtual",
        "where",
        "while",
        "yield",
    }
)

_sanitizer = NameSanitizer(RUST_RESERVED_WORDS)


def create_rust_sanitizer() -> NameSanitizer:
    """Create a name sanitizer configured for Rust."""
    return NameSanitizer(RUST_RESERVED_WORDS)


def field_name(name: str) -> str:
    """Sanitize name for a Rust struct field (snake_case)."""
    return _sanitizer.sanitize_name(name, NamingCase.SNAKE_CASE)


def type_name(name: str) -> str:
    """Sanitize name for a Rust type (PascalCase)."""
    return _sanitizer.sanitize_name(name, NamingCase.PASCAL_CASE)


def is_valid_field_name(name: str) -> bool:
    """Check the identifier guards a sanitized field name must satisfy."""
    return bool(name) and not name[0].isdigit() and name not in RUST_RESERVED_WORDS
