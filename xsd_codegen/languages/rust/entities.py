"""
Entity records produced while walking a schema.

The tree walker builds these; the emitter prints them. They are frozen
once created.
"""

from dataclasses import dataclass, field
from typing import Any, Optional, Tuple

from .naming import is_valid_field_name


@dataclass(frozen=True)
class StructField:
    """One field of a generated struct."""

    name: str  # Sanitized Rust identifier
    type_name: str  # Resolved Rust type
    comment: Optional[str] = None  # Rendered comment block
    macros: str = ""  # yaserde directive block
    subtypes: Tuple[Any, ...] = field(default_factory=tuple)  # Inline anonymous types

    def __post_init__(self):
        """Reject identifiers that would not compile."""
        if not is_valid_field_name(self.name):
            raise ValueError(f"Invalid Rust field name: {self.name!r}")
        if not isinstance(self.subtypes, tuple):
            object.__setattr__(self, "subtypes", tuple(self.subtypes))


@dataclass(frozen=True)
class Struct:
    """A generated struct with its fields."""

    name: str
    comment: Optional[str] = None
    macros: str = ""
    fields: Tuple[StructField, ...] = field(default_factory=tuple)
    subtypes: Tuple[Any, ...] = field(default_factory=tuple)

    def get_field(self, name: str) -> Optional[StructField]:
        """Get field by name."""
        for struct_field in self.fields:
            if struct_field.name == name:
                return struct_field
        return None
