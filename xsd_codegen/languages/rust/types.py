"""
Rust type system for XSD type resolution.

Maps raw XSD type tokens (built-in or qualified user types) to Rust type
names. Built-ins always win over namespace reasoning.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from ...core.nodes import Namespace
from ...logging_config import get_logger
from .naming import type_name

logger = get_logger(__name__)

STRING_TYPE = "String"
STRING_LIST_TYPE = "Vec<String>"

# XSD built-in local name -> Rust type
XSD_BUILTIN_TYPES: Mapping[str, str] = MappingProxyType(
    {
        "hexBinary": STRING_TYPE,
        "base64Binary": STRING_TYPE,
        "boolean": "bool",
        # Bounded integers stand in for arbitrary precision
        "integer": "i64",
        "nonNegativeInteger": "u64",
        "positiveInteger": "u64",
        "nonPositiveInteger": "i64",
        "negativeInteger": "i64",
        "long": "i64",
        "int": "i32",
        "short": "i16",
        "byte": "i8",
        "unsignedLong": "u64",
        "unsignedInt": "u32",
        "unsignedShort": "u16",
        "unsignedByte": "u8",
        "decimal": "f64",
        "double": "f64",
        "float": "f64",
        "date": STRING_TYPE,
        "time": STRING_TYPE,
        "dateTime": STRING_TYPE,
        "dateTimeStamp": STRING_TYPE,
        "duration": "tt::Duration",
        "gDay": STRING_TYPE,
        "gMonth": STRING_TYPE,
        "gMonthDay": STRING_TYPE,
        "gYear": STRING_TYPE,
        "gYearMonth": STRING_TYPE,
        "string": STRING_TYPE,
        "normalizedString": STRING_TYPE,
        "token": STRING_TYPE,
        "language": STRING_TYPE,
        "Name": STRING_TYPE,
        "NCName": STRING_TYPE,
        "ENTITY": STRING_TYPE,
        "ID": STRING_TYPE,
        "IDREF": STRING_TYPE,
        "NMTOKEN": STRING_TYPE,
        "anyURI": STRING_TYPE,
        "QName": STRING_TYPE,
        "NOTATION": STRING_TYPE,
        # Built-in list types
        "ENTITIES": STRING_LIST_TYPE,
        "IDREFS": STRING_LIST_TYPE,
        "NMTOKENS": STRING_LIST_TYPE,
    }
)


@dataclass(frozen=True)
class RustType:
    """
    Immutable description of a resolved Rust type.

    ``module`` is set when the type lives in another namespace's generated
    module (``prefix::Type``).
    """

    name: str
    is_builtin: bool = field(default=False)
    is_sequence: bool = field(default=False)
    module: Optional[str] = field(default=None)


class RustTypeMapper:
    """
    Central engine for mapping XSD type tokens to Rust types.
    """

    def __init__(self, builtin_prefix: str = "xs",
                 type_overrides: Optional[Dict[str, str]] = None):
        """
        Initialize the mapper.

        Args:
            builtin_prefix: Prefix the schema uses for the XSD namespace
            type_overrides: Raw token -> Rust type, consulted before built-ins
        """
        self.builtin_prefix = builtin_prefix
        self.type_overrides = MappingProxyType(dict(type_overrides or {}))
        self._builtin_types = self._build_builtin_type_map()

    def _build_builtin_type_map(self) -> Mapping[str, RustType]:
        """Key the built-in table with the configured prefix."""
        return MappingProxyType(
            {
                f"{self.builtin_prefix}:{local}": RustType(
                    name=rust_name,
                    is_builtin=True,
                    is_sequence=rust_name.startswith("Vec<"),
                )
                for local, rust_name in XSD_BUILTIN_TYPES.items()
            }
        )

    def is_builtin(self, type_token: str) -> bool:
        """Check whether a token names an XSD built-in type."""
        return type_token in self._builtin_types

    def map_type(self, type_token: str, target_ns: Optional[Namespace] = None) -> RustType:
        """
        Map a raw XSD type token to a Rust type.

        Args:
            type_token: Value of a ``type``/``base`` attribute
            target_ns: Target namespace of the schema being generated

        Returns:
            Resolved RustType
        """
        if type_token in self.type_overrides:
            return RustType(name=self.type_overrides[type_token])

        if type_token in self._builtin_types:
            return self._builtin_types[type_token]

        prefix = target_ns.prefix if target_ns is not None else None
        if prefix and type_token.startswith(f"{prefix}:"):
            # Reference into the schema's own namespace
            return RustType(name=type_name(type_token[len(prefix) + 1:]))

        if ":" in type_token:
            module, local = type_token.split(":", 1)
            logger.debug("Type %s resolved into module %s", type_token, module)
            return RustType(name=f"{module}::{type_name(local)}", module=module)

        return RustType(name=type_name(type_token))

    def resolve_type(self, type_token: str, target_ns: Optional[Namespace] = None) -> str:
        """Rust type name for a raw XSD type token."""
        return self.map_type(type_token, target_ns).name


_default_mapper = RustTypeMapper()


def resolve_type(type_token: str, target_ns: Optional[Namespace] = None) -> str:
    """Resolve a type token with the default ``xs`` built-in prefix."""
    return _default_mapper.resolve_type(type_token, target_ns)
