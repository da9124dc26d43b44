"""
Naming utilities for safe code generation.

Handles name sanitization, case conversions and keyword conflicts
for identifiers derived from XSD names.
"""

import re
from typing import FrozenSet, Optional
from enum import Enum


class NamingCase(Enum):
    """Naming case styles used for generated identifiers."""
    SNAKE_CASE = "snake"      # user_name
    PASCAL_CASE = "pascal"    # UserName


class NameSanitizer:
    """Handles name sanitization and case conversion.

    Sanitization is a pure function of the input name and the reserved
    word set; no names are remembered between calls.
    """

    def __init__(self, reserved_words: Optional[FrozenSet[str]] = None):
        """
        Initialize name sanitizer.

        Args:
            reserved_words: Set of language reserved words
        """
        self.reserved_words = frozenset(reserved_words or ())

    def sanitize_name(self, name: str, target_case: NamingCase = NamingCase.SNAKE_CASE,
                      prefix_on_conflict: str = "_") -> str:
        """
        Sanitize a name for safe use in target language.

        Args:
            name: Original name to sanitize
            target_case: Desired case style
            prefix_on_conflict: Prefix to add for digit or keyword conflicts

        Returns:
            Sanitized name safe for use
        """
        # Step 1: Basic cleanup
        cleaned = self._clean_basic(name)

        # Step 2: Convert to target case
        converted = self._convert_case(cleaned, target_case)
        if not converted:
            converted = self._convert_case("field", target_case)

        # Step 3: Guard against digits and keywords, after case conversion
        return self._resolve_conflicts(converted, prefix_on_conflict)

    def _clean_basic(self, name: str) -> str:
        """Basic name cleanup - turn invalid characters into separators."""
        cleaned = re.sub(r'[^\w-]', '_', name)
        return cleaned.strip('_-')

    def _convert_case(self, name: str, target_case: NamingCase) -> str:
        """Convert name to target case style."""
        if target_case == NamingCase.SNAKE_CASE:
            return self._to_snake_case(name)
        elif target_case == NamingCase.PASCAL_CASE:
            return self._to_pascal_case(name)
        else:
            return name

    def _to_snake_case(self, name: str) -> str:
        """Convert to snake_case."""
        # Replace hyphens with underscores
        name = name.replace('-', '_')

        # Split acronym runs: HTTPRequest -> HTTP_Request
        name = re.sub(r'([A-Z]+)([A-Z][a-z])', r'\1_\2', name)

        # Insert underscore before uppercase letters
        name = re.sub(r'([a-z0-9])([A-Z])', r'\1_\2', name)

        # Convert to lowercase and clean up multiple underscores
        name = name.lower()
        name = re.sub(r'_+', '_', name)

        return name.strip('_')

    def _to_pascal_case(self, name: str) -> str:
        """Convert to PascalCase."""
        # First convert to snake case, then to pascal
        snake = self._to_snake_case(name)
        parts = snake.split('_')

        # All parts title case
        return ''.join(part.capitalize() for part in parts if part)

    def _resolve_conflicts(self, name: str, prefix: str) -> str:
        """Prefix names that start with a digit or equal a reserved word."""
        if name[0].isdigit() or name in self.reserved_words:
            return f"{prefix}{name}"
        return name

    def is_reserved(self, name: str) -> bool:
        """Check whether a name exactly matches a reserved word."""
        return name in self.reserved_words
