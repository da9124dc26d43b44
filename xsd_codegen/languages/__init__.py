"""
Language-specific resolvers.

This module contains resolvers for the supported target languages.
"""

from .rust import RustResolver, create_rust_resolver

__all__ = ["RustResolver", "create_rust_resolver"]
