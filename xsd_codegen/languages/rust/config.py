"""
Rust-specific configuration and validation.

Extends the base configuration system with Rust-specific settings.
"""

from dataclasses import fields
from typing import Any, Dict

from ...core.config import ConfigError, GeneratorConfig, load_config

DEFAULT_DERIVES = ["Default", "PartialEq", "Debug", "YaSerialize", "YaDeserialize"]


class RustConfig(GeneratorConfig):
    """Rust-specific configuration."""

    def __init__(self, **kwargs):
        """Initialize Rust configuration with defaults."""
        super().__init__(**kwargs)

        if not self.derives:
            self.derives = list(DEFAULT_DERIVES)

        # Validate Rust-specific settings
        self._validate_rust_settings()

    def _validate_rust_settings(self):
        """Validate Rust-specific configuration."""
        for derive in self.derives:
            if not isinstance(derive, str) or not derive.isidentifier():
                raise ConfigError(f"Invalid derive name: {derive!r}")

        for token, target in self.type_overrides.items():
            if not token or not isinstance(target, str) or not target.strip():
                raise ConfigError(f"Invalid type override: {token!r} -> {target!r}")

    @classmethod
    def from_config(cls, config: GeneratorConfig) -> "RustConfig":
        """Build a RustConfig from a generic configuration."""
        if isinstance(config, cls):
            return config
        return cls(**{f.name: getattr(config, f.name) for f in fields(GeneratorConfig)})


def load_rust_config(custom_config: Dict[str, Any] = None, config_file=None) -> RustConfig:
    """Load merged Rust configuration from defaults, a JSON file and overrides."""
    return RustConfig.from_config(load_config("rust", custom_config, config_file))
