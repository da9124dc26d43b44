"""
Tests for configuration loading and validation.
"""

import json

import pytest

from xsd_codegen.core.config import ConfigError, ConfigManager, GeneratorConfig, load_config
from xsd_codegen.languages.rust.config import DEFAULT_DERIVES, RustConfig, load_rust_config


class TestConfigManager:
    """Test merging defaults, files and overrides."""

    def test_rust_defaults(self):
        config = load_config("rust")
        assert config.comment_width == 80
        assert config.builtin_prefix == "xs"
        assert config.derives == DEFAULT_DERIVES

    def test_overrides_and_custom_keys(self):
        config = load_config("rust", {"comment_width": 100, "crate_name": "orders"})
        assert config.comment_width == 100
        assert config.custom == {"crate_name": "orders"}

    def test_config_file(self, tmp_path):
        path = tmp_path / "xsd.json"
        path.write_text(json.dumps({"builtin_prefix": "xsd", "comment_indent": 4}))

        config = load_config("rust", {"comment_indent": 2}, config_file=path)
        assert config.builtin_prefix == "xsd"
        assert config.comment_indent == 2

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_config("rust", config_file=tmp_path / "absent.json")

    def test_file_must_be_json(self, tmp_path):
        path = tmp_path / "xsd.yaml"
        path.write_text("comment_width: 10")
        with pytest.raises(ConfigError, match="must be JSON"):
            load_config("rust", config_file=path)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "xsd.json"
        path.write_text("{not json")
        with pytest.raises(ConfigError, match="Invalid JSON"):
            load_config("rust", config_file=path)

    def test_file_must_hold_object(self, tmp_path):
        path = tmp_path / "xsd.json"
        path.write_text("[1, 2]")
        with pytest.raises(ConfigError, match="JSON object"):
            load_config("rust", config_file=path)

    def test_unknown_language(self):
        with pytest.raises(ConfigError, match="Unknown language"):
            load_config("cobol")

    def test_save_config(self, tmp_path):
        manager = ConfigManager()
        path = tmp_path / "saved.json"
        manager.save_config(GeneratorConfig(comment_width=60, custom={"crate_name": "x"}), path)

        saved = json.loads(path.read_text())
        assert saved["comment_width"] == 60
        assert saved["crate_name"] == "x"
        assert "custom" not in saved

    def test_validate_config(self):
        manager = ConfigManager()
        assert manager.validate_config(GeneratorConfig()) == []

        warnings = manager.validate_config(
            GeneratorConfig(comment_width=5, comment_indent=4, builtin_prefix="x:s")
        )
        assert len(warnings) == 2


class TestRustConfig:
    """Test Rust-specific settings."""

    def test_default_derives(self):
        assert RustConfig().derives == DEFAULT_DERIVES

    def test_invalid_derive(self):
        with pytest.raises(ConfigError):
            RustConfig(derives=["Partial Eq"])

    def test_invalid_override(self):
        with pytest.raises(ConfigError):
            RustConfig(type_overrides={"xs:decimal": " "})

    def test_from_generic_config(self):
        config = RustConfig.from_config(GeneratorConfig(comment_width=70))
        assert isinstance(config, RustConfig)
        assert config.comment_width == 70

    def test_load_rust_config(self):
        config = load_rust_config({"derives": ["Debug"]})
        assert isinstance(config, RustConfig)
        assert config.derives == ["Debug"]
