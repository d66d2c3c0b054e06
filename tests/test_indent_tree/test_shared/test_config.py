"""Tests for the configuration system."""

import json
from dataclasses import replace

import pytest

from indent_tree.shared.config import (
    ConfigError,
    ConfigValidationError,
    GlobalConfig,
    IndentTreeConfig,
    TreeConfig,
)


class TestTreeConfig:
    """Test suite for TreeConfig."""

    def test_default_configuration(self):
        """Test default tree configuration values."""
        config = TreeConfig()

        assert config.indent_unit == 2
        assert config.indent_char == " "
        assert config.strict is False
        assert config.correlation_id is None

    def test_tree_config_validation_failures(self):
        """Test tree configuration validation failures."""
        with pytest.raises(ValueError, match="indent_unit must be > 0"):
            TreeConfig(indent_unit=0)

        with pytest.raises(ValueError, match="indent_char must be a single character"):
            TreeConfig(indent_char="  ")

        with pytest.raises(ValueError, match="non-newline whitespace"):
            TreeConfig(indent_char="-")

        with pytest.raises(ValueError, match="non-newline whitespace"):
            TreeConfig(indent_char="\n")

    def test_presets(self):
        """Test preset factory methods."""
        assert TreeConfig.lenient() == TreeConfig()
        assert TreeConfig.strict_mode().strict is True

        tabs = TreeConfig.tabs()
        assert tabs.indent_char == "\t"
        assert tabs.indent_unit == 1

    def test_is_immutable_and_hashable(self):
        """Test tree configuration is a frozen value."""
        config = TreeConfig(indent_unit=4)
        with pytest.raises(AttributeError):
            config.indent_unit = 2  # type: ignore[misc]

        assert hash(config) == hash(TreeConfig(indent_unit=4))
        assert replace(config, strict=True).strict is True
        assert config.strict is False


class TestGlobalConfig:
    """Test suite for GlobalConfig."""

    def test_default_configuration(self):
        """Test default global configuration values."""
        config = GlobalConfig()

        assert config.logging_level == "INFO"
        assert config.enable_correlation_tracking is True

    def test_invalid_logging_level(self):
        """Test invalid logging levels are rejected."""
        with pytest.raises(ValueError, match="logging_level must be one of"):
            GlobalConfig(logging_level="LOUD")


class TestIndentTreeConfig:
    """Test suite for the composed configuration."""

    def test_default_configuration(self):
        """Test default composition."""
        config = IndentTreeConfig()

        assert config.tree == TreeConfig()
        assert config.global_ == GlobalConfig()
        assert config.version == "1.0.0"
        assert config.name is None

    def test_is_immutable(self):
        """Test the composed configuration is frozen."""
        config = IndentTreeConfig()
        with pytest.raises(AttributeError):
            config.name = "changed"  # type: ignore[misc]

    def test_cross_component_validation(self):
        """Test correlation IDs require correlation tracking."""
        with pytest.raises(ConfigValidationError, match="correlation tracking is disabled") as exc_info:
            IndentTreeConfig(
                tree=TreeConfig(correlation_id="req-1"),
                global_=GlobalConfig(enable_correlation_tracking=False),
            )
        assert exc_info.value.field_name == "tree.correlation_id"
        assert len(exc_info.value.suggestions) == 2

    def test_override_nested_fields(self):
        """Test double-underscore override notation."""
        config = IndentTreeConfig()
        new_config = config.override(
            tree__indent_unit=4,
            global___logging_level="DEBUG",
            name="custom",
        )

        assert new_config.tree.indent_unit == 4
        assert new_config.global_.logging_level == "DEBUG"
        assert new_config.name == "custom"
        assert config.tree.indent_unit == 2

    def test_override_with_invalid_value(self):
        """Test invalid override values raise ConfigValidationError."""
        with pytest.raises(ConfigValidationError, match="indent_unit must be > 0"):
            IndentTreeConfig().override(tree__indent_unit=-1)

    def test_override_with_unknown_field(self):
        """Test unknown fields raise ConfigValidationError."""
        with pytest.raises(ConfigValidationError, match="Unknown configuration field"):
            IndentTreeConfig().override(tree__colour="red")
        with pytest.raises(ConfigError):
            IndentTreeConfig().override(colour="red")

    def test_dict_round_trip(self):
        """Test to_dict and from_dict agree."""
        config = IndentTreeConfig(tree=TreeConfig.tabs(), name="tabs")
        data = config.to_dict()

        assert data["tree"]["indent_char"] == "\t"
        assert IndentTreeConfig.from_dict(data) == config

    def test_json_serialization(self):
        """Test JSON output and parsing."""
        config = IndentTreeConfig().override(tree__strict=True)
        json_str = config.to_json()

        assert json.loads(json_str)["tree"]["strict"] is True
        assert IndentTreeConfig.from_json(json_str).tree.strict is True

    def test_from_dict_fills_defaults(self):
        """Test partial dictionaries use defaults for missing fields."""
        config = IndentTreeConfig.from_dict({"tree": {"indent_unit": 3}})
        assert config.tree.indent_unit == 3
        assert config.tree.indent_char == " "
        assert config.global_.logging_level == "INFO"

    def test_from_dict_validation_errors(self):
        """Test invalid data raises ConfigValidationError."""
        with pytest.raises(ConfigValidationError, match="indent_unit must be > 0"):
            IndentTreeConfig.from_dict({"tree": {"indent_unit": 0}})
        with pytest.raises(ConfigValidationError, match="Unknown configuration field"):
            IndentTreeConfig.from_dict({"tree": {"depth": 3}})

    def test_from_json_errors(self):
        """Test malformed JSON raises ConfigValidationError."""
        with pytest.raises(ConfigValidationError, match="Malformed configuration JSON"):
            IndentTreeConfig.from_json("{not json")
        with pytest.raises(ConfigValidationError, match="must be an object"):
            IndentTreeConfig.from_json("[1, 2]")
