"""Configuration classes for indentation trees.

This module provides configuration objects for the indentation encoding and
for process-wide behaviour such as logging, with validation, presets and
JSON round-tripping.
"""

import json
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional

VALID_LOGGING_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@dataclass(frozen=True)
class TreeConfig:
    """Configuration for the indentation encoding of a tree.

    Frozen so that the ``IndentTree`` values holding it stay hashable; use
    ``dataclasses.replace`` or ``IndentTreeConfig.override`` for variants.
    """

    indent_unit: int = 2
    indent_char: str = " "
    strict: bool = False
    correlation_id: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate tree configuration."""
        if self.indent_unit <= 0:
            raise ValueError("indent_unit must be > 0")
        if len(self.indent_char) != 1:
            raise ValueError("indent_char must be a single character")
        if not self.indent_char.isspace() or self.indent_char == "\n":
            raise ValueError("indent_char must be a non-newline whitespace character")

    @classmethod
    def lenient(cls) -> "TreeConfig":
        """Create the default configuration: never raises on malformed input."""
        return cls()

    @classmethod
    def strict_mode(cls) -> "TreeConfig":
        """Create configuration that validates indentation and addresses."""
        return cls(strict=True)

    @classmethod
    def tabs(cls) -> "TreeConfig":
        """Create configuration for one tab per level."""
        return cls(indent_unit=1, indent_char="\t")


@dataclass(frozen=True)
class GlobalConfig:
    """Global settings that apply across all components."""

    logging_level: str = "INFO"
    enable_correlation_tracking: bool = True

    def __post_init__(self) -> None:
        """Validate global configuration."""
        if self.logging_level not in VALID_LOGGING_LEVELS:
            raise ValueError(f"logging_level must be one of {VALID_LOGGING_LEVELS}")


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []


_COMPONENTS = ("tree", "global_")


@dataclass(frozen=True)
class IndentTreeConfig:
    """Complete, immutable configuration for the library and CLI.

    Thread-safe due to frozen dataclass implementation.
    """

    tree: TreeConfig = field(default_factory=TreeConfig)
    global_: GlobalConfig = field(default_factory=GlobalConfig)

    version: str = "1.0.0"
    name: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate the complete configuration."""
        try:
            self.tree.__post_init__()
            self.global_.__post_init__()
        except ValueError as e:
            raise ConfigValidationError(str(e)) from e

        if self.tree.correlation_id and not self.global_.enable_correlation_tracking:
            raise ConfigValidationError(
                "tree.correlation_id is set but correlation tracking is disabled",
                field_name="tree.correlation_id",
                suggestions=["Clear tree.correlation_id",
                             "Enable global_.enable_correlation_tracking"]
            )

    def override(self, **kwargs: Any) -> "IndentTreeConfig":
        """Create a new configuration with specific overrides.

        Example:
            >>> config = IndentTreeConfig()
            >>> config.override(tree__indent_unit=4).tree.indent_unit
            4
        """
        nested_overrides: Dict[str, Any] = {}
        for key, value in kwargs.items():
            for component in _COMPONENTS:
                prefix = component + "__"
                if key.startswith(prefix):
                    nested_overrides.setdefault(component, {})[key[len(prefix):]] = value
                    break
            else:
                nested_overrides[key] = value

        new_fields: Dict[str, Any] = {}
        try:
            for component in _COMPONENTS:
                current = getattr(self, component)
                if component in nested_overrides:
                    new_fields[component] = replace(current, **nested_overrides[component])
                else:
                    new_fields[component] = current
        except ValueError as e:
            raise ConfigValidationError(str(e)) from e
        except TypeError as e:
            raise ConfigValidationError(f"Unknown configuration field: {e}") from e

        for key, value in nested_overrides.items():
            if key not in _COMPONENTS:
                new_fields[key] = value

        try:
            return replace(self, **new_fields)
        except TypeError as e:
            raise ConfigValidationError(f"Unknown configuration field: {e}") from e

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format."""
        return {
            "tree": {
                "indent_unit": self.tree.indent_unit,
                "indent_char": self.tree.indent_char,
                "strict": self.tree.strict,
                "correlation_id": self.tree.correlation_id,
            },
            "global_": {
                "logging_level": self.global_.logging_level,
                "enable_correlation_tracking": self.global_.enable_correlation_tracking,
            },
            "version": self.version,
            "name": self.name,
        }

    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "IndentTreeConfig":
        """Create configuration from dictionary.

        Missing sections and fields fall back to their defaults.
        """
        try:
            tree = TreeConfig(**data.get("tree", {}))
            global_ = GlobalConfig(**data.get("global_", {}))
        except ValueError as e:
            raise ConfigValidationError(str(e)) from e
        except TypeError as e:
            raise ConfigValidationError(f"Unknown configuration field: {e}") from e

        metadata = {key: data[key] for key in ("version", "name") if key in data}
        return cls(tree=tree, global_=global_, **metadata)

    @classmethod
    def from_json(cls, json_str: str) -> "IndentTreeConfig":
        """Create configuration from JSON string."""
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise ConfigValidationError(f"Malformed configuration JSON: {e}") from e
        if not isinstance(data, dict):
            raise ConfigValidationError("Configuration JSON must be an object")
        return cls.from_dict(data)
