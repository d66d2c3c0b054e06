"""Shared utilities for indentation trees.

This module provides the configuration objects, diagnostic types and logging
helpers used across the text, tree, API and CLI layers.
"""

from .config import (
    ConfigError,
    ConfigValidationError,
    GlobalConfig,
    IndentTreeConfig,
    TreeConfig,
)
from .logging import (
    CorrelationLogger,
    configure_logging,
    get_logger,
)
from .result import (
    DiagnosticEntry,
    DiagnosticSeverity,
)

__all__ = [
    "ConfigError",
    "ConfigValidationError",
    "GlobalConfig",
    "IndentTreeConfig",
    "TreeConfig",
    "CorrelationLogger",
    "configure_logging",
    "get_logger",
    "DiagnosticEntry",
    "DiagnosticSeverity",
]
