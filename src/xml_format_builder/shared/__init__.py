"""Shared utilities for XML formatting.

This module provides the configuration objects, diagnostic types and logging
helpers used across the builder, the DTD model and the adapters.
"""

from .result import (
    DiagnosticEntry,
    DiagnosticSeverity,
)
from .config import (
    BuilderConfig,
    ConfigError,
    ConfigValidationError,
    FormattingOptions,
)
from .logging import (
    CorrelationLogger,
    get_logger,
    set_package_log_level,
)

__all__ = [
    "DiagnosticEntry",
    "DiagnosticSeverity",
    "BuilderConfig",
    "ConfigError",
    "ConfigValidationError",
    "FormattingOptions",
    "CorrelationLogger",
    "get_logger",
    "set_package_log_level",
]
