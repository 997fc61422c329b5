"""Core infrastructure: configuration, logging and errors."""

from .config_schema import ValidatorConfig, DataConfig, FormatsConfig, LoggingConfig
from .errors import (
    SetValidatorError,
    ConfigError,
    DataLoadError,
    FormatNotFoundError,
    SetParseError,
)
from .logging import setup_logging

__all__ = [
    "ValidatorConfig",
    "DataConfig",
    "FormatsConfig",
    "LoggingConfig",
    "SetValidatorError",
    "ConfigError",
    "DataLoadError",
    "FormatNotFoundError",
    "SetParseError",
    "setup_logging",
]
