"""Exceptions raised outside the validation path.

Set validation itself never raises for bad set content; problems are
reported as strings. These errors cover loading data, resolving
configuration and parsing user input.
"""


class SetValidatorError(Exception):
    """Base exception for set validator errors."""
    pass


class ConfigError(SetValidatorError):
    """Raised when configuration cannot be located or composed."""
    pass


class DataLoadError(SetValidatorError):
    """Raised when a data table cannot be read or contains invalid records."""
    pass


class FormatNotFoundError(SetValidatorError):
    """Raised when a format identifier has no registered rule set."""
    pass


class SetParseError(SetValidatorError):
    """Raised when exported set text cannot be parsed."""
    pass
