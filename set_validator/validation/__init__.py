"""Set validation engine."""

from .validator import SetValidator, ValidationContext, validate
from .checks import (
    BoostSource,
    SourceKind,
    check_baton_pass,
    check_sleep_trap,
    is_legendary,
)

__all__ = [
    "SetValidator",
    "ValidationContext",
    "validate",
    "BoostSource",
    "SourceKind",
    "check_baton_pass",
    "check_sleep_trap",
    "is_legendary",
]
