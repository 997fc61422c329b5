"""Pokemon set legality validation."""

from .data.formats import Format, RuleRegistry, RuleSet
from .data.schemas import PokemonSet, StatsTable
from .validation.validator import SetValidator, validate

__version__ = "0.1.0"

__all__ = [
    "Format",
    "RuleRegistry",
    "RuleSet",
    "PokemonSet",
    "StatsTable",
    "SetValidator",
    "validate",
]
