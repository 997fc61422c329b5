"""Static game data: schemas, lookup tables, formats and stat helpers."""

from .ids import to_id
from .schemas import (
    PokemonSet,
    StatsTable,
    Species,
    Move,
    Item,
    Ability,
    Nature,
    Tier,
)
from .dex import Dex, DataTable
from .formats import Format, RuleSet, RuleRegistry

__all__ = [
    "to_id",
    "PokemonSet",
    "StatsTable",
    "Species",
    "Move",
    "Item",
    "Ability",
    "Nature",
    "Tier",
    "Dex",
    "DataTable",
    "Format",
    "RuleSet",
    "RuleRegistry",
]
