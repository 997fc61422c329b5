"""Pydantic schemas for sets and static game data.

Static records (species, moves, items, abilities) accept the Pokemon
Showdown JSON data layout directly: camelCase keys such as
``baseSpecies``, ``eggGroups`` or ``zMoveType`` are mapped onto
snake_case fields, unknown keys are ignored, and fields Showdown leaves
implicit (generation of introduction, tier, gender ratio) are derived.
"""

from enum import Enum
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import (
    BaseModel, Field, field_validator, model_validator,
    ConfigDict, computed_field
)
from pydantic.alias_generators import to_camel

from .ids import to_id
from .stats import STAT_IDS, MAX_IV


# ====================
# Enums
# ====================

class Tier(str, Enum):
    """Legal-availability classification of a species."""
    ILLEGAL = "Illegal"
    UNRELEASED = "Unreleased"
    NORMAL = "Normal"


Gender = Literal["M", "F", "N"]

ILLEGAL_NONSTANDARD = {"CAP", "LGPE", "Custom", "Future"}
UNRELEASED_NONSTANDARD = {"Unobtainable"}


# ====================
# Generation Derivation
# ====================

# (last num of the generation, generation)
SPECIES_GEN_BOUNDS = [(151, 1), (251, 2), (386, 3), (493, 4), (649, 5), (721, 6), (809, 7), (905, 8)]
MOVE_GEN_BOUNDS = [(165, 1), (251, 2), (354, 3), (467, 4), (559, 5), (621, 6), (742, 7), (826, 8)]
ABILITY_GEN_BOUNDS = [(76, 3), (123, 4), (164, 5), (191, 6), (233, 7), (267, 8)]


def gen_from_num(num: int, bounds: List[tuple], latest: int = 9) -> int:
    """Generation a dex number falls in; 0 for non-positive (fan-made) numbers."""
    if num <= 0:
        return 0
    for last, gen in bounds:
        if num <= last:
            return gen
    return latest


def species_gen(num: int, forme: str) -> int:
    """Generation a species forme was introduced in."""
    base_gen = gen_from_num(num, SPECIES_GEN_BOUNDS)
    if not forme:
        return base_gen
    if "Paldea" in forme:
        forme_gen = 9
    elif forme in ("Gmax", "Galar", "Galar-Zen", "Hisui") or forme.startswith("Hisui"):
        forme_gen = 8
    elif forme.startswith("Alola") or forme == "Starter":
        forme_gen = 7
    elif forme == "Primal" or forme.startswith("Mega"):
        forme_gen = 6
    else:
        forme_gen = 0
    return max(base_gen, forme_gen)


def _tier_from_record(data: Dict[str, Any]) -> Tier:
    explicit = data.get("tier")
    if isinstance(explicit, Tier):
        return explicit
    if explicit in ("Illegal", "Unreleased"):
        return Tier(explicit)
    nonstandard = data.get("isNonstandard") or data.get("is_nonstandard")
    if nonstandard in ILLEGAL_NONSTANDARD:
        return Tier.ILLEGAL
    if nonstandard in UNRELEASED_NONSTANDARD:
        return Tier.UNRELEASED
    return Tier.NORMAL


class DexRecord(BaseModel):
    """Common base for static data records."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    id: str = ""
    name: str = Field(..., min_length=1)
    num: int = 0
    gen: int = 0
    is_nonstandard: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def fill_id(cls, data: Any) -> Any:
        """Default the id to the normalized name."""
        if isinstance(data, dict) and not data.get("id"):
            data = dict(data)
            data["id"] = to_id(data.get("name"))
        return data

    def __str__(self) -> str:
        return self.name


# ====================
# Stats
# ====================

class StatsTable(BaseModel):
    """Per-stat values (IVs or EVs)."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    hp: int = 0
    atk: int = 0
    def_: int = Field(default=0, alias="def")
    spa: int = 0
    spd: int = 0
    spe: int = 0

    @classmethod
    def filled(cls, value: int) -> "StatsTable":
        """Table with every stat set to ``value``."""
        return cls.model_validate({stat: value for stat in STAT_IDS})

    def __getitem__(self, stat: str) -> int:
        return getattr(self, "def_" if stat == "def" else stat)

    def items(self) -> List[tuple]:
        return [(stat, self[stat]) for stat in STAT_IDS]

    def to_dict(self) -> Dict[str, int]:
        return dict(self.items())

    @computed_field
    @property
    def total(self) -> int:
        """Sum over all stats."""
        return sum(value for _, value in self.items())


def _stats_input(value: Any, default: int) -> Any:
    """Complete a partial stat mapping with ``default`` for missing stats."""
    if value is None:
        return StatsTable.filled(default)
    if isinstance(value, dict):
        full = {stat: default for stat in STAT_IDS}
        for key, stat_value in value.items():
            full["def" if key == "def_" else key] = stat_value
        return full
    return value


# ====================
# Set Schema
# ====================

class PokemonSet(BaseModel):
    """A user-submitted set under validation."""

    model_config = ConfigDict(extra="ignore")

    species: str = Field(..., min_length=1)
    name: Optional[str] = None
    level: Optional[int] = None
    gender: Optional[Gender] = None
    shiny: bool = False
    moves: List[str] = Field(default_factory=list)
    ivs: StatsTable = Field(default_factory=lambda: StatsTable.filled(MAX_IV))
    evs: StatsTable = Field(default_factory=StatsTable)
    nature: Optional[str] = None
    ability: Optional[str] = None
    item: Optional[str] = None

    @field_validator("ivs", mode="before")
    @classmethod
    def fill_ivs(cls, v: Any) -> Any:
        """Unspecified IVs default to 31."""
        return _stats_input(v, MAX_IV)

    @field_validator("evs", mode="before")
    @classmethod
    def fill_evs(cls, v: Any) -> Any:
        """Unspecified EVs default to 0."""
        return _stats_input(v, 0)

    @field_validator("name", "nature", "item", mode="before")
    @classmethod
    def blank_to_none(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def display_name(self) -> str:
        """Nickname if given, otherwise the species."""
        return self.name or self.species


# ====================
# Static Data Schemas
# ====================

class GenderRatio(BaseModel):
    """Male/female ratio for species without a fixed gender."""

    model_config = ConfigDict(frozen=True)

    M: float = 0.5
    F: float = 0.5


class Species(DexRecord):
    """Species data for one forme."""

    base_species: str = ""
    forme: str = ""
    tier: Tier = Tier.NORMAL
    gender: Optional[Gender] = None
    gender_ratio: GenderRatio = Field(default_factory=GenderRatio)
    prevo: Optional[str] = None
    evos: List[str] = Field(default_factory=list)
    egg_groups: List[str] = Field(default_factory=list)
    battle_only: Optional[Union[str, List[str]]] = None
    required_item: Optional[str] = None
    required_items: List[str] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def derive_fields(cls, data: Any) -> Any:
        """Fill generation, tier, base species and gender ratio."""
        if not isinstance(data, dict):
            return data
        data = dict(data)
        forme = data.get("forme") or ""
        if not data.get("gen"):
            data["gen"] = species_gen(int(data.get("num", 0)), forme)
        data["tier"] = _tier_from_record(data)
        if not data.get("baseSpecies") and not data.get("base_species"):
            data["baseSpecies"] = data.get("name", "")
        gender = data.get("gender")
        if gender and not data.get("genderRatio") and not data.get("gender_ratio"):
            data["genderRatio"] = {
                "M": {"M": 1.0, "F": 0.0, "N": 0.0}[gender],
                "F": {"M": 0.0, "F": 1.0, "N": 0.0}[gender],
            }
        return data

    @property
    def nfe(self) -> bool:
        """Whether the species can still evolve."""
        return bool(self.evos)

    @property
    def all_required_items(self) -> List[str]:
        if self.required_items:
            return list(self.required_items)
        return [self.required_item] if self.required_item else []


def _numeric_boosts(data: Any) -> Dict[str, int]:
    if not isinstance(data, dict):
        return {}
    return {stat: int(value) for stat, value in data.items() if isinstance(value, (int, float))}


class Move(DexRecord):
    """Move data relevant to legality checks."""

    type: str = "???"
    category: str = "Status"
    ohko: bool = False
    boosts: Dict[str, int] = Field(default_factory=dict)
    z_move_boosts: Dict[str, int] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def derive_fields(cls, data: Any) -> Any:
        """Normalise Showdown's ``ohko``/``zMove`` encodings and the generation."""
        if not isinstance(data, dict):
            return data
        data = dict(data)
        if not data.get("gen"):
            data["gen"] = gen_from_num(int(data.get("num", 0)), MOVE_GEN_BOUNDS)
        # Showdown stores the immune type (e.g. "Ice") for Sheer Cold
        data["ohko"] = bool(data.get("ohko"))
        data["boosts"] = _numeric_boosts(data.get("boosts"))
        z_move = data.pop("zMove", None)
        if isinstance(z_move, dict) and "zMoveBoosts" not in data:
            data["zMoveBoosts"] = _numeric_boosts(z_move.get("boost"))
        return data

    def boosts_stat(self, stat: str, z_move: bool = False) -> bool:
        """Whether the move (or its Z-powered form) raises ``stat``."""
        boosts = self.z_move_boosts if z_move else self.boosts
        return boosts.get(stat, 0) > 0


class Item(DexRecord):
    """Held item data."""

    gen: int = 2
    z_move: Optional[Union[bool, str]] = None
    z_move_type: Optional[str] = None

    @property
    def is_z_crystal(self) -> bool:
        return bool(self.z_move)


class Ability(DexRecord):
    """Ability data."""

    @model_validator(mode="before")
    @classmethod
    def derive_gen(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("gen"):
            data = dict(data)
            data["gen"] = gen_from_num(int(data.get("num", 0)), ABILITY_GEN_BOUNDS) or 3
        return data


class Nature(BaseModel):
    """A nature and the stats it raises/lowers."""

    model_config = ConfigDict(frozen=True)

    name: str
    plus: Optional[str] = None
    minus: Optional[str] = None

    @computed_field
    @property
    def id(self) -> str:
        return to_id(self.name)

    def __str__(self) -> str:
        return self.name
