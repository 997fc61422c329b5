"""Self-contained legality predicates used by the set validator.

Each check is a pure function over already-resolved data. The lookup
sets are Showdown ids and are built once at import.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import FrozenSet, Iterable, Mapping, Optional, Tuple

from ..data.ids import to_id
from ..data.schemas import Item, Move, Species
from ..data.stats import MAX_IV, STAT_IDS, itod


def id_set(*ids: str) -> FrozenSet[str]:
    return frozenset(ids)


# ====================
# Gen 2 Sleep Trapping
# ====================

SLEEP_MOVES = id_set("hypnosis", "lovelykiss", "sing", "sleeppowder", "spore")
TRAP_MOVES = id_set("meanlook", "spiderweb")


def check_sleep_trap(moves: Iterable[Move]) -> bool:
    """True if the moves include both a sleep move and a trapping move."""
    sleep = False
    trap = False
    for move in moves:
        if move.id in SLEEP_MOVES:
            sleep = True
        elif move.id in TRAP_MOVES:
            trap = True
    return sleep and trap


# ====================
# Baton Pass Clause
# ====================

SPEED_BOOST_ABILITIES = id_set("motordrive", "rattled", "speedboost", "steadfast", "weakarmor")
SPEED_BOOST_ITEMS = id_set("blazikenite", "eeviumz", "kommoniumz", "salacberry")
NON_SPEED_BOOST_ABILITIES = id_set(
    "angerpoint", "competitive", "defiant", "download", "justified",
    "lightningrod", "moxie", "sapsipper", "stormdrain",
)
NON_SPEED_BOOST_ITEMS = id_set(
    "absorbbulb", "apicotberry", "cellbattery", "eeviumz", "ganlonberry",
    "keeberry", "kommoniumz", "liechiberry", "luminousmoss", "marangaberry",
    "petayaberry", "snowball", "starfberry", "weaknesspolicy",
)
NON_SPEED_BOOST_MOVES = id_set(
    "acupressure", "bellydrum", "chargebeam", "curse", "diamondstorm",
    "fellstinger", "fierydance", "flowershield", "poweruppunch", "rage",
    "rototiller", "skullbash", "stockpile",
)
NON_SPEED_STATS = ("atk", "def", "spa", "spd")


class SourceKind(Enum):
    """Where a passable boost comes from."""
    NONE = auto()
    GENERIC = auto()  # ability, item or regular move
    Z_MOVE = auto()   # only the Z-powered form of one move


@dataclass(frozen=True)
class BoostSource:
    """Attribution of a Speed or non-Speed boost."""

    kind: SourceKind = SourceKind.NONE
    move: Optional[str] = None

    @classmethod
    def generic(cls) -> "BoostSource":
        return cls(SourceKind.GENERIC)

    @classmethod
    def z_move(cls, move_name: str) -> "BoostSource":
        return cls(SourceKind.Z_MOVE, move_name)

    def __bool__(self) -> bool:
        return self.kind is not SourceKind.NONE


NO_SOURCE = BoostSource()


def _boosts_non_speed(move: Move, z_move: bool = False) -> bool:
    return any(move.boosts_stat(stat, z_move=z_move) for stat in NON_SPEED_STATS)


def baton_pass_sources(
    moves: Iterable[Move],
    item: Optional[Item],
    ability: Optional[str],
) -> Tuple[BoostSource, BoostSource]:
    """Attribute the Speed and non-Speed boosts a set can pass.

    Returns:
        (speed, non_speed) BoostSource pair
    """
    ability_id = to_id(ability)
    speed = NO_SOURCE
    non_speed = NO_SOURCE

    for move in moves:
        if move.id == "flamecharge" or move.boosts_stat("spe"):
            speed = BoostSource.generic()

        if move.id in NON_SPEED_BOOST_MOVES or _boosts_non_speed(move):
            non_speed = BoostSource.generic()

        if item is not None and item.is_z_crystal and move.type == item.z_move_type:
            if move.boosts_stat("spe", z_move=True) and not speed:
                speed = BoostSource.z_move(move.name)

            if _boosts_non_speed(move, z_move=True):
                if not non_speed or move.name == speed.move:
                    non_speed = BoostSource.z_move(move.name)

    if ability_id in SPEED_BOOST_ABILITIES or (item is not None and item.id in SPEED_BOOST_ITEMS):
        speed = BoostSource.generic()
    if ability_id in NON_SPEED_BOOST_ABILITIES or (item is not None and item.id in NON_SPEED_BOOST_ITEMS):
        non_speed = BoostSource.generic()

    return speed, non_speed


def check_baton_pass(
    moves: Iterable[Move],
    item: Optional[Item],
    ability: Optional[str],
) -> bool:
    """True if the set can Baton Pass Speed together with another stat.

    Passing both is allowed only when each boost comes from the Z-powered
    form of a different move, since a set gets a single Z-move per battle.
    """
    speed, non_speed = baton_pass_sources(moves, item, ability)
    if not speed:
        return False
    if not non_speed:
        return False

    distinct_z_moves = (
        speed.kind is SourceKind.Z_MOVE
        and non_speed.kind is SourceKind.Z_MOVE
        and speed.move != non_speed.move
    )
    return not distinct_z_moves


# ====================
# Legendary IV Floor
# ====================

MIN_LEGENDARY_PERFECT_IVS = 3


def is_legendary(species: Species, shiny: bool = False) -> bool:
    """Whether Gen 6+ games guarantee the species three perfect IVs."""
    primary_egg_group = species.egg_groups[0] if species.egg_groups else None
    return (
        (primary_egg_group == "Undiscovered" or species.name == "Manaphy")
        and not species.prevo
        and not species.nfe
        and species.name != "Unown"
        and species.base_species != "Pikachu"
        and (species.base_species != "Diancie" or not shiny)
    )


def count_perfect_ivs(ivs: Mapping[str, int]) -> int:
    return sum(1 for stat in STAT_IDS if ivs[stat] >= MAX_IV)


# ====================
# Gen 2 DVs
# ====================

def gen2_gender_threshold(species: Species) -> int:
    """Atk DV at or above which a Gen 2 Pokemon is male."""
    threshold = int(species.gender_ratio.F * 16)
    # Match the game's DV tables for 25% and 50% female ratios
    if threshold == 4:
        threshold = 5
    if threshold == 8:
        threshold = 7
    return threshold


def gen2_expected_gender(species: Species, atk_iv: int) -> str:
    return "M" if itod(atk_iv) >= gen2_gender_threshold(species) else "F"


def gen2_is_shiny(dvs: Mapping[str, int]) -> bool:
    """Gen 2 shininess is fully determined by DVs."""
    return (
        dvs["def"] == 10
        and dvs["spe"] == 10
        and dvs["spa"] == 10
        and dvs["atk"] % 4 >= 2
    )
