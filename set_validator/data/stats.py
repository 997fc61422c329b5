"""Stat identifiers and IV/DV conversions.

Generations 1 and 2 use 0-15 DVs; every IV in those generations is
derived from a DV, and the HP DV is itself derived from the others.
"""

from typing import Dict, Mapping, Tuple

STAT_IDS: Tuple[str, ...] = ("hp", "atk", "def", "spa", "spd", "spe")

STAT_NAMES: Dict[str, str] = {
    "hp": "HP",
    "atk": "Atk",
    "def": "Def",
    "spa": "SpA",
    "spd": "SpD",
    "spe": "Spe",
}

MAX_IV = 31
MAX_EV = 255
MAX_TOTAL_EVS = 510


def itod(iv: int) -> int:
    """Convert an IV (0-31) to a DV (0-15)."""
    return iv // 2


def dtoi(dv: int) -> int:
    """Convert a DV (0-15) to its IV equivalent."""
    return dv * 2 + 1


def istods(ivs: Mapping[str, int]) -> Dict[str, int]:
    """Convert a full IV table to DVs."""
    return {stat: itod(ivs[stat]) for stat in STAT_IDS}


def get_hp_dv(ivs: Mapping[str, int]) -> int:
    """HP DV implied by the low bits of the Atk, Def, Spe and Spc DVs."""
    return (
        (itod(ivs["atk"]) % 2) * 8
        + (itod(ivs["def"]) % 2) * 4
        + (itod(ivs["spe"]) % 2) * 2
        + (itod(ivs["spa"]) % 2)
    )


def stat_from_label(label: str) -> str:
    """Map an export label ("SpA", "spa", "Spc") to a stat id."""
    key = label.strip().lower()
    if key == "spc":
        return "spa"
    for stat, name in STAT_NAMES.items():
        if key in (stat, name.lower()):
            return stat
    raise KeyError(label)
