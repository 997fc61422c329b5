"""Pytest configuration and shared fixtures for set validator tests."""

import pytest
from pathlib import Path
import tempfile
from typing import Dict, Any

# Add project root to path
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))


# ====================
# Configuration Fixtures
# ====================

@pytest.fixture
def project_root() -> Path:
    """Get project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_config():
    """Create a default ValidatorConfig for testing."""
    from set_validator.core.config_schema import ValidatorConfig
    return ValidatorConfig()


# ====================
# Data Fixtures
# ====================

@pytest.fixture
def pokedex_data() -> Dict[str, Dict[str, Any]]:
    """Showdown-style pokedex entries."""
    return {
        "bulbasaur": {
            "num": 1, "name": "Bulbasaur", "types": ["Grass", "Poison"],
            "genderRatio": {"M": 0.875, "F": 0.125},
            "evos": ["Ivysaur"], "eggGroups": ["Monster", "Grass"],
        },
        "pikachu": {
            "num": 25, "name": "Pikachu", "types": ["Electric"],
            "prevo": "Pichu", "evos": ["Raichu"], "eggGroups": ["Field", "Fairy"],
        },
        "pikachustarter": {
            "num": 25, "name": "Pikachu-Starter", "baseSpecies": "Pikachu",
            "forme": "Starter", "types": ["Electric"], "eggGroups": ["Undiscovered"],
            "isNonstandard": "LGPE",
        },
        "nidoranm": {
            "num": 32, "name": "Nidoran-M", "types": ["Poison"], "gender": "M",
            "evos": ["Nidorino"], "eggGroups": ["Monster", "Field"],
        },
        "gengar": {
            "num": 94, "name": "Gengar", "types": ["Ghost", "Poison"],
            "prevo": "Haunter", "eggGroups": ["Amorphous"],
        },
        "eevee": {
            "num": 133, "name": "Eevee", "types": ["Normal"],
            "genderRatio": {"M": 0.875, "F": 0.125},
            "evos": ["Vaporeon", "Jolteon", "Flareon"], "eggGroups": ["Field"],
        },
        "mewtwo": {
            "num": 150, "name": "Mewtwo", "types": ["Psychic"], "gender": "N",
            "eggGroups": ["Undiscovered"],
        },
        "mew": {
            "num": 151, "name": "Mew", "types": ["Psychic"], "gender": "N",
            "eggGroups": ["Undiscovered"],
        },
        "pichu": {
            "num": 172, "name": "Pichu", "types": ["Electric"],
            "evos": ["Pikachu"], "eggGroups": ["Undiscovered"],
        },
        "unown": {
            "num": 201, "name": "Unown", "types": ["Psychic"], "gender": "N",
            "eggGroups": ["Undiscovered"],
        },
        "giratina": {
            "num": 487, "name": "Giratina", "types": ["Ghost", "Dragon"], "gender": "N",
            "eggGroups": ["Undiscovered"],
        },
        "giratinaorigin": {
            "num": 487, "name": "Giratina-Origin", "baseSpecies": "Giratina",
            "forme": "Origin", "types": ["Ghost", "Dragon"], "gender": "N",
            "eggGroups": ["Undiscovered"], "requiredItem": "Griseous Orb",
        },
        "manaphy": {
            "num": 490, "name": "Manaphy", "types": ["Water"], "gender": "N",
            "eggGroups": ["Water 1", "Fairy"],
        },
        "darmanitanzen": {
            "num": 555, "name": "Darmanitan-Zen", "baseSpecies": "Darmanitan",
            "forme": "Zen", "types": ["Fire", "Psychic"], "battleOnly": "Darmanitan",
            "eggGroups": ["Field"],
        },
        "diancie": {
            "num": 719, "name": "Diancie", "types": ["Rock", "Fairy"], "gender": "N",
            "eggGroups": ["Undiscovered"],
        },
    }


@pytest.fixture
def moves_data() -> Dict[str, Dict[str, Any]]:
    """Showdown-style move entries."""
    return {
        "swordsdance": {
            "num": 14, "name": "Swords Dance", "type": "Normal", "category": "Status",
            "boosts": {"atk": 2}, "zMove": {"effect": "clearnegativeboost"},
        },
        "tackle": {"num": 33, "name": "Tackle", "type": "Normal", "category": "Physical"},
        "thunderbolt": {"num": 85, "name": "Thunderbolt", "type": "Electric", "category": "Special"},
        "fissure": {"num": 90, "name": "Fissure", "type": "Ground", "category": "Physical", "ohko": True},
        "hypnosis": {
            "num": 95, "name": "Hypnosis", "type": "Psychic", "category": "Status",
            "zMove": {"boost": {"spe": 1}},
        },
        "agility": {
            "num": 97, "name": "Agility", "type": "Psychic", "category": "Status",
            "boosts": {"spe": 2}, "zMove": {"effect": "clearnegativeboost"},
        },
        "doubleteam": {
            "num": 104, "name": "Double Team", "type": "Normal", "category": "Status",
            "boosts": {"evasion": 1},
        },
        "minimize": {
            "num": 107, "name": "Minimize", "type": "Normal", "category": "Status",
            "boosts": {"evasion": 2},
        },
        "spore": {"num": 147, "name": "Spore", "type": "Grass", "category": "Status"},
        "conversion": {
            "num": 160, "name": "Conversion", "type": "Normal", "category": "Status",
            "zMove": {"boost": {"atk": 1, "def": 1, "spa": 1, "spd": 1, "spe": 1}},
        },
        "bellydrum": {
            "num": 187, "name": "Belly Drum", "type": "Normal", "category": "Status",
            "zMove": {"effect": "heal"},
        },
        "swagger": {
            "num": 207, "name": "Swagger", "type": "Normal", "category": "Status",
            "boosts": {"atk": 2},
        },
        "meanlook": {
            "num": 212, "name": "Mean Look", "type": "Normal", "category": "Status",
            "zMove": {"boost": {"spd": 1}},
        },
        "batonpass": {
            "num": 226, "name": "Baton Pass", "type": "Normal", "category": "Status",
            "zMove": {"effect": "clearnegativeboost"},
        },
        "trick": {
            "num": 271, "name": "Trick", "type": "Psychic", "category": "Status",
            "zMove": {"boost": {"spe": 2}},
        },
        "sheercold": {"num": 329, "name": "Sheer Cold", "type": "Ice", "category": "Special", "ohko": "Ice"},
        "powertrick": {
            "num": 379, "name": "Power Trick", "type": "Psychic", "category": "Status",
            "zMove": {"boost": {"atk": 1}},
        },
        "flamecharge": {"num": 488, "name": "Flame Charge", "type": "Fire", "category": "Physical"},
    }


@pytest.fixture
def items_data() -> Dict[str, Dict[str, Any]]:
    """Showdown-style item entries."""
    return {
        "leftovers": {"num": 234, "name": "Leftovers", "gen": 2},
        "salacberry": {"num": 207, "name": "Salac Berry", "gen": 3},
        "choiceband": {"num": 220, "name": "Choice Band", "gen": 3},
        "griseousorb": {"num": 112, "name": "Griseous Orb", "gen": 4},
        "weaknesspolicy": {"num": 639, "name": "Weakness Policy", "gen": 6},
        "normaliumz": {"num": 776, "name": "Normalium Z", "gen": 7, "zMove": True, "zMoveType": "Normal"},
        "psychiumz": {"num": 786, "name": "Psychium Z", "gen": 7, "zMove": True, "zMoveType": "Psychic"},
    }


@pytest.fixture
def abilities_data() -> Dict[str, Dict[str, Any]]:
    """Showdown-style ability entries."""
    return {
        "speedboost": {"num": 3, "name": "Speed Boost"},
        "sandveil": {"num": 8, "name": "Sand Veil"},
        "static": {"num": 9, "name": "Static"},
        "levitate": {"num": 26, "name": "Levitate"},
        "clearbody": {"num": 29, "name": "Clear Body"},
        "pressure": {"num": 46, "name": "Pressure"},
        "overgrow": {"num": 65, "name": "Overgrow"},
        "cursedbody": {"num": 130, "name": "Cursed Body"},
        "moody": {"num": 141, "name": "Moody"},
    }


@pytest.fixture
def dex(pokedex_data, moves_data, items_data, abilities_data):
    """Create a Dex from the sample tables."""
    from set_validator.data.dex import Dex
    return Dex.from_showdown(
        pokedex=pokedex_data,
        moves=moves_data,
        items=items_data,
        abilities=abilities_data,
    )


@pytest.fixture
def registry():
    """Create a registry with the built-in rule sets."""
    from set_validator.data.formats import RuleRegistry
    return RuleRegistry()


@pytest.fixture
def validator(dex, registry):
    """Create a SetValidator over the sample dex."""
    from set_validator.validation import SetValidator
    return SetValidator(dex, registry)


@pytest.fixture
def make_set():
    """Factory for PokemonSet objects."""
    from set_validator.data.schemas import PokemonSet

    def _make(species: str, **kwargs) -> PokemonSet:
        return PokemonSet(species=species, **kwargs)

    return _make


@pytest.fixture
def sample_export() -> str:
    """Create sample Showdown export text."""
    return """
=== [gen7ou] Sample ===

Sparky (Pikachu) (F) @ Leftovers
Ability: Static
Level: 50
Shiny: Yes
EVs: 252 SpA / 4 SpD / 252 Spe
Timid Nature
IVs: 0 Atk
- Thunderbolt
- Baton Pass

Gengar @ Choice Band
Ability: Cursed Body
EVs: 252 Atk / 252 Spe
Jolly Nature
- Tackle
- Hypnosis
""".strip()
