"""Configuration schemas for the set validator using Hydra and OmegaConf.

This module defines structured configs that provide type safety
and defaults for all configuration options.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any


# ====================
# Path Configuration
# ====================

@dataclass
class PathsConfig:
    """Paths configuration."""
    root: str = "."
    data: str = "${paths.root}/data"


# ====================
# Data Configuration
# ====================

@dataclass
class DataConfig:
    """Where species/move/item/ability tables come from.

    ``source`` is either ``json`` (Showdown-format JSON files at the paths
    below) or ``poke_env`` (pokedex and moves from poke-env's bundled
    game data, items and abilities still read from JSON when given).
    """
    source: str = "json"
    pokedex: Optional[str] = "${paths.data}/pokedex.json"
    moves: Optional[str] = "${paths.data}/moves.json"
    items: Optional[str] = "${paths.data}/items.json"
    abilities: Optional[str] = "${paths.data}/abilities.json"
    poke_env_gen: int = 9


# ====================
# Format Configuration
# ====================

@dataclass
class RuleSetConfig:
    """A user-defined rule set."""
    gen: int = 7
    name: str = ""
    tier: str = "OU"
    clauses: List[str] = field(default_factory=list)
    little_cup: bool = False


@dataclass
class FormatsConfig:
    """Format resolution configuration."""
    default: str = "gen7ou"
    extra: Dict[str, RuleSetConfig] = field(default_factory=dict)


# ====================
# Logging Configuration
# ====================

@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    format: str = "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan> - <level>{message}</level>"
    file: Optional[str] = None
    rotation: str = "10 MB"


# ====================
# Main Configuration
# ====================

@dataclass
class ValidatorConfig:
    """Root configuration for the set validator."""
    paths: PathsConfig = field(default_factory=PathsConfig)
    data: DataConfig = field(default_factory=DataConfig)
    formats: FormatsConfig = field(default_factory=FormatsConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def extra_rulesets(self) -> Dict[str, Dict[str, Any]]:
        """Return configured extra rule sets as plain dictionaries."""
        return {
            format_id: {
                "gen": rs.gen,
                "name": rs.name or format_id,
                "tier": rs.tier,
                "clauses": list(rs.clauses),
                "little_cup": rs.little_cup,
            }
            for format_id, rs in self.formats.extra.items()
        }
