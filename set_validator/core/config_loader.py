"""Hydra utilities for loading and managing configurations.

This module provides helpers for loading configs with Hydra
and converting them to typed dataclasses.
"""

from pathlib import Path
from typing import Optional

from omegaconf import DictConfig, OmegaConf
from hydra import compose, initialize_config_dir
from hydra.core.global_hydra import GlobalHydra
from loguru import logger

from .config_schema import (
    ValidatorConfig, PathsConfig, DataConfig, FormatsConfig,
    RuleSetConfig, LoggingConfig,
)
from .errors import ConfigError


def get_config_dir() -> Path:
    """Get the config directory path."""
    possible_paths = [
        Path(__file__).parent.parent.parent / "config",  # From set_validator/core/
        Path.cwd() / "config",
    ]

    for path in possible_paths:
        if path.exists():
            return path.resolve()

    raise ConfigError(
        f"Could not find config directory. Searched: {possible_paths}"
    )


def load_config(
    config_name: str = "default",
    overrides: Optional[list] = None,
    config_dir: Optional[Path] = None,
) -> ValidatorConfig:
    """Load configuration using Hydra.

    Args:
        config_name: Name of the config file (without .yaml)
        overrides: List of config overrides (e.g., ["formats.default=gen4ou"])
        config_dir: Directory holding the YAML files (searched for if None)

    Returns:
        Loaded configuration as ValidatorConfig
    """
    config_dir = Path(config_dir) if config_dir else get_config_dir()

    # Clear any existing Hydra instance
    if GlobalHydra.instance().is_initialized():
        GlobalHydra.instance().clear()

    try:
        with initialize_config_dir(config_dir=str(config_dir.resolve()), version_base="1.3"):
            cfg = compose(config_name=config_name, overrides=overrides or [])
    except Exception as e:
        raise ConfigError(f"Failed to compose config '{config_name}': {e}") from e

    logger.debug(f"Loaded config '{config_name}' from {config_dir}")
    return dict_to_config(cfg)


def dict_to_config(cfg: DictConfig) -> ValidatorConfig:
    """Convert DictConfig to structured ValidatorConfig.

    Keys absent from the YAML fall back to the dataclass defaults.

    Args:
        cfg: OmegaConf DictConfig

    Returns:
        Structured ValidatorConfig dataclass
    """
    raw = OmegaConf.to_container(cfg, resolve=True) if isinstance(cfg, DictConfig) else dict(cfg)

    def get(d, *keys, default=None):
        for key in keys:
            if isinstance(d, dict) and key in d:
                d = d[key]
            else:
                return default
        return d

    paths_defaults = PathsConfig()
    paths = PathsConfig(
        root=get(raw, "paths", "root", default=paths_defaults.root),
        data=get(raw, "paths", "data", default="./data"),
    )

    data_defaults = DataConfig()
    data = DataConfig(
        source=get(raw, "data", "source", default=data_defaults.source),
        pokedex=get(raw, "data", "pokedex", default=f"{paths.data}/pokedex.json"),
        moves=get(raw, "data", "moves", default=f"{paths.data}/moves.json"),
        items=get(raw, "data", "items", default=f"{paths.data}/items.json"),
        abilities=get(raw, "data", "abilities", default=f"{paths.data}/abilities.json"),
        poke_env_gen=get(raw, "data", "poke_env_gen", default=data_defaults.poke_env_gen),
    )

    extra = {}
    for format_id, entry in (get(raw, "formats", "extra", default={}) or {}).items():
        extra[format_id] = RuleSetConfig(
            gen=get(entry, "gen", default=7),
            name=get(entry, "name", default=format_id),
            tier=get(entry, "tier", default="OU"),
            clauses=list(get(entry, "clauses", default=[]) or []),
            little_cup=bool(get(entry, "little_cup", default=False)),
        )

    formats = FormatsConfig(
        default=get(raw, "formats", "default", default=FormatsConfig().default),
        extra=extra,
    )

    logging_defaults = LoggingConfig()
    logging = LoggingConfig(
        level=get(raw, "logging", "level", default=logging_defaults.level),
        format=get(raw, "logging", "format", default=logging_defaults.format),
        file=get(raw, "logging", "file", default=logging_defaults.file),
        rotation=get(raw, "logging", "rotation", default=logging_defaults.rotation),
    )

    return ValidatorConfig(
        paths=paths,
        data=data,
        formats=formats,
        logging=logging,
    )
