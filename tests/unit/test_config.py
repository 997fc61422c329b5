"""Unit tests for configuration management."""

import pytest
from pathlib import Path

from set_validator.config import CONFIG_DIR, PROJECT_ROOT, config
from set_validator.core.config_loader import dict_to_config, get_config_dir, load_config
from set_validator.core.config_schema import (
    ValidatorConfig, PathsConfig, DataConfig, FormatsConfig, LoggingConfig, RuleSetConfig,
)
from set_validator.core.errors import ConfigError


class TestValidatorConfig:
    """Tests for ValidatorConfig dataclass."""

    def test_default_config(self, sample_config):
        """Test creating config with defaults."""
        assert sample_config.formats.default == "gen7ou"
        assert sample_config.data.source == "json"
        assert sample_config.logging.level == "INFO"
        assert sample_config.formats.extra == {}

    def test_paths_config(self):
        """Test PathsConfig defaults."""
        config = PathsConfig()

        assert config.root == "."
        assert "${paths.root}" in config.data

    def test_data_config(self):
        """Test DataConfig defaults."""
        config = DataConfig()

        assert config.poke_env_gen == 9
        assert config.pokedex.endswith("pokedex.json")

    def test_logging_config(self):
        """Test LoggingConfig defaults."""
        config = LoggingConfig()

        assert config.file is None
        assert config.rotation == "10 MB"
        assert "{message}" in config.format

    def test_extra_rulesets(self):
        """Test converting configured rule sets to dictionaries."""
        config = ValidatorConfig(formats=FormatsConfig(extra={
            "gen7monotype": RuleSetConfig(gen=7, clauses=["OHKO"]),
        }))

        assert config.extra_rulesets() == {
            "gen7monotype": {
                "gen": 7,
                "name": "gen7monotype",
                "tier": "OU",
                "clauses": ["OHKO"],
                "little_cup": False,
            }
        }

    def test_global_config(self):
        """Test the module-level config instance and paths."""
        assert isinstance(config, ValidatorConfig)
        assert CONFIG_DIR == PROJECT_ROOT / "config"


class TestConfigLoader:
    """Tests for Hydra config loading."""

    def test_config_dir(self):
        """Test locating the bundled config directory."""
        assert (get_config_dir() / "default.yaml").exists()

    def test_load_default(self):
        """Test loading the bundled default config."""
        cfg = load_config("default")

        assert cfg.formats.default == "gen7ou"
        assert cfg.data.pokedex == "./data/pokedex.json"
        assert cfg.logging.file is None

    def test_overrides(self):
        """Test command-line style overrides."""
        cfg = load_config("default", overrides=["formats.default=gen2ou", "logging.level=DEBUG"])

        assert cfg.formats.default == "gen2ou"
        assert cfg.logging.level == "DEBUG"

    def test_custom_config_dir(self, temp_dir):
        """Test loading extra rule sets from a user config."""
        (temp_dir / "custom.yaml").write_text(
            "formats:\n"
            "  default: gen7monotype\n"
            "  extra:\n"
            "    gen7monotype:\n"
            "      gen: 7\n"
            "      name: '[Gen 7] Monotype'\n"
            "      clauses: [OHKO, Moody]\n",
            encoding="utf-8",
        )

        cfg = load_config("custom", config_dir=temp_dir)

        assert cfg.formats.default == "gen7monotype"
        assert cfg.formats.extra["gen7monotype"].clauses == ["OHKO", "Moody"]
        assert cfg.extra_rulesets()["gen7monotype"]["name"] == "[Gen 7] Monotype"
        # Sections missing from the file keep their defaults
        assert cfg.data.source == "json"

    def test_missing_config(self, temp_dir):
        """Test that a missing config name raises ConfigError."""
        with pytest.raises(ConfigError):
            load_config("does_not_exist", config_dir=temp_dir)

    def test_dict_to_config(self):
        """Test converting a plain dictionary."""
        cfg = dict_to_config({"data": {"source": "poke_env", "poke_env_gen": 8}})

        assert cfg.data.source == "poke_env"
        assert cfg.data.poke_env_gen == 8
        assert cfg.formats.default == "gen7ou"
