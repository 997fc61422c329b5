"""Project paths and the default configuration instance."""

from pathlib import Path

from .core.config_schema import ValidatorConfig

# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent
CONFIG_DIR = PROJECT_ROOT / "config"


# Global config instance
config = ValidatorConfig()
