#!/usr/bin/env python3
"""Validate Pokemon sets from a Showdown export file.

Usage:
    python scripts/validate_sets.py team.txt
    python scripts/validate_sets.py team.txt --format gen2ou
    python scripts/validate_sets.py team.txt --override data.source=poke_env

Exit codes: 0 if every set is legal, 1 if any set has problems,
2 if the input, data or format could not be loaded.
"""

import sys
import argparse
from pathlib import Path
from typing import List, Optional

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from loguru import logger

from set_validator.core.config_loader import load_config
from set_validator.core.errors import SetValidatorError
from set_validator.core.logging import setup_logging
from set_validator.data.dex import Dex
from set_validator.data.formats import Format, RuleRegistry
from set_validator.data.parsers import SetParser
from set_validator.validation import SetValidator


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Validate Pokemon sets against a format")
    parser.add_argument("path", help="Showdown export text file")
    parser.add_argument("--format", dest="format_id", default=None,
                        help="Format id, e.g. gen7ou (default from config)")
    parser.add_argument("--config", default="default", help="Config name in config/")
    parser.add_argument("--override", action="append", default=[],
                        help="Config override, e.g. logging.level=DEBUG")
    return parser


def run(path: Path, format_id: Optional[str], config_name: str, overrides: List[str]) -> int:
    cfg = load_config(config_name, overrides=overrides)
    setup_logging(cfg.logging)

    registry = RuleRegistry().register_from_config(cfg.extra_rulesets())
    fmt = Format.parse(format_id or cfg.formats.default)
    ruleset = registry.require(fmt)

    if not path.exists():
        logger.error(f"Team file not found: {path}")
        return 2
    sets = SetParser().parse(path.read_text(encoding="utf-8"))
    if not sets:
        logger.warning(f"No sets found in {path}")
        return 0

    dex = Dex.from_config(cfg.data)
    validator = SetValidator(dex, registry)

    logger.info(f"Validating {len(sets)} set(s) for {ruleset.name}")
    illegal = 0
    for pokemon_set in sets:
        problems = validator.validate(pokemon_set, fmt)
        if problems:
            illegal += 1
            print(f"{pokemon_set.display_name}:")
            for problem in problems:
                print(f"  - {problem}")
        else:
            print(f"{pokemon_set.display_name}: legal")

    logger.info(f"{illegal} of {len(sets)} set(s) have problems")
    return 1 if illegal else 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return run(Path(args.path), args.format_id, args.config, args.override)
    except SetValidatorError as e:
        logger.error(str(e))
        return 2


if __name__ == "__main__":
    sys.exit(main())
