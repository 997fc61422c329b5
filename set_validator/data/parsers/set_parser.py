"""Parse Pokemon Showdown export text into PokemonSet objects.

Export text holds one set per blank-line separated block:

    Gengar (M) @ Choice Specs
    Ability: Cursed Body
    Level: 50
    Shiny: Yes
    EVs: 252 SpA / 4 SpD / 252 Spe
    Timid Nature
    IVs: 0 Atk
    - Shadow Ball
    - Sludge Bomb
"""

import re
from typing import Dict, List, Optional

from loguru import logger
from pydantic import ValidationError

from ...core.errors import SetParseError
from ..schemas import PokemonSet
from ..stats import stat_from_label


class SetParser:
    """Parse Showdown export text."""

    # Regex patterns for parsing
    GENDER_PATTERN = re.compile(r'^(.*?)\s*\(([MF])\)$')
    NICKNAME_PATTERN = re.compile(r'^(.*?)\s*\(([^()]+)\)$')
    KEY_VALUE_PATTERN = re.compile(r'^([A-Za-z][A-Za-z ]*?)\s*:\s*(.*)$')
    NATURE_PATTERN = re.compile(r'^([A-Za-z]+)\s+Nature$', re.I)
    SPREAD_PATTERN = re.compile(r'^(-?\d+)\s+([A-Za-z]+)$')
    TEAM_HEADER_PATTERN = re.compile(r'^===.*===$')

    IGNORED_KEYS = {
        "happiness", "tera type", "hidden power", "gigantamax",
        "dynamax level", "pokeball", "ball",
    }

    def parse(self, text: str) -> List[PokemonSet]:
        """Parse every set in a block of export text.

        Args:
            text: Export text (one or more sets)

        Returns:
            Parsed sets in order

        Raises:
            SetParseError: If a set cannot be parsed
        """
        sets = []
        block: List[str] = []
        for raw in text.splitlines() + [""]:
            line = raw.strip()
            if self.TEAM_HEADER_PATTERN.match(line):
                continue
            if line:
                block.append(line)
            elif block:
                sets.append(self.parse_set(block))
                block = []
        logger.debug(f"Parsed {len(sets)} set(s)")
        return sets

    def parse_set(self, lines: List[str]) -> PokemonSet:
        """Parse one set from its lines."""
        if not lines:
            raise SetParseError("Empty set")

        fields: Dict[str, object] = self._parse_header(lines[0])
        moves: List[str] = []

        for line in lines[1:]:
            if line.startswith("-"):
                move = line[1:].strip()
                if move:
                    moves.append(move)
                continue

            nature_match = self.NATURE_PATTERN.match(line)
            if nature_match:
                fields["nature"] = nature_match.group(1).capitalize()
                continue

            kv_match = self.KEY_VALUE_PATTERN.match(line)
            if not kv_match:
                logger.debug(f"Ignoring unrecognised line: {line}")
                continue

            key = kv_match.group(1).strip().lower()
            value = kv_match.group(2).strip()
            if key == "ability":
                fields["ability"] = value
            elif key == "level":
                fields["level"] = self._parse_int(value, "level")
            elif key == "shiny":
                fields["shiny"] = value.lower() in ("yes", "true")
            elif key == "evs":
                fields["evs"] = self._parse_spread(value, "EVs")
            elif key == "ivs":
                fields["ivs"] = self._parse_spread(value, "IVs")
            elif key not in self.IGNORED_KEYS:
                logger.debug(f"Ignoring unknown field: {key}")

        fields["moves"] = moves
        try:
            return PokemonSet(**fields)
        except ValidationError as e:
            raise SetParseError(f"Invalid set '{lines[0]}': {e}") from e

    def _parse_header(self, line: str) -> Dict[str, object]:
        """Parse 'Nickname (Species) (M) @ Item'."""
        fields: Dict[str, object] = {}
        head = line
        if " @ " in head:
            head, item = head.rsplit(" @ ", 1)
            fields["item"] = item.strip() or None

        gender_match = self.GENDER_PATTERN.match(head)
        if gender_match:
            head = gender_match.group(1)
            fields["gender"] = gender_match.group(2)

        nickname_match = self.NICKNAME_PATTERN.match(head)
        if nickname_match and nickname_match.group(1):
            fields["name"] = nickname_match.group(1).strip()
            fields["species"] = nickname_match.group(2).strip()
        else:
            fields["species"] = head.strip()

        if not fields["species"]:
            raise SetParseError(f"Could not read species from '{line}'")
        return fields

    def _parse_spread(self, value: str, label: str) -> Dict[str, int]:
        """Parse '252 HP / 4 Def / 252 Spe'; unspecified stats are left out."""
        spread: Dict[str, int] = {}
        for part in value.split("/"):
            part = part.strip()
            if not part:
                continue
            match = self.SPREAD_PATTERN.match(part)
            if not match:
                raise SetParseError(f"Could not read {label} entry '{part}'")
            try:
                stat = stat_from_label(match.group(2))
            except KeyError as e:
                raise SetParseError(f"Unknown stat '{match.group(2)}' in {label}") from e
            spread[stat] = int(match.group(1))
        return spread

    def _parse_int(self, value: str, label: str) -> int:
        try:
            return int(value)
        except ValueError as e:
            raise SetParseError(f"{label} must be a number, got '{value}'") from e


def parse_sets(text: str, parser: Optional[SetParser] = None) -> List[PokemonSet]:
    """Parse export text with a default parser."""
    return (parser or SetParser()).parse(text)
