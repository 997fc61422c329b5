"""Format definitions and rule set resolution.

A format id such as ``gen7ou`` names a generation and a rule set. Each
rule set carries the clauses the validator enforces:

- OHKO: bans one-hit-KO moves
- Evasion Moves: bans Minimize and Double Team
- Evasion Abilities: bans Sand Veil and Snow Cloak
- Moody: bans Moody
- Swagger: bans Swagger
- Baton Pass: bans passing Speed together with another stat
"""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterable, List, Mapping, Optional, Union

from loguru import logger

from ..core.errors import FormatNotFoundError
from .ids import to_id


CLAUSES = (
    "OHKO",
    "Evasion Moves",
    "Evasion Abilities",
    "Moody",
    "Swagger",
    "Baton Pass",
)

GENERATIONS = range(1, 8)

FORMAT_ID_PATTERN = re.compile(r"^gen(\d)([a-z0-9]*)$")


@dataclass(frozen=True)
class Format:
    """A generation plus a rule set identifier."""

    gen: int
    id: str

    @classmethod
    def parse(cls, format_id: str) -> "Format":
        """Parse a format id like ``gen2ou``.

        Raises:
            FormatNotFoundError: If the id does not start with ``gen<N>``
        """
        normalized = to_id(format_id)
        match = FORMAT_ID_PATTERN.match(normalized)
        if not match:
            raise FormatNotFoundError(f"{format_id} is not a valid format id")
        return cls(gen=int(match.group(1)), id=normalized)

    def __str__(self) -> str:
        return self.id


@dataclass(frozen=True)
class RuleSet:
    """Clauses and tier for one format."""

    id: str
    name: str
    gen: int
    tier: str = "OU"
    clauses: FrozenSet[str] = field(default_factory=frozenset)
    little_cup: bool = False

    def has(self, clause: str) -> bool:
        return clause in self.clauses

    @property
    def is_little_cup(self) -> bool:
        return self.little_cup

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "gen": self.gen,
            "tier": self.tier,
            "clauses": sorted(self.clauses),
            "little_cup": self.little_cup,
        }


def standard_clauses(gen: int, tier: str) -> FrozenSet[str]:
    """Clauses a Smogon-style tier enforces in a generation."""
    clauses = {"OHKO", "Evasion Moves"}
    if gen >= 5:
        clauses.add("Moody")
    if tier != "Ubers":
        if gen >= 3:
            clauses.add("Baton Pass")
        if gen >= 4:
            clauses.add("Evasion Abilities")
        if gen >= 6:
            clauses.add("Swagger")
    return frozenset(clauses)


TIER_NAMES = {
    "ou": "OU",
    "uu": "UU",
    "ubers": "Ubers",
    "lc": "LC",
}


def builtin_rulesets() -> List[RuleSet]:
    """Standard singles tiers for every supported generation."""
    rulesets = []
    for gen in GENERATIONS:
        for suffix, tier in TIER_NAMES.items():
            rulesets.append(RuleSet(
                id=f"gen{gen}{suffix}",
                name=f"[Gen {gen}] {tier}",
                gen=gen,
                tier=tier,
                clauses=standard_clauses(gen, tier),
                little_cup=(tier == "LC"),
            ))
    return rulesets


class RuleRegistry:
    """Maps formats to rule sets."""

    def __init__(self, rulesets: Optional[Iterable[RuleSet]] = None):
        """Initialize the registry.

        Args:
            rulesets: Rule sets to register (built-in tiers if None)
        """
        self._rulesets: Dict[str, RuleSet] = {}
        for ruleset in (builtin_rulesets() if rulesets is None else rulesets):
            self.register(ruleset)

    def register(self, ruleset: RuleSet) -> "RuleRegistry":
        """Add or replace a rule set.

        Returns:
            Self for chaining
        """
        unknown = set(ruleset.clauses) - set(CLAUSES)
        if unknown:
            logger.warning(f"Rule set {ruleset.id} has clauses the validator ignores: {sorted(unknown)}")
        self._rulesets[to_id(ruleset.id)] = ruleset
        return self

    def register_from_config(self, extra: Mapping[str, Mapping[str, Any]]) -> "RuleRegistry":
        """Register rule sets described as plain dictionaries keyed by format id."""
        for format_id, entry in extra.items():
            self.register(RuleSet(
                id=to_id(format_id),
                name=entry.get("name") or format_id,
                gen=int(entry["gen"]),
                tier=entry.get("tier", "OU"),
                clauses=frozenset(entry.get("clauses", ())),
                little_cup=bool(entry.get("little_cup", False)),
            ))
            logger.debug(f"Registered configured format {format_id}")
        return self

    def get(self, fmt: Union[Format, str]) -> Optional[RuleSet]:
        """Resolve the rule set for a format.

        Returns:
            The rule set, or None if unknown or registered for another generation
        """
        if isinstance(fmt, str):
            try:
                fmt = Format.parse(fmt)
            except FormatNotFoundError:
                return None
        ruleset = self._rulesets.get(to_id(fmt.id))
        if ruleset is None or ruleset.gen != fmt.gen:
            logger.debug(f"No rule set for format {fmt}")
            return None
        return ruleset

    def require(self, fmt: Union[Format, str]) -> RuleSet:
        """Like ``get`` but raises for unknown formats.

        Raises:
            FormatNotFoundError: If the format has no rule set
        """
        ruleset = self.get(fmt)
        if ruleset is None:
            raise FormatNotFoundError(f"{fmt} is not a valid format (known formats: {', '.join(self.ids())})")
        return ruleset

    def ids(self) -> List[str]:
        return sorted(self._rulesets)

    def __contains__(self, format_id: str) -> bool:
        return to_id(format_id) in self._rulesets

    def __len__(self) -> int:
        return len(self._rulesets)
