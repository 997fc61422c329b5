"""Species, move, item, ability and nature lookups keyed by generation.

The validator only depends on the provider protocols below. ``Dex``
bundles one implementation of each, built from Pokemon Showdown style
data tables (JSON files or poke-env's bundled game data).
"""

import json
from pathlib import Path
from typing import (
    Dict, Generic, Iterable, Iterator, List, Mapping, Optional,
    Protocol, Type, TypeVar, Union, runtime_checkable
)

from loguru import logger
from pydantic import ValidationError

from ..core.config_schema import DataConfig
from ..core.errors import DataLoadError
from .ids import to_id
from .natures import NatureTable
from .schemas import Ability, DexRecord, Item, Move, Nature, Species


RecordT = TypeVar("RecordT", bound=DexRecord)

PathLike = Union[str, Path]


# =============================================================================
# Provider Protocols
# =============================================================================

@runtime_checkable
class SpeciesProvider(Protocol):
    def get(self, name: Optional[str], gen: Optional[int] = None) -> Optional[Species]: ...


@runtime_checkable
class MoveProvider(Protocol):
    def get(self, name: Optional[str], gen: Optional[int] = None) -> Optional[Move]: ...


@runtime_checkable
class ItemProvider(Protocol):
    def get(self, name: Optional[str], gen: Optional[int] = None) -> Optional[Item]: ...


@runtime_checkable
class AbilityProvider(Protocol):
    def get(self, name: Optional[str], gen: Optional[int] = None) -> Optional[Ability]: ...


@runtime_checkable
class NatureProvider(Protocol):
    def get(self, name: Optional[str]) -> Optional[Nature]: ...


# =============================================================================
# Data Tables
# =============================================================================

class DataTable(Generic[RecordT]):
    """Read-only records indexed by id, filtered by generation on lookup."""

    def __init__(self, records: Iterable[RecordT] = ()):
        self._records: Dict[str, RecordT] = {}
        for record in records:
            self._records[record.id] = record
            # Showdown keys and display names normalise differently for a few entries
            self._records.setdefault(to_id(record.name), record)

    def get(self, name: Optional[str], gen: Optional[int] = None) -> Optional[RecordT]:
        """Look up a record by name or id.

        Args:
            name: Display name or id
            gen: Generation the record must exist in (None = any)

        Returns:
            The record, or None if unknown or introduced after ``gen``
        """
        if not name:
            return None
        record = self._records.get(to_id(name))
        if record is None:
            return None
        if gen is not None and record.gen > gen:
            return None
        return record

    def __contains__(self, name: str) -> bool:
        return to_id(name) in self._records

    def __iter__(self) -> Iterator[RecordT]:
        seen = set()
        for record in self._records.values():
            if record.id not in seen:
                seen.add(record.id)
                yield record

    def __len__(self) -> int:
        return len({record.id for record in self._records.values()})


def _read_json(path: PathLike, kind: str) -> Dict[str, dict]:
    path = Path(path)
    if not path.exists():
        raise DataLoadError(f"{kind} data not found: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise DataLoadError(f"Could not read {kind} data from {path}: {e}") from e
    if not isinstance(data, dict):
        raise DataLoadError(f"{kind} data in {path} must be an object keyed by id")
    return data


def build_table(
    model: Type[RecordT],
    entries: Optional[Mapping[str, dict]],
    kind: str,
) -> DataTable[RecordT]:
    """Parse Showdown-format entries (keyed by id) into a DataTable.

    Raises:
        DataLoadError: If an entry fails schema validation
    """
    records: List[RecordT] = []
    for key, entry in (entries or {}).items():
        if not isinstance(entry, Mapping):
            raise DataLoadError(f"Invalid {kind} record '{key}': expected an object")
        try:
            records.append(model.model_validate({"id": key, **entry}))
        except ValidationError as e:
            raise DataLoadError(f"Invalid {kind} record '{key}': {e}") from e
    return DataTable(records)


# =============================================================================
# Dex
# =============================================================================

class Dex:
    """Bundle of the data providers the validator consumes.

    Example:
        dex = Dex.from_json_files("data/pokedex.json", "data/moves.json")
        dex.species.get("Pikachu", 2)
    """

    def __init__(
        self,
        species: Optional[SpeciesProvider] = None,
        moves: Optional[MoveProvider] = None,
        items: Optional[ItemProvider] = None,
        abilities: Optional[AbilityProvider] = None,
        natures: Optional[NatureProvider] = None,
    ):
        self.species = species if species is not None else DataTable()
        self.moves = moves if moves is not None else DataTable()
        self.items = items if items is not None else DataTable()
        self.abilities = abilities if abilities is not None else DataTable()
        self.natures = natures if natures is not None else NatureTable()

    @classmethod
    def from_showdown(
        cls,
        pokedex: Optional[Mapping[str, dict]] = None,
        moves: Optional[Mapping[str, dict]] = None,
        items: Optional[Mapping[str, dict]] = None,
        abilities: Optional[Mapping[str, dict]] = None,
    ) -> "Dex":
        """Build a Dex from Showdown data dictionaries keyed by id."""
        dex = cls(
            species=build_table(Species, pokedex, "species"),
            moves=build_table(Move, moves, "move"),
            items=build_table(Item, items, "item"),
            abilities=build_table(Ability, abilities, "ability"),
        )
        logger.info(
            f"Loaded dex: {len(dex.species)} species, {len(dex.moves)} moves, "
            f"{len(dex.items)} items, {len(dex.abilities)} abilities"
        )
        return dex

    @classmethod
    def from_json_files(
        cls,
        pokedex: PathLike,
        moves: PathLike,
        items: Optional[PathLike] = None,
        abilities: Optional[PathLike] = None,
    ) -> "Dex":
        """Load Showdown-format JSON tables from disk.

        Items and abilities are optional; without them every item or
        ability name fails to resolve.
        """
        return cls.from_showdown(
            pokedex=_read_json(pokedex, "species"),
            moves=_read_json(moves, "move"),
            items=_read_json(items, "item") if items else None,
            abilities=_read_json(abilities, "ability") if abilities else None,
        )

    @classmethod
    def from_poke_env(
        cls,
        gen: int = 9,
        items: Optional[PathLike] = None,
        abilities: Optional[PathLike] = None,
    ) -> "Dex":
        """Build species and move tables from poke-env's bundled game data.

        poke-env ships no item or ability tables, so those still come
        from JSON files when given.
        """
        from poke_env.data import GenData

        try:
            gen_data = GenData.from_gen(gen)
        except Exception as e:
            raise DataLoadError(f"poke-env has no data for generation {gen}: {e}") from e

        return cls.from_showdown(
            pokedex=gen_data.pokedex,
            moves=gen_data.moves,
            items=_read_json(items, "item") if items else None,
            abilities=_read_json(abilities, "ability") if abilities else None,
        )

    @classmethod
    def from_config(cls, cfg: DataConfig) -> "Dex":
        """Build the Dex described by a DataConfig."""
        items = cfg.items if cfg.items and Path(cfg.items).exists() else None
        abilities = cfg.abilities if cfg.abilities and Path(cfg.abilities).exists() else None
        if items is None or abilities is None:
            logger.warning("Item or ability table missing; those lookups will fail to resolve")

        if cfg.source == "poke_env":
            return cls.from_poke_env(cfg.poke_env_gen, items=items, abilities=abilities)
        if cfg.source == "json":
            if not cfg.pokedex or not cfg.moves:
                raise DataLoadError("data.pokedex and data.moves must be set for the json source")
            return cls.from_json_files(cfg.pokedex, cfg.moves, items=items, abilities=abilities)
        raise DataLoadError(f"Unknown data source: {cfg.source}")
