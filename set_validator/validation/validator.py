"""Set legality validation.

``SetValidator.validate`` runs an ordered list of generation-scoped
checks over a set and returns human-readable problems. An empty list
means the set is legal for the format. Checks never raise for bad set
content; only an unknown format or species stops validation early.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Union

from loguru import logger

from ..core.errors import FormatNotFoundError
from ..data.dex import Dex
from ..data.formats import Format, RuleRegistry, RuleSet
from ..data.ids import to_id
from ..data.schemas import Move, PokemonSet, Species, Tier
from ..data.stats import MAX_EV, MAX_IV, MAX_TOTAL_EVS, STAT_IDS, STAT_NAMES, get_hp_dv, istods, itod
from .checks import (
    MIN_LEGENDARY_PERFECT_IVS,
    check_baton_pass,
    check_sleep_trap,
    count_perfect_ivs,
    gen2_expected_gender,
    gen2_is_shiny,
    is_legendary,
)

MAX_MOVES = 4
MAX_LEVEL = 100
LITTLE_CUP_LEVEL = 5

EVASION_MOVES = {"Minimize", "Double Team"}
EVASION_ABILITIES = {"Sand Veil", "Snow Cloak"}
GIRATINA_NUM = 487


@dataclass
class ValidationContext:
    """State shared by the checks of one validation run."""
    pokemon_set: PokemonSet
    format: Format
    rules: RuleSet
    species: Species
    problems: List[str] = field(default_factory=list)
    # Resolved moves keyed by id, in set order
    moves: Dict[str, Move] = field(default_factory=dict)

    @property
    def gen(self) -> int:
        return self.format.gen

    @property
    def pokemon(self) -> str:
        return self.pokemon_set.display_name

    def add(self, problem: str) -> None:
        self.problems.append(problem)


class SetValidator:
    """Validates Pokemon sets against a format's rules.

    Example:
        validator = SetValidator(dex, RuleRegistry())
        problems = validator.validate(pokemon_set, Format.parse("gen2ou"))
    """

    def __init__(self, dex: Dex, rules: Optional[RuleRegistry] = None):
        """Initialize the validator.

        Args:
            dex: Species/move/item/ability/nature providers
            rules: Format resolver (built-in tiers if None)
        """
        self.dex = dex
        self.rules = rules if rules is not None else RuleRegistry()
        self._checks: List[Callable[[ValidationContext], None]] = [
            self._check_tier,
            self._check_level,
            self._check_moves,
            self._check_gender,
            self._check_evs,
            self._check_ivs,
            self._check_nature,
            self._check_ability,
            self._check_item,
            self._check_ev_limits,
            self._check_iv_range,
            self._check_forme,
        ]

    def validate(self, pokemon_set: PokemonSet, fmt: Union[Format, str]) -> List[str]:
        """Validate a set.

        Args:
            pokemon_set: The set to check (not modified)
            fmt: Format or format id

        Returns:
            Problems found, in check order (empty if legal)
        """
        if isinstance(fmt, str):
            try:
                fmt = Format.parse(fmt)
            except FormatNotFoundError:
                return [f"{fmt} is not a valid format."]

        rules = self.rules.get(fmt)
        if rules is None:
            return [f"{fmt} is not a valid format."]

        species = self.dex.species.get(pokemon_set.species, fmt.gen)
        if species is None:
            logger.debug(f"Unknown species {pokemon_set.species} in gen {fmt.gen}")
            return [f"{pokemon_set.species} is not a valid species for generation {fmt.gen}"]

        logger.debug(f"Validating {species.name} for {fmt}")
        ctx = ValidationContext(pokemon_set=pokemon_set, format=fmt, rules=rules, species=species)
        for check in self._checks:
            check(ctx)

        logger.debug(f"{ctx.pokemon}: {len(ctx.problems)} problem(s) in {fmt}")
        return ctx.problems

    def validate_team(
        self,
        team: List[PokemonSet],
        fmt: Union[Format, str],
    ) -> Dict[int, List[str]]:
        """Validate each set of a team.

        Returns:
            Problems per team slot (only slots with problems)
        """
        results = {}
        for slot, pokemon_set in enumerate(team):
            problems = self.validate(pokemon_set, fmt)
            if problems:
                results[slot] = problems
        return results

    # ====================
    # Species and Level
    # ====================

    def _check_tier(self, ctx: ValidationContext) -> None:
        species = ctx.species
        if species.tier is Tier.ILLEGAL:
            ctx.add(f"{ctx.pokemon} does not exist outside of generation {species.gen}.")
        elif species.tier is Tier.UNRELEASED:
            ctx.add(f"{ctx.pokemon} is unreleased in generation {species.gen}.")

    def _check_level(self, ctx: ValidationContext) -> None:
        level = ctx.pokemon_set.level
        if ctx.rules.is_little_cup:
            if ctx.species.prevo:
                ctx.add(f"{ctx.pokemon} isn't the first in its evolution family.")
            elif not ctx.species.nfe:
                ctx.add(f"{ctx.pokemon} doesn't have an evolution family.")
            if level and level > LITTLE_CUP_LEVEL:
                ctx.add(f"{ctx.pokemon} must be level {LITTLE_CUP_LEVEL} or under in Little Cup.")
        elif level and level > MAX_LEVEL:
            ctx.add(f"{ctx.pokemon} is higher than level {MAX_LEVEL}.")

    # ====================
    # Moves
    # ====================

    def _check_moves(self, ctx: ValidationContext) -> None:
        moves = ctx.pokemon_set.moves
        if not moves:
            ctx.add(f"{ctx.pokemon} must have at least one move.")
            return
        if len(moves) > MAX_MOVES:
            ctx.add(f"{ctx.pokemon} has more than four moves.")

        # TODO: confirm Gen 2 Marowak with Swords Dance once event move
        # combinations are checked; duplicates overwrite their table entry.
        for name in moves:
            move = self.dex.moves.get(name, ctx.gen)
            if move is None:
                ctx.add(f"{name} is not a valid move for generation {ctx.gen}")
                continue
            if move.id in ctx.moves:
                ctx.add(f"{ctx.pokemon} may not have duplicate moves ({move.name} is duplicated).")
            ctx.moves[move.id] = move
            self._check_move_clauses(ctx, move)

        if ctx.gen == 2 and check_sleep_trap(ctx.moves.values()):
            ctx.add(
                f"{ctx.pokemon} has both a sleeping and a trapping move, a "
                f"combination which is banned in generation {ctx.gen}."
            )

        if ctx.rules.has("Baton Pass") and "batonpass" in ctx.moves:
            item = self.dex.items.get(ctx.pokemon_set.item, ctx.gen)
            if check_baton_pass(ctx.moves.values(), item, ctx.pokemon_set.ability):
                ctx.add(
                    f"{ctx.pokemon} can Baton Pass both Speed and a different stat, "
                    f"which is banned by Baton Pass Clause."
                )

    def _check_move_clauses(self, ctx: ValidationContext, move: Move) -> None:
        """Report at most one clause violation per move."""
        if ctx.rules.has("OHKO") and move.ohko:
            ctx.add(f"{move.name} is banned by OHKO Clause.")
        elif ctx.rules.has("Evasion Moves") and move.name in EVASION_MOVES:
            ctx.add(f"{move.name} is banned by Evasion Moves Clause.")
        elif ctx.rules.has("Swagger") and move.name == "Swagger":
            ctx.add(f"{move.name} is banned by Swagger Clause.")

    # ====================
    # Gender
    # ====================

    def _check_gender(self, ctx: ValidationContext) -> None:
        gender = ctx.pokemon_set.gender
        if not gender:
            return
        species = ctx.species
        if species.gender:
            if gender != species.gender:
                ctx.add(
                    f"{ctx.pokemon} is the wrong gender for its species "
                    f"({gender} vs. {species.gender})."
                )
        elif ctx.gen == 2:
            # Gen 2 gender comes from the Atk DV; what counts as high
            # depends on the gender ratio
            atk_dv = itod(ctx.pokemon_set.ivs["atk"])
            expected = gen2_expected_gender(species, ctx.pokemon_set.ivs["atk"])
            if gender != expected:
                ctx.add(
                    f"{ctx.pokemon} is {gender}, but it has an Atk DV "
                    f"of {atk_dv}, which makes its gender {expected}."
                )

    # ====================
    # EVs and IVs
    # ====================

    def _check_evs(self, ctx: ValidationContext) -> None:
        evs = ctx.pokemon_set.evs
        if ctx.gen < 3 and evs["spa"] != evs["spd"]:
            ctx.add(
                f"Before generation 3, SpA and SpD EVs must match "
                f"({ctx.pokemon} has {evs['spa']} SpA and {evs['spd']} SpD EVs)."
            )

    def _check_ivs(self, ctx: ValidationContext) -> None:
        ivs = ctx.pokemon_set.ivs
        if ctx.gen >= 6:
            if is_legendary(ctx.species, ctx.pokemon_set.shiny) and count_perfect_ivs(ivs) < MIN_LEGENDARY_PERFECT_IVS:
                ctx.add(
                    f"{ctx.pokemon} must have at least three perfect IVs "
                    f"because it's a legendary in generation {ctx.gen}."
                )
        elif ctx.gen < 3:
            if ivs["spa"] != ivs["spd"]:
                ctx.add(
                    f"Before generation 3, SpA and SpD IVs must match "
                    f"({ctx.pokemon} has {ivs['spa']} SpA and {ivs['spd']} SpD IVs)."
                )
            if ctx.gen == 2:
                self._check_gen2_dvs(ctx)

    def _check_gen2_dvs(self, ctx: ValidationContext) -> None:
        ivs = ctx.pokemon_set.ivs
        dvs = istods(ivs)

        expected_hp_dv = get_hp_dv(ivs)
        if dvs["hp"] != expected_hp_dv:
            ctx.add(
                f"{ctx.pokemon} has an HP DV of {dvs['hp']}, but its "
                f"Atk, Def, Spe and Spc DVs give it an HP DV of {expected_hp_dv}."
            )

        if gen2_is_shiny(dvs) != ctx.pokemon_set.shiny:
            ctx.add(
                f"{ctx.pokemon} is{' not ' if ctx.pokemon_set.shiny else ' '}shiny, "
                f"which does not match its DVs."
            )

    # ====================
    # Nature, Ability, Item
    # ====================

    def _check_nature(self, ctx: ValidationContext) -> None:
        name = ctx.pokemon_set.nature
        if not name:
            if ctx.gen >= 3:
                ctx.add(f"{ctx.pokemon} requires a nature in generation {ctx.gen}")
            return

        nature = self.dex.natures.get(name)
        if nature is not None:
            if ctx.gen < 3:
                ctx.add(
                    f"Natures do not exist in generation {ctx.gen} "
                    f"({ctx.pokemon} has {nature.name})"
                )
        elif ctx.gen >= 3:
            ctx.add(f"{name} is not a valid nature in generation {ctx.gen}")

    def _check_ability(self, ctx: ValidationContext) -> None:
        name = ctx.pokemon_set.ability
        if ctx.gen < 3:
            if name:
                ctx.add(
                    f"Abilities do not exist in generation {ctx.gen} "
                    f"({ctx.pokemon} has ability {name})"
                )
            return

        if not name:
            ctx.add(f"{ctx.pokemon} requires an ability in generation {ctx.gen}")
            return

        ability = self.dex.abilities.get(name, ctx.gen)
        if ability is None:
            ctx.add(f"{name} is not a valid ability for generation {ctx.gen}")
            return

        if ctx.rules.has("Evasion Abilities") and ability.name in EVASION_ABILITIES:
            ctx.add(f"{ability.name} is banned by Evasion Abilities Clause.")
        if ctx.rules.has("Moody") and ability.name == "Moody":
            ctx.add(f"{ability.name} is banned by Moody Clause.")

    def _check_item(self, ctx: ValidationContext) -> None:
        name = ctx.pokemon_set.item
        if ctx.gen < 2:
            if name:
                ctx.add(
                    f"Held items do not exist in generation {ctx.gen} "
                    f"({ctx.pokemon} has item {name})"
                )
            return

        if not name:
            return
        item = self.dex.items.get(name, ctx.gen)
        if item is None:
            ctx.add(f"{name} is not a valid item for generation {ctx.gen}")
            return
        if item.id == "griseousorb" and ctx.species.num != GIRATINA_NUM:
            ctx.add("Griseous Orb can only be held by Giratina in Generation 4.")

    # ====================
    # Stat Limits and Formes
    # ====================

    def _check_ev_limits(self, ctx: ValidationContext) -> None:
        evs = ctx.pokemon_set.evs
        for stat in STAT_IDS:
            if not 0 <= evs[stat] <= MAX_EV:
                ctx.add(
                    f"{ctx.pokemon} has {evs[stat]} {STAT_NAMES[stat]} EVs, "
                    f"but EVs must be between 0 and {MAX_EV}."
                )
        if ctx.gen >= 3 and evs.total > MAX_TOTAL_EVS:
            ctx.add(f"{ctx.pokemon} has {evs.total} total EVs, which is more than {MAX_TOTAL_EVS}.")

    def _check_iv_range(self, ctx: ValidationContext) -> None:
        ivs = ctx.pokemon_set.ivs
        for stat in STAT_IDS:
            if not 0 <= ivs[stat] <= MAX_IV:
                ctx.add(
                    f"{ctx.pokemon} has {ivs[stat]} {STAT_NAMES[stat]} IVs, "
                    f"but IVs must be between 0 and {MAX_IV}."
                )

    def _check_forme(self, ctx: ValidationContext) -> None:
        species = ctx.species
        if species.battle_only:
            ctx.add(f"{species.name} is a battle-only forme and can't be used in a team.")

        required = species.all_required_items
        if ctx.gen >= 2 and required and to_id(ctx.pokemon_set.item) not in {to_id(i) for i in required}:
            ctx.add(f"{ctx.pokemon} must hold {' or '.join(required)}.")


def validate(
    pokemon_set: PokemonSet,
    fmt: Union[Format, str],
    dex: Dex,
    rules: Optional[RuleRegistry] = None,
) -> List[str]:
    """Validate a set without keeping a SetValidator around."""
    return SetValidator(dex, rules).validate(pokemon_set, fmt)
