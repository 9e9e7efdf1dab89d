"""
Boost rules: ordered per-role lists of (context, agent) -> bool predicates.

Map favoritism and need-driven boosts live here as data, so the resolver never
branches on map names. A rule table is bound to a BoostContext once per slot,
producing the plain agent predicates weighted_pool expects.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

from comproller.engine.coverage import Coverage
from comproller.engine.pools import Boost
from comproller.models import Agent, MapNeeds, Role, Tag


@dataclass(frozen=True)
class BoostContext:
    map_name: str
    needs: MapNeeds
    coverage: Coverage = Coverage()


BoostRule = Callable[[BoostContext, Agent], bool]


# ---------- Rule builders ----------


def tagged(tag: Tag, need: str | None = None) -> BoostRule:
    """Agent carries tag (only when the named need is set, if given)."""
    def rule(ctx: BoostContext, a: Agent) -> bool:
        if need is not None and not getattr(ctx.needs, need):
            return False
        return a.has_tag(tag)
    return rule


def favored(name: str, maps: Sequence[str]) -> BoostRule:
    """Hard-coded favoritism: agent `name` on the listed maps."""
    def rule(ctx: BoostContext, a: Agent) -> bool:
        return ctx.map_name in maps and a.name == name
    return rule


def needs_agent(name: str, need: str) -> BoostRule:
    def rule(ctx: BoostContext, a: Agent) -> bool:
        return bool(getattr(ctx.needs, need)) and a.name == name
    return rule


def missing(tag: Tag, flag: str) -> BoostRule:
    """Agent covers a tag the comp does not have yet (coverage flag unset)."""
    def rule(ctx: BoostContext, a: Agent) -> bool:
        return not getattr(ctx.coverage, flag) and a.has_tag(tag)
    return rule


def bind(rules: Sequence[BoostRule], ctx: BoostContext) -> list[Boost]:
    return [lambda a, r=r: r(ctx, a) for r in rules]


# ---------- Rule tables ----------

CONTROLLER_RULES: tuple[BoostRule, ...] = (
    tagged(Tag.SMOKES),
    tagged(Tag.WALL, need="prefer_wall_controller"),
    favored("Omen", ("Ascent",)),
    favored("Brimstone", ("Bind", "Split")),
    favored("Viper", ("Breeze", "Icebox")),
)

INITIATOR_RULES: tuple[BoostRule, ...] = (
    tagged(Tag.RECON, need="prefer_recon"),
    tagged(Tag.FLASH, need="prefer_flash"),
    favored("Sova", ("Ascent",)),
)

SENTINEL_RULES: tuple[BoostRule, ...] = (
    tagged(Tag.TRAP, need="prefer_trap_sentinel"),
    favored("Killjoy", ("Ascent",)),
    favored("Cypher", ("Breeze",)),
)

DIVE_DUELIST_RULES: tuple[BoostRule, ...] = (
    needs_agent("Raze", "prefer_explosive_entry"),
    favored("Jett", ("Ascent", "Haven")),
    favored("Raze", ("Split",)),
    favored("Jett", ("Breeze",)),
    favored("Yoru", ("Bind",)),
)

# Extra (non-dive) duelist slots: broader, less map-specific
DUELIST_RULES: tuple[BoostRule, ...] = (
    needs_agent("Raze", "prefer_explosive_entry"),
    lambda ctx, a: ctx.map_name == "Bind" and a.has_tag(Tag.FLASH),
)

ROLE_RULES: dict[Role, tuple[BoostRule, ...]] = {
    Role.CONTROLLER: CONTROLLER_RULES,
    Role.INITIATOR: INITIATOR_RULES,
    Role.SENTINEL: SENTINEL_RULES,
    Role.DUELIST: DUELIST_RULES,
}

# Flex slot: boosts toward whatever the comp is still missing
FLEX_RULES: dict[Role, tuple[BoostRule, ...]] = {
    Role.CONTROLLER: (
        tagged(Tag.WALL, need="prefer_wall_controller"),
        needs_agent("Viper", "prefer_wall_controller"),
    ),
    Role.INITIATOR: (
        missing(Tag.FLASH, "has_flash"),
        missing(Tag.RECON, "has_recon"),
        *INITIATOR_RULES,
    ),
    Role.SENTINEL: (
        tagged(Tag.TRAP, need="prefer_trap_sentinel"),
        tagged(Tag.STALL),
    ),
    Role.DUELIST: DUELIST_RULES,
}


def rules_for(role: Role, *, must_dive: bool = False, flex: bool = False) -> tuple[BoostRule, ...]:
    if must_dive:
        return DIVE_DUELIST_RULES
    if flex:
        return FLEX_RULES[role]
    return ROLE_RULES[role]
