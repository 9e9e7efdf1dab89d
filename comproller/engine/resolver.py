"""
Constraint resolver: walks a slot plan and fills each seat with one agent.

Per seat: honor the role's lock once, otherwise draw from the weighted pool of
eligible agents not picked yet. The dive seat only accepts dive duelists.
Any violation raises a CompGenerationError subclass and aborts the whole walk.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Mapping, Sequence

from comproller.engine.boosts import BoostContext, BoostRule, bind, rules_for
from comproller.engine.coverage import coverage
from comproller.engine.errors import (
    DiveRequirementError,
    InternalDuplicateError,
    LockCollisionError,
    LockedAgentExcludedError,
    LockRoleMismatchError,
    PoolExhaustedError,
)
from comproller.engine.flex import FlexKnobs, choose_flex_role
from comproller.engine.pools import base_pool, weighted_pool
from comproller.engine.rng import RandomSource, SeededRNG
from comproller.engine.slots import validate_plan
from comproller.models import Agent, GeneratedPick, GenerationRequest, MapNeeds, Mode, Role, RoleSlot

if TYPE_CHECKING:
    from comproller.catalog import Catalog

logger = logging.getLogger(__name__)


def active_locks(locked_roles: Mapping[Role, str | None]) -> dict[Role, str]:
    """Drop blank locks; keys normalized to Role."""
    return {Role(r): name for r, name in locked_roles.items() if name}


def validate_locks(
    catalog: Catalog,
    locked_roles: Mapping[Role, str | None],
    excluded: frozenset[str],
    slots: Sequence[RoleSlot] = (),
) -> None:
    """
    Fail fast on bad locks before any seat is filled.
    A Duelist lock must be a dive duelist whenever the plan's first Duelist seat is the dive seat.
    """
    locks = active_locks(locked_roles)
    for role, name in locks.items():
        if name in excluded:
            raise LockedAgentExcludedError(
                f"Locked agent {name} is excluded. Remove it from excluded list.",
                role=role.value,
                agent=name,
            )
        a = catalog.get_agent(name)
        if a is None or not a.can_play(role):
            raise LockRoleMismatchError(
                f"Locked agent {name} cannot play {role.value}.",
                role=role.value,
                agent=name,
            )

    duelist_lock = locks.get(Role.DUELIST)
    first_duelist = next((s for s in slots if s.role == Role.DUELIST), None)
    if duelist_lock and first_duelist is not None and first_duelist.must_dive:
        a = catalog.get_agent(duelist_lock)
        if a is not None and not a.is_dive_duelist:
            raise DiveRequirementError(
                f'Dive Duelist required on every map. "{duelist_lock}" is not marked as a dive duelist. '
                f"Try: {_dive_hint(catalog)}.",
                role=Role.DUELIST.value,
                slot=first_duelist.slot,
                agent=duelist_lock,
            )


def _dive_hint(catalog: Catalog) -> str:
    return ", ".join(a.name for a in catalog.agents if a.is_dive_duelist)


@dataclass
class WalkState:
    """Bookkeeping for one resolve() call; never shared between calls."""
    chosen: set[str] = field(default_factory=set)
    lock_used: set[Role] = field(default_factory=set)
    picks: list[GeneratedPick] = field(default_factory=list)
    agents: list[Agent] = field(default_factory=list)


class ConstraintResolver:
    """
    Fills a five-seat slot plan against a catalog.
    The random source is injectable; pass a scripted source to pin pool draws and flex coin flips.
    """

    def __init__(
        self,
        catalog: Catalog,
        rng: RandomSource | None = None,
        knobs: FlexKnobs | None = None,
    ) -> None:
        self.catalog = catalog
        self.rng = rng or SeededRNG()
        self.knobs = knobs or FlexKnobs()

    def resolve(
        self,
        map_name: str,
        needs: MapNeeds,
        request: GenerationRequest,
        slots: Sequence[RoleSlot],
    ) -> list[GeneratedPick]:
        validate_plan(list(slots))
        excluded = frozenset(request.excluded)
        locks = active_locks(request.locked_roles)
        validate_locks(self.catalog, locks, excluded, slots)

        state = WalkState()
        for s in slots:
            if s.is_flex:
                role = choose_flex_role(
                    needs, Mode(request.mode), coverage(state.agents), self.rng, self.knobs
                )
                self._fill(
                    state, map_name, needs, locks, excluded,
                    slot=f"Flex ({role.value})",
                    role=role,
                    must_dive=False,
                    rules=rules_for(role, flex=True),
                )
            else:
                self._fill(
                    state, map_name, needs, locks, excluded,
                    slot=s.slot,
                    role=s.role,
                    must_dive=s.must_dive,
                    rules=rules_for(s.role, must_dive=s.must_dive),
                )

        names = [p.agent for p in state.picks]
        if len(set(names)) != len(names):
            dupes = sorted({n for n in names if names.count(n) > 1})
            raise InternalDuplicateError(
                "Internal error: duplicate agent generated.",
                agent=", ".join(dupes),
            )
        return state.picks

    def _fill(
        self,
        state: WalkState,
        map_name: str,
        needs: MapNeeds,
        locks: dict[Role, str],
        excluded: frozenset[str],
        *,
        slot: str,
        role: Role,
        must_dive: bool,
        rules: Sequence[BoostRule],
    ) -> None:
        locked = locks.get(role) if role not in state.lock_used else None
        if locked:
            state.lock_used.add(role)
            picked = self._locked_agent(state, locked, slot, role, must_dive)
            logger.debug("slot %r: lock %s", slot, picked.name)
        else:
            available = [a for a in base_pool(self.catalog, role, excluded) if a.name not in state.chosen]
            if must_dive:
                available = [a for a in available if a.is_dive_duelist]
            ctx = BoostContext(map_name=map_name, needs=needs, coverage=coverage(state.agents))
            pool = weighted_pool(available, bind(rules, ctx))
            if not pool:
                raise PoolExhaustedError(
                    f"No available agents left for {slot} ({role.value}).",
                    role=role.value,
                    slot=slot,
                )
            picked = self.rng.choice(pool)
            logger.debug("slot %r: drew %s from %d entries (%d agents)", slot, picked.name, len(pool), len(available))

        state.chosen.add(picked.name)
        state.agents.append(picked)
        state.picks.append(GeneratedPick(slot=slot, role=role, agent=picked.name, must_dive=must_dive))

    def _locked_agent(self, state: WalkState, name: str, slot: str, role: Role, must_dive: bool) -> Agent:
        a = self.catalog.get_agent(name)
        if a is None or not a.can_play(role):
            raise LockRoleMismatchError(
                f"Locked agent {name} cannot play {role.value}.",
                role=role.value,
                slot=slot,
                agent=name,
            )
        if name in state.chosen:
            raise LockCollisionError(
                f"Locked agent {name} already used by another slot.",
                role=role.value,
                slot=slot,
                agent=name,
            )
        if must_dive and not a.is_dive_duelist:
            raise DiveRequirementError(
                f'Dive Duelist required. Locked duelist "{name}" is not a dive duelist. '
                f"Use {'/'.join(x.name for x in self.catalog.agents if x.is_dive_duelist)}.",
                role=role.value,
                slot=slot,
                agent=name,
            )
        return a
