"""
Candidate pools: eligible agents per role, and duplicate-weighted pools for random draws.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, AbstractSet, Callable, Iterable, Sequence

from comproller.models import Agent, Role

if TYPE_CHECKING:
    from comproller.catalog import Catalog

Boost = Callable[[Agent], bool]


def base_pool(catalog: Catalog, role: Role, excluded: AbstractSet[str] = frozenset()) -> list[Agent]:
    """Agents that can play role and are not excluded, in catalog order."""
    return [a for a in catalog.agents if a.can_play(role) and a.name not in excluded]


def weighted_pool(candidates: Sequence[Agent], boosts: Iterable[Boost]) -> list[Agent]:
    """
    Each candidate once, plus one extra copy per boost that matches it.
    Selection odds are proportional to multiplicity; nothing else weights the draw.
    """
    boosts = list(boosts)
    pool: list[Agent] = list(candidates)
    for a in candidates:
        for boost in boosts:
            if boost(a):
                pool.append(a)
    return pool
