"""
Agent and map catalog: fixed reference data for comp generation.
Built once and never mutated; tests can construct smaller synthetic catalogs.
"""
from __future__ import annotations

from functools import lru_cache
from types import MappingProxyType
from typing import Iterable

from comproller.engine.errors import CatalogError
from comproller.models import RANDOM_MAP, Agent, MapNeeds, MapProfile, Role, Tag, agent

C, I, S, D = Role.CONTROLLER, Role.INITIATOR, Role.SENTINEL, Role.DUELIST

# ---------- Agent pool ----------
AGENTS: tuple[Agent, ...] = (
    # Controllers
    agent("Omen", [C], [Tag.SMOKES]),
    agent("Brimstone", [C], [Tag.SMOKES, Tag.POSTPLANT]),
    agent("Astra", [C], [Tag.SMOKES, Tag.ANTI_EXEC]),
    agent("Viper", [C], [Tag.SMOKES, Tag.WALL, Tag.POSTPLANT]),
    agent("Harbor", [C], [Tag.SMOKES, Tag.WALL]),
    agent("Clove", [C], [Tag.SMOKES]),
    # Initiators
    agent("Sova", [I], [Tag.RECON]),
    agent("Fade", [I], [Tag.RECON]),
    agent("Skye", [I], [Tag.FLASH, Tag.RECON]),
    agent("KAY/O", [I], [Tag.FLASH, Tag.ANTI_EXEC]),
    agent("Breach", [I], [Tag.FLASH]),
    agent("Gekko", [I], [Tag.FLASH, Tag.POSTPLANT]),
    agent("Tejo", [I], [Tag.RECON]),
    # Sentinels
    agent("Killjoy", [S], [Tag.TRAP, Tag.POSTPLANT]),
    agent("Cypher", [S], [Tag.TRAP, Tag.RECON]),
    agent("Sage", [S], [Tag.STALL]),
    agent("Deadlock", [S], [Tag.STALL, Tag.ANTI_EXEC]),
    agent("Chamber", [S], [Tag.TRAP]),
    agent("Veto", [S], [Tag.TRAP]),
    agent("Vyse", [S], [Tag.STALL]),
    # Dive duelists
    agent("Jett", [D], [Tag.ENTRY, Tag.DIVE]),
    agent("Raze", [D], [Tag.ENTRY, Tag.DIVE]),
    agent("Neon", [D], [Tag.ENTRY, Tag.DIVE]),
    agent("Yoru", [D], [Tag.FLASH, Tag.ENTRY, Tag.DIVE]),
    agent("Waylay", [D], [Tag.ENTRY, Tag.DIVE]),
    # Non-dive duelists (extra duelist slots only)
    agent("Reyna", [D], [Tag.ENTRY]),
    agent("Phoenix", [D], [Tag.FLASH, Tag.ENTRY]),
    agent("Iso", [D], [Tag.ENTRY]),
)

# ---------- Maps + preferences ----------
MAPS: tuple[MapProfile, ...] = (
    MapProfile("Ascent", {"prefer_recon": True, "prefer_trap_sentinel": True}),
    MapProfile("Bind", {"prefer_flash": True, "prefer_trap_sentinel": True}),
    MapProfile("Haven", {"prefer_recon": True, "prefer_flash": True}),
    MapProfile("Split", {"prefer_flash": True, "prefer_trap_sentinel": True, "prefer_explosive_entry": True}),
    MapProfile("Lotus", {"prefer_flash": True, "prefer_recon": True, "prefer_trap_sentinel": True}),
    MapProfile("Sunset", {"prefer_recon": True, "prefer_trap_sentinel": True}),
    MapProfile("Icebox", {"prefer_wall_controller": True, "prefer_recon": True}),
    MapProfile("Breeze", {"prefer_wall_controller": True, "prefer_recon": True, "prefer_double_controller": True}),
    MapProfile("Fracture", {"prefer_flash": True, "prefer_trap_sentinel": True}),
    MapProfile("Pearl", {"prefer_recon": True, "prefer_double_controller": True}),
    # Newest map; leans info + flash + anchoring
    MapProfile("Corrode", {"prefer_recon": True, "prefer_flash": True, "prefer_trap_sentinel": True}),
)


class Catalog:
    """
    Immutable agent + map configuration handed to the resolver.
    Agent order is preserved: candidate pools are built in catalog order.
    """

    def __init__(self, agents: Iterable[Agent], maps: Iterable[MapProfile]) -> None:
        self._agents = tuple(agents)
        self._maps = tuple(
            MapProfile(m.name, MappingProxyType(dict(m.needs))) for m in maps
        )
        self._agents_by_name: dict[str, Agent] = {}
        for a in self._agents:
            if a.name in self._agents_by_name:
                raise CatalogError(f"Duplicate agent: {a.name}")
            if not a.roles:
                raise CatalogError(f"Agent {a.name} has no roles")
            self._agents_by_name[a.name] = a
        known_flags = set(MapNeeds.flag_names())
        self._maps_by_name: dict[str, MapProfile] = {}
        for m in self._maps:
            if m.name == RANDOM_MAP:
                raise CatalogError(f"'{RANDOM_MAP}' is a selector, not a map")
            if m.name in self._maps_by_name:
                raise CatalogError(f"Duplicate map: {m.name}")
            unknown = set(m.needs) - known_flags
            if unknown:
                raise CatalogError(f"Map {m.name} has unknown needs: {sorted(unknown)}")
            self._maps_by_name[m.name] = m

    @property
    def agents(self) -> tuple[Agent, ...]:
        return self._agents

    @property
    def maps(self) -> tuple[MapProfile, ...]:
        return self._maps

    def map_names(self) -> list[str]:
        return [m.name for m in self._maps]

    def get_agent(self, name: str) -> Agent | None:
        return self._agents_by_name.get(name)

    def get_map(self, name: str) -> MapProfile | None:
        return self._maps_by_name.get(name)

    def agent_names(self) -> list[str]:
        """All agent names, sorted (for autocomplete)."""
        return sorted(a.name for a in self._agents)

    def dive_agent_names(self) -> list[str]:
        """Agents eligible for the dive slot, sorted."""
        return sorted(a.name for a in self._agents if a.is_dive_duelist)

    def __len__(self) -> int:
        return len(self._agents)


@lru_cache(maxsize=1)
def default_catalog() -> Catalog:
    return Catalog(AGENTS, MAPS)
