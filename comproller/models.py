"""
Data models for the comp roller.
Domain objects only: no selection logic, no I/O.

Agents and maps are fixed reference data; requests, picks and results are
built fresh for every generation call.
"""
from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Mapping

# Map selector that resolves to a uniformly drawn concrete map
RANDOM_MAP = "Random"


# ---------- Enumerations ----------
class Role(str, Enum):
    CONTROLLER = "Controller"
    INITIATOR = "Initiator"
    SENTINEL = "Sentinel"
    DUELIST = "Duelist"


class Tag(str, Enum):
    """Descriptive utility tags carried by agents."""
    FLASH = "flash"          # stun / blind
    RECON = "recon"          # info reveal
    SMOKES = "smokes"        # area denial (smoke)
    WALL = "wall"            # area denial (wall)
    TRAP = "trap"
    STALL = "stall"          # delay / stall
    ENTRY = "entry"
    ANTI_EXEC = "antiExec"
    POSTPLANT = "postplant"
    DIVE = "dive"


class Mode(str, Enum):
    """RANKED is the casual mode; PRO is the competitive one."""
    RANKED = "RANKED"
    PRO = "PRO"


class CompStyle(str, Enum):
    STANDARD = "STANDARD"
    DOUBLE_DUELIST = "DOUBLE_DUELIST"
    TRIPLE_INITIATOR = "TRIPLE_INITIATOR"
    DOUBLE_CONTROLLER = "DOUBLE_CONTROLLER"
    DOUBLE_SENTINEL = "DOUBLE_SENTINEL"
    CHAOS = "CHAOS"


class SlotRequirement(str, Enum):
    DIVE_DUELIST = "DIVE_DUELIST"


# ---------- Agent ----------
@dataclass(frozen=True)
class Agent:
    """
    A selectable agent. Name is the identity key.
    Only agents with both the Duelist role and the dive tag may fill a dive slot.
    """
    name: str
    roles: frozenset[Role]
    tags: frozenset[Tag] = frozenset()

    def can_play(self, role: Role) -> bool:
        return role in self.roles

    def has_tag(self, tag: Tag) -> bool:
        return tag in self.tags

    @property
    def is_dive_duelist(self) -> bool:
        return Role.DUELIST in self.roles and Tag.DIVE in self.tags

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "roles": sorted(r.value for r in self.roles),
            "tags": sorted(t.value for t in self.tags),
        }


def agent(name: str, roles: list[Role], tags: list[Tag]) -> Agent:
    """Shorthand used by the catalog tables and test fixtures."""
    return Agent(name=name, roles=frozenset(roles), tags=frozenset(tags))


# ---------- Maps ----------
@dataclass(frozen=True)
class MapNeeds:
    """Fully defaulted map preferences; lives only for one generation call."""
    prefer_double_controller: bool = False
    prefer_recon: bool = False
    prefer_flash: bool = False
    prefer_trap_sentinel: bool = False
    prefer_wall_controller: bool = False
    prefer_explosive_entry: bool = False

    @classmethod
    def flag_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))


@dataclass(frozen=True)
class MapProfile:
    """A concrete map with a sparse set of preference flags (see MapNeeds)."""
    name: str
    needs: Mapping[str, bool] = field(default_factory=dict)


# ---------- Slots ----------
# Label of the STANDARD placeholder slot whose role is picked at resolution time
FLEX_SLOT = "Flex (Utility)"


@dataclass(frozen=True)
class RoleSlot:
    slot: str
    role: Role
    requirement: SlotRequirement | None = None

    @property
    def must_dive(self) -> bool:
        return self.requirement == SlotRequirement.DIVE_DUELIST

    @property
    def is_flex(self) -> bool:
        return self.slot == FLEX_SLOT


# ---------- Request / result ----------
@dataclass
class GenerationRequest:
    """
    One fully formed generation request.
    locked_roles: at most one agent per base role; applied to the first slot of that role only.
    """
    map: str = RANDOM_MAP
    mode: Mode = Mode.RANKED
    style: CompStyle = CompStyle.STANDARD
    locked_roles: dict[Role, str] = field(default_factory=dict)
    excluded: frozenset[str] = frozenset()


@dataclass(frozen=True)
class GeneratedPick:
    slot: str
    role: Role
    agent: str
    must_dive: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {"slot": self.slot, "role": self.role.value, "agent": self.agent, "must_dive": self.must_dive}


@dataclass
class GeneratedComp:
    """Result of one generation call."""
    map: str
    mode: Mode
    style: CompStyle
    picks: list[GeneratedPick]
    notes: list[str] = field(default_factory=list)
    strats: list[str] = field(default_factory=list)

    def agent_names(self) -> list[str]:
        return [p.agent for p in self.picks]

    def to_dict(self) -> dict[str, Any]:
        return {
            "map": self.map,
            "mode": self.mode.value,
            "style": self.style.value,
            "picks": [p.to_dict() for p in self.picks],
            "notes": list(self.notes),
            "strats": list(self.strats),
        }
