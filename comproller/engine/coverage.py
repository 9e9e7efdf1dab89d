"""
Utility coverage of a (partial or final) comp.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from comproller.models import Agent, Role, Tag


@dataclass(frozen=True)
class Coverage:
    has_smokes: bool = False
    has_wall: bool = False
    has_flash: bool = False
    has_recon: bool = False
    has_trap: bool = False
    has_stall: bool = False
    has_postplant: bool = False
    has_controller: bool = False
    has_initiator: bool = False
    has_sentinel: bool = False
    has_dive: bool = False


def coverage(agents: Iterable[Agent]) -> Coverage:
    agents = list(agents)

    def tag(t: Tag) -> bool:
        return any(a.has_tag(t) for a in agents)

    def role(r: Role) -> bool:
        return any(a.can_play(r) for a in agents)

    return Coverage(
        has_smokes=tag(Tag.SMOKES),
        has_wall=tag(Tag.WALL),
        has_flash=tag(Tag.FLASH),
        has_recon=tag(Tag.RECON),
        has_trap=tag(Tag.TRAP),
        has_stall=tag(Tag.STALL),
        has_postplant=tag(Tag.POSTPLANT),
        has_controller=role(Role.CONTROLLER),
        has_initiator=role(Role.INITIATOR),
        has_sentinel=role(Role.SENTINEL),
        has_dive=any(a.is_dive_duelist for a in agents),
    )
