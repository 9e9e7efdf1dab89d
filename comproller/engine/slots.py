"""
Slot planner: each comp style maps to a fixed, ordered list of five role slots.

Every plan has exactly one dive-duelist slot, and it is always the first
Duelist slot of the plan, so a Duelist lock always lands on it. STANDARD's
"Flex (Utility)" slot carries a placeholder Initiator role; the resolver picks
its real role at resolution time.
"""
from __future__ import annotations

from comproller.models import FLEX_SLOT, CompStyle, Role, RoleSlot, SlotRequirement

COMP_SIZE = 5

C, I, S, D = Role.CONTROLLER, Role.INITIATOR, Role.SENTINEL, Role.DUELIST
_DIVE = RoleSlot("Dive Duelist", D, SlotRequirement.DIVE_DUELIST)

_STYLE_SLOTS: dict[CompStyle, tuple[RoleSlot, ...]] = {
    CompStyle.STANDARD: (
        RoleSlot("Controller", C),
        RoleSlot("Initiator", I),
        RoleSlot("Sentinel", S),
        _DIVE,
        RoleSlot(FLEX_SLOT, I),
    ),
    CompStyle.DOUBLE_DUELIST: (
        RoleSlot("Controller", C),
        RoleSlot("Initiator", I),
        RoleSlot("Sentinel", S),
        _DIVE,
        RoleSlot("Duelist 2", D),
    ),
    # No sentinel anchor: three initiators around a controller and the dive
    CompStyle.TRIPLE_INITIATOR: (
        RoleSlot("Controller", C),
        _DIVE,
        RoleSlot("Initiator 1", I),
        RoleSlot("Initiator 2", I),
        RoleSlot("Initiator 3", I),
    ),
    CompStyle.DOUBLE_CONTROLLER: (
        RoleSlot("Controller 1", C),
        RoleSlot("Controller 2", C),
        RoleSlot("Initiator", I),
        RoleSlot("Sentinel", S),
        _DIVE,
    ),
    CompStyle.DOUBLE_SENTINEL: (
        RoleSlot("Controller", C),
        RoleSlot("Initiator", I),
        RoleSlot("Sentinel 1", S),
        RoleSlot("Sentinel 2", S),
        _DIVE,
    ),
    CompStyle.CHAOS: (
        RoleSlot("Controller", C),
        _DIVE,
        RoleSlot("Wildcard 1", I),
        RoleSlot("Wildcard 2", S),
        RoleSlot("Wildcard 3", D),
    ),
}

STYLE_LABELS: dict[CompStyle, str] = {
    CompStyle.STANDARD: "Standard (Balanced)",
    CompStyle.DOUBLE_DUELIST: "Double Duelist",
    CompStyle.TRIPLE_INITIATOR: "Triple Initiator (Chaos Utility)",
    CompStyle.DOUBLE_CONTROLLER: "Double Controller",
    CompStyle.DOUBLE_SENTINEL: "Double Sentinel",
    CompStyle.CHAOS: "Chaos (Anything Goes)",
}


def plan_slots(style: CompStyle) -> list[RoleSlot]:
    return list(_STYLE_SLOTS[CompStyle(style)])


def style_label(style: CompStyle) -> str:
    return STYLE_LABELS[CompStyle(style)]


def validate_plan(slots: list[RoleSlot]) -> None:
    """Raise ValueError unless the plan has 5 slots and exactly one dive slot, on a Duelist."""
    if len(slots) != COMP_SIZE:
        raise ValueError(f"Slot plan must have {COMP_SIZE} slots, got {len(slots)}")
    dive_slots = [s for s in slots if s.must_dive]
    if len(dive_slots) != 1:
        raise ValueError(f"Slot plan must have exactly one dive slot, got {len(dive_slots)}")
    if dive_slots[0].role != Role.DUELIST:
        raise ValueError(f"Dive slot '{dive_slots[0].slot}' must be a Duelist slot")
