"""
Slot plans: five seats per style, exactly one dive seat.
"""
from __future__ import annotations

from collections import Counter

import pytest

from comproller.engine.slots import COMP_SIZE, plan_slots, style_label, validate_plan
from comproller.models import FLEX_SLOT, CompStyle, Role, RoleSlot, SlotRequirement


def _roles(style: CompStyle) -> Counter:
    return Counter(s.role for s in plan_slots(style))


@pytest.mark.parametrize("style", list(CompStyle))
def test_every_style_has_five_slots_and_one_dive(style):
    slots = plan_slots(style)
    assert len(slots) == COMP_SIZE
    dive = [s for s in slots if s.must_dive]
    assert len(dive) == 1
    assert dive[0].role == Role.DUELIST
    validate_plan(slots)


@pytest.mark.parametrize("style", list(CompStyle))
def test_dive_slot_is_first_duelist_slot(style):
    first_duelist = next(s for s in plan_slots(style) if s.role == Role.DUELIST)
    assert first_duelist.must_dive


def test_triple_initiator_has_no_sentinel():
    roles = _roles(CompStyle.TRIPLE_INITIATOR)
    assert roles[Role.INITIATOR] == 3
    assert roles[Role.SENTINEL] == 0


def test_double_styles():
    assert _roles(CompStyle.DOUBLE_CONTROLLER)[Role.CONTROLLER] == 2
    assert _roles(CompStyle.DOUBLE_SENTINEL)[Role.SENTINEL] == 2
    assert _roles(CompStyle.DOUBLE_DUELIST)[Role.DUELIST] == 2


def test_standard_has_flex_slot():
    slots = plan_slots(CompStyle.STANDARD)
    flex = [s for s in slots if s.is_flex]
    assert len(flex) == 1
    assert flex[0].slot == FLEX_SLOT
    assert slots[-1].is_flex
    for style in CompStyle:
        if style != CompStyle.STANDARD:
            assert not any(s.is_flex for s in plan_slots(style))


def test_chaos_wildcards():
    labels = [s.slot for s in plan_slots(CompStyle.CHAOS)]
    assert labels == ["Controller", "Dive Duelist", "Wildcard 1", "Wildcard 2", "Wildcard 3"]


def test_plan_is_a_copy():
    slots = plan_slots(CompStyle.STANDARD)
    slots.pop()
    assert len(plan_slots(CompStyle.STANDARD)) == COMP_SIZE


def test_accepts_string_style():
    assert plan_slots("DOUBLE_SENTINEL") == plan_slots(CompStyle.DOUBLE_SENTINEL)


def test_style_labels():
    assert style_label(CompStyle.STANDARD) == "Standard (Balanced)"
    assert style_label(CompStyle.TRIPLE_INITIATOR) == "Triple Initiator (Chaos Utility)"
    assert style_label(CompStyle.CHAOS) == "Chaos (Anything Goes)"


class TestValidatePlan:
    def test_wrong_size(self):
        with pytest.raises(ValueError, match="5 slots"):
            validate_plan(plan_slots(CompStyle.STANDARD)[:4])

    def test_two_dive_slots(self):
        slots = plan_slots(CompStyle.DOUBLE_DUELIST)
        slots[-1] = RoleSlot("Duelist 2", Role.DUELIST, SlotRequirement.DIVE_DUELIST)
        with pytest.raises(ValueError, match="exactly one dive"):
            validate_plan(slots)

    def test_dive_on_wrong_role(self):
        slots = [RoleSlot(f"S{i}", Role.CONTROLLER) for i in range(4)]
        slots.append(RoleSlot("Bad", Role.SENTINEL, SlotRequirement.DIVE_DUELIST))
        with pytest.raises(ValueError, match="Duelist"):
            validate_plan(slots)
