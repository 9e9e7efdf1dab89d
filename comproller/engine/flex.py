"""
Flex slot role selection.

The STANDARD style's flex seat picks its role from what the comp already has,
the map's needs and the mode. Two coin flips are deliberate variety knobs
(an occasional second sentinel, an occasional PRO double duelist); their odds
live in FlexKnobs.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from comproller.engine.coverage import Coverage
from comproller.engine.rng import RandomSource
from comproller.models import MapNeeds, Mode, Role

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FlexKnobs:
    sentinel_chance: float = 0.12         # trap maps: second sentinel
    pro_controller_split: float = 0.5     # PRO with flash + recon covered
    pro_duelist_chance: float = 0.25      # PRO: aggressive double duelist
    ranked_controller_chance: float = 0.15


def choose_flex_role(
    needs: MapNeeds,
    mode: Mode,
    cov: Coverage,
    rng: RandomSource,
    knobs: FlexKnobs | None = None,
) -> Role:
    """
    Decide the flex seat's role. Mode only matters here.
    Coin flips are drawn in a fixed order so a scripted source can pin each branch.
    """
    knobs = knobs or FlexKnobs()
    pref = Role.INITIATOR

    # Map needs
    if needs.prefer_double_controller:
        pref = Role.CONTROLLER
    if needs.prefer_wall_controller and not cov.has_wall:
        pref = Role.CONTROLLER
    if needs.prefer_flash and not cov.has_flash:
        pref = Role.INITIATOR
    if needs.prefer_recon and not cov.has_recon:
        pref = Role.INITIATOR
    if needs.prefer_trap_sentinel and rng.random() < knobs.sentinel_chance:
        pref = Role.SENTINEL

    # Mode
    if mode == Mode.PRO:
        if cov.has_flash and cov.has_recon:
            if needs.prefer_double_controller:
                pref = Role.CONTROLLER
            else:
                pref = Role.CONTROLLER if rng.random() < knobs.pro_controller_split else Role.INITIATOR
        else:
            pref = Role.INITIATOR
        if rng.random() < knobs.pro_duelist_chance:
            pref = Role.DUELIST
    elif rng.random() < knobs.ranked_controller_chance:
        pref = Role.CONTROLLER

    logger.debug("flex role -> %s (mode=%s)", pref.value, mode.value)
    return pref
