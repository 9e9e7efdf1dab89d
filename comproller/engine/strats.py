"""
Quick strats: ordered, capped list of short directives derived from map + comp.

Order is fixed: style opener(s), three universal directives, map call-outs,
then utility nudges. Truncation only ever drops trailing items.
"""
from __future__ import annotations

from typing import Sequence

from comproller.engine.coverage import coverage
from comproller.models import Agent, CompStyle

STRAT_LIMIT = 8
SIMPLE_STRAT_LIMIT = 7

STYLE_OPENERS: dict[CompStyle, tuple[str, ...]] = {
    CompStyle.TRIPLE_INITIATOR: (
        "Triple Initiator: play for info + disables + layered flashes; win rounds by setting up unfair fights.",
        "Defense: avoid solo anchors—stack/trade more and retake as a unit with utility waves.",
    ),
    CompStyle.DOUBLE_DUELIST: (
        "Double Duelist: take space aggressively—one creates chaos, one trades. Commit fast off first advantage.",
    ),
    CompStyle.DOUBLE_CONTROLLER: (
        "Double Controller: slow the map down—double smokes/walls isolate fights, then exec clean.",
    ),
    CompStyle.DOUBLE_SENTINEL: (
        "Double Sentinel: punish flanks/pushes—play contact into traps, then collapse.",
    ),
    CompStyle.CHAOS: (
        "Chaos: play off your strongest utility combo each round—don’t overthink, just trade and scale.",
    ),
}

MAP_CALLS: dict[str, tuple[str, ...]] = {
    "Ascent": (
        "Ascent: contest Mid early; once Mid is yours, split A/B with smokes.",
        "Ascent retake: smoke CT + Heaven/Market, clear close first, then pinch.",
    ),
    "Bind": (
        "Bind: sell pressure with short utility, then hit fast—TP fakes are huge value.",
        "Bind post-plant: play off-site positions; don’t all sit on site.",
    ),
    "Haven": (
        "Haven: default for info, then hit the weak site with a fast dive + trade train.",
        "Haven defense: keep a fast rotator; don’t over-stack without info.",
    ),
    "Split": (
        "Split: Mid is everything—win Mid, then split B (Heaven+Main) or A (Ramps+Main).",
        "Split execute: smoke Heaven/CT, flash close, dive in on contact.",
    ),
    "Lotus": (
        "Lotus: take A Main control, then pinch through Door/Tree when smokes are up.",
        "Lotus defense: play for info and fast rotates—expect fakes.",
    ),
    "Sunset": (
        "Sunset: contest Mid early; win Mid → split B/A with smokes and quick trades.",
        "Sunset defense: trap Mid/Market and rotate off first info ping.",
    ),
    "Icebox": (
        "Icebox: use wall/smokes to cross; dive creates chaos while team plants safely.",
        "Icebox defense: play info then retake together—don’t feed 1v1s.",
    ),
    "Breeze": (
        "Breeze: long lanes—use wall/smokes to cross, recon to clear, then dive off tags.",
        "Breeze default: slower is fine; punish pushes and hit late with full util.",
    ),
    "Fracture": (
        "Fracture: pinch attacks—hit from BOTH sides; smokes isolate fights; dive breaks site.",
        "Fracture defense: lean retake setups; collapse with utility when they commit.",
    ),
    "Pearl": (
        "Pearl: take Mid space, then split; smokes isolate Art/Link fights.",
        "Pearl defense: trap flank, recon mid, rotate early off info.",
    ),
    "Corrode": (
        "Corrode: take early info, then pick a lane and collapse fast—avoid slow solo lurks.",
        "Corrode defense: play tight spacing for trades; rotate off confirmed info (don’t guess).",
    ),
}

# Wall nudge is redundant where the map call-outs already lean on walls
WALL_NUDGE_SKIP_MAPS = frozenset({"Icebox", "Breeze"})


def build_quick_strats(
    map_name: str,
    agents: Sequence[Agent],
    style: CompStyle,
    limit: int = STRAT_LIMIT,
) -> list[str]:
    cov = coverage(agents)
    dive = next((a.name for a in agents if a.is_dive_duelist), "Dive Duelist")

    strats: list[str] = list(STYLE_OPENERS.get(style, ()))

    # Universal rules
    pair_with = "a flash" if cov.has_flash else "recon/info" if cov.has_recon else "a trade swing"
    strats.append(f"Entry rule: pair {dive}'s dive with {pair_with} — no dry dives.")
    strats.append(
        f"Attack default: {'use info early' if cov.has_recon else 'take contact carefully'}, "
        f"{'smoke key chokes' if cov.has_smokes else 'take space slowly'}, plant, then "
        f"{'play time + post-plant utility' if cov.has_postplant else 'play crossfires + trades'}."
    )
    strats.append(
        f"Defense: {'anchor with traps' if cov.has_trap else 'play crossfires'}, "
        f"{'recon for rotates' if cov.has_recon else 'hold sound + timing'}, then retake with "
        f"{'smokes' if cov.has_smokes else 'numbers'} + {'flashes' if cov.has_flash else 'trades'}."
    )

    strats.extend(MAP_CALLS.get(map_name, ()))

    # Utility nudges
    if not cov.has_recon:
        strats.append("No recon: clear angles together and default more—avoid solo face-checks.")
    if not cov.has_flash:
        strats.append("Low flash: take space with smokes + contact, then trade hard (2-man swing).")
    if cov.has_wall and map_name not in WALL_NUDGE_SKIP_MAPS:
        strats.append("Wall utility: cut sightlines and force close fights.")

    return strats[:limit]
