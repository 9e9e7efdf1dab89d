"""
Comp notes: short observations about what the final five bring.
"""
from __future__ import annotations

from typing import Sequence

from comproller.engine.coverage import coverage
from comproller.engine.slots import style_label
from comproller.models import Agent, CompStyle


def build_notes(agents: Sequence[Agent], style: CompStyle) -> list[str]:
    cov = coverage(agents)
    notes = [f"Style: {style_label(style)}."]

    if cov.has_controller:
        notes.append("Smokes present: you can take space + retake with structure.")
    if cov.has_dive:
        notes.append("Dive duelist guaranteed: you have a true entry option every game.")

    if cov.has_initiator:
        if cov.has_recon:
            notes.append("Info present: easier clears + safer retakes.")
        if cov.has_flash:
            notes.append("Flash present: better entries and angle-breaking.")

    if cov.has_sentinel:
        if cov.has_trap:
            notes.append("Trap sentinel: strong flank control + anchoring.")
        if cov.has_stall:
            notes.append("Stall tools: buy time and disrupt execs.")
    else:
        notes.append("Warning: no sentinel anchor—play tighter spacing and trade more (this is a fun style).")

    if cov.has_wall:
        notes.append("Wall utility: helps crosses / cuts sightlines.")
    if cov.has_postplant:
        notes.append("Post-plant tools: play time after plant.")
    return notes
