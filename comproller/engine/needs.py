"""
Need resolver: expands a map's sparse preference flags into a full MapNeeds.
"""
from __future__ import annotations

from comproller.models import MapNeeds, MapProfile


def resolve_needs(profile: MapProfile) -> MapNeeds:
    """Absent flags resolve to False; present flags pass through unchanged."""
    known = MapNeeds.flag_names()
    return MapNeeds(**{k: bool(v) for k, v in profile.needs.items() if k in known})
