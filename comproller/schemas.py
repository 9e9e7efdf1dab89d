"""
Request / response shapes for callers that speak plain strings (UI forms, CLI flags).
Validation only; generation itself works on models.GenerationRequest.
"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from comproller.models import RANDOM_MAP, CompStyle, GeneratedComp, GenerationRequest, Mode, Role


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


class GenerateCompRequest(BaseModel):
    map: str = Field(default=RANDOM_MAP, description="Map name or 'Random'")
    mode: Mode = Field(default=Mode.RANKED, description="RANKED or PRO")
    style: CompStyle = Field(default=CompStyle.STANDARD, description="Comp style preset")
    lock_controller: str | None = None
    lock_initiator: str | None = None
    lock_sentinel: str | None = None
    lock_duelist: str | None = Field(None, description="Must be a dive duelist")
    excluded: list[str] = Field(default_factory=list, description="Agent names, list or comma-separated")

    @field_validator("map", mode="before")
    @classmethod
    def _strip_map(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip() or RANDOM_MAP
        return v

    @field_validator("mode", "style", mode="before")
    @classmethod
    def _upper_enum(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().upper().replace(" ", "_")
        return v

    @field_validator("lock_controller", "lock_initiator", "lock_sentinel", "lock_duelist", mode="before")
    @classmethod
    def _strip_lock(cls, v: Any) -> Any:
        if isinstance(v, str):
            return _clean(v)
        return v

    @field_validator("excluded", mode="before")
    @classmethod
    def _split_excluded(cls, v: Any) -> Any:
        if v is None:
            return []
        if isinstance(v, str):
            v = v.split(",")
        return [s.strip() for s in v if isinstance(s, str) and s.strip()]

    def locked_roles(self) -> dict[Role, str]:
        locks = {
            Role.CONTROLLER: self.lock_controller,
            Role.INITIATOR: self.lock_initiator,
            Role.SENTINEL: self.lock_sentinel,
            Role.DUELIST: self.lock_duelist,
        }
        return {r: name for r, name in locks.items() if name}

    def to_request(self) -> GenerationRequest:
        return GenerationRequest(
            map=self.map,
            mode=self.mode,
            style=self.style,
            locked_roles=self.locked_roles(),
            excluded=frozenset(self.excluded),
        )


def comp_response(comp: GeneratedComp) -> dict[str, Any]:
    """JSON-ready result for the presentation layer."""
    return comp.to_dict()
