"""
Generation failures.
Every failure aborts the whole call; the message is meant to be shown to the user verbatim.
"""
from __future__ import annotations

from enum import Enum


class FailureKind(str, Enum):
    LOCKED_AGENT_EXCLUDED = "locked_agent_excluded"
    LOCK_ROLE_MISMATCH = "lock_role_mismatch"
    DIVE_REQUIREMENT = "dive_requirement"
    LOCK_COLLISION = "lock_collision"
    POOL_EXHAUSTED = "pool_exhausted"
    INTERNAL_DUPLICATE = "internal_duplicate"
    UNKNOWN_MAP = "unknown_map"


# ---------- Exceptions ----------


class CompGenerationError(ValueError):
    """Base for all generation failures. Carries the failure kind plus role / slot / agent context."""

    kind: FailureKind

    def __init__(
        self,
        message: str,
        *,
        role: str | None = None,
        slot: str | None = None,
        agent: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.role = role
        self.slot = slot
        self.agent = agent

    def to_dict(self) -> dict[str, str | None]:
        return {
            "kind": self.kind.value,
            "message": self.message,
            "role": self.role,
            "slot": self.slot,
            "agent": self.agent,
        }


class LockedAgentExcludedError(CompGenerationError):
    """A role lock names an agent that is also excluded."""
    kind = FailureKind.LOCKED_AGENT_EXCLUDED


class LockRoleMismatchError(CompGenerationError):
    """A role lock names an unknown agent or one that cannot play the role."""
    kind = FailureKind.LOCK_ROLE_MISMATCH


class DiveRequirementError(CompGenerationError):
    """The dive slot was given (or drew) an agent without the dive capability."""
    kind = FailureKind.DIVE_REQUIREMENT


class LockCollisionError(CompGenerationError):
    """A locked agent is already taken by an earlier slot."""
    kind = FailureKind.LOCK_COLLISION


class PoolExhaustedError(CompGenerationError):
    """No eligible agent left for a slot."""
    kind = FailureKind.POOL_EXHAUSTED


class InternalDuplicateError(CompGenerationError):
    """Post-check: the same agent ended up in two slots."""
    kind = FailureKind.INTERNAL_DUPLICATE


class UnknownMapError(CompGenerationError):
    """Map selector is neither Random nor a catalog map."""
    kind = FailureKind.UNKNOWN_MAP


class CatalogError(ValueError):
    """Catalog data is inconsistent (duplicate names, empty roles, bad need flags)."""
