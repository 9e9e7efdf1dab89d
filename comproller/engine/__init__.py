"""
Comp generation engine: need resolution, candidate pools, slot plans,
the constraint resolver, and derived notes / quick strats.
Pure and synchronous; every random draw goes through one injectable source.
"""
from .errors import (
    FailureKind,
    CompGenerationError,
    LockedAgentExcludedError,
    LockRoleMismatchError,
    DiveRequirementError,
    LockCollisionError,
    PoolExhaustedError,
    InternalDuplicateError,
    UnknownMapError,
    CatalogError,
)
from .rng import RandomSource, SeededRNG
from .needs import resolve_needs
from .pools import base_pool, weighted_pool
from .slots import COMP_SIZE, plan_slots, style_label, validate_plan
from .coverage import Coverage, coverage
from .boosts import BoostContext, rules_for
from .flex import FlexKnobs, choose_flex_role
from .resolver import ConstraintResolver, validate_locks
from .notes import build_notes
from .strats import STRAT_LIMIT, SIMPLE_STRAT_LIMIT, build_quick_strats

__all__ = [
    "FailureKind",
    "CompGenerationError",
    "LockedAgentExcludedError",
    "LockRoleMismatchError",
    "DiveRequirementError",
    "LockCollisionError",
    "PoolExhaustedError",
    "InternalDuplicateError",
    "UnknownMapError",
    "CatalogError",
    "RandomSource",
    "SeededRNG",
    "resolve_needs",
    "base_pool",
    "weighted_pool",
    "COMP_SIZE",
    "plan_slots",
    "style_label",
    "validate_plan",
    "Coverage",
    "coverage",
    "BoostContext",
    "rules_for",
    "FlexKnobs",
    "choose_flex_role",
    "ConstraintResolver",
    "validate_locks",
    "build_notes",
    "STRAT_LIMIT",
    "SIMPLE_STRAT_LIMIT",
    "build_quick_strats",
]
