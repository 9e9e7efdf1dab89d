"""
Generator settings. Defaults match the app; a few can be overridden from the environment.
"""
from __future__ import annotations

import os
from dataclasses import dataclass

from comproller.engine.strats import SIMPLE_STRAT_LIMIT, STRAT_LIMIT

DEFAULT_HISTORY_SIZE = 10


@dataclass(frozen=True)
class GeneratorConfig:
    history_size: int = DEFAULT_HISTORY_SIZE
    strat_limit: int = STRAT_LIMIT
    simple_strat_limit: int = SIMPLE_STRAT_LIMIT
    seed: int | None = None


def _env_int(name: str) -> int | None:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def load_config() -> GeneratorConfig:
    """Read COMPROLLER_SEED / COMPROLLER_HISTORY_SIZE; unset means default."""
    history_size = _env_int("COMPROLLER_HISTORY_SIZE")
    if history_size is not None and history_size < 1:
        raise ValueError("COMPROLLER_HISTORY_SIZE must be at least 1")
    return GeneratorConfig(
        history_size=history_size if history_size is not None else DEFAULT_HISTORY_SIZE,
        seed=_env_int("COMPROLLER_SEED"),
    )
