"""
Recent-comp history owned by the caller (UI / CLI), not by the generator.
Most recent first; the oldest entry is evicted once the window is full.
"""
from __future__ import annotations

import threading
from typing import Iterator

from comproller.config import DEFAULT_HISTORY_SIZE
from comproller.models import GeneratedComp


class CompHistory:
    def __init__(self, max_size: int = DEFAULT_HISTORY_SIZE) -> None:
        if max_size < 1:
            raise ValueError("max_size must be at least 1")
        self.max_size = max_size
        self._items: list[GeneratedComp] = []
        self._lock = threading.Lock()

    def add(self, comp: GeneratedComp) -> None:
        # Prepend then truncate, under one lock
        with self._lock:
            self._items = [comp, *self._items][: self.max_size]

    def items(self) -> list[GeneratedComp]:
        with self._lock:
            return list(self._items)

    def clear(self) -> None:
        with self._lock:
            self._items = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[GeneratedComp]:
        return iter(self.items())
