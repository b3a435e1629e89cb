"""Bounded TTL cache for interpretation results.

Interpretation depends only on the raw input and the lexicon, never on the
parameter snapshot, so one entry is valid for every state. Entries carry an
absolute deadline and are dropped lazily on access.
"""

from __future__ import annotations

import threading
import time
from collections import OrderedDict
from typing import NamedTuple

from .intent import InterpretationResult


class _Entry(NamedTuple):
    expires_at: float
    result: InterpretationResult


class InterpretationCache:
    """LRU cache keyed by raw command text."""

    def __init__(self, max_items: int = 128, ttl_s: float = 30.0) -> None:
        self.max_items = max(max_items, 1)
        self.ttl_s = ttl_s
        self.hits = 0
        self.misses = 0
        self._lock = threading.Lock()
        self._entries: OrderedDict[str, _Entry] = OrderedDict()

    def get(self, text: str) -> InterpretationResult | None:
        now = time.monotonic()
        with self._lock:
            entry = self._entries.get(text)
            if entry is None or entry.expires_at < now:
                if entry is not None:
                    del self._entries[text]
                self.misses += 1
                return None
            self._entries.move_to_end(text)
            self.hits += 1
            return entry.result

    def set(self, text: str, result: InterpretationResult) -> None:
        deadline = time.monotonic() + self.ttl_s
        with self._lock:
            self._entries[text] = _Entry(deadline, result)
            self._entries.move_to_end(text)
            while len(self._entries) > self.max_items:
                self._entries.popitem(last=False)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self.hits = 0
            self.misses = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


__all__ = ["InterpretationCache"]
