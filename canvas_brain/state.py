"""Thread-safe parameter store usable as the executor's sink."""

from __future__ import annotations

import threading
from dataclasses import replace
from typing import Any

from .types import ParameterMutators, ParameterState


class CanvasState:
    """Holds the live :class:`ParameterState` behind a lock.

    Snapshots are the frozen state object itself, so a reader can never see
    a half-applied write.
    """

    def __init__(self, initial: ParameterState | None = None) -> None:
        self._lock = threading.Lock()
        self._state = initial or ParameterState()

    def snapshot(self) -> ParameterState:
        with self._lock:
            return self._state

    def update(self, **changes: Any) -> None:
        with self._lock:
            self._state = replace(self._state, **changes)

    def reset(self, state: ParameterState | None = None) -> None:
        with self._lock:
            self._state = state or ParameterState()

    def mutators(self) -> ParameterMutators:
        return ParameterMutators(
            set_mode=lambda value: self.update(mode=value),
            set_intensity=lambda value: self.update(intensity=float(value)),
            set_particle_count=lambda value: self.update(particle_count=int(value)),
            set_speed=lambda value: self.update(speed=float(value)),
            set_primary_color=lambda value: self.update(primary_color=value),
            set_secondary_color=lambda value: self.update(secondary_color=value),
            set_morphing=lambda value: self.update(morphing=bool(value)),
        )


__all__ = ["CanvasState"]
