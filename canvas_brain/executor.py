"""Apply resolved actions against one pre-batch snapshot.

Relative verbs (increase/decrease) always step from the snapshot taken before
the batch, never from a value written earlier in the same batch. A mood plus
"brighter" therefore ends at ``clamp(snapshot.intensity + step)`` rather than
stepping from the mood's intensity.
"""

from __future__ import annotations

import logging
from typing import Iterable

from .constants import (
    BURST_PARTICLES,
    CHAOS_SPEED,
    INTENSITY_RANGE,
    INTENSITY_STEP,
    PARTICLE_RANGE,
    PARTICLE_STEP,
    SPEED_RANGE,
    SPEED_STEP,
    SWARM_PARTICLES,
)
from .types import Action, MoodPreset, ParameterMutators, ParameterState

LOGGER = logging.getLogger(__name__)


def clamp(value: float, bounds: tuple[float, float]) -> float:
    low, high = bounds
    return max(low, min(high, value))


def clamp_particles(value: float) -> int:
    low, high = PARTICLE_RANGE
    return int(max(low, min(high, round(value))))


def _apply_mood(preset: MoodPreset, mutators: ParameterMutators) -> None:
    mutators.set_intensity(clamp(preset.intensity, INTENSITY_RANGE))
    mutators.set_speed(clamp(preset.speed, SPEED_RANGE))
    mutators.set_particle_count(clamp_particles(preset.particle_count))
    mutators.set_primary_color(preset.colors[0])
    mutators.set_secondary_color(preset.colors[1])


def _apply_intensity(verb: str, current: float, mutators: ParameterMutators) -> None:
    low, high = INTENSITY_RANGE
    if verb == "increase":
        mutators.set_intensity(clamp(current + INTENSITY_STEP, INTENSITY_RANGE))
    elif verb == "decrease":
        mutators.set_intensity(clamp(current - INTENSITY_STEP, INTENSITY_RANGE))
    elif verb == "max":
        mutators.set_intensity(high)
    elif verb == "min":
        mutators.set_intensity(low)
    else:
        LOGGER.debug("Ignoring intensity verb %r", verb)


def _apply_particles(verb: str, current: int, mutators: ParameterMutators) -> None:
    if verb == "increase":
        mutators.set_particle_count(clamp_particles(current + PARTICLE_STEP))
    elif verb == "decrease":
        mutators.set_particle_count(clamp_particles(current - PARTICLE_STEP))
    elif verb == "burst":
        mutators.set_particle_count(clamp_particles(BURST_PARTICLES))
    elif verb == "swarm":
        mutators.set_particle_count(clamp_particles(SWARM_PARTICLES))
    else:
        LOGGER.debug("Ignoring particles verb %r", verb)


def _apply_speed(verb: str, current: float, mutators: ParameterMutators) -> None:
    low, _ = SPEED_RANGE
    if verb == "increase":
        mutators.set_speed(clamp(current + SPEED_STEP, SPEED_RANGE))
    elif verb == "decrease":
        mutators.set_speed(clamp(current - SPEED_STEP, SPEED_RANGE))
    elif verb == "stop":
        mutators.set_speed(low)
        mutators.set_morphing(False)
    elif verb == "chaos":
        mutators.set_speed(clamp(CHAOS_SPEED, SPEED_RANGE))
        mutators.set_morphing(True)
    else:
        LOGGER.debug("Ignoring speed verb %r", verb)


def apply_action(action: Action, snapshot: ParameterState, mutators: ParameterMutators) -> None:
    payload = action.payload
    if action.type == "mood":
        if isinstance(payload, MoodPreset):
            _apply_mood(payload, mutators)
        else:
            LOGGER.debug("Ignoring mood action without a preset: %r", payload)
    elif action.type == "style":
        mutators.set_mode(str(payload))
    elif action.type == "color":
        mutators.set_primary_color(str(payload))
    elif action.type == "intensity":
        _apply_intensity(str(payload), snapshot.intensity, mutators)
    elif action.type == "particles":
        _apply_particles(str(payload), snapshot.particle_count, mutators)
    elif action.type == "speed":
        _apply_speed(str(payload), snapshot.speed, mutators)
    else:
        LOGGER.debug("Ignoring unknown action type %r", action.type)


def execute_actions(
    actions: Iterable[Action],
    snapshot: ParameterState,
    mutators: ParameterMutators,
) -> None:
    """Apply ``actions`` in order, reading relative bases only from ``snapshot``."""

    for action in actions:
        apply_action(action, snapshot, mutators)


__all__ = ["apply_action", "clamp", "clamp_particles", "execute_actions"]
