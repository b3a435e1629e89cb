"""Data contract definitions for the canvas command brain.

``ParameterState`` is the snapshot type the pipeline reads; it is never
mutated in place. Writes go through a :class:`ParameterMutators` set supplied
by the caller.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Callable, Literal, Mapping, Union

Category = Literal["mood", "style", "color", "intensity", "particles", "speed"]
ActionType = Literal["mood", "style", "color", "intensity", "particles", "speed"]

DEFAULT_MODE = "neural"
DEFAULT_PRIMARY_COLOR = "#ff006e"
DEFAULT_SECONDARY_COLOR = "#8338ec"

# Snapshot fields the executor reads; accepted under either naming style.
_REQUIRED_FIELDS = {
    "intensity": ("intensity",),
    "particle_count": ("particle_count", "particleCount"),
    "speed": ("speed",),
}
_OPTIONAL_FIELDS = {
    "mode": (("mode",), DEFAULT_MODE),
    "primary_color": (("primary_color", "primaryColor"), DEFAULT_PRIMARY_COLOR),
    "secondary_color": (("secondary_color", "secondaryColor"), DEFAULT_SECONDARY_COLOR),
    "morphing": (("morphing",), True),
}


def _lookup(mapping: Mapping[str, Any], names: tuple[str, ...]) -> Any:
    for name in names:
        if name in mapping:
            return mapping[name]
    raise KeyError(names[0])


@dataclass(frozen=True)
class ParameterState:
    """Immutable snapshot of the visual parameters."""

    mode: str = DEFAULT_MODE
    intensity: float = 1.0
    particle_count: int = 2000
    speed: float = 1.0
    primary_color: str = DEFAULT_PRIMARY_COLOR
    secondary_color: str = DEFAULT_SECONDARY_COLOR
    morphing: bool = True

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "ParameterState":
        """Build a snapshot from a plain mapping.

        ``intensity``, ``particle_count`` and ``speed`` must be present; a
        missing one raises :class:`KeyError`. Other fields fall back to the
        canvas defaults.
        """

        values: dict[str, Any] = {}
        for field_name, names in _REQUIRED_FIELDS.items():
            values[field_name] = _lookup(mapping, names)
        for field_name, (names, default) in _OPTIONAL_FIELDS.items():
            try:
                values[field_name] = _lookup(mapping, names)
            except KeyError:
                values[field_name] = default
        return cls(
            mode=str(values["mode"]),
            intensity=float(values["intensity"]),
            particle_count=int(values["particle_count"]),
            speed=float(values["speed"]),
            primary_color=str(values["primary_color"]),
            secondary_color=str(values["secondary_color"]),
            morphing=bool(values["morphing"]),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class MoodPreset:
    """Composite mood target: absolute intensity, speed, density and colors."""

    intensity: float
    speed: float
    particle_count: int
    colors: tuple[str, str]


ResolvedValue = Union[str, MoodPreset]


@dataclass(frozen=True)
class Action:
    """One resolved mutation. ``payload`` is a style, a color, a verb or a preset."""

    type: ActionType
    payload: ResolvedValue
    key: str
    description: str


@dataclass(frozen=True)
class ParameterMutators:
    """One setter per :class:`ParameterState` field."""

    set_mode: Callable[[str], None]
    set_intensity: Callable[[float], None]
    set_particle_count: Callable[[int], None]
    set_speed: Callable[[float], None]
    set_primary_color: Callable[[str], None]
    set_secondary_color: Callable[[str], None]
    set_morphing: Callable[[bool], None]
