"""Intent representation for the canvas command brain."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from .types import Action, Category, MoodPreset, ResolvedValue


@dataclass(frozen=True)
class MatchResult:
    """Best keyword group for one category.

    Attributes:
        found: Whether any group cleared the confidence threshold.
        category: Category the match was computed for.
        canonical_key: Canonical key of the winning group.
        resolved_value: Style, color, verb or mood preset of the winning group.
        confidence: Group confidence clamped to ``[0, 1]``.
        score: Unclamped points-per-keyword ratio used for selection.
        matched_keyword: Last keyword of the group that scored.
    """

    found: bool
    category: Category
    canonical_key: str | None = None
    resolved_value: ResolvedValue | None = None
    confidence: float = 0.0
    score: float = 0.0
    matched_keyword: str | None = None


def no_match(category: Category) -> MatchResult:
    return MatchResult(found=False, category=category)


def freeze_debug(value: Any) -> Any:
    """Recursively turn dicts into read-only mappings and lists into tuples."""

    if isinstance(value, Mapping):
        return MappingProxyType({key: freeze_debug(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze_debug(item) for item in value)
    return value


def thaw_debug(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {key: thaw_debug(item) for key, item in value.items()}
    if isinstance(value, tuple):
        return [thaw_debug(item) for item in value]
    return value


def match_to_debug(match: MatchResult) -> dict[str, object]:
    """Return a compact debug representation of a :class:`MatchResult`."""

    value = match.resolved_value
    if isinstance(value, MoodPreset):
        value = {
            "intensity": value.intensity,
            "speed": value.speed,
            "particle_count": value.particle_count,
            "colors": list(value.colors),
        }
    return {
        "found": match.found,
        "canonical_key": match.canonical_key,
        "matched_keyword": match.matched_keyword,
        "value": value,
        "confidence": round(match.confidence, 4),
    }


@dataclass(frozen=True)
class ContextSignals:
    """Coarse intent signals. Advisory only; nothing gates on them."""

    is_creation: bool = False
    is_modification: bool = False
    is_intensity_up: bool = False
    is_intensity_down: bool = False
    is_request: bool = False
    has_negation: bool = False

    def as_dict(self) -> dict[str, bool]:
        return {
            "is_creation": self.is_creation,
            "is_modification": self.is_modification,
            "is_intensity_up": self.is_intensity_up,
            "is_intensity_down": self.is_intensity_down,
            "is_request": self.is_request,
            "has_negation": self.has_negation,
        }


@dataclass(frozen=True)
class InterpretationResult:
    """Outcome of interpreting one command.

    ``debug`` holds the per-category match details keyed by category name,
    as read-only mappings since cached results are shared between callers.
    """

    understood: bool
    actions: tuple[Action, ...]
    confidence: float
    response_text: str
    normalized: str = ""
    context: ContextSignals = field(default_factory=ContextSignals)
    debug: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))


def result_to_debug(result: InterpretationResult) -> dict[str, object]:
    """Return a JSON-friendly representation of an :class:`InterpretationResult`."""

    return {
        "understood": result.understood,
        "normalized": result.normalized,
        "confidence": round(result.confidence, 4),
        "actions": [
            {"type": action.type, "key": action.key, "description": action.description}
            for action in result.actions
        ],
        "context": result.context.as_dict(),
        "matches": thaw_debug(result.debug),
    }
