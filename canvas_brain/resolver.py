"""Cross-category action resolution.

Each category is matched independently against the same canonical phrase.
Matched categories become actions in a fixed order (mood, style, color,
intensity, particles, speed) and add their weight to a saturating
confidence accumulator.
"""

from __future__ import annotations

from typing import Mapping

from .constants import (
    CATEGORY_ORDER,
    CATEGORY_WEIGHTS,
    DEFAULT_FUZZY_THRESHOLD,
    DEFAULT_MIN_CONFIDENCE,
    GENERIC_HINT,
    HINT_PREFIX,
    HINTS_BY_TOPIC,
)
from .intent import ContextSignals, InterpretationResult, MatchResult, freeze_debug, match_to_debug
from .lang.lexicon import Lexicon
from .lang.matcher import find_best_match
from .types import Action


def match_categories(
    phrase: str,
    lexicon: Lexicon,
    *,
    min_confidence: float = DEFAULT_MIN_CONFIDENCE,
    fuzzy_threshold: float = DEFAULT_FUZZY_THRESHOLD,
) -> dict[str, MatchResult]:
    """Run the matcher once per category. No category suppresses another."""

    return {
        category: find_best_match(
            phrase,
            lexicon.entries(category),
            category,  # type: ignore[arg-type]
            min_confidence=min_confidence,
            fuzzy_threshold=fuzzy_threshold,
        )
        for category in CATEGORY_ORDER
    }


def _action_for(match: MatchResult) -> tuple[Action, str]:
    key = match.canonical_key or ""
    said = match.matched_keyword or key
    value = match.resolved_value
    category = match.category

    if category == "mood":
        return Action("mood", value, key, f"Setting {key} mood"), f"Creating {key} atmosphere!"
    if category == "style":
        return (
            Action("style", value, key, f"Switching to {value} mode"),
            f"Switching to {value} style!",
        )
    if category == "color":
        return Action("color", value, key, f"Changing color to {key}"), f"Adding {said} colors!"
    if category == "intensity":
        return Action("intensity", value, key, f"{value} intensity"), f"Making it {said}!"
    if category == "particles":
        return (
            Action("particles", value, key, f"{value} particles"),
            f"{said.capitalize()} particles!",
        )
    return Action("speed", value, key, f"{value} speed"), f"Making it {said}!"


def _weight_for(match: MatchResult) -> float:
    # Mood scales with how strongly it matched; the rest are flat.
    weight = CATEGORY_WEIGHTS[match.category]
    if match.category == "mood":
        return match.confidence * weight
    return weight


def build_hint(phrase: str) -> str:
    """Suggest example phrases for whatever the user seemed to be after."""

    suggestions: list[str] = []
    for triggers, examples in HINTS_BY_TOPIC:
        if any(trigger in phrase for trigger in triggers):
            suggestions.extend(examples)
    if suggestions:
        return HINT_PREFIX + ", ".join(suggestions)
    return GENERIC_HINT


def resolve_actions(
    phrase: str,
    matches: Mapping[str, MatchResult],
    context: ContextSignals | None = None,
) -> InterpretationResult:
    """Turn per-category matches into an ordered :class:`InterpretationResult`."""

    actions: list[Action] = []
    responses: list[str] = []
    confidence = 0.0

    for category in CATEGORY_ORDER:
        match = matches.get(category)
        if match is None or not match.found:
            continue
        action, response = _action_for(match)
        actions.append(action)
        responses.append(response)
        confidence += _weight_for(match)

    understood = bool(actions)
    response_text = " ".join(responses) if understood else build_hint(phrase)

    return InterpretationResult(
        understood=understood,
        actions=tuple(actions),
        confidence=min(confidence, 1.0),
        response_text=response_text,
        normalized=phrase,
        context=context or ContextSignals(),
        debug=freeze_debug({category: match_to_debug(match) for category, match in matches.items()}),
    )


__all__ = ["build_hint", "match_categories", "resolve_actions"]
