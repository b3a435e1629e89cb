"""Coarse intent signals for a canonical phrase.

Signals use plain substring containment, so "upbeat" counts as intensity up
and "return" as a modification. They are surfaced to callers and logged but
do not gate matching; a phrase like "not red" still resolves to a red color
action.
"""

from __future__ import annotations

from typing import Iterable

from ..intent import ContextSignals

CREATION_WORDS = ("create", "make", "build", "generate", "produce", "craft", "design", "form")
MODIFICATION_WORDS = ("change", "alter", "modify", "adjust", "transform", "shift", "switch", "turn")
INTENSITY_UP_WORDS = ("up", "higher", "bigger", "stronger", "louder", "harder", "deeper")
INTENSITY_DOWN_WORDS = ("down", "lower", "smaller", "weaker", "quieter", "softer", "lighter")
REQUEST_WORDS = ("please", "can you", "could you", "would you", "i want", "i need", "show me")
NEGATION_WORDS = ("not", "dont", "don't", "never", "stop", "remove", "without", "no more")


def _contains_any(phrase: str, words: Iterable[str]) -> bool:
    return any(word in phrase for word in words)


def analyze_context(phrase: str) -> ContextSignals:
    return ContextSignals(
        is_creation=_contains_any(phrase, CREATION_WORDS),
        is_modification=_contains_any(phrase, MODIFICATION_WORDS),
        is_intensity_up=_contains_any(phrase, INTENSITY_UP_WORDS),
        is_intensity_down=_contains_any(phrase, INTENSITY_DOWN_WORDS),
        is_request=_contains_any(phrase, REQUEST_WORDS),
        has_negation=_contains_any(phrase, NEGATION_WORDS),
    )


__all__ = ["analyze_context"]
