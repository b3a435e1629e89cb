"""Three-tier fuzzy keyword matching.

Every keyword of a group scores against the phrase: a whole-word hit is
worth two points, a raw substring hit one point, and otherwise each phrase
word whose normalized edit-distance similarity clears the fuzzy threshold
adds half a point. Group confidence is points per keyword. All functions
here are pure.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Iterable, Sequence

from ..constants import (
    DEFAULT_FUZZY_THRESHOLD,
    DEFAULT_MIN_CONFIDENCE,
    EXACT_POINTS,
    FUZZY_POINTS,
    SUBSTRING_POINTS,
)
from ..intent import MatchResult, no_match
from ..types import Category
from .lexicon import PatternEntry


@lru_cache(maxsize=1024)
def _boundary_pattern(keyword: str) -> re.Pattern[str]:
    return re.compile(rf"\b{re.escape(keyword)}\b")


def levenshtein(first: str, second: str) -> int:
    if len(first) < len(second):
        first, second = second, first
    previous = list(range(len(second) + 1))
    for i, char_a in enumerate(first, start=1):
        current = [i]
        for j, char_b in enumerate(second, start=1):
            cost = 0 if char_a == char_b else 1
            current.append(
                min(
                    previous[j] + 1,
                    current[j - 1] + 1,
                    previous[j - 1] + cost,
                )
            )
        previous = current
    return previous[-1]


def similarity(first: str, second: str) -> float:
    """Return ``(maxLen - distance) / maxLen``; two empty strings are identical."""

    if not first:
        return 1.0 if not second else 0.0
    if not second:
        return 0.0
    max_len = max(len(first), len(second))
    return (max_len - levenshtein(first, second)) / max_len


def score_keywords(
    phrase: str,
    keywords: Sequence[str],
    *,
    fuzzy_threshold: float = DEFAULT_FUZZY_THRESHOLD,
) -> tuple[float, str | None]:
    """Return accumulated points and the last keyword that scored."""

    words = phrase.split()
    points = 0.0
    matched: str | None = None
    for keyword in keywords:
        if _boundary_pattern(keyword).search(phrase):
            points += EXACT_POINTS
            matched = keyword
        elif keyword in phrase:
            points += SUBSTRING_POINTS
            matched = keyword
        else:
            for word in words:
                if similarity(word, keyword) > fuzzy_threshold:
                    points += FUZZY_POINTS
                    matched = keyword
    return points, matched


def group_confidence(
    phrase: str,
    keywords: Sequence[str],
    *,
    fuzzy_threshold: float = DEFAULT_FUZZY_THRESHOLD,
) -> float:
    if not keywords:
        return 0.0
    points, _ = score_keywords(phrase, keywords, fuzzy_threshold=fuzzy_threshold)
    return points / len(keywords)


def find_best_match(
    phrase: str,
    entries: Iterable[PatternEntry],
    category: Category,
    *,
    min_confidence: float = DEFAULT_MIN_CONFIDENCE,
    fuzzy_threshold: float = DEFAULT_FUZZY_THRESHOLD,
) -> MatchResult:
    """Pick the highest-confidence group above ``min_confidence``.

    Ties keep the first-declared group.
    """

    best = no_match(category)
    if not phrase:
        return best

    for entry in entries:
        if not entry.keywords:
            continue
        points, matched = score_keywords(
            phrase, entry.keywords, fuzzy_threshold=fuzzy_threshold
        )
        score = points / len(entry.keywords)
        if score > best.score and score > min_confidence:
            best = MatchResult(
                found=True,
                category=category,
                canonical_key=entry.canonical_key,
                resolved_value=entry.resolved_value,
                confidence=min(score, 1.0),
                score=score,
                matched_keyword=matched or entry.keywords[0],
            )
    return best


__all__ = [
    "find_best_match",
    "group_confidence",
    "levenshtein",
    "score_keywords",
    "similarity",
]
