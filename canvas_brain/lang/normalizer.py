"""Rewrite raw commands into canonical lowercase phrases."""

from __future__ import annotations

import logging
import re
from functools import lru_cache

from ..constants import MAX_NORMALIZE_PASSES
from .lexicon import Lexicon

LOGGER = logging.getLogger(__name__)

_SPACE_PATTERN = re.compile(r"\s+")

# Applied in order after the lexicon's word substitutions.
PHRASE_RULES: tuple[tuple[str, str], ...] = (
    (r"\bwanna\b", "want to"),
    (r"\bgonna\b", "going to"),
    (r"\bkinda\b", "kind of"),
    (r"\bsorta\b", "sort of"),
    (r"\blil\b|\blittle\b", "small"),
    (r"\bbig\b|\bhuge\b|\bmassive\b", "large"),
    (r"\bturn it\b", "make it"),
    (r"\bset it\b", "make it"),
    (r"\bput it\b", "make it"),
    (r"\bget\b", "make"),
    (r"\bshow me\b", "create"),
    (r"\bi want\b", "make"),
    (r"\bi need\b", "make"),
)
_COMPILED_RULES = tuple((re.compile(pattern), repl) for pattern, repl in PHRASE_RULES)

FILLER_WORDS = ("like", "uh", "um", "er")
_FILLER_PATTERN = re.compile(r"\b(?:" + "|".join(FILLER_WORDS) + r")\b")


@lru_cache(maxsize=512)
def _word_pattern(word: str) -> re.Pattern[str]:
    return re.compile(rf"\b{re.escape(word)}\b")


def resolve_gesture(raw: str, lexicon: Lexicon) -> str:
    """Swap a known gesture token for its phrase. One level only."""

    phrase = lexicon.gesture_phrase(raw)
    return phrase if phrase is not None else raw


def _normalize_once(text: str, substitutions: tuple[tuple[str, str], ...]) -> str:
    text = text.lower().strip()
    for word, replacement in substitutions:
        text = _word_pattern(word).sub(lambda _match, value=replacement: value, text)
    for pattern, replacement in _COMPILED_RULES:
        text = pattern.sub(replacement, text)
    text = _FILLER_PATTERN.sub("", text)
    return _SPACE_PATTERN.sub(" ", text).strip()


def normalize_phrase(text: str, lexicon: Lexicon) -> str:
    """Normalize an already gesture-resolved phrase.

    The rewrite passes repeat until the phrase is stable, so that removing a
    filler between the words of a multi-word rule ("i um want") converges to
    the same phrase on every call.
    """

    current = text or ""
    for _ in range(MAX_NORMALIZE_PASSES):
        rewritten = _normalize_once(current, lexicon.substitutions)
        if rewritten == current:
            return rewritten
        current = rewritten
    LOGGER.debug("Normalization did not settle after %d passes: %r", MAX_NORMALIZE_PASSES, current)
    return current


def normalize_command(raw: str, lexicon: Lexicon) -> str:
    """Gesture lookup followed by phrase normalization. Never raises."""

    if not raw:
        return ""
    return normalize_phrase(resolve_gesture(raw, lexicon), lexicon)


__all__ = [
    "FILLER_WORDS",
    "PHRASE_RULES",
    "normalize_command",
    "normalize_phrase",
    "resolve_gesture",
]
