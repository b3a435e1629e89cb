"""Lexical layer: pattern tables, normalization, fuzzy matching and context."""

from .context import analyze_context
from .lexicon import (
    LEXICON_JSON_PATH,
    Lexicon,
    LexiconError,
    PatternEntry,
    default_lexicon,
    load_lexicon,
    parse_lexicon,
    split_keywords,
)
from .matcher import find_best_match, group_confidence, levenshtein, score_keywords, similarity
from .normalizer import normalize_command, normalize_phrase, resolve_gesture

__all__ = [
    "LEXICON_JSON_PATH",
    "Lexicon",
    "LexiconError",
    "PatternEntry",
    "analyze_context",
    "default_lexicon",
    "find_best_match",
    "group_confidence",
    "levenshtein",
    "load_lexicon",
    "normalize_command",
    "normalize_phrase",
    "parse_lexicon",
    "resolve_gesture",
    "score_keywords",
    "similarity",
    "split_keywords",
]
