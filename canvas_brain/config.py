"""Configuration loader for the canvas command brain."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Callable, Mapping, TypeVar

from .constants import (
    DEFAULT_CACHE_SIZE,
    DEFAULT_CACHE_TTL_S,
    DEFAULT_DEBOUNCE_MS,
    DEFAULT_DEBUG,
    DEFAULT_FUZZY_THRESHOLD,
    DEFAULT_LOG_MAX_BYTES,
    DEFAULT_MIN_CONFIDENCE,
    DEFAULT_QUEUE_MAXSIZE,
)

NumberT = TypeVar("NumberT", int, float)


@dataclass(frozen=True)
class CanvasBrainConfig:
    debug: bool
    lexicon_path: str | None
    min_confidence: float
    fuzzy_threshold: float
    cache_size: int
    cache_ttl_s: float
    log_path: str | None
    log_max_bytes: int
    debounce_ms: int
    queue_maxsize: int


def _parse_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _parse_number(value: str | None, default: NumberT, cast: Callable[[str], NumberT]) -> NumberT:
    if value is None or not value.strip():
        return default
    try:
        return cast(value.strip())
    except ValueError:
        return default


def _parse_path(value: str | None) -> str | None:
    if value is None:
        return None
    cleaned = value.strip()
    return cleaned or None


def load_config(env: Mapping[str, str] | None = None) -> CanvasBrainConfig:
    """Build a :class:`CanvasBrainConfig` from ``CANVAS_*`` variables.

    ``env`` replaces ``os.environ`` when given. Unparseable numbers fall back
    to their defaults and a negative cache size disables the cache.
    """

    environment = env if env is not None else os.environ
    get = environment.get

    return CanvasBrainConfig(
        debug=_parse_bool(get("CANVAS_DEBUG"), DEFAULT_DEBUG),
        lexicon_path=_parse_path(get("CANVAS_LEXICON_PATH")),
        min_confidence=_parse_number(get("CANVAS_MIN_CONFIDENCE"), DEFAULT_MIN_CONFIDENCE, float),
        fuzzy_threshold=_parse_number(get("CANVAS_FUZZY_THRESHOLD"), DEFAULT_FUZZY_THRESHOLD, float),
        cache_size=max(_parse_number(get("CANVAS_CACHE_SIZE"), DEFAULT_CACHE_SIZE, int), 0),
        cache_ttl_s=_parse_number(get("CANVAS_CACHE_TTL_S"), DEFAULT_CACHE_TTL_S, float),
        log_path=_parse_path(get("CANVAS_LOG_PATH")),
        log_max_bytes=_parse_number(get("CANVAS_LOG_MAX_BYTES"), DEFAULT_LOG_MAX_BYTES, int),
        debounce_ms=_parse_number(get("CANVAS_DEBOUNCE_MS"), DEFAULT_DEBOUNCE_MS, int),
        queue_maxsize=_parse_number(get("CANVAS_QUEUE_MAXSIZE"), DEFAULT_QUEUE_MAXSIZE, int),
    )
