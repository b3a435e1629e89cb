import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

from canvas_brain.config import load_config  # noqa: E402
from canvas_brain.constants import (  # noqa: E402
    DEFAULT_CACHE_SIZE,
    DEFAULT_FUZZY_THRESHOLD,
    DEFAULT_MIN_CONFIDENCE,
)


def test_defaults_from_empty_env():
    cfg = load_config({})
    assert cfg.debug is False
    assert cfg.lexicon_path is None
    assert cfg.log_path is None
    assert cfg.min_confidence == DEFAULT_MIN_CONFIDENCE
    assert cfg.fuzzy_threshold == DEFAULT_FUZZY_THRESHOLD
    assert cfg.cache_size == DEFAULT_CACHE_SIZE


def test_env_overrides():
    cfg = load_config(
        {
            "CANVAS_DEBUG": "yes",
            "CANVAS_MIN_CONFIDENCE": "0.45",
            "CANVAS_FUZZY_THRESHOLD": "0.8",
            "CANVAS_CACHE_SIZE": "16",
            "CANVAS_CACHE_TTL_S": "5",
            "CANVAS_LOG_PATH": "/tmp/canvas/events.jsonl",
            "CANVAS_DEBOUNCE_MS": "100",
            "CANVAS_QUEUE_MAXSIZE": "4",
        }
    )
    assert cfg.debug is True
    assert cfg.min_confidence == 0.45
    assert cfg.fuzzy_threshold == 0.8
    assert cfg.cache_size == 16
    assert cfg.cache_ttl_s == 5.0
    assert cfg.log_path == "/tmp/canvas/events.jsonl"
    assert cfg.debounce_ms == 100
    assert cfg.queue_maxsize == 4


def test_bad_values_fall_back_to_defaults():
    cfg = load_config({"CANVAS_MIN_CONFIDENCE": "high", "CANVAS_CACHE_SIZE": "lots"})
    assert cfg.min_confidence == DEFAULT_MIN_CONFIDENCE
    assert cfg.cache_size == DEFAULT_CACHE_SIZE


def test_negative_cache_size_disables_cache():
    assert load_config({"CANVAS_CACHE_SIZE": "-5"}).cache_size == 0


def test_blank_paths_are_none():
    cfg = load_config({"CANVAS_LEXICON_PATH": "  ", "CANVAS_LOG_PATH": ""})
    assert cfg.lexicon_path is None
    assert cfg.log_path is None
