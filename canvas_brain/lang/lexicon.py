"""Runtime pattern lexicon for canvas commands.

The lexicon is parsed once from JSON into frozen objects and handed to the
interpreter; nothing in the pipeline reads module-level tables. Each category
is an ordered list of keyword groups, and several groups may resolve to the
same canonical key. The packaged groups hold four to six keywords so that a
single whole-word hit clears the default confidence threshold while a lone
substring or fuzzy hit does not.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

from ..constants import CATEGORY_ORDER, STYLES
from ..types import Category, MoodPreset, ResolvedValue

LEXICON_JSON_PATH = Path(__file__).with_name("lexicon_canvas.json")

VERBS_BY_CATEGORY: dict[str, frozenset[str]] = {
    "intensity": frozenset({"increase", "decrease", "max", "min"}),
    "particles": frozenset({"increase", "decrease", "burst", "swarm"}),
    "speed": frozenset({"increase", "decrease", "stop", "chaos"}),
}


class LexiconError(ValueError):
    """Raised when a lexicon payload is malformed."""


@dataclass(frozen=True)
class PatternEntry:
    keywords: tuple[str, ...]
    canonical_key: str
    category: Category
    resolved_value: ResolvedValue


@dataclass(frozen=True)
class Lexicon:
    """Immutable pattern tables.

    ``substitutions`` keeps declaration order since later entries may act on
    the output of earlier ones.
    """

    categories: Mapping[str, tuple[PatternEntry, ...]]
    substitutions: tuple[tuple[str, str], ...]
    gestures: Mapping[str, str]

    def entries(self, category: str) -> tuple[PatternEntry, ...]:
        return self.categories.get(category, ())

    def gesture_phrase(self, token: str) -> str | None:
        return self.gestures.get(token)


def split_keywords(raw: str) -> tuple[str, ...]:
    """Split a pipe-delimited synonym set into cleaned lowercase keywords."""

    return tuple(part.strip().lower() for part in raw.split("|") if part.strip())


def _parse_mood(value: Any, where: str) -> MoodPreset:
    if not isinstance(value, Mapping):
        raise LexiconError(f"{where}: mood value must be an object")
    try:
        colors = value["colors"]
        if len(colors) < 2:
            raise LexiconError(f"{where}: mood needs two colors")
        return MoodPreset(
            intensity=float(value["intensity"]),
            speed=float(value["speed"]),
            particle_count=int(value["particle_count"]),
            colors=(str(colors[0]), str(colors[1])),
        )
    except LexiconError:
        raise
    except KeyError as exc:
        raise LexiconError(f"{where}: mood value missing {exc.args[0]!r}") from exc
    except (TypeError, ValueError) as exc:
        raise LexiconError(f"{where}: bad mood value ({exc})") from exc


def _parse_value(category: str, value: Any, where: str) -> ResolvedValue:
    if category == "mood":
        return _parse_mood(value, where)
    if not isinstance(value, str) or not value:
        raise LexiconError(f"{where}: value must be a non-empty string")
    if category == "style" and value not in STYLES:
        raise LexiconError(f"{where}: unknown style {value!r}")
    allowed = VERBS_BY_CATEGORY.get(category)
    if allowed is not None and value not in allowed:
        raise LexiconError(f"{where}: unknown verb {value!r} for {category}")
    return value


def _parse_entry(category: str, index: int, raw: Any) -> PatternEntry:
    where = f"{category}[{index}]"
    if not isinstance(raw, Mapping):
        raise LexiconError(f"{where}: entry must be an object")
    keywords = split_keywords(str(raw.get("keywords", "")))
    if not keywords:
        raise LexiconError(f"{where}: no keywords")
    key = str(raw.get("key") or keywords[0])
    if "value" not in raw:
        raise LexiconError(f"{where}: missing value")
    return PatternEntry(
        keywords=keywords,
        canonical_key=key,
        category=category,  # type: ignore[arg-type]
        resolved_value=_parse_value(category, raw["value"], where),
    )


def parse_lexicon(payload: Mapping[str, Any]) -> Lexicon:
    """Build a :class:`Lexicon` from a decoded JSON payload.

    Missing categories are treated as empty; unknown ones are rejected.
    """

    raw_categories = payload.get("categories", {})
    if not isinstance(raw_categories, Mapping):
        raise LexiconError("categories must be an object")
    unknown = set(raw_categories) - set(CATEGORY_ORDER)
    if unknown:
        raise LexiconError(f"unknown categories: {sorted(unknown)}")

    categories: dict[str, tuple[PatternEntry, ...]] = {}
    for category in CATEGORY_ORDER:
        raw_entries = raw_categories.get(category, [])
        categories[category] = tuple(
            _parse_entry(category, index, raw) for index, raw in enumerate(raw_entries)
        )

    substitutions: list[tuple[str, str]] = []
    for index, pair in enumerate(payload.get("substitutions", [])):
        if not isinstance(pair, (list, tuple)) or len(pair) != 2:
            raise LexiconError(f"substitutions[{index}]: expected [word, replacement]")
        word, replacement = (str(part).strip().lower() for part in pair)
        if not word:
            raise LexiconError(f"substitutions[{index}]: empty word")
        substitutions.append((word, replacement))

    gestures = payload.get("gestures", {})
    if not isinstance(gestures, Mapping):
        raise LexiconError("gestures must be an object")

    return Lexicon(
        categories=MappingProxyType(categories),
        substitutions=tuple(substitutions),
        gestures=MappingProxyType({str(k): str(v) for k, v in gestures.items()}),
    )


def load_lexicon(path: str | Path | None = None) -> Lexicon:
    """Load a lexicon file; defaults to the packaged tables."""

    target = Path(path).expanduser() if path is not None else LEXICON_JSON_PATH
    if not target.exists():
        raise FileNotFoundError(f"Lexicon file missing: {target}")
    with target.open(encoding="utf-8") as handle:
        try:
            payload = json.load(handle)
        except json.JSONDecodeError as exc:
            raise LexiconError(f"{target}: invalid JSON ({exc})") from exc
    if not isinstance(payload, Mapping):
        raise LexiconError(f"{target}: top level must be an object")
    return parse_lexicon(payload)


@lru_cache(maxsize=1)
def default_lexicon() -> Lexicon:
    return load_lexicon()


__all__ = [
    "LEXICON_JSON_PATH",
    "Lexicon",
    "LexiconError",
    "PatternEntry",
    "VERBS_BY_CATEGORY",
    "default_lexicon",
    "load_lexicon",
    "parse_lexicon",
    "split_keywords",
]
