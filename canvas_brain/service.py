"""Command interpretation service.

:class:`CommandInterpreter` runs the two-phase protocol: ``interpret`` turns
raw text or a gesture token into an ordered action list without touching any
state, and ``execute`` applies that list against one snapshot through the
caller's mutators. Neither phase raises on unrecognized input.
"""

from __future__ import annotations

import logging
import time
from functools import lru_cache
from typing import Iterable

from .cache import InterpretationCache
from .config import CanvasBrainConfig, load_config
from .constants import HELP_TEXT
from .executor import execute_actions
from .intent import InterpretationResult
from .lang.context import analyze_context
from .lang.lexicon import Lexicon, default_lexicon, load_lexicon
from .lang.normalizer import normalize_command
from .logging_utils import append_event, build_log_event
from .resolver import match_categories, resolve_actions
from .state import CanvasState
from .types import Action, ParameterMutators, ParameterState

LOGGER = logging.getLogger(__name__)


def _coerce_input(raw: object) -> str:
    if raw is None:
        return ""
    return raw if isinstance(raw, str) else str(raw)


class CommandInterpreter:
    """Interpret and apply canvas commands against an injected lexicon."""

    def __init__(
        self,
        lexicon: Lexicon | None = None,
        cfg: CanvasBrainConfig | None = None,
        cache: InterpretationCache | None = None,
    ) -> None:
        self._cfg = cfg or load_config()
        if lexicon is None:
            lexicon = (
                load_lexicon(self._cfg.lexicon_path)
                if self._cfg.lexicon_path
                else default_lexicon()
            )
        self.lexicon = lexicon
        if cache is None and self._cfg.cache_size > 0:
            cache = InterpretationCache(self._cfg.cache_size, self._cfg.cache_ttl_s)
        self._cache = cache

    @property
    def config(self) -> CanvasBrainConfig:
        return self._cfg

    def interpret(
        self,
        raw: str,
        current_state: ParameterState | None = None,
        *,
        source: str = "text",
    ) -> InterpretationResult:
        """Interpret one command.

        ``current_state`` is accepted so callers can pass the snapshot they
        will later execute against; resolution itself never reads it.
        """

        text = _coerce_input(raw)
        start = time.perf_counter()

        cached = self._cache.get(text) if self._cache is not None else None
        if cached is not None:
            result = cached
        else:
            phrase = normalize_command(text, self.lexicon)
            matches = match_categories(
                phrase,
                self.lexicon,
                min_confidence=self._cfg.min_confidence,
                fuzzy_threshold=self._cfg.fuzzy_threshold,
            )
            result = resolve_actions(phrase, matches, analyze_context(phrase))
            if self._cache is not None:
                self._cache.set(text, result)

        latency_ms = int((time.perf_counter() - start) * 1000)
        LOGGER.debug(
            "source=%s input=%r normalized=%r understood=%s confidence=%.2f actions=%s",
            source,
            text,
            result.normalized,
            result.understood,
            result.confidence,
            [action.type for action in result.actions],
        )
        if self._cfg.log_path:
            event = build_log_event(
                source=source,
                raw_input=text,
                result=result,
                latency_ms=latency_ms,
                cache_hit=cached is not None,
            )
            try:
                append_event(self._cfg.log_path, event, max_bytes=self._cfg.log_max_bytes)
            except OSError:
                LOGGER.warning("Could not write event log %s", self._cfg.log_path, exc_info=True)
        return result

    def execute(
        self,
        actions: Iterable[Action],
        current_state: ParameterState,
        mutators: ParameterMutators,
    ) -> None:
        execute_actions(actions, current_state, mutators)

    def handle(self, raw: str, store: CanvasState, *, source: str = "text") -> InterpretationResult:
        """Interpret ``raw`` and apply it to ``store`` from a single snapshot."""

        snapshot = store.snapshot()
        result = self.interpret(raw, snapshot, source=source)
        if result.understood:
            self.execute(result.actions, snapshot, store.mutators())
        return result


@lru_cache(maxsize=1)
def _default_interpreter() -> CommandInterpreter:
    return CommandInterpreter()


def interpret(raw: str, current_state: ParameterState | None = None) -> InterpretationResult:
    return _default_interpreter().interpret(raw, current_state)


def execute(
    actions: Iterable[Action],
    current_state: ParameterState,
    mutators: ParameterMutators,
) -> None:
    execute_actions(actions, current_state, mutators)


def help_text() -> str:
    return HELP_TEXT


__all__ = ["CommandInterpreter", "execute", "help_text", "interpret"]
