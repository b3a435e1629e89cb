"""Background dispatcher serializing commands from several input sources.

Typed text, voice transcripts and gesture streams can all submit commands
concurrently. A single worker interprets them in submission order, taking a
fresh snapshot of the store right before each one, so every command is
applied consistently against the state it saw.
"""

from __future__ import annotations

import logging
import queue
import threading
import time
from dataclasses import dataclass, replace
from typing import Any, Literal, Mapping

from .config import CanvasBrainConfig, load_config
from .intent import InterpretationResult
from .service import CommandInterpreter
from .state import CanvasState

LOGGER = logging.getLogger(__name__)

DispatcherStatus = Literal["idle", "listening", "interpreting", "ready", "error"]


@dataclass(frozen=True)
class DispatcherSnapshot:
    """Lightweight view of dispatcher state for realtime HUDs."""

    status: DispatcherStatus
    last_result: InterpretationResult | None
    last_source: str | None
    last_update_ts: float
    request_id: int
    in_flight: bool
    last_error: str | None
    debug: dict[str, object]


@dataclass
class _WorkItem:
    request_id: int
    submitted_ts: float
    text: str
    source_id: str


class CommandDispatcher:
    """Worker thread that interprets and applies queued commands."""

    def __init__(
        self,
        store: CanvasState,
        interpreter: CommandInterpreter | None = None,
        cfg: CanvasBrainConfig | None = None,
    ) -> None:
        self._cfg = cfg or (interpreter.config if interpreter is not None else load_config())
        self._interpreter = interpreter or CommandInterpreter(cfg=self._cfg)
        self._store = store
        self._queue: "queue.Queue[_WorkItem]" = queue.Queue(maxsize=max(self._cfg.queue_maxsize, 1))
        self._stop_event = threading.Event()
        self._worker: threading.Thread | None = None
        self._lock = threading.Lock()
        self._latest_request_id = 0
        self._last_by_source: dict[str, tuple[str, float]] = {}
        self._dropped = 0
        self._debounced = 0
        self._snapshot = DispatcherSnapshot(
            status="idle",
            last_result=None,
            last_source=None,
            last_update_ts=time.time(),
            request_id=0,
            in_flight=False,
            last_error=None,
            debug={},
        )

    # Public API ---------------------------------------------------------
    def start(self) -> None:
        if self._worker and self._worker.is_alive():
            return
        self._stop_event.clear()
        self._worker = threading.Thread(target=self._run, name="CommandDispatcher", daemon=True)
        self._worker.start()

    def stop(self, timeout_s: float = 2.0) -> None:
        self._stop_event.set()
        if self._worker:
            self._worker.join(timeout_s)

    def submit(self, text: str, *, source_id: str = "text") -> bool:
        """Queue a command. Returns ``False`` when it was debounced or dropped."""

        now = time.perf_counter()
        with self._lock:
            if self._is_repeat(text, source_id, now):
                self._debounced += 1
                self._publish(debug_updates={"debounced": self._debounced})
                return False
            self._latest_request_id += 1
            item = _WorkItem(self._latest_request_id, now, text, source_id)
            self._publish(status="listening", request_id=item.request_id)

        try:
            self._queue.put_nowait(item)
        except queue.Full:
            with self._lock:
                self._dropped += 1
                self._publish(debug_updates={"dropped": self._dropped})
            LOGGER.warning("Command queue full; dropped %r from %s", text, source_id)
            return False
        # Debounce tracks queued commands only.
        with self._lock:
            self._last_by_source[source_id] = (text, now)
        return True

    def poll_latest(self) -> DispatcherSnapshot:
        with self._lock:
            return self._snapshot

    def get_status(self) -> DispatcherSnapshot:
        return self.poll_latest()

    def wait_idle(self, timeout_s: float = 2.0) -> bool:
        """Block until every queued command has been applied."""

        deadline = time.monotonic() + timeout_s
        while time.monotonic() < deadline:
            if self._queue.unfinished_tasks == 0:
                return True
            time.sleep(0.01)
        return self._queue.unfinished_tasks == 0

    # Internal helpers ---------------------------------------------------
    def _is_repeat(self, text: str, source_id: str, now: float) -> bool:
        previous = self._last_by_source.get(source_id)
        if previous is None:
            return False
        previous_text, previous_ts = previous
        debounce_s = max(self._cfg.debounce_ms, 0) / 1000.0
        return previous_text == text and (now - previous_ts) < debounce_s

    def _publish(self, *, debug_updates: Mapping[str, object] | None = None, **changes: Any) -> None:
        """Swap in a new snapshot. Caller holds ``self._lock``."""

        debug = {**self._snapshot.debug, **(debug_updates or {})}
        self._snapshot = replace(self._snapshot, last_update_ts=time.time(), debug=debug, **changes)

    def _process(self, item: _WorkItem) -> None:
        with self._lock:
            self._publish(
                status="interpreting",
                in_flight=True,
                request_id=item.request_id,
                debug_updates={"queue_size": self._queue.qsize()},
            )
        try:
            result = self._interpreter.handle(item.text, self._store, source=item.source_id)
        except Exception as exc:
            # Mutators belong to the caller; keep the worker alive.
            LOGGER.exception("Applying %r from %s failed", item.text, item.source_id)
            with self._lock:
                self._publish(
                    status="error",
                    in_flight=False,
                    last_error=str(exc),
                    last_source=item.source_id,
                )
            return

        latency_ms = int((time.perf_counter() - item.submitted_ts) * 1000)
        with self._lock:
            self._publish(
                status="ready",
                last_result=result,
                last_source=item.source_id,
                in_flight=False,
                request_id=item.request_id,
                debug_updates={
                    "queue_size": self._queue.qsize(),
                    "last_latency_ms": latency_ms,
                },
            )

    def _run(self) -> None:
        while not self._stop_event.is_set():
            try:
                item = self._queue.get(timeout=0.1)
            except queue.Empty:
                continue
            try:
                self._process(item)
            finally:
                self._queue.task_done()

        with self._lock:
            self._publish(status="idle", in_flight=False)


__all__ = ["CommandDispatcher", "DispatcherSnapshot", "DispatcherStatus"]
