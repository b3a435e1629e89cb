"""JSONL event log for interpretations.

One line per interpreted command. When the file grows past ``max_bytes`` it
is shifted to ``<name>.1`` (older backups move up by one) before the next
line is written.
"""

from __future__ import annotations

import json
import threading
import time
from pathlib import Path

from .intent import InterpretationResult

BACKUP_COUNT = 3

_WRITE_LOCK = threading.Lock()


def ensure_log_dir(path: str | Path) -> Path:
    target = Path(path).expanduser()
    target.parent.mkdir(parents=True, exist_ok=True)
    return target


def _rotate(target: Path, backups: int) -> None:
    oldest = target.with_name(f"{target.name}.{backups}")
    if oldest.exists():
        oldest.unlink()
    for index in range(backups - 1, 0, -1):
        source = target.with_name(f"{target.name}.{index}")
        if source.exists():
            source.rename(target.with_name(f"{target.name}.{index + 1}"))
    target.rename(target.with_name(f"{target.name}.1"))


def append_event(
    path: str | Path,
    event: dict,
    *,
    max_bytes: int,
    backups: int = BACKUP_COUNT,
) -> None:
    line = json.dumps(event, ensure_ascii=False) + "\n"
    with _WRITE_LOCK:
        target = ensure_log_dir(path)
        if max_bytes > 0 and target.exists() and target.stat().st_size > max_bytes:
            _rotate(target, max(backups, 1))
        with target.open("a", encoding="utf-8") as fh:
            fh.write(line)


def build_log_event(
    *,
    source: str,
    raw_input: str,
    result: InterpretationResult,
    latency_ms: int | None,
    cache_hit: bool,
) -> dict:
    return {
        "ts": time.time(),
        "source": source,
        "input": raw_input,
        "normalized": result.normalized,
        "understood": result.understood,
        "confidence": round(result.confidence, 4),
        "actions": [f"{action.type}:{action.key}" for action in result.actions],
        "context": result.context.as_dict(),
        "latency_ms": latency_ms,
        "cache_hit": cache_hit,
    }


__all__ = ["BACKUP_COUNT", "append_event", "build_log_event", "ensure_log_dir"]
