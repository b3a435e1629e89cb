"""Smoke-check the canvas pipeline: imports, interpretation and event logging."""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parent.parent
SMOKE_TESTS = ("tests/test_smoke.py", "tests/test_service.py")


def main(argv: list[str] | None = None) -> int:
    extra = list(argv if argv is not None else sys.argv[1:])
    cmd = [sys.executable, "-m", "pytest", "-q", *SMOKE_TESTS, *extra]
    return subprocess.call(cmd, cwd=REPO_ROOT)


if __name__ == "__main__":
    raise SystemExit(main())
