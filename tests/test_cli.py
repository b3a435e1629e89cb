import json
import sys
from pathlib import Path

import numpy as np
import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from canvas_brain import cli  # noqa: E402
from canvas_brain.constants import THUMB_TIP, WRIST  # noqa: E402


@pytest.fixture(autouse=True)
def _quiet_env(monkeypatch):
    for name in ("CANVAS_DEBUG", "CANVAS_LOG_PATH", "CANVAS_LEXICON_PATH"):
        monkeypatch.delenv(name, raising=False)


def test_text_command(capsys):
    cli.main(["--text", "make it red"])
    out = capsys.readouterr().out
    assert "Adding red colors!" in out
    assert "understood=True" in out


def test_apply_prints_state(capsys):
    state = json.dumps({"intensity": 2.8, "speed": 1, "particleCount": 2000})
    cli.main(["--text", "brighter", "--state-json", state, "--apply"])
    out = capsys.readouterr().out
    line = next(line for line in out.splitlines() if line.startswith("state="))
    assert json.loads(line[len("state="):])["intensity"] == 3.0


def test_gesture_with_debug(capsys):
    cli.main(["--gesture", "PEACE", "--show-debug"])
    out = capsys.readouterr().out
    assert "Switching to cosmic style!" in out
    assert '"matches"' in out


def test_landmarks_file(tmp_path, capsys):
    points = np.full((21, 2), 0.9)
    points[WRIST, 1] = 0.8
    points[THUMB_TIP, 1] = 0.5
    path = tmp_path / "hand.json"
    path.write_text(json.dumps(points.tolist()), encoding="utf-8")
    cli.main(["--landmarks-json", str(path), "--apply"])
    out = capsys.readouterr().out
    assert "gesture=THUMBS_UP" in out


def test_listings(capsys):
    cli.main(["--commands"])
    assert "CANVAS COMMANDS" in capsys.readouterr().out
    cli.main(["--list-gestures"])
    assert "OPEN_HAND:" in capsys.readouterr().out


def test_bad_state_json_exits():
    with pytest.raises(SystemExit):
        cli.main(["--text", "red", "--state-json", "{oops"])


def test_missing_input_exits():
    with pytest.raises(SystemExit):
        cli.main([])
