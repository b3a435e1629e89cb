import sys
from pathlib import Path

import numpy as np
import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from canvas_brain.constants import INDEX_TIP, MIDDLE_TIP, PINKY_TIP, RING_TIP, THUMB_TIP, WRIST  # noqa: E402
from canvas_brain.gestures import classify_hand_landmarks  # noqa: E402

FINGERTIPS = (INDEX_TIP, MIDDLE_TIP, RING_TIP, PINKY_TIP)


def _hand(thumb=0.8, tips=(0.9, 0.9, 0.9, 0.9)):
    # y grows downward; the wrist sits at 0.8 and every joint starts below it
    points = np.zeros((21, 3))
    points[:, 0] = np.linspace(0.3, 0.7, 21)
    points[:, 1] = 0.9
    points[WRIST, 1] = 0.8
    points[THUMB_TIP, 1] = thumb
    for index, y in zip(FINGERTIPS, tips):
        points[index, 1] = y
    return points


@pytest.mark.parametrize(
    "hand, expected",
    [
        (_hand(thumb=0.5), "THUMBS_UP"),
        (_hand(thumb=1.0), "THUMBS_DOWN"),
        (_hand(tips=(0.3, 0.3, 0.3, 0.3)), "OPEN_HAND"),
        (_hand(), "FIST"),
        (_hand(tips=(0.3, 0.3, 0.9, 0.9)), "PEACE"),
        (_hand(tips=(0.3, 0.9, 0.9, 0.9)), None),
    ],
)
def test_classify(hand, expected):
    assert classify_hand_landmarks(hand) == expected


def test_plain_lists_accepted():
    assert classify_hand_landmarks(_hand(thumb=0.5)[:, :2].tolist()) == "THUMBS_UP"


def test_missing_or_broken_frames():
    assert classify_hand_landmarks(None) is None
    assert classify_hand_landmarks([]) is None
    broken = _hand()
    broken[INDEX_TIP, 1] = np.nan
    assert classify_hand_landmarks(broken) is None


def test_wrong_shape_rejected():
    with pytest.raises(ValueError):
        classify_hand_landmarks(np.zeros((5, 2)))
