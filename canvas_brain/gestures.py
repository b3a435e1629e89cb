"""Geometric hand-pose classifier producing gesture tokens.

Input is one hand in the 21-point MediaPipe layout, in normalized image
coordinates where ``y`` grows downward. Only fingertip heights relative to
the wrist are used, so the classifier is cheap enough to run every frame.
"""

from __future__ import annotations

import logging
from typing import Sequence, Union

import numpy as np

from .constants import (
    HAND_POINTS,
    INDEX_TIP,
    MIDDLE_TIP,
    PINKY_TIP,
    RING_TIP,
    THUMB_EXTENSION_MARGIN,
    THUMB_TIP,
    WRIST,
)

LOGGER = logging.getLogger(__name__)

GESTURE_TOKENS = ("THUMBS_UP", "THUMBS_DOWN", "OPEN_HAND", "FIST", "PEACE")

LandmarkInput = Union[np.ndarray, Sequence[Sequence[float]]]


def _as_landmark_array(landmarks: LandmarkInput) -> np.ndarray | None:
    array = np.asarray(landmarks, dtype=float)
    if array.size == 0:
        return None
    if array.ndim != 2 or array.shape[0] != HAND_POINTS or array.shape[1] < 2:
        raise ValueError(
            f"Expected {HAND_POINTS} landmarks with at least x and y, got shape {array.shape}"
        )
    if not np.isfinite(array[:, :2]).all():
        LOGGER.debug("Non-finite hand landmarks; skipping frame")
        return None
    return array


def classify_hand_landmarks(landmarks: LandmarkInput | None) -> str | None:
    """Return a gesture token for one hand, or ``None`` when nothing matches.

    Rules are checked in order: thumbs up, thumbs down, open hand, fist,
    peace sign.
    """

    if landmarks is None:
        return None
    array = _as_landmark_array(landmarks)
    if array is None:
        return None

    heights = array[:, 1]
    wrist_y = heights[WRIST]
    thumb_y = heights[THUMB_TIP]
    index_y, middle_y, ring_y, pinky_y = heights[[INDEX_TIP, MIDDLE_TIP, RING_TIP, PINKY_TIP]]

    if thumb_y < wrist_y - THUMB_EXTENSION_MARGIN and index_y > wrist_y:
        return "THUMBS_UP"
    if thumb_y > wrist_y + THUMB_EXTENSION_MARGIN and index_y > wrist_y:
        return "THUMBS_DOWN"

    fingers_up = heights[[INDEX_TIP, MIDDLE_TIP, RING_TIP, PINKY_TIP]] < wrist_y
    if fingers_up.all():
        return "OPEN_HAND"
    if not fingers_up.any():
        return "FIST"
    if index_y < wrist_y and middle_y < wrist_y and ring_y > wrist_y and pinky_y > wrist_y:
        return "PEACE"
    return None


__all__ = ["GESTURE_TOKENS", "classify_hand_landmarks"]
