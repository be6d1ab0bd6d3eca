"""
Frame-position overlay for framestep.

Formats the "current/total" caption and draws it onto a copy of the
decoded frame, leaving the source image untouched.
"""
from __future__ import annotations

from typing import Tuple

import cv2
import numpy as np

from .constants import OVERLAY_COLOR, OVERLAY_ORIGIN, OVERLAY_SCALE, OVERLAY_THICKNESS
from .core.models import PlaybackState


def format_caption(state: PlaybackState) -> str:
    """Caption drawn on the frame, e.g. 'Frame: 12/300'."""
    return f"Frame: {state.frame_number}/{state.total_frames}"


def format_progress(state: PlaybackState) -> str:
    """Console status line, e.g. 'Frame: 12/300 (4.0%)'."""
    return f"{format_caption(state)} ({state.progress:.1f}%)"


def draw_caption(
    image: np.ndarray,
    text: str,
    color: Tuple[int, int, int] = OVERLAY_COLOR,
    scale: float = OVERLAY_SCALE,
    thickness: int = OVERLAY_THICKNESS,
    origin: Tuple[int, int] = OVERLAY_ORIGIN,
) -> np.ndarray:
    """Return a copy of image with text drawn at origin (Hershey simplex)."""
    canvas = image.copy()
    cv2.putText(canvas, text, tuple(origin), cv2.FONT_HERSHEY_SIMPLEX,
                scale, tuple(color), thickness, cv2.LINE_AA)
    return canvas
