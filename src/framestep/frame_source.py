"""
Video frame source for framestep.

Wraps cv2.VideoCapture. Owns the decoder handle and the most recently decoded
frame; knows nothing about playback state. Frames are BGR numpy arrays as
returned by OpenCV.
"""
from __future__ import annotations

import logging
import math
from typing import Optional

import cv2
import numpy as np

from .constants import DEFAULT_FPS
from .core.models import Effect, EffectKind, VideoInfo
from .errors import InitialReadFailure, NavigationFailure, OpenFailure

log = logging.getLogger(__name__)


class VideoSource:
    """Sequential and random-access frame decoding for one video file."""

    def __init__(self, default_fps: float = DEFAULT_FPS) -> None:
        self.default_fps = default_fps
        self.cap = None
        self.info: Optional[VideoInfo] = None
        self.current_image: Optional[np.ndarray] = None
        self._index = -1         # index of current_image
        self._resync = False     # decoder position unknown after a failed read

    # ── Open / close ─────────────────────────────────────────────────

    def open(self, path: str) -> VideoInfo:
        """Open a video file and decode its first frame.

        Raises:
            OpenFailure: missing file, unsupported container, or no frames.
            InitialReadFailure: the first frame cannot be decoded.
        """
        self.close()

        if not path:
            raise OpenFailure(path, "no video path given")

        # Image-sequence patterns and stream URLs are valid too; let OpenCV decide.
        cap = cv2.VideoCapture(path)
        if not cap.isOpened():
            cap.release()
            raise OpenFailure(path)

        total = int(cap.get(cv2.CAP_PROP_FRAME_COUNT))
        if total <= 0:
            cap.release()
            raise OpenFailure(path, "video reports no frames")

        ok, frame = cap.read()
        if not ok or frame is None:
            cap.release()
            raise InitialReadFailure(path)

        fps = cap.get(cv2.CAP_PROP_FPS)
        if not fps or not math.isfinite(fps) or fps <= 0:
            log.debug("Container reports fps=%r, using %.2f", fps, self.default_fps)
            fps = self.default_fps
        width = int(cap.get(cv2.CAP_PROP_FRAME_WIDTH)) or frame.shape[1]
        height = int(cap.get(cv2.CAP_PROP_FRAME_HEIGHT)) or frame.shape[0]

        self.cap = cap
        self.current_image = frame
        self._index = 0
        self._resync = False
        self.info = VideoInfo(path=path, total_frames=total, fps=fps,
                              width=width, height=height)
        log.info("Opened %s: %d frames @ %.2f FPS (%dx%d)",
                 path, total, fps, width, height)
        return self.info

    def close(self) -> None:
        if self.cap is not None:
            self.cap.release()
            log.debug("Released capture for %s", self.info.path if self.info else "?")
        self.cap = None
        self.info = None
        self.current_image = None
        self._index = -1
        self._resync = False

    def __enter__(self) -> VideoSource:
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    # ── Decoding ─────────────────────────────────────────────────────

    def read_next_frame(self) -> np.ndarray:
        """Decode the frame after the current one (sequential, no seek).

        Raises NavigationFailure at end of stream or on a decode error; the
        previous frame stays in current_image.
        """
        self._require_open()
        target = self._index + 1
        if self._resync:
            log.debug("Resyncing decoder to frame %d", target)
            self.cap.set(cv2.CAP_PROP_POS_FRAMES, target)
        return self._decode(target, "read")

    def seek_to_index(self, index: int) -> np.ndarray:
        """Reposition the decoder and decode the frame at index."""
        self._require_open()
        if not 0 <= index < self.info.total_frames:
            raise NavigationFailure(index, "seek")
        log.debug("Seek to frame %d", index)
        self.cap.set(cv2.CAP_PROP_POS_FRAMES, index)
        return self._decode(index, "seek")

    def apply(self, effect: Effect) -> Optional[np.ndarray]:
        """Execute a controller effect. Returns the new frame, if any."""
        if effect.kind is EffectKind.ADVANCE_ONE:
            return self.read_next_frame()
        if effect.kind is EffectKind.SEEK_TO:
            return self.seek_to_index(effect.index)
        return None

    def _decode(self, index: int, operation: str) -> np.ndarray:
        ok, frame = self.cap.read()
        if not ok or frame is None:
            self._resync = True
            log.info("Frame %d: %s failed", index, operation)
            raise NavigationFailure(index, operation)
        self.current_image = frame
        self._index = index
        self._resync = False
        return frame

    def _require_open(self) -> None:
        if self.cap is None or self.info is None:
            raise RuntimeError("No video loaded")

    # ── Properties ───────────────────────────────────────────────────

    @property
    def is_open(self) -> bool:
        return self.cap is not None

    @property
    def position(self) -> int:
        """Index of the frame held in current_image (-1 if none)."""
        return self._index
