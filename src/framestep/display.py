"""
HighGUI display for framestep.

Shows frames in an OpenCV window with a frame-position caption and polls
the keyboard. Closing the window with the mouse is reported as Escape.
"""
from __future__ import annotations

import logging
from typing import Optional

import cv2
import numpy as np

from .conf import Settings
from .constants import KEY_ESCAPE
from .overlay import draw_caption

log = logging.getLogger(__name__)


class FrameDisplay:
    """One OpenCV window, created lazily on first render."""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or Settings()
        self.window_name = self.settings.window_name
        self._created = False

    def render_image(self, image: np.ndarray, caption: str = "") -> None:
        """Show image, with caption drawn on a copy when overlays are enabled."""
        if image is None:
            return
        if not self._created:
            cv2.namedWindow(self.window_name, cv2.WINDOW_AUTOSIZE)
            self._created = True
            log.debug("Created window '%s'", self.window_name)
        if caption and self.settings.show_overlay:
            s = self.settings
            image = draw_caption(image, caption, s.overlay_color, s.overlay_scale,
                                 s.overlay_thickness, s.overlay_origin)
        cv2.imshow(self.window_name, image)

    def poll_key(self, timeout_ms: int = 0) -> Optional[int]:
        """Wait up to timeout_ms for a key (0 = forever). None on timeout."""
        key = cv2.waitKeyEx(max(0, int(timeout_ms)))
        if self._created and self._window_closed():
            log.debug("Window closed by user")
            return KEY_ESCAPE
        if key == -1:
            return None
        return key

    def _window_closed(self) -> bool:
        try:
            return cv2.getWindowProperty(self.window_name, cv2.WND_PROP_VISIBLE) < 1
        except cv2.error:
            return True

    def release(self) -> None:
        if self._created:
            cv2.destroyWindow(self.window_name)
            cv2.waitKey(1)  # let HighGUI process the destroy event
            self._created = False

    def __enter__(self) -> FrameDisplay:
        return self

    def __exit__(self, *exc) -> None:
        self.release()
