"""framestep services — the driving loop on top of the pure core.

The session depends on a frame source and a display by interface only, so it
runs unchanged against OpenCV or against test doubles.
"""

from .playback import PlaybackSession, parse_frame_number

__all__ = [
    'PlaybackSession',
    'parse_frame_number',
]
