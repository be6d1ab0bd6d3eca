"""Error taxonomy for framestep.

OpenFailure and InitialReadFailure end the session before playback starts.
NavigationFailure and InvalidIndex are recoverable: the session reports them
and keeps the last good frame on screen.
"""
from __future__ import annotations


class FramestepError(Exception):
    """Base class for all framestep errors."""


class OpenFailure(FramestepError):
    """Video file missing, unreadable, unsupported, or reports no frames."""

    def __init__(self, path: str, reason: str = "cannot open video file") -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{reason}: {path}")


class InitialReadFailure(FramestepError):
    """Video opened but its first frame could not be decoded."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"cannot read first frame: {path}")


class NavigationFailure(FramestepError):
    """A sequential read or seek failed mid-session."""

    def __init__(self, index: int, operation: str = "read") -> None:
        self.index = index
        self.operation = operation
        super().__init__(f"{operation} failed at frame index {index}")


class InvalidIndex(FramestepError):
    """User-supplied frame number outside [1, total_frames]."""

    def __init__(self, value: object, total_frames: int) -> None:
        self.value = value
        self.total_frames = total_frames
        super().__init__(f"invalid frame number {value!r} (expected 1-{total_frames})")
