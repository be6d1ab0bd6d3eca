"""
framestep Models - Pure data classes with no OpenCV dependencies.

Commands, effects and notices are the vocabulary shared by the key table,
the PlaybackController and the session loop.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import Optional

from ..constants import DEFAULT_FPS

# =============================================================================
# Navigation state
# =============================================================================


@dataclass(frozen=True)
class PlaybackState:
    """Logical navigation state of one viewing session."""
    total_frames: int = 0
    current_index: int = 0
    is_playing: bool = False

    @property
    def frame_number(self) -> int:
        """Current frame as a 1-based number (what the user sees)."""
        return self.current_index + 1

    @property
    def progress(self) -> float:
        """Playback progress (0-100), counting the shown frame as played."""
        if self.total_frames <= 0:
            return 0.0
        return (self.current_index + 1) / self.total_frames * 100

    @property
    def at_start(self) -> bool:
        return self.current_index <= 0

    @property
    def at_end(self) -> bool:
        return self.current_index >= self.total_frames - 1

    @property
    def last_index(self) -> int:
        return max(self.total_frames - 1, 0)

    def with_index(self, index: int) -> PlaybackState:
        return replace(self, current_index=index)

    def with_playing(self, playing: bool) -> PlaybackState:
        return replace(self, is_playing=playing)


# =============================================================================
# Commands
# =============================================================================


class CommandKind(Enum):
    """Logical command, independent of physical key bindings."""
    QUIT = auto()
    TOGGLE_PLAY = auto()
    STEP_FORWARD = auto()
    STEP_BACKWARD = auto()
    JUMP_TO_START = auto()
    JUMP_TO_END = auto()
    JUMP_TO_INDEX = auto()
    TICK = auto()


@dataclass(frozen=True)
class Command:
    kind: CommandKind
    index: Optional[int] = None  # JUMP_TO_INDEX target, 0-based

    @classmethod
    def jump_to(cls, index: Optional[int]) -> Command:
        return cls(CommandKind.JUMP_TO_INDEX, index)


QUIT = Command(CommandKind.QUIT)
TOGGLE_PLAY = Command(CommandKind.TOGGLE_PLAY)
STEP_FORWARD = Command(CommandKind.STEP_FORWARD)
STEP_BACKWARD = Command(CommandKind.STEP_BACKWARD)
JUMP_TO_START = Command(CommandKind.JUMP_TO_START)
JUMP_TO_END = Command(CommandKind.JUMP_TO_END)
TICK = Command(CommandKind.TICK)


# =============================================================================
# Effects and notices
# =============================================================================


class EffectKind(Enum):
    """Side effect the frame source must perform after a transition."""
    NONE = auto()
    ADVANCE_ONE = auto()   # sequential decode of the next frame
    SEEK_TO = auto()       # reposition decoder, then decode
    TERMINATE = auto()


@dataclass(frozen=True)
class Effect:
    kind: EffectKind = EffectKind.NONE
    index: Optional[int] = None  # SEEK_TO target

    @classmethod
    def seek_to(cls, index: int) -> Effect:
        return cls(EffectKind.SEEK_TO, index)

    @property
    def needs_frame(self) -> bool:
        """True if executing this effect decodes a new frame."""
        return self.kind in (EffectKind.ADVANCE_ONE, EffectKind.SEEK_TO)


NO_EFFECT = Effect()
ADVANCE_ONE = Effect(EffectKind.ADVANCE_ONE)
TERMINATE = Effect(EffectKind.TERMINATE)


class Notice(Enum):
    """Outcome reported to the caller alongside a transition."""
    END_REACHED = auto()
    START_REACHED = auto()
    INVALID_INDEX = auto()
    READ_FAILED = auto()
    PLAYBACK_STOPPED = auto()  # read failed during playback; stop silently
    PLAYING = auto()
    PAUSED = auto()
    JUMPED = auto()


@dataclass(frozen=True)
class Transition:
    """Result of applying one command: new state, effect to run, notice."""
    state: PlaybackState
    effect: Effect = NO_EFFECT
    notice: Optional[Notice] = None

    @property
    def terminates(self) -> bool:
        return self.effect.kind is EffectKind.TERMINATE


# =============================================================================
# Video metadata
# =============================================================================


@dataclass
class VideoInfo:
    """Properties reported by the decoder when a file is opened."""
    path: str
    total_frames: int
    fps: float = DEFAULT_FPS
    width: int = 0
    height: int = 0

    @property
    def effective_fps(self) -> float:
        """Reported fps, or DEFAULT_FPS when the container reports nonsense."""
        if not self.fps or not math.isfinite(self.fps) or self.fps <= 0:
            return DEFAULT_FPS
        return self.fps

    @property
    def frame_interval_ms(self) -> int:
        """Poll timeout between frames while playing (never 0: 0 blocks)."""
        return max(1, int(round(1000 / self.effective_fps)))

    @property
    def duration_sec(self) -> float:
        return self.total_frames / self.effective_fps

    @property
    def resolution_str(self) -> str:
        return f"{self.width}x{self.height}"
