"""
framestep - frame-by-frame video viewer

Opens a video with OpenCV, shows it in a window with a frame counter, and
steps through it from the keyboard.

Usage:
    # Command line
    framestep clip.mp4

    # As a library
    from framestep import PlaybackController, PlaybackState, STEP_FORWARD
    controller = PlaybackController()
    t = controller.handle(STEP_FORWARD, PlaybackState(total_frames=10))
    t.state.current_index   # 1
    t.effect.kind           # EffectKind.ADVANCE_ONE
"""

from framestep.__version__ import __version__
from framestep.core.controllers import PlaybackController
from framestep.core.keymap import KEY_BINDINGS, command_for_key
from framestep.core.models import (
    JUMP_TO_END,
    JUMP_TO_START,
    QUIT,
    STEP_BACKWARD,
    STEP_FORWARD,
    TICK,
    TOGGLE_PLAY,
    Command,
    CommandKind,
    Effect,
    EffectKind,
    Notice,
    PlaybackState,
    Transition,
    VideoInfo,
)
from framestep.errors import (
    FramestepError,
    InitialReadFailure,
    InvalidIndex,
    NavigationFailure,
    OpenFailure,
)

__all__ = [
    "__version__",
    # Core
    "PlaybackController",
    "PlaybackState",
    "Transition",
    "VideoInfo",
    "Command",
    "CommandKind",
    "Effect",
    "EffectKind",
    "Notice",
    "KEY_BINDINGS",
    "command_for_key",
    # Command shortcuts
    "QUIT",
    "TOGGLE_PLAY",
    "STEP_FORWARD",
    "STEP_BACKWARD",
    "JUMP_TO_START",
    "JUMP_TO_END",
    "TICK",
    # Errors
    "FramestepError",
    "OpenFailure",
    "InitialReadFailure",
    "NavigationFailure",
    "InvalidIndex",
]
