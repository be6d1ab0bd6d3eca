"""Navigation core: models, key table and the playback state machine."""
from .controllers import PlaybackController
from .keymap import KEY_BINDINGS, command_for_key
from .models import (
    Command,
    CommandKind,
    Effect,
    EffectKind,
    Notice,
    PlaybackState,
    Transition,
    VideoInfo,
)

__all__ = [
    "Command",
    "CommandKind",
    "Effect",
    "EffectKind",
    "KEY_BINDINGS",
    "Notice",
    "PlaybackController",
    "PlaybackState",
    "Transition",
    "VideoInfo",
    "command_for_key",
]
