"""
framestep Controllers - Navigation logic, independent of decoding and display.

The PlaybackController never touches the decoder. It turns a command and the
current PlaybackState into a Transition: the next state plus the effect the
frame source has to run (sequential advance, seek, or nothing).

Forward steps are sequential decodes (ADVANCE_ONE). Backward and absolute
moves are always explicit seeks, since compressed streams cannot be decoded
in reverse.
"""
from __future__ import annotations

import logging

from .models import (
    ADVANCE_ONE,
    NO_EFFECT,
    TERMINATE,
    Command,
    CommandKind,
    Effect,
    Notice,
    PlaybackState,
    Transition,
)

log = logging.getLogger(__name__)


class PlaybackController:
    """Pure state machine: (command, state) -> Transition."""

    def handle(self, command: Command, state: PlaybackState) -> Transition:
        kind = command.kind

        if kind is CommandKind.QUIT:
            return Transition(state, TERMINATE)

        if kind is CommandKind.TOGGLE_PLAY:
            playing = not state.is_playing
            return Transition(state.with_playing(playing), NO_EFFECT,
                              Notice.PLAYING if playing else Notice.PAUSED)

        if state.total_frames <= 0:
            log.debug("Ignoring %s: no frames loaded", kind.name)
            return Transition(state)

        if kind is CommandKind.TICK:
            if not state.is_playing:
                return Transition(state)
            return self._step_forward(state)

        if kind is CommandKind.STEP_FORWARD:
            return self._step_forward(state)

        if kind is CommandKind.STEP_BACKWARD:
            if state.at_start:
                return Transition(state, NO_EFFECT, Notice.START_REACHED)
            index = state.current_index - 1
            return Transition(state.with_index(index), Effect.seek_to(index))

        if kind is CommandKind.JUMP_TO_START:
            return Transition(state.with_index(0), Effect.seek_to(0))

        if kind is CommandKind.JUMP_TO_END:
            last = state.last_index
            return Transition(state.with_index(last), Effect.seek_to(last))

        if kind is CommandKind.JUMP_TO_INDEX:
            return self._jump(command.index, state)

        raise ValueError(f"Unknown command: {command!r}")

    def read_failed(self, state: PlaybackState) -> Transition:
        """Map a failed ADVANCE_ONE/SEEK_TO back onto the pre-command state.

        During playback auto-advance stops quietly; otherwise the state is
        kept and the failure surfaces to the caller.
        """
        if state.is_playing:
            return Transition(state.with_playing(False), NO_EFFECT,
                              Notice.PLAYBACK_STOPPED)
        return Transition(state, NO_EFFECT, Notice.READ_FAILED)

    # ── Helpers ──────────────────────────────────────────────────────

    @staticmethod
    def _step_forward(state: PlaybackState) -> Transition:
        if state.at_end:
            return Transition(state.with_playing(False), NO_EFFECT,
                              Notice.END_REACHED)
        return Transition(state.with_index(state.current_index + 1), ADVANCE_ONE)

    @staticmethod
    def _jump(index, state: PlaybackState) -> Transition:
        if not isinstance(index, int) or isinstance(index, bool) \
                or not 0 <= index < state.total_frames:
            return Transition(state, NO_EFFECT, Notice.INVALID_INDEX)
        return Transition(state.with_index(index), Effect.seek_to(index),
                          Notice.JUMPED)
