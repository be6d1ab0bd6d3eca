"""Interactive playback session.

Single-threaded driving loop: draw the current frame, poll one key, turn it
into a command, let the PlaybackController decide, then run the requested
effect against the frame source. Read failures are fed back to the
controller; nothing here decides navigation on its own.
"""
from __future__ import annotations

import logging
import sys
from typing import Callable, Optional, TextIO

from ..conf import Settings
from ..constants import CONTROLS_HELP
from ..core.controllers import PlaybackController
from ..core.keymap import command_for_key
from ..core.models import (
    Command,
    CommandKind,
    Notice,
    PlaybackState,
    Transition,
    VideoInfo,
)
from ..errors import InvalidIndex, NavigationFailure
from ..overlay import format_caption, format_progress

log = logging.getLogger(__name__)


def parse_frame_number(text: str, total_frames: int) -> int:
    """Parse a 1-based frame number typed by the user into a 0-based index.

    Only the syntax is checked here; range checks belong to the controller.
    Raises InvalidIndex for anything that is not an integer.
    """
    try:
        return int(text.strip()) - 1
    except (AttributeError, ValueError):
        raise InvalidIndex(text, total_frames) from None


class PlaybackSession:
    """Owns the PlaybackState and runs the key loop for one video."""

    def __init__(
        self,
        source,
        display,
        controller: Optional[PlaybackController] = None,
        settings: Optional[Settings] = None,
        prompt: Callable[[str], str] = input,
        out: Optional[TextIO] = None,
        fps: Optional[float] = None,
    ) -> None:
        self.source = source
        self.display = display
        self.controller = controller or PlaybackController()
        self.settings = settings or Settings()
        self.prompt = prompt
        self.out = out or sys.stdout
        self.fps_override = fps
        self.info: Optional[VideoInfo] = None
        self.state = PlaybackState()

    # ── Load ─────────────────────────────────────────────────────────

    def load(self, path: str) -> PlaybackState:
        """Open the video and reset to its first frame.

        OpenFailure / InitialReadFailure propagate to the caller.
        """
        self.info = self.source.open(path)
        self.state = PlaybackState(total_frames=self.info.total_frames)
        self._print("Video loaded successfully:")
        self._print(f"  Total frames: {self.info.total_frames}")
        self._print(f"  FPS: {self.info.effective_fps:g}")
        self._print(f"  Resolution: {self.info.resolution_str}")
        return self.state

    @property
    def frame_interval_ms(self) -> int:
        """Poll timeout while playing."""
        if self.fps_override:
            return max(1, int(round(1000 / self.fps_override)))
        if self.info is not None:
            return self.info.frame_interval_ms
        return max(1, int(round(1000 / self.settings.default_fps)))

    # ── Commands ─────────────────────────────────────────────────────

    def read_command(self, key: Optional[int]) -> Optional[Command]:
        """Translate a polled key into a command (None = nothing to do)."""
        kind = command_for_key(key, self.state.is_playing)
        if kind is None:
            return None
        if kind is CommandKind.JUMP_TO_INDEX:
            return Command.jump_to(self._ask_frame_index())
        return Command(kind)

    def _ask_frame_index(self) -> Optional[int]:
        try:
            answer = self.prompt(
                f"\nEnter frame number (1-{self.state.total_frames}): ")
            return parse_frame_number(answer, self.state.total_frames)
        except InvalidIndex as e:
            log.debug("%s", e)
            return None
        except EOFError:
            log.debug("No frame number: input closed")
            return None

    def step(self, command: Command) -> Transition:
        """Apply one command and execute its effect against the source."""
        before = self.state
        transition = self.controller.handle(command, before)
        failure = None
        if transition.effect.needs_frame:
            try:
                self.source.apply(transition.effect)
            except NavigationFailure as e:
                failure = e
                transition = self.controller.read_failed(before)
        self.state = transition.state
        self._report(command, transition, failure)
        return transition

    # ── Loop ─────────────────────────────────────────────────────────

    def run(self) -> int:
        """Interactive loop. Returns the process exit status."""
        if self.info is None or self.source.current_image is None:
            log.error("run() called before a video was loaded")
            return 1

        self._print("")
        self._print(CONTROLS_HELP)
        self._print("")
        try:
            while True:
                self._show()
                timeout = self.frame_interval_ms if self.state.is_playing else 0
                key = self.display.poll_key(timeout)
                command = self.read_command(key)
                if command is None:
                    continue
                if self.step(command).terminates:
                    break
        finally:
            self.display.release()
            self._print("\nPlayback stopped.")
        return 0

    def _show(self) -> None:
        self.display.render_image(self.source.current_image,
                                  format_caption(self.state))
        if self.settings.print_progress:
            self._print(f"\r{format_progress(self.state)}", end='', flush=True)

    # ── Reporting ────────────────────────────────────────────────────

    def _report(self, command: Command, transition: Transition,
                failure: Optional[NavigationFailure]) -> None:
        notice = transition.notice
        state = transition.state

        if notice is Notice.PLAYBACK_STOPPED:
            log.debug("Playback stopped: %s", failure)
        elif notice is Notice.READ_FAILED:
            frame = failure.index + 1 if failure is not None else state.frame_number
            self._print(f"\nCould not read frame {frame}")
        elif notice is Notice.END_REACHED:
            self._print("\nEnd of video reached")
        elif notice is Notice.START_REACHED:
            self._print("\nBeginning of video reached")
        elif notice is Notice.INVALID_INDEX:
            self._print("Invalid frame number!")
        elif notice is Notice.PLAYING:
            self._print("\n▶ Playing")
        elif notice is Notice.PAUSED:
            self._print("\n⏸ Paused")
        elif notice is Notice.JUMPED:
            self._print(f"Jumped to frame {state.frame_number}")
        elif failure is None and command.kind is CommandKind.JUMP_TO_START:
            self._print("\nJumped to first frame")
        elif failure is None and command.kind is CommandKind.JUMP_TO_END:
            self._print("\nJumped to last frame")

    def _print(self, *args, **kwargs) -> None:
        print(*args, file=self.out, **kwargs)
