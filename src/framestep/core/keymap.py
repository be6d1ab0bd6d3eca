"""Key-code to command table.

Pure data plus one lookup. Letter bindings are case-insensitive; arrow,
Home and End keys are registered for every HighGUI backend.
"""
from __future__ import annotations

from typing import Dict, Optional

from ..constants import (
    END_KEYS,
    HOME_KEYS,
    KEY_ESCAPE,
    KEY_SPACE,
    LEFT_ARROW_KEYS,
    RIGHT_ARROW_KEYS,
)
from .models import CommandKind

_LETTERS: Dict[str, CommandKind] = {
    'q': CommandKind.QUIT,
    'd': CommandKind.STEP_FORWARD,
    'a': CommandKind.STEP_BACKWARD,
    'h': CommandKind.JUMP_TO_START,
    'e': CommandKind.JUMP_TO_END,
    'g': CommandKind.JUMP_TO_INDEX,  # session prompts for the frame number
}


def _build_bindings() -> Dict[int, CommandKind]:
    table: Dict[int, CommandKind] = {
        KEY_ESCAPE: CommandKind.QUIT,
        KEY_SPACE: CommandKind.TOGGLE_PLAY,
    }
    for letter, kind in _LETTERS.items():
        table[ord(letter)] = kind
        table[ord(letter.upper())] = kind
    for codes, kind in (
        (RIGHT_ARROW_KEYS, CommandKind.STEP_FORWARD),
        (LEFT_ARROW_KEYS, CommandKind.STEP_BACKWARD),
        (HOME_KEYS, CommandKind.JUMP_TO_START),
        (END_KEYS, CommandKind.JUMP_TO_END),
    ):
        for code in codes:
            table[code] = kind
    return table


KEY_BINDINGS: Dict[int, CommandKind] = _build_bindings()


def command_for_key(key: Optional[int], playing: bool) -> Optional[CommandKind]:
    """Resolve a polled key (None = timeout) to a command kind.

    The GTK backend ORs the modifier state (NumLock, Shift, ...) into the
    code above bit 16, so the bare keysym in the low 16 bits is tried when
    the full code is unbound. ASCII keys are keysyms below 0x100, so no
    separate 8-bit mask is needed; masking to 8 bits would alias keysyms
    such as Undo (0xFF65) onto 'e'.

    Unbound keys and timeouts become TICK while playing and nothing
    while paused.
    """
    if key is not None and key >= 0:
        for code in (key, key & 0xFFFF):
            kind = KEY_BINDINGS.get(code)
            if kind is not None:
                return kind
    return CommandKind.TICK if playing else None
