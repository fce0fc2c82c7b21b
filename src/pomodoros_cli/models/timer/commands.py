"""Keyboard commands and raw key decoding."""

from enum import Enum


class Command(Enum):
    """Action requested by a key press."""

    START_PAUSE = "start_pause"
    SKIP = "skip"
    RESET = "reset"
    QUIT = "quit"
    NONE = "none"


ESCAPE = "\x1b"
CTRL_C = "\x03"
RIGHT_ARROW = "\x1b[C"
# Terminals in application cursor mode send SS3 instead of CSI.
RIGHT_ARROW_SS3 = "\x1bOC"

_CHAR_COMMANDS = {
    " ": Command.START_PAUSE,
    "n": Command.SKIP,
    "r": Command.RESET,
    "q": Command.QUIT,
    CTRL_C: Command.QUIT,
}


def decode_key(raw: str | None) -> Command:
    """Translate a raw key read from the terminal into a Command.

    Only the first key of *raw* is considered. Escape sequences other than the
    right arrow are ignored; a lone Escape quits.
    """
    if not raw or not isinstance(raw, str):
        return Command.NONE

    if raw.startswith(ESCAPE):
        if raw.startswith((RIGHT_ARROW, RIGHT_ARROW_SS3)):
            return Command.SKIP
        if raw == ESCAPE:
            return Command.QUIT
        return Command.NONE

    return _CHAR_COMMANDS.get(raw[0], Command.NONE)
