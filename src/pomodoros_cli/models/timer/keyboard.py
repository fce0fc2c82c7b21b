"""Cross-platform keyboard polling for the timer loop.

Both handlers wait at most ``timeout`` seconds for a key, which also paces
the event loop, and restore the terminal when used as context managers.
"""

import os
import select
import sys
import time
from typing import Optional

from pomodoros_cli.utils.logger import get_logger

from .commands import RIGHT_ARROW
from .exceptions import TerminalError

if sys.platform != "win32":
    import termios
    import tty

_READ_SIZE = 32


class KeyboardHandler:
    """POSIX keyboard handler using cbreak mode and select()."""

    def __init__(self, stream=None):
        stream = stream or sys.stdin
        try:
            self.fd = stream.fileno()
        except (AttributeError, ValueError, OSError) as e:
            raise TerminalError("standard input has no file descriptor") from e
        self.old_settings = None
        self._setup()

    def _setup(self):
        """Put the terminal in cbreak mode, remembering the old settings."""
        if not os.isatty(self.fd):
            raise TerminalError("standard input is not a terminal")
        try:
            self.old_settings = termios.tcgetattr(self.fd)
            tty.setcbreak(self.fd)
        except termios.error as e:
            raise TerminalError(f"cannot configure terminal: {e}") from e
        get_logger("keyboard").debug("terminal switched to cbreak mode")

    def poll(self, timeout: float) -> Optional[str]:
        """
        Wait up to *timeout* seconds for a key press.

        Returns the pending input (one key or one escape sequence) or None.
        """
        ready, _, _ = select.select([self.fd], [], [], max(0.0, timeout))
        if not ready:
            return None

        data = os.read(self.fd, _READ_SIZE)
        if not data:
            raise TerminalError("terminal input closed")
        return data.decode("utf-8", errors="replace")

    def stop(self):
        """Restore terminal settings."""
        if self.old_settings is None:
            return
        termios.tcsetattr(self.fd, termios.TCSADRAIN, self.old_settings)
        self.old_settings = None
        get_logger("keyboard").debug("terminal settings restored")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.stop()
        return False


class WindowsKeyboardHandler:
    """Keyboard handler for Windows using msvcrt."""

    POLL_STEP = 0.01
    # getch() prefixes arrow and function keys with one of these bytes.
    _EXTENDED_PREFIXES = (b"\x00", b"\xe0")
    _EXTENDED_KEYS = {b"M": RIGHT_ARROW}

    def __init__(self):
        try:
            import msvcrt

            self.msvcrt = msvcrt
        except ImportError:
            self.msvcrt = None

    def poll(self, timeout: float) -> Optional[str]:
        """Wait up to *timeout* seconds for a key press."""
        deadline = time.monotonic() + max(0.0, timeout)
        while True:
            if self.msvcrt and self.msvcrt.kbhit():
                return self._read_key()
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                return None
            time.sleep(min(self.POLL_STEP, remaining))

    def _read_key(self) -> Optional[str]:
        key = self.msvcrt.getch()
        if isinstance(key, str):
            return key
        if key in self._EXTENDED_PREFIXES:
            return self._EXTENDED_KEYS.get(self.msvcrt.getch())
        return key.decode("utf-8", errors="replace")

    def stop(self):
        """No cleanup needed on Windows."""
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.stop()
        return False


def get_keyboard_handler():
    """Create the keyboard handler for the current platform."""
    if sys.platform == "win32":
        return WindowsKeyboardHandler()
    return KeyboardHandler()
