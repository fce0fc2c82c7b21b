"""Pomodoro phase timer: state machine, event loop and terminal adapters."""

from .clock import MonotonicClock
from .commands import Command, decode_key
from .config import TimerConfig
from .exceptions import TerminalError, TimerError
from .keyboard import KeyboardHandler, WindowsKeyboardHandler, get_keyboard_handler
from .loop import EventLoop
from .phase import Phase
from .state import StateSnapshot, TimerState
from .ui import TerminalBell, TimerDisplay, show_summary

__all__ = [
    "Command",
    "EventLoop",
    "KeyboardHandler",
    "MonotonicClock",
    "Phase",
    "StateSnapshot",
    "TerminalBell",
    "TerminalError",
    "TimerConfig",
    "TimerDisplay",
    "TimerError",
    "TimerState",
    "WindowsKeyboardHandler",
    "decode_key",
    "get_keyboard_handler",
    "show_summary",
]
