"""Custom exceptions for the timer."""


class TimerError(Exception):
    """Base exception for all timer errors."""


class TerminalError(TimerError):
    """Raised when the terminal cannot be set up for interactive input."""
