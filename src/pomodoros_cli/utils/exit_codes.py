"""
Exit codes for pomodoros.

A clean quit from the timer is always SUCCESS; every other code is produced
before the timer starts or when the terminal fails underneath it.
"""

# Success
SUCCESS = 0

# General error (unspecified, including terminal I/O failures mid-session)
ERROR_GENERAL = 1

# Invalid arguments or configuration
ERROR_INVALID_ARGS = 2

# Terminal unavailable (not a TTY, cannot enter cbreak mode)
ERROR_TERMINAL = 3


_CODE_NAMES = {
    SUCCESS: "SUCCESS",
    ERROR_GENERAL: "ERROR_GENERAL",
    ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
    ERROR_TERMINAL: "ERROR_TERMINAL",
}

_DESCRIPTIONS = {
    SUCCESS: "Timer exited normally",
    ERROR_GENERAL: "A general error occurred",
    ERROR_INVALID_ARGS: "Invalid durations or session interval",
    ERROR_TERMINAL: "Interactive terminal required",
}


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    return _CODE_NAMES.get(code, f"UNKNOWN({code})")


def get_exit_code_description(code: int) -> str:
    """Get a human-readable description of an exit code."""
    return _DESCRIPTIONS.get(code, "Unknown error")
