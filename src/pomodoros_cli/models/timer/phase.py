"""Timer phases."""

from enum import Enum


class Phase(Enum):
    """One of the three timer modes."""

    FOCUS = "focus"
    SHORT_BREAK = "short_break"
    LONG_BREAK = "long_break"

    @property
    def label(self) -> str:
        """Human-readable phase name."""
        return _LABELS[self]

    @property
    def color(self) -> str:
        """Accent colour used when rendering the phase."""
        return _COLORS[self]


_LABELS = {
    Phase.FOCUS: "Focus",
    Phase.SHORT_BREAK: "Short Break",
    Phase.LONG_BREAK: "Long Break",
}

_COLORS = {
    Phase.FOCUS: "bright_green",
    Phase.SHORT_BREAK: "cyan",
    Phase.LONG_BREAK: "magenta",
}
