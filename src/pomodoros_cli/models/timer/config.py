"""Validated timer configuration."""

from __future__ import annotations

from datetime import timedelta

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .phase import Phase

DEFAULT_FOCUS_MINUTES = 25
DEFAULT_SHORT_BREAK_MINUTES = 5
DEFAULT_LONG_BREAK_MINUTES = 15
DEFAULT_LONG_BREAK_EVERY = 4
DEFAULT_TICK_MS = 200


class TimerConfig(BaseModel):
    """Durations and behaviour flags consumed read-only by the timer."""

    model_config = ConfigDict(frozen=True)

    focus_duration: timedelta = Field(
        default=timedelta(minutes=DEFAULT_FOCUS_MINUTES)
    )
    short_break_duration: timedelta = Field(
        default=timedelta(minutes=DEFAULT_SHORT_BREAK_MINUTES)
    )
    long_break_duration: timedelta = Field(
        default=timedelta(minutes=DEFAULT_LONG_BREAK_MINUTES)
    )
    sessions_per_long_break: int = Field(default=DEFAULT_LONG_BREAK_EVERY, ge=1)
    tick_interval: timedelta = Field(default=timedelta(milliseconds=DEFAULT_TICK_MS))
    mute: bool = Field(default=False)

    @field_validator(
        "focus_duration",
        "short_break_duration",
        "long_break_duration",
        "tick_interval",
    )
    @classmethod
    def validate_positive(cls, v: timedelta) -> timedelta:
        """Durations must be strictly positive."""
        if v <= timedelta(0):
            raise ValueError("duration must be greater than zero")
        return v

    @classmethod
    def from_cli(
        cls,
        focus_minutes: int = DEFAULT_FOCUS_MINUTES,
        short_minutes: int = DEFAULT_SHORT_BREAK_MINUTES,
        long_minutes: int = DEFAULT_LONG_BREAK_MINUTES,
        every: int = DEFAULT_LONG_BREAK_EVERY,
        tick_ms: int = DEFAULT_TICK_MS,
        mute: bool = False,
    ) -> TimerConfig:
        """Build a config from command-line units (minutes and milliseconds)."""
        return cls(
            focus_duration=timedelta(minutes=focus_minutes),
            short_break_duration=timedelta(minutes=short_minutes),
            long_break_duration=timedelta(minutes=long_minutes),
            sessions_per_long_break=every,
            tick_interval=timedelta(milliseconds=tick_ms),
            mute=mute,
        )

    def duration_for(self, phase: Phase) -> timedelta:
        """Get the full configured duration of a phase."""
        if phase is Phase.FOCUS:
            return self.focus_duration
        elif phase is Phase.SHORT_BREAK:
            return self.short_break_duration
        else:  # long break
            return self.long_break_duration
