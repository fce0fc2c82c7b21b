"""Phase timer state machine.

A single ``TimerState`` is created at startup and mutated only by the event
loop. Each transition method takes the read-only ``TimerConfig``; methods that
can finish a phase return ``True`` when a completion fired so the loop can
ring the bell.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from pomodoros_cli.utils.logger import get_logger

from .config import TimerConfig
from .phase import Phase

_ZERO = timedelta(0)


def format_remaining(remaining: timedelta) -> str:
    """Format a time span as MM:SS (minutes may exceed 59)."""
    total_secs = max(0, int(remaining.total_seconds()))
    minutes, seconds = divmod(total_secs, 60)
    return f"{minutes:02d}:{seconds:02d}"


@dataclass(frozen=True)
class StateSnapshot:
    """Immutable view of the timer handed to the renderer."""

    phase: Phase
    remaining: timedelta
    phase_duration: timedelta
    running: bool
    completed_focus_sessions: int

    @property
    def remaining_text(self) -> str:
        return format_remaining(self.remaining)

    @property
    def elapsed(self) -> timedelta:
        return min(max(self.phase_duration - self.remaining, _ZERO), self.phase_duration)

    @property
    def progress(self) -> float:
        """Fraction of the current phase already elapsed (1 - remaining/duration)."""
        if self.phase_duration <= _ZERO:
            return 0.0
        return self.elapsed / self.phase_duration

    @property
    def percent(self) -> int:
        """Whole percent elapsed, rounded down."""
        if self.phase_duration <= _ZERO:
            return 0
        return (self.elapsed * 100) // self.phase_duration


@dataclass
class TimerState:
    """Mutable timer state owned by the event loop."""

    phase: Phase
    remaining: timedelta
    running: bool = False
    completed_focus_sessions: int = 0
    last_sample: float = 0.0

    @classmethod
    def initial(cls, config: TimerConfig, now: float) -> TimerState:
        """Fresh state: paused at the start of the first focus phase."""
        return cls(
            phase=Phase.FOCUS,
            remaining=config.focus_duration,
            running=False,
            completed_focus_sessions=0,
            last_sample=now,
        )

    def advance(self, config: TimerConfig, elapsed: timedelta) -> bool:
        """Count down by *elapsed* while running.

        Completes the phase at most once per call; any overshoot past zero is
        dropped and the next phase starts at its full duration, still running.
        """
        if not self.running:
            return False

        if elapsed >= self.remaining:
            self.remaining = _ZERO
            return self.complete_phase(config)

        if elapsed > _ZERO:
            self.remaining -= elapsed
        return False

    def toggle_run_pause(self, now: float) -> None:
        """Start or pause the countdown."""
        self.running = not self.running
        if self.running:
            # Time spent paused must not be charged on the next tick.
            self.last_sample = now
        get_logger("timer").info(
            "%s %s at %s",
            "resumed" if self.running else "paused",
            self.phase.value,
            format_remaining(self.remaining),
        )

    def skip(self, config: TimerConfig) -> bool:
        """Finish the current phase immediately without starting or pausing it."""
        get_logger("timer").info(
            "skipped %s with %s left", self.phase.value, format_remaining(self.remaining)
        )
        self.remaining = _ZERO
        return self.complete_phase(config)

    def reset_phase(self, config: TimerConfig) -> None:
        """Restart the countdown of the current phase."""
        self.remaining = config.duration_for(self.phase)
        get_logger("timer").info("reset %s", self.phase.value)

    def next_phase(self, config: TimerConfig) -> Phase:
        """Phase that follows the current one once it completes."""
        if self.phase is Phase.FOCUS:
            upcoming = self.completed_focus_sessions + 1
            if upcoming % config.sessions_per_long_break == 0:
                return Phase.LONG_BREAK
            return Phase.SHORT_BREAK
        return Phase.FOCUS

    def complete_phase(self, config: TimerConfig) -> bool:
        """Move to the next phase; running or paused stays as it was."""
        finished = self.phase
        upcoming = self.next_phase(config)
        if finished is Phase.FOCUS:
            self.completed_focus_sessions += 1

        self.phase = upcoming
        self.remaining = config.duration_for(self.phase)

        get_logger("timer").info(
            "completed %s -> %s (focus sessions: %d)",
            finished.value,
            self.phase.value,
            self.completed_focus_sessions,
        )
        return True

    def snapshot(self, config: TimerConfig) -> StateSnapshot:
        return StateSnapshot(
            phase=self.phase,
            remaining=self.remaining,
            phase_duration=config.duration_for(self.phase),
            running=self.running,
            completed_focus_sessions=self.completed_focus_sessions,
        )
