"""Single-threaded event loop driving the phase timer.

Each iteration waits up to one tick for a key, applies at most one command,
advances the countdown once, redraws, and rings the bell when a phase
completed. The bounded wait for input is the only suspension point and also
paces the redraws.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Optional, Protocol

from pomodoros_cli.utils.logger import get_logger

from .commands import Command, decode_key
from .config import TimerConfig
from .state import StateSnapshot, TimerState


class Clock(Protocol):
    def now(self) -> float: ...


class InputPoller(Protocol):
    def poll(self, timeout: float) -> Optional[str]: ...


class Renderer(Protocol):
    def render(self, snapshot: StateSnapshot) -> None: ...


class Bell(Protocol):
    def ring(self) -> None: ...


class EventLoop:
    """Owns the TimerState and feeds it time and commands until Quit."""

    def __init__(
        self,
        config: TimerConfig,
        *,
        clock: Clock,
        poller: InputPoller,
        renderer: Renderer,
        bell: Bell,
        state: TimerState | None = None,
    ):
        self.config = config
        self.clock = clock
        self.poller = poller
        self.renderer = renderer
        self.bell = bell
        self.state = state if state is not None else TimerState.initial(config, clock.now())
        self._logger = get_logger("loop")

    def run(self) -> TimerState:
        """Run until the user quits; returns the final state."""
        self._logger.info(
            "timer started: focus=%s short=%s long=%s every=%d tick=%s mute=%s",
            self.config.focus_duration,
            self.config.short_break_duration,
            self.config.long_break_duration,
            self.config.sessions_per_long_break,
            self.config.tick_interval,
            self.config.mute,
        )
        self.renderer.render(self.state.snapshot(self.config))
        try:
            while self.step():
                pass
        except KeyboardInterrupt:
            # Interrupt signal behaves like the quit key.
            self._logger.info("interrupted")
        self._logger.info(
            "timer stopped after %d focus sessions",
            self.state.completed_focus_sessions,
        )
        return self.state

    def step(self) -> bool:
        """Run one iteration. Returns False once the loop must stop."""
        command = self._read_command()
        if command is Command.QUIT:
            self._logger.info("quit requested")
            return False

        completed = self.apply(command)

        now = self.clock.now()
        elapsed = timedelta(seconds=max(0.0, now - self.state.last_sample))
        self.state.last_sample = now
        completed = self.state.advance(self.config, elapsed) or completed

        self.renderer.render(self.state.snapshot(self.config))

        if completed and not self.config.mute:
            self.bell.ring()
        return True

    def apply(self, command: Command) -> bool:
        """Apply a non-quit command; True when it completed a phase."""
        if command is Command.START_PAUSE:
            self.state.toggle_run_pause(self.clock.now())
        elif command is Command.SKIP:
            completed = self.state.skip(self.config)
            # The new phase counts from now, not from the previous sample.
            self.state.last_sample = self.clock.now()
            return completed
        elif command is Command.RESET:
            self.state.reset_phase(self.config)
        return False

    def _read_command(self) -> Command:
        timeout = self.config.tick_interval.total_seconds()
        command = decode_key(self.poller.poll(timeout))
        if command is not Command.NONE:
            self._logger.debug("key -> %s", command.value)
        return command
