"""Full-screen timer UI."""

from rich import box
from rich.align import Align
from rich.console import Console, Group
from rich.layout import Layout
from rich.live import Live
from rich.panel import Panel
from rich.progress_bar import ProgressBar
from rich.text import Text

from .state import StateSnapshot, TimerState

SHORTCUTS = "Space: Start/Pause  ·  n: Skip  ·  r: Reset  ·  q: Quit"


def _panel(renderable, title: str, color: str) -> Panel:
    return Panel(
        Align.center(renderable, vertical="middle"),
        title=title,
        title_align="center",
        box=box.ROUNDED,
        border_style=color,
    )


class TimerDisplay:
    """Renders state snapshots into a live full-screen layout."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()
        self._live: Live | None = None

    def create_layout(self, snapshot: StateSnapshot) -> Layout:
        """Create the timer layout with all components."""
        accent = snapshot.phase.color

        layout = Layout()
        layout.split_column(
            Layout(name="header", size=3),
            Layout(name="progress", size=4),
            Layout(name="timer", minimum_size=4),
            Layout(name="footer", size=3),
        )
        layout["header"].update(
            _panel(self._create_header_text(snapshot), "Status", accent)
        )
        layout["progress"].update(
            _panel(self._create_gauge(snapshot), "Progress", accent)
        )
        layout["timer"].update(
            _panel(self._create_timer_text(snapshot), "Timer", accent)
        )
        layout["footer"].update(
            _panel(Text(SHORTCUTS, style="dim", justify="center"), "Shortcuts", "dim")
        )
        return layout

    def _create_header_text(self, snapshot: StateSnapshot) -> Text:
        accent = snapshot.phase.color
        header = Text(justify="center")
        header.append("● ", style=accent)
        header.append(snapshot.phase.label, style=f"bold {accent}")
        header.append("  ·  Completed ")
        header.append(str(snapshot.completed_focus_sessions), style="bold grey70")
        return header

    def _create_gauge(self, snapshot: StateSnapshot) -> Group:
        bar = ProgressBar(
            total=1.0,
            completed=snapshot.progress,
            width=40,
            complete_style=snapshot.phase.color,
            finished_style=snapshot.phase.color,
        )
        label = Text(
            f"{snapshot.remaining_text}  ·  {snapshot.percent}%",
            style="white",
            justify="center",
        )
        return Group(Align.center(bar), label)

    def _create_timer_text(self, snapshot: StateSnapshot) -> Text:
        status = "⏱ Running" if snapshot.running else "⏸ Paused"
        timer_text = Text(justify="center")
        timer_text.append(snapshot.remaining_text, style="bold white")
        timer_text.append("\n")
        timer_text.append(status, style="grey70")
        return timer_text

    def render(self, snapshot: StateSnapshot) -> None:
        """Draw one frame."""
        if self._live is None:
            raise RuntimeError("TimerDisplay must be entered before rendering")
        self._live.update(self.create_layout(snapshot), refresh=True)

    def __enter__(self):
        self._live = Live(
            Text(""),
            console=self.console,
            screen=True,
            auto_refresh=False,
        )
        self._live.__enter__()
        return self

    def __exit__(self, exc_type, exc, tb):
        live, self._live = self._live, None
        if live is not None:
            live.__exit__(exc_type, exc, tb)
        return False


class TerminalBell:
    """Fire-and-forget completion signal."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def ring(self) -> None:
        self.console.bell()


def show_summary(state: TimerState, console: Console | None = None):
    """Show a summary after the timer exits."""
    console = console or Console()

    sessions = state.completed_focus_sessions
    noun = "session" if sessions == 1 else "sessions"
    panel = Panel(
        f"""[bold green]🍅 Pomodoro finished[/bold green]

Completed focus {noun}: {sessions}
Stopped during: {state.phase.label}""",
        border_style="green",
        padding=(1, 2),
    )
    console.print(panel)
