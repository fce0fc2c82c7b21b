"""CLI commands for pomodoros."""
