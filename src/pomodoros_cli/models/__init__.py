"""Domain models for pomodoros."""
