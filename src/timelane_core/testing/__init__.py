"""Helpers for testing code instrumented with timelane_core."""

from .recorder import LogEntry, RecordingLogger

__all__ = ["LogEntry", "RecordingLogger"]
