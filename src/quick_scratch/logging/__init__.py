"""Diagnostic logging utilities."""

from .debug_log import DebugLogger, local_timestamp

__all__ = ["DebugLogger", "local_timestamp"]
