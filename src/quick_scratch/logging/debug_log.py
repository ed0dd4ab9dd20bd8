"""Append-only plain-text diagnostic log."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from quick_scratch.config import LOG_LEVELS

ErrorReporter = Callable[[str], None]


def local_timestamp() -> str:
    """Return a local wall-clock timestamp for log lines."""
    return datetime.now().strftime("%Y-%m-%d %H:%M:%S")


class DebugLogger:
    """Level-gated logger appending one timestamped line per message."""

    def __init__(
        self,
        path: Path,
        level: str = "OFF",
        on_error: ErrorReporter | None = None,
    ) -> None:
        self._path = path
        self._level = "OFF"
        self._on_error = on_error
        self.set_level(level)

    @property
    def path(self) -> Path:
        """Return on-disk log path."""
        return self._path

    @property
    def level(self) -> str:
        return self._level

    @property
    def enabled(self) -> bool:
        return self._level != "OFF"

    def set_level(self, level: str) -> None:
        """Switch between OFF and DEBUG."""
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {level}")
        self._level = level

    def log(self, message: str) -> None:
        """Append a line unless logging is off; write failures are reported, not raised."""
        if not self.enabled:
            return
        line = f"[{local_timestamp()}] {message}\n"
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with self._path.open("a", encoding="utf-8") as handle:
                handle.write(line)
        except OSError:
            if self._on_error is not None:
                self._on_error(f"Failed to open log file: {self._path}")

    def read(self, limit: int = 50) -> list[str]:
        """Return the most recent log lines, oldest first."""
        if limit < 1 or not self._path.exists():
            return []
        with self._path.open("r", encoding="utf-8", errors="replace") as handle:
            lines = [line.rstrip("\n") for line in handle if line.strip()]
        if len(lines) <= limit:
            return lines
        return lines[-limit:]
