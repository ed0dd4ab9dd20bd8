"""Editor host protocol: the window, buffer and picker surface the plugin drives."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from quick_scratch.config import FloatWindowStyle

SCRATCH_MARKER = "is_scratch_buffer"

Cursor = tuple[int, int]


@dataclass(slots=True, frozen=True)
class WindowContext:
    """Handles of one materialized scratch window and its buffer."""

    buffer_id: int
    window_id: int


class EditorHost(Protocol):
    """Narrow contract the plugin needs from a host editor."""

    def editor_size(self) -> tuple[int, int]:
        """Return (width, height) of the editor area in cells."""

    def create_float_window(
        self, path: Path, style: FloatWindowStyle, cursor: Cursor | None
    ) -> WindowContext | None:
        """Load path into a new buffer shown in a floating window; None on failure."""

    def set_scratch_marker(self, context: WindowContext, name: str) -> None:
        """Flag the window and buffer so other tooling can skip them."""

    def write_buffer(self, buffer_id: int) -> None:
        """Write buffer content to its file; raise OSError on failure."""

    def get_cursor(self, window_id: int) -> Cursor:
        """Return the (row, col) cursor of a window."""

    def close_window(self, window_id: int) -> None:
        """Force-close a window."""

    def delete_buffer(self, buffer_id: int) -> None:
        """Force-delete a buffer."""

    def input(self, prompt: str) -> str:
        """Ask the user for a line of text."""

    def notify(self, message: str, level: str = "info") -> None:
        """Show a message to the user."""

    def select(
        self, items: list[str], prompt: str, on_choice: Callable[[int | None], None]
    ) -> None:
        """Built-in selection list; on_choice receives the index or None."""

    def open_picker(
        self, provider: str, payload: dict[str, object], on_select: Callable[[object], None]
    ) -> None:
        """Hand a provider-shaped payload to a third-party picker."""

    def defer(self, callback: Callable[[], None]) -> None:
        """Run callback once, after the current UI event settles."""
