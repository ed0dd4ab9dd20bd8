"""Open/closed state machine for the single scratch window."""

from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from pathlib import Path

from quick_scratch.config import ScratchConfig
from quick_scratch.host import SCRATCH_MARKER, Cursor, EditorHost, WindowContext
from quick_scratch.logging import DebugLogger
from quick_scratch.store import current_branch, get_or_create_latest_scratch_file


@dataclass(slots=True)
class SessionState:
    """At most one window/buffer pair plus the cursor to restore on reopen."""

    window_context: WindowContext | None = None
    last_cursor: Cursor | None = None

    @property
    def is_open(self) -> bool:
        return self.window_context is not None


class ScratchSession:
    """Drives the host to show, hide and toggle the scratch window."""

    def __init__(
        self,
        host: EditorHost,
        config: ScratchConfig,
        logger: DebugLogger,
        cwd: Path | None = None,
    ) -> None:
        self._host = host
        self._config = config
        self._logger = logger
        self._cwd = cwd
        self.state = SessionState()

    @property
    def is_open(self) -> bool:
        return self.state.is_open

    def latest_scratch_file(self) -> Path:
        """Resolve the most recent scratch file for this workspace, creating one if needed."""
        return get_or_create_latest_scratch_file(
            self._config.scratch_root,
            self._config.default_file_extension,
            cwd=self._cwd,
            branch_lookup=partial(current_branch, timeout=self._config.git_timeout_seconds),
        )

    def open(self, path: Path | None = None) -> WindowContext | None:
        """Show path (or the latest scratch file) in the floating window."""
        if self.state.is_open and not self.close():
            return None
        scratch_file = Path(path) if path is not None else self.latest_scratch_file()

        self._logger.log(f"Opening scratch file: {scratch_file}")
        context = self._host.create_float_window(
            scratch_file, self._config.float_window_style, self.state.last_cursor
        )
        if context is None:
            self._logger.log(f"Could not create a window for {scratch_file}")
            self._host.notify(f"Couldn't open scratch file: {scratch_file}", "error")
            return None

        self._host.set_scratch_marker(context, SCRATCH_MARKER)
        self._logger.log(
            f"Generated window context with buffer ID '{context.buffer_id}' "
            f"and window ID '{context.window_id}'"
        )
        self.state.window_context = context
        return context

    def close(self) -> bool:
        """Save the buffer, remember the cursor and tear the window down.

        A failed save leaves the window and buffer open so no edits are lost;
        returns False in that case.
        """
        context = self.state.window_context
        if context is None:
            return True
        self._logger.log("Closing scratch window/buffer")

        try:
            self._host.write_buffer(context.buffer_id)
        except OSError as exc:
            self._logger.log(f"Failed to write buffer ID '{context.buffer_id}': {exc}")
            self._host.notify(f"Couldn't save scratch buffer: {exc}", "error")
            return False
        self.state.last_cursor = self._host.get_cursor(context.window_id)

        self._host.close_window(context.window_id)
        self._logger.log(f"Deleted window ID '{context.window_id}'")
        self._host.delete_buffer(context.buffer_id)
        self._logger.log(f"Deleted buffer ID '{context.buffer_id}'")
        self.state.window_context = None
        return True

    def toggle(self) -> WindowContext | None:
        """Open when closed, close when open."""
        self._logger.log("Toggling scratch window/buffer")
        if self.state.is_open:
            self.close()
            return None
        return self.open()
