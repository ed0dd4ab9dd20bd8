"""In-memory editor host for scripting and tests."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from pathlib import Path

from quick_scratch.config import FloatWindowStyle
from quick_scratch.host.base import Cursor, WindowContext


@dataclass(slots=True)
class HeadlessBuffer:
    """Buffer contents bound to a file path."""

    path: Path
    lines: list[str]
    variables: dict[str, object] = field(default_factory=dict)


@dataclass(slots=True)
class HeadlessWindow:
    """Floating window showing one buffer."""

    buffer_id: int
    style: FloatWindowStyle
    cursor: Cursor
    variables: dict[str, object] = field(default_factory=dict)


@dataclass(slots=True)
class PendingPicker:
    """Picker shown to the user and waiting for a choice."""

    provider: str
    payload: dict[str, object]
    on_select: Callable[[object], None]


class HeadlessEditorHost:
    """Keeps buffers and windows in dictionaries and records user-facing output."""

    def __init__(
        self,
        width: int = 120,
        height: int = 40,
        inputs: Iterable[str] = (),
    ) -> None:
        self._width = width
        self._height = height
        self._inputs: deque[str] = deque(inputs)
        self._next_id = 1
        self.buffers: dict[int, HeadlessBuffer] = {}
        self.windows: dict[int, HeadlessWindow] = {}
        self.notifications: list[tuple[str, str]] = []
        self.prompts: list[str] = []
        self.pickers: list[PendingPicker] = []
        self._deferred: deque[Callable[[], None]] = deque()

    def editor_size(self) -> tuple[int, int]:
        return self._width, self._height

    def create_float_window(
        self, path: Path, style: FloatWindowStyle, cursor: Cursor | None
    ) -> WindowContext | None:
        try:
            text = Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            return None
        lines = text.splitlines()
        buffer_id = self._allocate_id()
        self.buffers[buffer_id] = HeadlessBuffer(path=Path(path), lines=lines)
        window_id = self._allocate_id()
        self.windows[window_id] = HeadlessWindow(
            buffer_id=buffer_id,
            style=style,
            cursor=_clamp_cursor(cursor, lines),
        )
        return WindowContext(buffer_id=buffer_id, window_id=window_id)

    def set_scratch_marker(self, context: WindowContext, name: str) -> None:
        self.buffers[context.buffer_id].variables[name] = True
        self.windows[context.window_id].variables[name] = True

    def write_buffer(self, buffer_id: int) -> None:
        buffer = self.buffers[buffer_id]
        content = "\n".join(buffer.lines)
        if buffer.lines:
            content += "\n"
        buffer.path.write_text(content, encoding="utf-8")

    def get_cursor(self, window_id: int) -> Cursor:
        return self.windows[window_id].cursor

    def close_window(self, window_id: int) -> None:
        self.windows.pop(window_id, None)

    def delete_buffer(self, buffer_id: int) -> None:
        self.buffers.pop(buffer_id, None)

    def input(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._inputs:
            return ""
        return self._inputs.popleft()

    def notify(self, message: str, level: str = "info") -> None:
        self.notifications.append((level, message))

    def select(
        self, items: list[str], prompt: str, on_choice: Callable[[int | None], None]
    ) -> None:
        def choose(item: object) -> None:
            on_choice(item if isinstance(item, int) else None)

        self.pickers.append(
            PendingPicker(
                provider="builtin",
                payload={"prompt": prompt, "items": list(items)},
                on_select=choose,
            )
        )

    def open_picker(
        self, provider: str, payload: dict[str, object], on_select: Callable[[object], None]
    ) -> None:
        self.pickers.append(PendingPicker(provider=provider, payload=payload, on_select=on_select))

    def defer(self, callback: Callable[[], None]) -> None:
        self._deferred.append(callback)

    def run_deferred(self) -> int:
        """Run queued deferred callbacks; return how many ran."""
        count = 0
        while self._deferred:
            self._deferred.popleft()()
            count += 1
        return count

    def queue_input(self, text: str) -> None:
        self._inputs.append(text)

    def set_lines(self, buffer_id: int, lines: list[str]) -> None:
        self.buffers[buffer_id].lines = list(lines)

    def set_cursor(self, window_id: int, cursor: Cursor) -> None:
        window = self.windows[window_id]
        window.cursor = _clamp_cursor(cursor, self.buffers[window.buffer_id].lines)

    def _allocate_id(self) -> int:
        allocated = self._next_id
        self._next_id += 1
        return allocated


def _clamp_cursor(cursor: Cursor | None, lines: list[str]) -> Cursor:
    if cursor is None:
        return (1, 0)
    row, col = cursor
    max_row = max(len(lines), 1)
    row = min(max(row, 1), max_row)
    line = lines[row - 1] if lines else ""
    col = min(max(col, 0), max(len(line) - 1, 0))
    return (row, col)
