from __future__ import annotations

from dataclasses import replace
from pathlib import Path

import pytest

from quick_scratch.config import default_config
from quick_scratch.host import SCRATCH_MARKER, HeadlessEditorHost, WindowContext
from quick_scratch.logging import DebugLogger
from quick_scratch.session import ScratchSession


class RefusingHost(HeadlessEditorHost):
    """Host whose editor cannot open floating windows."""

    def create_float_window(self, path, style, cursor):  # type: ignore[no-untyped-def]
        return None


class ReadOnlyHost(HeadlessEditorHost):
    """Host whose buffer writes always fail."""

    def write_buffer(self, buffer_id: int) -> None:
        raise PermissionError("read-only file system")


def _session(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, host: HeadlessEditorHost | None = None
) -> tuple[ScratchSession, HeadlessEditorHost]:
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))
    workspace = tmp_path / "proj"
    workspace.mkdir()
    config = replace(
        default_config(),
        scratch_root=tmp_path / "scratch",
        log_file=tmp_path / "scratch-buffers.log",
    )
    editor = host or HeadlessEditorHost()
    logger = DebugLogger(config.log_file, level="DEBUG")
    return ScratchSession(editor, config, logger, cwd=workspace), editor


def test_toggle_opens_then_closes(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    session, host = _session(tmp_path, monkeypatch)

    context = session.toggle()

    assert isinstance(context, WindowContext)
    assert session.is_open
    assert session.state.window_context == context
    assert set(host.windows) == {context.window_id}
    assert set(host.buffers) == {context.buffer_id}

    assert session.toggle() is None
    assert not session.is_open
    assert session.state.window_context is None
    assert host.windows == {}
    assert host.buffers == {}


def test_close_when_closed_is_a_no_op(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    session, host = _session(tmp_path, monkeypatch)

    session.close()
    session.close()

    assert not session.is_open
    assert session.state.last_cursor is None
    assert host.notifications == []


def test_close_writes_content_and_remembers_cursor(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    session, host = _session(tmp_path, monkeypatch)
    context = session.open()
    assert context is not None
    scratch_file = host.buffers[context.buffer_id].path

    host.set_lines(context.buffer_id, ["todo", "- call back", "- ship it"])
    host.set_cursor(context.window_id, (3, 2))
    session.close()

    assert scratch_file.read_text(encoding="utf-8") == "todo\n- call back\n- ship it\n"
    assert session.state.last_cursor == (3, 2)

    reopened = session.open()
    assert reopened is not None
    assert host.buffers[reopened.buffer_id].path == scratch_file
    assert host.get_cursor(reopened.window_id) == (3, 2)


def test_open_without_path_uses_latest_file_in_workspace(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    session, host = _session(tmp_path, monkeypatch)

    context = session.open()

    assert context is not None
    opened = host.buffers[context.buffer_id].path
    assert opened.parent == tmp_path / "scratch" / "proj"
    assert opened.suffix == ".md"


def test_open_explicit_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    session, host = _session(tmp_path, monkeypatch)
    chosen = tmp_path / "chosen.md"
    chosen.write_text("picked\n", encoding="utf-8")

    context = session.open(chosen)

    assert context is not None
    assert host.buffers[context.buffer_id].lines == ["picked"]


def test_created_window_is_tagged(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    session, host = _session(tmp_path, monkeypatch)

    context = session.open()

    assert context is not None
    assert host.buffers[context.buffer_id].variables[SCRATCH_MARKER] is True
    assert host.windows[context.window_id].variables[SCRATCH_MARKER] is True


def test_window_failure_is_reported_and_state_stays_closed(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    session, host = _session(tmp_path, monkeypatch, host=RefusingHost())

    assert session.open() is None

    assert not session.is_open
    assert session.state.window_context is None
    assert len(host.notifications) == 1
    level, message = host.notifications[0]
    assert level == "error"
    assert "Couldn't open scratch file" in message


def test_opening_while_open_replaces_the_window(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    session, host = _session(tmp_path, monkeypatch)
    other = tmp_path / "other.md"
    other.write_text("other\n", encoding="utf-8")

    first = session.open()
    second = session.open(other)

    assert first is not None
    assert second is not None
    assert first != second
    assert set(host.windows) == {second.window_id}
    assert set(host.buffers) == {second.buffer_id}


def test_failed_write_keeps_window_and_edits(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    session, host = _session(tmp_path, monkeypatch, host=ReadOnlyHost())
    context = session.open()
    assert context is not None
    host.set_lines(context.buffer_id, ["unsaved precious edit"])

    assert session.close() is False

    assert session.is_open
    assert session.state.window_context == context
    assert set(host.windows) == {context.window_id}
    assert host.buffers[context.buffer_id].lines == ["unsaved precious edit"]
    assert host.notifications[-1][0] == "error"
    assert "read-only file system" in host.notifications[-1][1]


def test_open_over_unsaved_window_keeps_the_existing_pair(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    session, host = _session(tmp_path, monkeypatch, host=ReadOnlyHost())
    other = tmp_path / "other.md"
    other.write_text("other\n", encoding="utf-8")
    first = session.open()
    assert first is not None

    assert session.open(other) is None

    assert session.state.window_context == first
    assert set(host.windows) == {first.window_id}
    assert set(host.buffers) == {first.buffer_id}


def test_transitions_are_logged(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    session, _ = _session(tmp_path, monkeypatch)

    session.toggle()
    session.toggle()

    log_text = (tmp_path / "scratch-buffers.log").read_text(encoding="utf-8")
    assert "Toggling scratch window/buffer" in log_text
    assert "Opening scratch file:" in log_text
    assert "Closing scratch window/buffer" in log_text
