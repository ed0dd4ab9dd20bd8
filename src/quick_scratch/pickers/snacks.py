"""Adapter for snacks-style pickers, including the delete action."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from quick_scratch.errors import ScratchIOError
from quick_scratch.host import EditorHost
from quick_scratch.pickers.base import PICKER_TITLE, ConfirmCallback, PickerEntry
from quick_scratch.store import delete_scratch_files

DELETE_ACTION = "prompt_delete"
DELETE_KEYS = {"dd": {"action": DELETE_ACTION, "mode": ["n", "x"]}}


class SnacksPicker:
    """Items carry file/text/pos; 'dd' deletes the selected files after confirmation."""

    name = "snacks"

    def __init__(
        self,
        host: EditorHost,
        delete_files: Callable[[list[Path]], tuple[Path, ...]] = delete_scratch_files,
    ) -> None:
        self._host = host
        self._delete_files = delete_files

    def present(self, entries: list[PickerEntry], on_confirm: ConfirmCallback) -> None:
        remaining = list(entries)

        def items() -> list[dict[str, object]]:
            return [
                {"pos": [1, 1], "file": str(entry.path), "text": entry.text}
                for entry in remaining
            ]

        def prompt_delete(selected: list[object]) -> list[dict[str, object]]:
            paths = [Path(str(item["file"])) for item in selected if isinstance(item, dict)]
            if not paths:
                return items()
            if len(paths) == 1:
                question = f"Delete file '{paths[0]}' from disk? [y/n]"
            else:
                question = f"Delete the {len(paths)} selected files from disk? [y/n]"
            if self._host.input(question).strip().lower() != "y":
                return items()
            try:
                removed = set(self._delete_files(paths))
            except ScratchIOError as exc:
                self._host.notify(str(exc), "error")
                remaining[:] = [entry for entry in remaining if entry.path.exists()]
                return items()
            remaining[:] = [entry for entry in remaining if entry.path not in removed]
            return items()

        payload: dict[str, object] = {
            "title": PICKER_TITLE,
            "items": items(),
            "win": {"input": {"keys": DELETE_KEYS}, "list": {"keys": DELETE_KEYS}},
            "actions": {DELETE_ACTION: prompt_delete},
        }

        def on_select(item: object) -> None:
            if isinstance(item, dict) and item.get("file"):
                on_confirm(Path(str(item["file"])))

        self._host.open_picker(self.name, payload, on_select)
