"""Picker backed by the editor's own selection list."""

from __future__ import annotations

from quick_scratch.host import EditorHost
from quick_scratch.pickers.base import PICKER_TITLE, ConfirmCallback, PickerEntry


class BuiltinPicker:
    """Uses host.select; needs no third-party picker installed."""

    name = "builtin"

    def __init__(self, host: EditorHost) -> None:
        self._host = host

    def present(self, entries: list[PickerEntry], on_confirm: ConfirmCallback) -> None:
        def on_choice(index: int | None) -> None:
            if index is None or not 0 <= index < len(entries):
                return
            on_confirm(entries[index].path)

        self._host.select([entry.text for entry in entries], f"{PICKER_TITLE}:", on_choice)
