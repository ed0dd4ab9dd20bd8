"""Adapter for telescope-style pickers."""

from __future__ import annotations

from quick_scratch.host import EditorHost
from quick_scratch.pickers.base import PICKER_TITLE, ConfirmCallback, PickerEntry


class TelescopePicker:
    """Builds a finder table of value/display/ordinal rows."""

    name = "telescope"

    def __init__(self, host: EditorHost) -> None:
        self._host = host

    def present(self, entries: list[PickerEntry], on_confirm: ConfirmCallback) -> None:
        payload: dict[str, object] = {
            "prompt_title": PICKER_TITLE,
            "finder": {
                "results": [
                    {"value": str(entry.path), "display": entry.text, "ordinal": entry.text}
                    for entry in entries
                ]
            },
            "previewer": "file",
        }
        by_value = {str(entry.path): entry.path for entry in entries}

        def on_select(selection: object) -> None:
            if not isinstance(selection, dict):
                return
            path = by_value.get(str(selection.get("value")))
            if path is None:
                return
            # The picker window must be gone before the scratch float takes focus.
            self._host.defer(lambda: on_confirm(path))

        self._host.open_picker(self.name, payload, on_select)
