"""Adapter for fzf-style line pickers."""

from __future__ import annotations

from quick_scratch.host import EditorHost
from quick_scratch.pickers.base import PICKER_TITLE, ConfirmCallback, PickerEntry

FIELD_SEPARATOR = "\t"


class FzfLuaPicker:
    """Feeds 'name<TAB>path' lines and shows only the name column."""

    name = "fzf_lua"

    def __init__(self, host: EditorHost) -> None:
        self._host = host

    def present(self, entries: list[PickerEntry], on_confirm: ConfirmCallback) -> None:
        payload: dict[str, object] = {
            "prompt": f"{PICKER_TITLE}> ",
            "lines": [f"{entry.text}{FIELD_SEPARATOR}{entry.path}" for entry in entries],
            "fzf_opts": {"--delimiter": FIELD_SEPARATOR, "--with-nth": "1"},
        }
        by_line = {
            f"{entry.text}{FIELD_SEPARATOR}{entry.path}": entry.path for entry in entries
        }

        def on_select(selected: object) -> None:
            # fzf hands back the list of chosen lines
            if isinstance(selected, list):
                selected = selected[0] if selected else None
            if not isinstance(selected, str):
                return
            path = by_line.get(selected)
            if path is not None:
                on_confirm(path)

        self._host.open_picker(self.name, payload, on_select)
