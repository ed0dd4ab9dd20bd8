"""Core picker protocol and entry type."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

ConfirmCallback = Callable[[Path], object]

PICKER_TITLE = "Scratches"


@dataclass(slots=True, frozen=True)
class PickerEntry:
    """One selectable scratch file: full path plus the label shown."""

    path: Path
    text: str


def build_entries(paths: Iterable[Path]) -> list[PickerEntry]:
    """Label each path with its file name, preserving order."""
    return [PickerEntry(path=Path(path), text=Path(path).name) for path in paths]


class PickerBackend(Protocol):
    """Selection UI that reports the confirmed scratch path."""

    name: str

    def present(self, entries: list[PickerEntry], on_confirm: ConfirmCallback) -> None:
        """Show entries; call on_confirm with the chosen path, or not at all on cancel."""
