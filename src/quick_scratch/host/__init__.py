"""Editor host interfaces."""

from .base import SCRATCH_MARKER, Cursor, EditorHost, WindowContext
from .headless import HeadlessBuffer, HeadlessEditorHost, HeadlessWindow, PendingPicker

__all__ = [
    "Cursor",
    "EditorHost",
    "HeadlessBuffer",
    "HeadlessEditorHost",
    "HeadlessWindow",
    "PendingPicker",
    "SCRATCH_MARKER",
    "WindowContext",
]
