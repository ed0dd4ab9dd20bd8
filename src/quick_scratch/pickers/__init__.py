"""Picker interfaces and provider adapters."""

from .base import PICKER_TITLE, ConfirmCallback, PickerBackend, PickerEntry, build_entries
from .builtin import BuiltinPicker
from .fzf_lua import FzfLuaPicker
from .registry import PickerRegistry
from .runtime import build_picker_registry
from .snacks import SnacksPicker
from .telescope import TelescopePicker

__all__ = [
    "BuiltinPicker",
    "ConfirmCallback",
    "FzfLuaPicker",
    "PICKER_TITLE",
    "PickerBackend",
    "PickerEntry",
    "PickerRegistry",
    "SnacksPicker",
    "TelescopePicker",
    "build_entries",
    "build_picker_registry",
]
