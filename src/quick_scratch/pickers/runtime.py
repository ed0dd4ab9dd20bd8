"""Runtime picker registry construction."""

from __future__ import annotations

from quick_scratch.host import EditorHost
from quick_scratch.pickers.builtin import BuiltinPicker
from quick_scratch.pickers.fzf_lua import FzfLuaPicker
from quick_scratch.pickers.registry import PickerRegistry
from quick_scratch.pickers.snacks import SnacksPicker
from quick_scratch.pickers.telescope import TelescopePicker


def build_picker_registry(host: EditorHost) -> PickerRegistry:
    """Register every supported picker, with the built-in list as fallback."""
    registry = PickerRegistry()
    registry.register(BuiltinPicker(host), fallback=True)
    registry.register(TelescopePicker(host))
    registry.register(SnacksPicker(host))
    registry.register(FzfLuaPicker(host))
    return registry
