"""Picker registry with deterministic selection behavior."""

from __future__ import annotations

from dataclasses import dataclass, field

from quick_scratch.pickers.base import PickerBackend


@dataclass(slots=True)
class PickerRegistry:
    """Ordered picker registry with explicit fallback picker."""

    _pickers: dict[str, PickerBackend] = field(default_factory=dict)
    _fallback: PickerBackend | None = None

    def register(self, picker: PickerBackend, *, fallback: bool = False) -> None:
        """Register a picker in deterministic insertion order."""
        self._pickers[picker.name] = picker
        if fallback:
            self._fallback = picker

    def select(self, name: str) -> PickerBackend:
        """Return the named picker, else the fallback."""
        picker = self._pickers.get(name)
        if picker is not None:
            return picker
        if self._fallback is not None:
            return self._fallback
        raise LookupError(f"No picker registered for provider: {name}")

    def names(self) -> tuple[str, ...]:
        """Return registered picker names in deterministic order."""
        return tuple(self._pickers.keys())
