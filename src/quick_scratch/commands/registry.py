"""Editor command registration and argument parsing."""

from __future__ import annotations

import shlex
from collections.abc import Callable
from dataclasses import dataclass, field

CommandHandler = Callable[[list[str]], object]


@dataclass(slots=True, frozen=True)
class CommandDispatchError(Exception):
    """Represents deterministic command dispatch failures."""

    code: str
    message: str


@dataclass(slots=True)
class CommandRegistry:
    """In-memory command registry preserving deterministic insertion order."""

    _handlers: dict[str, CommandHandler] = field(default_factory=dict)
    _default: str | None = None

    def register(self, name: str, handler: CommandHandler, *, default: bool = False) -> None:
        """Register a named handler; the default runs when no subcommand is given."""
        self._handlers[name] = handler
        if default:
            self._default = name

    def get(self, name: str) -> CommandHandler | None:
        """Return a handler by name."""
        return self._handlers.get(name)

    def names(self) -> tuple[str, ...]:
        """Return registered command names in deterministic order."""
        return tuple(self._handlers.keys())

    def dispatch(self, name: str, arguments: list[str]) -> object:
        """Dispatch to a registered command by name."""
        handler = self.get(name)
        if handler is None:
            raise CommandDispatchError(code="UNKNOWN_COMMAND", message=f"Unknown command: {name}")
        return handler(arguments)

    def dispatch_line(self, line: str) -> object:
        """Split a command line like 'open notes.md' and dispatch it."""
        try:
            words = shlex.split(line)
        except ValueError as exc:
            raise CommandDispatchError(code="INVALID_ARGUMENTS", message=str(exc)) from exc
        if not words:
            if self._default is None:
                raise CommandDispatchError(code="MISSING_COMMAND", message="No command given.")
            return self.dispatch(self._default, [])
        return self.dispatch(words[0], words[1:])
