"""Built-in editor subcommands: toggle, open, close, create, list."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from quick_scratch.commands.registry import CommandDispatchError, CommandHandler, CommandRegistry


def register_builtin_commands(
    registry: CommandRegistry,
    open_scratch: Callable[[Path | None], object],
    close_scratch: Callable[[], object],
    toggle_scratch: Callable[[], object],
    create_scratch: Callable[[], object],
    list_scratches: Callable[[], object],
    resolve_path: Callable[[str], Path],
) -> None:
    """Register the plugin's public operations as editor subcommands.

    ``resolve_path`` turns an ``open`` argument into a path, so bare names land
    in the scratch directory rather than the working directory.
    """
    registry.register("toggle", _no_arguments("toggle", toggle_scratch), default=True)
    registry.register("open", _open_handler(open_scratch, resolve_path))
    registry.register("close", _no_arguments("close", close_scratch))
    registry.register("create", _no_arguments("create", create_scratch))
    registry.register("list", _no_arguments("list", list_scratches))


def _open_handler(
    open_scratch: Callable[[Path | None], object],
    resolve_path: Callable[[str], Path],
) -> CommandHandler:
    def handler(arguments: list[str]) -> object:
        if len(arguments) > 1:
            raise CommandDispatchError(
                code="INVALID_ARGUMENTS",
                message="open accepts at most one path.",
            )
        path = resolve_path(arguments[0]) if arguments else None
        return open_scratch(path)

    return handler


def _no_arguments(name: str, action: Callable[[], object]) -> CommandHandler:
    def handler(arguments: list[str]) -> object:
        if arguments:
            raise CommandDispatchError(
                code="INVALID_ARGUMENTS",
                message=f"{name} takes no arguments.",
            )
        return action()

    return handler
