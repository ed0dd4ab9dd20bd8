"""Plugin entry point: setup plus the open/close/toggle/create/list surface."""

from __future__ import annotations

from dataclasses import replace
from functools import partial
from pathlib import Path

from quick_scratch.commands import CommandDispatchError, CommandRegistry, register_builtin_commands
from quick_scratch.config import (
    ConfigOverrides,
    ScratchConfig,
    center_float_window,
    load_effective_config,
)
from quick_scratch.errors import ScratchError
from quick_scratch.host import EditorHost, WindowContext
from quick_scratch.logging import DebugLogger
from quick_scratch.pickers import PickerRegistry, build_entries, build_picker_registry
from quick_scratch.session import ScratchSession
from quick_scratch.store import (
    create_named_scratch_file,
    current_branch,
    list_files_by_recency,
    resolve_scratch_directory,
    resolve_scratch_path,
)

NAME_PROMPT = "Name for the new scratch file (leave blank for default): "


class ScratchPlugin:
    """Owns the configuration, the session state machine and the pickers."""

    def __init__(self, host: EditorHost, config: ScratchConfig, cwd: Path | None = None) -> None:
        width, height = host.editor_size()
        self._config = replace(
            config,
            float_window_style=center_float_window(config.float_window_style, width, height),
        )
        self._host = host
        self._cwd = cwd
        self._logger = DebugLogger(
            path=self._config.log_file,
            level=self._config.log_level,
            on_error=partial(host.notify, level="error"),
        )
        self._session = ScratchSession(host, self._config, self._logger, cwd=cwd)
        self._pickers: PickerRegistry = build_picker_registry(host)
        self._commands = CommandRegistry()
        register_builtin_commands(
            self._commands,
            open_scratch=self.open,
            close_scratch=self.close,
            toggle_scratch=self.toggle,
            create_scratch=self.create,
            list_scratches=self.list,
            resolve_path=self._resolve_path,
        )

    @property
    def config(self) -> ScratchConfig:
        return self._config

    @property
    def session(self) -> ScratchSession:
        return self._session

    @property
    def logger(self) -> DebugLogger:
        return self._logger

    @property
    def commands(self) -> CommandRegistry:
        return self._commands

    def scratch_directory(self) -> Path:
        """Resolve (and create) the directory for this workspace and branch."""
        return resolve_scratch_directory(
            self._config.scratch_root,
            cwd=self._cwd,
            branch_lookup=partial(current_branch, timeout=self._config.git_timeout_seconds),
        )

    def _resolve_path(self, raw: str) -> Path:
        return resolve_scratch_path(self.scratch_directory(), raw)

    def open(self, path: Path | None = None) -> WindowContext | None:
        """Open path, or the most recent scratch file, in the floating window."""
        return self._session.open(path)

    def close(self) -> bool:
        """Save and close the scratch window; False when the save failed and it stays open."""
        return self._session.close()

    def toggle(self) -> WindowContext | None:
        """Open the scratch window when closed, close it when open."""
        return self._session.toggle()

    def create(self) -> Path:
        """Prompt for a name and create a new scratch file; blank uses a generated name."""
        chosen = self._host.input(NAME_PROMPT).strip()
        path = create_named_scratch_file(
            self.scratch_directory(),
            extension=self._config.default_file_extension,
            name=chosen or None,
        )
        self._logger.log(f"Created scratch file: {path}")
        return path

    def list(self) -> None:
        """Show this workspace's scratch files in the configured picker."""
        if not self._session.close():
            return
        files = list_files_by_recency(self.scratch_directory())
        picker = self._pickers.select(self._config.picker_provider)
        self._logger.log(f"Listing {len(files)} scratch files with picker '{picker.name}'")
        picker.present(build_entries(files), self.open)

    def run_command(self, line: str) -> object | None:
        """Run an editor subcommand; failures are reported to the user, never raised."""
        self._logger.log(f"Running command: {line!r}")
        try:
            return self._commands.dispatch_line(line)
        except CommandDispatchError as exc:
            self._logger.log(f"Command failed [{exc.code}]: {exc.message}")
            self._host.notify(exc.message, "error")
        except (ScratchError, OSError) as exc:
            self._logger.log(f"Command failed: {exc}")
            self._host.notify(str(exc), "error")
        return None


def setup(
    host: EditorHost,
    options: dict[str, object] | None = None,
    config_path: Path | None = None,
    overrides: ConfigOverrides | None = None,
    cwd: Path | None = None,
) -> ScratchPlugin:
    """Merge defaults, the config file and options, then build the plugin."""
    config = load_effective_config(options=options, config_path=config_path, overrides=overrides)
    return ScratchPlugin(host, config, cwd=cwd)
