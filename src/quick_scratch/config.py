"""Configuration loading and deterministic merge order."""

from __future__ import annotations

import os
import tempfile
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path

PICKER_PROVIDERS = ("builtin", "telescope", "snacks", "fzf_lua")
LOG_LEVELS = ("OFF", "DEBUG")
DEFAULT_FILE_EXTENSION = "md"
DEFAULT_GIT_TIMEOUT_SECONDS = 5.0
CONFIG_FILE_NAME = "config.toml"
LOG_FILE_NAME = "scratch-buffers.log"


class ConfigError(ValueError):
    """Raised when a configuration value is missing or has the wrong shape."""


@dataclass(slots=True, frozen=True)
class FloatWindowStyle:
    """Layout handed to the editor when creating the floating window."""

    relative: str = "editor"
    width: int = 80
    height: int = 24
    row: int = 5
    col: int = 10
    style: str = "minimal"
    border: str = "rounded"

    def to_dict(self) -> dict[str, object]:
        """Return the layout as the keyword table editors expect."""
        return {
            "relative": self.relative,
            "width": self.width,
            "height": self.height,
            "row": self.row,
            "col": self.col,
            "style": self.style,
            "border": self.border,
        }


@dataclass(slots=True, frozen=True)
class ScratchConfig:
    """Fully merged plugin configuration, immutable for the session."""

    scratch_root: Path
    default_file_extension: str
    picker_provider: str
    log_level: str
    log_file: Path
    git_timeout_seconds: float
    float_window_style: FloatWindowStyle

    def to_public_dict(self) -> dict[str, object]:
        """Return serializable config snapshot."""
        return {
            "scratch_root": str(self.scratch_root),
            "default_file_extension": self.default_file_extension,
            "picker_provider": self.picker_provider,
            "log_level": self.log_level,
            "log_file": str(self.log_file),
            "git_timeout_seconds": self.git_timeout_seconds,
            "float_window_style": self.float_window_style.to_dict(),
        }


@dataclass(slots=True, frozen=True)
class ConfigOverrides:
    """Optional startup overrides applied at highest precedence."""

    scratch_root: Path | None = None
    default_file_extension: str | None = None
    picker_provider: str | None = None
    log_level: str | None = None


def default_config_path() -> Path:
    """Return the per-user config file location."""
    base = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(base) / "quick-scratch" / CONFIG_FILE_NAME


def default_log_path() -> Path:
    """Return the per-user diagnostic log location."""
    base = os.environ.get("XDG_CACHE_HOME") or str(Path.home() / ".cache")
    return Path(base) / "quick-scratch" / LOG_FILE_NAME


def default_config() -> ScratchConfig:
    """Build default config."""
    return ScratchConfig(
        scratch_root=Path(tempfile.gettempdir()),
        default_file_extension=DEFAULT_FILE_EXTENSION,
        picker_provider="builtin",
        log_level="OFF",
        log_file=default_log_path(),
        git_timeout_seconds=DEFAULT_GIT_TIMEOUT_SECONDS,
        float_window_style=FloatWindowStyle(),
    )


def load_config_file(path: Path) -> dict[str, object]:
    """Load an optional TOML config file; a missing file yields no settings."""
    if not path.exists():
        return {}
    try:
        with path.open("rb") as handle:
            payload = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"{path} is not valid TOML: {exc}") from exc
    if not isinstance(payload, dict):
        raise ConfigError(f"{path} must contain a top-level table.")
    return payload


def merge_config(base: ScratchConfig, payload: dict[str, object]) -> ScratchConfig:
    """Merge a user table (file or setup options) over a base config."""
    unknown = sorted(set(payload) - _KNOWN_FIELDS)
    if unknown:
        raise ConfigError(f"Unknown config field '{unknown[0]}'.")

    scratch_root = base.scratch_root
    if "scratch_root" in payload:
        scratch_root = Path(_non_empty_str(payload["scratch_root"], "scratch_root")).expanduser()

    extension = base.default_file_extension
    if "default_file_extension" in payload:
        extension = _extension(payload["default_file_extension"], "default_file_extension")

    picker_provider = base.picker_provider
    if "picker_provider" in payload:
        picker_provider = _choice(payload["picker_provider"], "picker_provider", PICKER_PROVIDERS)

    log_level = base.log_level
    if "log_level" in payload:
        log_level = _choice(payload["log_level"], "log_level", LOG_LEVELS)

    log_file = base.log_file
    if "log_file" in payload:
        log_file = Path(_non_empty_str(payload["log_file"], "log_file")).expanduser()

    git_timeout_seconds = base.git_timeout_seconds
    if "git_timeout_seconds" in payload:
        raw_timeout = payload["git_timeout_seconds"]
        if (
            isinstance(raw_timeout, bool)
            or not isinstance(raw_timeout, (int, float))
            or raw_timeout <= 0
        ):
            raise ConfigError("Config field 'git_timeout_seconds' must be a positive number.")
        git_timeout_seconds = float(raw_timeout)

    float_window_style = base.float_window_style
    if "float_window_style" in payload:
        float_window_style = _merge_float_window_style(
            float_window_style, payload["float_window_style"]
        )

    return ScratchConfig(
        scratch_root=scratch_root,
        default_file_extension=extension,
        picker_provider=picker_provider,
        log_level=log_level,
        log_file=log_file,
        git_timeout_seconds=git_timeout_seconds,
        float_window_style=float_window_style,
    )


def apply_overrides(config: ScratchConfig, overrides: ConfigOverrides) -> ScratchConfig:
    """Apply startup overrides at highest precedence."""
    scratch_root = config.scratch_root
    if overrides.scratch_root is not None:
        scratch_root = overrides.scratch_root.expanduser()
    extension = config.default_file_extension
    if overrides.default_file_extension is not None:
        extension = _extension(overrides.default_file_extension, "overrides.default_file_extension")
    picker_provider = config.picker_provider
    if overrides.picker_provider is not None:
        picker_provider = _choice(
            overrides.picker_provider, "overrides.picker_provider", PICKER_PROVIDERS
        )
    log_level = config.log_level
    if overrides.log_level is not None:
        log_level = _choice(overrides.log_level, "overrides.log_level", LOG_LEVELS)
    return replace(
        config,
        scratch_root=scratch_root,
        default_file_extension=extension,
        picker_provider=picker_provider,
        log_level=log_level,
    )


def load_effective_config(
    options: dict[str, object] | None = None,
    config_path: Path | None = None,
    overrides: ConfigOverrides | None = None,
) -> ScratchConfig:
    """Load effective config using merge order defaults -> file -> options -> overrides."""
    config = default_config()
    config = merge_config(config, load_config_file(config_path or default_config_path()))
    if options:
        config = merge_config(config, options)
    return apply_overrides(config, overrides or ConfigOverrides())


def center_float_window(
    style: FloatWindowStyle, editor_width: int, editor_height: int
) -> FloatWindowStyle:
    """Return a copy of style positioned in the middle of the editor."""
    return replace(
        style,
        col=(editor_width - style.width) // 2,
        row=(editor_height - style.height) // 2,
    )


_KNOWN_FIELDS = frozenset(
    {
        "scratch_root",
        "default_file_extension",
        "picker_provider",
        "log_level",
        "log_file",
        "git_timeout_seconds",
        "float_window_style",
    }
)

_STYLE_INT_FIELDS = ("width", "height", "row", "col")
_STYLE_STR_FIELDS = ("relative", "style", "border")


def _merge_float_window_style(base: FloatWindowStyle, value: object) -> FloatWindowStyle:
    if not isinstance(value, dict):
        raise ConfigError("Config section 'float_window_style' must be a table.")
    unknown = sorted(set(value) - set(_STYLE_INT_FIELDS) - set(_STYLE_STR_FIELDS))
    if unknown:
        raise ConfigError(f"Unknown config field 'float_window_style.{unknown[0]}'.")
    changes: dict[str, object] = {}
    for field in _STYLE_INT_FIELDS:
        if field not in value:
            continue
        raw = value[field]
        if isinstance(raw, bool) or not isinstance(raw, int):
            raise ConfigError(f"Config field 'float_window_style.{field}' must be an integer.")
        if field in ("width", "height") and raw < 1:
            raise ConfigError(
                f"Config field 'float_window_style.{field}' must be a positive integer."
            )
        changes[field] = raw
    for field in _STYLE_STR_FIELDS:
        if field in value:
            changes[field] = _non_empty_str(value[field], f"float_window_style.{field}")
    return replace(base, **changes)


def _non_empty_str(value: object, name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"Config field '{name}' must be a non-empty string.")
    return value


def _extension(value: object, name: str) -> str:
    extension = _non_empty_str(value, name).strip().lstrip(".")
    if not extension or "/" in extension:
        raise ConfigError(f"Config field '{name}' must be a bare file extension such as 'md'.")
    return extension


def _choice(value: object, name: str, choices: tuple[str, ...]) -> str:
    if not isinstance(value, str) or value not in choices:
        raise ConfigError(f"Config field '{name}' must be one of: {', '.join(choices)}.")
    return value
