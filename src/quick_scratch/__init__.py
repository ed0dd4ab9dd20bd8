"""Workspace- and branch-scoped scratch files for editors."""

from .config import ConfigError, ConfigOverrides, FloatWindowStyle, ScratchConfig
from .errors import GitUnavailableError, InvalidArgumentError, ScratchError, ScratchIOError
from .plugin import ScratchPlugin, setup
from .session import ScratchSession, SessionState

__all__ = [
    "ConfigError",
    "ConfigOverrides",
    "FloatWindowStyle",
    "GitUnavailableError",
    "InvalidArgumentError",
    "ScratchConfig",
    "ScratchError",
    "ScratchIOError",
    "ScratchPlugin",
    "ScratchSession",
    "SessionState",
    "setup",
]
