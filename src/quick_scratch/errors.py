"""Error types shared by the scratch store, session and command layers."""

from __future__ import annotations


class ScratchError(Exception):
    """Base class for expected, user-reportable scratch failures."""


class InvalidArgumentError(ScratchError, ValueError):
    """Raised when a caller supplies an unusable combination of arguments."""


class ScratchIOError(ScratchError, OSError):
    """Raised when a scratch file or directory cannot be created or written."""

    def __init__(self, message: str, path: object | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self) -> str:
        return self.message


class GitUnavailableError(ScratchError):
    """Raised when the current branch cannot be read from git."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason
