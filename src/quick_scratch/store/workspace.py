"""Per-workspace, per-branch scratch directory resolution."""

from __future__ import annotations

import subprocess
from collections.abc import Callable
from pathlib import Path

from quick_scratch.errors import GitUnavailableError, ScratchIOError

GIT_TIMEOUT_SECONDS = 5.0
DETACHED_HEAD = "HEAD"

BranchLookup = Callable[[Path], str | None]


def workspace_name(cwd: Path | None = None) -> str:
    """Return the final path segment of the working directory."""
    current = (cwd or Path.cwd()).absolute()
    return current.name


def read_git_branch(cwd: Path, timeout: float | None = GIT_TIMEOUT_SECONDS) -> str:
    """Return the checked-out branch name or raise GitUnavailableError."""
    try:
        completed = subprocess.run(
            ["git", "rev-parse", "--abbrev-ref", "HEAD"],
            cwd=cwd,
            check=False,
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except FileNotFoundError as exc:
        raise GitUnavailableError("git executable not found") from exc
    except subprocess.TimeoutExpired as exc:
        raise GitUnavailableError(f"git did not answer within {timeout} seconds") from exc
    except OSError as exc:
        raise GitUnavailableError(f"git could not be started: {exc}") from exc
    if completed.returncode != 0:
        raise GitUnavailableError(completed.stderr.strip() or "git command failed")
    lines = completed.stdout.strip().splitlines()
    branch = lines[0].strip() if lines else ""
    if not branch:
        raise GitUnavailableError("git reported no branch")
    if branch == DETACHED_HEAD:
        raise GitUnavailableError("repository is in detached HEAD state")
    return branch


def current_branch(cwd: Path, timeout: float | None = GIT_TIMEOUT_SECONDS) -> str | None:
    """Return the branch name, or None when there is no usable branch."""
    try:
        return read_git_branch(cwd, timeout=timeout)
    except GitUnavailableError:
        return None


def resolve_scratch_directory(
    root: Path,
    cwd: Path | None = None,
    branch_lookup: BranchLookup | None = None,
) -> Path:
    """Return root/<workspace>/[<branch>/], creating it when missing."""
    working_dir = (cwd or Path.cwd()).absolute()
    lookup = branch_lookup or current_branch
    directory = Path(root) / workspace_name(working_dir)
    branch = lookup(working_dir)
    if branch is not None:
        directory = directory / branch
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ScratchIOError(f"Could not create scratch directory: {directory}", directory) from exc
    return directory
