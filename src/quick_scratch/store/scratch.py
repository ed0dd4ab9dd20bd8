"""Locate, create and remove scratch files."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from quick_scratch.errors import InvalidArgumentError, ScratchIOError
from quick_scratch.store.listing import list_files_by_recency
from quick_scratch.store.naming import synthesize_default_filename
from quick_scratch.store.workspace import BranchLookup, resolve_scratch_directory


def create_named_scratch_file(
    directory: Path,
    extension: str | None = None,
    name: str | None = None,
) -> Path:
    """Create (or touch) a scratch file without truncating existing content.

    ``name`` is used verbatim when given; otherwise a default name is
    synthesized from ``extension``. At least one of the two is required.
    """
    if not name:
        if not extension:
            raise InvalidArgumentError("Either `name` or `extension` must be provided.")
        name = synthesize_default_filename(extension)
    path = Path(directory) / name
    try:
        with path.open("a", encoding="utf-8"):
            pass
    except OSError as exc:
        raise ScratchIOError(f"Could not open file: {path}", path) from exc
    return path


def get_or_create_latest_scratch_file(
    root: Path,
    extension: str,
    cwd: Path | None = None,
    branch_lookup: BranchLookup | None = None,
) -> Path:
    """Return the most recently modified scratch file, creating one if there is none."""
    directory = resolve_scratch_directory(root, cwd=cwd, branch_lookup=branch_lookup)
    files = list_files_by_recency(directory)
    if files:
        return files[0]
    return create_named_scratch_file(directory, extension=extension)


def resolve_scratch_path(directory: Path, raw: str) -> Path:
    """Bare names refer to files in the scratch directory; other paths are taken as given."""
    candidate = Path(raw).expanduser()
    if candidate.is_absolute() or len(candidate.parts) > 1:
        return candidate
    return Path(directory) / candidate


def delete_scratch_files(paths: Iterable[Path]) -> tuple[Path, ...]:
    """Remove scratch files, returning the ones actually removed."""
    removed: list[Path] = []
    for path in paths:
        try:
            Path(path).unlink()
        except FileNotFoundError:
            continue
        except OSError as exc:
            raise ScratchIOError(f"Could not delete file: {path}", path) from exc
        removed.append(Path(path))
    return tuple(removed)
