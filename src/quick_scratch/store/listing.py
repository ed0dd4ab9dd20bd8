"""Scratch file enumeration ordered by modification time."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(slots=True, frozen=True)
class ScratchFileRecord:
    """One scratch file and its modification time, derived per listing call."""

    path: Path
    mtime_ns: int


def scan_scratch_files(directory: Path) -> list[ScratchFileRecord]:
    """Collect direct, visible regular files in enumeration order."""
    records: list[ScratchFileRecord] = []
    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                if entry.name.startswith("."):
                    continue
                try:
                    if not entry.is_file():
                        continue
                    stat = entry.stat()
                except OSError:
                    continue
                records.append(ScratchFileRecord(path=Path(entry.path), mtime_ns=stat.st_mtime_ns))
    except OSError:
        return []
    return records


def sort_by_recency(records: list[ScratchFileRecord]) -> list[ScratchFileRecord]:
    """Newest first; equal timestamps keep their enumeration order."""
    return sorted(records, key=lambda record: record.mtime_ns, reverse=True)


def list_files_by_recency(directory: Path) -> list[Path]:
    """Return full paths of scratch files, most recently modified first."""
    return [record.path for record in sort_by_recency(scan_scratch_files(directory))]
