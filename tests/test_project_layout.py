from __future__ import annotations

from pathlib import Path


def test_required_package_paths_exist() -> None:
    root = Path(__file__).resolve().parents[1]
    required = [
        "src/quick_scratch/plugin.py",
        "src/quick_scratch/session.py",
        "src/quick_scratch/cli.py",
        "src/quick_scratch/store/__init__.py",
        "src/quick_scratch/pickers/__init__.py",
        "src/quick_scratch/host/__init__.py",
        "src/quick_scratch/commands/__init__.py",
        "src/quick_scratch/logging/__init__.py",
    ]
    for rel in required:
        assert (root / rel).exists(), rel
