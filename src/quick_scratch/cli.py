"""Command-line access to scratch files outside the editor."""

from __future__ import annotations

import argparse
import json
import sys
from functools import partial
from pathlib import Path
from typing import TextIO

from quick_scratch.config import (
    ConfigError,
    ConfigOverrides,
    default_config_path,
    load_effective_config,
)
from quick_scratch.errors import ScratchError
from quick_scratch.logging import DebugLogger
from quick_scratch.store import (
    create_named_scratch_file,
    current_branch,
    delete_scratch_files,
    get_or_create_latest_scratch_file,
    list_files_by_recency,
    resolve_scratch_directory,
    resolve_scratch_path,
)


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for the quick-scratch command."""
    parser = argparse.ArgumentParser(
        prog="quick-scratch",
        description="Manage scratch files scoped to the current directory and git branch.",
    )
    parser.add_argument("--config", required=False, default=None, help="Path to config.toml.")
    parser.add_argument("--scratch-root", required=False, default=None)
    parser.add_argument("--extension", required=False, default=None)
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("dir", help="Print (and create) the scratch directory.")
    subparsers.add_parser("latest", help="Print the newest scratch file, creating one if needed.")
    new_parser = subparsers.add_parser("new", help="Create a scratch file.")
    new_parser.add_argument("name", nargs="?", default=None)
    subparsers.add_parser("list", help="List scratch files, newest first.")
    delete_parser = subparsers.add_parser("delete", help="Delete scratch files.")
    delete_parser.add_argument("paths", nargs="+")
    subparsers.add_parser("config", help="Print the effective configuration as JSON.")
    log_parser = subparsers.add_parser("log", help="Print recent diagnostic log lines.")
    log_parser.add_argument("--limit", type=int, default=50)
    return parser


def run(args: argparse.Namespace, out_stream: TextIO, cwd: Path | None = None) -> int:
    """Execute one parsed command, writing results to out_stream."""
    overrides = ConfigOverrides(
        scratch_root=Path(args.scratch_root) if args.scratch_root is not None else None,
        default_file_extension=args.extension,
    )
    config_path = Path(args.config) if args.config is not None else default_config_path()
    config = load_effective_config(config_path=config_path, overrides=overrides)
    logger = DebugLogger(path=config.log_file, level=config.log_level)
    branch_lookup = partial(current_branch, timeout=config.git_timeout_seconds)

    if args.command == "config":
        out_stream.write(f"{json.dumps(config.to_public_dict(), sort_keys=True, indent=2)}\n")
        return 0
    if args.command == "log":
        for line in logger.read(limit=args.limit):
            out_stream.write(f"{line}\n")
        return 0
    if args.command == "latest":
        path = get_or_create_latest_scratch_file(
            config.scratch_root,
            config.default_file_extension,
            cwd=cwd,
            branch_lookup=branch_lookup,
        )
        out_stream.write(f"{path}\n")
        return 0

    directory = resolve_scratch_directory(config.scratch_root, cwd=cwd, branch_lookup=branch_lookup)
    if args.command == "dir":
        out_stream.write(f"{directory}\n")
    elif args.command == "new":
        path = create_named_scratch_file(
            directory, extension=config.default_file_extension, name=args.name
        )
        logger.log(f"Created scratch file: {path}")
        out_stream.write(f"{path}\n")
    elif args.command == "list":
        for path in list_files_by_recency(directory):
            out_stream.write(f"{path}\n")
    elif args.command == "delete":
        targets = [resolve_scratch_path(directory, raw) for raw in args.paths]
        for path in delete_scratch_files(targets):
            logger.log(f"Deleted scratch file: {path}")
            out_stream.write(f"{path}\n")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entrypoint for the quick-scratch command."""
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    try:
        return run(args, out_stream=sys.stdout)
    except (ConfigError, ScratchError, OSError) as exc:
        sys.stderr.write(f"quick-scratch: {exc}\n")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
