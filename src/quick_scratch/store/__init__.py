"""Scratch file storage: directory resolution, naming and listing."""

from .listing import ScratchFileRecord, list_files_by_recency, scan_scratch_files, sort_by_recency
from .naming import DEFAULT_FILENAME_PATTERN, synthesize_default_filename
from .scratch import (
    create_named_scratch_file,
    delete_scratch_files,
    get_or_create_latest_scratch_file,
    resolve_scratch_path,
)
from .workspace import (
    GIT_TIMEOUT_SECONDS,
    BranchLookup,
    current_branch,
    read_git_branch,
    resolve_scratch_directory,
    workspace_name,
)

__all__ = [
    "BranchLookup",
    "DEFAULT_FILENAME_PATTERN",
    "GIT_TIMEOUT_SECONDS",
    "ScratchFileRecord",
    "create_named_scratch_file",
    "current_branch",
    "delete_scratch_files",
    "get_or_create_latest_scratch_file",
    "list_files_by_recency",
    "read_git_branch",
    "resolve_scratch_directory",
    "resolve_scratch_path",
    "scan_scratch_files",
    "sort_by_recency",
    "synthesize_default_filename",
    "workspace_name",
]
