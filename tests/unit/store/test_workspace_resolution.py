from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

import pytest

from quick_scratch.errors import GitUnavailableError, ScratchIOError
from quick_scratch.store import (
    current_branch,
    read_git_branch,
    resolve_scratch_directory,
    workspace_name,
)


def _completed(stdout: str, returncode: int = 0, stderr: str = "") -> subprocess.CompletedProcess:
    return subprocess.CompletedProcess(
        args=["git"], returncode=returncode, stdout=stdout, stderr=stderr
    )


def test_workspace_name_is_final_path_segment(tmp_path: Path) -> None:
    workspace = tmp_path / "home" / "u" / "proj"
    workspace.mkdir(parents=True)

    assert workspace_name(workspace) == "proj"


def test_directory_includes_branch_segment(tmp_path: Path) -> None:
    workspace = tmp_path / "proj"
    workspace.mkdir()
    root = tmp_path / "scratch"

    directory = resolve_scratch_directory(
        root, cwd=workspace, branch_lookup=lambda _: "feature-x"
    )

    assert directory == root / "proj" / "feature-x"
    assert directory.is_dir()
    assert directory.parts[-2:] == ("proj", "feature-x")


def test_directory_without_branch_has_no_extra_segment(tmp_path: Path) -> None:
    workspace = tmp_path / "proj"
    workspace.mkdir()
    root = tmp_path / "scratch"

    directory = resolve_scratch_directory(root, cwd=workspace, branch_lookup=lambda _: None)

    assert directory == root / "proj"
    assert directory.is_dir()
    assert [child.name for child in directory.iterdir()] == []


def test_resolution_is_idempotent(tmp_path: Path) -> None:
    workspace = tmp_path / "proj"
    workspace.mkdir()
    root = tmp_path / "scratch"

    first = resolve_scratch_directory(root, cwd=workspace, branch_lookup=lambda _: "main")
    second = resolve_scratch_directory(root, cwd=workspace, branch_lookup=lambda _: "main")

    assert first == second
    assert second.is_dir()


def test_directory_creation_failure_raises_scratch_io_error(tmp_path: Path) -> None:
    workspace = tmp_path / "proj"
    workspace.mkdir()
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("file in the way", encoding="utf-8")

    with pytest.raises(ScratchIOError) as excinfo:
        resolve_scratch_directory(blocker, cwd=workspace, branch_lookup=lambda _: None)

    assert isinstance(excinfo.value, OSError)
    assert "Could not create scratch directory" in str(excinfo.value)


def test_read_git_branch_trims_output(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    calls: list[list[str]] = []

    def fake_run(cmd: list[str], **kwargs: object) -> subprocess.CompletedProcess:
        calls.append(cmd)
        assert kwargs["cwd"] == tmp_path
        return _completed("feature-x\n")

    monkeypatch.setattr(subprocess, "run", fake_run)

    assert read_git_branch(tmp_path) == "feature-x"
    assert calls == [["git", "rev-parse", "--abbrev-ref", "HEAD"]]


@pytest.mark.parametrize(
    "result",
    [
        _completed("HEAD\n"),
        _completed(""),
        _completed("", returncode=128, stderr="fatal: not a git repository"),
    ],
)
def test_unusable_git_answers_mean_no_branch(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, result: subprocess.CompletedProcess
) -> None:
    monkeypatch.setattr(subprocess, "run", lambda *args, **kwargs: result)

    with pytest.raises(GitUnavailableError):
        read_git_branch(tmp_path)
    assert current_branch(tmp_path) is None


def test_missing_git_executable_means_no_branch(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    def fake_run(*args: object, **kwargs: object) -> subprocess.CompletedProcess:
        raise FileNotFoundError("git")

    monkeypatch.setattr(subprocess, "run", fake_run)

    assert current_branch(tmp_path) is None


def test_hanging_git_is_bounded_by_timeout(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    seen: dict[str, object] = {}

    def fake_run(cmd: list[str], **kwargs: object) -> subprocess.CompletedProcess:
        seen["timeout"] = kwargs["timeout"]
        raise subprocess.TimeoutExpired(cmd, 0.25)

    monkeypatch.setattr(subprocess, "run", fake_run)

    assert current_branch(tmp_path, timeout=0.25) is None
    assert seen["timeout"] == 0.25


@pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")
def test_real_repository_branch_is_used(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))
    workspace = tmp_path / "proj"
    workspace.mkdir()
    subprocess.run(
        ["git", "init", "--initial-branch=feature-x"],
        cwd=workspace,
        check=True,
        capture_output=True,
    )
    subprocess.run(
        [
            "git",
            "-c",
            "user.name=Scratch Test",
            "-c",
            "user.email=scratch@example.invalid",
            "-c",
            "commit.gpgsign=false",
            "commit",
            "--allow-empty",
            "-m",
            "init",
        ],
        cwd=workspace,
        check=True,
        capture_output=True,
    )

    directory = resolve_scratch_directory(tmp_path / "scratch", cwd=workspace)

    assert directory == tmp_path / "scratch" / "proj" / "feature-x"


@pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")
def test_outside_repository_has_no_branch(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))
    workspace = tmp_path / "proj"
    workspace.mkdir()

    directory = resolve_scratch_directory(tmp_path / "scratch", cwd=workspace)

    assert directory == tmp_path / "scratch" / "proj"
