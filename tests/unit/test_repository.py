"""Unit tests for repository discovery and branch detection."""

import os
import subprocess

import pytest

from project_statusline.types import RepositoryInfo
from project_statusline.utils import git
from project_statusline.utils.git import (
    FALLBACK_BRANCH,
    NO_GIT_BRANCH,
    find_active_subrepository,
    find_repository_root,
    get_branch,
    locate_repository,
)


def _make_repo(path, mtime=None):
    (path / ".git").mkdir(parents=True)
    if mtime is not None:
        os.utime(path, (mtime, mtime))
    return path


@pytest.mark.unit
class TestFindRepositoryRoot:
    """Tests for the ancestor search."""

    def test_finds_root_from_nested_directory(self, tmp_path):
        repo = _make_repo(tmp_path / "proj")
        nested = repo / "src" / "pkg"
        nested.mkdir(parents=True)

        assert find_repository_root(str(nested)) == str(repo)

    def test_git_file_counts_as_marker(self, tmp_path):
        worktree = tmp_path / "wt"
        worktree.mkdir()
        (worktree / ".git").write_text("gitdir: /elsewhere/.git/worktrees/wt\n")

        assert find_repository_root(str(worktree)) == str(worktree)

    def test_returns_none_without_marker(self, tmp_path, monkeypatch):
        monkeypatch.setattr(git, "_has_git_marker", lambda path: False)

        assert find_repository_root(str(tmp_path)) is None


@pytest.mark.unit
class TestFindActiveSubrepository:
    """Tests for the multi-repo subdirectory scan."""

    def test_picks_most_recently_modified_repo(self, tmp_path):
        _make_repo(tmp_path / "api", mtime=1_000)
        _make_repo(tmp_path / "web", mtime=5_000)
        (tmp_path / "docs").mkdir()

        assert find_active_subrepository(str(tmp_path)) == str(tmp_path / "web")

    def test_none_when_no_subdirectory_is_a_repo(self, tmp_path):
        (tmp_path / "docs").mkdir()
        (tmp_path / "notes.txt").write_text("x")

        assert find_active_subrepository(str(tmp_path)) is None

    def test_none_for_missing_directory(self, tmp_path):
        assert find_active_subrepository(str(tmp_path / "missing")) is None


@pytest.mark.unit
class TestGetBranch:
    """Tests for get_branch."""

    def test_returns_branch(self, fake_git, tmp_path):
        fake_git["branch"] = "feature/login"

        assert get_branch(str(tmp_path)) == "feature/login"
        assert fake_git["calls"] == [
            ["/usr/bin/git", "-C", str(tmp_path), "branch", "--show-current"]
        ]

    def test_no_git_when_tool_missing(self, monkeypatch, tmp_path):
        monkeypatch.setattr(git.shutil, "which", lambda name: None)

        assert get_branch(str(tmp_path)) == NO_GIT_BRANCH == "no-git"

    def test_no_git_when_executable_vanishes(self, monkeypatch, tmp_path):
        def _raise(*args, **kwargs):
            raise FileNotFoundError("git")

        monkeypatch.setattr(git.shutil, "which", lambda name: "/usr/bin/git")
        monkeypatch.setattr(git.subprocess, "run", _raise)

        assert get_branch(str(tmp_path)) == NO_GIT_BRANCH

    def test_main_on_non_zero_exit(self, fake_git, tmp_path):
        fake_git["returncode"] = 128
        fake_git["branch"] = ""

        assert get_branch(str(tmp_path)) == FALLBACK_BRANCH == "main"

    def test_main_on_empty_output(self, fake_git, tmp_path):
        fake_git["branch"] = ""

        assert get_branch(str(tmp_path)) == FALLBACK_BRANCH

    def test_main_on_timeout(self, monkeypatch, tmp_path):
        def _raise(args, **kwargs):
            raise subprocess.TimeoutExpired(args, 5)

        monkeypatch.setattr(git.shutil, "which", lambda name: "/usr/bin/git")
        monkeypatch.setattr(git.subprocess, "run", _raise)

        assert get_branch(str(tmp_path)) == FALLBACK_BRANCH


@pytest.mark.unit
class TestLocateRepository:
    """Tests for locate_repository."""

    def test_ancestor_repository(self, fake_git, tmp_path):
        repo = _make_repo(tmp_path / "proj")
        fake_git["branch"] = "develop"

        info = locate_repository(str(repo / "src"))

        assert info == RepositoryInfo(root=str(repo), branch="develop")
        assert info.display_branch == "develop"
        assert info.project_name == "proj"

    def test_multi_repo_fallback(self, fake_git, tmp_path, monkeypatch):
        workspace = tmp_path / "workspace"
        _make_repo(workspace / "api", mtime=1_000)
        _make_repo(workspace / "web", mtime=2_000)
        monkeypatch.setattr(git, "find_repository_root", lambda path: None)

        info = locate_repository(str(workspace))

        assert info is not None
        assert info.is_multi_repo is True
        assert info.root == str(workspace)
        assert info.active_repo_name == "web"
        assert info.display_branch == "web/main"
        assert fake_git["calls"][0][2] == str(workspace / "web")

    def test_absent_when_nothing_found(self, fake_git, tmp_path, monkeypatch):
        (tmp_path / "plain").mkdir()
        monkeypatch.setattr(git, "find_repository_root", lambda path: None)

        assert locate_repository(str(tmp_path)) is None
        assert fake_git["calls"] == []
