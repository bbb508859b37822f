"""Git repository discovery and branch detection."""

import os
import shutil
import subprocess

from typing import Optional

from ..types import RepositoryInfo
from .debug import debug_log

GIT_MARKER = ".git"
GIT_TIMEOUT = 5  # seconds

NO_GIT_BRANCH = "no-git"
FALLBACK_BRANCH = "main"


def _has_git_marker(path: str) -> bool:
    # .git is a file in worktrees and submodules
    return os.path.exists(os.path.join(path, GIT_MARKER))


def find_repository_root(start_path: str) -> Optional[str]:
    """Walk up from start_path to the nearest directory containing .git.

    Args:
        start_path: Directory to start from

    Returns:
        Repository root, or None if the filesystem root is reached first
    """
    current = os.path.abspath(start_path)

    while current:
        if _has_git_marker(current):
            return current

        parent = os.path.dirname(current)
        if not parent or parent == current:
            return None
        current = parent

    return None


def find_active_subrepository(start_path: str) -> Optional[str]:
    """Find the most recently modified immediate subdirectory that is a git repository.

    Args:
        start_path: Directory whose children are scanned

    Returns:
        Path of the most recently modified repository, or None if there is none
    """
    try:
        with os.scandir(start_path) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError:
        return None

    best_path: Optional[str] = None
    best_mtime = float("-inf")

    for entry in entries:
        try:
            if not entry.is_dir() or not _has_git_marker(entry.path):
                continue
            mtime = entry.stat().st_mtime
        except OSError:
            continue

        if mtime > best_mtime:
            best_path = entry.path
            best_mtime = mtime

    return best_path


def get_branch(repository_path: str) -> str:
    """Get the current branch name via ``git -C <path> branch --show-current``.

    Args:
        repository_path: Repository to query

    Returns:
        Branch name; "no-git" if git is not installed, "main" if git fails
        or prints nothing (e.g. detached HEAD)
    """
    git = shutil.which("git")
    if git is None:
        return NO_GIT_BRANCH

    try:
        result = subprocess.run(
            [git, "-C", repository_path, "branch", "--show-current"],
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            text=True,
            timeout=GIT_TIMEOUT,
        )
    except FileNotFoundError:
        return NO_GIT_BRANCH
    except (subprocess.SubprocessError, OSError):
        return FALLBACK_BRANCH

    branch = (result.stdout or "").strip()
    if result.returncode != 0 or not branch:
        return FALLBACK_BRANCH
    return branch


def locate_repository(start_path: str, debug: bool = False) -> Optional[RepositoryInfo]:
    """Locate the repository for a working directory.

    Checks start_path and its ancestors first. If none is a repository, the
    immediate subdirectories of start_path are scanned and the most recently
    modified repository among them becomes the active one, with start_path
    as the project root.

    Args:
        start_path: Working directory
        debug: Whether to emit diagnostics on the debug side channel

    Returns:
        RepositoryInfo with branch resolved, or None if no repository was found
    """
    root = find_repository_root(start_path)
    if root is not None:
        branch = get_branch(root)
        debug_log(f"Repository root: {root} (branch {branch})", debug)
        return RepositoryInfo(root=root, branch=branch)

    active = find_active_subrepository(start_path)
    if active is not None:
        branch = get_branch(active)
        debug_log(f"Multi-repo fallback: active {active} (branch {branch})", debug)
        return RepositoryInfo(
            root=os.path.abspath(start_path),
            branch=branch,
            is_multi_repo=True,
            active_repo_name=os.path.basename(active),
            active_repo_path=active,
        )

    debug_log(f"No repository found for {start_path}", debug)
    return None
