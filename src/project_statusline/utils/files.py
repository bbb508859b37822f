"""Recently modified file discovery."""

import os
import stat

from pathlib import PurePath
from typing import Optional

from ..types import RecentFileResult
from .debug import debug_log

# Shown when nothing was found; decorative only
NO_RECENT_FILES = "no recent files"
DEEP_CONTENT_MARKER = ".../"

_HIDDEN_ATTRIBUTES = stat.FILE_ATTRIBUTE_HIDDEN | stat.FILE_ATTRIBUTE_SYSTEM

# (mtime, path) of the newest file seen so far
Candidate = tuple[float, str]


def _is_hidden(entry: os.DirEntry) -> bool:
    if entry.name.startswith("."):
        return True
    try:
        attributes = getattr(entry.stat(follow_symlinks=False), "st_file_attributes", 0)
    except OSError:
        return False
    return bool(attributes & _HIDDEN_ATTRIBUTES)


def _sorted_entries(directory: str) -> list[os.DirEntry]:
    with os.scandir(directory) as it:
        return sorted((e for e in it if not _is_hidden(e)), key=lambda e: e.name)


def _newer(
    candidate: Optional[Candidate], best: Optional[Candidate]
) -> Optional[Candidate]:
    if candidate is None:
        return best
    if best is None or candidate[0] > best[0]:
        return candidate
    return best


def _is_directory(entry: os.DirEntry) -> bool:
    try:
        return entry.is_dir(follow_symlinks=False)
    except OSError:
        return False


def _file_candidate(entry: os.DirEntry) -> Optional[Candidate]:
    # Unreadable entries (symlink loops, files removed while scanning) are skipped
    try:
        if not entry.is_file():
            return None
        return (entry.stat().st_mtime, entry.path)
    except OSError:
        return None


def _scan_tree(directory: str, level: int, max_depth: int) -> Optional[Candidate]:
    """Newest file below directory; entries directly inside it are at ``level``."""
    best: Optional[Candidate] = None

    for entry in _sorted_entries(directory):
        if _is_directory(entry):
            if level < max_depth:
                best = _newer(_scan_tree(entry.path, level + 1, max_depth), best)
            continue
        best = _newer(_file_candidate(entry), best)

    return best


def _scan_files(directory: str) -> Optional[Candidate]:
    best: Optional[Candidate] = None
    for entry in _sorted_entries(directory):
        best = _newer(_file_candidate(entry), best)
    return best


def _restricted_scan(root: str) -> Optional[Candidate]:
    """Newest file among root's children and its readable immediate subdirectories."""
    best: Optional[Candidate] = None

    for entry in _sorted_entries(root):
        if _is_directory(entry):
            try:
                best = _newer(_scan_files(entry.path), best)
            except OSError:
                continue
        else:
            best = _newer(_file_candidate(entry), best)

    return best


def shorten_path(relative_path: str, path_shortening: int) -> str:
    """Shorten a relative path to first/../second-to-last/last when it is too long.

    Args:
        relative_path: Path relative to the project root
        path_shortening: Segment count allowed before shortening

    Returns:
        Forward-slash path, shortened if it has more than path_shortening segments
    """
    segments = [s for s in relative_path.replace("\\", "/").split("/") if s]

    if len(segments) <= path_shortening or len(segments) < 2:
        return "/".join(segments)

    return f"{segments[0]}/../{segments[-2]}/{segments[-1]}"


def format_display_path(file_path: str, root: str, path_shortening: int) -> str:
    """Display path of a file relative to root, or its bare filename if outside root."""
    try:
        relative = PurePath(os.path.abspath(file_path)).relative_to(os.path.abspath(root))
    except ValueError:
        return os.path.basename(file_path)
    return shorten_path(relative.as_posix(), path_shortening)


def has_deep_content(root: str, max_depth: int) -> bool:
    """Check whether any directory exactly max_depth levels below root has entries.

    Those directories are the ones the bounded search does not descend into.
    Unreadable directories are skipped.
    """
    frontier = [root]

    for _ in range(max_depth):
        next_frontier = []
        for directory in frontier:
            try:
                entries = _sorted_entries(directory)
            except OSError:
                continue
            next_frontier.extend(
                e.path for e in entries if _is_directory(e)
            )
        frontier = next_frontier
        if not frontier:
            return False

    for directory in frontier:
        try:
            with os.scandir(directory) as it:
                if any(True for _ in it):
                    return True
        except OSError:
            continue

    return False


def find_recent_file(
    root: str, max_depth: int, path_shortening: int, debug: bool = False
) -> RecentFileResult:
    """Find the most recently modified file under root.

    Searches at most max_depth levels deep, skipping hidden entries. If the
    scan hits a permission error it is retried on root's immediate children
    and readable subdirectories only.

    Args:
        root: Project root to search
        max_depth: Directory depth bound (files directly in root are level 1)
        path_shortening: Segment count allowed before the path is shortened
        debug: Whether to emit diagnostics on the debug side channel

    Returns:
        RecentFileResult whose display_path is always set
    """
    result = RecentFileResult()
    newest: Optional[Candidate] = None

    try:
        newest = _scan_tree(root, 1, max_depth)
    except PermissionError as e:
        debug_log(f"Permission denied scanning {root}, retrying: {e}", debug)
        try:
            newest = _restricted_scan(root)
        except OSError as retry_error:
            debug_log(f"Restricted scan failed: {retry_error}", debug)
    except OSError as e:
        debug_log(f"Recent file scan failed for {root}: {e}", debug)

    if newest is not None:
        result.display_path = format_display_path(newest[1], root, path_shortening)

    result.has_deep_content = has_deep_content(root, max_depth)

    if not result.display_path:
        result.display_path = (
            DEEP_CONTENT_MARKER if result.has_deep_content else NO_RECENT_FILES
        )

    debug_log(f"Recent file: {result.display_path}", debug)
    return result
