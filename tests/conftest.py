import os
import subprocess

import pytest


def pytest_configure(config):
    """Register custom test markers."""
    config.addinivalue_line("markers", "unit: Unit tests that do not perform real I/O")
    config.addinivalue_line("markers", "integration: Integration tests with mocked I/O")
    config.addinivalue_line("markers", "performance: Benchmarks using pytest-benchmark")


@pytest.fixture
def mock_stdin(monkeypatch):
    """Factory fixture to mock stdin with custom content."""
    import io
    import sys

    def _mock_stdin(content: str):
        stream = io.StringIO(content)
        monkeypatch.setattr(sys, "stdin", stream)
        return stream

    return _mock_stdin


@pytest.fixture
def sample_input_payload():
    """Sample statusline input payload."""
    return {
        "session_id": "abc123-def456",
        "workspace": {"current_dir": "/path/to/project"},
        "model": {"id": "claude-sonnet-4-20250514", "display_name": "Sonnet 4"},
        "version": "1.0.80",
    }


@pytest.fixture
def make_file():
    """Factory fixture creating a file with a fixed modification time."""

    def _make_file(path, mtime: float, content: str = "x"):
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        os.utime(path, (mtime, mtime))
        return path

    return _make_file


@pytest.fixture
def fake_git(monkeypatch):
    """Replace git with a stub reporting a fixed branch.

    Returns a dict whose "branch", "returncode" and "calls" entries can be
    adjusted or inspected by the test.
    """
    state = {"branch": "main", "returncode": 0, "calls": []}

    def _run(args, **kwargs):
        state["calls"].append(args)
        return subprocess.CompletedProcess(
            args, state["returncode"], stdout=state["branch"] + "\n", stderr=None
        )

    monkeypatch.setattr(
        "project_statusline.utils.git.shutil.which", lambda name: "/usr/bin/git"
    )
    monkeypatch.setattr("project_statusline.utils.git.subprocess.run", _run)
    return state
