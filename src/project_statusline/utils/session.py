"""Session metadata read from stdin."""

import json
import select
import sys

from typing import Any, Optional, TextIO

from ..types import SessionInput
from .debug import debug_log

DEFAULT_MODEL_NAME = "Claude Sonnet 4"
MODEL_PREFIX = "Claude "

STDIN_POLL_ATTEMPTS = 5
STDIN_POLL_INTERVAL = 0.01  # seconds


def _is_tty(stream: TextIO) -> bool:
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False


def read_stdin(
    stream: Optional[TextIO] = None,
    attempts: int = STDIN_POLL_ATTEMPTS,
    interval: float = STDIN_POLL_INTERVAL,
) -> Optional[str]:
    """Read all of stdin if input is available, without waiting indefinitely.

    Polls the stream a bounded number of times; a terminal is never read.
    Streams that cannot be polled (no file descriptor, Windows pipes) are read
    directly unless they are a terminal.

    Args:
        stream: Stream to read, defaults to sys.stdin
        attempts: Number of availability checks before giving up
        interval: Seconds each check waits

    Returns:
        Stream contents, or None if nothing was available
    """
    stream = sys.stdin if stream is None else stream
    if stream is None or _is_tty(stream):
        return None

    try:
        stream.fileno()
    except (OSError, ValueError):
        return stream.read()

    for _ in range(max(attempts, 1)):
        try:
            ready, _, _ = select.select([stream], [], [], interval)
        except (OSError, ValueError):
            return stream.read()
        if ready:
            return stream.read()

    return None


def parse_session_input(text: Optional[str], debug: bool = False) -> Optional[SessionInput]:
    """Parse stdin text into SessionInput.

    Returns:
        SessionInput, or None for empty input, invalid JSON or a non-object
    """
    if text is None or not text.strip():
        return None

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        debug_log(f"Warning: stdin is not valid JSON: {e}", debug)
        return None

    if not isinstance(payload, dict):
        debug_log("Warning: stdin JSON is not an object", debug)
        return None

    return SessionInput.from_payload(payload)


def read_session_input(
    stream: Optional[TextIO] = None, debug: bool = False
) -> Optional[SessionInput]:
    """Read and parse session metadata from stdin."""
    text = read_stdin(stream)
    debug_log(f"Stdin length: {len(text) if text is not None else 'none'}", debug)
    return parse_session_input(text, debug)


def _non_empty_str(value: Any) -> Optional[str]:
    if isinstance(value, str) and value:
        return value
    return None


def extract_model_name(session: Optional[SessionInput]) -> str:
    """Extract the model display name with fallbacks.

    Precedence: model.display_name, model.name (both prefixed with "Claude "),
    modelName, model as a plain string, then the default model name.
    """
    if session is None:
        return DEFAULT_MODEL_NAME

    model = session.model
    if isinstance(model, dict):
        display_name = _non_empty_str(model.get("display_name"))
        if display_name:
            return MODEL_PREFIX + display_name

        name = _non_empty_str(model.get("name"))
        if name:
            return MODEL_PREFIX + name

    if session.model_name:
        return session.model_name

    if isinstance(model, str) and model:
        return model

    return DEFAULT_MODEL_NAME


def extract_working_directory(session: Optional[SessionInput], fallback_cwd: str) -> str:
    """Working directory from workspace.current_dir, else the process cwd."""
    if session is not None and session.current_dir:
        return session.current_dir
    return fallback_cwd
