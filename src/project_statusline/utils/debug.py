"""Debug logging utilities."""

import os
import sys
import time

from typing import Mapping

DEBUG_ENV_VAR = "STATUSLINE_DEBUG"
LOG_FILE_NAME = "statusline_debug.log"


def is_debug_enabled(environ: Mapping[str, str]) -> bool:
    """Check whether the debug side channel was requested."""
    return environ.get(DEBUG_ENV_VAR) == "true"


def get_logs_dir() -> str:
    return os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "logs")


def debug_log(message: str, enabled: bool = False) -> None:
    """Append a debug message to the debug log file if debug mode is enabled.

    Never writes to stdout; if the log file cannot be written the message goes
    to stderr instead.

    Args:
        message: Debug message to log
        enabled: Whether debug mode is on for this run
    """
    if not enabled:
        return

    logs_dir = get_logs_dir()
    log_file = os.path.join(logs_dir, LOG_FILE_NAME)
    timestamp = time.strftime("%Y-%m-%d %H:%M:%S")
    log_message = f"[{timestamp}] {message}\n"

    try:
        os.makedirs(logs_dir, exist_ok=True)
        with open(log_file, "a", encoding="utf-8") as f:
            f.write(log_message)
    except OSError:
        print(f"DEBUG (couldn't write to {log_file}): {message}", file=sys.stderr)
