"""Default configuration for Project Status Line."""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .schema import StatusLineConfig

CONFIG_FILE_NAME = "statusline-config.json"
PRESETS_DIR_NAME = "presets"
DEFAULT_PRESET = "default"

LINE2 = "line2"

DEFAULT_LAYOUT = "two-line"
DEFAULT_SEPARATOR = " -> "
DEFAULT_MAX_DEPTH = 3
DEFAULT_PATH_SHORTENING = 3

DEFAULT_COMPONENTS: dict[str, dict[str, Any]] = {
    "project": {"show": True, "label": "", "suffix": "", "position": 1},
    "branch": {"show": True, "label": "Branch:", "suffix": "", "position": 2},
    "accessed": {"show": True, "label": "Accessed:", "suffix": "", "position": 3},
    "model": {"show": True, "label": "", "suffix": "", "position": LINE2},
}

# Passed through to the host terminal untouched
DEFAULT_COLORS: dict[str, str] = {
    "project": "cyan",
    "branch": "magenta",
    "accessed": "blue",
    "model": "green",
    "separator": "dim",
}


def get_default_config() -> "StatusLineConfig":
    """Generate the default status line configuration."""
    from .schema import StatusLineConfig

    return StatusLineConfig()
