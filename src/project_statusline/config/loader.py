"""Configuration file loading and preset resolution."""

import json

from pathlib import Path
from typing import Union

from pydantic import ValidationError

from ..utils.debug import debug_log
from .defaults import (
    CONFIG_FILE_NAME,
    DEFAULT_PRESET,
    PRESETS_DIR_NAME,
    get_default_config,
)
from .schema import StatusLineConfig

PathLike = Union[str, Path]


class ConfigError(Exception):
    """A configuration file could not be read, parsed or validated."""

    def __init__(self, path: PathLike, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = Path(path)
        self.reason = reason


def get_package_dir() -> Path:
    """Directory holding the bundled presets and the default config location."""
    return Path(__file__).resolve().parent.parent


def get_config_path(script_dir: PathLike) -> Path:
    """Get the full configuration file path for a script directory."""
    return Path(script_dir) / CONFIG_FILE_NAME


def get_preset_path(preset: str, script_dir: PathLike) -> Path:
    return Path(script_dir) / PRESETS_DIR_NAME / f"{preset}.json"


def load_config_file(path: PathLike) -> StatusLineConfig:
    """Load and validate a JSON configuration file.

    Args:
        path: Path to the JSON file

    Returns:
        Validated configuration

    Raises:
        ConfigError: If the file is missing, unreadable, not JSON or fails validation
    """
    try:
        with open(path, encoding="utf-8") as f:
            config_data = json.load(f)
    except OSError as e:
        raise ConfigError(path, f"cannot read file ({e.strerror or e})") from e
    except json.JSONDecodeError as e:
        raise ConfigError(path, f"invalid JSON ({e})") from e

    if not isinstance(config_data, dict):
        raise ConfigError(path, "top-level JSON value must be an object")

    try:
        return StatusLineConfig.model_validate(config_data)
    except ValidationError as e:
        raise ConfigError(path, f"invalid configuration ({e.error_count()} errors)") from e


def load_preset(preset: str, script_dir: PathLike) -> StatusLineConfig:
    """Load a named preset from ``<script_dir>/presets/<preset>.json``.

    Raises:
        ConfigError: If the preset name is unsafe or the file cannot be loaded
    """
    if not preset or Path(preset).name != preset:
        raise ConfigError(get_preset_path(preset, script_dir), "invalid preset name")
    return load_config_file(get_preset_path(preset, script_dir))


def resolve_config(
    config_path: PathLike, script_dir: PathLike, debug: bool = False
) -> StatusLineConfig:
    """Resolve the effective configuration for this run.

    The config file is loaded first; if it names a preset other than
    "default" and that preset loads, the preset replaces it wholesale. Any
    failure falls back to the previous layer, and ultimately to the
    hardcoded defaults. Never raises.

    Args:
        config_path: Path to statusline-config.json
        script_dir: Directory containing the presets/ directory
        debug: Whether to emit diagnostics on the debug side channel

    Returns:
        Effective configuration
    """
    try:
        config = load_config_file(config_path)
    except ConfigError as e:
        debug_log(f"Config unavailable, using defaults: {e}", debug)
        return get_default_config()

    debug_log(f"Loaded config from {config_path}", debug)

    if config.preset is None or config.preset == DEFAULT_PRESET:
        return config

    try:
        preset_config = load_preset(config.preset, script_dir)
    except ConfigError as e:
        debug_log(f"Preset '{config.preset}' unavailable: {e}", debug)
        return config

    debug_log(f"Applied preset '{config.preset}'", debug)
    return preset_config
