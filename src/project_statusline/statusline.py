#!/usr/bin/env python3

import argparse
import os
import sys

from pathlib import Path
from typing import Optional, TextIO

from .config.loader import get_config_path, get_package_dir, resolve_config
from .config.schema import StatusLineConfig
from .renderer import compose_lines
from .types import SessionInput, StatusData
from .utils.debug import debug_log, is_debug_enabled
from .utils.files import find_recent_file
from .utils.git import NO_GIT_BRANCH, locate_repository
from .utils.session import (
    extract_model_name,
    extract_working_directory,
    read_session_input,
)

FALLBACK_OUTPUT = "project -> Branch: main\nClaude Sonnet 4"


def _directory_name(path: str) -> str:
    normalized = os.path.normpath(os.path.abspath(path))
    return os.path.basename(normalized) or normalized


def build_status_data(
    config: StatusLineConfig,
    session: Optional[SessionInput],
    cwd: str,
    debug: bool = False,
) -> StatusData:
    """Resolve project, branch, recent file and model for the composer.

    Args:
        config: Effective configuration
        session: Parsed stdin metadata, if any
        cwd: Process working directory, used when the session names none
        debug: Whether to emit diagnostics on the debug side channel

    Returns:
        StatusData with every field populated
    """
    working_dir = extract_working_directory(session, cwd)
    debug_log(f"Working Directory: {working_dir}", debug)

    repository = locate_repository(working_dir, debug)
    if repository is not None:
        project_root = repository.root
        project_name = repository.project_name
        branch = repository.display_branch
    else:
        project_root = working_dir
        project_name = _directory_name(working_dir)
        branch = NO_GIT_BRANCH

    recent = find_recent_file(
        project_root,
        config.technical.max_depth,
        config.technical.path_shortening,
        debug,
    )

    return StatusData(
        project_name=project_name,
        branch=branch,
        accessed_file=recent.display_path or "",
        model_name=extract_model_name(session),
    )


def generate_status_lines(
    stdin: Optional[TextIO],
    cwd: str,
    script_dir: Path,
    debug: bool = False,
) -> tuple[str, str]:
    """Run the full pipeline: config, stdin, filesystem inspection, composition.

    Args:
        stdin: Stream carrying the session JSON
        cwd: Process working directory
        script_dir: Directory holding statusline-config.json and presets/
        debug: Whether to emit diagnostics on the debug side channel

    Returns:
        (line1, line2) as produced by the composer
    """
    config = resolve_config(get_config_path(script_dir), script_dir, debug)
    debug_log(f"Layout: {config.layout}", debug)

    session = read_session_input(stdin, debug)
    data = build_status_data(config, session, cwd, debug)
    debug_log(f"Status data: {data}", debug)

    return compose_lines(config, data)


def format_output(line1: str, line2: str) -> str:
    """Newline-terminated output; the second line is omitted when empty."""
    if line2:
        return f"{line1}\n{line2}\n"
    return f"{line1}\n"


def create_argument_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser.

    Returns:
        Configured argument parser
    """
    from . import __version__

    parser = argparse.ArgumentParser(
        prog="project-statusline",
        description="Project status line - project, branch and recent file",
        epilog="Reads session JSON from stdin (if any) and prints the status line.",
    )
    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--config-dir",
        type=Path,
        default=None,
        help="Directory holding statusline-config.json and presets/ "
        "(defaults to the package directory)",
    )
    return parser


def main() -> None:
    """Main entry point; always exits 0."""
    parser = create_argument_parser()
    # Never exits non-zero: unknown arguments are ignored, usage errors use defaults
    try:
        args, _ = parser.parse_known_args()
    except SystemExit as e:
        if e.code == 0:
            raise
        args = argparse.Namespace(config_dir=None)

    debug = is_debug_enabled(os.environ)
    script_dir = args.config_dir or get_package_dir()

    try:
        cwd = os.getcwd()
        line1, line2 = generate_status_lines(sys.stdin, cwd, script_dir, debug)
        output = format_output(line1, line2)
    except Exception as e:
        debug_log(f"Status line failed, printing fallback: {e!r}", debug)
        output = FALLBACK_OUTPUT + "\n"

    print(output, end="")


if __name__ == "__main__":
    main()
