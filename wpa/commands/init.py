"""
wpa init command.

Write a commented wp-automator.toml with default values.
"""

import sys
from pathlib import Path
from typing import Any

from wp_automator.config import CONFIG_FILE_NAME, ConfigError, write_default_config
from wpa.cli import WPAError


def init_command(args: Any) -> int:
    """
    Execute init command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    if args.config:
        path = Path(args.config)
    else:
        path = Path(args.project_dir or ".") / CONFIG_FILE_NAME

    if path.exists() and not args.force:
        print(f"Error: {path} already exists (use --force)", file=sys.stderr)
        return 1

    try:
        write_default_config(path)
    except ConfigError as e:
        raise WPAError(str(e)) from e

    print(f"Wrote {path}")
    return 0
