"""
wpa run command.

Run one or more lifecycle hooks in the order given.
"""

import sys
from pathlib import Path
from typing import Any

from wp_automator.config import ConfigError, load_config
from wp_automator.plugin import Automator, HookError
from wpa.cli import WPAError


def run_command(args: Any) -> int:
    """
    Execute run command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 whenever the hooks complete, even with item failures)
    """
    if not args.targets:
        print("Error: No events specified", file=sys.stderr)
        print("Usage: wpa run <event> [<event> ...]", file=sys.stderr)
        return 1

    project_dir = Path(args.project_dir) if args.project_dir else None
    config_file = Path(args.config) if args.config else None

    try:
        config = load_config(project_dir, config_file, vendor_dir=args.vendor_dir)
    except ConfigError as e:
        raise WPAError(str(e)) from e

    automator = Automator(config)

    for event in args.targets:
        try:
            outcome = automator.dispatch(event)
        except HookError as e:
            raise WPAError(str(e)) from e

        if not args.verbose:
            continue

        if outcome.skipped:
            print(f"{event}: skipped ({outcome.skipped})")
        else:
            result = outcome.result
            print(
                f"{event}: {result.processed} item(s), "
                f"{len(result.failures)} failure(s)"
            )

    return 0
