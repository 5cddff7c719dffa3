"""
wpa CLI - WP Automator.

Runs the plugin lifecycle hooks from a package manager's scripts.

Usage:
    wpa run <event> [<event> ...]     Run lifecycle hook(s)
    wpa init                          Write default wp-automator.toml
"""

import argparse
import sys


class WPAError(Exception):
    """Base exception for wpa errors."""

    pass


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog="wpa",
        description="WP Automator - plugin tree hooks for package installs",
        add_help=False,
    )

    parser.add_argument(
        "command", nargs="?", choices=["run", "init"], help="Command to run"
    )
    parser.add_argument("-h", "--help", action="store_true", help="Show help")

    # Common options
    parser.add_argument("--vendor-dir", help="Vendor directory (overrides config)")
    parser.add_argument("--project-dir", help="Project directory (default: cwd)")
    parser.add_argument("--config", help="Config file (default: wp-automator.toml)")
    parser.add_argument("--force", action="store_true", help="Overwrite on init")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")

    # Positional arguments
    parser.add_argument("targets", nargs="*", help="Event names for run")

    return parser


def print_help():
    """Print help message."""
    help_text = """
wpa - WP Automator

Usage:
    wpa run <event> [<event> ...]    Run lifecycle hook(s)
    wpa init                         Write default wp-automator.toml

Events:
    pre-install-cmd                  Remove public copies of pro plugins
    post-install-cmd                 Copy pro plugins into plugins
    post-autoload-dump               Write the mu-plugins autoloader

Options:
    --vendor-dir DIR                 Vendor directory (overrides config)
    --project-dir DIR                Project directory (default: cwd)
    --config FILE                    Config file (default: wp-automator.toml)
    --force                          Overwrite existing config on init
    -v, --verbose                    Verbose output
    -h, --help                       Show this help
"""
    print(help_text.strip())


def main(argv: list[str] | None = None) -> int:
    """Main entry point for wpa CLI."""
    parser = create_parser()

    # argparse reports usage errors through SystemExit(2)
    try:
        args = parser.parse_intermixed_args(argv)
    except SystemExit as e:
        return 0 if e.code == 0 else 1

    try:
        if args.help or args.command is None:
            print_help()
            return 0

        if args.command == "run":
            from wpa.commands.run import run_command

            return run_command(args)

        elif args.command == "init":
            from wpa.commands.init import init_command

            return init_command(args)

    except WPAError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        return 130
    except Exception as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
