"""Main CLI entry point for launchlog.

Implements a Docker-style two-pass argument parser:
  1. First pass: extract global flags (--log-level, --no-color, --quiet-init)
  2. Second pass: dispatch to the subcommand

Global flags can appear before OR after the subcommand:
  launchlog --log-level debug emit debug "hello"     # works
  launchlog emit debug "hello" --log-level debug     # also works

Subcommands self-register via the register(subparsers) convention.
"""

import argparse
import sys

from launchlog import style
from launchlog._version import BASE_VERSION, VERSION
from launchlog.config import ConfigError, colors_requested, resolve_level
from launchlog.logger import try_init


# ---------------------------------------------------------------------------
# Global flags (Docker-style: can precede the subcommand)
# ---------------------------------------------------------------------------
GLOBAL_FLAGS = {
    "--log-level": {"aliases": ["-L"], "metavar": "LEVEL", "default": None,
                    "help": "Logging level: critical, normal or debug "
                            "(default: $LAUNCHLOG_LEVEL, config file, normal)"},
    "--no-color": {"action": "store_true", "default": False,
                   "help": "Disable colored output"},
    "--quiet-init": {"action": "store_true", "default": False,
                     "help": "Do not report a failed logger installation"},
}


def _extract_global_flags(argv):
    """Two-pass parse: pull global flags from anywhere in argv.

    Returns (global_namespace, remaining_argv).
    """
    global_parser = argparse.ArgumentParser(add_help=False, allow_abbrev=False)
    for flag, kwargs in GLOBAL_FLAGS.items():
        kw = {k: v for k, v in kwargs.items() if k != "aliases"}
        global_parser.add_argument(flag, *kwargs.get("aliases", []), **kw)

    global_args, remaining = global_parser.parse_known_args(argv)
    return global_args, remaining


# ---------------------------------------------------------------------------
# Subcommand discovery and registration
# ---------------------------------------------------------------------------
def _discover_commands():
    """Import and return all command modules.

    Each module in launchlog.commands must export:
      register(subparsers) — add itself to the subparser
      run(args) — execute the command
    """
    from launchlog.commands import emit, listing
    return [emit, listing]


def _build_parser(commands):
    """Build the main argparse parser with subcommand dispatch."""
    parser = argparse.ArgumentParser(
        prog="launchlog",
        description="launchlog — leveled, colored console logging",
        epilog=(
            "Run 'launchlog <command> --help' for details on a specific command.\n"
            "\n"
            "Global flags (--log-level, --no-color, --quiet-init) can appear\n"
            "before or after the subcommand."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"launchlog {BASE_VERSION} ({VERSION})",
    )

    # Add global flags to main parser too (for --help display)
    for flag, kwargs in GLOBAL_FLAGS.items():
        kw = {k: v for k, v in kwargs.items() if k != "aliases"}
        parser.add_argument(flag, *kwargs.get("aliases", []), **kw)

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        metavar="<command>",
    )

    for cmd_module in commands:
        cmd_module.register(subparsers)

    return parser


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------
def main(argv=None):
    """Main entry point for launchlog CLI.

    Args:
        argv: Command-line arguments. None means sys.argv[1:].

    Returns:
        Exit code (0 = success, 2 = configuration error).
    """
    if argv is None:
        argv = sys.argv[1:]

    # Pass 1: extract global flags from anywhere in the arg list
    global_args, remaining = _extract_global_flags(argv)

    try:
        level = resolve_level(global_args.log_level)
    except ConfigError as e:
        print(f"launchlog: error: {e}", file=sys.stderr)
        return 2

    if not colors_requested(global_args.no_color):
        style.disable()
    try_init(level, verbose=not global_args.quiet_init)

    # Pass 2: parse subcommand args
    parser = _build_parser(_discover_commands())

    if not remaining:
        parser.print_help()
        return 0

    args = parser.parse_args(remaining)

    if not hasattr(args, "func"):
        parser.print_help()
        return 0

    try:
        return args.func(args) or 0
    except KeyboardInterrupt:
        print("\nInterrupted.")
        return 130


if __name__ == "__main__":
    sys.exit(main())
