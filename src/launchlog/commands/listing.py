"""launchlog levels / channels — list the available levels and channels."""

from launchlog.channels import format_channel_list
from launchlog.levels import LoggingLevel


LEVEL_DESCRIPTIONS = {
    LoggingLevel.CRITICAL: 'Only errors and warnings',
    LoggingLevel.NORMAL:   'Everything except debug and trace',
    LoggingLevel.DEBUG:    'Everything',
}


def register(subparsers):
    """Register the 'levels' and 'channels' subcommands."""
    p = subparsers.add_parser("levels", help="List logging levels")
    p.set_defaults(func=run_levels)

    p = subparsers.add_parser("channels", help="List record channels")
    p.set_defaults(func=run_channels)


def format_level_list() -> str:
    """Format the logging levels with their severity ceilings."""
    lines = ["Available levels:"]
    max_name = max(len(level.value) for level in LoggingLevel)
    for level in LoggingLevel:
        ceiling = level.max_severity().name.lower()
        desc = LEVEL_DESCRIPTIONS[level]
        lines.append(f"  {level.value:<{max_name}}  up to {ceiling:<5}  {desc}")
    return "\n".join(lines)


def run_levels(args):
    print(format_level_list())
    return 0


def run_channels(args):
    print(format_channel_list())
    return 0
