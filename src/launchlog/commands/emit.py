"""launchlog emit — render one record through the installed logger.

The record goes through stdlib ``logging`` like any library record, so
the root logger gate, the noise filter and the channel layout all apply::

    launchlog emit info "Mounting routes"
    launchlog emit error "Listening on :8000" --launch
    launchlog emit error "connection reset" --module hyper.client
"""

import argparse
import logging

from launchlog.channels import Channel
from launchlog.levels import Severity


SEVERITY_CHOICES = [s.name.lower() for s in Severity]


def register(subparsers):
    """Register the 'emit' subcommand."""
    p = subparsers.add_parser(
        "emit",
        help="Emit a single log record",
        description=(
            "Emit one record at the given severity. By default it is drawn\n"
            "indented under the previous message (continuation channel)."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("severity", choices=SEVERITY_CHOICES,
                   help="Record severity")
    p.add_argument("message", nargs="+", help="Message text")

    layout = p.add_mutually_exclusive_group()
    layout.add_argument(
        "--launch", action="store_true", default=False,
        help="Launch announcement: always shown, styled as info",
    )
    layout.add_argument(
        "--plain", action="store_true", default=False,
        help="No continuation indent",
    )
    p.add_argument("--module", metavar="NAME", default="launchlog.cli",
                   help="Logger/module name to attribute the record to")

    p.set_defaults(func=run)


def _channel(args):
    if args.launch:
        return Channel.LAUNCH
    if args.plain:
        return Channel.PLAIN
    return Channel.CONTINUATION


def run(args):
    """Execute the emit command."""
    severity = Severity[args.severity.upper()]
    message = " ".join(args.message)
    logging.getLogger(args.module).log(
        severity.stdlib_level(), message, extra={"channel": _channel(args)},
    )
    return 0
