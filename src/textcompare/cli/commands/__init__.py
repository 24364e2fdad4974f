#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/textcompare/cli/commands/__init__.py
"""Subcommand dispatch for the textcompare CLI."""

import logging
import sys

# Command handlers are imported lazily so that plain comparisons do not load them

logger = logging.getLogger(__name__)


def dispatch_command(args: list[str] | None = None) -> int | None:
    """Run a subcommand if the first argument names one.

    Parameters
    ----------
    args : list[str], optional
        Command line arguments

    Returns
    -------
    int or None
        Exit code if a subcommand was handled, None otherwise

    """
    if args is None:
        args = sys.argv[1:]

    if not args:
        return None

    if args[0] == "samples":
        from textcompare.cli.commands.samples import handle_samples_command

        return handle_samples_command(args[1:])

    if args[0] == "config":
        from textcompare.cli.commands.config import handle_config_command

        return handle_config_command(args[1:])

    return None
