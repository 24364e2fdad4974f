#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/textcompare/cli/builder.py
"""Argument parser construction and exit codes for the textcompare CLI.

Option flags are generated from the :class:`ComparisonOptions` dataclass
metadata where possible so that help texts stay in one place.
"""

import argparse
from dataclasses import fields

from textcompare import __version__
from textcompare.constants import SUPPORTED_EXPORT_FORMATS
from textcompare.exceptions import (
    FileError,
    FormatError,
    RenderingError,
    ValidationError,
)
from textcompare.options import ComparisonOptions

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_FORMAT_ERROR = 5
EXIT_RENDERING_ERROR = 7

# Short flags for the options users toggle most
_SHORT_FLAGS = {
    "ignore_case": "-i",
    "ignore_whitespace": "-w",
    "context_lines": "-C",
}


def _validate_non_negative_int(value: str) -> int:
    """Parse a non-negative integer argument.

    Raises
    ------
    argparse.ArgumentTypeError
        If value is not an integer or is negative

    """
    try:
        ivalue = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"must be an integer, got '{value}'") from e

    if ivalue < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {ivalue}")

    return ivalue


def _validate_positive_int(value: str) -> int:
    """Parse a strictly positive integer argument."""
    ivalue = _validate_non_negative_int(value)
    if ivalue == 0:
        raise argparse.ArgumentTypeError("must be positive, got 0")
    return ivalue


def _add_option_arguments(group: argparse._ArgumentGroup) -> None:
    """Add one flag per engine-relevant ComparisonOptions field.

    Flags default to ``None`` so that config file values apply unless the
    flag is given explicitly. Boolean options also get a ``--no-*`` form to
    switch off a value a config file turned on.
    """
    for option_field in fields(ComparisonOptions):
        if option_field.metadata.get("importance") == "presentation" and option_field.name != "context_lines":
            continue

        flag = "--" + option_field.name.replace("_", "-")
        if option_field.name == "context_lines":
            flag = "--context"
        names = [flag]
        if option_field.name in _SHORT_FLAGS:
            names.append(_SHORT_FLAGS[option_field.name])

        help_text = option_field.metadata.get("help", "")
        if isinstance(option_field.default, bool):
            group.add_argument(
                *names,
                dest=option_field.name,
                action=argparse.BooleanOptionalAction,
                default=None,
                help=help_text,
            )
        else:
            group.add_argument(
                *names,
                dest=option_field.name,
                type=_validate_non_negative_int,
                default=None,
                help=f"{help_text} (default: {option_field.default})",
            )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for ``textcompare OLD NEW``.

    Returns
    -------
    argparse.ArgumentParser
        Configured parser

    """
    parser = argparse.ArgumentParser(
        prog="textcompare",
        description=(
            "Compare two texts line by line and report inserted, deleted and replaced lines. "
            "Other commands: 'textcompare samples', 'textcompare config'."
        ),
    )
    parser.add_argument("--version", action="version", version=f"textcompare {__version__}")

    parser.add_argument("old", help="Original text file (use '-' for stdin)")
    parser.add_argument("new", help="Modified text file (use '-' for stdin)")

    compare_group = parser.add_argument_group("comparison options")
    _add_option_arguments(compare_group)

    output_group = parser.add_argument_group("output options")
    output_group.add_argument(
        "--format",
        "-f",
        choices=list(SUPPORTED_EXPORT_FORMATS),
        default=None,
        help="Report format: text (default), html, json",
    )
    output_group.add_argument("--output", "-o", help="Write the report to a file (default: stdout)")
    output_group.add_argument(
        "--color",
        choices=["auto", "always", "never"],
        default=None,
        help="Colorize text reports: auto (default, if terminal), always, never",
    )
    output_group.add_argument(
        "--rich",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Use rich terminal output",
    )
    output_group.add_argument(
        "--force-rich",
        action="store_true",
        help="Use rich output even when stdout is not a terminal",
    )
    output_group.add_argument(
        "--stats-only",
        action="store_true",
        help="Print only the statistics block",
    )
    output_group.add_argument(
        "--max-size",
        dest="max_input_size",
        type=_validate_positive_int,
        default=None,
        help="Maximum characters accepted per input (default: 1000000)",
    )

    config_group = parser.add_argument_group("configuration")
    config_group.add_argument("--config", help="Load defaults from this config file")
    config_group.add_argument("--no-config", action="store_true", help="Ignore config files and TEXTCOMPARE_CONFIG")

    logging_group = parser.add_argument_group("logging")
    logging_group.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    logging_group.add_argument("--verbose", "-v", action="store_true", help="Shortcut for --log-level DEBUG")
    logging_group.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")
    logging_group.add_argument("--log-file", help="Also write log records to this file")

    return parser


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to a CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map

    Returns
    -------
    int
        The exit code for the exception type

    """
    if isinstance(exception, ValidationError):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR

    if isinstance(exception, FormatError):
        return EXIT_FORMAT_ERROR

    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR

    return EXIT_ERROR
