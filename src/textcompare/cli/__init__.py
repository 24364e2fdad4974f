"""Command-line interface for the textcompare line diff engine.

Examples
--------
Compare two files and print a text report::

    $ textcompare old.txt new.txt

Ignore case and whitespace, write an HTML report::

    $ textcompare old.txt new.txt -i -w --format html --output report.html

Read the new side from stdin::

    $ generate-text | textcompare old.txt -

Print only the statistics with rich formatting::

    $ textcompare old.txt new.txt --stats-only --rich

Configuration
-------------
Defaults can be stored in ``.textcompare.toml`` (or ``.yaml``/``.json``, or a
``[tool.textcompare]`` table in pyproject.toml), or in the file named by the
``TEXTCOMPARE_CONFIG`` environment variable. Command-line flags override
configuration values.

"""

import argparse
import logging
import os
import sys

from textcompare.cli.builder import (
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    create_parser,
    get_exit_code_for_exception,
)
from textcompare.cli.commands import dispatch_command
from textcompare.constants import ENV_CONFIG_VAR
from textcompare.exceptions import TextCompareError
from textcompare.logging_utils import configure_logging

logger = logging.getLogger(__name__)

__all__ = [
    "main",
    "create_parser",
]


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging from ``--trace``, ``--verbose`` and ``--log-level``.

    ``--trace`` takes precedence over ``--verbose``, which takes precedence
    over ``--log-level``.
    """
    if parsed_args.trace or parsed_args.verbose:
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, parsed_args.log_level.upper())

    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def _load_config(parsed_args: argparse.Namespace) -> dict:
    """Load the config file unless ``--no-config`` was given.

    Raises
    ------
    argparse.ArgumentTypeError
        If a config file was found or named but cannot be loaded

    """
    if parsed_args.no_config:
        return {}

    from textcompare.cli.config import load_config_with_priority

    return load_config_with_priority(
        explicit_path=parsed_args.config,
        env_var_path=os.environ.get(ENV_CONFIG_VAR),
    )


def main(args: list[str] | None = None) -> int:
    """Execute the CLI and return an exit code."""
    command_result = dispatch_command(args)
    if command_result is not None:
        return command_result

    parser = create_parser()
    parsed_args = parser.parse_args(args)

    _setup_logging_level(parsed_args)

    if parsed_args.old == "-" and parsed_args.new == "-":
        print("Error: Cannot read both old and new text from stdin", file=sys.stderr)
        return EXIT_FILE_ERROR

    try:
        config = _load_config(parsed_args)
    except argparse.ArgumentTypeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    from textcompare.cli.processors import (
        build_comparison_options,
        build_output_settings,
        emit_result,
        run_comparison,
    )
    from textcompare.utils.inputs import read_text_source

    try:
        options = build_comparison_options(parsed_args, config)
        settings = build_output_settings(parsed_args, config)

        old_file = read_text_source(parsed_args.old, label="stdin" if parsed_args.old == "-" else None)
        new_file = read_text_source(parsed_args.new, label="stdin" if parsed_args.new == "-" else None)
        logger.info("Comparing %s and %s", old_file.name, new_file.name)

        result = run_comparison(old_file.content, new_file.content, options, settings.max_input_size)
        emit_result(result, settings)
    except TextCompareError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return get_exit_code_for_exception(e)
    except Exception as e:
        logger.debug("Unexpected failure", exc_info=True)
        print(f"Error: comparison failed: {e}", file=sys.stderr)
        return EXIT_ERROR

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
