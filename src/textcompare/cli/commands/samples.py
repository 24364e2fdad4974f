#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/textcompare/cli/commands/samples.py
"""List or compare the built-in sample text pairs."""

import argparse
import sys

from textcompare.cli.builder import EXIT_SUCCESS, get_exit_code_for_exception
from textcompare.cli.processors import OutputSettings, emit_result, run_comparison
from textcompare.constants import SUPPORTED_EXPORT_FORMATS
from textcompare.exceptions import TextCompareError
from textcompare.options import ComparisonOptions
from textcompare.samples import SAMPLE_PAIRS, get_sample_pair


def _create_samples_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="textcompare samples",
        description="List the built-in sample text pairs, or compare one of them",
    )
    parser.add_argument("name", nargs="?", help="Sample to compare (omit to list samples)")
    parser.add_argument(
        "--format",
        "-f",
        choices=list(SUPPORTED_EXPORT_FORMATS),
        default="text",
        help="Report format (default: text)",
    )
    parser.add_argument("--ignore-case", "-i", action="store_true", help="Ignore differences in letter case")
    parser.add_argument(
        "--ignore-whitespace", "-w", action="store_true", help="Collapse runs of whitespace and trim both texts"
    )
    parser.add_argument("--show", action="store_true", help="Print both texts instead of comparing them")
    return parser


def handle_samples_command(args: list[str] | None = None) -> int:
    """Handle ``textcompare samples [NAME]``.

    Returns
    -------
    int
        Exit code (0 for success)

    """
    parser = _create_samples_parser()
    try:
        parsed = parser.parse_args(args or [])
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 0

    if not parsed.name:
        width = max(len(name) for name in SAMPLE_PAIRS)
        for pair in SAMPLE_PAIRS.values():
            print(f"{pair.name.ljust(width)}  {pair.description}")
        return EXIT_SUCCESS

    try:
        pair = get_sample_pair(parsed.name)
        if parsed.show:
            print(f"--- {pair.name} (left)")
            print(pair.left)
            print(f"+++ {pair.name} (right)")
            print(pair.right)
            return EXIT_SUCCESS

        options = ComparisonOptions(ignore_case=parsed.ignore_case, ignore_whitespace=parsed.ignore_whitespace)
        result = run_comparison(pair.left, pair.right, options)
        emit_result(result, OutputSettings(format=parsed.format, color="never"))
    except TextCompareError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return get_exit_code_for_exception(e)

    return EXIT_SUCCESS
