#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/textcompare/cli/processors.py
"""Comparison processing for the textcompare CLI.

Turns parsed arguments plus loaded configuration into comparison options and
output settings, runs the comparison and writes the report.
"""

import argparse
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from rich.console import Console

from textcompare.cli.config import split_config
from textcompare.cli.output import (
    format_plain_statistics,
    render_rich_report,
    should_use_color,
    should_use_rich_output,
)
from textcompare.constants import DEFAULT_EXPORT_FORMAT, DEFAULT_MAX_INPUT_CHARS, SUPPORTED_EXPORT_FORMATS
from textcompare.diff.api import export_comparison, render_to_file
from textcompare.diff.models import ComparisonResult
from textcompare.diff.renderers.ansi import colorize_report
from textcompare.diff.renderers.text import TextDiffRenderer
from textcompare.diff.text_diff import compare_texts
from textcompare.exceptions import InvalidOptionsError, UnsupportedFormatError
from textcompare.options import ComparisonOptions
from textcompare.utils.inputs import validate_text_input

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OutputSettings:
    """Resolved output behaviour for one CLI run."""

    format: str = DEFAULT_EXPORT_FORMAT
    output: str | None = None
    color: str = "auto"
    rich: bool = False
    force_rich: bool = False
    stats_only: bool = False
    max_input_size: int = DEFAULT_MAX_INPUT_CHARS


def build_comparison_options(parsed_args: argparse.Namespace, config: Dict[str, Any]) -> ComparisonOptions:
    """Combine config file values and explicit flags into options.

    Flags given on the command line override the config file.

    Raises
    ------
    InvalidOptionsError
        If the config holds unknown keys or badly typed values

    """
    option_values, _ = split_config(config)
    options = ComparisonOptions.from_dict(option_values)

    overrides = {
        name: getattr(parsed_args, name)
        for name in ("ignore_case", "ignore_whitespace", "ignore_line_breaks", "context_lines")
        if getattr(parsed_args, name, None) is not None
    }
    if overrides:
        options = options.create_updated(**overrides)
    return options


def build_output_settings(parsed_args: argparse.Namespace, config: Dict[str, Any]) -> OutputSettings:
    """Resolve output settings from flags, then config, then defaults.

    Raises
    ------
    UnsupportedFormatError
        If the config names an unknown report format
    InvalidOptionsError
        If a config value has the wrong type

    """
    _, settings = split_config(config)

    def pick(name: str, default: Any) -> Any:
        value = getattr(parsed_args, name, None)
        if value is not None:
            return value
        return settings.get(name, default)

    report_format = pick("format", DEFAULT_EXPORT_FORMAT)
    if report_format not in SUPPORTED_EXPORT_FORMATS:
        raise UnsupportedFormatError(format_type=str(report_format), supported_formats=SUPPORTED_EXPORT_FORMATS)

    max_input_size = pick("max_input_size", DEFAULT_MAX_INPUT_CHARS)
    if isinstance(max_input_size, bool) or not isinstance(max_input_size, int) or max_input_size <= 0:
        raise InvalidOptionsError(
            f"max_input_size must be a positive integer, got {max_input_size!r}",
            parameter_name="max_input_size",
            parameter_value=max_input_size,
        )

    color = pick("color", "auto")
    if color not in ("auto", "always", "never"):
        raise InvalidOptionsError(
            f"color must be one of auto, always, never; got {color!r}",
            parameter_name="color",
            parameter_value=color,
        )

    return OutputSettings(
        format=report_format,
        output=getattr(parsed_args, "output", None),
        color=color,
        rich=bool(pick("rich", False)),
        force_rich=bool(getattr(parsed_args, "force_rich", False)),
        stats_only=bool(getattr(parsed_args, "stats_only", False)),
        max_input_size=max_input_size,
    )


def run_comparison(
    old_text: str,
    new_text: str,
    options: ComparisonOptions,
    max_input_size: int | None = DEFAULT_MAX_INPUT_CHARS,
) -> ComparisonResult:
    """Apply the input size guard and compare two texts.

    Raises
    ------
    InputTooLargeError
        If either text exceeds ``max_input_size``

    """
    if max_input_size is not None:
        validate_text_input(old_text, "old", max_input_size)
        validate_text_input(new_text, "new", max_input_size)
    return compare_texts(old_text, new_text, options)


def emit_result(result: ComparisonResult, settings: OutputSettings) -> None:
    """Write a comparison report according to ``settings``.

    Raises
    ------
    OutputWriteError
        If the report cannot be written to ``settings.output``

    """
    if settings.output:
        render_to_file(result, settings.output, format=settings.format)
        print(f"Report written to: {Path(settings.output)}", file=sys.stderr)
        return

    if settings.format == "text" and should_use_rich_output(settings.rich, settings.force_rich):
        render_rich_report(result, Console(), stats_only=settings.stats_only)
        return

    if settings.stats_only:
        print(format_plain_statistics(result))
        return

    if settings.format == "text":
        lines = TextDiffRenderer().render_lines(result)
        for line in colorize_report(lines, use_color=should_use_color(settings.color, writing_to_file=False)):
            print(line)
        return

    print(export_comparison(result, format=settings.format))
