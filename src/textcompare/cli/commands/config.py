#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/textcompare/cli/commands/config.py
"""Configuration management commands: show, validate and generate."""

import argparse
import json
import os
import sys
from pathlib import Path
from typing import Any, Dict

import tomli_w
import yaml

from textcompare.cli.builder import EXIT_ERROR, EXIT_SUCCESS, EXIT_VALIDATION_ERROR
from textcompare.cli.config import get_config_search_paths, load_config_file, load_config_with_priority, split_config
from textcompare.constants import (
    DEFAULT_EXPORT_FORMAT,
    DEFAULT_MAX_INPUT_CHARS,
    ENV_CONFIG_VAR,
    SUPPORTED_EXPORT_FORMATS,
)
from textcompare.exceptions import InvalidOptionsError
from textcompare.options import DEFAULT_COMPARISON_OPTIONS, ComparisonOptions


def _format_config(config: Dict[str, Any], output_format: str) -> str:
    if output_format == "toml":
        return tomli_w.dumps(config)
    if output_format == "yaml":
        return yaml.dump(config, default_flow_style=False, sort_keys=True, allow_unicode=True, indent=2)
    return json.dumps(config, indent=2, ensure_ascii=False)


def _default_config() -> Dict[str, Any]:
    """Return every configurable key with its default value."""
    config = DEFAULT_COMPARISON_OPTIONS.to_dict()
    config.update({"format": DEFAULT_EXPORT_FORMAT, "max_input_size": DEFAULT_MAX_INPUT_CHARS})
    return config


def validate_config(config: Dict[str, Any]) -> list[str]:
    """Return a list of problems found in a configuration mapping."""
    problems: list[str] = []
    option_values, settings = split_config(config)

    try:
        ComparisonOptions.from_dict(option_values)
    except InvalidOptionsError as e:
        problems.append(e.message)

    report_format = settings.get("format")
    if report_format is not None and report_format not in SUPPORTED_EXPORT_FORMATS:
        problems.append(f"format must be one of text, html, json; got {report_format!r}")

    max_size = settings.get("max_input_size")
    if max_size is not None and (isinstance(max_size, bool) or not isinstance(max_size, int) or max_size <= 0):
        problems.append(f"max_input_size must be a positive integer, got {max_size!r}")

    return problems


def handle_config_show_command(args: list[str] | None = None) -> int:
    """Handle ``config show`` to display the effective configuration."""
    parser = argparse.ArgumentParser(
        prog="textcompare config show",
        description="Display the configuration textcompare will use.",
    )
    parser.add_argument("--format", choices=("toml", "json", "yaml"), default="toml", help="Output format")
    parser.add_argument(
        "--no-source",
        dest="show_source",
        action="store_false",
        default=True,
        help="Hide configuration source information.",
    )

    try:
        parsed_args = parser.parse_args(args or [])
    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 0

    env_config_path = os.environ.get(ENV_CONFIG_VAR)
    try:
        config = load_config_with_priority(explicit_path=None, env_var_path=env_config_path)
    except argparse.ArgumentTypeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    if parsed_args.show_source:
        print("Configuration Sources (in priority order):")
        print("-" * 60)
        if env_config_path:
            status = "FOUND" if Path(env_config_path).exists() else "NOT FOUND"
            print(f"1. {ENV_CONFIG_VAR} env var: {env_config_path} [{status}]")
        else:
            print(f"1. {ENV_CONFIG_VAR} env var: (not set)")
        for index, path in enumerate(get_config_search_paths(), start=2):
            status = "FOUND" if path.exists() else "-"
            print(f"{index}. {path} [{status}]")
        print()

    if not config:
        print("No configuration found. Using defaults.")
        print("\nTo create a config file, run: textcompare config generate --out .textcompare.toml")
        return EXIT_SUCCESS

    print("Effective Configuration:")
    print("=" * 60)
    print(_format_config(config, parsed_args.format))
    return EXIT_SUCCESS


def handle_config_validate_command(args: list[str] | None = None) -> int:
    """Handle ``config validate FILE``."""
    parser = argparse.ArgumentParser(
        prog="textcompare config validate",
        description="Check a configuration file for syntax errors and unknown keys.",
    )
    parser.add_argument("config_file", help="Configuration file to validate")

    try:
        parsed_args = parser.parse_args(args or [])
    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 0

    try:
        config = load_config_file(parsed_args.config_file)
    except argparse.ArgumentTypeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    problems = validate_config(config)
    if problems:
        print(f"Configuration file {parsed_args.config_file} is invalid:", file=sys.stderr)
        for problem in problems:
            print(f"  - {problem}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    print(f"Configuration file {parsed_args.config_file} is valid.")
    return EXIT_SUCCESS


def handle_config_generate_command(args: list[str] | None = None) -> int:
    """Handle ``config generate`` to write a config file with the defaults."""
    parser = argparse.ArgumentParser(
        prog="textcompare config generate",
        description="Generate a configuration file containing every setting and its default.",
    )
    parser.add_argument("--format", choices=("toml", "json", "yaml"), default="toml", help="Output format")
    parser.add_argument("--out", help="Write to this file instead of stdout")

    try:
        parsed_args = parser.parse_args(args or [])
    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 0

    content = _format_config(_default_config(), parsed_args.format)
    if not parsed_args.out:
        print(content)
        return EXIT_SUCCESS

    try:
        Path(parsed_args.out).write_text(content, encoding="utf-8")
    except OSError as e:
        print(f"Error writing configuration: {e}", file=sys.stderr)
        return EXIT_ERROR

    print(f"Configuration written to: {parsed_args.out}", file=sys.stderr)
    return EXIT_SUCCESS


def handle_config_command(args: list[str] | None = None) -> int:
    """Dispatch ``textcompare config <subcommand>``."""
    if not args or args[0] in ("-h", "--help"):
        print("Usage: textcompare config {show,validate,generate} [options]")
        return EXIT_SUCCESS if args else EXIT_VALIDATION_ERROR

    subcommand, rest = args[0], args[1:]
    if subcommand == "show":
        return handle_config_show_command(rest)
    if subcommand == "validate":
        return handle_config_validate_command(rest)
    if subcommand == "generate":
        return handle_config_generate_command(rest)

    print(f"Error: Unknown config subcommand: {subcommand}", file=sys.stderr)
    return EXIT_VALIDATION_ERROR
