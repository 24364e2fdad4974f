#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/textcompare/cli/config.py
"""Configuration file discovery and loading for the textcompare CLI.

A configuration file is a flat table of defaults: any
:class:`~textcompare.options.ComparisonOptions` field plus the output keys in
``OUTPUT_SETTING_KEYS``. TOML, YAML and JSON are accepted, as is a
``[tool.textcompare]`` table inside pyproject.toml. Command-line flags always
win over file values.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from dataclasses import fields
from typing import Any, Dict, Iterator, Optional

import yaml

from textcompare.constants import CONFIG_DOTFILES, ENV_CONFIG_VAR, PYPROJECT_TOOL_SECTION
from textcompare.options import ComparisonOptions

logger = logging.getLogger(__name__)

# Keys accepted in a config file besides the ComparisonOptions fields
OUTPUT_SETTING_KEYS = ("format", "max_input_size", "rich", "color")

# File suffix -> syntax name used in messages and by _parse_config_bytes
CONFIG_SYNTAX_BY_SUFFIX = {
    ".toml": "TOML",
    ".yaml": "YAML",
    ".yml": "YAML",
    ".json": "JSON",
}

_PARSE_ERRORS = (tomllib.TOMLDecodeError, json.JSONDecodeError, yaml.YAMLError, UnicodeDecodeError)


def _parse_config_bytes(raw: bytes, syntax: str) -> Any:
    if syntax == "TOML":
        return tomllib.loads(raw.decode("utf-8"))
    if syntax == "JSON":
        return json.loads(raw)
    return yaml.safe_load(raw)


def _read_config_document(config_path: Path, syntax: str) -> Any:
    """Read and parse one config document.

    Raises
    ------
    argparse.ArgumentTypeError
        If the file cannot be read or is not valid ``syntax``

    """
    try:
        raw = config_path.read_bytes()
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Cannot read {syntax} config {config_path}: {e}") from e

    try:
        return _parse_config_bytes(raw, syntax)
    except _PARSE_ERRORS as e:
        raise argparse.ArgumentTypeError(f"Invalid {syntax} in config file {config_path}: {e}") from e


def _require_table(document: Any, config_path: Path, where: str = "top level") -> Dict[str, Any]:
    # An empty YAML document, or JSON null, means "no settings"
    if document is None:
        return {}
    if not isinstance(document, dict):
        raise argparse.ArgumentTypeError(
            f"Config {where} in {config_path} must be a table of settings, got {type(document).__name__}"
        )
    return document


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Return the ``[tool.textcompare]`` table of a pyproject.toml, or ``{}``."""
    document = _read_config_document(pyproject_path, "TOML")
    tool_tables = document.get("tool", {})
    section = tool_tables.get(PYPROJECT_TOOL_SECTION) if isinstance(tool_tables, dict) else None
    return _require_table(section, pyproject_path, where=f"[tool.{PYPROJECT_TOOL_SECTION}]")


def _ancestors(start_dir: Path) -> Iterator[Path]:
    directory = start_dir.resolve()
    yield directory
    yield from directory.parents


def _config_in_directory(directory: Path, include_pyproject: bool = True) -> Optional[Path]:
    for filename in CONFIG_DOTFILES:
        candidate = directory / filename
        if candidate.is_file():
            return candidate

    if not include_pyproject:
        return None

    pyproject_path = directory / "pyproject.toml"
    if not pyproject_path.is_file():
        return None
    try:
        has_section = bool(_load_pyproject_section(pyproject_path))
    except argparse.ArgumentTypeError as e:
        logger.debug("Ignoring %s during discovery: %s", pyproject_path, e)
        return None
    return pyproject_path if has_section else None


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find the nearest config file at or above ``start_dir``.

    In each directory the dotfiles are tried in ``CONFIG_DOTFILES`` order,
    then a pyproject.toml that actually contains a ``[tool.textcompare]``
    table.

    Parameters
    ----------
    start_dir : Path, optional
        Directory to start from; the working directory by default

    Returns
    -------
    Path or None
        The first match, or None when the filesystem root is reached

    """
    for directory in _ancestors(start_dir or Path.cwd()):
        found = _config_in_directory(directory)
        if found is not None:
            return found
    return None


def discover_config_file() -> Optional[Path]:
    """Locate a config file near the working directory, else in the home directory.

    Only dotfiles are considered in the home directory.
    """
    return find_config_in_parents() or _config_in_directory(Path.home(), include_pyproject=False)


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load one configuration file.

    The syntax is chosen from the file suffix. A file named pyproject.toml
    contributes only its ``[tool.textcompare]`` table.

    Parameters
    ----------
    config_path : Path or str
        File to load

    Returns
    -------
    dict
        The settings table

    Raises
    ------
    argparse.ArgumentTypeError
        If the path is missing, not a file, of unknown type, unreadable,
        malformed, or not a table

    Examples
    --------
    >>> load_config_file("pyproject.toml")
    {'ignore_case': True}

    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise argparse.ArgumentTypeError(f"Configuration file does not exist: {config_path}")
    if not config_path.is_file():
        raise argparse.ArgumentTypeError(f"Configuration path is not a file: {config_path}")

    if config_path.name.lower() == "pyproject.toml":
        return _load_pyproject_section(config_path)

    syntax = CONFIG_SYNTAX_BY_SUFFIX.get(config_path.suffix.lower())
    if syntax is None:
        supported = ", ".join(sorted(CONFIG_SYNTAX_BY_SUFFIX))
        raise argparse.ArgumentTypeError(
            f"Unsupported config file format: '{config_path.suffix}'. Expected one of {supported}"
        )

    return _require_table(_read_config_document(config_path, syntax), config_path)


def merge_configs(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Layer ``override`` on top of ``base``; nested tables merge key by key.

    Neither argument is modified.

    Examples
    --------
    >>> merge_configs({"ignore_case": False, "format": "text"}, {"ignore_case": True})
    {'ignore_case': True, 'format': 'text'}

    """
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = merge_configs(current, value)
        else:
            merged[key] = value
    return merged


def load_config_with_priority(
    explicit_path: Optional[str] = None, env_var_path: Optional[str] = None
) -> Dict[str, Any]:
    """Load the one config file that applies to this run.

    ``--config`` beats ``TEXTCOMPARE_CONFIG``, which beats discovery. Files
    are not merged with each other.

    Returns
    -------
    dict
        Settings table, empty when no file applies

    Raises
    ------
    argparse.ArgumentTypeError
        If the chosen file cannot be loaded

    """
    for source, path in (("--config", explicit_path), (ENV_CONFIG_VAR, env_var_path)):
        if path:
            logger.debug("Using config from %s: %s", source, path)
            return load_config_file(path)

    discovered_path = discover_config_file()
    if discovered_path is None:
        logger.debug("No config file found")
        return {}

    logger.debug("Using discovered config: %s", discovered_path)
    return load_config_file(discovered_path)


def split_config(config: Dict[str, Any]) -> tuple[Dict[str, Any], Dict[str, Any]]:
    """Separate comparison option keys from output setting keys.

    Hyphens in keys are read as underscores. Keys that are neither kind stay
    with the options so that :meth:`ComparisonOptions.from_dict` reports them.

    Returns
    -------
    tuple[dict, dict]
        ``(option_values, output_settings)``

    """
    option_names = {f.name for f in fields(ComparisonOptions)}
    option_values: Dict[str, Any] = {}
    output_settings: Dict[str, Any] = {}

    for key, value in config.items():
        normalized = key.replace("-", "_")
        if normalized in OUTPUT_SETTING_KEYS and normalized not in option_names:
            output_settings[normalized] = value
        else:
            option_values[normalized] = value

    return option_values, output_settings


def get_config_search_paths() -> list[Path]:
    """List the files checked in the working directory and home directory.

    Discovery also walks every parent of the working directory; those are
    not listed.
    """
    cwd = Path.cwd()
    home = Path.home()
    return [
        *(cwd / filename for filename in CONFIG_DOTFILES),
        cwd / "pyproject.toml",
        *(home / filename for filename in CONFIG_DOTFILES),
    ]
