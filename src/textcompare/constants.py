#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textcompare/constants.py
"""Constants and default values for textcompare.

Values shared by the diff engine, the reporters and the command-line
interface live here so that the window size, size limits and format names
are defined exactly once.
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

DiffTag = Literal["equal", "insert", "delete", "replace"]
ExportFormat = Literal["text", "html", "json"]
InputSide = Literal["old", "new"]
ColorMode = Literal["auto", "always", "never"]

# =============================================================================
# Aligner
# =============================================================================

# Number of future lines inspected when two current lines differ.
LOOKAHEAD_WINDOW = 5

# =============================================================================
# Comparison defaults
# =============================================================================

DEFAULT_IGNORE_CASE = False
DEFAULT_IGNORE_WHITESPACE = False
DEFAULT_IGNORE_LINE_BREAKS = False
DEFAULT_SHOW_LINE_NUMBERS = True
DEFAULT_HIGHLIGHT_WORDS = True
DEFAULT_SPLIT_VIEW = True
DEFAULT_CONTEXT_LINES = 3

# =============================================================================
# Input guard
# =============================================================================

# Maximum characters accepted per side before a comparison is attempted.
DEFAULT_MAX_INPUT_CHARS = 1_000_000

# =============================================================================
# Export
# =============================================================================

DEFAULT_EXPORT_FORMAT: ExportFormat = "text"
SUPPORTED_EXPORT_FORMATS: tuple[ExportFormat, ...] = ("text", "html", "json")

DEFAULT_JSON_INDENT = 2
REPORT_TITLE = "Text Comparison Report"

# =============================================================================
# Loading
# =============================================================================

DEFAULT_FALLBACK_ENCODINGS = ["utf-8", "utf-8-sig", "latin-1"]
ENCODING_SAMPLE_SIZE = 8192
ENCODING_CONFIDENCE_THRESHOLD = 0.7

# =============================================================================
# Environment and configuration files
# =============================================================================

ENV_CONFIG_VAR = "TEXTCOMPARE_CONFIG"
CONFIG_DOTFILES = [".textcompare.toml", ".textcompare.yaml", ".textcompare.yml", ".textcompare.json"]
PYPROJECT_TOOL_SECTION = "textcompare"
