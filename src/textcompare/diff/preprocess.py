#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textcompare/diff/preprocess.py
"""Text normalisation applied before line splitting.

Steps run in a fixed order: case folding, whitespace collapsing, then line
break removal. Whitespace collapsing already turns newlines into spaces, so
``ignore_whitespace`` and ``ignore_line_breaks`` both reduce a text to a
single line.
"""

from __future__ import annotations

import re

from textcompare.options import ComparisonOptions

_WHITESPACE_RE = re.compile(r"\s+")
_LINE_BREAK_RE = re.compile(r"\r?\n")


def normalize_whitespace(text: str) -> str:
    """Collapse every whitespace run to one space and strip the ends.

    Parameters
    ----------
    text : str
        Text to normalize

    Returns
    -------
    str
        Normalized text with consistent whitespace

    """
    return _WHITESPACE_RE.sub(" ", text).strip()


def remove_line_breaks(text: str) -> str:
    """Replace ``\\n`` and ``\\r\\n`` line breaks with a single space."""
    return _LINE_BREAK_RE.sub(" ", text)


def preprocess_text(text: str, options: ComparisonOptions) -> str:
    """Normalise ``text`` according to the comparison options.

    Parameters
    ----------
    text : str
        Raw input text
    options : ComparisonOptions
        Options selecting which normalisations apply

    Returns
    -------
    str
        The normalised text. No step raises, whatever the size of the input.

    """
    processed = text

    if options.ignore_case:
        processed = processed.lower()

    if options.ignore_whitespace:
        processed = normalize_whitespace(processed)

    if options.ignore_line_breaks:
        processed = remove_line_breaks(processed)

    return processed


def split_lines(text: str) -> list[str]:
    """Split text on ``\\n`` into the line sequence used for alignment.

    Carriage returns are kept as part of the line. An empty string has no
    lines; a trailing newline yields a final empty line.
    """
    if not text:
        return []
    return text.split("\n")
