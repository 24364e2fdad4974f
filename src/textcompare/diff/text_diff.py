#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textcompare/diff/text_diff.py
"""Line-level text comparison.

:func:`compare_texts` is the engine entry point: it preprocesses both texts,
splits them into lines, aligns the lines and summarises the result. It is a
pure function of its arguments and never raises for string inputs.

:func:`compare_files` is a convenience wrapper that loads two files, applies
the input size guard and then calls :func:`compare_texts`.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from textcompare.constants import DEFAULT_MAX_INPUT_CHARS
from textcompare.diff.aligner import align
from textcompare.diff.models import ComparisonResult
from textcompare.diff.preprocess import preprocess_text, split_lines
from textcompare.diff.summary import summarize
from textcompare.options import DEFAULT_COMPARISON_OPTIONS, ComparisonOptions
from textcompare.utils.inputs import load_text_file, validate_text_input

logger = logging.getLogger(__name__)


def compare_texts(
    old_text: str,
    new_text: str,
    options: ComparisonOptions | None = None,
) -> ComparisonResult:
    """Compare two texts line by line.

    Parameters
    ----------
    old_text : str
        Original text
    new_text : str
        Updated text
    options : ComparisonOptions, optional
        Preprocessing options; defaults to :data:`DEFAULT_COMPARISON_OPTIONS`

    Returns
    -------
    ComparisonResult
        Operations in alignment order and their statistics. Line numbers
        and values refer to the preprocessed texts.

    Examples
    --------
    >>> result = compare_texts("Hello", "hello", ComparisonOptions(ignore_case=True))
    >>> result.statistics.similarity
    100.0

    """
    if options is None:
        options = DEFAULT_COMPARISON_OPTIONS

    old_lines = split_lines(preprocess_text(old_text, options))
    new_lines = split_lines(preprocess_text(new_text, options))

    operations = align(old_lines, new_lines)
    statistics = summarize(operations, len(old_lines), len(new_lines))

    logger.debug(
        "Compared %d old / %d new lines: %d added, %d deleted, %d modified, %d unchanged (%.2f%% similar)",
        len(old_lines),
        len(new_lines),
        statistics.added_lines,
        statistics.deleted_lines,
        statistics.modified_lines,
        statistics.unchanged_lines,
        statistics.similarity,
    )

    return ComparisonResult(diffs=tuple(operations), statistics=statistics)


def compare_files(
    old_path: Union[str, Path],
    new_path: Union[str, Path],
    options: ComparisonOptions | None = None,
    max_chars: int | None = DEFAULT_MAX_INPUT_CHARS,
) -> ComparisonResult:
    """Load two text files and compare them.

    Parameters
    ----------
    old_path : str or Path
        Path to the original file
    new_path : str or Path
        Path to the updated file
    options : ComparisonOptions, optional
        Preprocessing options
    max_chars : int or None, default DEFAULT_MAX_INPUT_CHARS
        Per-side character limit; ``None`` disables the check

    Returns
    -------
    ComparisonResult
        Comparison of the decoded file contents

    Raises
    ------
    FileNotFoundError
        If either file does not exist
    FileAccessError
        If either file cannot be read
    InputTooLargeError
        If either text exceeds ``max_chars``

    """
    old_file = load_text_file(old_path)
    new_file = load_text_file(new_path)

    if max_chars is not None:
        validate_text_input(old_file.content, "old", max_chars)
        validate_text_input(new_file.content, "new", max_chars)

    return compare_texts(old_file.content, new_file.content, options)
