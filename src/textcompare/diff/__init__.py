#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textcompare/diff/__init__.py
"""Line-level text comparison.

The engine runs in four stages: preprocessing normalises each text, the
aligner walks both line sequences with a bounded lookahead, the summariser
counts the resulting operations, and a renderer exports the result.

Examples
--------
Compare two texts and print a text report:
    >>> from textcompare.diff import compare_texts, export_comparison
    >>> result = compare_texts("Hello World", "Hello Universe")
    >>> print(export_comparison(result, format="text"))

Ignore case differences:
    >>> from textcompare.options import ComparisonOptions
    >>> compare_texts("Hello", "hello", ComparisonOptions(ignore_case=True)).statistics.similarity
    100.0

"""

from textcompare.diff.aligner import align, classify_mismatch
from textcompare.diff.api import export_comparison
from textcompare.diff.models import (
    ComparisonResult,
    DeleteOp,
    DiffOperation,
    DiffStatistics,
    EqualOp,
    InsertOp,
    ReplaceOp,
)
from textcompare.diff.preprocess import preprocess_text, split_lines
from textcompare.diff.summary import summarize
from textcompare.diff.text_diff import compare_files, compare_texts

__all__ = [
    "ComparisonResult",
    "DeleteOp",
    "DiffOperation",
    "DiffStatistics",
    "EqualOp",
    "InsertOp",
    "ReplaceOp",
    "align",
    "classify_mismatch",
    "compare_files",
    "compare_texts",
    "export_comparison",
    "preprocess_text",
    "split_lines",
    "summarize",
]
