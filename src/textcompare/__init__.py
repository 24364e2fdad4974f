#  Copyright (c) 2025 Tom Villani, Ph.D.
"""textcompare - line-level text comparison.

Compare two texts line by line, classify every line as unchanged, inserted,
deleted or replaced, summarise the result, and export it as a text, HTML or
JSON report.

Examples
--------
    >>> from textcompare import compare, export_comparison
    >>> result = compare("A\\nX\\nA", "X")
    >>> [op.tag for op in result.diffs]
    ['delete', 'equal', 'delete']
    >>> result.statistics.similarity
    33.33

"""

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
from textcompare.diff.text_diff import compare_files, compare_texts
from textcompare.exceptions import (
    InputTooLargeError,
    TextCompareError,
    UnsupportedFormatError,
    ValidationError,
)
from textcompare.options import DEFAULT_COMPARISON_OPTIONS, ComparisonOptions
from textcompare.utils.inputs import TextFile, load_text_file, validate_text_input

__version__ = "1.0.0"

compare = compare_texts
export = export_comparison

__all__ = [
    "DEFAULT_COMPARISON_OPTIONS",
    "ComparisonOptions",
    "ComparisonResult",
    "DeleteOp",
    "DiffOperation",
    "DiffStatistics",
    "EqualOp",
    "InputTooLargeError",
    "InsertOp",
    "ReplaceOp",
    "TextCompareError",
    "TextFile",
    "UnsupportedFormatError",
    "ValidationError",
    "__version__",
    "compare",
    "compare_files",
    "compare_texts",
    "export",
    "export_comparison",
    "load_text_file",
    "validate_text_input",
]
