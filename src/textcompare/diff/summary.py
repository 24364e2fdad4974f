#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textcompare/diff/summary.py
"""Statistics aggregation over diff operations."""

from __future__ import annotations

import math
from collections import Counter
from typing import Iterable

from textcompare.diff.models import DiffOperation, DiffStatistics


def calculate_similarity(unchanged_lines: int, total_lines: int) -> float:
    """Return the unchanged percentage rounded half up to two decimals.

    Two empty texts are identical, so a zero total yields ``100.0``.
    Exact halves round away from zero (``3.125`` gives ``3.13``), not to even.
    """
    if total_lines <= 0:
        return 100.0
    percentage = unchanged_lines / total_lines * 100
    return math.floor(percentage * 100 + 0.5) / 100


def summarize(
    operations: Iterable[DiffOperation],
    old_line_count: int,
    new_line_count: int,
) -> DiffStatistics:
    """Aggregate diff operations into counts and a similarity ratio.

    Parameters
    ----------
    operations : iterable of DiffOperation
        Operations produced by the aligner
    old_line_count, new_line_count : int
        Number of lines on each side after preprocessing

    Returns
    -------
    DiffStatistics
        Counts per operation kind; ``total_lines`` is the larger line count

    """
    counts = Counter(op.tag for op in operations)
    total_lines = max(old_line_count, new_line_count)
    unchanged_lines = counts["equal"]

    return DiffStatistics(
        total_lines=total_lines,
        added_lines=counts["insert"],
        deleted_lines=counts["delete"],
        modified_lines=counts["replace"],
        unchanged_lines=unchanged_lines,
        similarity=calculate_similarity(unchanged_lines, total_lines),
    )
