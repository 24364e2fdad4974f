#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textcompare/diff/aligner.py
"""Two-cursor line alignment with bounded lookahead.

The aligner walks the old and new line sequences together. Matching lines
are emitted as equalities. When the current lines differ, a small lookahead
window decides whether the old line was deleted, the new line was inserted,
or the old line was replaced.

This is a greedy local heuristic, not a minimum edit script: a block moved
further than the window is reported as deletions plus insertions. The window
size and the delete-before-insert tie-break are part of the observable
output and must stay as they are.
"""

from __future__ import annotations

import logging
from typing import Literal, Sequence

from textcompare.constants import LOOKAHEAD_WINDOW
from textcompare.diff.models import DeleteOp, DiffOperation, EqualOp, InsertOp, ReplaceOp

logger = logging.getLogger(__name__)

MismatchKind = Literal["delete", "insert", "replace"]


def classify_mismatch(
    old_lines: Sequence[str],
    new_lines: Sequence[str],
    old_index: int,
    new_index: int,
    window: int = LOOKAHEAD_WINDOW,
) -> MismatchKind:
    """Decide how to treat differing lines at ``old_index`` and ``new_index``.

    For each offset ``d`` from 1 to ``window``, the old side is checked
    first: if ``old_lines[old_index + d]`` equals the current new line, the
    current old line is a deletion. Otherwise, if ``new_lines[new_index + d]``
    equals the current old line, the current new line is an insertion.
    Offsets past the end of either sequence never match.

    Parameters
    ----------
    old_lines, new_lines : Sequence[str]
        The preprocessed line sequences
    old_index, new_index : int
        Current cursor positions; both must be in range
    window : int, default LOOKAHEAD_WINDOW
        Number of future lines to inspect

    Returns
    -------
    {"delete", "insert", "replace"}
        ``"replace"`` when nothing matches within the window

    """
    old_line = old_lines[old_index]
    new_line = new_lines[new_index]
    old_count = len(old_lines)
    new_count = len(new_lines)

    for offset in range(1, window + 1):
        if old_index + offset < old_count and old_lines[old_index + offset] == new_line:
            return "delete"
        if new_index + offset < new_count and new_lines[new_index + offset] == old_line:
            return "insert"

    return "replace"


def align(
    old_lines: Sequence[str],
    new_lines: Sequence[str],
    window: int = LOOKAHEAD_WINDOW,
) -> list[DiffOperation]:
    """Align two line sequences into an ordered list of diff operations.

    Parameters
    ----------
    old_lines : Sequence[str]
        Lines of the original text
    new_lines : Sequence[str]
        Lines of the updated text
    window : int, default LOOKAHEAD_WINDOW
        Lookahead used to disambiguate mismatches

    Returns
    -------
    list of DiffOperation
        Operations in alignment order. Every old line appears exactly once in
        an equal, delete or replace operation, and every new line exactly once
        in an equal, insert or replace operation.

    """
    operations: list[DiffOperation] = []
    old_count = len(old_lines)
    new_count = len(new_lines)
    i = 0
    j = 0

    while i < old_count or j < new_count:
        if i >= old_count:
            operations.append(InsertOp(new_value=new_lines[j], new_line_number=j + 1))
            j += 1
        elif j >= new_count:
            operations.append(DeleteOp(old_value=old_lines[i], old_line_number=i + 1))
            i += 1
        elif old_lines[i] == new_lines[j]:
            operations.append(
                EqualOp(
                    old_value=old_lines[i],
                    new_value=new_lines[j],
                    old_line_number=i + 1,
                    new_line_number=j + 1,
                )
            )
            i += 1
            j += 1
        else:
            kind = classify_mismatch(old_lines, new_lines, i, j, window)
            if kind == "replace":
                operations.append(
                    ReplaceOp(
                        old_value=old_lines[i],
                        new_value=new_lines[j],
                        old_line_number=i + 1,
                        new_line_number=j + 1,
                    )
                )
                i += 1
                j += 1
            elif kind == "insert":
                operations.append(InsertOp(new_value=new_lines[j], new_line_number=j + 1))
                j += 1
            else:
                operations.append(DeleteOp(old_value=old_lines[i], old_line_number=i + 1))
                i += 1

    logger.debug("Aligned %d old and %d new lines into %d operations", old_count, new_count, len(operations))
    return operations
