#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textcompare/diff/renderers/text.py
"""Plain-text report renderer.

The report opens with the six statistics fields and then lists every
non-equal operation:

- ``+ Line N: text`` for insertions (new line number)
- ``- Line N: text`` for deletions (old line number)
- ``~ Line O -> N:`` for replacements, followed by the old and new lines

Equal operations only contribute to the statistics.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Union

from textcompare.constants import REPORT_TITLE
from textcompare.diff.models import ComparisonResult, DiffOperation, DiffStatistics
from textcompare.exceptions import OutputWriteError


def format_similarity(similarity: float) -> str:
    """Format a similarity percentage without a trailing ``.0``.

    >>> format_similarity(40.0)
    '40'
    >>> format_similarity(33.33)
    '33.33'

    """
    if float(similarity).is_integer():
        return str(int(similarity))
    return f"{similarity:g}"


def statistics_rows(statistics: DiffStatistics) -> list[tuple[str, str]]:
    """Return ``(label, value)`` pairs for the six statistics fields."""
    return [
        ("Total Lines", str(statistics.total_lines)),
        ("Added Lines", str(statistics.added_lines)),
        ("Deleted Lines", str(statistics.deleted_lines)),
        ("Modified Lines", str(statistics.modified_lines)),
        ("Unchanged Lines", str(statistics.unchanged_lines)),
        ("Similarity", f"{format_similarity(statistics.similarity)}%"),
    ]


class TextDiffRenderer:
    """Render a comparison result as a human-readable text report.

    Parameters
    ----------
    title : str, default REPORT_TITLE
        Heading printed at the top of the report
    include_statistics : bool, default True
        If False, the statistics block is omitted

    """

    def __init__(self, title: str = REPORT_TITLE, include_statistics: bool = True):
        """Initialize the text renderer."""
        self.title = title
        self.include_statistics = include_statistics

    def render(self, result: ComparisonResult) -> str:
        """Render the full report as a single string."""
        return "".join(f"{line}\n" for line in self.render_lines(result))

    def render_lines(self, result: ComparisonResult) -> list[str]:
        """Render the report as a list of lines without terminators."""
        lines = [self.title, "=" * len(self.title), ""]

        if self.include_statistics:
            lines.append("Statistics:")
            lines.extend(f"- {label}: {value}" for label, value in statistics_rows(result.statistics))
            lines.append("")

        lines.extend(["Differences:", "============", ""])
        for op in result.diffs:
            lines.extend(self.format_operation(op))

        return lines

    def format_operation(self, op: DiffOperation) -> list[str]:
        """Return the report lines for one operation (none for equalities)."""
        if op.tag == "insert":
            return [f"+ Line {op.new_line_number}: {op.new_value}"]
        if op.tag == "delete":
            return [f"- Line {op.old_line_number}: {op.old_value}"]
        if op.tag == "replace":
            return [
                f"~ Line {op.old_line_number} -> {op.new_line_number}:",
                f"  - {op.old_value}",
                f"  + {op.new_value}",
            ]
        return []


def render_to_file(result: ComparisonResult, output_path: Union[str, Path], **kwargs: Any) -> None:
    """Render a text report and write it to ``output_path``.

    Raises
    ------
    OutputWriteError
        If the file cannot be written

    """
    report = TextDiffRenderer(**kwargs).render(result)
    try:
        Path(output_path).write_text(report, encoding="utf-8")
    except OSError as e:
        raise OutputWriteError(str(output_path), original_error=e) from e
