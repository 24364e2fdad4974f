#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textcompare/diff/renderers/html.py
"""HTML report renderer.

Produces a small standalone HTML document with the same content as the text
report: a statistics block followed by one row per insertion, deletion or
replacement. Line content is escaped, and rows carry the CSS classes
``added``, ``deleted`` or ``modified``.
"""

from __future__ import annotations

from html import escape
from io import StringIO
from pathlib import Path
from typing import Any, Union

from textcompare.constants import REPORT_TITLE
from textcompare.diff.models import ComparisonResult, DiffOperation
from textcompare.diff.renderers.text import statistics_rows
from textcompare.exceptions import OutputWriteError


class HtmlDiffRenderer:
    """Render a comparison result as an HTML document.

    Parameters
    ----------
    title : str, default REPORT_TITLE
        Document title and main heading
    inline_styles : bool, default True
        If True, embed the stylesheet in the document head

    Examples
    --------
    >>> from textcompare import compare
    >>> html = HtmlDiffRenderer().render(compare("a", "b"))
    >>> "diff-line modified" in html
    True

    """

    def __init__(self, title: str = REPORT_TITLE, inline_styles: bool = True):
        """Initialize the HTML renderer."""
        self.title = title
        self.inline_styles = inline_styles

    def render(self, result: ComparisonResult) -> str:
        """Render the comparison to an HTML string."""
        output = StringIO()
        self._write_html_prefix(output)
        self._render_statistics(result, output)
        self._render_differences(result, output)
        self._write_html_suffix(output)
        return output.getvalue()

    def _write_html_prefix(self, output: StringIO) -> None:
        title = escape(self.title)
        output.write("<!DOCTYPE html>\n")
        output.write("<html lang='en'>\n")
        output.write("<head>\n")
        output.write("  <meta charset='UTF-8'>\n")
        output.write(f"  <title>{title}</title>\n")

        if self.inline_styles:
            output.write("  <style>\n")
            output.write(self._get_css())
            output.write("  </style>\n")

        output.write("</head>\n")
        output.write("<body>\n")
        output.write(f"  <h1>{title}</h1>\n")

    def _write_html_suffix(self, output: StringIO) -> None:
        output.write("</body>\n")
        output.write("</html>\n")

    def _get_css(self) -> str:
        """Get CSS styles for the HTML output."""
        return """
    body { font-family: monospace; margin: 20px; }
    .stats { background: #f5f5f5; padding: 15px; border-radius: 5px; margin-bottom: 20px; }
    .diff-line { margin: 2px 0; padding: 2px 5px; white-space: pre-wrap; }
    .added { background-color: #d4edda; color: #155724; }
    .deleted { background-color: #f8d7da; color: #721c24; }
    .modified { background-color: #fff3cd; color: #856404; }
"""

    def _render_statistics(self, result: ComparisonResult, output: StringIO) -> None:
        output.write("  <div class='stats'>\n")
        output.write("    <h2>Statistics</h2>\n")
        for label, value in statistics_rows(result.statistics):
            output.write(f"    <p>{label}: {escape(value)}</p>\n")
        output.write("  </div>\n")

    def _render_differences(self, result: ComparisonResult, output: StringIO) -> None:
        output.write("  <h2>Differences</h2>\n")
        output.write("  <div class='diffs'>\n")
        for op in result.diffs:
            for css_class, text in self._operation_rows(op):
                output.write(f"    <div class='diff-line {css_class}'>{escape(text)}</div>\n")
        output.write("  </div>\n")

    def _operation_rows(self, op: DiffOperation) -> list[tuple[str, str]]:
        if op.tag == "insert":
            return [("added", f"+ Line {op.new_line_number}: {op.new_value}")]
        if op.tag == "delete":
            return [("deleted", f"- Line {op.old_line_number}: {op.old_value}")]
        if op.tag == "replace":
            return [
                ("modified", f"~ Line {op.old_line_number} -> {op.new_line_number}:"),
                ("deleted", f"  - {op.old_value}"),
                ("added", f"  + {op.new_value}"),
            ]
        return []


def render_to_file(result: ComparisonResult, output_path: Union[str, Path], **kwargs: Any) -> None:
    """Render an HTML report and write it to ``output_path``.

    Raises
    ------
    OutputWriteError
        If the file cannot be written

    """
    html = HtmlDiffRenderer(**kwargs).render(result)
    try:
        Path(output_path).write_text(html, encoding="utf-8")
    except OSError as e:
        raise OutputWriteError(str(output_path), original_error=e) from e
