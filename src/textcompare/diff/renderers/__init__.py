#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textcompare/diff/renderers/__init__.py
"""Report renderers for comparison results.

Available Renderers
-------------------
- TextDiffRenderer: Human-readable plain-text report
- HtmlDiffRenderer: Standalone HTML report with coloured rows
- JsonDiffRenderer: Structured JSON output for programmatic access

Examples
--------
Render a comparison as HTML:
    >>> from textcompare import compare
    >>> from textcompare.diff.renderers import HtmlDiffRenderer
    >>> result = compare("old line", "new line")
    >>> html = HtmlDiffRenderer().render(result)

"""

from textcompare.diff.renderers.html import HtmlDiffRenderer
from textcompare.diff.renderers.json import JsonDiffRenderer
from textcompare.diff.renderers.text import TextDiffRenderer

__all__ = [
    "HtmlDiffRenderer",
    "JsonDiffRenderer",
    "TextDiffRenderer",
]
