#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textcompare/diff/api.py
"""Export entry point for comparison results."""

from __future__ import annotations

from typing import Any

from textcompare.constants import DEFAULT_EXPORT_FORMAT, SUPPORTED_EXPORT_FORMATS
from textcompare.diff.models import ComparisonResult
from textcompare.diff.renderers import HtmlDiffRenderer, JsonDiffRenderer, TextDiffRenderer
from textcompare.exceptions import UnsupportedFormatError


def export_comparison(
    result: ComparisonResult,
    format: str = DEFAULT_EXPORT_FORMAT,
    **kwargs: Any,
) -> str:
    """Render a comparison result in the requested format.

    Parameters
    ----------
    result : ComparisonResult
        Result returned by :func:`textcompare.compare`
    format : {"text", "html", "json"}, default "text"
        Output format:
        - "text": plain-text report of statistics and changed lines
        - "html": standalone HTML report
        - "json": the full result, including equal operations
    **kwargs : dict
        Additional options passed to the renderer

    Returns
    -------
    str
        The complete rendered output

    Raises
    ------
    UnsupportedFormatError
        If ``format`` is not one of the supported formats

    Examples
    --------
    >>> from textcompare import compare
    >>> report = export_comparison(compare("a\\nb", "a\\nc"), format="text")
    >>> "~ Line 2 -> 2:" in report
    True

    """
    if format == "text":
        return TextDiffRenderer(**kwargs).render(result)
    if format == "html":
        return HtmlDiffRenderer(**kwargs).render(result)
    if format == "json":
        return JsonDiffRenderer(**kwargs).render(result)

    raise UnsupportedFormatError(format_type=str(format), supported_formats=SUPPORTED_EXPORT_FORMATS)


def render_to_file(
    result: ComparisonResult,
    output_path: str,
    format: str = DEFAULT_EXPORT_FORMAT,
    **kwargs: Any,
) -> None:
    """Render a comparison result and write it to ``output_path``.

    Raises
    ------
    UnsupportedFormatError
        If ``format`` is not supported
    OutputWriteError
        If the file cannot be written

    """
    if format == "text":
        from textcompare.diff.renderers.text import render_to_file as write_report
    elif format == "html":
        from textcompare.diff.renderers.html import render_to_file as write_report
    elif format == "json":
        from textcompare.diff.renderers.json import render_to_file as write_report
    else:
        raise UnsupportedFormatError(format_type=str(format), supported_formats=SUPPORTED_EXPORT_FORMATS)

    write_report(result, output_path, **kwargs)
