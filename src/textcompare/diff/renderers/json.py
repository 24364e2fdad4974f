#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textcompare/diff/renderers/json.py
"""JSON renderer for structured comparison output.

The JSON document is the schema of :meth:`ComparisonResult.to_dict`, so
parsing it with :meth:`ComparisonResult.from_json` reconstructs an equal
result.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Union

from textcompare.constants import DEFAULT_JSON_INDENT
from textcompare.diff.models import ComparisonResult
from textcompare.exceptions import OutputWriteError


class JsonDiffRenderer:
    """Render a comparison result as JSON.

    Parameters
    ----------
    pretty_print : bool, default = True
        If True, format JSON with indentation
    indent : int, default = 2
        Number of spaces for indentation (if pretty_print=True)

    """

    def __init__(
        self,
        pretty_print: bool = True,
        indent: int = DEFAULT_JSON_INDENT,
    ):
        """Initialize the JSON renderer."""
        self.pretty_print = pretty_print
        self.indent = indent

    def render(self, result: ComparisonResult) -> str:
        """Serialize the statistics and every operation to a JSON string."""
        data = result.to_dict()
        if self.pretty_print:
            return json.dumps(data, indent=self.indent, ensure_ascii=False)
        return json.dumps(data, ensure_ascii=False)


def render_to_file(result: ComparisonResult, output_path: Union[str, Path], **kwargs: Any) -> None:
    """Render a comparison to a JSON file.

    Raises
    ------
    OutputWriteError
        If the file cannot be written

    """
    payload = JsonDiffRenderer(**kwargs).render(result)
    try:
        Path(output_path).write_text(payload, encoding="utf-8")
    except OSError as e:
        raise OutputWriteError(str(output_path), original_error=e) from e
