#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textcompare/diff/renderers/ansi.py
"""ANSI colouring for text reports shown in a terminal."""

from __future__ import annotations

from typing import Iterable, Iterator

RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
BOLD = "\033[1m"
RESET = "\033[0m"


def colorize_report(lines: Iterable[str], use_color: bool = True) -> Iterator[str]:
    """Add ANSI colours to the lines of a text report.

    - Bold for the title and section headings
    - Green for insertions and the new side of a replacement
    - Red for deletions and the old side of a replacement
    - Yellow for replacement headers

    Parameters
    ----------
    lines : iterable of str
        Lines from :meth:`TextDiffRenderer.render_lines`
    use_color : bool, default = True
        If False, lines are passed through unchanged

    Yields
    ------
    str
        Colourised lines

    """
    if not use_color:
        yield from lines
        return

    for line in lines:
        if line.startswith("+ Line") or line.startswith("  + "):
            yield f"{GREEN}{line}{RESET}"
        elif line.startswith("- Line") or line.startswith("  - "):
            yield f"{RED}{line}{RESET}"
        elif line.startswith("~ Line"):
            yield f"{YELLOW}{line}{RESET}"
        elif line and not line.startswith("- ") and (line.endswith(":") or set(line) == {"="}):
            yield f"{BOLD}{line}{RESET}"
        else:
            yield line
