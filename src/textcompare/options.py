#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textcompare/options.py
"""Comparison options for the textcompare diff engine.

Options are immutable dataclasses. Each field carries ``help`` metadata that
the CLI reuses, and :meth:`CloneFrozenMixin.create_updated` derives modified
copies without mutating the original.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, fields, replace
from typing import Any, Mapping

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from textcompare.constants import (
    DEFAULT_CONTEXT_LINES,
    DEFAULT_HIGHLIGHT_WORDS,
    DEFAULT_IGNORE_CASE,
    DEFAULT_IGNORE_LINE_BREAKS,
    DEFAULT_IGNORE_WHITESPACE,
    DEFAULT_SHOW_LINE_NUMBERS,
    DEFAULT_SPLIT_VIEW,
)
from textcompare.exceptions import InvalidOptionsError


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class ComparisonOptions(CloneFrozenMixin):
    """Configuration for a single text comparison.

    Only the three ``ignore_*`` flags change what the engine computes. The
    remaining fields are carried for presentation layers that consume the
    comparison result and are never read by the aligner.

    Parameters
    ----------
    ignore_case : bool, default False
        Lower-case both texts before alignment.
    ignore_whitespace : bool, default False
        Collapse whitespace runs to a single space and trim each text.
    ignore_line_breaks : bool, default False
        Replace line breaks with spaces before splitting into lines. This
        reduces each input to a single line.
    show_line_numbers : bool, default True
        Presentation hint: display line numbers.
    highlight_words : bool, default True
        Presentation hint: highlight changed words inside replaced lines.
    split_view : bool, default True
        Presentation hint: side-by-side rather than unified layout.
    context_lines : int, default 3
        Presentation hint: unchanged lines shown around each change.

    """

    ignore_case: bool = field(
        default=DEFAULT_IGNORE_CASE,
        metadata={"help": "Ignore differences in letter case", "importance": "core"},
    )
    ignore_whitespace: bool = field(
        default=DEFAULT_IGNORE_WHITESPACE,
        metadata={"help": "Collapse runs of whitespace and trim both texts", "importance": "core"},
    )
    ignore_line_breaks: bool = field(
        default=DEFAULT_IGNORE_LINE_BREAKS,
        metadata={
            "help": "Replace line breaks with spaces (compares each text as a single line)",
            "importance": "advanced",
        },
    )
    show_line_numbers: bool = field(
        default=DEFAULT_SHOW_LINE_NUMBERS,
        metadata={"help": "Display line numbers (presentation only)", "importance": "presentation"},
    )
    highlight_words: bool = field(
        default=DEFAULT_HIGHLIGHT_WORDS,
        metadata={"help": "Highlight changed words (presentation only)", "importance": "presentation"},
    )
    split_view: bool = field(
        default=DEFAULT_SPLIT_VIEW,
        metadata={"help": "Side-by-side layout (presentation only)", "importance": "presentation"},
    )
    context_lines: int = field(
        default=DEFAULT_CONTEXT_LINES,
        metadata={
            "help": "Unchanged lines shown around each change (presentation only)",
            "type": int,
            "importance": "presentation",
        },
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges.

        Raises
        ------
        ValueError
            If ``context_lines`` is negative.

        """
        if self.context_lines < 0:
            raise ValueError(f"context_lines must be non-negative, got {self.context_lines}")

    @property
    def affects_alignment(self) -> bool:
        """Whether any preprocessing step is enabled."""
        return self.ignore_case or self.ignore_whitespace or self.ignore_line_breaks

    def to_dict(self) -> dict[str, Any]:
        """Return the options as a plain field mapping."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ComparisonOptions:
        """Build options from a mapping such as a loaded config file.

        Parameters
        ----------
        data : Mapping[str, Any]
            Field names mapped to values. Missing fields keep their defaults.

        Returns
        -------
        ComparisonOptions
            Validated options instance

        Raises
        ------
        InvalidOptionsError
            If a key is not an option name or a value has the wrong type.

        """
        known = {f.name: f for f in fields(cls)}
        kwargs: dict[str, Any] = {}

        for key, value in data.items():
            option_field = known.get(key)
            if option_field is None:
                raise InvalidOptionsError(
                    f"Unknown comparison option: '{key}'. Valid options: {', '.join(known)}",
                    parameter_name=key,
                    parameter_value=value,
                )

            default = option_field.default
            if isinstance(default, bool):
                if not isinstance(value, bool):
                    raise InvalidOptionsError(
                        f"Option '{key}' must be a boolean, got {type(value).__name__}",
                        parameter_name=key,
                        parameter_value=value,
                    )
            elif isinstance(value, bool) or not isinstance(value, int):
                raise InvalidOptionsError(
                    f"Option '{key}' must be an integer, got {type(value).__name__}",
                    parameter_name=key,
                    parameter_value=value,
                )
            kwargs[key] = value

        try:
            return cls(**kwargs)
        except ValueError as e:
            raise InvalidOptionsError(str(e), original_error=e) from e


DEFAULT_COMPARISON_OPTIONS = ComparisonOptions()
