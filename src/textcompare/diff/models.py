#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textcompare/diff/models.py
"""Value types produced by the diff engine.

A comparison yields an ordered tuple of diff operations plus a statistics
record. Every operation is one of four frozen variants with fixed fields:

- :class:`EqualOp` - the line is unchanged on both sides
- :class:`InsertOp` - the line exists only in the new text
- :class:`DeleteOp` - the line exists only in the old text
- :class:`ReplaceOp` - the old line was replaced by the new line

Line numbers are 1-based positions in the preprocessed line sequences.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, fields
from typing import Any, ClassVar, Mapping

from textcompare.constants import DiffTag
from textcompare.exceptions import ValidationError


@dataclass(frozen=True, slots=True)
class DiffOperation:
    """Base class of the four diff operation variants."""

    tag: ClassVar[DiffTag]

    def to_dict(self) -> dict[str, Any]:
        """Serialize the operation with its ``type`` tag and own fields only."""
        data: dict[str, Any] = {"type": self.tag}
        for f in fields(self):
            data[f.name] = getattr(self, f.name)
        return data


@dataclass(frozen=True, slots=True)
class EqualOp(DiffOperation):
    """A line present, unchanged, in both texts."""

    tag: ClassVar[DiffTag] = "equal"

    old_value: str
    new_value: str
    old_line_number: int
    new_line_number: int


@dataclass(frozen=True, slots=True)
class InsertOp(DiffOperation):
    """A line added in the new text."""

    tag: ClassVar[DiffTag] = "insert"

    new_value: str
    new_line_number: int


@dataclass(frozen=True, slots=True)
class DeleteOp(DiffOperation):
    """A line removed from the old text."""

    tag: ClassVar[DiffTag] = "delete"

    old_value: str
    old_line_number: int


@dataclass(frozen=True, slots=True)
class ReplaceOp(DiffOperation):
    """An old line replaced by a different new line at the same position."""

    tag: ClassVar[DiffTag] = "replace"

    old_value: str
    new_value: str
    old_line_number: int
    new_line_number: int


OPERATION_TYPES: dict[str, type[DiffOperation]] = {
    "equal": EqualOp,
    "insert": InsertOp,
    "delete": DeleteOp,
    "replace": ReplaceOp,
}


def operation_from_dict(data: Mapping[str, Any]) -> DiffOperation:
    """Rebuild a diff operation from its serialized mapping.

    Parameters
    ----------
    data : Mapping[str, Any]
        Mapping produced by :meth:`DiffOperation.to_dict`

    Returns
    -------
    DiffOperation
        The matching operation variant

    Raises
    ------
    ValidationError
        If ``data`` is not a mapping, the type tag is unknown, or a field is
        missing or of the wrong type.

    """
    if not isinstance(data, Mapping):
        raise ValidationError(
            f"Diff operation must be a mapping, got {type(data).__name__}",
            parameter_value=data,
        )

    tag = data.get("type")
    op_class = OPERATION_TYPES.get(tag) if isinstance(tag, str) else None
    if op_class is None:
        raise ValidationError(
            f"Unknown diff operation type: {tag!r}",
            parameter_name="type",
            parameter_value=tag,
        )

    kwargs: dict[str, Any] = {}
    for f in fields(op_class):
        if f.name not in data:
            raise ValidationError(
                f"Diff operation of type '{tag}' is missing field '{f.name}'",
                parameter_name=f.name,
            )
        value = data[f.name]
        expected = int if f.name.endswith("_line_number") else str
        # bool is an int subclass but never a line number
        if not isinstance(value, expected) or isinstance(value, bool):
            raise ValidationError(
                f"Field '{f.name}' of a '{tag}' operation must be {expected.__name__}, got {type(value).__name__}",
                parameter_name=f.name,
                parameter_value=value,
            )
        kwargs[f.name] = value
    return op_class(**kwargs)


@dataclass(frozen=True, slots=True)
class DiffStatistics:
    """Aggregate counts for a comparison.

    ``similarity`` is the percentage of ``total_lines`` that are unchanged,
    rounded to two decimals.
    """

    total_lines: int
    added_lines: int
    deleted_lines: int
    modified_lines: int
    unchanged_lines: int
    similarity: float

    def to_dict(self) -> dict[str, Any]:
        """Serialize the statistics to a plain mapping."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> DiffStatistics:
        """Rebuild statistics from :meth:`to_dict` output."""
        if not isinstance(data, Mapping):
            raise ValidationError(
                f"Statistics must be a mapping, got {type(data).__name__}",
                parameter_name="statistics",
                parameter_value=data,
            )
        missing = [f.name for f in fields(cls) if f.name not in data]
        if missing:
            raise ValidationError(
                f"Statistics are missing field(s): {', '.join(missing)}",
                parameter_name=missing[0],
            )
        try:
            return cls(
                total_lines=int(data["total_lines"]),
                added_lines=int(data["added_lines"]),
                deleted_lines=int(data["deleted_lines"]),
                modified_lines=int(data["modified_lines"]),
                unchanged_lines=int(data["unchanged_lines"]),
                similarity=float(data["similarity"]),
            )
        except (TypeError, ValueError) as e:
            raise ValidationError(f"Statistics contain a non-numeric value: {e}", original_error=e) from e


@dataclass(frozen=True, slots=True)
class ComparisonResult:
    """Ordered diff operations plus their statistics.

    Instances are immutable and own no state beyond their fields, so the same
    inputs always produce equal results.
    """

    diffs: tuple[DiffOperation, ...]
    statistics: DiffStatistics

    @property
    def has_changes(self) -> bool:
        """Whether any operation is not an equality."""
        return any(op.tag != "equal" for op in self.diffs)

    def to_dict(self) -> dict[str, Any]:
        """Serialize the result with stable field names."""
        return {
            "statistics": self.statistics.to_dict(),
            "diffs": [op.to_dict() for op in self.diffs],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ComparisonResult:
        """Rebuild a result from :meth:`to_dict` output.

        Raises
        ------
        ValidationError
            If the mapping does not describe a comparison result.

        """
        if "statistics" not in data or "diffs" not in data:
            raise ValidationError("Comparison result requires 'statistics' and 'diffs'")
        diffs = data["diffs"]
        if not isinstance(diffs, list):
            raise ValidationError("'diffs' must be a list", parameter_name="diffs", parameter_value=diffs)
        return cls(
            diffs=tuple(operation_from_dict(item) for item in diffs),
            statistics=DiffStatistics.from_dict(data["statistics"]),
        )

    def to_json(self, indent: int | None = 2) -> str:
        """Serialize the result to a JSON string."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    @classmethod
    def from_json(cls, payload: str) -> ComparisonResult:
        """Parse JSON produced by :meth:`to_json` or the JSON exporter."""
        try:
            data = json.loads(payload)
        except json.JSONDecodeError as e:
            raise ValidationError(f"Invalid comparison JSON: {e}", original_error=e) from e
        if not isinstance(data, dict):
            raise ValidationError(f"Comparison JSON must be an object, got {type(data).__name__}")
        return cls.from_dict(data)
