#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textcompare/samples.py
"""Built-in sample text pairs for trying out comparisons."""

from __future__ import annotations

from dataclasses import dataclass

from textcompare.exceptions import ValidationError


@dataclass(frozen=True)
class SamplePair:
    """Two texts meant to be compared against each other."""

    name: str
    description: str
    left: str
    right: str


SAMPLE_PAIRS: dict[str, SamplePair] = {
    "basic": SamplePair(
        name="basic",
        description="Short prose with a changed word, a reworded line and an added line",
        left="Hello World\nThis is a sample text\nfor comparison testing\nwith multiple lines",
        right=(
            "Hello Universe\nThis is a sample text\nfor comparison testing\n"
            "with several lines\nand additional content"
        ),
    ),
    "code": SamplePair(
        name="code",
        description="A small function gaining a parameter",
        left=(
            "function calculateSum(a, b) {\n"
            "  return a + b;\n"
            "}\n"
            "\n"
            "const result = calculateSum(5, 3);\n"
            "console.log(result);"
        ),
        right=(
            "function calculateSum(a, b, c = 0) {\n"
            "  return a + b + c;\n"
            "}\n"
            "\n"
            "const result = calculateSum(5, 3, 2);\n"
            "console.log('Result:', result);"
        ),
    ),
    "json": SamplePair(
        name="json",
        description="A JSON object with changed values and a new key",
        left='{\n  "name": "John Doe",\n  "age": 30,\n  "city": "New York"\n}',
        right='{\n  "name": "John Smith",\n  "age": 32,\n  "city": "New York",\n  "country": "USA"\n}',
    ),
}


def list_sample_names() -> list[str]:
    """Return the names of the built-in sample pairs."""
    return list(SAMPLE_PAIRS)


def get_sample_pair(name: str) -> SamplePair:
    """Look up a sample pair by name.

    Raises
    ------
    ValidationError
        If no sample pair has that name

    """
    try:
        return SAMPLE_PAIRS[name]
    except KeyError:
        raise ValidationError(
            f"Unknown sample '{name}'. Available samples: {', '.join(SAMPLE_PAIRS)}",
            parameter_name="name",
            parameter_value=name,
        ) from None
