"""Test utilities for the textcompare test suite."""

import shutil
import tempfile
from pathlib import Path

from textcompare.diff.models import ComparisonResult


def create_test_temp_dir() -> Path:
    """Create a temporary directory for test files."""
    return Path(tempfile.mkdtemp())


def cleanup_test_dir(temp_dir: Path) -> None:
    """Clean up test directory and files."""
    if temp_dir.exists():
        shutil.rmtree(temp_dir)


def op_tags(result: ComparisonResult) -> list[str]:
    """Return the operation tags of a comparison in order."""
    return [op.tag for op in result.diffs]


def assert_statistics_consistent(result: ComparisonResult) -> None:
    """Check that the statistics agree with the operation list."""
    stats = result.statistics
    tags = op_tags(result)
    assert stats.added_lines == tags.count("insert")
    assert stats.deleted_lines == tags.count("delete")
    assert stats.modified_lines == tags.count("replace")
    assert stats.unchanged_lines == tags.count("equal")
    assert 0.0 <= stats.similarity <= 100.0
