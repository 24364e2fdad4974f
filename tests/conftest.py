"""Pytest configuration and shared fixtures for the textcompare test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import logging
import os
from pathlib import Path
from typing import Generator

import pytest
from hypothesis import Phase, Verbosity, settings
from utils import cleanup_test_dir, create_test_temp_dir

from textcompare.constants import ENV_CONFIG_VAR

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=50)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests - full pipeline tests")
    config.addinivalue_line("markers", "slow: Slow tests that may take several seconds")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory for test files.

    Yields
    ------
    Path
        Temporary directory path that will be cleaned up after test.

    """
    temp_path = create_test_temp_dir()
    try:
        yield temp_path
    finally:
        cleanup_test_dir(temp_path)


@pytest.fixture
def isolated_config(monkeypatch, temp_dir: Path) -> Path:
    """Run a test where no config file can be discovered.

    The working directory and home directory both point at an empty
    temporary directory and ``TEXTCOMPARE_CONFIG`` is unset.
    """
    monkeypatch.delenv(ENV_CONFIG_VAR, raising=False)
    monkeypatch.chdir(temp_dir)
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: temp_dir))
    return temp_dir


@pytest.fixture(autouse=True)
def reset_root_logger() -> Generator[None, None, None]:
    """Restore the root logger after tests that run the CLI."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def basic_texts() -> tuple[str, str]:
    """Provide the basic prose pair used across comparison tests.

    Returns
    -------
    tuple[str, str]
        ``(old_text, new_text)``

    """
    old = "Hello World\nThis is a sample text\nfor comparison testing\nwith multiple lines"
    new = (
        "Hello Universe\nThis is a sample text\nfor comparison testing\nwith several lines\nand additional content"
    )
    return old, new


@pytest.fixture
def text_files(temp_dir: Path, basic_texts: tuple[str, str]) -> tuple[Path, Path]:
    """Write the basic pair to ``old.txt`` and ``new.txt``."""
    old_path = temp_dir / "old.txt"
    new_path = temp_dir / "new.txt"
    old_path.write_text(basic_texts[0], encoding="utf-8")
    new_path.write_text(basic_texts[1], encoding="utf-8")
    return old_path, new_path
