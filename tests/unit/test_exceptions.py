"""Unit tests for the exception hierarchy and logging setup."""

import logging

import pytest

from textcompare.exceptions import (
    FileAccessError,
    FileError,
    FileNotFoundError,
    FormatError,
    InputTooLargeError,
    InvalidOptionsError,
    OutputWriteError,
    RenderingError,
    TextCompareError,
    UnsupportedFormatError,
    ValidationError,
)
from textcompare.logging_utils import configure_logging, resolve_log_level


@pytest.mark.unit
class TestExceptionHierarchy:
    """Tests for exception classes and their messages."""

    @pytest.mark.parametrize(
        "error_class, parent",
        [
            (ValidationError, TextCompareError),
            (InvalidOptionsError, ValidationError),
            (InputTooLargeError, ValidationError),
            (FileError, TextCompareError),
            (FileNotFoundError, FileError),
            (FileAccessError, FileError),
            (FormatError, TextCompareError),
            (UnsupportedFormatError, FormatError),
            (RenderingError, TextCompareError),
            (OutputWriteError, RenderingError),
        ],
    )
    def test_subclassing(self, error_class, parent):
        assert issubclass(error_class, parent)

    def test_base_keeps_original_error(self):
        cause = OSError("disk")
        error = TextCompareError("failed", original_error=cause)
        assert error.message == "failed"
        assert error.original_error is cause
        assert str(error) == "failed"

    def test_file_not_found_message(self):
        error = FileNotFoundError("notes.txt")
        assert str(error) == "File not found: notes.txt"
        assert error.file_path == "notes.txt"

    def test_file_not_found_does_not_shadow_builtin_hierarchy(self):
        assert not issubclass(FileNotFoundError, OSError)

    def test_format_error_message(self):
        error = UnsupportedFormatError(format_type="xml", supported_formats=["text", "html", "json"])
        assert str(error) == "Unsupported format: 'xml'. Supported formats: text, html, json"
        assert error.supported_formats == ["text", "html", "json"]

    def test_format_error_without_details(self):
        assert str(FormatError()) == "Format is not supported"

    def test_input_too_large_custom_message(self):
        error = InputTooLargeError(side="old", limit=5, actual=9, message="too big")
        assert str(error) == "too big"
        assert error.parameter_value == 9

    def test_output_write_error(self):
        error = OutputWriteError("out.html")
        assert str(error) == "Failed to write output file: out.html"
        assert error.rendering_stage == "file_write"
        assert error.file_path == "out.html"


@pytest.mark.unit
class TestLoggingUtils:
    """Tests for root logger configuration."""

    def test_resolve_level_names(self):
        assert resolve_log_level("debug") == logging.DEBUG
        assert resolve_log_level("WARNING") == logging.WARNING
        assert resolve_log_level(logging.ERROR) == logging.ERROR
        assert resolve_log_level("chatty") == logging.INFO

    def test_configures_single_console_handler(self):
        root = configure_logging("INFO")
        assert root.level == logging.INFO
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], logging.StreamHandler)

    def test_repeat_calls_replace_handlers(self):
        configure_logging(logging.DEBUG)
        root = configure_logging(logging.WARNING)
        assert len(root.handlers) == 1

    def test_trace_format(self):
        root = configure_logging(logging.DEBUG, trace_mode=True)
        assert "%(name)s" in root.handlers[0].formatter._fmt

    def test_log_file(self, temp_dir):
        log_path = temp_dir / "run.log"
        root = configure_logging(logging.INFO, log_file=str(log_path))
        assert any(isinstance(h, logging.FileHandler) for h in root.handlers)

        logging.getLogger("textcompare.test").info("recorded")
        for handler in root.handlers:
            handler.flush()
        assert "recorded" in log_path.read_text(encoding="utf-8")

    def test_unwritable_log_file_skipped(self, temp_dir):
        root = configure_logging(logging.INFO, log_file=str(temp_dir / "missing" / "run.log"))
        assert not any(isinstance(h, logging.FileHandler) for h in root.handlers)
