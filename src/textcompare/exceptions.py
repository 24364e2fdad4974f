#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the textcompare library.

The diff engine itself has no fallible operations for string inputs. The
exceptions below are raised at the boundaries: option validation, the input
size guard, file loading, export format selection and writing output.

Exception Hierarchy
-------------------
- TextCompareError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (bad option mapping or value types)
    - InputTooLargeError (text exceeds the per-side size limit)

  - FileError (file access and I/O)
    - FileNotFoundError (file doesn't exist)
    - FileAccessError (permissions, unreadable paths)

  - FormatError (unsupported/unknown formats)
    - UnsupportedFormatError (unknown export format tag)

  - RenderingError (output generation failures)
    - OutputWriteError (file write failures)

"""

from typing import Any, Sequence


class TextCompareError(Exception):
    """Base exception class for all textcompare-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(TextCompareError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Exception raised when an options mapping cannot be turned into options.

    Parameters
    ----------
    message : str
        Description of what is wrong with the options
    parameter_name : str, optional
        The offending option key
    parameter_value : any, optional
        The offending value

    """


class InputTooLargeError(ValidationError):
    """Exception raised when one side of a comparison exceeds the size limit.

    Parameters
    ----------
    side : {"old", "new"}
        Which input was too large
    limit : int
        Maximum number of characters allowed
    actual : int
        Number of characters received

    """

    def __init__(self, side: str, limit: int, actual: int, message: str | None = None):
        """Initialize the size violation with the side, limit and actual size."""
        if message is None:
            message = f"{side} text is too large: {actual:,} characters (maximum is {limit:,})"
        super().__init__(message, parameter_name=f"{side}_text", parameter_value=actual)
        self.side = side
        self.limit = limit
        self.actual = actual


class FileError(TextCompareError):
    """Base exception for file access and I/O errors.

    Parameters
    ----------
    message : str
        Description of the file error
    file_path : str, optional
        Path to the problematic file
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the file error with path and message."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class FileNotFoundError(FileError):
    """Exception raised when an input file cannot be found."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the file not found error."""
        if message is None:
            message = f"File not found: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class FileAccessError(FileError):
    """Exception raised when an input exists but cannot be read."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the file access error."""
        if message is None:
            message = f"Cannot access file: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class FormatError(TextCompareError):
    """Exception raised when a requested format is not available.

    Parameters
    ----------
    message : str, optional
        Custom error message
    format_type : str, optional
        The unsupported format name
    supported_formats : sequence of str, optional
        Supported formats, listed in the generated message

    """

    def __init__(
        self,
        message: str | None = None,
        format_type: str | None = None,
        supported_formats: Sequence[str] | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the format error."""
        if message is None:
            if format_type:
                message = f"Unsupported format: '{format_type}'"
                if supported_formats:
                    message += f". Supported formats: {', '.join(supported_formats)}"
            else:
                message = "Format is not supported"

        super().__init__(message, original_error=original_error)
        self.format_type = format_type
        self.supported_formats = list(supported_formats) if supported_formats else None


class UnsupportedFormatError(FormatError):
    """Exception raised when a comparison is exported to an unknown format."""


class RenderingError(TextCompareError):
    """Exception raised when producing a report fails.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The stage of rendering where the error occurred
    original_error : Exception, optional
        The underlying exception

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class OutputWriteError(RenderingError):
    """Exception raised when writing a report to disk fails."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the output write error."""
        if message is None:
            message = f"Failed to write output file: {file_path}"
        super().__init__(message, rendering_stage="file_write", original_error=original_error)
        self.file_path = file_path
