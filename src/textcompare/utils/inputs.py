"""Input loading and validation for text comparisons.

The comparison engine accepts plain strings. This module supplies those
strings from files, standard input, bytes or file-like objects, and applies
the per-side size guard callers must run before comparing.

Functions
---------
- load_text_file: Read a file into a :class:`TextFile` with encoding detection
- read_text_source: Read a path, ``"-"``, bytes or file-like object as text
- decode_text: Decode bytes, trying chardet and then fallback encodings
- validate_text_input: Reject texts above the character limit
"""

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textcompare/utils/inputs.py
from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import IO, Any, Union

import chardet

from textcompare.constants import (
    DEFAULT_FALLBACK_ENCODINGS,
    DEFAULT_MAX_INPUT_CHARS,
    ENCODING_CONFIDENCE_THRESHOLD,
    ENCODING_SAMPLE_SIZE,
)
from textcompare.exceptions import FileAccessError, InputTooLargeError, ValidationError
from textcompare.exceptions import FileNotFoundError as TextCompareFileNotFoundError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]
TextSource = Union[PathLike, bytes, IO[Any]]

STDIN_MARKER = "-"


@dataclass(frozen=True)
class TextFile:
    """A loaded text document.

    Parameters
    ----------
    name : str
        File name or a label such as ``"stdin"``
    content : str
        Decoded text
    encoding : str or None
        Encoding used to decode the content, if it came from bytes
    size : int or None
        Size of the raw input in bytes
    last_modified : datetime or None
        Modification time for files on disk

    """

    name: str
    content: str
    encoding: str | None = None
    size: int | None = None
    last_modified: datetime | None = None


def detect_encoding(data: bytes) -> str | None:
    """Guess the encoding of ``data`` with chardet.

    Returns ``None`` when chardet is unsure (confidence below
    ``ENCODING_CONFIDENCE_THRESHOLD``) or reports nothing.
    """
    result = chardet.detect(data[:ENCODING_SAMPLE_SIZE])
    encoding = result.get("encoding") if result else None
    if not encoding:
        return None

    confidence = result.get("confidence") or 0.0
    if confidence < ENCODING_CONFIDENCE_THRESHOLD:
        logger.debug("chardet confidence %.2f for %s below threshold", confidence, encoding)
        return None
    return encoding


def decode_text(data: bytes) -> tuple[str, str]:
    """Decode bytes to text.

    Strict UTF-8 (with an optional BOM) is tried first, then the chardet
    guess, then ``DEFAULT_FALLBACK_ENCODINGS`` in order. ``latin-1`` accepts
    any byte sequence, so decoding always succeeds.

    Returns
    -------
    tuple[str, str]
        The decoded text and the encoding that produced it

    """
    candidates: list[str] = ["utf-8-sig"]
    detected = detect_encoding(data) if data else None
    if detected and detected.lower() not in ("utf-8", "ascii"):
        candidates.append(detected)
    candidates.extend(enc for enc in DEFAULT_FALLBACK_ENCODINGS if enc not in candidates)

    for encoding in candidates:
        try:
            text = data.decode(encoding)
        except (UnicodeDecodeError, LookupError) as e:
            logger.debug("Failed to decode with %s: %s", encoding, e)
            continue
        logger.debug("Decoded %d bytes as %s", len(data), encoding)
        return text, encoding

    logger.warning("All encoding attempts failed, using utf-8 with error replacement")
    return data.decode("utf-8", errors="replace"), "utf-8"


def load_text_file(path: PathLike) -> TextFile:
    """Read a file from disk as text.

    Parameters
    ----------
    path : str or Path
        File to read

    Returns
    -------
    TextFile
        Loaded content with name, encoding, size and modification time

    Raises
    ------
    FileNotFoundError
        If the path does not exist
    FileAccessError
        If the path is not a regular file or cannot be read

    """
    file_path = Path(path)
    if not file_path.exists():
        raise TextCompareFileNotFoundError(file_path=str(file_path))
    if not file_path.is_file():
        raise FileAccessError(str(file_path), message=f"Path is not a file: {file_path}")

    try:
        data = file_path.read_bytes()
        stat = file_path.stat()
    except OSError as e:
        raise FileAccessError(str(file_path), original_error=e) from e

    content, encoding = decode_text(data)
    return TextFile(
        name=file_path.name,
        content=content,
        encoding=encoding,
        size=len(data),
        last_modified=datetime.fromtimestamp(stat.st_mtime),
    )


def read_text_source(source: TextSource, label: str | None = None) -> TextFile:
    """Read text from a path, standard input, bytes or a file-like object.

    Parameters
    ----------
    source : str, Path, bytes or file-like
        ``"-"`` reads standard input. File-like objects may be opened in
        text or binary mode.
    label : str, optional
        Name for the resulting :class:`TextFile` when the source has none

    Returns
    -------
    TextFile
        The loaded text

    Raises
    ------
    ValidationError
        If the source type is not supported

    """
    if isinstance(source, str) and source == STDIN_MARKER:
        return read_text_source(getattr(sys.stdin, "buffer", sys.stdin), label=label or "stdin")

    if isinstance(source, (str, Path)):
        return load_text_file(source)

    if isinstance(source, bytes):
        content, encoding = decode_text(source)
        return TextFile(name=label or "bytes", content=content, encoding=encoding, size=len(source))

    if hasattr(source, "read") and callable(source.read):
        data = source.read()
        name = label or str(getattr(source, "name", "stream"))
        if isinstance(data, bytes):
            content, encoding = decode_text(data)
            return TextFile(name=name, content=content, encoding=encoding, size=len(data))
        if isinstance(data, str):
            return TextFile(name=name, content=data, size=len(data.encode("utf-8")))

    raise ValidationError(
        f"Unsupported text source: {type(source).__name__}. Supported types: path, '-', bytes, file-like",
        parameter_name="source",
        parameter_value=source,
    )


def validate_text_input(text: str, side: str, limit: int = DEFAULT_MAX_INPUT_CHARS) -> None:
    """Reject a text longer than ``limit`` characters.

    Parameters
    ----------
    text : str
        Text about to be compared
    side : {"old", "new"}
        Which side of the comparison ``text`` is
    limit : int, default DEFAULT_MAX_INPUT_CHARS
        Maximum number of characters allowed

    Raises
    ------
    InputTooLargeError
        If ``len(text)`` exceeds ``limit``

    """
    actual = len(text)
    if actual > limit:
        logger.warning("Rejected %s text: %d characters exceeds limit of %d", side, actual, limit)
        raise InputTooLargeError(side=side, limit=limit, actual=actual)
