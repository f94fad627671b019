"""Loading documents from files and strings."""

import logging
import sys
from pathlib import Path
from typing import List, Tuple

from .types import Document, EncodingError, Line, SourceReadError

logger = logging.getLogger(__name__)

STDIN_SOURCE = "-"


def split_lines(content: str) -> Tuple[List[str], bool]:
    """Split content into lines without their terminators.

    Returns the lines and whether the content ended with a newline.
    A carriage return before the newline stays part of the line.
    """
    if not content:
        return [], True

    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
        return lines, True
    return lines, False


def is_binary(content: str) -> bool:
    """Detect if content appears to be binary (contains null bytes)."""
    return "\x00" in content


def from_text(content: str, source: str = "<string>") -> Document:
    """Build a Document from an in-memory string."""
    contents, trailing_newline = split_lines(content)
    lines = tuple(Line(number, text) for number, text in enumerate(contents, start=1))
    return Document(source=source, lines=lines, trailing_newline=trailing_newline)


def _read_bytes(source: str) -> bytes:
    if source == STDIN_SOURCE:
        try:
            return sys.stdin.buffer.read()
        except OSError as e:
            raise SourceReadError(f"cannot read standard input: {e}") from e

    path = Path(source)
    try:
        return path.read_bytes()
    except FileNotFoundError as e:
        raise SourceReadError(f"{source}: No such file or directory") from e
    except IsADirectoryError as e:
        raise SourceReadError(f"{source}: Is a directory") from e
    except PermissionError as e:
        raise SourceReadError(f"{source}: Permission denied") from e
    except OSError as e:
        raise SourceReadError(f"{source}: {e.strerror or e}") from e


def load(source: str, encoding: str = "utf-8") -> Document:
    """Read a file (or standard input for "-") into a Document.

    Raises:
        SourceReadError: the source does not exist or cannot be read.
        EncodingError: the bytes are not valid text in `encoding`.
    """
    data = _read_bytes(source)
    try:
        content = data.decode(encoding)
    except UnicodeDecodeError as e:
        raise EncodingError(
            f"{source}: cannot decode byte at offset {e.start} as {encoding}"
        ) from e
    except LookupError as e:
        raise EncodingError(f"unknown encoding: {encoding}") from e

    if is_binary(content):
        raise EncodingError(f"{source}: binary content is not supported")

    document = from_text(content, source=source)
    logger.debug(
        "loaded %s: %d lines, trailing newline=%s",
        source, len(document), document.trailing_newline,
    )
    return document
