"""Byte, JSON text and number formatting helpers."""

import math
import re

# Numeric array lines spread over several lines by an indenting JSON encoder
_NUMBER_LINE_RE = re.compile(r"^\s*?([0-9.]+,?)\s*?\r?\n?", re.MULTILINE)
_ARRAY_OPEN_RE = re.compile(r"\[\s*?\r?\n?([0-9.]+,)\r?\n?", re.MULTILINE)
_ARRAY_CLOSE_RE = re.compile(r"([0-9.])\s*?\]")
_TRAILING_SPACE_RE = re.compile(r"[^\S\n]+$", re.MULTILINE)


def byte_slice_to_int_slice(data: bytes) -> list[int]:
    """Convert bytes to a list of integers."""
    return list(data)


def byte_slice_to_string(data: bytes, bytes_per_line: int) -> str:
    """Format bytes as hex, bytes_per_line per line; no "0x" prefix.

    Every line, including a partial last one, ends with a newline.

    Example:
        >>> byte_slice_to_string(bytes([0, 1, 2, 3]), 3)
        '00 01 02\\n03\\n'
    """
    if bytes_per_line < 1:
        raise ValueError(f"bytes_per_line must be positive, got {bytes_per_line}")

    lines = []
    for index in range(0, len(data), bytes_per_line):
        chunk = data[index : index + bytes_per_line]
        lines.append(" ".join(f"{value:02x}" for value in chunk) + "\n")
    return "".join(lines)


def pretty_json(text: str | bytes) -> str | bytes:
    """Collapse multi-line numeric JSON arrays for friendlier screen output.

    Transforms this::

        "SomeJSONField": [1,
            2,
            3,
            4      ],

    into::

        "SomeJSONField": [1,2,3,4],

    Trailing whitespace is removed from every line. Returns the same type it
    was given.
    """
    if isinstance(text, bytes):
        return pretty_json(text.decode("utf-8")).encode("utf-8")

    # Join number lines; leaves the line break after the opening "["
    text = _NUMBER_LINE_RE.sub(r"\1", text)
    # Remove that line break when the array starts with a number
    text = _ARRAY_OPEN_RE.sub(r"[\1", text)
    # Spaces between the last number and "]"
    text = _ARRAY_CLOSE_RE.sub(r"\1]", text)
    return _TRAILING_SPACE_RE.sub("", text)


def round_to(x: float, digits: int) -> float:
    """Round half up to the given number of digits; 0 rounds to an integer."""
    scale = math.pow(10, digits)
    return math.floor(x * scale + 0.5) / scale
