"""Helpers for lists of ints and strings and for simple mappings.

Value filters are containers of values to skip. A dict works too, which lets a
caller note why each value is filtered::

    value_filter = {0: "padding", 10: "LF", 13: "CR"}
"""

import logging
from collections.abc import Container, Iterable, Mapping, Sequence
from typing import Any

from .exceptions import AllValuesFilteredError
from .settings import ASCII_MAX, ASCII_MIN, UNIQUE_NUMBER_FORMAT

logger = logging.getLogger(__name__)


def in_slice(value: Any, items: Iterable[Any]) -> bool:
    """Check if items contains value."""
    return any(item == value for item in items)


def min_max_int_slice(
    values: Iterable[int], value_filter: Container[int] | None = None
) -> tuple[int, int]:
    """Return the min and max of values, skipping values in value_filter.

    Raises:
        AllValuesFilteredError: If values is empty or every value is filtered
    """
    remaining = [
        value for value in values if value_filter is None or value not in value_filter
    ]
    if not remaining:
        raise AllValuesFilteredError()
    return min(remaining), max(remaining)


def int_slice_is_ascii(
    values: Iterable[int], value_filter: Container[int] | None = None
) -> bool:
    """Check that every unfiltered value is printable ASCII.

    DEL (127) is not printable; a single 0x7f in a field would break text
    compares on binary data. Use value_filter to skip padding or CR/LF.

    Raises:
        AllValuesFilteredError: If values is empty or every value is filtered
    """
    low, high = min_max_int_slice(values, value_filter)
    return low >= ASCII_MIN and high <= ASCII_MAX


def int_slice_remove_duplicates(values: Iterable[int]) -> list[int]:
    """Remove duplicate ints; callers should not rely on the order."""
    return list(dict.fromkeys(values))


def unique_strings(
    values: Sequence[str], number_format: str = UNIQUE_NUMBER_FORMAT
) -> tuple[list[str], bool]:
    """Make every string in values unique.

    Each string is checked against the prior strings and number_format is
    applied to (string, occurrence) for repeats, so with the default format
    the second "paul" becomes "paul_002". Blank strings are replaced with
    "_" first so that no entirely blank name is returned.

    Args:
        values: Strings to make unique; not modified
        number_format: %-style format taking the string and its occurrence

    Returns:
        The new list and whether any duplicates occurred
    """
    seen: dict[str, int] = {}
    duplicates = False
    result = []
    for value in values:
        if not value.strip():
            value = "_"
        if value in seen:
            seen[value] += 1
            result.append(number_format % (value, seen[value]))
            duplicates = True
        else:
            seen[value] = 1
            result.append(value)

    if duplicates:
        logger.debug(f"unique_strings renamed duplicates in {len(values)} values")
    return result, duplicates


def enums_from_map_int_string(mapping: Mapping[int, str]) -> tuple[list[int], list[str]]:
    """Return the sorted keys of mapping and the values in key order."""
    keys = sorted(mapping)
    return keys, [mapping[key] for key in keys]


def verify_map_keys(keys: Iterable[str], mapping: Mapping[str, Any]) -> bool:
    """Return True if mapping contains every key."""
    return all(key in mapping for key in keys)
