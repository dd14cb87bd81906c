"""Case convention conversion between underscore format and CamelCase.

Only keys are converted by the mapping and JSON helpers; values are left
untouched, so ``{"message": "VOLUMES_EXIST_ON_SET"}`` keeps its message.

Conversion is not reversible: known abbreviations are forced to upper case
on the way to CamelCase but are split letter by letter on the way back.
"""

import json
import logging
import re
from collections.abc import Iterable, Mapping
from dataclasses import asdict, is_dataclass
from typing import Any

from .exceptions import ParseError, SerializationError
from .settings import ABBREVIATIONS

logger = logging.getLogger(__name__)


def _abbreviation_pattern(abbreviation: str) -> re.Pattern:
    return re.compile(re.escape(abbreviation), re.IGNORECASE)


def convert_underscore_to_camel(
    word: str, abbreviations: Iterable[str] = ABBREVIATIONS
) -> str:
    """Convert a single word from underscore format to CamelCase.

    A leading underscore is dropped and the character after each underscore
    is capitalized. Afterwards every abbreviation is forced to upper case
    wherever it appears, ignoring case; this is a plain substring replace,
    so ``"jsonrpc"`` becomes ``"JSONrpc"``.

    Args:
        word: Word in snake_case or _leading_snake_case
        abbreviations: Abbreviations to normalize in the result

    Returns:
        The CamelCase word
    """
    output = []
    for i, char in enumerate(word):
        if char == "_":
            continue
        if i == 0:
            output.append(char.upper())
        elif word[i - 1] == "_" and (i == 1 or word[i - 2] != "_"):
            # Capitalize after a leading underscore or after a single separator
            output.append(char.upper())
        else:
            output.append(char)

    result = "".join(output)
    for abbreviation in abbreviations:
        result = _abbreviation_pattern(abbreviation).sub(abbreviation, result)
    return result


def convert_camel_to_underscore(word: str, all_lower: bool = False) -> str:
    """Convert a single word from CamelCase to underscore format.

    An underscore is inserted between a lower case character and a following
    upper case one. Runs of capitals are not split: ``"MULtipleLeading"``
    becomes ``"MULtiple_Leading"``.
    """
    output = []
    for i, char in enumerate(word):
        output.append(char)
        if i + 1 < len(word):
            following = word[i + 1]
            if char == char.lower() and following == following.upper():
                output.append("_")

    result = "".join(output)
    if all_lower:
        result = result.lower()
    return result


def _is_mapping(value: Any) -> bool:
    return isinstance(value, Mapping) or (
        is_dataclass(value) and not isinstance(value, type)
    )


def _convert_value(value: Any, pending: list) -> Any:
    # Mappings are returned empty and filled when their pending entry is walked
    if _is_mapping(value):
        converted = {}
        pending.append((value, converted))
        return converted
    if isinstance(value, (list, tuple)):
        # Only mappings held directly in the sequence are converted
        items = []
        for item in value:
            if _is_mapping(item):
                child = {}
                pending.append((item, child))
                items.append(child)
            else:
                items.append(item)
        return tuple(items) if isinstance(value, tuple) else items
    return value


def convert_map_underscore_to_camel(
    data: Mapping[str, Any], abbreviations: Iterable[str] = ABBREVIATIONS
) -> dict[str, Any]:
    """Recursively convert all mapping keys from underscore format to CamelCase.

    Nested mappings are converted, as are mappings held directly in lists or
    tuples; every other value is returned as is. The input is never modified.
    Nesting is walked with an explicit stack, so depth is not limited by the
    interpreter's recursion limit.

    Raises:
        SerializationError: If a key is not a string
    """
    abbreviations = tuple(abbreviations)
    result = {}
    pending = [(data, result)]
    while pending:
        source, target = pending.pop()
        if is_dataclass(source) and not isinstance(source, type):
            source = asdict(source)
        for key, value in source.items():
            if not isinstance(key, str):
                raise SerializationError(
                    source, f"Mapping key {key!r} is {type(key).__name__}, expected str"
                )
            target[convert_underscore_to_camel(key, abbreviations)] = _convert_value(
                value, pending
            )
    return result


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def convert_json_underscore_to_camel(
    text: str | bytes, abbreviations: Iterable[str] = ABBREVIATIONS
) -> str:
    """Convert the keys of a JSON object document to CamelCase.

    The output is compact and has its keys sorted so it can be compared
    directly. ``NaN`` and ``Infinity`` are rejected in both directions.

    Raises:
        ParseError: If text is not valid JSON or not a JSON object
        SerializationError: If the converted object cannot be encoded
    """
    try:
        payload = json.loads(text, parse_constant=_reject_constant)
    except RecursionError as e:
        raise ParseError(text, "Invalid JSON: document is nested too deeply") from e
    except (TypeError, ValueError) as e:
        raise ParseError(text, f"Invalid JSON: {e}") from e

    if not isinstance(payload, dict):
        raise ParseError(
            text, f"Expected a JSON object, got {type(payload).__name__}"
        )

    converted = convert_map_underscore_to_camel(payload, abbreviations)
    logger.debug(f"Converted {len(converted)} top-level keys to CamelCase")

    try:
        return json.dumps(
            converted,
            separators=(",", ":"),
            sort_keys=True,
            ensure_ascii=False,
            allow_nan=False,
        )
    except RecursionError as e:
        raise SerializationError(
            converted, "Unable to encode JSON: object is nested too deeply"
        ) from e
    except (TypeError, ValueError) as e:
        raise SerializationError(converted, f"Unable to encode JSON: {e}") from e
