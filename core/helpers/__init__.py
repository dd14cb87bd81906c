"""Small stateless helpers: case conversion, formatting, checksums and more."""

# Define public API - only include what users should directly access
__all__ = [
    "ABBREVIATIONS",
    "AllValuesFilteredError",
    "HelperSettings",
    "HelpersException",
    "ParseError",
    "SerializationError",
    "byte_slice_to_int_slice",
    "byte_slice_to_string",
    "convert_camel_to_underscore",
    "convert_json_underscore_to_camel",
    "convert_map_underscore_to_camel",
    "convert_underscore_to_camel",
    "dir_is_empty",
    "enums_from_map_int_string",
    "in_slice",
    "int_slice_is_ascii",
    "int_slice_remove_duplicates",
    "md5_checksum",
    "md5_checksum_base64",
    "min_max_int_slice",
    "pretty_json",
    "request_username",
    "round_to",
    "sha1_checksum",
    "sha1_checksum_base64",
    "unique_strings",
    "verify_map_keys",
]

from .settings import ABBREVIATIONS, HelperSettings  # noqa: I001
from .exceptions import (
    AllValuesFilteredError,
    HelpersException,
    ParseError,
    SerializationError,
)

# Case conversion is the main entry point for the API layer
from .case_conversion import (
    convert_camel_to_underscore,
    convert_json_underscore_to_camel,
    convert_map_underscore_to_camel,
    convert_underscore_to_camel,
)
from .checksums import (
    md5_checksum,
    md5_checksum_base64,
    sha1_checksum,
    sha1_checksum_base64,
)
from .filesystem import dir_is_empty
from .formatting import (
    byte_slice_to_int_slice,
    byte_slice_to_string,
    pretty_json,
    round_to,
)
from .request_auth import request_username
from .sequences import (
    enums_from_map_int_string,
    in_slice,
    int_slice_is_ascii,
    int_slice_remove_duplicates,
    min_max_int_slice,
    unique_strings,
    verify_map_keys,
)
