"""Default configuration values and settings type for the helper functions."""

from dataclasses import dataclass, field
from typing import Any

# Abbreviations forced to upper case after underscore -> CamelCase conversion
ABBREVIATIONS = ("JSON", "NQN", "HTTP")

# Formatting defaults
BYTES_PER_LINE = 16
UNIQUE_NUMBER_FORMAT = "%s_%03d"  # value, occurrence

# Printable ASCII range (DEL excluded)
ASCII_MIN = 32
ASCII_MAX = 126

CHECKSUM_ALGORITHM = "md5"
CHECKSUM_ALGORITHMS = ["md5", "sha1"]


@dataclass
class HelperSettings:
    """Settings shared by the API layer when calling the helpers."""

    abbreviations: list[str] = field(default_factory=lambda: list(ABBREVIATIONS))
    bytes_per_line: int = BYTES_PER_LINE
    unique_number_format: str = UNIQUE_NUMBER_FORMAT
    checksum_algorithm: str = CHECKSUM_ALGORITHM

    def update(self, **kwargs: Any) -> None:
        """Update settings from dict."""
        for key, value in kwargs.items():
            if hasattr(self, key):
                setattr(self, key, value)
