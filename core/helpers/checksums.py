"""MD5 and SHA1 checksums, raw or base64 encoded."""

import base64
import hashlib


def _as_bytes(data: bytes | str) -> bytes:
    return data.encode("utf-8") if isinstance(data, str) else data


def md5_checksum(data: bytes | str) -> bytes:
    """Return the 16 byte MD5 digest of data."""
    return hashlib.md5(_as_bytes(data)).digest()


def md5_checksum_base64(data: bytes | str) -> str:
    """Return the MD5 digest of data, base64 encoded."""
    return base64.b64encode(md5_checksum(data)).decode("ascii")


def sha1_checksum(data: bytes | str) -> bytes:
    """Return the 20 byte SHA1 digest of data."""
    return hashlib.sha1(_as_bytes(data)).digest()


def sha1_checksum_base64(data: bytes | str) -> str:
    """Return the SHA1 digest of data, base64 encoded."""
    return base64.b64encode(sha1_checksum(data)).decode("ascii")
