"""Username lookup for requests using basic or digest authentication."""

import base64
import binascii
import logging
from typing import Any

logger = logging.getLogger(__name__)

AUTHORIZATION_HEADER = "Authorization"


def _authorization_values(headers: Any) -> list[str]:
    # Starlette headers keep repeated fields; plain mappings hold one value
    if hasattr(headers, "getlist"):
        return list(headers.getlist(AUTHORIZATION_HEADER))
    value = headers.get(AUTHORIZATION_HEADER)
    if value is None:
        value = headers.get(AUTHORIZATION_HEADER.lower())
    return [value] if value else []


def request_username(request: Any) -> str:
    """Return the username of a request, if it can be determined.

    Accepts a header mapping or anything with a ``headers`` attribute, such
    as a FastAPI ``Request`` or a ``requests.PreparedRequest``. Handles both
    authorization styles::

        Basic YWRtaW46YWRtaW4=
        Digest username="admin", realm="Western Digital Corporation", ...

    Returns an empty string when there is no usable Authorization header.
    """
    headers = getattr(request, "headers", request)
    for value in _authorization_values(headers):
        for part in value.split(","):
            if "username" in part:
                pieces = part.split("=")
                if len(pieces) == 2:
                    return pieces[1].replace('"', "")
                return ""
            if "Basic " in part:
                pieces = part.split(" ")
                if len(pieces) != 2:
                    return ""
                try:
                    credentials = base64.b64decode(pieces[1]).decode("utf-8")
                except (binascii.Error, UnicodeDecodeError) as e:
                    logger.debug(f"Ignoring malformed basic credentials: {e}")
                    return ""
                return credentials.split(":")[0]
    return ""
