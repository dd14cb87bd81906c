"""
API endpoints for case conversion, checksums and request identity.

"""

from fastapi import APIRouter, HTTPException, Query, Request, Response
from loguru import logger

from core.helpers import (
    HelpersException,
    convert_camel_to_underscore,
    convert_json_underscore_to_camel,
    convert_map_underscore_to_camel,
    convert_underscore_to_camel,
    md5_checksum_base64,
    request_username,
    sha1_checksum_base64,
)
from core.helpers.settings import CHECKSUM_ALGORITHMS

router = APIRouter()

CHECKSUM_FUNCTIONS = {
    "md5": md5_checksum_base64,
    "sha1": sha1_checksum_base64,
}


def _settings():
    from app import helper_settings

    return helper_settings


@router.post("/api/convert/camel")
async def convert_json_keys(request: Request):
    """Convert the keys of a JSON object body to CamelCase."""
    body = await request.body()
    try:
        converted = convert_json_underscore_to_camel(body, _settings().abbreviations)
    except HelpersException as e:
        logger.warning(f"Rejected JSON conversion request: {e}")
        raise HTTPException(status_code=400, detail=str(e)) from e

    return Response(content=converted, media_type="application/json")


@router.get("/api/convert/camel-word")
async def convert_word_to_camel(word: str = Query(...)):
    """Convert a single word from underscore format to CamelCase."""
    return {"word": convert_underscore_to_camel(word, _settings().abbreviations)}


@router.get("/api/convert/underscore")
async def convert_word_to_underscore(word: str = Query(...), lower: bool = Query(False)):
    """Convert a single word from CamelCase to underscore format."""
    return {"word": convert_camel_to_underscore(word, lower)}


@router.get("/api/whoami")
async def whoami(request: Request):
    """Get the username from basic or digest authorization."""
    username = request_username(request)
    logger.debug(f"Resolved request username: {username!r}")
    return {"username": username}


@router.post("/api/checksum")
async def checksum(request: Request, algorithm: str = Query(None)):
    """Get the base64 checksum of the request body."""
    algorithm = (algorithm or _settings().checksum_algorithm).lower()
    if algorithm not in CHECKSUM_ALGORITHMS:
        raise HTTPException(
            status_code=400,
            detail=f"Unsupported algorithm '{algorithm}', use one of {CHECKSUM_ALGORITHMS}",
        )

    body = await request.body()
    return {"algorithm": algorithm, "checksum": CHECKSUM_FUNCTIONS[algorithm](body)}


@router.get("/api/settings")
async def get_settings():
    """Get the active helper settings with CamelCase keys."""
    settings = _settings()
    return convert_map_underscore_to_camel(settings, settings.abbreviations)
