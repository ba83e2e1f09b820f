"""
Response decoding

Maps raw JSON payloads onto Album / AlbumPage snapshots and classifies
response statuses. Unknown JSON fields are ignored.
"""

import logging
from typing import Any, Optional

from pydantic import ValidationError

from .models import Album, AlbumPage
from .protocols import (
    AlbumNotFoundError,
    ApiResponseError,
    MalformedResponseError,
    TransportResponse,
)

logger = logging.getLogger(__name__)


def extract_trailing_id(locator: Optional[str]) -> int:
    """
    Numeric id from the last path segment of a resource locator

    `/albums/10303859` -> 10303859, `/users/2433258/albums/10303859/` -> 10303859

    Raises:
        MalformedResponseError: locator absent or not ending in an integer
    """
    if not locator or not isinstance(locator, str):
        raise MalformedResponseError(f"Missing resource locator: {locator!r}")

    segment = locator.split("?", 1)[0].rstrip("/").rsplit("/", 1)[-1]
    if not (segment.isascii() and segment.isdigit()):
        raise MalformedResponseError(f"Cannot extract numeric id from locator {locator!r}")
    return int(segment)


def decode_album(payload: Any) -> Album:
    """Decode a single album object"""
    if not isinstance(payload, dict):
        raise MalformedResponseError(f"Expected album object, got {type(payload).__name__}")

    try:
        album = Album.model_validate(payload)
    except ValidationError as e:
        logger.error(f"Malformed album payload: {e}")
        raise MalformedResponseError(f"Malformed album payload: {e}") from e

    return album.model_copy(update={"album_id": extract_trailing_id(album.uri)})


def decode_album_page(payload: Any) -> AlbumPage:
    """Decode a paginated album list (`data`, `total`, `per_page`, `paging`)"""
    if not isinstance(payload, dict):
        raise MalformedResponseError(f"Expected album list object, got {type(payload).__name__}")

    data = payload.get("data")
    if data is not None and not isinstance(data, list):
        raise MalformedResponseError("Album list 'data' must be an array")

    albums = [decode_album(item) for item in data or []]

    try:
        return AlbumPage.model_validate({**payload, "data": albums})
    except ValidationError as e:
        logger.error(f"Malformed album list payload: {e}")
        raise MalformedResponseError(f"Malformed album list payload: {e}") from e


def is_success(status_code: int) -> bool:
    return 200 <= status_code < 300


def raise_for_status(response: TransportResponse) -> None:
    """
    Raise the typed error for a non-2xx response

    Raises:
        AlbumNotFoundError: 404
        ApiResponseError: any other non-2xx status
    """
    if is_success(response.status_code):
        return

    body = response.json_body if isinstance(response.json_body, dict) else {}
    error = body.get("error") or response.text or None
    developer_message = body.get("developer_message")
    error_code = body.get("error_code")

    if response.status_code == 404:
        raise AlbumNotFoundError(404, error, developer_message, error_code)

    logger.warning(f"API error {response.status_code}: {error}")
    raise ApiResponseError(response.status_code, error, developer_message, error_code)


def decode_delete(response: TransportResponse) -> bool:
    """Deletion succeeds on any 2xx status; the body is not inspected"""
    raise_for_status(response)
    return True


__all__ = [
    "extract_trailing_id",
    "decode_album",
    "decode_album_page",
    "is_success",
    "raise_for_status",
    "decode_delete",
]
