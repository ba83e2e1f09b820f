"""
Parameter encoding

Turns edit and list parameters into form/query pairs in a fixed field
order. Same input always yields the same bytes.
"""

from enum import Enum
from typing import Dict, List, Optional, Tuple, Type
from urllib.parse import urlencode

from pydantic import BaseModel

from .models import (
    AlbumPrivacyOption,
    AlbumSortOption,
    EditAlbumParameters,
    GetAlbumsParameters,
    GetAlbumsSortOption,
    SortDirection,
)
from .protocols import InvalidArgumentError

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
MAX_PER_PAGE = 100

# Wire order of each request's fields
EDIT_ALBUM_FIELDS = ("privacy", "sort", "name", "description", "password")
GET_ALBUMS_FIELDS = ("page", "per_page", "query", "sort", "direction")

EDIT_ALBUM_ENUMS: Dict[str, Type[Enum]] = {
    "privacy": AlbumPrivacyOption,
    "sort": AlbumSortOption,
}
GET_ALBUMS_ENUMS: Dict[str, Type[Enum]] = {
    "sort": GetAlbumsSortOption,
    "direction": SortDirection,
}

Pairs = List[Tuple[str, str]]


def _enum_value(value, enum_cls: Type[Enum], field: str) -> str:
    if not isinstance(value, enum_cls):
        raise InvalidArgumentError(f"Unsupported {field} value: {value!r}")
    return value.value


def _encode_fields(
    params: BaseModel,
    fields: Tuple[str, ...],
    enums: Dict[str, Type[Enum]],
) -> Pairs:
    pairs: Pairs = []
    for field in fields:
        value = getattr(params, field)
        if value is None:
            continue
        if field in enums:
            pairs.append((field, _enum_value(value, enums[field], field)))
        else:
            pairs.append((field, str(value)))
    return pairs


def encode_edit_album(params: EditAlbumParameters) -> Pairs:
    """
    Encode album edit parameters

    Only fields that are set are emitted, in EDIT_ALBUM_FIELDS order
    (privacy, sort, name, description, password).

    Raises:
        InvalidArgumentError: unsupported enum value, or password privacy
            without a password
    """
    pairs = _encode_fields(params, EDIT_ALBUM_FIELDS, EDIT_ALBUM_ENUMS)

    if params.privacy is AlbumPrivacyOption.PASSWORD and not params.password:
        raise InvalidArgumentError("A password is required when privacy is 'password'")

    return pairs


def encode_album_query(params: Optional[GetAlbumsParameters]) -> Pairs:
    """Encode list options in GET_ALBUMS_FIELDS order (page, per_page, query, sort, direction)"""
    if params is None:
        return []

    if params.page is not None and params.page < 1:
        raise InvalidArgumentError(f"page must be >= 1, got {params.page}")
    if params.per_page is not None and not 1 <= params.per_page <= MAX_PER_PAGE:
        raise InvalidArgumentError(
            f"per_page must be between 1 and {MAX_PER_PAGE}, got {params.per_page}"
        )

    return _encode_fields(params, GET_ALBUMS_FIELDS, GET_ALBUMS_ENUMS)


def to_form(pairs: Pairs) -> str:
    """Form-encode pairs: spaces become '+', reserved characters are escaped"""
    return urlencode(pairs)


__all__ = [
    "FORM_CONTENT_TYPE",
    "MAX_PER_PAGE",
    "EDIT_ALBUM_FIELDS",
    "GET_ALBUMS_FIELDS",
    "encode_edit_album",
    "encode_album_query",
    "to_form",
]
