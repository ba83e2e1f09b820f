"""
Request construction

Builds transport-agnostic request descriptors for the album collection.
Pure functions: nothing is dispatched here.
"""

from dataclasses import dataclass
from typing import Dict, Optional
from urllib.parse import urlsplit

from .encoder import FORM_CONTENT_TYPE, Pairs, encode_album_query, encode_edit_album, to_form
from .models import EditAlbumParameters, GetAlbumsParameters
from .protocols import InvalidArgumentError
from .scope import OwnerScope, scope_root

ALBUMS_COLLECTION = "albums"

BODYLESS_METHODS = frozenset({"GET", "DELETE"})
SUPPORTED_METHODS = frozenset({"GET", "POST", "PATCH", "DELETE"})


@dataclass(frozen=True)
class RequestDescriptor:
    """Method, path, optional query string and optional form body"""
    method: str
    path: str
    query: Optional[str] = None
    body: Optional[str] = None

    @property
    def url(self) -> str:
        return f"{self.path}?{self.query}" if self.query else self.path

    @property
    def headers(self) -> Dict[str, str]:
        if self.body is None:
            return {}
        return {"Content-Type": FORM_CONTENT_TYPE}


def build_request(
    method: str,
    path: str,
    query: Optional[Pairs] = None,
    body: Optional[Pairs] = None,
) -> RequestDescriptor:
    """
    Compose a request descriptor

    GET never carries a body and DELETE carries neither query nor body.
    Empty query/body pair lists are omitted rather than sent empty.
    """
    method = method.upper()
    if method not in SUPPORTED_METHODS:
        raise InvalidArgumentError(f"Unsupported HTTP method: {method}")
    if not path.startswith("/"):
        raise InvalidArgumentError(f"Path must be absolute, got {path!r}")
    if method in BODYLESS_METHODS and body:
        raise InvalidArgumentError(f"{method} requests cannot carry a body")
    if method == "DELETE" and query:
        raise InvalidArgumentError("DELETE requests cannot carry a query")

    return RequestDescriptor(
        method=method,
        path=path,
        query=to_form(query) if query else None,
        body=to_form(body) if body is not None and method not in BODYLESS_METHODS else None,
    )


def albums_path(scope: OwnerScope, album_id: Optional[int] = None) -> str:
    """`/{me | users/{id}}/albums[/{album_id}]`"""
    path = f"{scope_root(scope)}/{ALBUMS_COLLECTION}"
    if album_id is None:
        return path
    if isinstance(album_id, bool) or not isinstance(album_id, int) or album_id <= 0:
        raise InvalidArgumentError(f"Album id must be a positive integer, got {album_id!r}")
    return f"{path}/{album_id}"


def build_list_albums_request(
    scope: OwnerScope,
    params: Optional[GetAlbumsParameters] = None
) -> RequestDescriptor:
    return build_request("GET", albums_path(scope), query=encode_album_query(params))


def build_get_album_request(scope: OwnerScope, album_id: int) -> RequestDescriptor:
    return build_request("GET", albums_path(scope, album_id))


def build_create_album_request(
    scope: OwnerScope,
    params: EditAlbumParameters
) -> RequestDescriptor:
    if not params.name:
        raise InvalidArgumentError("Album name is required to create an album")
    return build_request("POST", albums_path(scope), body=encode_edit_album(params))


def build_update_album_request(
    scope: OwnerScope,
    album_id: int,
    params: EditAlbumParameters
) -> RequestDescriptor:
    return build_request("PATCH", albums_path(scope, album_id), body=encode_edit_album(params))


def build_delete_album_request(scope: OwnerScope, album_id: int) -> RequestDescriptor:
    return build_request("DELETE", albums_path(scope, album_id))


def build_page_request(link: str) -> RequestDescriptor:
    """
    Follow a pagination link such as `/me/albums?page=2`

    Links are API-relative; the query string is kept byte-for-byte.
    """
    parts = urlsplit(link)
    if not parts.path.startswith("/"):
        raise InvalidArgumentError(f"Invalid paging link: {link!r}")
    return RequestDescriptor(method="GET", path=parts.path, query=parts.query or None)


__all__ = [
    "RequestDescriptor",
    "build_request",
    "albums_path",
    "build_list_albums_request",
    "build_get_album_request",
    "build_create_album_request",
    "build_update_album_request",
    "build_delete_album_request",
    "build_page_request",
]
