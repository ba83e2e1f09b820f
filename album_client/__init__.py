"""
Album Client

Typed async client for a user's paginated album collection.
"""

from .client import AlbumClient, create_album_client
from .models import (
    Album,
    AlbumOwner,
    AlbumPage,
    AlbumPrivacy,
    AlbumPrivacyOption,
    AlbumSortOption,
    EditAlbumParameters,
    GetAlbumsParameters,
    GetAlbumsSortOption,
    PageEnvelope,
    Paging,
    SortDirection,
)
from .protocols import (
    AlbumClientError,
    AlbumNotFoundError,
    ApiResponseError,
    InvalidArgumentError,
    MalformedResponseError,
    TransportFailureError,
    TransportProtocol,
    TransportResponse,
)
from .scope import ME, CurrentUser, OwnerScope, UserId

__version__ = "1.0.0"

__all__ = [
    "AlbumClient",
    "create_album_client",
    "Album",
    "AlbumOwner",
    "AlbumPage",
    "AlbumPrivacy",
    "AlbumPrivacyOption",
    "AlbumSortOption",
    "EditAlbumParameters",
    "GetAlbumsParameters",
    "GetAlbumsSortOption",
    "PageEnvelope",
    "Paging",
    "SortDirection",
    "AlbumClientError",
    "AlbumNotFoundError",
    "ApiResponseError",
    "InvalidArgumentError",
    "MalformedResponseError",
    "TransportFailureError",
    "TransportProtocol",
    "TransportResponse",
    "ME",
    "CurrentUser",
    "OwnerScope",
    "UserId",
]
