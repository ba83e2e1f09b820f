"""
Album Client

Async client for a user's remote album collection: list, read, create,
update and delete albums under an owner scope (`ME` or a UserId).
"""

import logging
from typing import AsyncIterator, Optional

from core.config.client_config import ApiClientConfig
from core.service_client_base import HttpTransport

from .decoder import decode_album, decode_album_page, decode_delete, raise_for_status
from .models import Album, AlbumPage, EditAlbumParameters, GetAlbumsParameters
from .protocols import TransportProtocol, TransportResponse
from .request_builder import (
    RequestDescriptor,
    build_create_album_request,
    build_delete_album_request,
    build_get_album_request,
    build_list_albums_request,
    build_page_request,
    build_update_album_request,
)
from .scope import OwnerScope

logger = logging.getLogger(__name__)


class AlbumClient:
    """
    Album collection client

    Holds no state between calls besides the transport, so a single
    instance may serve concurrent requests.

    Example:
        >>> async with AlbumClient(config=ApiClientConfig(access_token="...")) as client:
        ...     albums = await client.list_albums(ME, GetAlbumsParameters(per_page=50))
        ...     album = await client.create_album(ME, EditAlbumParameters(name="Trip"))
    """

    def __init__(
        self,
        transport: Optional[TransportProtocol] = None,
        config: Optional[ApiClientConfig] = None
    ):
        """
        Initialize the album client

        Args:
            transport: Object with `send(descriptor)`; an HttpTransport is
                created (and owned) when omitted
            config: API settings used when creating the transport
        """
        self._owns_transport = transport is None
        self.transport = transport if transport is not None else HttpTransport(config=config)

    async def close(self):
        """Close the transport if this client created it"""
        if self._owns_transport:
            await self.transport.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def _send(self, request: RequestDescriptor) -> TransportResponse:
        response = await self.transport.send(request)
        logger.debug(f"{request.method} {request.url} -> {response.status_code}")
        return response

    # =============================================================================
    # Album Management
    # =============================================================================

    async def list_albums(
        self,
        scope: OwnerScope,
        params: Optional[GetAlbumsParameters] = None
    ) -> AlbumPage:
        """
        List albums in a scope

        Args:
            scope: ME or UserId(...)
            params: Paging/filter options; unset options are not sent

        Returns:
            AlbumPage with albums and paging links
        """
        response = await self._send(build_list_albums_request(scope, params))
        raise_for_status(response)
        return decode_album_page(response.json_body)

    async def iter_albums(
        self,
        scope: OwnerScope,
        params: Optional[GetAlbumsParameters] = None
    ) -> AsyncIterator[Album]:
        """
        Iterate over every album in a scope, following `paging.next`

        Example:
            >>> async for album in client.iter_albums(ME):
            ...     print(album.name)
        """
        page = await self.list_albums(scope, params)
        while True:
            for album in page.data:
                yield album
            if not page.paging.next:
                return
            response = await self._send(build_page_request(page.paging.next))
            raise_for_status(response)
            page = decode_album_page(response.json_body)

    async def get_album(self, scope: OwnerScope, album_id: int) -> Album:
        """
        Get a single album

        Raises:
            AlbumNotFoundError: album does not exist in scope
        """
        response = await self._send(build_get_album_request(scope, album_id))
        raise_for_status(response)
        return decode_album(response.json_body)

    async def create_album(
        self,
        scope: OwnerScope,
        params: EditAlbumParameters
    ) -> Album:
        """
        Create a new album

        Args:
            scope: Owner scope
            params: Album fields; `name` is required

        Returns:
            The created album, including its server-assigned id
        """
        response = await self._send(build_create_album_request(scope, params))
        raise_for_status(response)
        album = decode_album(response.json_body)
        logger.info(f"Created album {album.album_id} in {scope}")
        return album

    async def update_album(
        self,
        scope: OwnerScope,
        album_id: int,
        params: EditAlbumParameters
    ) -> Album:
        """
        Update an album; only the fields set on `params` are changed

        Raises:
            AlbumNotFoundError: album does not exist in scope
        """
        response = await self._send(build_update_album_request(scope, album_id, params))
        raise_for_status(response)
        return decode_album(response.json_body)

    async def delete_album(self, scope: OwnerScope, album_id: int) -> bool:
        """
        Delete an album

        Returns:
            True once the API confirms removal

        Raises:
            AlbumNotFoundError: album does not exist (including already deleted)
        """
        response = await self._send(build_delete_album_request(scope, album_id))
        deleted = decode_delete(response)
        logger.info(f"Deleted album {album_id} in {scope}")
        return deleted


# =============================================================================
# Convenience Functions
# =============================================================================

def create_album_client(
    config: Optional[ApiClientConfig] = None,
    transport: Optional[TransportProtocol] = None
) -> AlbumClient:
    """
    Create an album client

    Example:
        >>> client = create_album_client()
        >>> page = await client.list_albums(ME)
        >>> await client.close()
    """
    return AlbumClient(transport=transport, config=config)
