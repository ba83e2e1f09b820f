"""
Album Client Protocols (Interfaces)

These interfaces define contracts for dependency injection.
NO import-time I/O dependencies - safe to import anywhere.
"""
from typing import Any, Optional, Protocol, runtime_checkable

from core.service_client_base import TransportFailureError, TransportResponse


# Custom exceptions - defined here so models, decoder and client share them
class AlbumClientError(Exception):
    """Base exception for album client errors"""
    pass


class InvalidArgumentError(AlbumClientError, ValueError):
    """Caller supplied a malformed scope, id or parameter value"""
    pass


class MalformedResponseError(AlbumClientError):
    """Response payload is missing required fields or cannot be parsed"""
    pass


class ApiResponseError(AlbumClientError):
    """Remote API answered with a non-2xx status"""

    def __init__(
        self,
        status_code: int,
        error: Optional[str] = None,
        developer_message: Optional[str] = None,
        error_code: Optional[int] = None,
    ):
        self.status_code = status_code
        self.error = error
        self.developer_message = developer_message
        self.error_code = error_code
        super().__init__(f"HTTP {status_code}: {error or 'request failed'}")


class AlbumNotFoundError(ApiResponseError):
    """Album (or owner) does not exist in the requested scope"""
    pass


@runtime_checkable
class TransportProtocol(Protocol):
    """
    Interface for the HTTP transport.

    Implementations dispatch a request descriptor and return the raw
    outcome. Network failures raise TransportFailureError.
    """

    async def send(self, request: Any) -> TransportResponse:
        """Send a request descriptor"""
        ...

    async def close(self) -> None:
        """Release transport resources"""
        ...


__all__ = [
    'AlbumClientError',
    'InvalidArgumentError',
    'MalformedResponseError',
    'ApiResponseError',
    'AlbumNotFoundError',
    'TransportFailureError',
    'TransportResponse',
    'TransportProtocol',
]
