"""
Base HTTP transport for remote API clients

Owns the httpx.AsyncClient, default headers and bearer authentication.
Callers hand it a transport-agnostic request descriptor and get back the
status code and decoded JSON body. Nothing here interprets status codes.
"""

import httpx
import logging
from dataclasses import dataclass
from typing import Any, Optional, Dict, Protocol, Union

from core.auth import BearerTokenAuth, TokenProvider
from core.config.client_config import ApiClientConfig

logger = logging.getLogger(__name__)


class TransportFailureError(Exception):
    """Network, timeout or connection failure raised by the transport"""
    pass


@dataclass(frozen=True)
class TransportResponse:
    """Outcome of a single request/response exchange"""
    status_code: int
    json_body: Optional[Any] = None
    text: str = ""


class RequestLike(Protocol):
    method: str
    path: str
    query: Optional[str]
    body: Optional[str]

    @property
    def headers(self) -> Dict[str, str]:
        ...


class HttpTransport:
    """
    httpx-based transport

    Example:
        async with HttpTransport(config, token="...") as transport:
            response = await transport.send(descriptor)
    """

    def __init__(
        self,
        config: Optional[ApiClientConfig] = None,
        token: Optional[Union[str, TokenProvider]] = None,
        client: Optional[httpx.AsyncClient] = None
    ):
        """
        Initialize the transport

        Args:
            config: API settings (base URL, version, timeout, user agent)
            token: Bearer token or token provider, defaults to config.access_token
            client: Pre-built httpx.AsyncClient, mainly for tests
        """
        self.config = config or ApiClientConfig.from_env()
        self.base_url = self.config.base_url.rstrip('/')
        token = token if token is not None else self.config.access_token

        if client is not None:
            self.client = client
        else:
            self.client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.config.timeout,
                headers=self._build_default_headers(),
                auth=BearerTokenAuth(token) if token else None,
            )

        logger.debug(
            f"Initialized HTTP transport: {self.base_url} "
            f"(auth={'enabled' if token else 'disabled'})"
        )

    def _build_default_headers(self) -> Dict[str, str]:
        return {
            "Accept": self.config.accept_header,
            "User-Agent": self.config.user_agent,
        }

    async def close(self):
        """Close HTTP client"""
        await self.client.aclose()
        logger.debug("Closed HTTP transport")

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def send(self, request: RequestLike) -> TransportResponse:
        """
        Dispatch a request descriptor

        Args:
            request: Descriptor with method, path, query and body

        Returns:
            TransportResponse with status code and parsed JSON (if any)

        Raises:
            TransportFailureError: connection, timeout or protocol failure
        """
        url = request.path if not request.query else f"{request.path}?{request.query}"
        logger.debug(f"{request.method} {url}")

        try:
            response = await self.client.request(
                request.method,
                url,
                content=request.body,
                headers=request.headers,
            )
        except httpx.TransportError as e:
            logger.error(f"Transport failure on {request.method} {url}: {e}")
            raise TransportFailureError(f"{request.method} {url} failed: {e}") from e

        return TransportResponse(
            status_code=response.status_code,
            json_body=self._parse_json(response),
            text=response.text,
        )

    @staticmethod
    def _parse_json(response: httpx.Response) -> Optional[Any]:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            logger.warning(f"Non-JSON response body (status {response.status_code})")
            return None


__all__ = ["HttpTransport", "TransportResponse", "TransportFailureError", "RequestLike"]
