"""
Bearer token authentication for outgoing API requests

The token is supplied by the caller, either as a fixed string or as a
zero-argument provider called once per request. It is never inspected
or refreshed here.
"""

from typing import Callable, Generator, Union

import httpx


TokenProvider = Callable[[], str]


class BearerTokenAuth(httpx.Auth):
    """httpx auth flow that attaches `Authorization: bearer <token>`"""

    def __init__(self, token: Union[str, TokenProvider]):
        if callable(token):
            self._provider = token
        else:
            if not token:
                raise ValueError("Access token must not be empty")
            self._provider = lambda: token

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = f"bearer {self._provider()}"
        yield request


__all__ = ["BearerTokenAuth", "TokenProvider"]
