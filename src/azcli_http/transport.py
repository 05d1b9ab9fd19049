from __future__ import annotations

import logging

import httpx

from .auth.base import TokenSource
from .errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_SCHEME = "Bearer"


class AuthenticatingTransport(httpx.AsyncBaseTransport):
    """httpx transport that stamps an Authorization header on every request.

    The token source is awaited once per request and the request is then handed
    to ``inner`` unchanged apart from the header. Failures from the token source
    propagate and the inner transport is not called.
    """

    def __init__(
        self,
        token_provider: TokenSource,
        scheme: str = DEFAULT_SCHEME,
        inner: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if token_provider is None or not callable(token_provider):
            raise ConfigurationError("token_provider is required")
        if scheme is None or not scheme.strip():
            raise ConfigurationError("scheme is required")
        self._token_provider = token_provider
        self._scheme = scheme
        self._inner = inner if inner is not None else httpx.AsyncHTTPTransport()

    @property
    def scheme(self) -> str:
        return self._scheme

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        token = await self._token_provider()
        request.headers["Authorization"] = f"{self._scheme} {token}"
        logger.debug("Forwarding %s %s with %s authorization", request.method, request.url, self._scheme)
        return await self._inner.handle_async_request(request)

    async def aclose(self) -> None:
        await self._inner.aclose()


__all__ = ["AuthenticatingTransport", "DEFAULT_SCHEME"]
