from __future__ import annotations

import logging
from types import TracebackType
from typing import Any, Protocol

import httpx

from .client_factory import ClientFactory
from .errors import ConfigurationError, DisposedError, HttpError

logger = logging.getLogger(__name__)


class AuthenticatedClientFactory(Protocol):
    def create_azure_authenticated_client(
        self, scope: str, base_url: str | None = None
    ) -> httpx.AsyncClient: ...


class ApiService:
    """Call a protected API with an Azure CLI authenticated client.

    The service owns the client it builds. ``aclose()`` releases it once and
    every call afterwards raises :class:`DisposedError` without any network I/O.
    """

    def __init__(
        self,
        base_url: str,
        scope: str,
        client_factory: AuthenticatedClientFactory | None = None,
    ) -> None:
        if not base_url or not base_url.strip():
            raise ConfigurationError("base_url is required")
        if not scope or not scope.strip():
            raise ConfigurationError("scope is required")
        self.base_url = base_url
        self.scope = scope
        factory = client_factory if client_factory is not None else ClientFactory()
        self._client = factory.create_azure_authenticated_client(scope, base_url)
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def _ensure_open(self) -> None:
        if self._closed:
            raise DisposedError(type(self).__name__)

    async def _send(self, method: str, endpoint: str, **kwargs: Any) -> str:
        self._ensure_open()
        try:
            resp = await self._client.request(method, endpoint, **kwargs)
        except httpx.TransportError as e:
            raise HttpError(0, f"Transport error: {e}") from e
        if not resp.is_success:
            logger.debug("%s %s returned HTTP %s", method, resp.request.url, resp.status_code)
            raise HttpError(resp.status_code, resp.reason_phrase, details=resp.text)
        return resp.text

    async def get_data(self, endpoint: str) -> str:
        """GET ``endpoint`` relative to the base URL and return the body text."""

        return await self._send("GET", endpoint)

    async def post_data(
        self,
        endpoint: str,
        content: bytes | str | None = None,
        *,
        json: Any | None = None,
        headers: dict[str, str] | None = None,
    ) -> str:
        """POST to ``endpoint`` relative to the base URL and return the body text."""

        request_kwargs: dict[str, Any] = {"headers": headers}
        if json is not None:
            request_kwargs["json"] = json
        else:
            request_kwargs["content"] = content
        return await self._send("POST", endpoint, **request_kwargs)

    async def aclose(self) -> None:
        """Close the underlying :class:`httpx.AsyncClient`."""

        if self._closed:
            return
        self._closed = True
        await self._client.aclose()

    async def __aenter__(self) -> ApiService:
        self._ensure_open()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()


__all__ = ["ApiService", "AuthenticatedClientFactory"]
