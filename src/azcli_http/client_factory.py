from __future__ import annotations

import logging

import httpx

from .auth.azure_cli import AzureCliTokenProvider
from .auth.base import TokenSource
from .errors import ConfigurationError
from .transport import DEFAULT_SCHEME, AuthenticatingTransport

logger = logging.getLogger(__name__)


class ClientFactory:
    """Build :class:`httpx.AsyncClient` instances that authenticate every request.

    Clients returned by the factory belong to the caller, who must ``aclose()``
    them (or use them as async context managers).
    """

    def __init__(
        self,
        *,
        timeout: float = 60.0,
        tenant_id: str | None = None,
        process_timeout: int = 10,
        scheme: str = DEFAULT_SCHEME,
    ) -> None:
        if not scheme or not scheme.strip():
            raise ConfigurationError("scheme is required")
        self.timeout = timeout
        self.scheme = scheme
        self.tenant_id = tenant_id
        self.process_timeout = process_timeout

    def create_azure_authenticated_client(
        self,
        scope: str,
        base_url: str | None = None,
        *,
        inner: httpx.AsyncBaseTransport | None = None,
    ) -> httpx.AsyncClient:
        """Return a client whose requests carry an Azure CLI token for ``scope``.

        The header uses the factory's ``scheme``.
        """

        if not scope or not scope.strip():
            raise ConfigurationError("scope is required")
        provider = AzureCliTokenProvider(
            scope,
            tenant_id=self.tenant_id,
            process_timeout=self.process_timeout,
        )
        return self._build(AuthenticatingTransport(provider, self.scheme, inner), base_url)

    def create_authenticated_client(
        self,
        token_provider: TokenSource,
        scheme: str = DEFAULT_SCHEME,
        base_url: str | None = None,
        *,
        inner: httpx.AsyncBaseTransport | None = None,
    ) -> httpx.AsyncClient:
        """Return a client authenticated by a caller-supplied token source."""

        if token_provider is None:
            raise ConfigurationError("token_provider is required")
        return self._build(AuthenticatingTransport(token_provider, scheme, inner), base_url)

    def _build(self, transport: AuthenticatingTransport, base_url: str | None) -> httpx.AsyncClient:
        logger.debug("Creating authenticated client (base_url=%s)", base_url or "<none>")
        if base_url:
            return httpx.AsyncClient(transport=transport, timeout=self.timeout, base_url=base_url)
        return httpx.AsyncClient(transport=transport, timeout=self.timeout)


def create_azure_authenticated_client(
    scope: str,
    base_url: str | None = None,
) -> httpx.AsyncClient:
    """Build an Azure CLI authenticated client with a default :class:`ClientFactory`."""

    return ClientFactory().create_azure_authenticated_client(scope, base_url)


__all__ = ["ClientFactory", "create_azure_authenticated_client"]
