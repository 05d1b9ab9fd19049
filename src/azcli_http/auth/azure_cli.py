from __future__ import annotations

import logging

from azure.core.exceptions import ClientAuthenticationError
from azure.identity.aio import AzureCliCredential

from ..errors import AuthError, ConfigurationError
from .base import TokenProvider

logger = logging.getLogger(__name__)


class AzureCliTokenProvider(TokenProvider):
    """Token provider that asks the locally signed-in Azure CLI for a token.

    Every call starts a fresh ``az account get-access-token`` process through
    :class:`azure.identity.aio.AzureCliCredential`; nothing is cached.
    """

    def __init__(
        self,
        scope: str,
        *,
        tenant_id: str | None = None,
        process_timeout: int = 10,
    ) -> None:
        if not scope or not scope.strip():
            raise ConfigurationError("scope is required for Azure CLI authentication")
        self.scope = scope
        self.tenant_id = tenant_id
        self.process_timeout = process_timeout

    async def get_token(self) -> str:
        token, _ = await self.get_access_token()
        return token

    async def get_access_token(self) -> tuple[str, int | None]:
        """Return the token and its ``expires_on`` epoch timestamp."""

        try:
            async with AzureCliCredential(
                tenant_id=self.tenant_id or "",
                process_timeout=self.process_timeout,
            ) as credential:
                access_token = await credential.get_token(self.scope)
        except ClientAuthenticationError as exc:
            logger.error("Azure CLI authentication error: %s", exc.message or exc)
            raise AuthError(f"Azure CLI could not provide a token for {self.scope}: {exc}") from exc
        except Exception as exc:
            logger.error("Azure CLI authentication error: %s", exc)
            raise AuthError(f"Azure CLI token request failed: {exc}") from exc

        if not access_token.token:
            logger.error("Azure CLI returned an empty token for scope %s", self.scope)
            raise AuthError(f"Azure CLI returned an empty token for {self.scope}")
        logger.debug("Acquired Azure CLI token for %s (expires_on=%s)", self.scope, access_token.expires_on)
        return access_token.token, access_token.expires_on


__all__ = ["AzureCliTokenProvider"]
