"""Azure CLI authenticated HTTP clients."""

from __future__ import annotations

from .api_service import ApiService
from .auth.azure_cli import AzureCliTokenProvider
from .auth.base import StaticTokenProvider, TokenProvider
from .client_factory import ClientFactory, create_azure_authenticated_client
from .errors import AuthError, AzHttpError, ConfigurationError, DisposedError, HttpError
from .masking import MASK_PLACEHOLDER, mask_token
from .transport import AuthenticatingTransport

__version__ = "0.1.0"

__all__ = [
    "ApiService",
    "AuthError",
    "AuthenticatingTransport",
    "AzHttpError",
    "AzureCliTokenProvider",
    "ClientFactory",
    "ConfigurationError",
    "DisposedError",
    "HttpError",
    "MASK_PLACEHOLDER",
    "StaticTokenProvider",
    "TokenProvider",
    "create_azure_authenticated_client",
    "mask_token",
]
