"""Token providers used by the authenticating transport."""

from __future__ import annotations

from .azure_cli import AzureCliTokenProvider
from .base import StaticTokenProvider, TokenProvider, TokenSource

__all__ = ["AzureCliTokenProvider", "StaticTokenProvider", "TokenProvider", "TokenSource"]
