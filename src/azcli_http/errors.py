from __future__ import annotations
from typing import Any, Optional

class AzHttpError(Exception):
    """Base error for azcli-http."""

class ConfigurationError(AzHttpError, ValueError):
    """A required constructor argument is missing or blank."""

class AuthError(AzHttpError):
    pass

class HttpError(AzHttpError):
    def __init__(self, status_code: int, message: str, *, details: Optional[Any] = None) -> None:
        super().__init__(f"HTTP {status_code}: {message}")
        self.status_code = status_code
        self.details = details

class DisposedError(AzHttpError):
    def __init__(self, owner: str = "ApiService") -> None:
        super().__init__(f"{owner} has already been released")
        self.owner = owner
