from __future__ import annotations
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable

TokenSource = Callable[[], Awaitable[str]]

class TokenProvider(ABC):
    @abstractmethod
    async def get_token(self) -> str:
        """Return an access token string for the Authorization header."""

    async def __call__(self) -> str:
        return await self.get_token()

class StaticTokenProvider(TokenProvider):
    def __init__(self, token: str) -> None:
        self._token = token
    async def get_token(self) -> str:
        return self._token
