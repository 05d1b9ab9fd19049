"""Display models for tokens fetched through the Azure CLI."""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field

from .masking import mask_token


class AccessTokenInfo(BaseModel):
    """Token metadata that is safe to print; only the masked token is kept."""

    scope: str
    masked_token: str = Field(alias="maskedToken")
    expires_on: int | None = Field(default=None, alias="expiresOn")

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @classmethod
    def from_token(cls, scope: str, token: str, expires_on: int | None = None) -> AccessTokenInfo:
        return cls(scope=scope, masked_token=mask_token(token), expires_on=expires_on)

    @property
    def expires_at(self) -> datetime | None:
        if self.expires_on is None:
            return None
        return datetime.fromtimestamp(self.expires_on, tz=timezone.utc)

    def to_payload(self) -> dict[str, object]:
        """Return a JSON-safe payload using camelCase keys."""

        return self.model_dump(by_alias=True, exclude_none=True)


__all__ = ["AccessTokenInfo"]
