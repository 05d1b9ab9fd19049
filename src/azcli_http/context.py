"""Explicit service context handed to commands instead of a global locator."""

from __future__ import annotations

from dataclasses import dataclass, field

from .api_service import ApiService
from .client_factory import ClientFactory
from .config import DEFAULT_API_BASE_URL, DEFAULT_SCOPE, ConfigData, ConfigStore, Settings


def _first(*values: str | None) -> str | None:
    for value in values:
        if value and value.strip():
            return value
    return None


@dataclass
class AppContext:
    """Resolved settings plus the shared :class:`ClientFactory`.

    The factory lives as long as the context. Each :meth:`api_service` call
    returns a new service that the caller must close.
    """

    settings: Settings
    config: ConfigData
    client_factory: ClientFactory = field(init=False)

    def __post_init__(self) -> None:
        self.client_factory = ClientFactory(
            timeout=self.settings.timeout,
            tenant_id=self.tenant_id,
            process_timeout=self.settings.process_timeout,
            scheme=self.settings.scheme,
        )

    @classmethod
    def load(cls, settings: Settings | None = None, store: ConfigStore | None = None) -> AppContext:
        resolved = settings or Settings()
        cfg_store = store or ConfigStore(resolved.config_path)
        return cls(settings=resolved, config=cfg_store.load())

    @property
    def tenant_id(self) -> str | None:
        profile = self.config.active_profile
        return _first(self.settings.tenant_id, profile.tenant_id if profile else None)

    def resolve_api_base_url(self, option_value: str | None = None) -> str:
        """Return the base URL: option, then environment, then profile, then default."""

        profile = self.config.active_profile
        return _first(
            option_value,
            self.settings.api_base_url,
            profile.api_base_url if profile else None,
        ) or DEFAULT_API_BASE_URL

    def resolve_scope(self, option_value: str | None = None) -> str:
        """Return the scope: option, then environment, then profile, then default."""

        profile = self.config.active_profile
        return _first(
            option_value,
            self.settings.scope,
            profile.scope if profile else None,
        ) or DEFAULT_SCOPE

    def api_service(self, base_url: str | None = None, scope: str | None = None) -> ApiService:
        return ApiService(
            self.resolve_api_base_url(base_url),
            self.resolve_scope(scope),
            self.client_factory,
        )


__all__ = ["AppContext"]
