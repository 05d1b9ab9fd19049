from __future__ import annotations

import json
import logging
import os
import stat
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_API_BASE_URL = "https://api.example.com"
DEFAULT_SCOPE = "api://example-api/.default"
DEFAULT_HOME = "~/.azhttp"


class Settings(BaseSettings):
    """Runtime settings exposed via ``AZHTTP_*`` environment variables."""

    api_base_url: str | None = Field(default=None, description="Base URL of the protected API")
    scope: str | None = Field(default=None, description="Azure AD scope requested from the CLI")
    tenant_id: str | None = Field(default=None, description="Tenant passed to the Azure CLI")
    scheme: str = Field(default="Bearer", description="Authorization scheme")
    timeout: float = Field(default=60.0, gt=0, description="HTTP timeout in seconds")
    process_timeout: int = Field(default=10, gt=0, description="Azure CLI timeout in seconds")
    home: str = Field(default=DEFAULT_HOME, description="Directory holding config.json")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="AZHTTP_",
        extra="ignore",
    )

    @property
    def config_path(self) -> Path:
        return Path(os.path.expanduser(self.home)) / "config.json"


def _secure_path(path: Path) -> None:
    if not path.exists():
        return

    try:
        if os.name == "nt":
            os.chmod(path, stat.S_IREAD | stat.S_IWRITE)
        else:
            mode = stat.S_IMODE(path.stat().st_mode)
            if mode & (stat.S_IRWXG | stat.S_IRWXO):
                logger.warning("Adjusted permissions for %s to 0o600", path)
            path.chmod(0o600)
    except PermissionError as exc:
        logger.warning("Unable to enforce secure permissions for %s: %s", path, exc)


@dataclass
class Profile:
    name: str
    api_base_url: str | None = None
    scope: str | None = None
    tenant_id: str | None = None


_PROFILE_FIELDS = frozenset(f.name for f in fields(Profile))


@dataclass
class ConfigData:
    default_profile: str | None = None
    profiles: dict[str, Profile] = field(default_factory=dict)

    @property
    def active_profile(self) -> Profile | None:
        if not self.default_profile:
            return None
        return self.profiles.get(self.default_profile)


class ConfigStore:
    """JSON-backed store of named API profiles. Tokens are never written here."""

    def __init__(self, path: str | os.PathLike[str] | None = None) -> None:
        self.path = Path(path) if path else Settings().config_path

    def _ensure(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def _read(self) -> dict[str, Any]:
        if not self.path.exists():
            return {"default": None, "profiles": {}}
        with self.path.open("r", encoding="utf-8") as handle:
            return json.load(handle)

    def _write(self, data: dict[str, Any]) -> None:
        self._ensure()
        tmp = self.path.with_suffix(".tmp")
        with tmp.open("w", encoding="utf-8") as handle:
            json.dump(data, handle, indent=2)
        tmp.replace(self.path)
        _secure_path(self.path)

    def load(self) -> ConfigData:
        raw = self._read()
        profs = {
            name: Profile(
                name=name,
                **{k: v for k, v in data.items() if k in _PROFILE_FIELDS and k != "name"},
            )
            for name, data in raw.get("profiles", {}).items()
        }
        return ConfigData(default_profile=raw.get("default"), profiles=profs)

    def save(self, cfg: ConfigData) -> None:
        self._write(
            {
                "default": cfg.default_profile,
                "profiles": {name: asdict(p) for name, p in cfg.profiles.items()},
            }
        )

    def add_or_update_profile(self, profile: Profile, *, set_default: bool = False) -> ConfigData:
        """Persist ``profile`` and optionally set it as default."""

        cfg = self.load()
        cfg.profiles[profile.name] = profile
        if set_default or not cfg.default_profile:
            cfg.default_profile = profile.name
        self.save(cfg)
        return cfg

    def set_default_profile(self, name: str) -> ConfigData:
        """Mark the profile ``name`` as the default profile."""

        cfg = self.load()
        if name not in cfg.profiles:
            raise KeyError(f"Profile '{name}' not found")
        cfg.default_profile = name
        self.save(cfg)
        return cfg

    def delete_profile(self, name: str) -> ConfigData:
        cfg = self.load()
        if name not in cfg.profiles:
            raise KeyError(f"Profile '{name}' not found")
        del cfg.profiles[name]
        if cfg.default_profile == name:
            cfg.default_profile = None
        self.save(cfg)
        return cfg


__all__ = [
    "DEFAULT_API_BASE_URL",
    "DEFAULT_SCOPE",
    "ConfigData",
    "ConfigStore",
    "Profile",
    "Settings",
]
