"""Commands for inspecting and mutating stored API profiles."""

from __future__ import annotations

import typer
from rich import print

from ..config import ConfigStore, Profile
from .common import get_app_context, handle_cli_errors

app = typer.Typer(help="Profiles & configuration")


def _store(ctx: typer.Context) -> ConfigStore:
    return ConfigStore(get_app_context(ctx).settings.config_path)


@app.command("list")
@handle_cli_errors
def profile_list(ctx: typer.Context) -> None:
    """Show all saved profiles, highlighting the default profile."""

    cfg = _store(ctx).load()
    for name in sorted(cfg.profiles):
        star = "*" if cfg.default_profile == name else " "
        print(f"{star} {name}")


@app.command("show")
@handle_cli_errors
def profile_show(ctx: typer.Context, name: str = typer.Argument(..., help="Profile name")) -> None:
    """Display the stored configuration for a profile."""

    profile = _store(ctx).load().profiles.get(name)
    if not profile:
        raise typer.BadParameter(f"Profile '{name}' not found")
    print(dict(vars(profile)))


@app.command("create")
@handle_cli_errors
def profile_create(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Profile name"),
    api_base_url: str = typer.Option(..., "--base-url", help="Base URL of the protected API"),
    scope: str = typer.Option(..., "--scope", help="Azure AD scope, e.g. api://my-api/.default"),
    tenant_id: str | None = typer.Option(None, "--tenant-id", help="Tenant passed to the Azure CLI"),
    set_default: bool = typer.Option(False, "--set-default", help="Make this the default profile"),
) -> None:
    """Create or replace a profile."""

    profile = Profile(name=name, api_base_url=api_base_url, scope=scope, tenant_id=tenant_id)
    cfg = _store(ctx).add_or_update_profile(profile, set_default=set_default)
    suffix = " (default)" if cfg.default_profile == name else ""
    print(f"Profile '{name}' saved{suffix}")


@app.command("use")
@handle_cli_errors
def profile_use(ctx: typer.Context, name: str = typer.Argument(..., help="Profile name")) -> None:
    """Set the default profile."""

    try:
        _store(ctx).set_default_profile(name)
    except KeyError as exc:
        raise typer.BadParameter(f"Profile '{name}' not found") from exc
    print(f"Default profile set to {name}")


@app.command("delete")
@handle_cli_errors
def profile_delete(ctx: typer.Context, name: str = typer.Argument(..., help="Profile name")) -> None:
    """Remove a profile."""

    try:
        _store(ctx).delete_profile(name)
    except KeyError as exc:
        raise typer.BadParameter(f"Profile '{name}' not found") from exc
    print(f"Profile '{name}' deleted")


__all__ = [
    "app",
    "profile_list",
    "profile_show",
    "profile_create",
    "profile_use",
    "profile_delete",
]
