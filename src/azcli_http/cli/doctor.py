from __future__ import annotations

"""Diagnostic commands for verifying Azure CLI authentication."""

import asyncio
import shutil

import typer
from rich import print

from ..api_service import ApiService
from ..auth.azure_cli import AzureCliTokenProvider
from ..masking import mask_token
from .common import get_app_context, handle_cli_errors


def register(app: typer.Typer) -> None:
    app.command("doctor")(doctor)


async def _probe(service: ApiService, endpoint: str) -> None:
    async with service:
        await service.get_data(endpoint)


@handle_cli_errors
def doctor(
    ctx: typer.Context,
    probe: str | None = typer.Option(
        None,
        help="Endpoint to GET once a token is available (skipped when unset)",
    ),
) -> None:
    """Validate the Azure CLI installation, sign-in state and configuration.

    Args:
        ctx: Active Typer context containing the application context.
        probe: Optional endpoint, relative to the base URL, to request.
    """

    app_ctx = get_app_context(ctx)
    ok = True
    if app_ctx.config.default_profile:
        print(f"[green]Default profile:[/green] {app_ctx.config.default_profile}")
    else:
        print("[yellow]No default profile configured; using environment and defaults.[/yellow]")
    scope = app_ctx.resolve_scope()
    base_url = app_ctx.resolve_api_base_url()
    print(f"API base URL: {base_url}")
    print(f"Scope: {scope}")

    az_path = shutil.which("az")
    if az_path:
        print(f"[green]Azure CLI found:[/green] {az_path}")
    else:
        print("[red]Azure CLI not found on PATH.[/red] Install it from https://aka.ms/azure-cli")
        ok = False

    token: str | None = None
    if ok:
        provider = AzureCliTokenProvider(
            scope,
            tenant_id=app_ctx.tenant_id,
            process_timeout=app_ctx.settings.process_timeout,
        )
        try:
            token = asyncio.run(provider.get_token())
        except Exception as exc:
            print(f"[red]Token acquisition failed:[/red] {exc}")
            ok = False
        else:
            print(f"[green]Token acquisition successful:[/green] {mask_token(token)}")

    if probe and token:
        try:
            asyncio.run(_probe(app_ctx.api_service(), probe))
        except Exception as exc:
            print(f"[red]Probe failed:[/red] {exc}")
            ok = False
        else:
            print(f"[green]API reachable:[/green] {probe}")

    raise typer.Exit(code=0 if ok else 1)


__all__ = ["register", "doctor"]
