"""Fetch an Azure CLI token and show it masked."""

from __future__ import annotations

import asyncio
import json

import typer

from ..auth.azure_cli import AzureCliTokenProvider
from ..client_factory import ClientFactory
from ..models import AccessTokenInfo
from .common import console, get_app_context, handle_cli_errors


def register(app: typer.Typer) -> None:
    app.command("token")(token)


async def _fetch(provider: AzureCliTokenProvider) -> tuple[str, int | None]:
    return await provider.get_access_token()


async def _build_client(factory: ClientFactory, scope: str, base_url: str) -> None:
    async with factory.create_azure_authenticated_client(scope, base_url):
        pass


@handle_cli_errors
def token(
    ctx: typer.Context,
    scope: str | None = typer.Option(None, help="Scope to request (defaults to profile or AZHTTP_SCOPE)"),
    as_json: bool = typer.Option(False, "--json", help="Print the masked token as JSON"),
) -> None:
    """Get a token from the signed-in Azure CLI and display it masked."""

    app_ctx = get_app_context(ctx)
    resolved_scope = app_ctx.resolve_scope(scope)
    provider = AzureCliTokenProvider(
        resolved_scope,
        tenant_id=app_ctx.tenant_id,
        process_timeout=app_ctx.settings.process_timeout,
    )
    raw_token, expires_on = asyncio.run(_fetch(provider))
    info = AccessTokenInfo.from_token(resolved_scope, raw_token, expires_on)

    if as_json:
        typer.echo(json.dumps(info.to_payload()))
        return

    console.print(f"[green]Token retrieved successfully:[/green] {info.masked_token}", highlight=False)
    if info.expires_at is not None:
        console.print(f"Expires at: {info.expires_at.isoformat()}")

    base_url = app_ctx.resolve_api_base_url()
    asyncio.run(_build_client(app_ctx.client_factory, resolved_scope, base_url))
    console.print(f"HTTP client for {base_url} created through ClientFactory.", highlight=False)


__all__ = ["register", "token"]
