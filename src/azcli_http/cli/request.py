"""Call protected endpoints through :class:`~azcli_http.api_service.ApiService`."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any

import typer

from ..api_service import ApiService
from .common import get_app_context, handle_cli_errors

BASE_URL_OPTION = typer.Option(None, "--base-url", help="API base URL (defaults to profile or AZHTTP_API_BASE_URL)")
SCOPE_OPTION = typer.Option(None, "--scope", help="Scope to request (defaults to profile or AZHTTP_SCOPE)")


def register(app: typer.Typer) -> None:
    app.command("get")(get)
    app.command("post")(post)


async def _get(service: ApiService, endpoint: str) -> str:
    async with service:
        return await service.get_data(endpoint)


async def _post(
    service: ApiService,
    endpoint: str,
    content: str | None,
    payload: Any | None,
    headers: dict[str, str] | None,
) -> str:
    async with service:
        return await service.post_data(endpoint, content, json=payload, headers=headers)


@handle_cli_errors
def get(
    ctx: typer.Context,
    endpoint: str = typer.Argument(..., help="Endpoint relative to the base URL"),
    base_url: str | None = BASE_URL_OPTION,
    scope: str | None = SCOPE_OPTION,
) -> None:
    """Send an authenticated GET request and print the response body."""

    service = get_app_context(ctx).api_service(base_url, scope)
    typer.echo(asyncio.run(_get(service, endpoint)))


@handle_cli_errors
def post(
    ctx: typer.Context,
    endpoint: str = typer.Argument(..., help="Endpoint relative to the base URL"),
    data: str | None = typer.Option(None, "--data", "-d", help="Raw request body"),
    json_file: Path | None = typer.Option(
        None, "--json-file", exists=True, dir_okay=False, help="JSON file sent as the request body"
    ),
    content_type: str | None = typer.Option(None, "--content-type", help="Content-Type for --data"),
    base_url: str | None = BASE_URL_OPTION,
    scope: str | None = SCOPE_OPTION,
) -> None:
    """Send an authenticated POST request and print the response body."""

    if data is not None and json_file is not None:
        raise typer.BadParameter("Use either --data or --json-file, not both.")
    payload: Any | None = None
    if json_file is not None:
        try:
            payload = json.loads(json_file.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise typer.BadParameter(f"{json_file} is not valid JSON: {exc}") from exc
    headers = {"Content-Type": content_type} if content_type else None

    service = get_app_context(ctx).api_service(base_url, scope)
    typer.echo(asyncio.run(_post(service, endpoint, data, payload, headers)))


__all__ = ["register", "get", "post"]
