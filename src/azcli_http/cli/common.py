from __future__ import annotations

import json
import os
from collections.abc import Callable
from functools import wraps
from typing import Any, ParamSpec, TypeVar, cast

import typer
from rich.console import Console

from ..context import AppContext
from ..errors import AuthError, AzHttpError, ConfigurationError, HttpError

console = Console()


def _render_http_error(exc: HttpError) -> None:
    console.print(f"[red]Error:[/red] {exc}")
    details = getattr(exc, "details", None)
    if details:
        snippet = details
        if isinstance(details, dict):
            snippet = json.dumps(details, indent=2)
        console.print(str(snippet), markup=False, highlight=False)


CommandParams = ParamSpec("CommandParams")
CommandReturn = TypeVar("CommandReturn")


def handle_cli_errors(
    func: Callable[CommandParams, CommandReturn],
) -> Callable[CommandParams, CommandReturn]:
    @wraps(func)
    def wrapper(*args: CommandParams.args, **kwargs: CommandParams.kwargs) -> CommandReturn:
        try:
            return func(*args, **kwargs)
        except typer.BadParameter:
            raise
        except typer.Exit:
            raise
        except HttpError as exc:
            _render_http_error(exc)
            raise typer.Exit(1) from None
        except AuthError as exc:
            console.print(f"[red]Error:[/red] Authentication failed: {exc}")
            console.print("Run `az login` (optionally with --tenant) and retry.")
            raise typer.Exit(1) from None
        except ConfigurationError as exc:
            console.print(f"[red]Error:[/red] Invalid configuration: {exc}")
            raise typer.Exit(1) from None
        except AzHttpError as exc:
            console.print(f"[red]Error:[/red] {exc}")
            raise typer.Exit(1) from None
        except Exception as exc:
            if os.getenv("AZHTTP_DEBUG"):
                raise
            console.print(f"[red]Error:[/red] Unexpected failure: {exc}")
            console.print("Set AZHTTP_DEBUG=1 for a stack trace.")
            raise typer.Exit(1) from exc

    return wrapper


def get_app_context(ctx: typer.Context) -> AppContext:
    """Return the :class:`AppContext` cached on ``ctx``, loading it on first use."""

    ctx_obj = cast(dict[str, Any], ctx.ensure_object(dict))
    existing = ctx_obj.get("app_context")
    if isinstance(existing, AppContext):
        return existing
    app_context = AppContext.load()
    ctx_obj["app_context"] = app_context
    return app_context


__all__ = ["console", "get_app_context", "handle_cli_errors"]
