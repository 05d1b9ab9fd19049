from __future__ import annotations

import typer

from ..log import configure_logging
from . import doctor, profile, request, token

app = typer.Typer(help="Call Azure AD protected APIs with your Azure CLI sign-in")


def _register_sub_app(name: str, sub_app: typer.Typer) -> None:
    app.add_typer(sub_app, name=name)


_register_sub_app("profile", profile.app)

token.register(app)
request.register(app)
doctor.register(app)


@app.callback()
def common(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Initialize logging and shared Typer context state."""

    configure_logging("DEBUG" if verbose else None)
    ctx.ensure_object(dict)
    ctx.obj.setdefault("app_context", None)


__all__ = ["app"]
