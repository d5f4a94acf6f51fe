"""Web server command."""

import os
from typing import Optional

import click
import uvicorn

from ..db import settings


@click.command()
@click.option("--host", default=None, help="Bind address.")
@click.option("--port", type=int, default=None, help="Bind port.")
@click.option("--reload", is_flag=True, help="Auto-reload on code changes.")
@click.pass_context
def web(
    ctx: click.Context, host: Optional[str], port: Optional[int], reload: bool
) -> None:
    """Serve the gallery HTTP API."""
    host = host or settings.host
    port = port or settings.port

    database_url = (ctx.obj or {}).get("database_url") or settings.database_url
    # The app reads its catalog location from settings, also in reload workers
    os.environ["IMAGESPACE_DATABASE_URL"] = database_url
    settings.database_url = database_url

    click.echo("Image Space Gallery")
    click.echo(f"Catalog: {database_url}")
    click.echo(f"Starting web server on http://{host}:{port}")

    uvicorn.run(
        "imagespace.api.app:app",
        host=host,
        port=port,
        reload=reload,
        log_level="info",
    )
