"""CLI command that runs the HTTP server."""

from __future__ import annotations

import logging

import click

from estoque.infrastructure.bootstrap import http_app
from estoque.infrastructure.config import Settings

logger = logging.getLogger(__name__)


@click.command("serve")
@click.option("--host", default=None, help="Bind address (default: ESTOQUE_HOST).")
@click.option("--port", type=int, default=None, help="Bind port (default: ESTOQUE_PORT).")
@click.pass_obj
def serve(settings: Settings, host: str | None, port: int | None) -> None:
    """Run the /produto HTTP API."""
    host = host or settings.host
    port = port or settings.port

    app = http_app()
    logger.info("Servidor rodando na porta http://localhost:%s", port)
    app.run(host=host, port=port, threaded=True)
