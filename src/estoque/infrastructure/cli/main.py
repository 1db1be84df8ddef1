from __future__ import annotations

from dataclasses import replace

import click

from estoque.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_update,
)
from estoque.infrastructure.cli.server_commands import serve
from estoque.infrastructure.cli.shell_command import shell
from estoque.infrastructure.config import Settings
from estoque.infrastructure.logging_config import configure_logging


@click.group()
@click.option("--api-url", default=None, help="Server base URL (default: ESTOQUE_API_URL).")
@click.pass_context
def cli(ctx: click.Context, api_url: str | None) -> None:
    """Estoque — product stock tracker"""
    settings = Settings.from_env()
    if api_url:
        settings = replace(settings, api_url=api_url.rstrip("/"))
    configure_logging(settings.log_level)
    ctx.obj = settings


@cli.group()
def product() -> None:
    """Manage products."""


# Register subcommands
cli.add_command(serve)
cli.add_command(shell)
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_update)
