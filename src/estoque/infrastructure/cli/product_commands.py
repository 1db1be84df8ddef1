"""One-shot CLI commands against a running server."""

from __future__ import annotations

import click

from estoque.client.product_api import ApiError
from estoque.domain.exceptions import DomainException
from estoque.infrastructure.bootstrap import product_synchronizer
from estoque.infrastructure.cli.render import render_stock
from estoque.infrastructure.config import Settings


@click.command("list")
@click.pass_obj
def product_list(settings: Settings) -> None:
    """List all products in stock."""
    sync = product_synchronizer(settings)
    try:
        sync.refresh()
    except ApiError as exc:
        raise click.ClickException(str(exc))

    render_stock(sync)


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--description", required=True, help="Product description.")
@click.pass_obj
def product_add(settings: Settings, name: str, description: str) -> None:
    """Add a new product."""
    sync = product_synchronizer(settings)
    try:
        product = sync.add(name, description)
    except (ApiError, DomainException) as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product.id} '{product.name}' added")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", required=True, help="New name.")
@click.option("--description", required=True, help="New description.")
@click.pass_obj
def product_update(
    settings: Settings, product_id: str, name: str, description: str
) -> None:
    """Replace a product's name and description."""
    sync = product_synchronizer(settings)
    try:
        product = sync.update(product_id, name, description)
    except (ApiError, DomainException) as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product.id} updated to '{product.name}'")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--yes", is_flag=True, help="Delete without asking.")
@click.pass_obj
def product_delete(settings: Settings, product_id: str, yes: bool) -> None:
    """Delete a product. This cannot be undone."""
    sync = product_synchronizer(settings)

    def confirm(label: str) -> bool:
        return yes or click.confirm(f"Remover o produto '{label}'?")

    try:
        deleted = sync.delete(product_id, confirm)
    except ApiError as exc:
        raise click.ClickException(str(exc))

    if deleted:
        click.echo(f"Product {product_id} deleted")
    else:
        click.echo("Aborted.")
