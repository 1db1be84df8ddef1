"""Text rendering of the synchronized stock listing."""

from __future__ import annotations

import click

from estoque.client.synchronizer import ProductSynchronizer

TITLE = "Sistema de Estoque"
EMPTY_STOCK = "Nenhum produto em estoque."


def render_stock(sync: ProductSynchronizer) -> None:
    click.echo(TITLE)
    click.echo("=" * len(TITLE))

    if sync.error:
        click.secho(f"Erro: {sync.error}", fg="red", err=True)

    lines = sync.lines
    if not lines:
        click.echo(EMPTY_STOCK)
        return

    click.echo(
        f"{'#':<4} {'ID':<36} {'Nome':<20} {'Descrição':<30} {'Qtd':>4}"
    )
    click.echo("-" * 98)
    for number, line in enumerate(lines, start=1):
        click.echo(
            f"{number:<4} {line.id:<36} {line.name:<20} "
            f"{line.description:<30} {line.quantity:>4}"
        )
