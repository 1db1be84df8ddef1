"""Interactive stock session.

A single synchronizer lives for the whole session, so the local
quantities survive between commands (they are gone once it ends).
"""

from __future__ import annotations

import click

from estoque.client.product_api import ApiError
from estoque.client.synchronizer import ActionInProgressError, ProductSynchronizer, StockLine
from estoque.domain.exceptions import DomainException
from estoque.infrastructure.bootstrap import product_synchronizer
from estoque.infrastructure.cli.render import render_stock
from estoque.infrastructure.config import Settings

HELP = """\
Commands:
  list             show the stock
  add              add a product
  edit <n>         change product n
  del <n>          delete product n
  inc <n>          quantity of product n +1
  dec <n>          quantity of product n -1
  refresh          reload from the server
  quit             leave"""


def _line_at(sync: ProductSynchronizer, arg: str) -> StockLine:
    lines = sync.lines
    try:
        number = int(arg)
    except ValueError:
        raise click.BadParameter(f"'{arg}' is not a row number")
    if not 1 <= number <= len(lines):
        raise click.BadParameter(f"No product at row {number}")
    return lines[number - 1]


def _confirm_delete(label: str) -> bool:
    return click.confirm(f"Remover o produto '{label}'?")


def _run(sync: ProductSynchronizer, command: str, arg: str) -> None:
    if command in ("list", "ls"):
        render_stock(sync)
    elif command == "refresh":
        sync.refresh()
        render_stock(sync)
    elif command == "add":
        name = click.prompt("Nome")
        description = click.prompt("Descrição")
        sync.add(name, description)
        render_stock(sync)
    elif command == "edit":
        line = _line_at(sync, arg)
        name = click.prompt("Nome", default=line.name)
        description = click.prompt("Descrição", default=line.description)
        sync.update(line.id, name, description)
        render_stock(sync)
    elif command == "del":
        line = _line_at(sync, arg)
        if sync.delete(line.id, _confirm_delete):
            render_stock(sync)
        else:
            click.echo("Aborted.")
    elif command == "inc":
        sync.increment(_line_at(sync, arg).id)
        render_stock(sync)
    elif command == "dec":
        sync.decrement(_line_at(sync, arg).id)
        render_stock(sync)
    else:
        click.echo(HELP)


def _dispatch(sync: ProductSynchronizer, raw: str) -> None:
    command, _, arg = raw.strip().partition(" ")
    try:
        _run(sync, command, arg.strip())
    except ApiError:
        # sync.error now holds the message; the banner shows it.
        render_stock(sync)
    except (ActionInProgressError, DomainException, click.BadParameter) as exc:
        click.secho(str(exc), fg="red", err=True)


@click.command("shell")
@click.pass_obj
def shell(settings: Settings) -> None:
    """Browse and edit the stock interactively."""
    sync = product_synchronizer(settings)
    _dispatch(sync, "refresh")

    while True:
        try:
            raw = click.prompt("estoque", prompt_suffix="> ", default="", show_default=False)
        except click.Abort:
            break

        if raw.strip() in ("quit", "exit", "q"):
            break
        if raw.strip():
            _dispatch(sync, raw)
