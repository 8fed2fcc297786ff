"""CLI commands for stores."""

from __future__ import annotations

import click

from fulfilment.application.create_store import CreateStoreHandler
from fulfilment.application.delete_store import DeleteStoreHandler
from fulfilment.application.list_stores import ListStoresHandler
from fulfilment.application.show_store import ShowStoreHandler
from fulfilment.application.update_store import UpdateStoreHandler
from fulfilment.domain.exceptions import DomainException
from fulfilment.infrastructure.bootstrap import legacy_store_gateway, unit_of_work


@click.command("create")
@click.option("--name", required=True, help="Store name.")
@click.option("--occupancy", default=0, type=int, show_default=True, help="Manual occupancy.")
def store_create(name: str, occupancy: int) -> None:
    """Create a new store."""
    handler = CreateStoreHandler(uow=unit_of_work(), legacy_gateway=legacy_store_gateway())

    try:
        store = handler.handle(name=name, occupancy=occupancy)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Store #{store.id} '{store.name}' created (occupancy={store.occupancy})")


@click.command("list")
def store_list() -> None:
    """List all stores."""
    stores = ListStoresHandler(uow=unit_of_work()).handle()

    if not stores:
        click.echo("No stores found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Occupancy':>10} {'Mode':>8}")
    click.echo("-" * 47)
    for s in stores:
        click.echo(f"{s.id:<6} {s.name:<20} {s.occupancy:>10} {s.occupancy_mode:>8}")


@click.command("update")
@click.option("--id", "store_id", required=True, help="Store ID.")
@click.option("--name", required=True, help="Store name.")
@click.option(
    "--occupancy",
    default=None,
    type=int,
    help="Manual occupancy; ignored once the store holds allocations.",
)
def store_update(store_id: str, name: str, occupancy: int | None) -> None:
    """Rename a store and optionally set its occupancy."""
    handler = UpdateStoreHandler(uow=unit_of_work(), legacy_gateway=legacy_store_gateway())

    try:
        store = handler.handle(store_id=store_id, name=name, occupancy=occupancy)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Store #{store.id} '{store.name}' updated "
        f"(occupancy={store.occupancy}, mode={store.occupancy_mode})"
    )


@click.command("delete")
@click.option("--id", "store_id", required=True, help="Store ID.")
def store_delete(store_id: str) -> None:
    """Delete a store, returning its allocated units to product pools."""
    handler = DeleteStoreHandler(uow=unit_of_work(), legacy_gateway=legacy_store_gateway())

    try:
        returned = handler.handle(store_id=store_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Store #{store_id} deleted ({returned} units returned to stock)")


@click.command("show")
@click.option("--id", "store_id", required=True, help="Store ID.")
def store_show(store_id: str) -> None:
    """Show a single store."""
    try:
        s = ShowStoreHandler(uow=unit_of_work()).handle(store_id=store_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Store #{s.id}: {s.name}")
    click.echo(f"  Occupancy: {s.occupancy} ({s.occupancy_mode})")
