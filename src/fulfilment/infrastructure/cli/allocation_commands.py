"""CLI commands for allocations (product stock held in containers)."""

from __future__ import annotations

import click

from fulfilment.application.list_allocations import ListAllocationsHandler
from fulfilment.application.remove_allocation import RemoveAllocationHandler
from fulfilment.application.upsert_allocation import UpsertAllocationHandler
from fulfilment.domain.exceptions import DomainException
from fulfilment.domain.model.allocation import ContainerRef
from fulfilment.infrastructure.bootstrap import unit_of_work


def _container(store: str | None, warehouse: str | None) -> ContainerRef:
    """Build the target container from exactly one of --store / --warehouse."""
    if (store is None) == (warehouse is None):
        raise click.UsageError("Pass exactly one of --store or --warehouse.")
    if store is not None:
        return ContainerRef.store(store)
    return ContainerRef.warehouse(warehouse)


_store_option = click.option("--store", default=None, help="Store ID.")
_warehouse_option = click.option("--warehouse", default=None, help="Warehouse business unit code.")


@click.command("set")
@_store_option
@_warehouse_option
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Units to hold in the container.")
def allocation_set(store: str | None, warehouse: str | None, product_id: str, quantity: int) -> None:
    """Create or resize an allocation."""
    container = _container(store, warehouse)
    handler = UpsertAllocationHandler(uow=unit_of_work())

    try:
        dto = handler.handle(container, product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{dto.quantity} x '{dto.product_name}' allocated to {container}")


@click.command("remove")
@_store_option
@_warehouse_option
@click.option("--product", "product_id", required=True, help="Product ID.")
def allocation_remove(store: str | None, warehouse: str | None, product_id: str) -> None:
    """Remove an allocation and return its units to the product pool."""
    container = _container(store, warehouse)
    handler = RemoveAllocationHandler(uow=unit_of_work())

    try:
        returned = handler.handle(container, product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Allocation removed from {container} ({returned} units returned to stock)")


@click.command("list")
@_store_option
@_warehouse_option
def allocation_list(store: str | None, warehouse: str | None) -> None:
    """List the allocations of a container."""
    container = _container(store, warehouse)
    handler = ListAllocationsHandler(uow=unit_of_work())

    try:
        allocations = handler.handle(container)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not allocations:
        click.echo(f"No allocations in {container}.")
        return

    click.echo(f"{'Product ID':<12} {'Product':<20} {'Qty':>6}")
    click.echo("-" * 40)
    for a in allocations:
        click.echo(f"{a.product_id:<12} {a.product_name:<20} {a.quantity:>6}")
