"""CLI commands for warehouses."""

from __future__ import annotations

import click

from fulfilment.application.archive_warehouse import ArchiveWarehouseHandler
from fulfilment.application.create_warehouse import CreateWarehouseHandler
from fulfilment.application.dto import WarehouseDTO
from fulfilment.application.replace_warehouse import ReplaceWarehouseHandler
from fulfilment.application.search_warehouses import SearchWarehousesHandler
from fulfilment.application.show_warehouse import ListWarehousesHandler, ShowWarehouseHandler
from fulfilment.domain.exceptions import DomainException
from fulfilment.domain.service.warehouse_search import SORT_FIELDS, SORT_ORDERS
from fulfilment.infrastructure.bootstrap import (
    default_page_size,
    location_resolver,
    unit_of_work,
)


def _display_warehouse(dto: WarehouseDTO) -> None:
    click.echo(f"Warehouse {dto.business_unit_code}  (status={dto.status}, version={dto.version})")
    click.echo(f"Location: {dto.location}")
    click.echo(f"Stock:    {dto.stock}/{dto.capacity}")
    click.echo(f"Created:  {dto.created_at.isoformat()}")
    if dto.archived_at is not None:
        click.echo(f"Archived: {dto.archived_at.isoformat()}")


def _display_table(warehouses: list[WarehouseDTO]) -> None:
    click.echo(f"{'Code':<12} {'Location':<16} {'Stock':>6} {'Capacity':>9} {'Status':>9}")
    click.echo("-" * 56)
    for w in warehouses:
        click.echo(
            f"{w.business_unit_code:<12} {w.location:<16} {w.stock:>6} {w.capacity:>9} {w.status:>9}"
        )


@click.command("create")
@click.option("--code", required=True, help="Business unit code.")
@click.option("--location", required=True, help="Location identifier (e.g. AMSTERDAM-001).")
@click.option("--capacity", required=True, type=int, help="Maximum units held.")
@click.option("--stock", default=0, type=int, show_default=True, help="Initial stock.")
def warehouse_create(code: str, location: str, capacity: int, stock: int) -> None:
    """Register a new warehouse."""
    handler = CreateWarehouseHandler(uow=unit_of_work(), location_resolver=location_resolver())

    try:
        dto = handler.handle(code, location, capacity, stock)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Warehouse {dto.business_unit_code} created at {dto.location}")


@click.command("replace")
@click.option("--code", required=True, help="Business unit code.")
@click.option("--location", required=True, help="Location identifier.")
@click.option("--capacity", required=True, type=int, help="Maximum units held.")
@click.option("--stock", default=0, type=int, show_default=True, help="Stock after replacement.")
@click.option("--expected-version", default=None, type=int, help="Fail if the warehouse changed.")
def warehouse_replace(
    code: str,
    location: str,
    capacity: int,
    stock: int,
    expected_version: int | None,
) -> None:
    """Replace location, capacity and stock of an active warehouse."""
    handler = ReplaceWarehouseHandler(uow=unit_of_work(), location_resolver=location_resolver())

    try:
        dto = handler.handle(code, location, capacity, stock, expected_version=expected_version)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Warehouse {dto.business_unit_code} replaced (version={dto.version})")


@click.command("archive")
@click.option("--code", required=True, help="Business unit code.")
@click.option("--expected-version", default=None, type=int, help="Fail if the warehouse changed.")
def warehouse_archive(code: str, expected_version: int | None) -> None:
    """Archive a warehouse. Archived warehouses are read-only."""
    handler = ArchiveWarehouseHandler(uow=unit_of_work(), location_resolver=location_resolver())

    try:
        dto = handler.handle(code, expected_version=expected_version)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Warehouse {dto.business_unit_code} archived")


@click.command("show")
@click.option("--code", required=True, help="Business unit code.")
def warehouse_show(code: str) -> None:
    """Show one warehouse, archived or not."""
    handler = ShowWarehouseHandler(uow=unit_of_work())

    try:
        dto = handler.handle(code)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_warehouse(dto)


@click.command("list")
def warehouse_list() -> None:
    """List every warehouse, including archived ones."""
    warehouses = ListWarehousesHandler(uow=unit_of_work()).handle()

    if not warehouses:
        click.echo("No warehouses found.")
        return

    _display_table(warehouses)


@click.command("search")
@click.option("--location", default=None, help="Exact location identifier.")
@click.option("--min-capacity", default=None, type=int, help="Minimum capacity (inclusive).")
@click.option("--max-capacity", default=None, type=int, help="Maximum capacity (inclusive).")
@click.option("--sort-by", default="createdAt", show_default=True, help=f"One of {', '.join(SORT_FIELDS)}.")
@click.option("--sort-order", default="asc", show_default=True, help=f"One of {', '.join(SORT_ORDERS)}.")
@click.option("--page", default=0, type=int, show_default=True, help="Zero-based page number.")
@click.option("--page-size", default=None, type=int, help="Results per page.")
def warehouse_search(
    location: str | None,
    min_capacity: int | None,
    max_capacity: int | None,
    sort_by: str,
    sort_order: str,
    page: int,
    page_size: int | None,
) -> None:
    """Search active warehouses."""
    handler = SearchWarehousesHandler(uow=unit_of_work())

    try:
        warehouses = handler.handle(
            location=location,
            min_capacity=min_capacity,
            max_capacity=max_capacity,
            sort_by=sort_by,
            sort_order=sort_order,
            page=page,
            page_size=page_size if page_size is not None else default_page_size(),
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not warehouses:
        click.echo("No warehouses found.")
        return

    _display_table(warehouses)
