import click

from fulfilment.infrastructure.bootstrap import setup_logging
from fulfilment.infrastructure.cli.allocation_commands import (
    allocation_list,
    allocation_remove,
    allocation_set,
)
from fulfilment.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_show,
    product_update,
)
from fulfilment.infrastructure.cli.store_commands import (
    store_create,
    store_delete,
    store_list,
    store_show,
    store_update,
)
from fulfilment.infrastructure.cli.warehouse_commands import (
    warehouse_archive,
    warehouse_create,
    warehouse_list,
    warehouse_replace,
    warehouse_search,
    warehouse_show,
)


@click.group()
def cli() -> None:
    """Fulfilment: products, stores, warehouses and the stock between them."""
    setup_logging()


@cli.group()
def product() -> None:
    """Manage the product catalogue."""


@cli.group()
def store() -> None:
    """Manage stores."""


@cli.group()
def warehouse() -> None:
    """Manage warehouses."""


@cli.group()
def allocation() -> None:
    """Place product stock in stores and warehouses."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_update)
store.add_command(store_create)
store.add_command(store_delete)
store.add_command(store_list)
store.add_command(store_show)
store.add_command(store_update)
warehouse.add_command(warehouse_archive)
warehouse.add_command(warehouse_create)
warehouse.add_command(warehouse_list)
warehouse.add_command(warehouse_replace)
warehouse.add_command(warehouse_search)
warehouse.add_command(warehouse_show)
allocation.add_command(allocation_list)
allocation.add_command(allocation_remove)
allocation.add_command(allocation_set)
