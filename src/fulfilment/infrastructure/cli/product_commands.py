"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from fulfilment.application.add_product import AddProductHandler
from fulfilment.application.delete_product import DeleteProductHandler
from fulfilment.application.list_products import ListProductsHandler
from fulfilment.application.show_product import ShowProductHandler
from fulfilment.application.update_product import UpdateProductHandler
from fulfilment.domain.exceptions import DomainException
from fulfilment.infrastructure.bootstrap import unit_of_work


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--description", default="", help="Free-text description.")
@click.option("--stock", default=0, type=int, show_default=True, help="Units in the available pool.")
def product_add(name: str, price: str, description: str, stock: int) -> None:
    """Add a new product to the catalogue."""
    handler = AddProductHandler(uow=unit_of_work())

    try:
        product = handler.handle(name=name, price=price, description=description, stock=stock)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Product #{product.id} '{product.name}' added at {product.price} "
        f"(available={product.available_stock})"
    )


@click.command("list")
def product_list() -> None:
    """List all products in the catalogue."""
    products = ListProductsHandler(uow=unit_of_work()).handle()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>12} {'Available':>10}")
    click.echo("-" * 51)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<20} {p.price:>12} {p.available_stock:>10}")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="New price (e.g. 29.99).")
@click.option("--description", default="", help="Free-text description.")
@click.option("--stock", default=0, type=int, show_default=True, help="Units in the available pool.")
def product_update(product_id: str, name: str, price: str, description: str, stock: int) -> None:
    """Replace a product's details."""
    handler = UpdateProductHandler(uow=unit_of_work())

    try:
        product = handler.handle(
            product_id=product_id,
            name=name,
            price=price,
            description=description,
            stock=stock,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} updated: '{product.name}' at {product.price}")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_delete(product_id: str) -> None:
    """Delete a product that is not allocated anywhere."""
    handler = DeleteProductHandler(uow=unit_of_work())

    try:
        handler.handle(product_id=product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} deleted")


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_show(product_id: str) -> None:
    """Show a single product."""
    try:
        p = ShowProductHandler(uow=unit_of_work()).handle(product_id=product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{p.id}: {p.name}")
    click.echo(f"  Price:       {p.price}")
    click.echo(f"  Available:   {p.available_stock}")
    if p.description:
        click.echo(f"  Description: {p.description}")
