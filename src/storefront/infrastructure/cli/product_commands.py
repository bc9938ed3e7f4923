"""CLI commands for administering the catalog."""

from __future__ import annotations

import click

from storefront.application.add_product import AddProductHandler
from storefront.application.list_products import ListProductsHandler
from storefront.application.remove_product import RemoveProductHandler
from storefront.application.update_product import UpdateProductHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import product_repository


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--slug", default=None, help="URL slug; derived from the name if omitted.")
@click.option("--description", default="", help="Free-text description.")
@click.option("--stock", default=0, type=int, show_default=True, help="Units in stock.")
@click.option("--image", default="", help="Image reference (URL or path).")
def product_add(
    name: str,
    price: str,
    slug: str | None,
    description: str,
    stock: int,
    image: str,
) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(
            name=name,
            price=price,
            slug=slug,
            description=description,
            stock=stock,
            image=image,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Product #{product.id} '{product.name}' ({product.slug}) added at ${product.price}"
    )


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    products = ListProductsHandler(product_repo=product_repository()).handle()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Slug':<24} {'Name':<24} {'Price':>10} {'Stock':>6}")
    click.echo("-" * 74)
    for p in products:
        click.echo(
            f"{p.id:<6} {p.slug:<24} {p.name:<24} {'$' + p.price:>10} {p.stock:>6}"
        )


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--price", required=True, help="New price (e.g. 29.99).")
def product_update(product_id: str, price: str) -> None:
    """Update a product's price. Existing orders keep their price."""
    handler = UpdateProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(product_id=product_id, new_price=price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} price updated to ${product.price}")


@click.command("stock")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--set", "stock", required=True, type=int, help="New stock count.")
def product_stock(product_id: str, stock: int) -> None:
    """Set a product's stock count."""
    handler = UpdateProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(product_id=product_id, stock=stock)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} stock set to {product.stock}")


@click.command("remove")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_remove(product_id: str) -> None:
    """Remove a product from the catalog."""
    handler = RemoveProductHandler(product_repo=product_repository())

    try:
        handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} removed.")
