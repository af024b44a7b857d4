"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from shopcalc.application.add_product import AddProductHandler
from shopcalc.application.list_products import ListCategoriesHandler, ListProductsHandler
from shopcalc.application.update_product import (
    DeleteProductHandler,
    ToggleFavoriteHandler,
    UpdateProductHandler,
)
from shopcalc.domain.exceptions import DomainException
from shopcalc.infrastructure.bootstrap import product_repository


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (per kg for loose goods, e.g. 60).")
@click.option("--category", default="", help="Category (default: General).")
@click.option("--stock", default=0, type=int, help="Units in stock.")
@click.option("--barcode", default="", help="Barcode text.")
def product_add(name: str, price: str, category: str, stock: int, barcode: str) -> None:
    """Add a product to the price list."""
    handler = AddProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(
            name=name, price=price, category=category, stock=stock, barcode=barcode
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if product is None:
        click.echo("Ignored: a name and a positive price are required.")
        return
    click.echo(f"Product #{product.id} '{product.name}' added at {product.price}")


@click.command("list")
@click.option("--category", default=None, help="Only this category.")
@click.option("--search", default="", help="Filter by name.")
def product_list(category: str | None, search: str) -> None:
    """List the price list, favourites first."""
    products = ListProductsHandler(product_repo=product_repository()).handle(
        category=category, search=search
    )

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Category':<12} {'Stock':>6} {'Price':>10}")
    click.echo("-" * 58)
    for p in products:
        star = "*" if p.is_favorite else " "
        click.echo(
            f"{p.id:<5}{star} {p.name:<20} {p.category:<12} {p.stock:>6} {str(p.price):>10}"
        )


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--price", default=None, help="New price (e.g. 29.99).")
@click.option("--stock", default=None, type=int, help="New stock level.")
def product_update(product_id: str, price: str | None, stock: int | None) -> None:
    """Update a product's price and/or stock."""
    if price is None and stock is None:
        raise click.UsageError("Give --price and/or --stock.")

    handler = UpdateProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(product_id=product_id, new_price=price, new_stock=stock)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} now {product.price}, stock {product.stock}")


@click.command("favorite")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_favorite(product_id: str) -> None:
    """Toggle a product's favourite star."""
    handler = ToggleFavoriteHandler(product_repo=product_repository())

    try:
        product = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    state = "starred" if product.is_favorite else "unstarred"
    click.echo(f"Product #{product.id} '{product.name}' {state}.")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_delete(product_id: str) -> None:
    """Remove a product from the price list."""
    if DeleteProductHandler(product_repo=product_repository()).handle(product_id):
        click.echo(f"Product #{product_id} deleted.")
    else:
        click.echo(f"No product #{product_id}; nothing deleted.")


@click.command("categories")
def product_categories() -> None:
    """List the categories in use."""
    for category in ListCategoriesHandler(product_repo=product_repository()).handle():
        click.echo(category)
