"""Application service: Update Product use cases."""

from __future__ import annotations

from shopcalc.domain.exceptions import EntityNotFoundError
from shopcalc.domain.model.product import Product
from shopcalc.domain.model.value_objects import Money
from shopcalc.domain.repository.product_repository import ProductRepository


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        new_price: str | None = None,
        new_stock: int | None = None,
    ) -> Product:
        """Change a product's price and/or stock.

        Bills already rung up keep the price they were sold at.
        """
        product = _get(self._product_repo, product_id)
        if new_price is not None:
            product.update_price(Money.of(new_price))
        if new_stock is not None:
            product.set_stock(new_stock)
        self._product_repo.save(product)
        return product


class ToggleFavoriteHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> Product:
        product = _get(self._product_repo, product_id)
        product.toggle_favorite()
        self._product_repo.save(product)
        return product


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> bool:
        return self._product_repo.delete(product_id)


def _get(repo: ProductRepository, product_id: str) -> Product:
    product = repo.get_by_id(product_id)
    if product is None:
        raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
    return product
