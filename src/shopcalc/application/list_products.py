"""Application service: List Products use cases (queries)."""

from __future__ import annotations

from shopcalc.domain.model.product import Product
from shopcalc.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, category: str | None = None, search: str = "") -> list[Product]:
        """Favourites first, then by name; a category lists by name only."""
        if category and category != "All":
            products = self._product_repo.list_by_category(category)
        else:
            products = self._product_repo.list_all()

        needle = search.strip().lower()
        if needle:
            products = [p for p in products if needle in p.name.lower()]
        return products


class ListCategoriesHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[str]:
        return sorted(self._product_repo.categories())
