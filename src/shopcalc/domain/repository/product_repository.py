"""Abstract repository for the Product aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from shopcalc.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def next_id(self) -> str:
        """Generate the next unique product ID."""

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def get_by_name(self, name: str) -> Product | None:
        """Return a product by its name (case-insensitive), or None."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product, favourites first, then by name."""

    @abstractmethod
    def list_by_category(self, category: str) -> list[Product]:
        """Return the products in ``category``, ordered by name."""

    @abstractmethod
    def categories(self) -> list[str]:
        """Return the distinct, non-empty categories in use."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product."""

    @abstractmethod
    def delete(self, product_id: str) -> bool:
        """Delete a product; return False if there was nothing to delete."""
