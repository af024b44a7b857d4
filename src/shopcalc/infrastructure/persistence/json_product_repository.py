"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from shopcalc.domain.model.product import DEFAULT_CATEGORY, Product
from shopcalc.domain.model.value_objects import CURRENCY, Money
from shopcalc.domain.repository.product_repository import ProductRepository
from shopcalc.infrastructure.persistence.json_store import JsonListFile


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._store = JsonListFile(file_path)

    # --- ProductRepository interface ------------------------------------------

    def next_id(self) -> str:
        return str(self._store.next_id(self._store.load()))

    def get_by_id(self, product_id: str) -> Product | None:
        return self._load().get(product_id)

    def get_by_name(self, name: str) -> Product | None:
        for product in self._load().values():
            if product.name.lower() == name.lower():
                return product
        return None

    def list_all(self) -> list[Product]:
        return sorted(
            self._load().values(),
            key=lambda p: (not p.is_favorite, p.name.lower()),
        )

    def list_by_category(self, category: str) -> list[Product]:
        return sorted(
            (p for p in self._load().values() if p.category == category),
            key=lambda p: p.name.lower(),
        )

    def categories(self) -> list[str]:
        return sorted({p.category for p in self._load().values() if p.category})

    def save(self, product: Product) -> None:
        with self._store.lock:
            products = self._load()
            products[product.id] = product
            self._persist(products)

    def delete(self, product_id: str) -> bool:
        with self._store.lock:
            products = self._load()
            if products.pop(product_id, None) is None:
                return False
            self._persist(products)
        return True

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Product]:
        return {
            item["id"]: Product(
                id=item["id"],
                name=item["name"],
                price=Money(Decimal(item["price"]), item.get("currency", CURRENCY)),
                is_favorite=item.get("is_favorite", False),
                category=item.get("category", DEFAULT_CATEGORY),
                stock=item.get("stock", 0),
                barcode=item.get("barcode", ""),
                image_url=item.get("image_url", ""),
            )
            for item in self._store.load()
        }

    def _persist(self, products: dict[str, Product]) -> None:
        raw = [
            {
                "id": p.id,
                "name": p.name,
                "price": str(p.price.amount),
                "currency": p.price.currency,
                "is_favorite": p.is_favorite,
                "category": p.category,
                "stock": p.stock,
                "barcode": p.barcode,
                "image_url": p.image_url,
            }
            for p in products.values()
        ]
        self._store.persist(raw)
