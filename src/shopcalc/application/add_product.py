"""Application service: Add Product use case."""

from __future__ import annotations

import logging

from shopcalc.domain.exceptions import ValidationError
from shopcalc.domain.model.product import Product, normalize_category
from shopcalc.domain.model.value_objects import Money, parse_decimal
from shopcalc.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        name: str,
        price: str,
        category: str = "",
        stock: int = 0,
        barcode: str = "",
    ) -> Product | None:
        """Add a product to the price list.

        A blank name or a price that is not a positive number is ignored
        (returns None), the same as an empty price field at the till.
        """
        amount = parse_decimal(price)
        if not name or not name.strip() or amount is None or amount <= 0:
            logger.debug("Ignored product input name=%r price=%r", name, price)
            return None
        if stock < 0:
            raise ValidationError("Stock cannot be negative")

        existing = self._product_repo.get_by_name(name.strip())
        if existing is not None:
            raise ValidationError(f"Product '{name.strip()}' already exists")

        product = Product(
            id=self._product_repo.next_id(),
            name=name.strip(),
            price=Money(amount),
            category=normalize_category(category),
            stock=stock,
            barcode=barcode.strip(),
        )
        self._product_repo.save(product)
        logger.info("Added product #%s '%s'", product.id, product.name)
        return product
