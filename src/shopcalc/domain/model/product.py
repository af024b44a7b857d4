"""Product aggregate.

Products live independently of bills. Prices change and items come and
go from the shelf; bills keep their own line snapshot, so neither
affects past sales.
"""

from __future__ import annotations

from dataclasses import dataclass

from shopcalc.domain.exceptions import ValidationError
from shopcalc.domain.model.value_objects import Money

DEFAULT_CATEGORY = "General"


@dataclass
class Product:
    """A product on the shop's price list.

    Kept as a mutable dataclass because price, stock and the favourite
    flag are legitimate mutations on the aggregate.
    """

    id: str
    name: str
    price: Money
    is_favorite: bool = False
    category: str = DEFAULT_CATEGORY
    stock: int = 0
    barcode: str = ""
    image_url: str = ""

    def update_price(self, new_price: Money) -> None:
        if new_price.amount <= 0:
            raise ValidationError("Product price must be greater than zero")
        self.price = new_price

    def set_stock(self, stock: int) -> None:
        if stock < 0:
            raise ValidationError("Stock cannot be negative")
        self.stock = stock

    def toggle_favorite(self) -> None:
        self.is_favorite = not self.is_favorite


def normalize_category(category: str | None) -> str:
    if category is None or not category.strip():
        return DEFAULT_CATEGORY
    return category.strip()
