"""Cart aggregate: the active billing session's line items and terms.

The cart owns its lines. Every derived figure (subtotal, discount, tax,
final total) is a property recomputed from the current lines and
percentages on each read, so there is no cached total to go stale.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field, replace
from decimal import Decimal
from enum import Enum

from shopcalc.domain.exceptions import ValidationError
from shopcalc.domain.model.value_objects import Money, Percentage, Quantity, Weight

logger = logging.getLogger(__name__)

DEFAULT_ITEM_NAME = "Custom Item"
MAX_DISCOUNT = Decimal("100")


class PricingMode(Enum):
    WEIGHT = "Weight"
    QUANTITY = "Quantity"


class PaymentMethod(Enum):
    CASH = "Cash"
    CARD = "Card"
    UPI = "UPI"
    OTHER = "Other"


def _new_line_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class CartLine:
    """One priced entry in the cart.

    Weight-priced lines carry ``quantity == 1``; quantity-priced lines
    carry ``weight_grams == 0``. Use the ``by_weight`` / ``by_quantity``
    factories for new lines; ``__init__`` stays plain so stored bill
    snapshots can be reconstituted as-is.
    """

    id: str
    name: str
    unit_price: Money  # per kilogram in weight mode, per unit otherwise
    weight_grams: Decimal
    quantity: int
    total: Money

    @property
    def mode(self) -> PricingMode:
        if self.weight_grams > 0:
            return PricingMode.WEIGHT
        return PricingMode.QUANTITY

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def by_weight(unit_price: Money, weight: Weight, name: str | None = None) -> CartLine:
        """Price per kilogram times weight in grams / 1000."""
        if unit_price.amount <= 0:
            raise ValidationError("Price must be greater than zero")
        return CartLine(
            id=_new_line_id(),
            name=_line_name(name),
            unit_price=unit_price,
            weight_grams=weight.grams,
            quantity=1,
            total=unit_price * weight.kilograms,
        )

    @staticmethod
    def by_quantity(
        unit_price: Money, quantity: Quantity, name: str | None = None
    ) -> CartLine:
        if unit_price.amount <= 0:
            raise ValidationError("Price must be greater than zero")
        return CartLine(
            id=_new_line_id(),
            name=_line_name(name),
            unit_price=unit_price,
            weight_grams=Decimal("0"),
            quantity=quantity.value,
            total=unit_price * quantity.value,
        )

    def with_quantity(self, quantity: Quantity) -> CartLine:
        """Copy of this line repriced as ``unit_price × quantity``.

        The id is kept so the line stays in its place in the cart.
        """
        return replace(
            self,
            quantity=quantity.value,
            total=self.unit_price * quantity.value,
        )


def _line_name(name: str | None) -> str:
    if name is None or not name.strip():
        return DEFAULT_ITEM_NAME
    return name.strip()


@dataclass
class Cart:
    """Aggregate root for the active bill being rung up.

    Invariants:
    - ``discount_percent`` lies in [0, 100]
    - ``tax_percent`` is >= 0
    - line order is insertion order
    """

    lines: list[CartLine] = field(default_factory=list)
    discount_percent: Percentage = field(default_factory=Percentage.zero)
    tax_percent: Percentage = field(default_factory=Percentage.zero)
    customer_name: str = ""
    customer_phone: str = ""
    payment_method: PaymentMethod = PaymentMethod.CASH

    # --- Line management ------------------------------------------------------

    def add(self, line: CartLine) -> None:
        if self.find(line.id) is not None:
            raise ValidationError(f"Line '{line.id}' is already in the cart")
        self.lines.append(line)

    def remove(self, line_id: str) -> bool:
        """Remove the line with ``line_id``. Unknown ids are ignored."""
        before = len(self.lines)
        self.lines = [line for line in self.lines if line.id != line_id]
        return len(self.lines) != before

    def update_quantity(self, line_id: str, new_quantity: int) -> bool:
        """Reprice a line in place; a quantity of zero or less removes it.

        Weight-priced lines have no unit count, so only removal applies
        to them.
        """
        if new_quantity <= 0:
            return self.remove(line_id)
        for i, line in enumerate(self.lines):
            if line.id == line_id:
                if line.mode is PricingMode.WEIGHT:
                    logger.debug(
                        "Refused quantity %d for weight-priced line %s",
                        new_quantity, line_id,
                    )
                    return False
                self.lines[i] = line.with_quantity(Quantity(new_quantity))
                return True
        return False

    def find(self, line_id: str) -> CartLine | None:
        for line in self.lines:
            if line.id == line_id:
                return line
        return None

    def clear(self) -> None:
        """Empty the cart and reset every term to its default."""
        self.lines = []
        self.discount_percent = Percentage.zero()
        self.tax_percent = Percentage.zero()
        self.customer_name = ""
        self.customer_phone = ""
        self.payment_method = PaymentMethod.CASH

    # --- Terms ----------------------------------------------------------------

    def set_discount(self, rate: Percentage) -> None:
        if rate.value > MAX_DISCOUNT:
            raise ValidationError(f"Discount cannot exceed {MAX_DISCOUNT}%")
        self.discount_percent = rate

    def set_tax(self, rate: Percentage) -> None:
        self.tax_percent = rate

    # --- Computed properties --------------------------------------------------

    @property
    def is_empty(self) -> bool:
        return not self.lines

    @property
    def subtotal(self) -> Money:
        result = Money.zero()
        for line in self.lines:
            result = result + line.total
        return result

    @property
    def discount_amount(self) -> Money:
        return self.subtotal.percent(self.discount_percent)

    @property
    def amount_after_discount(self) -> Money:
        return self.subtotal - self.discount_amount

    @property
    def tax_amount(self) -> Money:
        return self.amount_after_discount.percent(self.tax_percent)

    @property
    def final_total(self) -> Money:
        return self.amount_after_discount + self.tax_amount
