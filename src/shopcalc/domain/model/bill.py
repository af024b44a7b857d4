"""Bill: the immutable record a finalized cart turns into."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from shopcalc.domain.exceptions import ValidationError
from shopcalc.domain.model.cart import Cart, CartLine, PaymentMethod
from shopcalc.domain.model.value_objects import Money

WALK_IN_CUSTOMER = "Walk-in"


@dataclass(frozen=True)
class Bill:
    """A snapshot of a finalized cart.

    Bills are never updated once written; they can only be deleted.
    ``id`` is None until the repository assigns one.
    """

    id: int | None
    customer_name: str
    customer_phone: str
    subtotal: Money
    discount: Money
    tax: Money
    final_total: Money
    items: tuple[CartLine, ...]
    payment_method: PaymentMethod = PaymentMethod.CASH
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def from_cart(cart: Cart, created_at: datetime | None = None) -> Bill:
        """Freeze the current state of ``cart`` into a new bill.

        A naive ``created_at`` is read as local time and stored in UTC.
        """
        if cart.is_empty:
            raise ValidationError("Cannot bill an empty cart")

        name = cart.customer_name.strip() or WALK_IN_CUSTOMER
        stamp = created_at or datetime.now(timezone.utc)
        if stamp.tzinfo is None:
            stamp = stamp.astimezone(timezone.utc)
        return Bill(
            id=None,
            customer_name=name,
            customer_phone=cart.customer_phone.strip(),
            subtotal=cart.subtotal,
            discount=cart.discount_amount,
            tax=cart.tax_amount,
            final_total=cart.final_total,
            items=tuple(cart.lines),
            payment_method=cart.payment_method,
            created_at=stamp,
        )

    @property
    def item_count(self) -> int:
        return len(self.items)
