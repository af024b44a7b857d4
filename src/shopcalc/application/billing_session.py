"""Application service: the active billing session at the till.

The session turns raw text typed into the price / weight / quantity
fields into cart lines, keeps the bill terms, and finalizes the cart
into a stored bill.

Till input is validated leniently. A price, weight or quantity that is
missing, unparsable or not positive is a no-op, not an error; the
methods report it through their return value only.
"""

from __future__ import annotations

import logging
from concurrent.futures import Future
from datetime import datetime
from decimal import Decimal

from shopcalc.application.bill_writer import BillWriter
from shopcalc.application.feedback import Feedback, NoFeedback, pulse_quietly
from shopcalc.domain.exceptions import ValidationError
from shopcalc.domain.model.bill import Bill
from shopcalc.domain.model.cart import Cart, CartLine, PaymentMethod, PricingMode
from shopcalc.domain.model.value_objects import (
    Money,
    Percentage,
    Quantity,
    Weight,
    parse_decimal,
    parse_int,
)

logger = logging.getLogger(__name__)


class BillingSession:

    def __init__(
        self,
        bill_writer: BillWriter,
        feedback: Feedback | None = None,
        cart: Cart | None = None,
    ) -> None:
        self._bill_writer = bill_writer
        self._feedback = feedback or NoFeedback()
        self.cart = cart or Cart()

    # --- Lines ----------------------------------------------------------------

    def add_line(
        self,
        price_text: str | None,
        amount_text: str | None,
        mode: PricingMode = PricingMode.WEIGHT,
        name: str | None = None,
    ) -> CartLine | None:
        """Add a line priced by weight (grams) or by quantity.

        Returns the new line, or None if the input was rejected.
        """
        line = self._build_line(price_text, amount_text, mode, name)
        if line is None:
            logger.debug(
                "Ignored line input price=%r amount=%r mode=%s",
                price_text, amount_text, mode.value,
            )
            return None

        self.cart.add(line)
        pulse_quietly(self._feedback)
        return line

    def remove_line(self, line_id: str) -> bool:
        removed = self.cart.remove(line_id)
        if removed:
            pulse_quietly(self._feedback)
        return removed

    def update_quantity(self, line_id: str, new_quantity: int) -> bool:
        changed = self.cart.update_quantity(line_id, new_quantity)
        if changed:
            pulse_quietly(self._feedback)
        return changed

    def preview_total(
        self,
        price_text: str | None,
        amount_text: str | None,
        mode: PricingMode = PricingMode.WEIGHT,
    ) -> Money:
        """Live total for what is currently typed in; zero if incomplete."""
        line = self._build_line(price_text, amount_text, mode, None)
        if line is None:
            return Money.zero()
        return line.total

    # --- Terms ----------------------------------------------------------------

    def set_discount(self, text: str | None) -> bool:
        rate = _percentage(text)
        if rate is None:
            return False
        try:
            self.cart.set_discount(rate)
        except ValidationError as exc:
            logger.debug("Ignored discount %r: %s", text, exc)
            return False
        return True

    def set_tax(self, text: str | None) -> bool:
        rate = _percentage(text)
        if rate is None:
            return False
        self.cart.set_tax(rate)
        return True

    def set_customer(self, name: str = "", phone: str = "") -> None:
        self.cart.customer_name = name
        self.cart.customer_phone = phone

    def set_payment_method(self, method: PaymentMethod | str) -> None:
        self.cart.payment_method = PaymentMethod(method)

    def clear(self) -> None:
        self.cart.clear()

    # --- Finalize -------------------------------------------------------------

    def finalize(self, now: datetime | None = None) -> Future[Bill] | None:
        """Turn the cart into a bill and start a new session.

        The bill write is only *issued* here; the cart is cleared right
        after, without waiting for storage. Wait on the returned Future
        to know the bill was stored. Returns None for an empty cart.
        """
        if self.cart.is_empty:
            return None

        bill = Bill.from_cart(self.cart, created_at=now)
        future = self._bill_writer.submit(bill)
        logger.info(
            "Issued bill for %s: %d line(s), total %s",
            bill.customer_name, bill.item_count, bill.final_total,
        )
        self.clear()
        return future

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _build_line(
        price_text: str | None,
        amount_text: str | None,
        mode: PricingMode,
        name: str | None,
    ) -> CartLine | None:
        price = parse_decimal(price_text)
        if price is None or price <= 0:
            return None

        if mode is PricingMode.WEIGHT:
            grams = parse_decimal(amount_text)
            if grams is None or grams <= 0:
                return None
            return CartLine.by_weight(Money(price), Weight(grams), name)

        count = parse_int(amount_text)
        if count is None or count <= 0:
            return None
        return CartLine.by_quantity(Money(price), Quantity(count), name)


def _percentage(text: str | None) -> Percentage | None:
    value = parse_decimal(text)
    if value is None or value < Decimal("0"):
        logger.debug("Ignored percentage %r", text)
        return None
    return Percentage(value)
