"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from shopcalc.domain.model.bill import Bill
from shopcalc.domain.model.cart import CartLine, PricingMode
from shopcalc.domain.model.value_objects import Weight


@dataclass(frozen=True)
class BillLineDTO:
    """Output: a single bill line as displayed to the user."""

    name: str
    measure: str  # "500 g" or "x3"
    unit_price: str  # formatted, e.g. "₹60.00"
    total: str

    @staticmethod
    def from_line(line: CartLine) -> BillLineDTO:
        if line.mode is PricingMode.WEIGHT:
            measure = str(Weight(line.weight_grams))
        else:
            measure = f"x{line.quantity}"
        return BillLineDTO(
            name=line.name,
            measure=measure,
            unit_price=str(line.unit_price),
            total=str(line.total),
        )


@dataclass(frozen=True)
class BillDTO:
    """Output: a complete bill as displayed to the user."""

    id: int
    created_at: str
    customer_name: str
    customer_phone: str
    items: list[BillLineDTO]
    subtotal: str
    discount: str
    tax: str
    final_total: str
    payment_method: str

    @staticmethod
    def from_bill(bill: Bill) -> BillDTO:
        return BillDTO(
            id=bill.id,  # type: ignore[arg-type]
            created_at=bill.created_at.astimezone().strftime("%Y-%m-%d %H:%M"),
            customer_name=bill.customer_name,
            customer_phone=bill.customer_phone,
            items=[BillLineDTO.from_line(line) for line in bill.items],
            subtotal=str(bill.subtotal),
            discount=str(bill.discount),
            tax=str(bill.tax),
            final_total=str(bill.final_total),
            payment_method=bill.payment_method.value,
        )


@dataclass(frozen=True)
class DashboardDTO:
    """Output: the figures on the analytics screen."""

    today_sales: str
    weekly_sales: str
    monthly_sales: str
    today_bill_count: int
    today_expenses: str
    today_net: str  # may be negative, e.g. "-₹120.00"
    by_payment_method: dict[str, str]
