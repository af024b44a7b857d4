"""Application service: Change Due use case.

Works out what to hand back (or still collect) when a customer pays
cash for a bill.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from shopcalc.domain.model.value_objects import Money, parse_decimal

RETURN = "return"
COLLECT = "collect"


@dataclass(frozen=True)
class ChangeDue:
    direction: str  # RETURN to the customer, or COLLECT from them
    amount: Money


class ChangeDueHandler:

    def handle(self, bill_text: str | None, given_text: str | None) -> ChangeDue | None:
        """None until both amounts are present and positive."""
        bill = parse_decimal(bill_text)
        given = parse_decimal(given_text)
        if bill is None or given is None or bill <= 0 or given <= 0:
            return None

        change = given - bill
        direction = RETURN if change >= Decimal("0") else COLLECT
        return ChangeDue(direction=direction, amount=Money(abs(change)))
