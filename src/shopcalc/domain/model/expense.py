"""Expense: money paid out of the till (rent, stock, wages...)."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from shopcalc.domain.exceptions import ValidationError
from shopcalc.domain.model.value_objects import Money


@dataclass(frozen=True)
class Expense:

    id: int | None
    description: str
    amount: Money
    category: str = ""
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(description: str, amount: Money, category: str = "") -> Expense:
        if not description or not description.strip():
            raise ValidationError("Expense description is required")
        if amount.amount <= 0:
            raise ValidationError("Expense amount must be greater than zero")
        return Expense(
            id=None,
            description=description.strip(),
            amount=amount,
            category=category.strip(),
        )
