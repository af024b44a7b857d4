"""Domain service: Sales Report.

Computes the dashboard aggregates over stored bills and expenses. The
contract any store has to honour is the one spelled out here: a sum of
``final_total`` (or expense ``amount``) over records created at or after
a threshold, with an empty result counted as zero.

Reporting periods are bucketed in the shop's local time.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from shopcalc.domain.model.bill import Bill
from shopcalc.domain.model.cart import PaymentMethod
from shopcalc.domain.model.value_objects import Money
from shopcalc.domain.repository.bill_repository import BillRepository
from shopcalc.domain.repository.expense_repository import ExpenseRepository


def _local(now: datetime | None) -> datetime:
    return (now or datetime.now()).astimezone()


def start_of_day(now: datetime | None = None) -> datetime:
    return _local(now).replace(hour=0, minute=0, second=0, microsecond=0)


def start_of_week(now: datetime | None = None) -> datetime:
    """Midnight on the Monday of the current week."""
    day = start_of_day(now)
    return day - timedelta(days=day.weekday())


def start_of_month(now: datetime | None = None) -> datetime:
    return start_of_day(now).replace(day=1)


class SalesReportService:

    def __init__(
        self,
        bill_repo: BillRepository,
        expense_repo: ExpenseRepository,
    ) -> None:
        self._bill_repo = bill_repo
        self._expense_repo = expense_repo

    def sales_since(self, threshold: datetime) -> Money:
        total = Money.zero()
        for bill in self._bills_since(threshold):
            total = total + bill.final_total
        return total

    def bill_count_since(self, threshold: datetime) -> int:
        return len(self._bills_since(threshold))

    def expenses_since(self, threshold: datetime) -> Money:
        total = Money.zero()
        for expense in self._expense_repo.list_all():
            if expense.created_at >= threshold:
                total = total + expense.amount
        return total

    def revenue_by_payment_method(self) -> dict[PaymentMethod, Money]:
        """Sum of final totals per payment method, across every bill."""
        breakdown: dict[PaymentMethod, Money] = {}
        for bill in self._bill_repo.list_all():
            current = breakdown.get(bill.payment_method, Money.zero())
            breakdown[bill.payment_method] = current + bill.final_total
        return breakdown

    def _bills_since(self, threshold: datetime) -> list[Bill]:
        return [b for b in self._bill_repo.list_all() if b.created_at >= threshold]
