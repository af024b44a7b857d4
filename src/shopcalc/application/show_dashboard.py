"""Application service: Show Dashboard use case (query)."""

from __future__ import annotations

from datetime import datetime

from shopcalc.application.dto import DashboardDTO
from shopcalc.domain.model.value_objects import CURRENCY_SYMBOL
from shopcalc.domain.repository.bill_repository import BillRepository
from shopcalc.domain.repository.expense_repository import ExpenseRepository
from shopcalc.domain.service.sales_report import (
    SalesReportService,
    start_of_day,
    start_of_month,
    start_of_week,
)


class ShowDashboardHandler:

    def __init__(
        self,
        bill_repo: BillRepository,
        expense_repo: ExpenseRepository,
    ) -> None:
        self._report = SalesReportService(bill_repo, expense_repo)

    def handle(self, now: datetime | None = None) -> DashboardDTO:
        today = start_of_day(now)
        today_sales = self._report.sales_since(today)
        today_expenses = self._report.expenses_since(today)
        net = today_sales.rounded() - today_expenses.rounded()
        sign = "-" if net < 0 else ""

        return DashboardDTO(
            today_sales=str(today_sales),
            weekly_sales=str(self._report.sales_since(start_of_week(now))),
            monthly_sales=str(self._report.sales_since(start_of_month(now))),
            today_bill_count=self._report.bill_count_since(today),
            today_expenses=str(today_expenses),
            today_net=f"{sign}{CURRENCY_SYMBOL}{abs(net)}",
            by_payment_method={
                method.value: str(total)
                for method, total in self._report.revenue_by_payment_method().items()
            },
        )
