"""Application services: Expense use cases."""

from __future__ import annotations

import logging

from shopcalc.domain.model.expense import Expense
from shopcalc.domain.model.value_objects import Money, parse_decimal
from shopcalc.domain.repository.expense_repository import ExpenseRepository

logger = logging.getLogger(__name__)


class AddExpenseHandler:

    def __init__(self, expense_repo: ExpenseRepository) -> None:
        self._expense_repo = expense_repo

    def handle(self, description: str, amount: str, category: str = "") -> Expense | None:
        """Record an expense; blank or non-positive input is ignored."""
        value = parse_decimal(amount)
        if not description or not description.strip() or value is None or value <= 0:
            logger.debug("Ignored expense input description=%r amount=%r", description, amount)
            return None

        expense = self._expense_repo.add(
            Expense.create(description, Money(value), category)
        )
        logger.info("Recorded expense #%s %s", expense.id, expense.amount)
        return expense


class ListExpensesHandler:

    def __init__(self, expense_repo: ExpenseRepository) -> None:
        self._expense_repo = expense_repo

    def handle(self) -> list[Expense]:
        return self._expense_repo.list_all()


class DeleteExpenseHandler:

    def __init__(self, expense_repo: ExpenseRepository) -> None:
        self._expense_repo = expense_repo

    def handle(self, expense_id: int) -> bool:
        return self._expense_repo.delete(expense_id)
