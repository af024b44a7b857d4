"""Abstract repository for the Expense aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from shopcalc.domain.model.expense import Expense


class ExpenseRepository(ABC):

    @abstractmethod
    def add(self, expense: Expense) -> Expense:
        """Persist a new expense and return it with its assigned ID."""

    @abstractmethod
    def list_all(self) -> list[Expense]:
        """Return every expense, newest first."""

    @abstractmethod
    def delete(self, expense_id: int) -> bool:
        """Delete an expense; return False if there was nothing to delete."""
