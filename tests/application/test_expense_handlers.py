"""Integration tests for the expense use cases."""

import pytest

from shopcalc.application.manage_expenses import (
    AddExpenseHandler,
    DeleteExpenseHandler,
    ListExpensesHandler,
)
from shopcalc.domain.model.value_objects import Money
from tests.fakes import FakeExpenseRepository


class TestExpenses:

    def test_add_and_list(self):
        repo = FakeExpenseRepository()
        expense = AddExpenseHandler(repo).handle(" Electricity ", "1200", "Bills")
        assert expense.id == 1
        assert expense.description == "Electricity"
        assert expense.amount == Money.of("1200")
        assert ListExpensesHandler(repo).handle() == [expense]

    @pytest.mark.parametrize("description, amount", [("", "10"), ("Tea", "0"), ("Tea", "-3"), ("Tea", "")])
    def test_invalid_input_is_noop(self, description, amount):
        repo = FakeExpenseRepository()
        assert AddExpenseHandler(repo).handle(description, amount) is None
        assert repo.list_all() == []

    def test_delete_is_idempotent(self):
        repo = FakeExpenseRepository()
        AddExpenseHandler(repo).handle("Tea", "20")
        handler = DeleteExpenseHandler(repo)
        assert handler.handle(1) is True
        assert handler.handle(1) is False
