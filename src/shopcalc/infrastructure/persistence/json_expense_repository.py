"""JSON-file-backed implementation of ExpenseRepository."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from shopcalc.domain.model.expense import Expense
from shopcalc.domain.model.value_objects import CURRENCY, Money
from shopcalc.domain.repository.expense_repository import ExpenseRepository
from shopcalc.infrastructure.persistence.json_store import JsonListFile


class JsonExpenseRepository(ExpenseRepository):

    def __init__(self, file_path: Path) -> None:
        self._store = JsonListFile(file_path)

    def add(self, expense: Expense) -> Expense:
        with self._store.lock:
            expenses = self._store.load()
            stored = replace(expense, id=self._store.next_id(expenses))
            expenses.append(
                {
                    "id": stored.id,
                    "date": stored.created_at.isoformat(),
                    "description": stored.description,
                    "amount": str(stored.amount.amount),
                    "currency": stored.amount.currency,
                    "category": stored.category,
                }
            )
            self._store.persist(expenses)
        return stored

    def list_all(self) -> list[Expense]:
        expenses = [
            Expense(
                id=raw["id"],
                description=raw["description"],
                amount=Money(Decimal(raw["amount"]), raw.get("currency", CURRENCY)),
                category=raw.get("category", ""),
                created_at=datetime.fromisoformat(raw["date"]),
            )
            for raw in self._store.load()
        ]
        return sorted(expenses, key=lambda e: e.created_at, reverse=True)

    def delete(self, expense_id: int) -> bool:
        with self._store.lock:
            expenses = self._store.load()
            kept = [raw for raw in expenses if raw["id"] != expense_id]
            if len(kept) == len(expenses):
                return False
            self._store.persist(kept)
        return True
