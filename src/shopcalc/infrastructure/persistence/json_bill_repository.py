"""JSON-file-backed implementation of BillRepository."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from shopcalc.domain.model.bill import Bill
from shopcalc.domain.model.cart import CartLine, PaymentMethod
from shopcalc.domain.model.value_objects import CURRENCY, Money
from shopcalc.domain.repository.bill_repository import BillRepository
from shopcalc.infrastructure.persistence.json_store import JsonListFile


class JsonBillRepository(BillRepository):

    def __init__(self, file_path: Path) -> None:
        self._store = JsonListFile(file_path)

    # --- BillRepository interface ---------------------------------------------

    def add(self, bill: Bill) -> Bill:
        with self._store.lock:
            bills = self._store.load()
            stored = replace(bill, id=self._store.next_id(bills))
            bills.append(self._to_raw(stored))
            self._store.persist(bills)
        return stored

    def get_by_id(self, bill_id: int) -> Bill | None:
        for raw in self._store.load():
            if raw["id"] == bill_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Bill]:
        bills = [self._to_domain(raw) for raw in self._store.load()]
        return sorted(bills, key=lambda b: b.created_at, reverse=True)

    def list_between(self, start: datetime, end: datetime) -> list[Bill]:
        return [b for b in self.list_all() if start <= b.created_at <= end]

    def delete(self, bill_id: int) -> bool:
        with self._store.lock:
            bills = self._store.load()
            kept = [raw for raw in bills if raw["id"] != bill_id]
            if len(kept) == len(bills):
                return False
            self._store.persist(kept)
        return True

    def delete_all(self) -> int:
        with self._store.lock:
            count = len(self._store.load())
            self._store.persist([])
        return count

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(bill: Bill) -> dict:
        return {
            "id": bill.id,
            "date": bill.created_at.isoformat(),
            "customer_name": bill.customer_name,
            "customer_phone": bill.customer_phone,
            "sub_total": str(bill.subtotal.amount),
            "discount": str(bill.discount.amount),
            "tax": str(bill.tax.amount),
            "final_total": str(bill.final_total.amount),
            "currency": bill.final_total.currency,
            "payment_method": bill.payment_method.value,
            "items": [
                {
                    "id": line.id,
                    "name": line.name,
                    "price": str(line.unit_price.amount),
                    "weight": str(line.weight_grams),
                    "total": str(line.total.amount),
                    "quantity": line.quantity,
                }
                for line in bill.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Bill:
        currency = raw.get("currency", CURRENCY)

        def money(value: str) -> Money:
            return Money(Decimal(value), currency)

        items = tuple(
            CartLine(
                id=i["id"],
                name=i["name"],
                unit_price=money(i["price"]),
                weight_grams=Decimal(i["weight"]),
                quantity=i["quantity"],
                total=money(i["total"]),
            )
            for i in raw["items"]
        )
        return Bill(
            id=raw["id"],
            customer_name=raw["customer_name"],
            customer_phone=raw.get("customer_phone", ""),
            subtotal=money(raw["sub_total"]),
            discount=money(raw["discount"]),
            tax=money(raw["tax"]),
            final_total=money(raw["final_total"]),
            items=items,
            payment_method=PaymentMethod(raw.get("payment_method", "Cash")),
            created_at=datetime.fromisoformat(raw["date"]),
        )
