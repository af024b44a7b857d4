"""Tests for the JSON-file repositories against a temporary directory."""

import json
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from shopcalc.domain.model.bill import Bill
from shopcalc.domain.model.cart import Cart, CartLine, PaymentMethod
from shopcalc.domain.model.expense import Expense
from shopcalc.domain.model.product import Product
from shopcalc.domain.model.value_objects import Money, Percentage, Quantity, Weight
from shopcalc.infrastructure.persistence.json_bill_repository import JsonBillRepository
from shopcalc.infrastructure.persistence.json_expense_repository import (
    JsonExpenseRepository,
)
from shopcalc.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)

NOW = datetime(2024, 3, 5, 14, 30, tzinfo=timezone.utc)


def _bill(when: datetime = NOW) -> Bill:
    cart = Cart()
    cart.add(CartLine.by_weight(Money.of("60"), Weight(Decimal("750")), "Rice"))
    cart.add(CartLine.by_quantity(Money.of("12.5"), Quantity(2), "Pen"))
    cart.set_tax(Percentage(Decimal("5")))
    cart.customer_name = "Asha"
    cart.payment_method = PaymentMethod.UPI
    return Bill.from_cart(cart, created_at=when)


class TestJsonBillRepository:

    def test_creates_file(self, tmp_path):
        path = tmp_path / "nested" / "bills.json"
        JsonBillRepository(path)
        assert json.loads(path.read_text()) == []

    def test_round_trip_preserves_bill(self, tmp_path):
        repo = JsonBillRepository(tmp_path / "bills.json")
        stored = repo.add(_bill())

        loaded = JsonBillRepository(tmp_path / "bills.json").get_by_id(stored.id)

        assert loaded == stored
        assert loaded.items[0].weight_grams == Decimal("750")
        assert loaded.items[1].quantity == 2
        assert loaded.final_total == Money.of("73.5")

    def test_line_snapshot_is_cart_line_shaped(self, tmp_path):
        path = tmp_path / "bills.json"
        JsonBillRepository(path).add(_bill())
        raw = json.loads(path.read_text(encoding="utf-8"))
        assert set(raw[0]["items"][0]) == {"id", "name", "price", "weight", "total", "quantity"}

    def test_ids_and_ordering(self, tmp_path):
        repo = JsonBillRepository(tmp_path / "bills.json")
        old = repo.add(_bill(NOW - timedelta(days=1)))
        new = repo.add(_bill(NOW))
        assert (old.id, new.id) == (1, 2)
        assert [b.id for b in repo.list_all()] == [2, 1]

    def test_list_between(self, tmp_path):
        repo = JsonBillRepository(tmp_path / "bills.json")
        repo.add(_bill(NOW - timedelta(days=3)))
        repo.add(_bill(NOW))
        found = repo.list_between(NOW - timedelta(days=1), NOW)
        assert [b.created_at for b in found] == [NOW]

    def test_delete_and_delete_all(self, tmp_path):
        repo = JsonBillRepository(tmp_path / "bills.json")
        first = repo.add(_bill())
        repo.add(_bill())
        assert repo.delete(first.id) is True
        assert repo.delete(first.id) is False
        assert repo.delete_all() == 1
        assert repo.list_all() == []


class TestJsonProductRepository:

    def test_save_update_and_query(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        repo.save(Product(id=repo.next_id(), name="Tomato", price=Money.of("40"), category="Veg"))
        repo.save(Product(id=repo.next_id(), name="Apple", price=Money.of("180"), category="Fruit"))
        onion = Product(id=repo.next_id(), name="Onion", price=Money.of("35"), category="Veg")
        onion.toggle_favorite()
        repo.save(onion)

        assert [p.name for p in repo.list_all()] == ["Onion", "Apple", "Tomato"]
        assert [p.name for p in repo.list_by_category("Veg")] == ["Onion", "Tomato"]
        assert repo.categories() == ["Fruit", "Veg"]
        assert repo.get_by_name("APPLE").id == "2"

        apple = repo.get_by_id("2")
        apple.set_stock(12)
        repo.save(apple)
        assert repo.get_by_id("2").stock == 12

    def test_delete(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        repo.save(Product(id="1", name="Salt", price=Money.of("20")))
        assert repo.delete("1") is True
        assert repo.delete("1") is False


class TestJsonExpenseRepository:

    def test_add_list_delete(self, tmp_path):
        repo = JsonExpenseRepository(tmp_path / "expenses.json")
        older = repo.add(Expense(id=None, description="Rent", amount=Money.of("5000"),
                                 created_at=NOW - timedelta(days=1)))
        newer = repo.add(Expense(id=None, description="Tea", amount=Money.of("20"), created_at=NOW))

        assert [e.id for e in repo.list_all()] == [newer.id, older.id]
        assert repo.list_all()[1].amount == Money.of("5000")
        assert repo.delete(older.id) is True
        assert repo.delete(older.id) is False
