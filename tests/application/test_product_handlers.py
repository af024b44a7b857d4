"""Integration tests for the product use cases."""

import pytest

from shopcalc.application.add_product import AddProductHandler
from shopcalc.application.list_products import ListCategoriesHandler, ListProductsHandler
from shopcalc.application.update_product import (
    DeleteProductHandler,
    ToggleFavoriteHandler,
    UpdateProductHandler,
)
from shopcalc.domain.exceptions import EntityNotFoundError, ValidationError
from shopcalc.domain.model.product import Product
from shopcalc.domain.model.value_objects import Money
from tests.fakes import FakeProductRepository


def _repo() -> FakeProductRepository:
    return FakeProductRepository(
        [
            Product(id="1", name="Tomato", price=Money.of("40"), category="Veg"),
            Product(id="2", name="Apple", price=Money.of("180"), category="Fruit"),
            Product(id="3", name="Onion", price=Money.of("35"), category="Veg", is_favorite=True),
        ]
    )


class TestAddProduct:

    def test_adds_with_next_id(self):
        repo = _repo()
        product = AddProductHandler(repo).handle("  Milk ", "28", category="", stock=10)
        assert product.id == "4"
        assert product.name == "Milk"
        assert product.category == "General"
        assert product.stock == 10
        assert repo.get_by_id("4") is product

    @pytest.mark.parametrize("name, price", [("", "10"), ("  ", "10"), ("Milk", "0"), ("Milk", "x")])
    def test_invalid_input_is_noop(self, name, price):
        repo = _repo()
        assert AddProductHandler(repo).handle(name, price) is None
        assert len(repo.list_all()) == 3

    def test_duplicate_name_rejected(self):
        with pytest.raises(ValidationError, match="already exists"):
            AddProductHandler(_repo()).handle("tomato", "10")


class TestUpdateProduct:

    def test_price_and_stock(self):
        repo = _repo()
        product = UpdateProductHandler(repo).handle("1", new_price="45", new_stock=7)
        assert product.price == Money.of("45")
        assert product.stock == 7

    def test_unknown_product(self):
        with pytest.raises(EntityNotFoundError, match="not found"):
            UpdateProductHandler(_repo()).handle("99", new_price="1")

    def test_bad_price(self):
        with pytest.raises(ValidationError):
            UpdateProductHandler(_repo()).handle("1", new_price="0")

    def test_toggle_favorite(self):
        repo = _repo()
        assert ToggleFavoriteHandler(repo).handle("2").is_favorite is True

    def test_delete_is_idempotent(self):
        repo = _repo()
        handler = DeleteProductHandler(repo)
        assert handler.handle("1") is True
        assert handler.handle("1") is False


class TestListProducts:

    def test_favourites_first_then_name(self):
        names = [p.name for p in ListProductsHandler(_repo()).handle()]
        assert names == ["Onion", "Apple", "Tomato"]

    def test_category_filter_orders_by_name(self):
        names = [p.name for p in ListProductsHandler(_repo()).handle(category="Veg")]
        assert names == ["Onion", "Tomato"]

    def test_all_category_means_no_filter(self):
        assert len(ListProductsHandler(_repo()).handle(category="All")) == 3

    def test_search(self):
        names = [p.name for p in ListProductsHandler(_repo()).handle(search="ON")]
        assert names == ["Onion"]

    def test_categories(self):
        assert ListCategoriesHandler(_repo()).handle() == ["Fruit", "Veg"]
