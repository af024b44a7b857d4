"""End-to-end tests for the click CLI against a temporary data directory."""

import json

import pytest
from click.testing import CliRunner

from shopcalc.infrastructure.cli.main import cli


@pytest.fixture
def run(tmp_path):
    runner = CliRunner()

    def _run(*args: str, **kwargs):
        return runner.invoke(cli, ["--data-dir", str(tmp_path), *args], **kwargs)

    return _run


class TestCalcCommand:

    def test_addition_with_history(self, run):
        result = run("calc", "--history", "2", "+", "3", "=")
        assert result.exit_code == 0
        assert result.output.splitlines() == ["5", "  2 + 3 = 5"]

    def test_minus_token_is_not_an_option(self, run):
        result = run("calc", "9", "-", "4", "=")
        assert result.output.strip() == "5"

    def test_divide_by_zero(self, run):
        assert run("calc", "5", "÷", "0", "=").output.strip() == "Error"

    def test_radians(self, run):
        assert run("calc", "--rad", "pi", "/", "2", "=", "sin").output.strip() == "1"


class TestBillCommands:

    def test_create_prints_receipt_and_persists(self, run, tmp_path):
        result = run(
            "bill", "create",
            "--item", "Rice:60:500g",
            "--item", "Soap:40:x2",
            "--discount", "10", "--tax", "5",
            "--customer", "Meena", "--payment", "upi",
        )
        assert result.exit_code == 0, result.output
        assert "Bill #1" in result.output
        assert "Customer: Meena" in result.output
        assert "₹103.95" in result.output

        stored = json.loads((tmp_path / "bills.json").read_text(encoding="utf-8"))
        assert len(stored) == 1
        assert stored[0]["payment_method"] == "UPI"

    def test_invalid_item_is_skipped(self, run):
        result = run("bill", "create", "--item", "Bad:0:x1", "--item", "Pen:10:x1")
        assert result.exit_code == 0
        assert "Ignored 'Bad'" in result.output
        assert "Customer: Walk-in" in result.output

    def test_all_items_invalid_bills_nothing(self, run, tmp_path):
        result = run("bill", "create", "--item", "Bad:abc:x1")
        assert result.exit_code == 0
        assert "nothing to bill" in result.output
        assert json.loads((tmp_path / "bills.json").read_text()) == []

    def test_malformed_item_argument(self, run):
        result = run("bill", "create", "--item", "Rice60")
        assert result.exit_code == 2
        assert "Invalid item" in result.output

    def test_list_delete_clear(self, run):
        run("bill", "create", "--item", "Pen:10:x1")
        run("bill", "create", "--item", "Ink:25:x2")

        listing = run("bill", "list")
        assert "₹50.00" in listing.output and "₹10.00" in listing.output

        assert "Bill #1 deleted." in run("bill", "delete", "--id", "1").output
        assert "nothing deleted" in run("bill", "delete", "--id", "1").output

        assert "Deleted 1 bill(s)." in run("bill", "clear", "--yes").output
        assert "No bills found." in run("bill", "list").output

    def test_export_to_stdout(self, run):
        run("bill", "create", "--item", "Pen:10:x1", "--customer", "Asha")
        lines = run("bill", "export").output.splitlines()
        assert lines[0] == "Date,Customer,Phone,Subtotal,Discount,Tax,Total,Payment"
        assert lines[1].endswith(",Asha,,10.00,0.00,0.00,10.00,Cash")


class TestProductAndExpenseCommands:

    def test_product_lifecycle(self, run):
        assert "Product #1 'Sugar' added at ₹45.00" in run(
            "product", "add", "--name", "Sugar", "--price", "45", "--category", "Grocery"
        ).output
        assert "Ignored" in run("product", "add", "--name", "Salt", "--price", "0").output

        assert "starred" in run("product", "favorite", "--id", "1").output
        assert "₹48.00, stock 5" in run(
            "product", "update", "--id", "1", "--price", "48", "--stock", "5"
        ).output
        assert "Sugar" in run("product", "list").output
        assert run("product", "categories").output.splitlines() == ["Grocery"]

        missing = run("product", "update", "--id", "99", "--price", "1")
        assert missing.exit_code == 1
        assert "not found" in missing.output

    def test_expenses_and_stats(self, run):
        run("bill", "create", "--item", "Pen:100:x1")
        assert "Expense #1 recorded" in run(
            "expense", "add", "--description", "Tea", "--amount", "30"
        ).output
        assert "Tea" in run("expense", "list").output

        stats = run("stats").output
        assert "₹100.00" in stats
        assert "₹70.00" in stats
        assert "Cash" in stats


class TestChangeCommand:

    def test_return(self, run):
        assert run("change", "--bill", "230", "--given", "500").output.strip() == (
            "Return to customer: ₹270.00"
        )

    def test_collect(self, run):
        assert "Additional payment needed: ₹30.00" in run(
            "change", "--bill", "230", "--given", "200"
        ).output

    def test_invalid(self, run):
        assert run("change", "--bill", "x", "--given", "200").exit_code == 1
