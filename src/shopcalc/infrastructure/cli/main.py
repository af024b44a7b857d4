import logging

import click

from shopcalc.infrastructure import bootstrap
from shopcalc.infrastructure.cli.bill_commands import (
    bill_clear,
    bill_create,
    bill_delete,
    bill_export,
    bill_list,
)
from shopcalc.infrastructure.cli.calc_commands import calc
from shopcalc.infrastructure.cli.expense_commands import (
    expense_add,
    expense_delete,
    expense_list,
)
from shopcalc.infrastructure.cli.product_commands import (
    product_add,
    product_categories,
    product_delete,
    product_favorite,
    product_list,
    product_update,
)
from shopcalc.infrastructure.cli.report_commands import change, stats

_LOG_LEVELS = [logging.WARNING, logging.INFO, logging.DEBUG]


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=str),
    envvar="SHOPCALC_DATA_DIR",
    default=None,
    help="Directory holding products.json, bills.json and expenses.json.",
)
@click.option(
    "--bell/--no-bell",
    envvar="SHOPCALC_BELL",
    default=False,
    help="Ring the terminal bell when an item is added.",
)
@click.option("-v", "--verbose", count=True, help="Increase log output (-v, -vv).")
def cli(data_dir: str | None, bell: bool, verbose: int) -> None:
    """shopcalc: billing and calculator for small shops"""
    logging.basicConfig(
        level=_LOG_LEVELS[min(verbose, len(_LOG_LEVELS) - 1)],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    bootstrap.configure(data_dir=data_dir, bell=bell)


@cli.group()
def bill() -> None:
    """Ring up and manage bills."""


@cli.group()
def product() -> None:
    """Manage the price list."""


@cli.group()
def expense() -> None:
    """Track shop expenses."""


# Register subcommands
bill.add_command(bill_create)
bill.add_command(bill_list)
bill.add_command(bill_delete)
bill.add_command(bill_clear)
bill.add_command(bill_export)
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_update)
product.add_command(product_favorite)
product.add_command(product_delete)
product.add_command(product_categories)
expense.add_command(expense_add)
expense.add_command(expense_list)
expense.add_command(expense_delete)
cli.add_command(calc)
cli.add_command(stats)
cli.add_command(change)
