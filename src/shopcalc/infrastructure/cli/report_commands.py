"""CLI commands for the dashboard and the change calculator."""

from __future__ import annotations

import click

from shopcalc.application.change_due import RETURN, ChangeDueHandler
from shopcalc.application.show_dashboard import ShowDashboardHandler
from shopcalc.infrastructure.bootstrap import bill_repository, expense_repository


@click.command("stats")
def stats() -> None:
    """Show today's, this week's and this month's figures."""
    dto = ShowDashboardHandler(
        bill_repo=bill_repository(),
        expense_repo=expense_repository(),
    ).handle()

    click.echo(f"{'Today':<24} {dto.today_sales:>14}  ({dto.today_bill_count} bills)")
    click.echo(f"{'This week':<24} {dto.weekly_sales:>14}")
    click.echo(f"{'This month':<24} {dto.monthly_sales:>14}")
    click.echo(f"{'Expenses today':<24} {dto.today_expenses:>14}")
    click.echo(f"{'Net profit/loss today':<24} {dto.today_net:>14}")

    if dto.by_payment_method:
        click.echo()
        click.echo("Payment methods")
        for method, total in dto.by_payment_method.items():
            click.echo(f"  {method:<22} {total:>14}")


@click.command("change")
@click.option("--bill", "bill_amount", required=True, help="Bill amount.")
@click.option("--given", required=True, help="Amount tendered by the customer.")
def change(bill_amount: str, given: str) -> None:
    """Work out the change to hand back."""
    result = ChangeDueHandler().handle(bill_amount, given)
    if result is None:
        raise click.ClickException("Both amounts must be positive numbers.")

    if result.direction == RETURN:
        click.echo(f"Return to customer: {result.amount}")
    else:
        click.echo(f"Additional payment needed: {result.amount}")
