"""CLI commands for expenses."""

from __future__ import annotations

import click

from shopcalc.application.manage_expenses import (
    AddExpenseHandler,
    DeleteExpenseHandler,
    ListExpensesHandler,
)
from shopcalc.infrastructure.bootstrap import expense_repository

DATE_FORMAT = "%d %b, %I:%M %p"


@click.command("add")
@click.option("--description", required=True, help="What the money was spent on.")
@click.option("--amount", required=True, help="Amount paid.")
@click.option("--category", default="", help="Category, e.g. Rent.")
def expense_add(description: str, amount: str, category: str) -> None:
    """Record an expense."""
    expense = AddExpenseHandler(expense_repo=expense_repository()).handle(
        description=description, amount=amount, category=category
    )
    if expense is None:
        click.echo("Ignored: a description and a positive amount are required.")
        return
    click.echo(f"Expense #{expense.id} recorded: {expense.description} {expense.amount}")


@click.command("list")
def expense_list() -> None:
    """List expenses, newest first."""
    expenses = ListExpensesHandler(expense_repo=expense_repository()).handle()

    if not expenses:
        click.echo("No expenses recorded.")
        return

    click.echo(f"{'ID':<6} {'Date':<17} {'Description':<24} {'Category':<12} {'Amount':>10}")
    click.echo("-" * 73)
    for e in expenses:
        click.echo(
            f"{e.id:<6} {e.created_at.astimezone().strftime(DATE_FORMAT):<17} "
            f"{e.description:<24} {e.category:<12} {str(e.amount):>10}"
        )


@click.command("delete")
@click.option("--id", "expense_id", required=True, type=int, help="Expense ID.")
def expense_delete(expense_id: int) -> None:
    """Delete an expense."""
    if DeleteExpenseHandler(expense_repo=expense_repository()).handle(expense_id):
        click.echo(f"Expense #{expense_id} deleted.")
    else:
        click.echo(f"No expense #{expense_id}; nothing deleted.")
