"""CLI commands for bills."""

from __future__ import annotations

from datetime import datetime, timedelta

import click

from shopcalc.application.billing_session import BillingSession
from shopcalc.application.delete_bill import DeleteBillHandler
from shopcalc.application.dto import BillDTO
from shopcalc.application.export_bills import ExportBillsHandler
from shopcalc.application.list_bills import ListBillsHandler
from shopcalc.domain.exceptions import DomainException
from shopcalc.domain.model.cart import PaymentMethod, PricingMode
from shopcalc.infrastructure.bootstrap import (
    bill_exporter,
    bill_repository,
    bill_writer,
    feedback,
)


def _parse_item(raw: str) -> tuple[str, str, str, PricingMode]:
    """Parse 'Rice:60:500g' (by weight) or 'Soap:40:x3' (by quantity)."""
    parts = raw.rsplit(":", 2)
    if len(parts) != 3:
        raise click.BadParameter(
            f"Invalid item '{raw}'. Expected 'Name:Price:<grams>g' or 'Name:Price:x<qty>'."
        )
    name, price, measure = (p.strip() for p in parts)
    if measure.lower().endswith("g"):
        return name, price, measure[:-1], PricingMode.WEIGHT
    if measure.lower().startswith("x"):
        return name, price, measure[1:], PricingMode.QUANTITY
    raise click.BadParameter(
        f"Invalid measure '{measure}' for '{name}'. Use '500g' or 'x3'."
    )


def _display_bill(dto: BillDTO) -> None:
    click.echo(f"Bill #{dto.id}  ({dto.created_at}, {dto.payment_method})")
    customer = dto.customer_name
    if dto.customer_phone:
        customer += f"  {dto.customer_phone}"
    click.echo(f"Customer: {customer}")
    click.echo()
    click.echo(f"  {'Item':<20} {'Qty/Wt':>10} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*53}")
    for item in dto.items:
        click.echo(
            f"  {item.name:<20} {item.measure:>10} {item.unit_price:>10} {item.total:>10}"
        )
    click.echo(f"  {'-'*53}")
    click.echo(f"  {'Subtotal':<31} {dto.subtotal:>21}")
    click.echo(f"  {'Discount':<31} {dto.discount:>21}")
    click.echo(f"  {'Tax':<31} {dto.tax:>21}")
    click.echo(f"  {'Total':<31} {dto.final_total:>21}")


@click.command("create")
@click.option(
    "--item", "items", multiple=True, required=True,
    help="Item as 'Name:Price:<grams>g' or 'Name:Price:x<qty>'. Repeatable.",
)
@click.option("--discount", default="0", help="Discount percent.")
@click.option("--tax", default="0", help="Tax percent.")
@click.option("--customer", default="", help="Customer name (blank = walk-in).")
@click.option("--phone", default="", help="Customer phone.")
@click.option(
    "--payment",
    type=click.Choice([m.value for m in PaymentMethod], case_sensitive=False),
    default=PaymentMethod.CASH.value,
    help="Payment method.",
)
def bill_create(
    items: tuple[str, ...],
    discount: str,
    tax: str,
    customer: str,
    phone: str,
    payment: str,
) -> None:
    """Ring up a bill and save it."""
    specs = [_parse_item(raw) for raw in items]

    repo = bill_repository()
    writer = bill_writer(repo)
    session = BillingSession(bill_writer=writer, feedback=feedback())

    try:
        for name, price, amount, mode in specs:
            if session.add_line(price, amount, mode, name=name) is None:
                click.echo(f"Ignored '{name}': price and amount must be positive numbers.")
        if not session.set_discount(discount):
            click.echo(f"Ignored discount '{discount}'.")
        if not session.set_tax(tax):
            click.echo(f"Ignored tax '{tax}'.")
        session.set_customer(customer, phone)
        session.set_payment_method(
            next(m for m in PaymentMethod if m.value.lower() == payment.lower())
        )

        future = session.finalize()
        if future is None:
            click.echo("Cart is empty, nothing to bill.")
            return
        stored = future.result()
    except DomainException as exc:
        raise click.ClickException(str(exc))
    except OSError as exc:
        raise click.ClickException(f"Could not save bill: {exc}")
    finally:
        writer.shutdown(wait=True)

    _display_bill(BillDTO.from_bill(stored))


def _local_date(value: datetime | None) -> datetime | None:
    return value.astimezone() if value is not None else None


@click.command("list")
@click.option("--since", type=click.DateTime(["%Y-%m-%d"]), default=None, help="First day (inclusive).")
@click.option("--until", type=click.DateTime(["%Y-%m-%d"]), default=None, help="Last day (inclusive).")
def bill_list(since: datetime | None, until: datetime | None) -> None:
    """List saved bills, newest first."""
    end = until + timedelta(days=1, microseconds=-1) if until else None
    handler = ListBillsHandler(bill_repo=bill_repository())
    bills = handler.handle(start=_local_date(since), end=_local_date(end))

    if not bills:
        click.echo("No bills found.")
        return

    click.echo(f"{'ID':<6} {'Date':<17} {'Customer':<20} {'Payment':<8} {'Total':>12}")
    click.echo("-" * 67)
    for dto in bills:
        click.echo(
            f"{dto.id:<6} {dto.created_at:<17} {dto.customer_name:<20} "
            f"{dto.payment_method:<8} {dto.final_total:>12}"
        )


@click.command("delete")
@click.option("--id", "bill_id", required=True, type=int, help="Bill ID to delete.")
def bill_delete(bill_id: int) -> None:
    """Delete one bill."""
    handler = DeleteBillHandler(bill_repo=bill_repository())
    if handler.handle(bill_id):
        click.echo(f"Bill #{bill_id} deleted.")
    else:
        click.echo(f"No bill #{bill_id}; nothing deleted.")


@click.command("clear")
@click.confirmation_option(prompt="Delete ALL bills? Products and expenses are kept.")
def bill_clear() -> None:
    """Delete every bill."""
    count = DeleteBillHandler(bill_repo=bill_repository()).handle_all()
    click.echo(f"Deleted {count} bill(s).")


@click.command("export")
@click.option(
    "--output", type=click.File("w", encoding="utf-8"), default="-",
    help="CSV file to write (default: stdout).",
)
def bill_export(output) -> None:
    """Export all bills as CSV."""
    handler = ExportBillsHandler(bill_repo=bill_repository(), exporter=bill_exporter())
    try:
        count = handler.handle(output)
    except OSError as exc:
        raise click.ClickException(f"Could not write export: {exc}")
    if output.name != "<stdout>":
        click.echo(f"Exported {count} bill(s) to {output.name}")
