"""CLI command for the calculator."""

from __future__ import annotations

import click

from shopcalc.domain.model.calculator import AngleMode, Calculator


@click.command(
    "calc",
    context_settings={"ignore_unknown_options": True},
)
@click.argument("tokens", nargs=-1, type=click.UNPROCESSED)
@click.option("--rad", is_flag=True, default=False, help="Trig functions take radians.")
@click.option("--history", "show_history", is_flag=True, default=False, help="Print the history log.")
def calc(tokens: tuple[str, ...], rad: bool, show_history: bool) -> None:
    """Press calculator keys and print the display.

    Keys: digits, '.', + - × ÷ ^ (or * / **), =, C, ⌫ (bs), ± (neg), %,
    sin cos tan √ (sqrt) ln log x² (sq) 1/x, π (pi), e, DEG, RAD.

    Example: shopcalc calc 2 + 3 =
    """
    calculator = Calculator(angle_mode=AngleMode.RAD if rad else AngleMode.DEG)
    display = calculator.press_all(tokens)
    click.echo(display)

    if show_history:
        for entry in calculator.history:
            click.echo(f"  {entry}")
