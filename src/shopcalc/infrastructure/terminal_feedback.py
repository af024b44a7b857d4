"""Terminal bell implementation of the Feedback port."""

from __future__ import annotations

import click

from shopcalc.application.feedback import Feedback


class TerminalBell(Feedback):

    def pulse(self) -> None:
        click.echo("\a", nl=False, err=True)
