"""Command: list registered form schemas."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from formrules.commands._base import RulesCommand

if TYPE_CHECKING:
    from formrules.commands._context import AppContext


@click.command(
    cls=RulesCommand,
    examples="""\
  formrules forms
  formrules -v forms
  formrules --json forms""",
)
@click.pass_obj
def forms(app: AppContext) -> None:
    """List the forms that can be checked."""
    app.emit(app.service.list_forms())
