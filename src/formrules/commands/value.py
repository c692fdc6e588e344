"""Command: validate a single value with a primitive validator."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from formrules.commands._base import RulesCommand
from formrules.services.validation import VALUE_CHECKS, ValueConstraints

if TYPE_CHECKING:
    from formrules.commands._context import AppContext


@click.command(
    cls=RulesCommand,
    examples="""\
  formrules value email jane@example.com
  formrules value phone "+1 (555) 123-4567"
  formrules value integer 42 --min 0 --max 100
  formrules value text "Senior Engineer" --min-length 3 --max-length 80
  formrules value future_date 2031-01-15
  formrules value url "" --optional""",
)
@click.argument("kind", type=click.Choice(sorted(VALUE_CHECKS)))
@click.argument("raw_value", metavar="VALUE")
@click.option("--min", "min_value", type=float, default=None, help="Lower bound (numbers).")
@click.option("--max", "max_value", type=float, default=None, help="Upper bound (numbers).")
@click.option("--min-length", type=int, default=None, help="Minimum length (text, password).")
@click.option("--max-length", type=int, default=None, help="Maximum length (text).")
@click.option("--optional", is_flag=True, help="Let an empty value pass.")
@click.pass_obj
def value(
    app: AppContext,
    kind: str,
    raw_value: str,
    min_value: float | None,
    max_value: float | None,
    min_length: int | None,
    max_length: int | None,
    optional: bool,
) -> None:
    """Validate VALUE as KIND."""
    constraints = ValueConstraints(
        min_value=min_value,
        max_value=max_value,
        min_length=min_length,
        max_length=max_length,
        is_required=not optional,
    )
    app.emit(app.service.check_value(kind, raw_value, constraints))
