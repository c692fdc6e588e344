"""Command: validate a JSON payload against a form schema."""

from __future__ import annotations

import json
from typing import IO, TYPE_CHECKING, Any

import click

from formrules.commands._base import RulesCommand

if TYPE_CHECKING:
    from formrules.commands._context import AppContext


def _load_payload(payload: IO[str]) -> Any:
    text = payload.read()
    if not text.strip():
        raise click.ClickException("Payload is empty")
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise click.ClickException(f"Payload is not valid JSON: {exc}") from exc


@click.command(
    cls=RulesCommand,
    examples="""\
  formrules check job posting.json
  cat signup.json | formrules check signup
  formrules --json check training training.json
  formrules -q check product product.json""",
)
@click.argument("form")
@click.argument("payload", type=click.File("r", encoding="utf-8"), default="-")
@click.pass_obj
def check(app: AppContext, form: str, payload: IO[str]) -> None:
    """Validate PAYLOAD (JSON file, or stdin) against FORM.

    Exits with status 1 when any field fails.
    """
    data = _load_payload(payload)
    app.emit(app.service.check_form(form, data))
