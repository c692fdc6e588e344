"""Human-readable rendering of ServiceResult objects.

``render_result`` picks a renderer by ``result.op``; ops without one get
a plain key/value listing. Every renderer draws into a console from
:func:`create_console`, so the returned string carries no ANSI codes
unless a terminal forced them.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from formrules.output.console import create_console, get_output, message_style, status_label

if TYPE_CHECKING:
    from rich.console import Console

    from formrules.services.result import ServiceResult

Renderer = Callable[..., None]


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    width: int | None = None,
) -> str:
    """Return *result* as styled text, without the trailing newline."""
    console = create_console(width=width)
    if not result.ok:
        _render_error(result, console, verbose=verbose)
    else:
        render = _OP_RENDERERS.get(result.op, _render_generic)
        render(result, console, verbose=verbose)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """One-line form used by ``--quiet``; form listings print one name per line."""
    if not result.ok:
        message = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {message}"

    items = result.data.get("items")
    if isinstance(items, list) and items:
        names = [str(item.get("name", "")) for item in items if isinstance(item, dict)]
        return "\n".join(names)
    return f"OK: {result.op}"


def _new_table(*columns: str) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    for column in columns:
        table.add_column(column)
    return table


def _header(console: Console, result: ServiceResult, *rest: Text) -> None:
    console.print(status_label(result.ok), Text(f"  {result.op}", style="fr.op"), *rest)


def _field(console: Console, key: str, value: Any) -> None:
    style = "fr.form" if key == "form" else ""
    console.print(Text.assemble(Text(f"  {key}: ", style="fr.key"), Text(str(value), style=style)))


def _errors_table(errors: dict[str, str]) -> Table:
    table = _new_table()
    table.add_column("Field", style="fr.field", no_wrap=True)
    table.add_column("Message", style="fr.message")
    for field, message in errors.items():
        table.add_row(Text(field), Text(message))
    return table


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    if err is None:
        _header(console, result, Text(" — "), Text("Unknown error", style="fr.message"))
        return

    style = message_style(err.detail.get("code"))
    _header(console, result, Text(" — "), Text(err.message, style=style))

    errors = err.detail.get("errors")
    if isinstance(errors, dict) and errors:
        console.print(_errors_table(errors))
    if verbose and err.detail:
        console.print(Text(f"  code: {err.code}", style="dim"))
        for key, value in err.detail.items():
            if key != "errors":
                console.print(Text(f"    {key}: {value}"))


def _render_list_forms(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _header(console, result)
    table = _new_table()
    table.add_column("Form", style="fr.form", no_wrap=True)
    table.add_column("Description")
    table.add_column("Fields", justify="right")
    if verbose:
        table.add_column("Field names", style="dim")

    for item in result.data.get("items", []):
        fields = item.get("fields", [])
        cells = [str(item.get("name", "")), str(item.get("description", "")), str(len(fields))]
        if verbose:
            cells.append(", ".join(fields))
        table.add_row(*cells)
    console.print(table)


def _render_check_form(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    fields = result.data.get("fields", [])
    _header(console, result)
    _field(console, "form", result.data.get("form", ""))
    _field(console, "fields checked", len(fields))
    if verbose:
        for name in fields:
            console.print(Text(f"    {name}", style="dim"))


def _render_check_value(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _header(console, result)
    for key in ("kind", "value"):
        _field(console, key, result.data.get(key, ""))


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _header(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


_OP_RENDERERS: dict[str, Renderer] = {
    "list_forms": _render_list_forms,
    "check_form": _render_check_form,
    "check_value": _render_check_value,
}
