"""Rich console construction for formrules output.

Renderers draw into an in-memory console and hand back the text, so
``format_result`` stays a plain ``ServiceResult -> str`` function. Rich
drops colour on its own for pipes and for CliRunner.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.text import Text
from rich.theme import Theme

DEFAULT_WIDTH = 120

FORMRULES_THEME = Theme(
    {
        "fr.ok": "bold green",
        "fr.error": "bold red",
        "fr.warning": "bold yellow",
        "fr.op": "bold cyan",
        "fr.key": "dim",
        "fr.form": "bold blue",
        "fr.field": "bold",
        "fr.message": "red",
        "fr.message.missing": "yellow",
    }
)

# Failure codes shown as "not filled in yet" rather than as bad input.
_MISSING_CODES = frozenset({"empty_field"})


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Return a themed console writing to a fresh buffer.

    Args:
        no_color: Strip styles even when a terminal is detected.
        width: Line width, normally ``[output] width`` from config.
    """
    return Console(
        file=StringIO(),
        theme=FORMRULES_THEME,
        no_color=no_color,
        highlight=False,
        width=width or DEFAULT_WIDTH,
    )


def get_output(console: Console) -> str:
    buffer = console.file
    if not isinstance(buffer, StringIO):
        raise TypeError("console was not built by create_console()")
    return buffer.getvalue()


def status_label(ok: bool) -> Text:
    """``OK`` or ``ERROR`` in its theme style."""
    return Text("OK", style="fr.ok") if ok else Text("ERROR", style="fr.error")


def message_style(code: str | None) -> str:
    """Theme style for a validation message with failure *code*."""
    return "fr.message.missing" if code in _MISSING_CODES else "fr.message"
