"""Click base classes shared by formrules commands.

Commands declare usage examples with ``examples=``. The text stays out of
``--help``; an eager ``--examples`` flag prints it, and the help output
ends with a one-line pointer to that flag.
"""

from __future__ import annotations

import textwrap
from typing import Any

import click

EXAMPLES_HINT = "Run with --examples to see usage examples."


def _examples_option(examples: str) -> click.Option:
    text = textwrap.indent(textwrap.dedent(examples).strip("\n"), "  ")

    def show(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(text)
        ctx.exit(0)

    return click.Option(
        ["--examples"],
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=show,
        help="Show usage examples and exit.",
    )


def _attach_examples(command: click.Command, examples: str | None) -> None:
    if not examples:
        return
    command.params.append(_examples_option(examples))
    if command.epilog is None:
        command.epilog = EXAMPLES_HINT


class RulesCommand(click.Command):
    """Command that accepts an ``examples=`` usage block."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        _attach_examples(self, examples)


class RulesGroup(click.Group):
    """Group variant of :class:`RulesCommand`.

    Subcommands declared through the group default to RulesCommand.
    """

    command_class = RulesCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        _attach_examples(self, examples)
