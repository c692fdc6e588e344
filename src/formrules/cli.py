"""formrules command line entry point.

Global flags shape output and logging for every subcommand. The password
policy can be tightened for a single run with ``--strict-password``
without touching the config file.
"""

from __future__ import annotations

from typing import Any

import click

from formrules import __version__
from formrules.commands import register_commands
from formrules.commands._base import RulesGroup
from formrules.commands._context import AppContext
from formrules.config.settings import FormrulesSettings

ROOT_EXAMPLES = """\
  formrules forms
  formrules check signup signup.json
  formrules --strict-password value password 'Secret123!'
  formrules -c ./formrules.toml --json check job job.json"""


def _policy_overrides(strict_password: bool) -> dict[str, Any]:
    # Omitted unless set: an explicit False would mask TOML and env values.
    if strict_password:
        return {"password": {"require_special": True}}
    return {}


@click.group(cls=RulesGroup, invoke_without_command=True, examples=ROOT_EXAMPLES)
@click.version_option(version=__version__, prog_name="formrules")
@click.option("--json", "json_output", is_flag=True, help="Print the ServiceResult as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="One line per result.")
@click.option("-v", "--verbose", is_flag=True, help="Show details and debug logging.")
@click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON lines.")
@click.option(
    "-c",
    "--config",
    "config_path",
    default=None,
    help="Config file to use instead of formrules.toml discovery.",
)
@click.option(
    "--strict-password",
    is_flag=True,
    help="Also require a special character (@$!%*?&) in passwords.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    strict_password: bool,
) -> None:
    """Validate back-office form payloads and single field values."""
    settings = FormrulesSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        **_policy_overrides(strict_password),
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
