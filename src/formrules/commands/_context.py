"""AppContext: per-invocation state handed to every formrules command.

The root group builds it from the resolved settings. Commands receive it
with ``@click.pass_obj`` and finish by passing their ServiceResult to
:meth:`AppContext.emit`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from formrules.config.logging import configure_logging
from formrules.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from formrules.config.settings import FormrulesSettings
    from formrules.services.result import ServiceResult
    from formrules.services.validation import ValidationService

logger = logging.getLogger(__name__)

FAILURE_EXIT_CODE = 1


class AppContext:
    """Settings, the validation service and result emission for one run."""

    def __init__(self, settings: FormrulesSettings) -> None:
        self.settings = settings
        self.output = OutputSettings(
            json_output=settings.json_output,
            quiet=settings.quiet,
            verbose=settings.verbose,
            width=settings.output.width,
        )
        self._service: ValidationService | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        if settings.config_path is not None:
            logger.debug("Using config file %s", settings.config_path)

    @property
    def service(self) -> ValidationService:
        """Validation service, built on first use."""
        if self._service is None:
            from formrules.services.validation import ValidationService

            self._service = ValidationService(self.settings)
        return self._service

    def emit(self, result: ServiceResult) -> None:
        """Write *result* and set the exit status.

        Successful results go to stdout. Their warnings go to stderr unless
        the JSON payload already carries them. A failed result goes to
        stderr and ends the command with exit status 1.
        """
        text = format_result(result, settings=self.output)
        if not result.ok:
            click.echo(text, err=True)
            raise SystemExit(FAILURE_EXIT_CODE)

        click.echo(text)
        if self.output.json_output:
            return
        for warning in result.warnings:
            click.echo(f"WARNING: {warning}", err=True)
