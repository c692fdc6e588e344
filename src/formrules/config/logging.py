"""Logging setup: structlog rendering on top of stdlib ``logging``.

Library modules log with ``logging.getLogger(__name__)`` and never touch
structlog directly. The CLI calls :func:`configure_logging` once per run,
which points the root handler at stderr (stdout carries results) and picks
the renderer:

* human lines from ``structlog.dev.ConsoleRenderer`` by default
* one JSON object per line with ``--log-json``

Only the ``formrules`` logger is raised to DEBUG by ``--verbose``; the
root stays at WARNING so other libraries stay quiet.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import IO

import structlog

APP_LOGGER = "formrules"


def _pre_chain() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _final_renderer(log_json: bool, out: IO[str]) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    isatty = getattr(out, "isatty", None)
    return structlog.dev.ConsoleRenderer(colors=bool(isatty and isatty()))


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    stream: IO[str] | None = None,
) -> None:
    """Route all log records through structlog to *stream*.

    Calling it again swaps the root handler instead of adding a second one.

    Args:
        verbose: DEBUG for the ``formrules`` logger instead of WARNING.
        log_json: Emit JSON lines rather than console text.
        stream: Where records go; stderr when omitted.
    """
    out = stream or sys.stderr
    pre_chain = _pre_chain()

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(out)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _final_renderer(log_json, out),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(logging.WARNING)
    logging.getLogger(APP_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)


@contextmanager
def bound_context(**values: object) -> Iterator[None]:
    """Attach *values* to every log line emitted inside the block."""
    tokens = structlog.contextvars.bind_contextvars(**values)
    try:
        yield
    finally:
        structlog.contextvars.reset_contextvars(**tokens)
