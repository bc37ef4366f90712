"""structlog setup for the calculator CLI."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING

import structlog
from structlog.contextvars import bound_contextvars, merge_contextvars

if TYPE_CHECKING:
    from splits_core.config.settings import Settings


def configure_logging(settings: Settings) -> None:
    """Route structlog through the stdlib root logger.

    Records are rendered as JSON or for the console depending on
    ``settings.log_format`` and written to stderr, leaving stdout to the
    CLI's own output.
    """
    pre_chain: list[structlog.types.Processor] = [
        merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    renderer: structlog.types.Processor = (
        structlog.processors.JSONRenderer()
        if settings.log_format == "json"
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler()
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
            foreign_pre_chain=pre_chain,
        )
    )
    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(_resolve_level(settings.log_level))


@contextmanager
def session_context(session_id: str) -> Iterator[None]:
    """Tag every log entry emitted inside the block with ``session_id``."""
    with bound_contextvars(session_id=session_id):
        yield


def _resolve_level(level_name: str) -> int:
    """Map a level name to its logging constant; unknown names mean INFO."""
    return logging.getLevelNamesMapping().get(level_name.upper(), logging.INFO)
