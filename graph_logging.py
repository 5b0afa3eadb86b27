"""structlog configuration for the graph modules.

Two output modes:
- Human (default): colored console output to stderr
- JSON (log_json=True): structured JSON lines to stderr
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from graph_settings import DEFAULT_SETTINGS, GraphSettings

LOGGER_NAMESPACE = "digraph"


class GraphLogger(structlog.stdlib.BoundLogger):
    """BoundLogger that drops disabled DEBUG events before any processor runs."""

    def debug(self, event: str | None = None, *args: Any, **kw: Any) -> Any:
        if not self.isEnabledFor(logging.DEBUG):
            return None
        return super().debug(event, *args, **kw)


def get_logger(name: str) -> GraphLogger:
    """Return a structlog logger under the ``digraph`` namespace.

    Always backed by a stdlib logger, so the namespace level applies even
    before :func:`configure_logging` has run.
    """
    return structlog.wrap_logger(
        logging.getLogger(f"{LOGGER_NAMESPACE}.{name}"),
        wrapper_class=GraphLogger,
    )


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    settings: GraphSettings | None = None,
) -> None:
    """Configure structlog processors and output routing.

    Args:
        verbose: Enable DEBUG-level output regardless of ``settings``.
        log_json: Use JSON renderer instead of console renderer.
        settings: Source of the default level; ``DEFAULT_SETTINGS`` if omitted.
    """
    settings = settings or DEFAULT_SETTINGS
    level = logging.DEBUG if verbose else settings.level

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    # Own handler on the namespace logger so repeated calls replace it.
    graph_logger = logging.getLogger(LOGGER_NAMESPACE)
    graph_logger.handlers = [handler]
    graph_logger.setLevel(level)
    graph_logger.propagate = False
