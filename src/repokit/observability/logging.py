"""
repokit.observability.logging

Structured logging for repository events.

Repositories emit `created`, `updated`, `deleted`, `restored`, `purged` and
`payload_rejected` events through module-level loggers. They never configure
logging themselves; the embedding application calls `configure_logging` once.

Responsibilities:
- Configure `structlog` for JSON lines carrying the embedding service name.
- Provide `get_logger` for repository modules.
- Bind model metadata into contextvars for a block of repository work.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import structlog


def configure_logging(*, service_name: str, level: str) -> None:
    """
    Structured JSON logs for the process embedding the repositories.
    Call once at startup; repositories only ever obtain loggers.
    """

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper(), logging.INFO),
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            _add_service_name(service_name),
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def _add_service_name(service_name: str):
    def processor(_: Any, __: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        event_dict.setdefault("service", service_name)
        return event_dict

    return processor


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


@contextmanager
def bind_repository_context(model: type, **extra: Any) -> Iterator[None]:
    """
    Bind `model` (and any extra fields) onto every log line emitted inside the block.
    Previous values are restored on exit.
    """

    with structlog.contextvars.bound_contextvars(model=model.__name__, **extra):
        yield


# --- Module Notes -----------------------------------------------------------
# Repositories pass `model=` explicitly on their own events; the context helper is
# for callers that want the same field on service-level log lines.
