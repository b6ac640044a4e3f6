from __future__ import annotations

import logging
import sys
from typing import Any

import orjson
import structlog

from greeter import __version__

SERVICE_NAME = "greeter"


def _json_serializer(obj: Any, default: Any) -> str:
    return orjson.dumps(obj, default=default).decode("utf-8")


def _add_service(_: Any, __: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    # Several instances share one supervisor log; tag every line
    event_dict.setdefault("service", SERVICE_NAME)
    event_dict.setdefault("version", __version__)
    return event_dict


def configure_logging(*, level: str = "INFO") -> None:
    """
    Configure structured logging for the process.

    Every line is one JSON object on stdout, which is where a process
    supervisor collects output from. Called by each ``create_app()``;
    the last call wins.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,

        # Standard metadata
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        _add_service,

        # Exception handling
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.dict_tracebacks,

        structlog.processors.JSONRenderer(serializer=_json_serializer),
    ]

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        cache_logger_on_first_use=False,
    )

    # uvicorn runs with log_config=None, so its records land here
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )
