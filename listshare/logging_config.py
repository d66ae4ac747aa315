"""
Logging setup for ListShare.

Every record emitted while a request is being served carries the request's
correlation id and which page shape it is rendering ("page" or "fragment").
The request context also tallies store round trips, so the access log line
shows how many queries a page cost.

    from listshare.logging_config import get_logger
    logger = get_logger(__name__)
"""

import json
import logging
import sys
from contextvars import ContextVar
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Optional


@dataclass
class RequestContext:
    """What the logs need to know about the request in flight."""

    request_id: str
    view: str = "page"
    store_round_trips: int = 0


request_context_var: ContextVar[Optional[RequestContext]] = ContextVar(
    "request_context", default=None
)

# Context fields stamped on every record; "-" outside a request
CONTEXT_FIELDS = ("request_id", "view")

_STANDARD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime", *CONTEXT_FIELDS}


def current_request_context() -> Optional[RequestContext]:
    return request_context_var.get()


def count_store_round_trip() -> None:
    """Add one query to the current request's tally, if there is a request."""
    ctx = request_context_var.get()
    if ctx is not None:
        ctx.store_round_trips += 1


class RequestContextFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        ctx = request_context_var.get()
        for field in CONTEXT_FIELDS:
            value = getattr(ctx, field) if ctx is not None else "-"
            setattr(record, field, value)
        return True


class JsonFormatter(logging.Formatter):
    """One JSON object per line, request context and extra= fields inlined."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for field in CONTEXT_FIELDS:
            value = getattr(record, field, "-")
            if value != "-":
                payload[field] = value

        extras = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _STANDARD_ATTRS and value is not None
        }
        payload.update(extras)

        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str)


DEV_FORMAT = "%(asctime)s %(levelname)-5s %(name)s [%(request_id)s %(view)s] %(message)s"


def configure_logging(
    *,
    log_level: str = "INFO",
    environment: str = "development",
    debug: bool = False,
) -> None:
    """
    Install a single stderr handler on the root logger.

    Production gets JSON lines, anything else the compact dev format.
    `debug` forces DEBUG regardless of `log_level`.
    """
    level = logging.DEBUG if debug else getattr(logging, log_level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.addFilter(RequestContextFilter())
    if environment == "production":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(DEV_FORMAT, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.setLevel(level)
    # Reload-safe: replace whatever a previous call installed
    for existing in root.handlers[:]:
        root.removeHandler(existing)
    root.addHandler(handler)

    # Middleware already writes one line per request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
