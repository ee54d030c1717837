"""Structured logging with per-request correlation."""
import logging
import sys
import uuid
from contextvars import ContextVar
from typing import Any, TextIO

import structlog

request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def get_request_id() -> str:
    return request_id_var.get() or ""


def set_request_context(request_id: str | None = None) -> str:
    rid = request_id or str(uuid.uuid4())
    request_id_var.set(rid)
    return rid


def clear_request_context() -> None:
    request_id_var.set("")


def add_request_context(
    logger: Any,
    method: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Processor to inject request_id into log events."""
    rid = get_request_id()
    if rid:
        event_dict["request_id"] = rid
    return event_dict


def configure_logging(
    json_logs: bool = True,
    stream: TextIO | None = None,
    level: int = logging.INFO,
) -> None:
    """Configure structlog for JSON (or console) output and request correlation.

    Events below `level` are dropped. Output goes to `stream` (stdout by
    default). Per-call provider_request/provider_response events are debug
    level; applications that leave structlog unconfigured get its defaults.
    """
    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        add_request_context,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if json_logs:
        shared_processors.append(structlog.processors.JSONRenderer())
    else:
        shared_processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=shared_processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream or sys.stdout),
        cache_logger_on_first_use=True,
    )
