"""Structured JSON logging with request context fields.

Handlers read the trace id and receipt from context vars, so values bound
with `bind_log_context` follow the request into worker threads started via
`asyncio.to_thread`.
"""

import logging
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator

from pythonjsonlogger.json import JsonFormatter

from vitalimes.common.config import settings


trace_id_ctx: ContextVar[str] = ContextVar("trace_id", default="")
receipt_ctx: ContextVar[str] = ContextVar("receipt", default="")

_CONTEXT_VARS = {"trace_id": trace_id_ctx, "receipt": receipt_ctx}


@contextmanager
def bind_log_context(**values: str) -> Iterator[None]:
    """Bind `trace_id` and/or `receipt` for the duration of the block."""

    unknown = set(values) - set(_CONTEXT_VARS)
    if unknown:
        raise TypeError(f"unknown log context fields: {sorted(unknown)}")
    tokens = [(_CONTEXT_VARS[name], _CONTEXT_VARS[name].set(value)) for name, value in values.items()]
    try:
        yield
    finally:
        for var, token in reversed(tokens):
            var.reset(token)


class ContextFilter(logging.Filter):
    """Stamp service name and bound context onto every record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.service_name = settings.service_name
        for name, var in _CONTEXT_VARS.items():
            setattr(record, name, var.get())
        return True


def configure_logging(level: str | None = None) -> None:
    """Route root logging to stdout as JSON; call once per process."""

    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(ContextFilter())
    handler.setFormatter(
        JsonFormatter("%(asctime)s %(levelname)s %(service_name)s %(trace_id)s %(receipt)s %(message)s")
    )

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level or settings.log_level)


logger = logging.getLogger("vitalimes")
