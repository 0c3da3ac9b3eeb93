"""Logging setup shared by connectors and their command line tools.

Every record passing a configured handler carries the trace id of the query
invocation that emitted it, so interleaved runs can be told apart.
"""
import contextvars
import json
import logging
from contextlib import contextmanager
from typing import Iterable, Optional

_trace_id_ctx = contextvars.ContextVar("trace_id", default=None)

NOISY_LOGGERS = ("clickhouse_connect", "urllib3")

TEXT_FORMAT = "%(asctime)s - [%(trace_id)s] - %(name)s - %(levelname)s - %(message)s"


class TraceContextFilter(logging.Filter):
    """Stamps the current invocation's trace id onto each record."""

    def filter(self, record):
        record.trace_id = _trace_id_ctx.get()
        return True


@contextmanager
def trace_context(trace_id: str):
    """Binds ``trace_id`` to log records emitted inside the block."""
    token = _trace_id_ctx.set(trace_id)
    try:
        yield
    finally:
        _trace_id_ctx.reset(token)


def current_trace_id() -> Optional[str]:
    return _trace_id_ctx.get()


class JsonFormatter(logging.Formatter):
    """One JSON object per record: time, level, logger, message, trace id and traceback."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        trace_id = getattr(record, "trace_id", None)
        if trace_id:
            entry["trace_id"] = trace_id
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def configure_logging(level: str = "INFO", json_format: bool = False, quiet: Iterable[str] = NOISY_LOGGERS):
    """Replaces the root handlers with a single trace-aware stream handler.

    Args:
        level (str): Root logging level.
        json_format (bool): Emit JSON lines instead of plain text.
        quiet (Iterable[str]): Vendor loggers capped at WARNING.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.addFilter(TraceContextFilter())
    handler.setFormatter(JsonFormatter() if json_format else logging.Formatter(TEXT_FORMAT))
    root_logger.addHandler(handler)

    for name in quiet:
        logging.getLogger(name).setLevel(logging.WARNING)
