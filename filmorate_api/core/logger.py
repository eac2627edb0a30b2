import logging
import sys
from logging.handlers import QueueHandler, QueueListener
from queue import Queue

from pythonjsonlogger import jsonlogger

from filmorate_api.core.config import settings
from filmorate_api.core.trace import get_trace_id

JSON_FORMAT = (
    "%(asctime)s %(levelname)s %(name)s %(message)s "
    "%(trace_id)s %(service)s %(env)s"
)


class TraceContextFilter(logging.Filter):
    """Stamp trace_id/service/env on every record before it is queued."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.trace_id = (getattr(record, "trace_id", None)
                           or get_trace_id() or "-")
        record.service = getattr(record, "service", None) or settings.app_name
        record.env = getattr(record, "env", None) or settings.env
        return True


_listener: QueueListener | None = None


def setup_json_logging(service: str = "filmorate",
                       level: str | int = logging.INFO) -> None:
    global _listener
    if _listener is not None:
        # already configured (e.g. a second lifespan in tests)
        shutdown_logging()

    root = logging.getLogger()
    root.setLevel(level)

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(jsonlogger.JsonFormatter(JSON_FORMAT))

    q: Queue = Queue(-1)
    queue_handler = QueueHandler(q)
    queue_handler.addFilter(TraceContextFilter())

    _listener = QueueListener(q, stream_handler, respect_handler_level=True)
    _listener.start()

    root.handlers = [queue_handler]

    for name in ("uvicorn", "uvicorn.error"):
        logging.getLogger(name).handlers = []
        logging.getLogger(name).propagate = True

    logging.getLogger(__name__).info(
        "logger_initialized",
        extra={"service": service})


def shutdown_logging() -> None:
    """Flush and stop the queue listener on application shutdown."""
    global _listener
    if _listener:
        _listener.stop()
        _listener = None
