# src/app/core/logging/builder.py
"""
Logging builder: assemble a dictConfig mapping from Settings, apply it, and
optionally move handler IO to a background QueueListener.

Configuration knobs (on Settings):
 - LOG_LEVEL, LOG_FORMAT ("json" | "text"), ENV
 - LOG_TO_STDOUT / LOG_DIR / LOG_MAX_BYTES / LOG_BACKUP_COUNT: console-only or rotating files
 - ENABLE_SQL_LOGGING: let `sqlalchemy.engine` statements through at DEBUG
 - LOG_USE_QUEUE: enqueue records on the request path, write them from a listener thread
 - LOG_QUEUE_MAX_SIZE: > 0 for a bounded queue, 0/None for unbounded
 - LOG_QUEUE_BLOCKING: with a bounded queue, block producers instead of dropping records
 - LOG_QUEUE_DROP_WARNING_THRESHOLD: warn every N dropped records

Usage:
    from app.core.logging import setup_logging
    setup_logging(get_settings())
"""

from __future__ import annotations

from pathlib import Path
import logging
import logging.config
import queue as _queue
import threading
from typing import Optional
from logging.handlers import QueueHandler, QueueListener

from app.utils.pyproject import get_project_name

from .formatters import JsonFormatter, ColorFormatter
from .filters import RequestIdFilter, RedactFilter
from .handlers import (
    get_console_handler,
    get_file_handler,
    get_error_file_handler,
    get_error_console_handler,
)

# Type only; get_settings() is never called here so importing has no side effects
from app.config.settings import Settings

DEFAULT_SERVICE_NAME = "warehouse-api"
TEXT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(request_id)s | %(message)s"

# Running listener and its queue, kept so shutdown can flush them
_QUEUE_LISTENER: Optional[QueueListener] = None
_QUEUE: Optional[_queue.Queue] = None

_DROPPED_LOGS_COUNT = 0
_DROPPED_LOGS_LOCK = threading.Lock()


class NonBlockingQueueHandler(QueueHandler):
    """
    QueueHandler that never blocks the producer.

    When the bounded queue is full the record is dropped, the module-level drop
    counter is incremented and `handleError` reports the loss on stderr.
    """

    def emit(self, record: logging.LogRecord) -> None:
        global _DROPPED_LOGS_COUNT
        try:
            self.queue.put_nowait(self.prepare(record))
        except _queue.Full:
            with _DROPPED_LOGS_LOCK:
                _DROPPED_LOGS_COUNT += 1
            self.handleError(record)


def get_queue_stats() -> dict:
    """Diagnostics for the queue-backed mode."""
    with _DROPPED_LOGS_LOCK:
        return {"dropped_logs": _DROPPED_LOGS_COUNT, "queue_present": _QUEUE is not None}


def _service_name() -> str:
    return get_project_name() or DEFAULT_SERVICE_NAME


def make_dict_config(settings: Settings) -> dict:
    """
    Build the dictConfig mapping.

    Handlers:
      - console: always
      - file + error_file: when LOG_TO_STDOUT is false and LOG_DIR is set
      - error_console: otherwise
    """
    formatters = {
        "standard": {
            # colors only for human-readable development output
            "()": ColorFormatter if settings.LOG_FORMAT == "text" else logging.Formatter,
            "format": TEXT_FORMAT,
        },
        "json": {
            "()": JsonFormatter,
            "env": settings.ENV,
            "service": _service_name(),
        },
    }

    filters = {
        "request_id": {"()": RequestIdFilter},
        "redact": {"()": RedactFilter},
    }

    handlers: dict[str, dict] = {"console": get_console_handler(settings)}
    if (not settings.LOG_TO_STDOUT) and settings.LOG_DIR:
        handlers["file"] = get_file_handler(settings)
        handlers["error_file"] = get_error_file_handler(settings)
    else:
        handlers["error_console"] = get_error_console_handler(settings)

    handler_names = list(handlers.keys())

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": formatters,
        "filters": filters,
        "handlers": handlers,
        "loggers": {
            "": {
                "handlers": handler_names,
                "level": settings.LOG_LEVEL,
                "propagate": True,
            },
            "uvicorn.error": {
                "level": settings.LOG_LEVEL,
                "handlers": handler_names,
                "propagate": False,
            },
            "uvicorn.access": {
                "level": "INFO",
                "handlers": ["console"],
                "propagate": False,
            },
            # Statements carry bound values (ids, names); keep them off unless asked for
            "sqlalchemy.engine": {
                "level": "DEBUG" if settings.ENABLE_SQL_LOGGING else "WARNING",
                "handlers": ["console"],
                "propagate": False,
            },
        },
    }


def _detach_handlers(handlers: list[logging.Handler]) -> None:
    """Remove the given handler instances from root and every named logger."""
    targets = set(handlers)
    loggers = [logging.getLogger()] + [
        obj for obj in logging.Logger.manager.loggerDict.values() if isinstance(obj, logging.Logger)
    ]
    for logger_obj in loggers:
        for handler in list(logger_obj.handlers):
            if handler in targets:
                logger_obj.removeHandler(handler)


def setup_logging(settings: Settings) -> None:
    """
    Apply the logging configuration; with LOG_USE_QUEUE, switch to queue-backed logging.

    In queue mode the real handlers run inside a QueueListener thread and the
    root logger only carries a QueueHandler. RequestIdFilter and RedactFilter
    are attached to that QueueHandler so they run in the producing context,
    where the request-id contextvar is set.
    """
    global _QUEUE_LISTENER, _QUEUE

    # A previous listener would keep writing through handlers dictConfig is about to close
    stop_queue_logging()

    if (not settings.LOG_TO_STDOUT) and settings.LOG_DIR:
        Path(settings.LOG_DIR).mkdir(parents=True, exist_ok=True)

    logging.config.dictConfig(make_dict_config(settings))

    root_logger = logging.getLogger()
    # Keeps %(request_id)s resolvable for records that bypass the handler filters
    root_logger.addFilter(RequestIdFilter())

    if not getattr(settings, "LOG_USE_QUEUE", False):
        return

    real_handlers = list(root_logger.handlers)
    if not real_handlers:
        return

    max_size = getattr(settings, "LOG_QUEUE_MAX_SIZE", 0) or 0
    blocking = bool(getattr(settings, "LOG_QUEUE_BLOCKING", False))
    drop_warn_threshold = int(getattr(settings, "LOG_QUEUE_DROP_WARNING_THRESHOLD", 100) or 0)

    _detach_handlers(real_handlers)

    log_queue: _queue.Queue = _queue.Queue(max_size) if max_size > 0 else _queue.Queue()
    handler_cls = NonBlockingQueueHandler if (max_size > 0 and not blocking) else QueueHandler

    listener = QueueListener(log_queue, *real_handlers, respect_handler_level=True)
    listener.start()

    queue_handler = handler_cls(log_queue)
    queue_handler.addFilter(RequestIdFilter())
    queue_handler.addFilter(RedactFilter())
    root_logger.addHandler(queue_handler)

    _QUEUE_LISTENER = listener
    _QUEUE = log_queue

    if handler_cls is NonBlockingQueueHandler and drop_warn_threshold > 0:
        dropped = get_queue_stats()["dropped_logs"]
        if dropped and dropped % drop_warn_threshold == 0:
            logging.getLogger(__name__).warning("Dropped %d log records because queue was full", dropped)


def stop_queue_logging() -> None:
    """
    Flush and stop the QueueListener, if one is running. Safe to call twice.
    """
    global _QUEUE_LISTENER, _QUEUE
    listener = _QUEUE_LISTENER
    if listener is None:
        return

    try:
        # stop() enqueues a sentinel and joins the listener thread
        listener.stop()
    except Exception:
        logging.getLogger(__name__).exception("Failed to stop QueueListener cleanly")
    finally:
        _QUEUE_LISTENER = None
        _QUEUE = None
