# src/app/core/logging/filters.py
"""
Logging filters.

- RequestIdFilter stamps `record.request_id` from a contextvar set by
  RequestIDMiddleware. A ContextVar (not threading.local) keeps the id per
  request across `await` points, where many requests share one thread.
- RedactFilter masks sensitive attributes passed through `extra=`.
"""

import logging
from logging import LogRecord
import contextvars

_request_id_ctx: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "request_id", default=None
)


def set_request_id(request_id: str | None):
    """
    Set the request id for the current context.

    Returns:
        The contextvar token; pass it to reset_request_id() to restore the previous value.
    """
    return _request_id_ctx.set(request_id)


def reset_request_id(token):
    _request_id_ctx.reset(token)


def get_request_id() -> str | None:
    return _request_id_ctx.get()


class RequestIdFilter(logging.Filter):
    """
    Guarantee every record has a `request_id` attribute.

    Precedence: an explicit `extra={"request_id": ...}`, then the contextvar,
    then "-" so `%(request_id)s` never fails outside a request.
    """

    def filter(self, record: LogRecord) -> bool:
        record.request_id = (
            getattr(record, "request_id", None) or get_request_id() or "-"
        )
        return True


class RedactFilter(logging.Filter):
    """
    Mask record attributes whose name is sensitive (credentials, personal ids).
    """

    SENSITIVE = frozenset({
        "password",
        "db_password",
        "secret",
        "token",
        "access_token",
        "refresh_token",
        "authorization",
        "card_number_id",
    })
    MASK = "***REDACTED***"

    def filter(self, record: LogRecord) -> bool:
        for key in list(record.__dict__.keys()):
            if key.lower() in self.SENSITIVE:
                record.__dict__[key] = self.MASK
        return True
