import logging

import pytest

from app.core.logging.filters import (
    RedactFilter,
    RequestIdFilter,
    reset_request_id,
    set_request_id,
)


def make_record(**extra):
    record = logging.LogRecord("app.repositories", logging.INFO, __file__, 1, "repo.create.success", (), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.fixture
def request_id():
    """Set a request id for the test and restore the previous value afterwards."""
    tokens = []

    def _set(value):
        tokens.append(set_request_id(value))

    yield _set

    for token in reversed(tokens):
        reset_request_id(token)


def test_request_id_defaults_to_dash(request_id):
    request_id(None)
    record = make_record()

    assert RequestIdFilter().filter(record) is True
    assert record.request_id == "-"


def test_request_id_from_context(request_id):
    request_id("abc-123")
    record = make_record()

    RequestIdFilter().filter(record)

    assert record.request_id == "abc-123"


def test_explicit_request_id_wins(request_id):
    request_id("context-id")
    record = make_record(request_id="explicit")

    RequestIdFilter().filter(record)

    assert record.request_id == "explicit"


def test_redact_masks_sensitive_extras():
    """
    Behavior:
            - Badge numbers and credentials passed via `extra=` are masked; other extras are kept.
    """
    record = make_record(card_number_id="E-2001", DB_PASSWORD="hunter2", entity="employee")

    assert RedactFilter().filter(record) is True

    assert record.card_number_id == RedactFilter.MASK
    assert record.DB_PASSWORD == RedactFilter.MASK
    assert record.entity == "employee"
