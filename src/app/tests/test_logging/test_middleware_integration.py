import json

import pytest

from app.config import get_settings
from app.core.logging.builder import setup_logging
from app.core.logging.middleware import resolve_request_id

API = get_settings().API_PREFIX


@pytest.mark.parametrize(
    "incoming, kept",
    [
        ("req-42", True),
        ("a.b_c-1", True),
        ("", False),
        (None, False),
        ("has spaces", False),
        ("x" * 129, False),
    ],
)
def test_resolve_request_id(incoming, kept):
    resolved = resolve_request_id(incoming)

    if kept:
        assert resolved == incoming
    else:
        assert resolved != incoming
        assert len(resolved) == 36


@pytest.mark.asyncio
async def test_request_id_in_response_and_logs(capsys, make_log_settings, api_client):
    """
    Behavior:
            - A request gets an X-Request-ID header.
            - The log line written while serving it carries the same id.
    """
    setup_logging(make_log_settings(LOG_TO_STDOUT=True, LOG_FORMAT="json", LOG_LEVEL="INFO"))

    response = await api_client.get(f"{API}/sellers/abc", headers={"X-Request-ID": "trace-7"})

    assert response.status_code == 400
    assert response.headers["X-Request-ID"] == "trace-7"

    records = []
    for line in capsys.readouterr().err.splitlines():
        try:
            records.append(json.loads(line))
        except json.JSONDecodeError:
            continue

    assert any(rec.get("request_id") == "trace-7" for rec in records)
