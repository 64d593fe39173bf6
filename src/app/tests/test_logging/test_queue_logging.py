import logging
from pathlib import Path

from app.core.logging.builder import get_queue_stats, setup_logging, stop_queue_logging
from app.core.logging.filters import reset_request_id, set_request_id


def test_queue_listener_writes_file(tmp_path, make_log_settings):
    """
    Behavior:
            - With LOG_USE_QUEUE the root logger only enqueues; the listener writes app.log.
            - Extras, the request id and redaction survive the hop through the queue.
    """
    settings = make_log_settings(
        ENV="testing",
        LOG_LEVEL="DEBUG",
        LOG_TO_STDOUT=False,
        LOG_DIR=tmp_path,
        LOG_USE_QUEUE=True,
    )
    setup_logging(settings)
    assert get_queue_stats()["queue_present"] is True

    logger = logging.getLogger("test.queue")
    token = set_request_id("test-req-1")
    try:
        for i in range(10):
            logger.info("repo.create.success %d", i, extra={"model": "Seller", "iteration": i})
        logger.info("employee created", extra={"card_number_id": "E-2001"})
    finally:
        reset_request_id(token)

    # Flushes the queue and joins the listener thread
    stop_queue_logging()

    text = (Path(settings.LOG_DIR) / "app.log").read_text()
    assert "repo.create.success 0" in text
    assert "repo.create.success 9" in text
    assert '"iteration"' in text
    assert "test-req-1" in text
    assert "E-2001" not in text
    assert get_queue_stats()["queue_present"] is False


def test_stop_is_idempotent():
    stop_queue_logging()
    stop_queue_logging()
