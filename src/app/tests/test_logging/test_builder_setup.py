import logging

from app.core.logging.builder import make_dict_config, setup_logging
from app.core.logging.formatters import ColorFormatter, JsonFormatter


def test_file_mode_declares_rotating_handlers(tmp_path, make_log_settings):
    """
    Behavior:
            - With LOG_TO_STDOUT off and a LOG_DIR, records go to app.log and errors.log.
    """
    settings = make_log_settings(LOG_TO_STDOUT=False, LOG_DIR=tmp_path)

    cfg = make_dict_config(settings)

    assert set(cfg["handlers"]) == {"console", "file", "error_file"}
    assert cfg["handlers"]["file"]["filename"].endswith("app.log")
    assert cfg["handlers"]["error_file"]["filename"].endswith("errors.log")
    assert cfg["formatters"]["json"]["()"] is JsonFormatter
    assert cfg["loggers"][""]["handlers"] == ["console", "file", "error_file"]


def test_stdout_mode_has_error_console(make_log_settings):
    settings = make_log_settings(LOG_TO_STDOUT=True, LOG_FORMAT="TEXT")

    cfg = make_dict_config(settings)

    assert set(cfg["handlers"]) == {"console", "error_console"}
    assert cfg["handlers"]["console"]["formatter"] == "standard"
    assert cfg["formatters"]["standard"]["()"] is ColorFormatter


def test_sql_statements_are_quiet_by_default(make_log_settings):
    quiet = make_dict_config(make_log_settings())
    verbose = make_dict_config(make_log_settings(ENABLE_SQL_LOGGING=True))

    assert quiet["loggers"]["sqlalchemy.engine"]["level"] == "WARNING"
    assert verbose["loggers"]["sqlalchemy.engine"]["level"] == "DEBUG"


def test_setup_logging_creates_log_dir(tmp_path, make_log_settings):
    settings = make_log_settings(LOG_TO_STDOUT=False, LOG_DIR=tmp_path / "logs", LOG_LEVEL="debug")
    assert not settings.LOG_DIR.exists()

    setup_logging(settings)

    assert settings.LOG_DIR.exists()
    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert root.handlers
