import io
import logging

from ordered_search.config import LoggingConfig
from ordered_search.logging_setup import PACKAGE_LOGGER, is_configured, setup_logging


def test_setup_logging_is_idempotent(tmp_path, restore_package_logging):
    config = LoggingConfig(level="DEBUG", log_dir=str(tmp_path), app_name="search-test")
    setup_logging(config)
    resolved = setup_logging(config)

    logger = logging.getLogger(PACKAGE_LOGGER)
    assert resolved.level == "DEBUG"
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2
    assert is_configured()

    logging.getLogger("ordered_search.test").info("hello")
    for handler in logger.handlers:
        handler.flush()
    assert "hello" in (tmp_path / "search-test.log").read_text(encoding="utf-8")


def test_setup_logging_leaves_root_logger_alone(restore_package_logging):
    root = logging.getLogger()
    before = list(root.handlers), root.level
    setup_logging({"level": "warning", "json_logs": True})
    assert (list(root.handlers), root.level) == before
    assert logging.getLogger(PACKAGE_LOGGER).level == logging.WARNING
    assert logging.getLogger(PACKAGE_LOGGER).propagate is False


def test_records_go_to_given_stream(restore_package_logging):
    stream = io.StringIO()
    setup_logging(LoggingConfig(level="INFO"), stream=stream)
    logging.getLogger("ordered_search.search_manager").info("routed")
    logging.getLogger("some.other.library").warning("not ours")
    assert "routed" in stream.getvalue()
    assert "not ours" not in stream.getvalue()


def test_default_stream_is_stderr(capsys, restore_package_logging):
    setup_logging(LoggingConfig(level="INFO"))
    logging.getLogger("ordered_search.performance").info("to stderr")
    captured = capsys.readouterr()
    assert "to stderr" in captured.err
    assert captured.out == ""
