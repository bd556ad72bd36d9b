import json
import logging

from commentboard.utils.logger import JsonFormatter, setup_logger


def test_logger_creates_log_directory(tmp_path):
    """Test that logger creates its log directory."""
    log_file = tmp_path / "logs" / "test.log"

    logger = setup_logger("commentboard.test_dir", log_file=str(log_file))

    assert log_file.parent.exists()
    assert logger is not None


def test_logger_writes_json_format(tmp_path):
    """Test that logger writes JSON formatted logs."""
    log_file = tmp_path / "test.log"
    logger = setup_logger("commentboard.test_json", log_file=str(log_file))

    logger.debug("test_event", extra={"data": {"key": "value"}})
    for handler in logger.handlers:
        handler.flush()

    log_data = json.loads(log_file.read_text().splitlines()[0])

    assert log_data["level"] == "DEBUG"
    assert log_data["component"] == "commentboard.test_json"
    assert log_data["event"] == "test_event"
    assert log_data["data"]["key"] == "value"

    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def test_setup_logger_does_not_duplicate_handlers(tmp_path):
    log_file = str(tmp_path / "dup.log")

    first = setup_logger("commentboard.test_dup", log_file=log_file)
    second = setup_logger("commentboard.test_dup", log_file=log_file)

    assert first is second
    assert len(second.handlers) == 1


def test_json_formatter_includes_timestamp():
    """Test that JSON formatter includes timestamp."""
    formatter = JsonFormatter()
    record = logging.LogRecord(
        name="test",
        level=logging.DEBUG,
        pathname="",
        lineno=0,
        msg="test_message",
        args=(),
        exc_info=None
    )

    formatted = formatter.format(record)
    log_data = json.loads(formatted)

    assert "timestamp" in log_data
    assert "level" in log_data
    assert "component" in log_data
    assert "data" not in log_data
