import json
import logging

import pytest

from catalogue.observability.logging import (
    ROOT_LOGGER_NAME,
    HumanReadableFormatter,
    StructuredFormatter,
    configure_logging,
    get_logger,
)


def _record(**context):
    record = logging.LogRecord("catalogue.test", logging.INFO, __file__, 1, "hello", None, None)
    for key, value in context.items():
        setattr(record, key, value)
    return record


def test_structured_formatter_includes_context():
    record = _record(pattern="builder", session_id="abc", step=2, extra_data={"x": 1})
    data = json.loads(StructuredFormatter(include_timestamp=False).format(record))
    assert data == {
        "level": "INFO",
        "message": "hello",
        "logger": "catalogue.test",
        "pattern": "builder",
        "session_id": "abc",
        "step": 2,
        "data": {"x": 1},
    }


def test_human_readable_formatter_without_colours():
    line = HumanReadableFormatter(use_colors=False).format(
        _record(pattern="proxy", duration_ms=3.2)
    )
    assert "INFO" in line
    assert "[pattern=proxy, duration=3.2ms]" in line
    assert line.endswith("hello")
    assert "\033[" not in line


def test_logger_injects_context(caplog):
    caplog.set_level(logging.DEBUG, logger=ROOT_LOGGER_NAME)
    logger = get_logger("tests", session_id="s1", pattern="state")

    logger.info("running", step=3, extra={"k": "v"})

    record = caplog.records[-1]
    assert record.name == "catalogue.tests"
    assert record.pattern == "state"
    assert record.session_id == "s1"
    assert record.step == 3
    assert record.extra_data == {"k": "v"}


def test_call_arguments_override_bound_context(caplog):
    caplog.set_level(logging.DEBUG, logger=ROOT_LOGGER_NAME)
    logger = get_logger("tests", pattern="state", category="behavioural")

    logger.debug("switching", pattern="observer", duration_ms=1.23456)

    record = caplog.records[-1]
    assert record.pattern == "observer"
    assert record.category == "behavioural"
    assert record.duration_ms == 1.23
    assert not hasattr(record, "step")


def test_configure_logging_rejects_unknown_level():
    with pytest.raises(ValueError, match="Unknown log level"):
        configure_logging(level="chatty")


def test_configure_logging_writes_json_file(tmp_path):
    log_file = tmp_path / "logs" / "catalogue.jsonl"
    configure_logging(level="info", log_file=log_file, use_colors=False)

    get_logger("tests").info("to file", pattern="facade")
    for handler in logging.getLogger(ROOT_LOGGER_NAME).handlers:
        handler.flush()

    line = log_file.read_text(encoding="utf-8").strip().splitlines()[-1]
    assert json.loads(line)["pattern"] == "facade"


def test_configure_logging_console_goes_to_stderr(capsys):
    configure_logging(level="WARNING", use_colors=False)
    get_logger("tests").warning("careful")
    captured = capsys.readouterr()
    assert "careful" in captured.err
    assert captured.out == ""
