"""Test suite for logger-module."""

from datetime import datetime, timezone

import pytest

from sanjua import LoggingContext as Context, Logger, LogMessage


@pytest.fixture(name="some_logger")
def init_logger():
    return Logger(default_origin="Some block")


def test_logmessage_json():
    """Test (de-)serialization of `LogMessage`."""
    msg = LogMessage(
        "Example.", "Some block", datetime(2024, 1, 1, tzinfo=timezone.utc)
    )
    assert msg.json == {
        "datetime": "2024-01-01T00:00:00+00:00",
        "origin": "Some block",
        "body": "Example.",
    }
    assert LogMessage.from_json(msg.json) == msg


def test_logger_log(some_logger):
    """Test method `log` of `Logger`."""
    msg = some_logger.log(Context.INFO, "Example.")
    some_logger.log(Context.WARNING, "Example2.", origin="Another block")

    assert some_logger[Context.INFO] == [msg]
    assert msg.origin == "Some block"
    assert some_logger[Context.WARNING][0].origin == "Another block"
    assert Context.ERROR not in some_logger
    assert len(some_logger) == 2


def test_logger_log_bad_context(some_logger):
    """Test exception-behavior of `Logger.log` for bad context."""
    with pytest.raises(TypeError):
        some_logger.log("INFO", "Example.")


def test_logger_no_origin():
    """Test fallback-origin of `Logger`."""
    some_logger = Logger()
    assert some_logger.log(Context.INFO, "Example.").origin == "unknown"


def test_logger_json(some_logger):
    """Test `json`-property and `from_json` of `Logger`."""
    some_logger.log(Context.INFO, "Example1")
    some_logger.log(Context.ERROR, "Example2")

    json = some_logger.json
    assert list(json.keys()) == ["INFO", "ERROR"]
    assert json["INFO"][0]["body"] == "Example1"
    assert Logger.from_json(json).json == json
