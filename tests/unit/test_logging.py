import json
import logging

import pytest
import structlog

from nexus_kernel.config import Settings
from nexus_kernel.infrastructure.observability import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
    setup_logging,
)


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    clear_context()
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()


def last_line(capsys):
    return capsys.readouterr().out.strip().splitlines()[-1]


def test_json_logs_carry_bound_context(capsys):
    configure_logging("INFO", json_logs=True)
    bind_context(correlation_id="req-1", tenant_id="t-1")

    get_logger("tests.logging").info("user activated", user_id="u-1")

    record = json.loads(last_line(capsys))
    event = json.loads(record["message"])
    assert record["levelname"] == "INFO"
    assert event["event"] == "user activated"
    assert event["correlation_id"] == "req-1"
    assert event["user_id"] == "u-1"


def test_level_filters_debug(capsys):
    configure_logging("WARNING", json_logs=True)
    get_logger("tests.logging").info("quiet")
    assert "quiet" not in capsys.readouterr().out


def test_console_renderer(capsys):
    setup_logging(Settings(environment="local"))
    get_logger("tests.logging").warning("disk almost full", free_mb=12)
    assert "disk almost full" in last_line(capsys)


def test_clear_context_drops_bindings(capsys):
    configure_logging("INFO", json_logs=True)
    bind_context(correlation_id="req-1")
    clear_context()

    get_logger("tests.logging").info("after clear")

    event = json.loads(json.loads(last_line(capsys))["message"])
    assert "correlation_id" not in event
