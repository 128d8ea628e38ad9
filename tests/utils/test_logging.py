import logging

from ddlbridge.utils.logging import get_correlation_id, get_logger, set_correlation_id, time_call


def test_correlation_id_round_trip():
    token = set_correlation_id("test-token")
    assert token == "test-token"
    assert get_correlation_id() == "test-token"


def test_loggers_live_under_package_namespace():
    assert get_logger("dialects.registry").name == "ddlbridge.dialects.registry"
    assert logging.getLogger("ddlbridge").handlers


def test_time_call_logs_duration(caplog):
    logger = get_logger("tests.logging")
    caplog.set_level(logging.DEBUG, logger=logger.name)
    with time_call("unit-test", logger, threshold_ms=0) as timer:
        pass
    messages = [record.message for record in caplog.records if record.name == logger.name]
    assert any("unit-test took" in message for message in messages)
    assert timer.elapsed_ms >= 0
