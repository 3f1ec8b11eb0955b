import logging

from factorials import Strategy, factorial
from factorials.logging import get_logger, log_event


def test_library_calls_leave_stdout_empty(capfd):
    assert factorial("pool_map", 10, chunk_size=3) == 3628800
    assert factorial(Strategy.agent, 6, chunk_size=2) == 720
    out, _ = capfd.readouterr()
    assert out == ""


def test_library_events_reach_stdlib_logging_when_enabled(caplog):
    caplog.set_level(logging.DEBUG, logger="factorials.parallel")
    assert factorial(Strategy.pool_calls, 10, chunk_size=5) == 3628800
    assert "partition_planned" in caplog.text


def test_log_event_binds_component(caplog):
    caplog.set_level(logging.DEBUG, logger="factorials.test")
    log_event(get_logger("factorials.test"), "something_happened", {"n": 3})
    records = [record for record in caplog.records if record.name == "factorials.test"]
    assert len(records) == 1
    assert "something_happened" in records[0].getMessage()
