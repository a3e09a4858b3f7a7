import logging

import pytest
from callflow.core.call import Call
from callflow.core.method import Method
from callflow.core.status import CLIENT_ERROR_NOT_FOUND
from callflow.filter.call_logging import CallLoggingFilter
from callflow.filter.chain import FilterChain
from callflow.filter.status_filter import StatusFilter


@pytest.fixture
def call() -> Call:
    return Call(resource_ref="/widgets/1", method=Method.GET)


def not_found(call):
    call.status = CLIENT_ERROR_NOT_FOUND


def test_logs_method_target_and_status(call, caplog):
    with caplog.at_level(logging.INFO):
        FilterChain([CallLoggingFilter()], target=not_found).handle(call)

    assert f"[{call.call_id}] GET /widgets/1 -> 404" in caplog.text


def test_logs_downstream_mutations_at_debug(call, caplog):
    with caplog.at_level(logging.DEBUG):
        FilterChain([CallLoggingFilter(), StatusFilter()], target=not_found).handle(call)

    assert "Status set to 404 Not Found" in caplog.text
    assert "Output set (text/html)" in caplog.text


def test_mutation_logging_can_be_disabled(call, caplog):
    with caplog.at_level(logging.DEBUG):
        FilterChain([CallLoggingFilter(log_mutations=False)], target=not_found).handle(call)

    assert "Status set to" not in caplog.text


def test_listeners_are_disconnected_after_the_call(call, caplog):
    FilterChain([CallLoggingFilter()], target=not_found).handle(call)

    with caplog.at_level(logging.DEBUG):
        call.status = None
    assert "Status set to" not in caplog.text


def test_faults_are_logged_and_reraised(call, caplog):
    def boom(c):
        raise RuntimeError("boom")

    with caplog.at_level(logging.ERROR), pytest.raises(RuntimeError):
        FilterChain([CallLoggingFilter()], target=boom).handle(call)

    assert "GET /widgets/1 failed" in caplog.text


def test_status_filter_behind_logging_contains_fault(call, caplog):
    def boom(c):
        raise RuntimeError("boom")

    with caplog.at_level(logging.INFO):
        FilterChain([CallLoggingFilter(), StatusFilter()], target=boom).handle(call)

    assert f"[{call.call_id}] GET /widgets/1 -> 500" in caplog.text


def test_default_logger_is_named_after_filter_module():
    assert CallLoggingFilter().logger.name == "callflow.filter.call_logging"
