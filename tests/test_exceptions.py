import uuid

from callflow.exceptions import CallflowError, FilterLoadError, TransportError


def test_detail_defaults_to_first_arg():
    error = CallflowError("something broke", status_code=502)
    assert error.detail == "something broke"
    assert error.status_code == 502
    assert str(error) == "something broke"


def test_explicit_detail_wins():
    assert CallflowError("message", detail="detail").detail == "detail"


def test_transport_error_carries_call_id():
    call_id = uuid.uuid4()
    error = TransportError("timeout", call_id=call_id)
    assert isinstance(error, CallflowError)
    assert error.call_id == call_id
    assert error.detail == "timeout"
    assert error.status_code == 502


def test_filter_load_error_is_value_error():
    error = FilterLoadError("bad chain", filter_name="StatusFilter")
    assert isinstance(error, ValueError)
    assert isinstance(error, CallflowError)
    assert error.filter_name == "StatusFilter"
    assert error.detail == "bad chain"


def test_transport_error_timeout_status_code():
    assert TransportError("timeout", status_code=504).status_code == 504
