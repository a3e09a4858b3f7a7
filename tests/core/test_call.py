from unittest.mock import MagicMock

from callflow.core.call import Call
from callflow.core.method import Method
from callflow.core.representation import StringRepresentation
from callflow.core.status import CLIENT_ERROR_NOT_FOUND, SUCCESS_OK


def test_defaults():
    call = Call()
    assert call.call_id is not None
    assert call.resource_ref is None
    assert call.method is None
    assert call.input is None
    assert call.output is None
    assert call.status is None
    assert call.attributes == {}
    assert not call.has_output


def test_call_ids_are_unique():
    assert Call().call_id != Call().call_id


def test_fields_are_mutable():
    body = StringRepresentation(text="hi")
    call = Call(resource_ref="/a", method=Method.GET)
    call.output = body
    call.status = CLIENT_ERROR_NOT_FOUND
    call.attributes["seen"] = True

    assert call.output is body
    assert call.has_output
    assert call.status == CLIENT_ERROR_NOT_FOUND
    assert call.attributes["seen"] is True


def test_input_keeps_the_attached_instance():
    body = StringRepresentation(text="hi")
    call = Call(method=Method.POST, input=body)
    assert call.input is body


def test_status_assignment_emits_signal():
    call = Call()
    listener = MagicMock()
    call.events.status.connect(listener)

    call.status = SUCCESS_OK

    listener.assert_called_once()
    assert listener.call_args.args[0] == SUCCESS_OK


def test_output_assignment_emits_signal():
    call = Call()
    listener = MagicMock()
    call.events.output.connect(listener)

    call.output = StringRepresentation(text="x")

    listener.assert_called_once()


def test_repr_contains_method_and_target():
    call = Call(resource_ref="/widgets/1", method=Method.GET)
    assert "GET /widgets/1" in repr(call)
