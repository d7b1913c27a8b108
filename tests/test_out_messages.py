import pytest

from irsol.protocol.in_messages import Assignment, Command, InMessageKind, Inquiry
from irsol.protocol.out_messages import Error, Success


def test_success_from_assignment_keeps_value():
    msg = Assignment("x", 42)
    ok = Success.from_assignment(msg)
    assert ok.identifier == "x"
    assert ok.source is InMessageKind.ASSIGNMENT
    assert ok.body == 42
    assert ok.has_body() and ok.has_int()
    assert not ok.has_double() and not ok.has_string()


def test_success_from_assignment_override():
    msg = Assignment("fps", 3.7)
    ok = Success.from_assignment(msg, 3.5)
    assert ok.body == 3.5
    assert ok.has_double()


def test_success_from_command_has_no_body():
    ok = Success.from_command(Command("reset"))
    assert ok.source is InMessageKind.COMMAND
    assert ok.body is None
    assert not ok.has_body()
    assert not ok.has_int() and not ok.has_double() and not ok.has_string()
    assert ok.to_string() == "Success{identifier: 'reset', source: COMMAND}"


def test_success_from_inquiry():
    ok = Success.from_inquiry(Inquiry("name"), "camera")
    assert ok.source is InMessageKind.INQUIRY
    assert ok.body == "camera"
    assert ok.has_string()
    assert ok.to_string() == "Success{identifier: 'name', source: INQUIRY, body: <string> \"camera\"}"


def test_success_as_status():
    ok = Success.as_status("frame_rate", 10)
    assert ok.source is InMessageKind.INQUIRY
    assert ok.identifier == "frame_rate"
    assert ok.body == 10


def test_success_invalid_identifier():
    with pytest.raises(ValueError):
        Success.as_status("bad id", 1)


def test_success_invalid_body_type():
    with pytest.raises(TypeError):
        Success.as_status("x", [1])


@pytest.mark.parametrize(
    "msg",
    [Assignment("a", 1), Inquiry("b"), Command("c")],
)
def test_error_from_message_matches_kind(msg):
    err = Error.from_message(msg, "failed")
    assert err.identifier == msg.identifier
    assert err.source is msg.kind
    assert err.description == "failed"


def test_error_to_string():
    err = Error.from_message(Inquiry("x"), "oops")
    assert err.to_string() == "Error{identifier: 'x', source: INQUIRY, description: 'oops'}"


def test_error_from_non_message_raises():
    with pytest.raises(TypeError):
        Error.from_message("x=1", "bad")


def test_error_invalid_identifier():
    with pytest.raises(ValueError):
        Error("9x", InMessageKind.COMMAND, "bad")


def test_messages_are_immutable():
    ok = Success.from_command(Command("go"))
    with pytest.raises(AttributeError):
        ok.identifier = "stop"
    assert ok.identifier == "go"