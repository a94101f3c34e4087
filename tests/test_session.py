import json

import pytest

from semantic_apps.session import Inputs, InvalidMessageError, Session


def test_input_store_keeps_values_by_id() -> None:
    inputs = Inputs()
    assert "counter" not in inputs
    inputs.set_value("counter", 1)
    assert inputs["counter"] == 1
    assert inputs.names() == ["counter"]


def test_missing_input() -> None:
    inputs = Inputs()
    assert inputs.get("nope") is None
    with pytest.raises(KeyError):
        inputs["nope"]


def test_observer_registered_before_first_value() -> None:
    session = Session("s")
    seen = []
    session.observe_input("counter", seen.append)

    session.handle_message(json.dumps({"type": "input", "input_id": "counter", "value": 1}))
    session.handle_message({"type": "input", "input_id": "counter", "value": 2})

    assert seen == [1, 2]


def test_inputs_are_independent() -> None:
    session = Session("s")
    seen = []
    session.observe_input("b", seen.append)

    session.handle_message({"input_id": "a", "value": 1})
    session.handle_message({"input_id": "a", "value": 2})

    assert session.input["a"] == 2
    assert "b" not in session.input
    assert seen == []


@pytest.mark.parametrize("raw", ["not json", {"value": 1}, {"input_id": "", "value": 1}])
def test_invalid_messages_are_rejected(raw) -> None:
    with pytest.raises(InvalidMessageError):
        Session("s").handle_message(raw)


def test_send_input_message_is_queued() -> None:
    session = Session("s")
    session.send_input_message("go", {"label": "Hi"})
    assert not session.channel.empty()
    assert session.channel.receive_nowait() == {
        "type": "input_message",
        "input_id": "go",
        "message": {"label": "Hi"},
    }
    assert session.channel.empty()


@pytest.mark.parametrize("input_id", ["set_value", "names", "get", "observe", "values", "observe_input"])
def test_method_names_are_ordinary_input_ids(input_id: str) -> None:
    session = Session("s")
    seen = []
    session.observe_input("other", seen.append)

    session.handle_message({"input_id": input_id, "value": 1})
    session.handle_message({"input_id": "other", "value": 2})

    assert session.input[input_id] == 1
    assert session.input["other"] == 2
    assert session.input.names() == sorted([input_id, "other"])
    assert seen == [2]


def test_unchanged_value_does_not_notify() -> None:
    session = Session("s")
    seen = []
    session.observe_input("a", seen.append)

    session.handle_message({"input_id": "a", "value": 1})
    session.handle_message({"input_id": "a", "value": 1})
    session.handle_message({"input_id": "b", "value": 5})

    assert seen == [1]


def test_drain_empties_the_queue() -> None:
    session = Session("s")
    session.send_input_message("a", {"label": "1"})
    session.send_input_message("b", {"label": "2"})

    assert [m["input_id"] for m in session.channel.drain()] == ["a", "b"]
    assert session.channel.empty()
