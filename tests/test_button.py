import json

from semantic_apps.markup import icon, span
from semantic_apps.session import Session
from semantic_apps.widgets import action_button, button, update_action_button


def test_button() -> None:
    assert str(button("go", "Go")) == '<button id="go" class="ui button"> Go</button>'


def test_button_extra_class() -> None:
    assert button("go", "Go", class_="primary").classes == ["primary", "ui", "button"]


def test_action_button_is_an_action_input() -> None:
    tag = action_button("go", "Go", icon=icon("play"))
    assert tag.get_attr("data-input-type") == "action"
    assert str(tag).startswith('<button id="go" class="ui button" data-input-type="action"><i class="play icon">')


def test_action_button_width_is_prepended_to_style() -> None:
    assert action_button("go", "Go", width="100px").get_attr("style") == "width: 100px; "
    tag = action_button("go", "Go", width="100px", style="color: red")
    assert tag.get_attr("style") == "width: 100px; color: red"
    assert action_button("go", "Go").get_attr("style") is None


def test_update_with_label_only_omits_icon() -> None:
    session = Session("s")
    update_action_button(session, "go", label="New label")
    assert session.channel.drain() == [
        {"type": "input_message", "input_id": "go", "message": {"label": "New label"}}
    ]


def test_update_sends_icon_markup() -> None:
    session = Session("s")
    update_action_button(session, "go", icon=icon("calendar"))
    message = session.channel.receive_nowait()
    assert message["message"] == {"icon": '<i class="calendar icon"></i>'}


def test_empty_icon_clears_icon() -> None:
    session = Session("s")
    update_action_button(session, "go", label="x", icon="")
    assert session.channel.receive_nowait()["message"] == {"label": "x", "icon": ""}


def test_button_ignores_extra_id() -> None:
    tag = button("go", "Go", id="other")
    assert tag.get_attr("id") == "go"


def test_markup_label_is_sent_as_html() -> None:
    session = Session("s")
    update_action_button(session, "go", label=span("New", class_="bold"))
    message = session.channel.receive_nowait()
    assert message["message"] == {"label": '<span class="bold">New</span>'}
    assert json.dumps(message)
