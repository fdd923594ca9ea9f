import json

import pytest

from faucet.data import (
    Action,
    Bind,
    Content,
    ContentKind,
    Layout,
    Message,
    parse_message,
)

LAYOUT_MESSAGE = json.dumps(
    {
        "sender": "srv",
        "content": {
            "action": "layout",
            "type": "Container",
            "attrs": {"horizontal": True},
            "children": [
                {"type": "Text", "value": "hi"},
                {"type": "Input", "data": {"event": "message", "upload": True}},
            ],
        },
    }
)


def test_parse_layout_message():
    message = parse_message(LAYOUT_MESSAGE)
    assert message.sender == "srv"
    assert message.content.kind is ContentKind.LAYOUT
    layout = message.content.payload
    assert layout.kind == "Container"
    assert layout.attrs == {"horizontal": True}
    assert layout.children[0].value == "hi"
    assert layout.children[1].data == Bind(event="message", upload=True)
    assert layout.item is None


def test_message_round_trip():
    message = parse_message(LAYOUT_MESSAGE)
    assert Message.from_dict(message.to_dict()) == message
    assert parse_message(message.to_json()) == message


def test_content_text_wire_shape():
    content = Content.text("x", "hello")
    assert content.to_dict() == {
        "action": "data",
        "event": "x",
        "data": {
            "type": "Text",
            "attrs": None,
            "data": None,
            "value": "hello",
            "item": None,
            "children": None,
        },
    }


def test_empty_content_json():
    assert Content().to_json() == '{"action":"empty"}'
    assert Content.from_dict({"action": "empty"}) == Content()


@pytest.mark.parametrize("kind", [ContentKind.DATA, ContentKind.APPEND])
def test_action_content_round_trip(kind):
    content = Content(kind, Action("chat", Layout(kind="Card", value=[1, 2])))
    assert Content.from_dict(json.loads(content.to_json())) == content


def test_bind_defaults():
    bind = Bind.from_dict({"event": "e"})
    assert (bind.upload, bind.list, bind.local) == (False, False, None)
    assert Bind.from_dict(bind.to_dict()) == bind


def test_layout_new_and_unknown_fields_ignored():
    assert Layout.new("Text") == Layout(kind="Text")
    assert Layout.from_dict({"type": "Text", "title": "ignored"}) == Layout.new("Text")


def test_null_value_becomes_none():
    assert Layout.from_dict({"type": "Text", "value": None}).value is None


@pytest.mark.parametrize(
    "text",
    [
        "not json",
        "[]",
        '{"content": {"action": "empty"}}',
        '{"sender": "a", "content": {"action": "bogus"}}',
        '{"sender": "a", "content": {"action": "layout"}}',
        '{"sender": "a", "content": {"action": "data", "event": "e"}}',
        '{"sender": 1, "content": {"action": "empty"}}',
    ],
)
def test_malformed_messages_raise(text):
    with pytest.raises(ValueError):
        parse_message(text)


def test_bind_flag_must_be_bool():
    with pytest.raises(ValueError):
        Bind.from_dict({"event": "e", "upload": "yes"})


def test_content_payload_must_match_kind():
    with pytest.raises(ValueError):
        Content(ContentKind.LAYOUT, Action())
    with pytest.raises(ValueError):
        Content(ContentKind.EMPTY, Layout())