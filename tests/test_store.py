import json
from contextlib import asynccontextmanager

import pytest
import websockets

from faucet.data import Action, Content, ContentKind, Layout, Message
from faucet.store import Store, use_store


def _msg(kind, payload=None):
    return Message(sender="srv", content=Content(kind, payload)).to_json()


@asynccontextmanager
async def _server(handler):
    async with websockets.serve(handler, "127.0.0.1", 0) as server:
        port = server.sockets[0].getsockname()[1]
        yield f"ws://127.0.0.1:{port}"


def test_apply_layout():
    store = Store()
    layout = Layout(kind="Container", children=[Layout.new("Text")])
    assert store.apply(_msg(ContentKind.LAYOUT, layout)) is ContentKind.LAYOUT
    assert store.layout == layout


def test_apply_data_replaces_entry():
    store = Store()
    first = Layout(kind="Text", value="one")
    second = Layout(kind="Text", value="two")
    store.apply(_msg(ContentKind.DATA, Action("chat", first)))
    store.apply(_msg(ContentKind.DATA, Action("chat", second)))
    assert store.data == {"chat": second}


def test_apply_append_first_entry_is_doubled():
    store = Store()
    first = Layout(kind="Card", value=1)
    second = Layout(kind="Card", value=2)
    store.apply(_msg(ContentKind.APPEND, Action("feed", first)))
    assert store.lists["feed"] == [first, first]
    store.apply(_msg(ContentKind.APPEND, Action("feed", second)))
    assert store.lists["feed"] == [first, first, second]


@pytest.mark.parametrize("text", ["", "garbage", '{"sender": "a"}', _msg(ContentKind.EMPTY)])
def test_apply_ignores_empty_or_malformed(text):
    store = Store()
    assert store.apply(text) is ContentKind.EMPTY
    assert store == Store()


@pytest.mark.asyncio
async def test_send_without_connection_raises():
    with pytest.raises(RuntimeError):
        await Store().send("x", "hi")


@pytest.mark.asyncio
async def test_send_and_listen_over_socket():
    received = []
    layout = Layout.new("Container")

    async def handler(connection):
        received.append(await connection.recv())
        await connection.send(_msg(ContentKind.LAYOUT, layout))
        await connection.send("not a message")

    async with _server(handler) as url:
        store = await use_store(url)
        await store.send("x", "hi")
        await store.listen()

    assert json.loads(received[0]) == Content.text("x", "hi").to_dict()
    assert store.layout == layout
    assert store.ws.last_text == "not a message"