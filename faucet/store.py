"""Client-side state fed by server messages over a web socket."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from websockets.exceptions import ConnectionClosed

from faucet.data import Content, ContentKind, Layout, Message, parse_message
from faucet.ws import WebSocketHandle


@dataclass
class Store:
    """Current layout, bound data and appended lists, keyed by event."""

    ws: Optional[WebSocketHandle] = None
    layout: Layout = field(default_factory=Layout)
    data: dict[str, Layout] = field(default_factory=dict)
    lists: dict[str, list[Layout]] = field(default_factory=dict)

    def apply(self, text: str) -> ContentKind:
        """Apply one raw message; malformed input counts as empty content."""
        try:
            message = parse_message(text)
        except ValueError:
            message = Message()
        content = message.content
        if content.kind is ContentKind.LAYOUT:
            self.layout = content.payload
        elif content.kind is ContentKind.DATA:
            self.data[content.payload.event] = content.payload.data
        elif content.kind is ContentKind.APPEND:
            action = content.payload
            if action.event not in self.lists:
                self.lists[action.event] = [action.data]
            self.lists[action.event].append(action.data)
        return content.kind

    async def send(self, event: str, content: Any) -> None:
        """Send a Text data update for `event`; a closed connection is ignored."""
        if self.ws is None:
            raise RuntimeError("store is not connected")
        try:
            await self.ws.send(Content.text(event, content).to_json())
        except ConnectionClosed:
            pass

    async def listen(self) -> None:
        """Apply incoming text messages until the connection closes."""
        if self.ws is None:
            raise RuntimeError("store is not connected")
        async for message in self.ws.messages():
            if isinstance(message, str):
                self.apply(message)


async def use_store(url: str) -> Store:
    """Connect to `url` and return an empty store bound to that connection."""
    return Store(ws=await WebSocketHandle.open(url))