"""A thin web socket client handle that remembers the latest messages."""

from __future__ import annotations

from enum import Enum
from typing import Any, AsyncIterator, Union

import websockets
from websockets.exceptions import ConnectionClosed


class SocketState(Enum):
    """Connection state of a web socket."""

    CONNECTING = "connecting"
    OPEN = "open"
    CLOSING = "closing"
    CLOSED = "closed"


class WebSocketHandle:
    """Wraps an open client connection and tracks the last text and bytes received."""

    def __init__(self, connection: Any, state: SocketState = SocketState.OPEN) -> None:
        self._connection = connection
        self.state = state
        self.last_text = ""
        self.last_bytes = b""

    @classmethod
    async def open(cls, url: str) -> WebSocketHandle:
        """Connect to `url`; connection errors propagate."""
        connection = await websockets.connect(url)
        return cls(connection)

    async def send(self, message: Union[str, bytes]) -> None:
        await self._connection.send(message)

    async def messages(self) -> AsyncIterator[Union[str, bytes]]:
        """Yield incoming messages until the connection closes."""
        try:
            async for message in self._connection:
                if isinstance(message, str):
                    self.last_text = message
                else:
                    self.last_bytes = bytes(message)
                yield message
        except ConnectionClosed:
            pass
        self.state = SocketState.CLOSED

    async def close(self) -> None:
        self.state = SocketState.CLOSING
        await self._connection.close()
        self.state = SocketState.CLOSED