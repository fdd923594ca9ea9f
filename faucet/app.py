"""Command entry: connect to the layout server and render pages as updates arrive."""

from __future__ import annotations

import argparse
import asyncio
import sys
from html import escape
from typing import Optional, Sequence

from websockets.exceptions import WebSocketException

from faucet.components import frame
from faucet.store import Store, use_store

DEFAULT_URL = "ws://localhost:3000/channel"
FAVICON = "/assets/favicon.ico"
MAIN_CSS = "/assets/main.css"
DEBUG_CSS = "/assets/debug.css"
HEADER_SVG = "/assets/header.svg"


def _link(rel: str, href: str) -> str:
    return f'<link rel="{escape(rel)}" href="{escape(href)}">'


def render_page(store: Store) -> str:
    """A full HTML page for the store's current layout."""
    head = "\n".join(
        [
            _link("icon", FAVICON),
            _link("stylesheet", MAIN_CSS),
            _link("stylesheet", DEBUG_CSS),
            _link("svg", HEADER_SVG),
        ]
    )
    body = frame(store.layout, store)
    return (
        "<!DOCTYPE html>\n<html>\n<head>\n"
        f"{head}\n</head>\n<body>\n{body}\n</body>\n</html>\n"
    )


async def run(url: str) -> Store:
    """Apply server messages and print the page after each one until the connection closes."""
    store = await use_store(url)
    async for message in store.ws.messages():
        if isinstance(message, str):
            store.apply(message)
            print(render_page(store), flush=True)
    return store


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="faucet", description="Render layouts pushed by a web socket server."
    )
    parser.add_argument("url", nargs="?", default=DEFAULT_URL, help="server URL")
    args = parser.parse_args(argv)
    try:
        asyncio.run(run(args.url))
    except (OSError, WebSocketException) as exc:
        print(f"connecting failed: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130
    return 0