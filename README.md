# faucet

faucet is a small client for server-driven user interfaces. It connects to a
web socket, receives JSON messages that describe a layout tree and the data
bound to it, and renders that tree as an HTML page.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running

```
faucet [URL]
```

`URL` defaults to `ws://localhost:3000/channel`. After every text message
from the server, faucet applies it and prints the whole HTML page for the
current layout to standard output. It runs until the server closes the
connection. If the connection cannot be made it prints
`connecting failed: ...` to standard error and exits with status 1. Run
`faucet --help` to see the options.

## Messages

Each message from the server is a JSON object with a `sender` string and a
`content` object tagged by `action`:

- `layout` replaces the whole layout tree. The layout's fields sit next to
  `action` in the content object.
- `data` stores a layout under an event name (`event` and `data` fields). A
  `Text` element bound to that event shows its value.
- `append` adds a layout to the list kept under an event name. The first
  append for an event stores that layout twice.
- `empty` does nothing.

A message that is not valid JSON or does not fit this shape is treated as
`empty`.

An example:

```json
{
  "sender": "server",
  "content": {
    "action": "layout",
    "type": "Container",
    "attrs": {"horizontal": false, "class": "main"},
    "children": [
      {"type": "Text", "value": "# Hello", "attrs": {"format": "markdown"}},
      {"type": "Text", "data": {"event": "chat"}},
      {"type": "Button", "value": "Send"}
    ]
  }
}
```

A layout node has a `type` and may have `attrs`, `data` (a binding with
`event` and the flags `upload` and `list`), `value`, `item` and `children`.

## Rendering

`faucet.components.frame(layout, store)` renders a tree, children first.
The element types are:

- `Container`: a flex box, vertical unless `attrs.horizontal` is `true`,
  with `attrs.class` added to its classes.
- `List` and `Card`: boxes around their children.
- `Input`: a text input field.
- `Text`: the node's `value`, or, when the node is bound with `data`, the
  value of the layout the store holds for that event (empty when `upload` is
  set or nothing has arrived). Values that are not strings are shown as
  JSON. When `attrs.format` is `markdown` or `md`, the text is converted to
  HTML with Markdown and that HTML is shown escaped, as text.
- `Button`: labelled with its `value`, `Ok` by default.
- `Test`: a counter showing `1` and a `Count` button.

Any other type renders as `<type> unimplemented!`.

## Library use

```python
from faucet.data import parse_message
from faucet.components import frame

message = parse_message('{"sender": "s", "content": {"action": "layout", "type": "Card"}}')
html = frame(message.content.payload, store=None)
```

- `faucet.data` holds `Layout`, `Bind`, `Action`, `Content` (with its
  `ContentKind`) and `Message`, each with `from_dict` and `to_dict`;
  `parse_message(text)` raises `ValueError` on malformed input.
- `faucet.store.use_store(url)` opens a connection and returns a `Store`.
  `Store.apply(text)` applies one raw message and returns its `ContentKind`,
  `Store.listen()` applies incoming messages until the connection closes, and
  `Store.send(event, content)` sends a `data` message with a `Text` layout
  back to the server.
- `faucet.ws.WebSocketHandle` wraps the connection and remembers the last
  text and bytes received.
- `faucet.app.render_page(store)` renders the store's current layout as a
  full HTML page.

## What it does not do

faucet only produces HTML text. It has no browser window or other live
screen: the input field, buttons and counter in the output are not
interactive, and nothing typed into them is sent to the server. Send
updates yourself with `Store.send`.