"""HTML rendering of layout trees sent by the server."""

from __future__ import annotations

import json
from html import escape
from typing import Any, Iterable, Optional

from markdown_it import MarkdownIt

from faucet.data import Layout
from faucet.store import Store
from faucet.utils import get_attrs, unwrap_or_object

_MARKDOWN_FORMATS = ("markdown", "md")
_markdown = MarkdownIt("commonmark")


def _div(css: str, body: str) -> str:
    return f'<div class="{escape(css)}">{body}</div>'


def _void_element(tag: str, **attributes: str) -> str:
    rendered = "".join(
        f' {name}="{escape(value)}"' for name, value in attributes.items()
    )
    return f"<{tag}{rendered}>"


def container(layout: Layout, children: Iterable[str] = ()) -> str:
    """A flex box, vertical unless `horizontal` is set, with an optional extra class."""
    css = ["Container", "f"]
    attrs = unwrap_or_object(layout.attrs)
    if isinstance(attrs, dict):
        if attrs.get("horizontal") is not True:
            css.append("v")
        extra = attrs.get("class")
        css.append(extra if isinstance(extra, str) else "")
    return _div(" ".join(css), "".join(children))


def card(layout: Layout, children: Iterable[str] = ()) -> str:
    """A bordered, shadowed vertical box."""
    return _div("Card f v box border shadow", "".join(children))


def list_view(layout: Layout, children: Iterable[str] = ()) -> str:
    """A vertical list of children."""
    return _div("List f v", "".join(children))


def input_box(layout: Layout) -> str:
    """A text input field."""
    return _void_element("input", **{"class": "Input"})


def _display(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def _text_value(layout: Layout, store: Optional[Store]) -> Any:
    bind = layout.data
    if bind is None:
        return layout.value
    if bind.upload:
        return None
    if store is None:
        raise RuntimeError("a bound Text needs a store")
    return store.data.get(bind.event, Layout.new("Text")).value


def text(layout: Layout, store: Optional[Store] = None) -> str:
    """Text from the layout value or from the store data bound to its event."""
    content = _display(_text_value(layout, store))
    fmt = get_attrs(layout, "format")
    if isinstance(fmt, str) and fmt in _MARKDOWN_FORMATS:
        content = _markdown.render(content)
    return _div("Text", escape(content, quote=False))


def button(layout: Layout) -> str:
    """A button labelled with the layout value, `Ok` by default."""
    label = "Ok" if layout.value is None else layout.value
    if not isinstance(label, str):
        raise ValueError("button value must be a string")
    return f'<button class="Button">{escape(label, quote=False)}</button>'


def counter(layout: Layout, count: int = 1) -> str:
    """The counter test widget showing its current count."""
    return f"<div>{count}</div><button>Count</button>"


def dynamic(
    layout: Layout, children: Iterable[str] = (), store: Optional[Store] = None
) -> str:
    """Render a node by its type; unknown types render a notice."""
    kind = layout.kind
    if kind == "Container":
        return container(layout, children)
    if kind == "List":
        return list_view(layout, children)
    if kind == "Card":
        return card(layout, children)
    if kind == "Input":
        return input_box(layout)
    if kind == "Text":
        return text(layout, store)
    if kind == "Button":
        return button(layout)
    if kind == "Test":
        return counter(layout)
    return f"<div>{escape(kind, quote=False)} unimplemented!</div>"


def frame(layout: Layout, store: Optional[Store] = None) -> str:
    """Render a layout tree, children first, then the node around them."""
    children = [frame(child, store) for child in layout.children or []]
    return dynamic(layout, children, store)