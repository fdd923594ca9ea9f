"""Wire model for the messages exchanged with the layout server."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union


def _expect_object(obj: Any, what: str) -> dict:
    if not isinstance(obj, dict):
        raise ValueError(f"{what} must be a JSON object, got {type(obj).__name__}")
    return obj


def _required(obj: dict, key: str, what: str) -> Any:
    if key not in obj:
        raise ValueError(f"missing field `{key}` in {what}")
    return obj[key]


def _expect_str(value: Any, name: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"field `{name}` must be a string")
    return value


def _optional_str(value: Any, name: str) -> Optional[str]:
    return None if value is None else _expect_str(value, name)


def _flag(obj: dict, key: str) -> bool:
    if key not in obj:
        return False
    value = obj[key]
    if not isinstance(value, bool):
        raise ValueError(f"field `{key}` must be a boolean")
    return value


def _optional_layouts(value: Any, name: str) -> Optional[list[Layout]]:
    if value is None:
        return None
    if not isinstance(value, list):
        raise ValueError(f"field `{name}` must be a list")
    return [Layout.from_dict(entry) for entry in value]


def _dump(obj: dict) -> str:
    return json.dumps(obj, separators=(",", ":"), ensure_ascii=False)


@dataclass
class Bind:
    """Binding of a widget to a named data event."""

    event: str
    upload: bool = False
    list: bool = False
    local: Optional[str] = None

    @classmethod
    def from_dict(cls, obj: Any) -> Bind:
        obj = _expect_object(obj, "bind")
        return cls(
            event=_expect_str(_required(obj, "event", "bind"), "event"),
            upload=_flag(obj, "upload"),
            list=_flag(obj, "list"),
            local=_optional_str(obj.get("local"), "local"),
        )

    def to_dict(self) -> dict:
        return {
            "upload": self.upload,
            "list": self.list,
            "event": self.event,
            "local": self.local,
        }


@dataclass
class Layout:
    """A node of the layout tree sent by the server."""

    kind: str = ""
    attrs: Any = None
    data: Optional[Bind] = None
    value: Any = None
    item: Optional[list[Layout]] = None
    children: Optional[list[Layout]] = None

    @classmethod
    def new(cls, kind: str) -> Layout:
        return cls(kind=str(kind))

    @classmethod
    def from_dict(cls, obj: Any) -> Layout:
        obj = _expect_object(obj, "layout")
        data = obj.get("data")
        return cls(
            kind=_expect_str(_required(obj, "type", "layout"), "type"),
            attrs=obj.get("attrs"),
            data=None if data is None else Bind.from_dict(data),
            value=obj.get("value"),
            item=_optional_layouts(obj.get("item"), "item"),
            children=_optional_layouts(obj.get("children"), "children"),
        )

    def to_dict(self) -> dict:
        return {
            "type": self.kind,
            "attrs": self.attrs,
            "data": None if self.data is None else self.data.to_dict(),
            "value": self.value,
            "item": None if self.item is None else [x.to_dict() for x in self.item],
            "children": (
                None if self.children is None else [x.to_dict() for x in self.children]
            ),
        }


@dataclass
class Action:
    """A layout value attached to a named event."""

    event: str = ""
    data: Layout = field(default_factory=Layout)

    @classmethod
    def from_dict(cls, obj: Any) -> Action:
        obj = _expect_object(obj, "action")
        return cls(
            event=_expect_str(_required(obj, "event", "action"), "event"),
            data=Layout.from_dict(_required(obj, "data", "action")),
        )

    def to_dict(self) -> dict:
        return {"event": self.event, "data": self.data.to_dict()}


class ContentKind(Enum):
    """The `action` tag of a content payload."""

    LAYOUT = "layout"
    DATA = "data"
    APPEND = "append"
    EMPTY = "empty"


@dataclass
class Content:
    """Tagged payload: a whole layout, a data update, a list append or nothing."""

    kind: ContentKind = ContentKind.EMPTY
    payload: Union[Layout, Action, None] = None

    def __post_init__(self) -> None:
        expected = {
            ContentKind.LAYOUT: Layout,
            ContentKind.DATA: Action,
            ContentKind.APPEND: Action,
        }.get(self.kind)
        if expected is None:
            if self.payload is not None:
                raise ValueError("empty content carries no payload")
        elif not isinstance(self.payload, expected):
            raise ValueError(
                f"{self.kind.value} content needs a {expected.__name__} payload"
            )

    @classmethod
    def text(cls, event: str, value: Any) -> Content:
        """Data content carrying a Text layout with the given value."""
        return cls(
            ContentKind.DATA,
            Action(event=event, data=Layout(kind="Text", value=value)),
        )

    @classmethod
    def from_dict(cls, obj: Any) -> Content:
        obj = _expect_object(obj, "content")
        tag = _expect_str(_required(obj, "action", "content"), "action")
        try:
            kind = ContentKind(tag)
        except ValueError:
            raise ValueError(f"unknown content action `{tag}`") from None
        if kind is ContentKind.LAYOUT:
            return cls(kind, Layout.from_dict(obj))
        if kind is ContentKind.EMPTY:
            return cls(kind)
        return cls(kind, Action.from_dict(obj))

    def to_dict(self) -> dict:
        result: dict = {"action": self.kind.value}
        if self.payload is not None:
            result.update(self.payload.to_dict())
        return result

    def to_json(self) -> str:
        return _dump(self.to_dict())


@dataclass
class Message:
    """A message from a sender with its content."""

    sender: str = ""
    content: Content = field(default_factory=Content)

    @classmethod
    def from_dict(cls, obj: Any) -> Message:
        obj = _expect_object(obj, "message")
        return cls(
            sender=_expect_str(_required(obj, "sender", "message"), "sender"),
            content=Content.from_dict(_required(obj, "content", "message")),
        )

    def to_dict(self) -> dict:
        return {"sender": self.sender, "content": self.content.to_dict()}

    def to_json(self) -> str:
        return _dump(self.to_dict())


def parse_message(text: str) -> Message:
    """Decode a JSON message; raises ValueError when it is malformed."""
    try:
        obj = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"invalid JSON: {exc}") from exc
    return Message.from_dict(obj)