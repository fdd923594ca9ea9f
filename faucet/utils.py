"""Helpers for reading layout attributes."""

from __future__ import annotations

from typing import Any

from faucet.data import Layout


def unwrap_or_object(value: Any) -> Any:
    """Return the value, or an empty object when it is missing."""
    return {} if value is None else value


def get_attrs(layout: Layout, key: str) -> Any:
    """Look up one attribute of a layout; None when absent or attrs is not an object."""
    attrs = unwrap_or_object(layout.attrs)
    if isinstance(attrs, dict):
        return attrs.get(key)
    return None