"""Message table merging."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import TypeAlias

from .defaults import DEFAULT_MESSAGES

MessageTable: TypeAlias = Mapping[str, str]


def merge_messages(
    custom: Mapping[str, str | None] | None,
    base: MessageTable = DEFAULT_MESSAGES,
) -> MessageTable:
    """Overlay custom templates on ``base`` key by key; custom keys win.

    Field-qualified keys (``name.string.min``) and bare kinds (``string.min``)
    are independent entries. Neither input is modified.
    """
    merged: dict[str, str] = dict(base)

    for key, template in (custom or {}).items():
        if template is None:
            continue
        merged[key] = template

    return MappingProxyType(merged)
