"""Message template tables: built-in defaults, merging and file loading."""

from __future__ import annotations

from .defaults import DEFAULT_MESSAGES
from .loader import load_effective_messages, load_messages
from .merger import MessageTable, merge_messages
from .models import (
    MessageCatalog,
    MessagesError,
    MessagesIOError,
    MessagesNotFoundError,
    MessagesValidationError,
    MessagesYamlError,
)

__all__ = [
    "DEFAULT_MESSAGES",
    "MessageCatalog",
    "MessageTable",
    "MessagesError",
    "MessagesIOError",
    "MessagesNotFoundError",
    "MessagesValidationError",
    "MessagesYamlError",
    "load_effective_messages",
    "load_messages",
    "merge_messages",
]
