"""Pydantic models for message files and their load errors."""

from __future__ import annotations

from pathlib import Path
from typing import TypeAlias

from pydantic import BaseModel, ConfigDict, RootModel, StrictStr


class MessageCatalog(RootModel[dict[StrictStr, StrictStr | None]]):
    """Mapping of lookup key to template as written in a message file."""

    def templates(self) -> dict[str, str]:
        return {key: value for key, value in self.root.items() if value is not None}


class MessagesNotFoundError(BaseModel):
    """Message file not found at expected location."""

    model_config = ConfigDict(extra="forbid")

    expected_path: Path
    message: str


class MessagesIOError(BaseModel):
    """File I/O error reading a message file."""

    model_config = ConfigDict(extra="forbid")

    path: Path
    message: str


class MessagesYamlError(BaseModel):
    """YAML parsing error in a message file."""

    model_config = ConfigDict(extra="forbid")

    path: Path
    line: int | None = None
    column: int | None = None
    message: str


class MessagesValidationError(BaseModel):
    """Message file content is not a mapping of keys to template strings."""

    model_config = ConfigDict(extra="forbid")

    path: Path
    key: str | None = None
    message: str


MessagesError: TypeAlias = MessagesNotFoundError | MessagesIOError | MessagesYamlError | MessagesValidationError
