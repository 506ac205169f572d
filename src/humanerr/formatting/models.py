"""Input and output models for error formatting."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from typing import Protocol

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from humanerr.common import NonEmptyString, PathSegment


class FailureRecord(Protocol):
    """Shape of a single failure produced by a validation engine."""

    @property
    def path(self) -> Sequence[PathSegment]: ...

    @property
    def kind(self) -> str: ...

    @property
    def context(self) -> Mapping[str, object]: ...


class FailureItem(BaseModel):
    """One field that failed validation."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    path: tuple[PathSegment, ...] = Field(min_length=1)
    kind: NonEmptyString = Field(validation_alias=AliasChoices("kind", "type"))
    context: dict[str, object] = Field(default_factory=dict, validation_alias=AliasChoices("context", "ctx"))

    @field_validator("path", mode="before")
    @classmethod
    def _split_dotted_path(cls, value: object) -> object:
        if isinstance(value, str):
            return tuple(value.split("."))
        return value

    @property
    def field_key(self) -> str:
        return ".".join(str(segment) for segment in self.path)


class FormattedError(BaseModel):
    """Human-readable message for one failure item."""

    model_config = ConfigDict(frozen=True)

    field: str
    kind: str
    message: str


class ErrorReport(BaseModel):
    """Ordered collection of formatted errors, addressable by field."""

    model_config = ConfigDict(frozen=True)

    errors: tuple[FormattedError, ...] = ()

    @property
    def fields(self) -> list[str]:
        return list(dict.fromkeys(error.field for error in self.errors))

    def by_field(self) -> dict[str, list[str]]:
        """Group messages per field key, keeping first-appearance order."""
        grouped: dict[str, list[str]] = {}
        for error in self.errors:
            grouped.setdefault(error.field, []).append(error.message)
        return grouped

    def __iter__(self) -> Iterator[FormattedError]:  # type: ignore[override]
        return iter(self.errors)

    def __len__(self) -> int:
        return len(self.errors)

    def __bool__(self) -> bool:
        return bool(self.errors)
