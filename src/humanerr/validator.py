"""Validate data against a pydantic schema and report human-readable errors."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from humanerr.adapters import failures_from_pydantic
from humanerr.common import create_logger
from humanerr.formatting import ErrorReport, build_report
from humanerr.messages import DEFAULT_MESSAGES, MessageTable, merge_messages

logger = create_logger("validator")


class ValidationOutcome(BaseModel):
    """Validated value, or the raw input plus grouped error messages."""

    model_config = ConfigDict(frozen=True)

    value: Any
    errors: dict[str, list[str]] | None = None

    @property
    def ok(self) -> bool:
        return self.errors is None


class HumanValidator:
    """Pairs a schema with a message table.

    ``schema`` is a pydantic model class or any type ``TypeAdapter`` accepts.
    Custom ``messages`` are merged over the defaults once, here.
    """

    def __init__(
        self,
        schema: Any,
        messages: Mapping[str, str] | None = None,
        *,
        labels: Mapping[str, str] | None = None,
    ) -> None:
        self._adapter: TypeAdapter[Any] = TypeAdapter(schema)
        self._messages: MessageTable = merge_messages(messages) if messages else DEFAULT_MESSAGES
        self._labels: dict[str, str] = dict(labels or {})

    @property
    def messages(self) -> MessageTable:
        return self._messages

    def validate(self, data: object, *, strict: bool | None = None) -> ValidationOutcome:
        try:
            value = self._adapter.validate_python(data, strict=strict)
        except ValidationError as exc:
            report = self._report_for(exc)
            return ValidationOutcome(value=data, errors=report.by_field())
        return ValidationOutcome(value=value)

    def report(self, data: object, *, strict: bool | None = None) -> ErrorReport:
        """Return every formatted error for ``data``; empty when it is valid."""
        try:
            self._adapter.validate_python(data, strict=strict)
        except ValidationError as exc:
            return self._report_for(exc)
        return ErrorReport()

    def _report_for(self, error: ValidationError) -> ErrorReport:
        report = build_report(failures_from_pydantic(error), self._messages, labels=self._labels)
        logger.debug("Validation failed", errors=len(report), fields=report.fields)
        return report
