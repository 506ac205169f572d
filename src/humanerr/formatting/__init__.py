"""Message resolution and formatting of validation failures."""

from __future__ import annotations

from .formatter import (
    build_report,
    field_key_for,
    format_errors,
    sentence_case,
    strip_field_echo,
    substitute_placeholders,
)
from .models import ErrorReport, FailureItem, FailureRecord, FormattedError
from .resolver import FALLBACK_TEMPLATE, fallback_template, lookup_template, resolve_template

__all__ = [
    "FALLBACK_TEMPLATE",
    "ErrorReport",
    "FailureItem",
    "FailureRecord",
    "FormattedError",
    "build_report",
    "fallback_template",
    "field_key_for",
    "format_errors",
    "lookup_template",
    "resolve_template",
    "sentence_case",
    "strip_field_echo",
    "substitute_placeholders",
]
