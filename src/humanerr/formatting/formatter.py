"""Turn raw failure records into human-readable error messages."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping

from humanerr.common import create_logger
from humanerr.messages.defaults import DEFAULT_MESSAGES

from .models import ErrorReport, FailureRecord, FormattedError
from .resolver import fallback_template, lookup_template

logger = create_logger("formatting.formatter")

# {#name} and the joi-native {{#name}}
PLACEHOLDER_PATTERN = re.compile(r"\{\{#(?P<double>[^{}#]+)\}\}|\{#(?P<single>[^{}#]+)\}")

LABEL_PLACEHOLDER = "label"
TERMINAL_PUNCTUATION = (".", "!", "?")

__all__ = [
    "build_report",
    "field_key_for",
    "format_errors",
    "sentence_case",
    "strip_field_echo",
    "substitute_placeholders",
]


def format_errors(
    items: Iterable[FailureRecord] | None,
    table: Mapping[str, str] = DEFAULT_MESSAGES,
    *,
    labels: Mapping[str, str] | None = None,
) -> list[FormattedError]:
    """Format every failure item, one FormattedError per item, in input order."""
    formatted = [_format_item(item, table, labels or {}) for item in items or ()]
    logger.debug("Formatted validation failures", count=len(formatted))
    return formatted


def build_report(
    items: Iterable[FailureRecord] | None,
    table: Mapping[str, str] = DEFAULT_MESSAGES,
    *,
    labels: Mapping[str, str] | None = None,
) -> ErrorReport:
    return ErrorReport(errors=tuple(format_errors(items, table, labels=labels)))


def field_key_for(path: object) -> str:
    """Join path segments with dots. Missing paths give an empty key."""
    if path is None:
        return ""
    if isinstance(path, str):
        return path
    if not isinstance(path, Iterable):
        return _stringify(path)
    return ".".join(_stringify(segment) for segment in path)


def substitute_placeholders(template: str, values: Mapping[str, object]) -> str:
    """Replace every known placeholder in a single pass.

    Placeholders without a matching key are left as written.
    """

    def _replace(match: re.Match[str]) -> str:
        name = match.group("double") or match.group("single")
        if name not in values:
            return match.group(0)
        return _stringify(values[name])

    return PLACEHOLDER_PATTERN.sub(_replace, template)


def strip_field_echo(message: str, *names: str) -> str:
    """Drop a leading field name followed by whitespace, compared case-insensitively."""
    for name in names:
        if not name:
            continue
        size = len(name)
        if message[:size].casefold() == name.casefold() and message[size : size + 1].isspace():
            return message[size:].lstrip()
    return message


def sentence_case(message: str) -> str:
    if not message:
        return message
    return message[0].upper() + message[1:]


def _format_item(item: FailureRecord, table: Mapping[str, str], labels: Mapping[str, str]) -> FormattedError:
    field_key = field_key_for(getattr(item, "path", None))
    kind = _kind_for(item)
    context = getattr(item, "context", None)
    if not isinstance(context, Mapping):
        context = {}

    label = _label_for(field_key, context, labels)
    template = lookup_template(field_key, kind, table)
    if template is None:
        # the fallback embeds the raw field key, which is never expanded
        message = fallback_template(field_key)
    else:
        # only literal text written in the table is checked for a name echo
        template = strip_field_echo(template, label, field_key)
        message = substitute_placeholders(template, {**context, LABEL_PLACEHOLDER: label})

    message = sentence_case(_ensure_terminal_punctuation(message.strip()))

    return FormattedError(field=field_key, kind=kind, message=message)


def _kind_for(item: FailureRecord) -> str:
    kind = getattr(item, "kind", None)
    if kind is None:
        return ""
    return kind if isinstance(kind, str) else _stringify(kind)


def _label_for(field_key: str, context: Mapping[str, object], labels: Mapping[str, str]) -> str:
    configured = labels.get(field_key)
    if configured:
        return configured
    from_context = context.get(LABEL_PLACEHOLDER)
    if from_context is not None:
        return _stringify(from_context)
    return field_key


def _ensure_terminal_punctuation(message: str) -> str:
    if not message or message.endswith(TERMINAL_PUNCTUATION):
        return message
    return f"{message}."


def _stringify(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple, set, frozenset)):
        return ", ".join(_stringify(entry) for entry in value)
    try:
        return str(value)
    except Exception as exc:
        logger.debug("Could not render placeholder value", value_type=type(value).__name__, error=str(exc))
        return ""
