"""Template lookup for failure kinds."""

from __future__ import annotations

from collections.abc import Mapping

from humanerr.common import create_logger

logger = create_logger("formatting.resolver")

FALLBACK_TEMPLATE = "{field_key} is invalid."


def resolve_template(field_key: str, kind: str, table: Mapping[str, str]) -> str:
    """Return the template for ``kind`` on ``field_key``.

    Lookup order, first match wins:

    1. ``"<field_key>.<kind>"``: a field-specific override
    2. ``"<kind>"``: the kind-level default
    3. ``"<field_key> is invalid."``

    Never raises and never modifies ``table``.
    """
    template = lookup_template(field_key, kind, table)
    if template is None:
        return fallback_template(field_key)
    return template


def lookup_template(field_key: str, kind: str, table: Mapping[str, str]) -> str | None:
    """Return the table entry for ``kind`` on ``field_key``, or None when the table has neither."""
    override = table.get(f"{field_key}.{kind}")
    if isinstance(override, str):
        logger.trace("Resolved field override", field=field_key, kind=kind)
        return override

    default = table.get(kind)
    if isinstance(default, str):
        logger.trace("Resolved kind default", field=field_key, kind=kind)
        return default

    return None


def fallback_template(field_key: str) -> str:
    logger.trace("Using fallback template", field=field_key)
    return FALLBACK_TEMPLATE.format(field_key=field_key)
