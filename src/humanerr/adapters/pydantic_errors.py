"""Map pydantic validation errors onto failure items."""

from __future__ import annotations

from collections.abc import Mapping
from typing import NamedTuple

from pydantic import ValidationError
from pydantic_core import ErrorDetails

from humanerr.common import create_logger
from humanerr.formatting.models import FailureItem

logger = create_logger("adapters.pydantic")


class KindMapping(NamedTuple):
    kind: str
    limit_key: str | None = None


# pydantic error type -> dotted kind, plus the ctx key that carries the limit
PYDANTIC_KINDS: Mapping[str, KindMapping] = {
    "missing": KindMapping("any.required"),
    "literal_error": KindMapping("any.only"),
    "enum": KindMapping("any.only"),
    "value_error": KindMapping("any.custom"),
    "assertion_error": KindMapping("any.custom"),
    "string_type": KindMapping("string.base"),
    "string_too_short": KindMapping("string.min", "min_length"),
    "string_too_long": KindMapping("string.max", "max_length"),
    "string_pattern_mismatch": KindMapping("string.pattern.base"),
    "url_type": KindMapping("string.uri"),
    "url_parsing": KindMapping("string.uri"),
    "uuid_type": KindMapping("string.uuid"),
    "uuid_parsing": KindMapping("string.uuid"),
    "int_type": KindMapping("number.base"),
    "int_parsing": KindMapping("number.base"),
    "int_from_float": KindMapping("number.integer"),
    "float_type": KindMapping("number.base"),
    "float_parsing": KindMapping("number.base"),
    "decimal_type": KindMapping("number.base"),
    "decimal_parsing": KindMapping("number.base"),
    "decimal_max_places": KindMapping("number.precision", "decimal_places"),
    "finite_number": KindMapping("number.unsafe"),
    "greater_than": KindMapping("number.greater", "gt"),
    "greater_than_equal": KindMapping("number.min", "ge"),
    "less_than": KindMapping("number.less", "lt"),
    "less_than_equal": KindMapping("number.max", "le"),
    "multiple_of": KindMapping("number.multiple"),
    "bool_type": KindMapping("boolean.base"),
    "bool_parsing": KindMapping("boolean.base"),
    "date_type": KindMapping("date.base"),
    "date_parsing": KindMapping("date.base"),
    "date_from_datetime_parsing": KindMapping("date.base"),
    "datetime_type": KindMapping("date.base"),
    "datetime_parsing": KindMapping("date.base"),
    "datetime_from_date_parsing": KindMapping("date.base"),
    "date_past": KindMapping("date.less"),
    "date_future": KindMapping("date.greater"),
    "list_type": KindMapping("array.base"),
    "tuple_type": KindMapping("array.base"),
    "set_type": KindMapping("array.base"),
    "frozen_set_type": KindMapping("array.base"),
    "dict_type": KindMapping("object.base"),
    "model_type": KindMapping("object.base"),
    "model_attributes_type": KindMapping("object.base"),
    "dataclass_type": KindMapping("object.base"),
    "extra_forbidden": KindMapping("object.unknown"),
    "bytes_type": KindMapping("binary.base"),
    "bytes_too_short": KindMapping("binary.min", "min_length"),
    "bytes_too_long": KindMapping("binary.max", "max_length"),
    "union_tag_invalid": KindMapping("alternatives.types"),
    "union_tag_not_found": KindMapping("alternatives.types"),
}

# too_short / too_long apply to every collection; the field_type ctx tells them apart
_SIZE_KINDS: Mapping[str, tuple[str, str]] = {
    "too_short": ("min", "min_length"),
    "too_long": ("max", "max_length"),
}


def failures_from_pydantic(error: ValidationError) -> list[FailureItem]:
    """Convert every error in ``error`` to a FailureItem, keeping pydantic's order."""
    details = error.errors(include_url=False, include_input=False)
    items = [failure_from_details(detail) for detail in details]
    logger.debug("Adapted pydantic errors", title=error.title, count=len(items))
    return items


def failure_from_details(detail: ErrorDetails) -> FailureItem:
    error_type = detail.get("type", "")
    context: dict[str, object] = dict(detail.get("ctx") or {})
    kind = error_type

    mapping = PYDANTIC_KINDS.get(error_type)
    if mapping is not None:
        kind = mapping.kind
        if mapping.limit_key is not None and mapping.limit_key in context:
            context["limit"] = context[mapping.limit_key]
    elif error_type in _SIZE_KINDS:
        suffix, limit_key = _SIZE_KINDS[error_type]
        family = "object" if context.get("field_type") == "Dictionary" else "array"
        kind = f"{family}.{suffix}"
        if limit_key in context:
            context["limit"] = context[limit_key]
    else:
        logger.trace("Unmapped pydantic error type", type=error_type)

    if kind == "any.only" and "expected" in context:
        context["valids"] = context["expected"]

    if "msg" in detail:
        context.setdefault("message", detail["msg"])

    path = tuple(detail.get("loc") or ()) or ("value",)
    return FailureItem(path=path, kind=kind or "any.invalid", context=context)
