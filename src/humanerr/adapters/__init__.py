"""Adapters from validation engines to failure items."""

from .pydantic_errors import PYDANTIC_KINDS, failure_from_details, failures_from_pydantic

__all__ = [
    "PYDANTIC_KINDS",
    "failure_from_details",
    "failures_from_pydantic",
]
