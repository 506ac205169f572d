"""Reusable Pydantic field annotations."""

from __future__ import annotations

from typing import Annotated, TypeAlias

from pydantic import Field, StrictStr

NonEmptyString = Annotated[StrictStr, Field(min_length=1, frozen=True)]

# A single path segment: a mapping key or a sequence index
PathSegment: TypeAlias = str | int

__all__ = [
    "NonEmptyString",
    "PathSegment",
]
