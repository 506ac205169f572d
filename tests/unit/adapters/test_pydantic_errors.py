from __future__ import annotations

from typing import Literal

import pytest
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from humanerr.adapters import failure_from_details, failures_from_pydantic
from humanerr.formatting import format_errors


class Item(BaseModel):
    sku: str


class Signup(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=3)
    age: int = Field(ge=18)
    email: str
    role: Literal["admin", "member"] = "member"
    tags: list[str] = Field(default_factory=list, min_length=1)
    items: list[Item] = Field(default_factory=list)


def _errors(data: dict[str, object]) -> ValidationError:
    with pytest.raises(ValidationError) as exc_info:
        Signup.model_validate(data)
    return exc_info.value


def test_adapts_kinds_paths_and_limits() -> None:
    error = _errors({"name": "ab", "age": 10, "tags": ["x"]})

    items = failures_from_pydantic(error)

    by_field = {item.field_key: item for item in items}
    assert by_field["name"].kind == "string.min"
    assert by_field["name"].context["limit"] == 3
    assert by_field["name"].context["min_length"] == 3
    assert by_field["age"].kind == "number.min"
    assert by_field["age"].context["limit"] == 18
    assert by_field["email"].kind == "any.required"


def test_preserves_pydantic_order() -> None:
    error = _errors({"name": "ab", "age": 10, "tags": ["x"]})

    items = failures_from_pydantic(error)

    assert [item.path for item in items] == [tuple(detail["loc"]) for detail in error.errors()]


def test_collection_sizes_and_nested_paths() -> None:
    error = _errors({"name": "abc", "age": 20, "email": "a@b.c", "tags": [], "items": [{}]})

    items = failures_from_pydantic(error)

    by_field = {item.field_key: item for item in items}
    assert by_field["tags"].kind == "array.min"
    assert by_field["tags"].context["limit"] == 1
    assert by_field["items.0.sku"].kind == "any.required"


def test_literal_and_extra_keys() -> None:
    error = _errors({"name": "abc", "age": 20, "email": "a@b.c", "tags": ["x"], "role": "owner", "extra": 1})

    items = failures_from_pydantic(error)

    by_field = {item.field_key: item for item in items}
    assert by_field["role"].kind == "any.only"
    assert "admin" in str(by_field["role"].context["valids"])
    assert by_field["extra"].kind == "object.unknown"


def test_adapted_failures_format_to_default_messages() -> None:
    error = _errors({"name": "ab", "age": 10, "email": "a@b.c", "tags": []})

    messages = {error.field: error.message for error in format_errors(failures_from_pydantic(error))}

    assert messages == {
        "name": "Name must have at least 3 characters.",
        "age": "Age must be greater than or equal to 18.",
        "tags": "Tags must contain at least 1 items.",
    }


def test_root_level_error_gets_value_path() -> None:
    with pytest.raises(ValidationError) as exc_info:
        TypeAdapter(int).validate_python("not a number")

    [item] = failures_from_pydantic(exc_info.value)

    assert item.path == ("value",)
    assert item.kind == "number.base"


def test_unmapped_type_passes_through_with_message() -> None:
    item = failure_from_details({"type": "custom_thing", "loc": ("x",), "msg": "boom", "input": 1})

    assert item.kind == "custom_thing"
    assert item.context == {"message": "boom"}
