from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import BaseModel, Field, ValidationError
from typer.testing import CliRunner

from humanerr import HumanValidator
from humanerr.adapters import failures_from_pydantic
from humanerr.cli.main import app

RUNNER = CliRunner()
pytestmark = pytest.mark.e2e


class Address(BaseModel):
    city: str = Field(min_length=2)


class Customer(BaseModel):
    name: str = Field(max_length=5)
    address: Address
    orders: list[int] = Field(max_length=2)


INVALID = {"name": "Bartholomew", "address": {"city": "X"}, "orders": [1, 2, 3]}


def test_exported_pydantic_failures_format_like_the_validator(tmp_path: Path) -> None:
    with pytest.raises(ValidationError) as exc_info:
        Customer.model_validate(INVALID)
    failures_file = tmp_path / "failures.json"
    failures_file.write_text(
        json.dumps([item.model_dump(mode="json") for item in failures_from_pydantic(exc_info.value)])
    )
    messages_file = tmp_path / "messages.yaml"
    messages_file.write_text("address.city.string.min: City names need {#limit} letters or more\n")

    result = RUNNER.invoke(
        app,
        ["format", str(failures_file), "--messages", str(messages_file), "--group"],
    )

    assert result.exit_code == 0, result.stdout + result.stderr
    from_cli = json.loads(result.stdout)
    from_validator = HumanValidator(
        Customer,
        {"address.city.string.min": "City names need {#limit} letters or more"},
    ).validate(INVALID)
    assert from_cli == from_validator.errors
    assert from_cli == {
        "name": ["Name cannot have more than 5 characters."],
        "address.city": ["City names need 2 letters or more."],
        "orders": ["Orders must contain at most 2 items."],
    }
