from __future__ import annotations

import json
from pathlib import Path

import yaml
from result import is_err, is_ok

from humanerr.messages import (
    DEFAULT_MESSAGES,
    MessagesNotFoundError,
    MessagesValidationError,
    MessagesYamlError,
    load_effective_messages,
    load_messages,
)


def _write_yaml(path: Path, data: object) -> None:
    path.write_text(yaml.dump(data))


def test_load_yaml_messages(tmp_path: Path) -> None:
    path = tmp_path / "messages.yaml"
    _write_yaml(path, {"string.min": "Too short", "name.string.min": "Name too short"})

    result = load_messages(path)

    assert is_ok(result)
    assert dict(result.ok_value) == {"string.min": "Too short", "name.string.min": "Name too short"}


def test_load_json_messages(tmp_path: Path) -> None:
    path = tmp_path / "messages.json"
    path.write_text(json.dumps({"number.base": "{#label} is not a number"}))

    result = load_messages(path)

    assert is_ok(result)
    assert result.ok_value["number.base"] == "{#label} is not a number"


def test_null_entries_are_dropped(tmp_path: Path) -> None:
    path = tmp_path / "messages.yaml"
    path.write_text("string.min: ~\nstring.max: Too long\n")

    result = load_messages(path)

    assert is_ok(result)
    assert dict(result.ok_value) == {"string.max": "Too long"}


def test_empty_file_is_empty_table(tmp_path: Path) -> None:
    path = tmp_path / "messages.yaml"
    path.write_text("")

    result = load_messages(path)

    assert is_ok(result)
    assert dict(result.ok_value) == {}


def test_load_missing_file_returns_not_found(tmp_path: Path) -> None:
    missing = tmp_path / "missing.yaml"

    result = load_messages(missing)

    assert is_err(result)
    error = result.err_value
    assert isinstance(error, MessagesNotFoundError)
    assert error.expected_path == missing


def test_load_invalid_yaml(tmp_path: Path) -> None:
    path = tmp_path / "broken.yaml"
    path.write_text("foo: [")

    result = load_messages(path)

    assert is_err(result)
    error = result.err_value
    assert isinstance(error, MessagesYamlError)
    assert error.path == path
    assert error.line is not None
    assert error.message


def test_load_non_mapping_root(tmp_path: Path) -> None:
    path = tmp_path / "list.yaml"
    _write_yaml(path, ["not", "a", "mapping"])

    result = load_messages(path)

    assert is_err(result)
    error = result.err_value
    assert isinstance(error, MessagesValidationError)
    assert error.key is None


def test_load_non_string_template(tmp_path: Path) -> None:
    path = tmp_path / "messages.yaml"
    _write_yaml(path, {"string.min": "ok", "number.max": 5})

    result = load_messages(path)

    assert is_err(result)
    error = result.err_value
    assert isinstance(error, MessagesValidationError)
    assert error.key == "number.max"


def test_effective_messages_default_without_path() -> None:
    result = load_effective_messages(None)

    assert is_ok(result)
    assert result.ok_value is DEFAULT_MESSAGES


def test_effective_messages_merge_file_over_defaults(tmp_path: Path) -> None:
    path = tmp_path / "messages.yaml"
    _write_yaml(path, {"string.min": "Too short"})

    result = load_effective_messages(path)

    assert is_ok(result)
    table = result.ok_value
    assert table["string.min"] == "Too short"
    assert table["string.max"] == DEFAULT_MESSAGES["string.max"]


def test_effective_messages_propagates_errors(tmp_path: Path) -> None:
    result = load_effective_messages(tmp_path / "missing.yaml")

    assert is_err(result)
    assert isinstance(result.err_value, MessagesNotFoundError)
