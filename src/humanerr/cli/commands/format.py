from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
import yaml
from pydantic import TypeAdapter, ValidationError
from result import Err, Ok, Result, is_err

from humanerr.common import create_logger
from humanerr.formatting import FailureItem, build_report

from .shared import FormatOption, MessagesOption, OutputFormat, format_payload, resolve_messages

logger = create_logger("cli.format")

FailuresArgument = Annotated[
    Path,
    typer.Argument(help="YAML or JSON file with a list of {path, kind, context} failure records."),
]
LabelOption = Annotated[
    list[str] | None,
    typer.Option("--label", "-l", help="Display label for a field, as FIELD=LABEL. Repeatable."),
]
GroupOption = Annotated[
    bool,
    typer.Option("--group", help="Group messages per field instead of listing each error."),
]

_FAILURES = TypeAdapter(list[FailureItem])


def format_failures(
    ctx: typer.Context,
    failures: FailuresArgument,
    messages: MessagesOption = None,
    label: LabelOption = None,
    format: FormatOption = OutputFormat.JSON,
    group: GroupOption = False,
) -> None:
    """Format validation failures read from a file."""
    table = resolve_messages(ctx, messages)

    loaded = load_failures(failures)
    if is_err(loaded):
        typer.secho(loaded.err_value, err=True, fg=typer.colors.RED)
        raise typer.Exit(code=1)

    report = build_report(loaded.ok_value, table, labels=_parse_labels(label or []))
    payload: object = report.by_field() if group else [error.model_dump() for error in report]
    typer.echo(format_payload(payload, format))


def load_failures(path: Path) -> Result[list[FailureItem], str]:
    """Read failure records; a mapping with a ``details`` list is accepted as well."""
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        return Err(f"Cannot read failures file: {exc} ({path})")
    except yaml.YAMLError as exc:
        return Err(f"Invalid failures file: {exc} ({path})")

    if isinstance(data, dict) and "details" in data:
        data = data["details"]
    if data is None:
        data = []

    try:
        items = _FAILURES.validate_python(data)
    except ValidationError as exc:
        first = exc.errors()[0]
        location = ".".join(str(part) for part in first.get("loc", ()))
        return Err(f"Invalid failure record at {location or 'root'}: {first.get('msg')} ({path})")

    logger.debug("Loaded failure records", path=str(path), count=len(items))
    return Ok(items)


def _parse_labels(entries: list[str]) -> dict[str, str]:
    labels: dict[str, str] = {}
    for entry in entries:
        field, separator, text = entry.partition("=")
        if not separator or not field:
            raise typer.BadParameter(f"Expected FIELD=LABEL, got '{entry}'", param_hint="--label")
        labels[field] = text
    return labels
