"""Options and output helpers shared by CLI commands."""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer
import yaml
from result import is_err

from humanerr.messages import MessagesError, MessageTable, load_effective_messages
from humanerr.settings import Settings


class OutputFormat(str, Enum):
    """Serialization used for command output."""

    JSON = "json"
    YAML = "yaml"


FormatOption = Annotated[
    OutputFormat,
    typer.Option("--format", "-f", show_default=True, case_sensitive=False, help="Output format (yaml or json)."),
]
MessagesOption = Annotated[
    Path | None,
    typer.Option(
        "--messages",
        "-m",
        help="YAML or JSON file of custom templates merged over the defaults.",
    ),
]


def resolve_messages(ctx: typer.Context, messages_file: Path | None) -> MessageTable:
    """Load the effective table or exit with code 1."""
    settings = ctx.obj if isinstance(ctx.obj, Settings) else Settings()
    result = load_effective_messages(messages_file or settings.messages_file)
    if is_err(result):
        handle_messages_error(result.err_value)
        raise typer.Exit(code=1)
    return result.ok_value


def format_payload(payload: object, format: OutputFormat) -> str:
    if format is OutputFormat.JSON:
        return json.dumps(payload, indent=2, ensure_ascii=False)
    return yaml.safe_dump(payload, sort_keys=False, allow_unicode=True)


def handle_messages_error(error: MessagesError) -> None:
    message = error.message
    expected_path = getattr(error, "expected_path", None)
    error_path = getattr(error, "path", None)
    if expected_path is not None:
        message = f"{message} (expected at {expected_path})"
    elif error_path is not None:
        message = f"{message} ({error_path})"

    typer.secho(message, err=True, fg=typer.colors.RED)
