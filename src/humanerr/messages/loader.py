"""Message file loading and validation helpers."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError
from result import Err, Ok, Result

from humanerr.common import create_logger

from .defaults import DEFAULT_MESSAGES
from .merger import MessageTable, merge_messages
from .models import (
    MessageCatalog,
    MessagesError,
    MessagesIOError,
    MessagesNotFoundError,
    MessagesValidationError,
    MessagesYamlError,
)

logger = create_logger("messages.loader")


def load_effective_messages(path: Path | None) -> Result[MessageTable, MessagesError]:
    """Merge the templates in ``path`` over the defaults. No path means the defaults."""
    if path is None:
        return Ok(DEFAULT_MESSAGES)
    return load_messages(path).map(merge_messages)


def load_messages(path: Path) -> Result[MessageTable, MessagesError]:
    """Load and validate a YAML or JSON message file."""
    logger.debug("Loading message file", path=str(path))

    if not path.exists() or not path.is_file():
        logger.warning("Message file not found", path=str(path))
        return Err(
            MessagesNotFoundError(
                expected_path=path,
                message="Message file not found.",
            ),
        )

    try:
        raw_text = path.read_text(encoding="utf-8")
    except OSError as exc:
        logger.error("Message file read error", path=str(path), error=str(exc))
        return Err(
            MessagesIOError(
                path=path,
                message=str(exc),
            ),
        )

    try:
        data = yaml.safe_load(raw_text)
    except yaml.YAMLError as exc:
        mark = getattr(exc, "problem_mark", None)
        line = getattr(mark, "line", None)
        column = getattr(mark, "column", None)
        logger.error("Message file YAML error", path=str(path), line=line, column=column)
        return Err(
            MessagesYamlError(
                path=path,
                line=(line + 1) if line is not None else None,
                column=(column + 1) if column is not None else None,
                message=str(exc),
            ),
        )

    if data is None:
        data = {}

    if not isinstance(data, dict):
        logger.error("Message file must be a mapping", path=str(path))
        return Err(
            MessagesValidationError(
                path=path,
                key=None,
                message="Message file root must be a mapping of lookup keys to templates.",
            ),
        )

    try:
        catalog = MessageCatalog.model_validate(data)
    except ValidationError as exc:
        error_details = exc.errors()
        key = None
        message = str(exc)
        if error_details:
            first = error_details[0]
            loc = first.get("loc") or ()
            key = str(loc[0]) if loc else None
            message = first.get("msg", message)
        logger.error("Message file validation error", path=str(path), key=key, error=message)
        return Err(
            MessagesValidationError(
                path=path,
                key=key,
                message=message,
            ),
        )

    templates = catalog.templates()
    logger.debug("Message file validated", path=str(path), entries=len(templates))
    return Ok(templates)
