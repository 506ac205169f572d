"""humanerr - human-readable messages for structured validation failures.

By default, humanerr's internal logging is disabled when used as a library.
Library users can enable logging by calling humanerr.enable_logging().
"""

from humanerr.common import disable_library_logging, enable_library_logging
from humanerr.formatting import (
    ErrorReport,
    FailureItem,
    FailureRecord,
    FormattedError,
    build_report,
    format_errors,
    resolve_template,
)
from humanerr.messages import DEFAULT_MESSAGES, MessageTable, merge_messages
from humanerr.validator import HumanValidator, ValidationOutcome

disable_library_logging()

enable_logging = enable_library_logging

__all__ = [
    "DEFAULT_MESSAGES",
    "ErrorReport",
    "FailureItem",
    "FailureRecord",
    "FormattedError",
    "HumanValidator",
    "MessageTable",
    "ValidationOutcome",
    "build_report",
    "enable_logging",
    "format_errors",
    "merge_messages",
    "resolve_template",
]
