"""Common models and types used across humanerr modules."""

from .fields import NonEmptyString, PathSegment
from .logging import LoggingConfig, create_logger, disable_library_logging, enable_library_logging, setup_cli_logging
from .models import AppInfo

__all__ = [
    "AppInfo",
    "LoggingConfig",
    "NonEmptyString",
    "PathSegment",
    "create_logger",
    "disable_library_logging",
    "enable_library_logging",
    "setup_cli_logging",
]
