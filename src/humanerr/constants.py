"""Application-wide constants."""

from __future__ import annotations

APP_NAME = "humanerr"
ENV_PREFIX = "HUMANERR_"
