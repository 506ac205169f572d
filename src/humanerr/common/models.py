"""Common models used across humanerr."""

from typing import Literal

from pydantic import BaseModel

from humanerr.constants import APP_NAME


class AppInfo(BaseModel):
    project_name: str = APP_NAME
    version: str = "0.1.0"
    environment: Literal["test", "dev", "prod"] = "prod"
