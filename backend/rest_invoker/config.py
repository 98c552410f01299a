"""Environment-backed defaults."""

from __future__ import annotations

import os

from pydantic import BaseModel


class Settings(BaseModel):
    # Request defaults
    default_method: str = os.getenv("REST_INVOKER_DEFAULT_METHOD", "GET")
    default_content_type: str = os.getenv("REST_INVOKER_CONTENT_TYPE", "application/json")

    # Logging
    log_level: str = os.getenv("REST_INVOKER_LOG_LEVEL", "INFO")


settings = Settings()
