"""Application configuration using Pydantic Settings.

Configuration is loaded from environment variables prefixed with
``PAGINATION_``. Optionally, point ``ENV_FILE`` at a local env file (for
development); no env file is read unless it is requested explicitly.
"""

import logging
import os

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_MAX_FIRST = 100
DEFAULT_MAX_LAST = 100


class Settings(BaseSettings):
    """
    Pagination settings with type validation.

    The window maxima are read by paginators when they are constructed, so
    overriding them after import only affects paginators created afterwards.
    """

    model_config = SettingsConfigDict(
        env_file=os.getenv("ENV_FILE") or None, env_prefix="PAGINATION_", extra="ignore"
    )

    # Application
    app_name: str = "relay-pagination"
    app_log_level: str = "INFO"

    # Observability
    observability_structured_logs: bool = True
    metrics_enabled: bool = True

    # Window limits
    max_first: int = Field(default=DEFAULT_MAX_FIRST, ge=0)
    max_last: int = Field(default=DEFAULT_MAX_LAST, ge=0)

    @field_validator("app_log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize the log level and reject names logging does not know."""
        level = str(v).strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"app_log_level must be a logging level name, got '{v}'")
        return level


settings = Settings()
