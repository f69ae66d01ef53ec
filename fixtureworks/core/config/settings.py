"""Settings for fixtureworks.

Uses Pydantic Settings for automatic env var loading. Every variable is
prefixed with ``FIXTUREWORKS_``:

    FIXTUREWORKS_ENVIRONMENT=test
    FIXTUREWORKS_LOG_LEVEL=DEBUG
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from fixtureworks.core.config.enums import Environment, LogLevel


class Settings(BaseSettings):
    """Process-wide settings."""

    model_config = SettingsConfigDict(
        env_prefix="FIXTUREWORKS_",
        extra="ignore",
    )

    ENVIRONMENT: Environment = Field(Environment.LOCAL, description="Deployment environment")
    LOG_LEVEL: LogLevel = Field(LogLevel.INFO, description="Level of the fixtureworks logger")
    LOG_JSON: Optional[bool] = Field(
        None, description="Emit JSON log lines. Unset means: JSON outside local and test"
    )

    @property
    def use_json_logs(self) -> bool:
        """Whether log records should be rendered as JSON."""
        if self.LOG_JSON is not None:
            return self.LOG_JSON
        return self.ENVIRONMENT not in (Environment.LOCAL, Environment.TEST)
