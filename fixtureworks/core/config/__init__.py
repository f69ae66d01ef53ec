"""Configuration module for fixtureworks.

Usage:
    from fixtureworks.core.config import settings, Environment

    if settings.ENVIRONMENT == Environment.PRD:
        ...
"""

from fixtureworks.core.config.enums import Environment, LogLevel
from fixtureworks.core.config.settings import Settings

__all__ = [
    "Settings",
    "Environment",
    "LogLevel",
    "settings",
]

# Singleton settings instance
settings = Settings()
