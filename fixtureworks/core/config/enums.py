"""Configuration enums for type-safe settings.

These enums inherit from str to keep settings serializable and comparable
against raw environment values.
"""

from enum import Enum


class Environment(str, Enum):
    """Deployment environments.

    Controls environment-specific behavior such as the log format.
    """

    LOCAL = "local"
    TEST = "test"
    DEV = "dev"
    PRD = "prd"


class LogLevel(str, Enum):
    """Log levels accepted by the ``LOG_LEVEL`` setting."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"
