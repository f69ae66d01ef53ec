"""Logging for fixtureworks.

Loggers are stdlib ``logging`` loggers wrapped in a ``ContextualLogger``
adapter that carries a prefix and a set of dimensions. Dimensions are
attached to every record and rendered either as ``key=value`` pairs or as
JSON fields, depending on settings.

Usage:
    from fixtureworks.core.logging import logger

    registry_logger = logger.with_prefix("Registry: ").with_context(component="registry")
    registry_logger.info("Registered 'person'")
"""

from __future__ import annotations

import json
import logging
import sys
from typing import Any, MutableMapping, Optional

from fixtureworks.core.config import settings

ROOT_LOGGER_NAME = "fixtureworks"

# Attributes present on every LogRecord; anything else came in through ``extra``.
_RESERVED_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None)).keys()
) | {"message", "asctime", "dimensions"}


class _JsonFormatter(logging.Formatter):
    """Render a record as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(getattr(record, "dimensions", {}))
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


class _TextFormatter(logging.Formatter):
    """Human-readable formatter that appends dimensions as ``key=value``."""

    def __init__(self) -> None:
        super().__init__("%(asctime)s %(levelname)-8s %(name)s %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        dimensions = getattr(record, "dimensions", {})
        if dimensions:
            rendered = " ".join(f"{key}={value}" for key, value in sorted(dimensions.items()))
            line = f"{line} [{rendered}]"
        return line


class ContextualLogger(logging.LoggerAdapter):
    """Logger adapter carrying a message prefix and contextual dimensions.

    ``with_prefix`` and ``with_context`` return new adapters; the receiver
    is never modified, so a module-level logger can be specialized freely.
    """

    def __init__(
        self,
        logger: logging.Logger,
        prefix: str = "",
        dimensions: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(logger, {})
        self.prefix = prefix
        self.dimensions: dict[str, Any] = dict(dimensions or {})

    def with_prefix(self, prefix: str) -> "ContextualLogger":
        """Return a logger whose messages start with ``prefix``."""
        return ContextualLogger(self.logger, self.prefix + prefix, self.dimensions)

    def with_context(self, **dimensions: Any) -> "ContextualLogger":
        """Return a logger with ``dimensions`` merged into the current ones."""
        return ContextualLogger(self.logger, self.prefix, {**self.dimensions, **dimensions})

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> tuple[Any, MutableMapping[str, Any]]:
        extra = dict(kwargs.get("extra") or {})
        call_dimensions = {k: v for k, v in extra.items() if k not in _RESERVED_RECORD_ATTRS}
        extra["dimensions"] = {**self.dimensions, **call_dimensions}
        kwargs["extra"] = extra
        return f"{self.prefix}{msg}", kwargs


class LoggerConfigurator:
    """Builds configured ``ContextualLogger`` instances."""

    _configured = False

    @classmethod
    def configure_root(cls) -> logging.Logger:
        """Attach the handler to the ``fixtureworks`` logger once."""
        root = logging.getLogger(ROOT_LOGGER_NAME)
        if not cls._configured:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(_JsonFormatter() if settings.use_json_logs else _TextFormatter())
            root.addHandler(handler)
            root.setLevel(settings.LOG_LEVEL.value)
            root.propagate = False
            cls._configured = True
        return root

    @classmethod
    def configure_logger(
        cls, name: str, dimensions: Optional[dict[str, Any]] = None
    ) -> ContextualLogger:
        """Return a contextual logger for ``name`` carrying ``dimensions``.

        Args:
            name: Dotted logger name, normally under ``fixtureworks``.
            dimensions: Key/value pairs attached to every record.

        Returns:
            The configured logger.
        """
        cls.configure_root()
        return ContextualLogger(logging.getLogger(name), dimensions=dimensions)


logger = LoggerConfigurator.configure_logger(ROOT_LOGGER_NAME)
