"""Structured logging configuration using structlog.

JSON output for deployed triggers, console output for development.
Audit payloads carry whole documents, so document values are redacted
before they reach a log line.
"""

import re
import sys
from collections.abc import MutableMapping
from typing import Any, cast

import structlog
from structlog.types import EventDict, WrappedLogger

# Keys whose values are never written to logs
SENSITIVE_KEYS: frozenset[str] = frozenset({
    "password",
    "secret",
    "token",
    "api_key",
    "authorization",
    "credential",
    "credentials",
    "connection_url",
    "email",
    "phone",
    # Document payloads
    "old_value",
    "new_value",
    "pre_image",
    "post_image",
    "full_document",
    "full_document_before_change",
})

EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
PHONE_PATTERN = re.compile(r"\+?[\d\s\-\(\)]{10,}")
# Credentials embedded in mongodb:// style URLs
URL_CREDENTIALS_PATTERN = re.compile(r"(?<=://)[^/@\s]+@")

LEVELS: dict[str, int] = {
    "DEBUG": 10,
    "INFO": 20,
    "WARNING": 30,
    "ERROR": 40,
    "CRITICAL": 50,
}


class PIIRedactor:
    """Processor that redacts document values and PII from log events.

    Sensitive keys are replaced wholesale; remaining strings are scanned
    for e-mail addresses, phone numbers and URL credentials.
    """

    def __call__(
        self,
        _logger: WrappedLogger,
        _method_name: str,
        event_dict: EventDict,
    ) -> EventDict:
        return cast(EventDict, self._redact_mapping(event_dict))

    def _redact_mapping(self, data: MutableMapping[str, Any]) -> dict[str, Any]:
        return {
            key: "[REDACTED]" if key.lower() in SENSITIVE_KEYS else self._redact(value)
            for key, value in data.items()
        }

    def _redact(self, value: Any) -> Any:
        if isinstance(value, dict):
            return self._redact_mapping(value)
        if isinstance(value, list):
            return [self._redact(item) for item in value]
        if isinstance(value, str):
            return self._redact_string(value)
        return value

    def _redact_string(self, value: str) -> str:
        value = URL_CREDENTIALS_PATTERN.sub("[CREDENTIALS]@", value)
        value = EMAIL_PATTERN.sub("[EMAIL]", value)
        return PHONE_PATTERN.sub("[PHONE]", value)


def setup_logging(
    level: str = "INFO",
    format: str = "json",
    redact_pii: bool = True,
) -> None:
    """Configure structured logging.

    Args:
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format: "json" for deployed handlers, "console" for development
        redact_pii: Whether to redact document values and PII
    """
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if redact_pii:
        processors.append(PIIRedactor())

    if format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            LEVELS.get(level.upper(), 20)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a logger instance bound to the given name."""
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))
