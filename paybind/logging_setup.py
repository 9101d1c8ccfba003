"""
Logging helpers for paybind

Provides a JSON formatter for structured logging output, a plain-text
setup for local debugging, and redaction of secrets in logged payloads.
"""

import json
import logging
import sys
from typing import Any, Dict

SENSITIVE_KEYS = {"api_key", "authorization", "client_secret", "password", "secret", "token"}


class JsonFormatter(logging.Formatter):
    """Formats log records as JSON for structured logging"""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "ts": int(record.created * 1000),  # milliseconds
            "name": record.name,
            "level": record.levelname,
            "msg": record.getMessage(),
        }

        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)

        # Extra fields passed by the client
        for attr in ("request_id", "endpoint", "method", "status"):
            if hasattr(record, attr):
                payload[attr] = getattr(record, attr)

        return json.dumps(payload, default=str)


def setup_structured_logger(level: int = logging.INFO) -> None:
    """
    Configure structured JSON logging for the SDK.

    Args:
        level: Logging level (default: logging.INFO)

    Example:
        >>> from paybind.logging_setup import setup_structured_logger
        >>> setup_structured_logger(logging.DEBUG)
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonFormatter())

    sdk_logger = logging.getLogger("paybind")
    sdk_logger.setLevel(level)
    sdk_logger.handlers = [handler]
    sdk_logger.propagate = False


def setup_logging(debug: bool = False) -> None:
    """
    Plain-text logging for the SDK

    Args:
        debug: Enable debug level logging
    """
    level = logging.DEBUG if debug else logging.INFO

    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("paybind").setLevel(level)


def sanitize_for_logging(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Redact sensitive fields, recursing into nested mappings.

    Example:
        >>> sanitize_for_logging({"api_key": "sk_123", "amount": 100})
        {'api_key': '***REDACTED***', 'amount': 100}
    """
    sanitized = {}

    for key, value in data.items():
        if any(sensitive in str(key).lower() for sensitive in SENSITIVE_KEYS):
            sanitized[key] = "***REDACTED***"
        elif isinstance(value, dict):
            sanitized[key] = sanitize_for_logging(value)
        else:
            sanitized[key] = value

    return sanitized
