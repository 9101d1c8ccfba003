"""
Response decoding: HTTP status and body to records or exceptions.
"""

import json
import logging
from typing import Any, Dict, Mapping, Optional, Type

from pydantic import ValidationError

from paybind.exceptions import (
    AuthenticationError,
    CardError,
    ClientError,
    IdempotencyError,
    InvalidRequestError,
    NotFoundError,
    PaybindError,
    PermissionDeniedError,
    RateLimitError,
    ServiceError,
)
from paybind.models import convert

logger = logging.getLogger("paybind.decoder")

STATUS_ERRORS: Dict[int, Type[ClientError]] = {
    400: InvalidRequestError,
    401: AuthenticationError,
    402: CardError,
    403: PermissionDeniedError,
    404: NotFoundError,
    409: IdempotencyError,
    429: RateLimitError,
}


def header_value(headers: Mapping[str, str], name: str) -> Optional[str]:
    """Case-insensitive header lookup."""
    lowered = name.lower()
    for key, value in headers.items():
        if key.lower() == lowered:
            return value
    return None


def error_class_for_status(status: int) -> Type[PaybindError]:
    if status in STATUS_ERRORS:
        return STATUS_ERRORS[status]
    if 400 <= status < 500:
        return ClientError
    return ServiceError


def _parse_body(text: str) -> Any:
    if not text:
        return {}
    return json.loads(text)


def build_error(status: int, text: str, headers: Mapping[str, str]) -> PaybindError:
    """
    Build the exception for a non-2xx response.

    Message, type, code, param and decline code come from the body's
    ``error`` object when present.
    """
    request_id = header_value(headers, "Request-Id")

    try:
        body = _parse_body(text)
    except ValueError:
        body = {"raw": text}
    if not isinstance(body, dict):
        body = {"raw": body}

    error = body.get("error")
    if not isinstance(error, dict):
        error = {}

    cls = error_class_for_status(status)
    return cls(
        error.get("message") or body.get("message") or f"API returned {status}",
        status_code=status,
        body=body,
        request_id=request_id,
        error_type=error.get("type"),
        code=error.get("code"),
        param=error.get("param"),
        decline_code=error.get("decline_code"),
    )


def decode_response(status: int, text: str, headers: Mapping[str, str]) -> Any:
    """
    Decode a raw response.

    Returns:
        A record, a ListObject, or plain decoded JSON for untyped bodies

    Raises:
        ClientError: On 4xx responses
        ServiceError: On 5xx or other non-2xx responses, or a body that is not
            JSON or does not fit the record types
    """
    if not (200 <= status < 300):
        raise build_error(status, text, headers)

    try:
        body = _parse_body(text)
    except ValueError as e:
        logger.error("Invalid JSON in %d response: %s", status, text[:200])
        raise ServiceError(
            f"Invalid JSON in response body: {e}",
            status_code=status,
            body={"raw": text},
            request_id=header_value(headers, "Request-Id"),
        ) from e

    try:
        return convert(body)
    except ValidationError as e:
        logger.error("Unexpected %d response shape: %s", status, e)
        raise ServiceError(
            f"Response body does not match the expected shape: {e}",
            status_code=status,
            body=body if isinstance(body, dict) else {"raw": body},
            request_id=header_value(headers, "Request-Id"),
        ) from e
