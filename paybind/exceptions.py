"""
paybind exceptions

Every failure surfaces as a subclass of PaybindError. Each one carries an
ErrorKind so callers can branch on the family without matching classes.
"""

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class ErrorKind(str, Enum):
    """Error families"""

    INVALID_IDENTIFIER = "invalid_identifier"
    CLIENT_ERROR = "client_error"
    SERVICE_ERROR = "service_error"
    CONNECTIVITY_ERROR = "connectivity_error"


class ErrorRecord(BaseModel):
    """Structured description of a failed call"""

    model_config = ConfigDict(frozen=True)

    kind: ErrorKind
    message: str
    status_code: Optional[int] = None
    error_type: Optional[str] = None
    code: Optional[str] = None
    param: Optional[str] = None
    decline_code: Optional[str] = None
    request_id: Optional[str] = None
    body: Dict[str, Any] = Field(default_factory=dict)


class PaybindError(Exception):
    """Base exception for paybind"""

    kind: ErrorKind = ErrorKind.CLIENT_ERROR

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Optional[Dict[str, Any]] = None,
        request_id: Optional[str] = None,
        error_type: Optional[str] = None,
        code: Optional[str] = None,
        param: Optional[str] = None,
        decline_code: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body or {}
        self.request_id = request_id
        self.error_type = error_type
        self.code = code
        self.param = param
        self.decline_code = decline_code

    @property
    def record(self) -> ErrorRecord:
        return ErrorRecord(
            kind=self.kind,
            message=self.message,
            status_code=self.status_code,
            error_type=self.error_type,
            code=self.code,
            param=self.param,
            decline_code=self.decline_code,
            request_id=self.request_id,
            body=self.body,
        )

    def __str__(self) -> str:
        parts = []
        if self.status_code is not None:
            parts.append(f"[{self.status_code}]")
        parts.append(self.message)
        if self.request_id:
            parts.append(f"(request_id: {self.request_id})")
        return " ".join(parts)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self.message!r}, "
            f"status_code={self.status_code}, "
            f"request_id={self.request_id!r})"
        )


class InvalidIdentifierError(PaybindError):
    """
    Missing or empty identifier.

    Raised before any request is sent.
    """

    kind = ErrorKind.INVALID_IDENTIFIER


class ConfigurationError(PaybindError):
    """SDK configuration error"""

    pass


class ClientError(PaybindError):
    """The API rejected the request (4xx)"""

    kind = ErrorKind.CLIENT_ERROR


class InvalidRequestError(ClientError):
    """Invalid parameters (400)"""

    pass


class AuthenticationError(ClientError):
    """Missing or invalid API key (401)"""

    pass


class CardError(ClientError):
    """The card or payment method was declined (402)"""

    pass


class PermissionDeniedError(ClientError):
    """The key lacks access to the resource (403)"""

    pass


class NotFoundError(ClientError):
    """Unknown resource (404)"""

    pass


class IdempotencyError(ClientError):
    """Idempotency key reused with different parameters (409)"""

    pass


class RateLimitError(ClientError):
    """Too many requests (429)"""

    pass


class ServiceError(PaybindError):
    """The API failed to process the request (5xx or unreadable response)"""

    kind = ErrorKind.SERVICE_ERROR


class ConnectivityError(PaybindError):
    """
    Network connectivity error.

    Raised when the request never produced an HTTP response.
    """

    kind = ErrorKind.CONNECTIVITY_ERROR


class TimeoutError(ConnectivityError):
    """Request timeout error"""

    pass
