"""
paybind - typed Python binding for the Stripe payment intents API
"""

from paybind.__version__ import __version__
from paybind.client import ApiClient
from paybind.config import ClientConfig, RequestOptions
from paybind.exceptions import (
    AuthenticationError,
    CardError,
    ClientError,
    ConfigurationError,
    ConnectivityError,
    ErrorKind,
    ErrorRecord,
    IdempotencyError,
    InvalidIdentifierError,
    InvalidRequestError,
    NotFoundError,
    PaybindError,
    PermissionDeniedError,
    RateLimitError,
    ServiceError,
    TimeoutError,
)
from paybind.models import ApiObject, ListObject, PaymentIntent
from paybind.request import Request
from paybind.result import attempt

__all__ = [
    "ApiClient",
    "ClientConfig",
    "RequestOptions",
    "Request",
    "ApiObject",
    "ListObject",
    "PaymentIntent",
    "attempt",
    "ErrorKind",
    "ErrorRecord",
    "PaybindError",
    "InvalidIdentifierError",
    "ConfigurationError",
    "ClientError",
    "InvalidRequestError",
    "AuthenticationError",
    "CardError",
    "PermissionDeniedError",
    "NotFoundError",
    "IdempotencyError",
    "RateLimitError",
    "ServiceError",
    "ConnectivityError",
    "TimeoutError",
    "__version__",
]
