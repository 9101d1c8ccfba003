"""
Request builder.

A Request is an immutable descriptor assembled step by step:

    >>> req = new_request({"api_key": "sk_test_123"})
    >>> req = put_endpoint(req, "payment_intents/pi_123/capture")
    >>> req = put_method(req, "post")
    >>> req = put_params(req, {"amount_to_capture": 500})
    >>> make_request(req, client)  # doctest: +SKIP

Every step returns a new Request. Params are not validated here; the API
reports invalid params as errors when the request is sent.
"""

from typing import TYPE_CHECKING, Any, Dict, Iterable, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from paybind.config import RequestOptions
from paybind.exceptions import InvalidIdentifierError
from paybind.models import ApiObject

if TYPE_CHECKING:
    from paybind.client import ApiClient

METHODS = ("GET", "POST", "DELETE")

Params = Union[Mapping[str, Any], BaseModel, None]


class Request(BaseModel):
    """Immutable in-flight request"""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    method: str = "GET"
    endpoint: str = ""
    params: Dict[str, Any] = Field(default_factory=dict)
    options: RequestOptions = Field(default_factory=RequestOptions)


def new_request(opts: Union[RequestOptions, Mapping[str, Any], None] = None) -> Request:
    """Start a request carrying the caller's options bag."""
    return Request(options=RequestOptions.coerce(opts))


def put_endpoint(request: Request, endpoint: str) -> Request:
    return request.model_copy(update={"endpoint": endpoint.lstrip("/")})


def put_method(request: Request, method: str) -> Request:
    """
    Set the HTTP method.

    Raises:
        ValueError: If method is not GET, POST or DELETE
    """
    verb = method.upper()
    if verb not in METHODS:
        raise ValueError(f"Unsupported HTTP method: {method}")
    return request.model_copy(update={"method": verb})


def put_params(request: Request, params: Params) -> Request:
    """Merge params into the request; later keys win."""
    if params is None:
        return request
    if isinstance(params, BaseModel):
        params = params.model_dump(exclude_none=True)
    merged = dict(request.params)
    merged.update(params)
    return request.model_copy(update={"params": merged})


def put_param(request: Request, key: str, value: Any) -> Request:
    return put_params(request, {key: value})


def cast_to_id(request: Request, keys: Iterable[str]) -> Request:
    """Replace records found under the given param keys with their ids."""
    params = dict(request.params)
    for key in keys:
        if key in params and params[key] is not None:
            params[key] = get_id(params[key])
    return request.model_copy(update={"params": params})


def get_id(value: Union[str, ApiObject, Mapping[str, Any], None]) -> str:
    """
    Extract an id from an id string or a record.

    Raises:
        InvalidIdentifierError: If no non-empty id can be found
    """
    if isinstance(value, ApiObject):
        value = value.id
    elif isinstance(value, Mapping):
        value = value.get("id")

    if not isinstance(value, str) or not value.strip():
        raise InvalidIdentifierError(f"Invalid identifier: {value!r}")
    return value


def make_request(request: Request, client: "ApiClient") -> Any:
    """Send the request through the client's transport and decoder."""
    return client.send(request)
