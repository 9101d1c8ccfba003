"""
Tests for the request builder
"""

from typing import Optional

import pytest
from pydantic import BaseModel, ValidationError

from paybind.config import RequestOptions
from paybind.exceptions import ConfigurationError, ErrorKind, InvalidIdentifierError
from paybind.models import PaymentIntent
from paybind.request import (
    cast_to_id,
    get_id,
    make_request,
    new_request,
    put_endpoint,
    put_method,
    put_param,
    put_params,
)


class CaptureParams(BaseModel):
    amount_to_capture: int
    application_fee_amount: Optional[int] = None


def test_new_request_defaults():
    """A fresh request is an empty GET carrying the options bag"""
    request = new_request({"api_key": "sk_test_other", "connect_account": "acct_1"})

    assert request.method == "GET"
    assert request.endpoint == ""
    assert request.params == {}
    assert request.options.api_key == "sk_test_other"
    assert request.options.connect_account == "acct_1"


def test_new_request_accepts_options_instance():
    opts = RequestOptions(idempotency_key="order-1")
    assert new_request(opts).options is opts


def test_new_request_rejects_unknown_options():
    with pytest.raises(ConfigurationError, match="Invalid request options"):
        new_request({"api_kee": "sk_test_123"})


def test_builder_steps_return_new_requests():
    """No step modifies the request it was given"""
    base = new_request()
    with_endpoint = put_endpoint(base, "payment_intents")
    with_method = put_method(with_endpoint, "post")
    with_params = put_params(with_method, {"amount": 100})

    assert base.endpoint == ""
    assert with_endpoint.method == "GET"
    assert with_method.params == {}
    assert (with_params.method, with_params.endpoint, with_params.params) == (
        "POST",
        "payment_intents",
        {"amount": 100},
    )


def test_request_is_frozen():
    request = new_request()
    with pytest.raises(ValidationError):
        request.method = "POST"


def test_put_endpoint_strips_leading_slash():
    assert put_endpoint(new_request(), "/payment_intents").endpoint == "payment_intents"


def test_put_method_normalizes_case():
    assert put_method(new_request(), "delete").method == "DELETE"


def test_put_method_rejects_unknown_verbs():
    with pytest.raises(ValueError, match="Unsupported HTTP method"):
        put_method(new_request(), "PATCH")


def test_put_params_merges_in_order():
    request = put_params(new_request(), {"amount": 100, "currency": "usd"})
    request = put_params(request, {"amount": 200, "description": "Order 1"})

    assert request.params == {"amount": 200, "currency": "usd", "description": "Order 1"}
    assert list(request.params) == ["amount", "currency", "description"]


def test_put_params_none_is_a_no_op():
    request = new_request()
    assert put_params(request, None) is request


def test_put_params_dumps_models_without_nones():
    request = put_params(new_request(), CaptureParams(amount_to_capture=500))
    assert request.params == {"amount_to_capture": 500}


def test_put_param():
    request = put_param(new_request(), "limit", 3)
    assert request.params == {"limit": 3}


def test_cast_to_id_replaces_records():
    intent = PaymentIntent(id="pi_last")
    request = put_params(new_request(), {"starting_after": intent, "limit": 10})
    request = cast_to_id(request, ["starting_after", "ending_before"])

    assert request.params == {"starting_after": "pi_last", "limit": 10}


def test_cast_to_id_leaves_ids_alone():
    request = put_params(new_request(), {"ending_before": "pi_first"})
    assert cast_to_id(request, ["ending_before"]).params == {"ending_before": "pi_first"}


@pytest.mark.parametrize(
    "value",
    ["pi_123", PaymentIntent(id="pi_123"), {"id": "pi_123", "object": "payment_intent"}],
)
def test_get_id(value):
    assert get_id(value) == "pi_123"


@pytest.mark.parametrize("value", ["", "   ", None, PaymentIntent(), {"amount": 1}])
def test_get_id_rejects_missing_ids(value):
    with pytest.raises(InvalidIdentifierError) as exc_info:
        get_id(value)

    assert exc_info.value.kind == ErrorKind.INVALID_IDENTIFIER


def test_make_request_hands_off_to_client():
    class RecordingClient:
        def __init__(self):
            self.sent = []

        def send(self, request):
            self.sent.append(request)
            return "decoded"

    client = RecordingClient()
    request = put_endpoint(new_request(), "payment_intents")

    assert make_request(request, client) == "decoded"
    assert client.sent == [request]
