"""
Tests for utilities
"""

import re

import pytest
import requests

from paybind.http.requests_adapter import RequestsAdapter
from paybind.utils import flatten_params, make_idempotency_key, requests_session_with_retries


def test_flatten_scalars():
    assert flatten_params({"amount": 2000, "confirm": True, "capture": False}) == [
        ("amount", "2000"),
        ("confirm", "true"),
        ("capture", "false"),
    ]


def test_flatten_nested():
    params = {
        "metadata": {"order_id": "6735"},
        "payment_method_types": ["card", "sepa_debit"],
        "items": [{"price": "p_1", "quantity": 2}],
    }

    assert flatten_params(params) == [
        ("metadata[order_id]", "6735"),
        ("payment_method_types[0]", "card"),
        ("payment_method_types[1]", "sepa_debit"),
        ("items[0][price]", "p_1"),
        ("items[0][quantity]", "2"),
    ]


def test_flatten_empty_values_unset_fields():
    assert flatten_params({"description": None, "metadata": {}, "tags": []}) == [
        ("description", ""),
        ("metadata", ""),
        ("tags", ""),
    ]


def test_make_idempotency_key_passthrough():
    assert make_idempotency_key("order-12345") == "order-12345"


def test_make_idempotency_key_generated():
    key = make_idempotency_key()
    assert re.match(r"^paybind-\d+-[0-9a-f]{24}$", key)
    assert key != make_idempotency_key()


def test_make_idempotency_key_too_long():
    with pytest.raises(ValueError, match="too long"):
        make_idempotency_key("x" * 256)


def test_session_retries():
    session = requests_session_with_retries(total=2, backoff_factor=0.1)
    retries = session.get_adapter("https://api.stripe.com").max_retries

    assert retries.total == 2
    assert 429 in retries.status_forcelist
    assert "POST" in retries.allowed_methods


def test_requests_adapter_retry_policy():
    """The retry count lives on the mounted session adapter only"""
    adapter = RequestsAdapter(max_retries=3, backoff_factor=0.2)
    retries = adapter.session.get_adapter("https://api.stripe.com").max_retries

    assert retries.total == 3
    assert retries.backoff_factor == 0.2
    assert not hasattr(adapter, "max_retries")


def test_requests_adapter_keeps_given_session():
    session = requests.Session()
    adapter = RequestsAdapter(session=session, verify_ssl=False)

    assert adapter.session is session
    assert session.verify is False
