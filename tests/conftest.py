"""
Pytest configuration and fixtures
"""

from typing import Any, Dict, Optional, Tuple

import pytest

from paybind import ApiClient, ClientConfig
from paybind.http.adapter import FormPairs, HTTPAdapter, Timeout

API_BASE = "https://api.test.local/v1"

INTENT = {
    "id": "pi_123",
    "object": "payment_intent",
    "amount": 2000,
    "currency": "usd",
    "status": "requires_payment_method",
    "livemode": False,
    "metadata": {"order_id": "6735"},
    "payment_method_types": ["card"],
}


class DummyAdapter(HTTPAdapter):
    """In-memory HTTP adapter recording every request."""

    def __init__(self):
        self.requests = []
        self.response_data = (
            '{"id":"pi_123","object":"payment_intent","amount":2000,"currency":"usd"}'
        )
        self.response_status = 200
        self.response_headers = {"Request-Id": "req_test_123"}

    @property
    def last_request(self) -> Optional[Dict[str, Any]]:
        return self.requests[-1] if self.requests else None

    def send(
        self,
        method: str,
        url: str,
        headers: Dict[str, str],
        params: Optional[FormPairs] = None,
        data: Optional[FormPairs] = None,
        timeout: Timeout = 30.0,
    ) -> Tuple[int, str, Dict[str, str]]:
        self.requests.append(
            {
                "method": method,
                "url": url,
                "headers": headers,
                "params": params,
                "data": data,
                "timeout": timeout,
            }
        )
        return self.response_status, self.response_data, self.response_headers


@pytest.fixture
def intent_payload():
    """A payment intent as the API returns it"""
    return dict(INTENT)


@pytest.fixture
def test_config():
    """Configuration pointing at a fake API host"""
    return ClientConfig(api_key="sk_test_123", api_base=API_BASE)


@pytest.fixture
def adapter():
    return DummyAdapter()


@pytest.fixture
def adapter_client(test_config, adapter):
    """Client whose transport never leaves the process"""
    return ApiClient(test_config, http_adapter=adapter)


@pytest.fixture
def client(test_config):
    """Client on the real requests transport, for use with requests_mock"""
    return ApiClient(test_config)
