"""
Tests for configuration
"""

import pytest
from pydantic import ValidationError

from paybind.config import DEFAULT_API_BASE, ClientConfig, RequestOptions
from paybind.exceptions import ConfigurationError


def test_config_from_env(monkeypatch):
    monkeypatch.setenv("STRIPE_API_KEY", "sk_test_env_key")
    monkeypatch.setenv("STRIPE_API_BASE", "https://stripe.test.local/v1/")
    monkeypatch.setenv("STRIPE_API_VERSION", "2019-02-19")

    config = ClientConfig()

    assert config.api_key == "sk_test_env_key"
    assert config.api_base == "https://stripe.test.local/v1"
    assert config.api_version == "2019-02-19"


def test_config_defaults(monkeypatch):
    monkeypatch.delenv("STRIPE_API_KEY", raising=False)
    monkeypatch.delenv("STRIPE_API_BASE", raising=False)
    monkeypatch.delenv("STRIPE_API_VERSION", raising=False)

    config = ClientConfig()

    assert config.api_key is None
    assert config.api_base == DEFAULT_API_BASE
    assert config.api_version is None
    assert config.max_network_retries == 0


def test_config_api_key_format():
    with pytest.raises(ValidationError, match="API key must start with"):
        ClientConfig(api_key="pk_test_123")

    ClientConfig(api_key="sk_test_123")
    ClientConfig(api_key="rk_live_123")


def test_config_env_api_key_is_validated(monkeypatch):
    monkeypatch.setenv("STRIPE_API_KEY", "invalid_key")
    with pytest.raises(ValidationError):
        ClientConfig()


@pytest.mark.parametrize(
    "kwargs,message",
    [
        ({"api_base": ""}, "api_base is required"),
        ({"timeout_connect": 0}, "timeout_connect must be positive"),
        ({"timeout_read": -1}, "timeout_read must be positive"),
        ({"max_network_retries": -1}, "max_network_retries must not be negative"),
    ],
)
def test_validate_settings(kwargs, message):
    config = ClientConfig(api_key="sk_test_123", **kwargs)
    with pytest.raises(ConfigurationError, match=message):
        config.validate_settings()


def test_repr_redacts_api_key():
    config = ClientConfig(api_key="sk_test_secret")
    assert "sk_test_secret" not in repr(config)
    assert "***REDACTED***" in repr(config)


def test_request_options_coerce():
    assert RequestOptions.coerce(None) == RequestOptions()

    opts = RequestOptions.coerce({"expand": ["customer"], "timeout": 5})
    assert opts.expand == ["customer"]
    assert opts.timeout == 5.0

    assert RequestOptions.coerce(opts) is opts


def test_request_options_reject_unknown_keys():
    with pytest.raises(ConfigurationError):
        RequestOptions.coerce({"stripe_account": "acct_1"})


@pytest.mark.parametrize("opts", [["api_key"], "api_key", 42])
def test_request_options_reject_non_mappings(opts):
    with pytest.raises(ConfigurationError, match="Invalid request options"):
        RequestOptions.coerce(opts)


@pytest.mark.parametrize("key", ["pk_live_123", "live_123"])
def test_request_options_api_key_prefix(key):
    with pytest.raises(ConfigurationError, match="must start with 'sk_' or 'rk_'"):
        RequestOptions.coerce({"api_key": key})


def test_request_options_accept_restricted_key():
    assert RequestOptions.coerce({"api_key": "rk_test_123"}).api_key == "rk_test_123"
