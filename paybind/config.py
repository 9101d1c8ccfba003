"""
Configuration for paybind.

ClientConfig holds client-wide defaults. RequestOptions is the per-call
options bag forwarded to the transport.

Supported environment variables:
- STRIPE_API_KEY: secret or restricted API key
- STRIPE_API_BASE: API base URL (default: https://api.stripe.com/v1)
- STRIPE_API_VERSION: pinned API version sent as Stripe-Version
"""

import os
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from paybind.exceptions import ConfigurationError

DEFAULT_API_BASE = "https://api.stripe.com/v1"


def check_api_key(key: Optional[str]) -> Optional[str]:
    """Only secret and restricted keys may authenticate server-side calls."""
    if key and not key.startswith(("sk_", "rk_")):
        raise ValueError("API key must start with 'sk_' or 'rk_'")
    return key


class ClientConfig(BaseModel):
    """SDK client configuration"""

    api_key: Optional[str] = Field(
        default_factory=lambda: os.getenv("STRIPE_API_KEY") or None,
        validate_default=True,
        description="Secret (sk_) or restricted (rk_) API key",
    )
    api_base: str = Field(
        default_factory=lambda: os.getenv("STRIPE_API_BASE", DEFAULT_API_BASE),
        validate_default=True,
        description="API base URL",
    )
    api_version: Optional[str] = Field(
        default_factory=lambda: os.getenv("STRIPE_API_VERSION") or None,
        description="API version sent as Stripe-Version",
    )
    timeout_connect: float = Field(5.0, description="Connection timeout in seconds")
    timeout_read: float = Field(30.0, description="Read timeout in seconds")
    max_network_retries: int = Field(0, description="Transport-level retries")
    retry_backoff_factor: float = Field(0.5, description="Retry backoff factor")
    verify_ssl: bool = Field(True, description="Verify SSL certificates")
    debug: bool = Field(False, description="Enable debug logging")

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v):
        return check_api_key(v)

    @field_validator("api_base")
    @classmethod
    def strip_api_base(cls, v):
        return v.rstrip("/")

    def validate_settings(self) -> None:
        """
        Check values pydantic cannot express as field types.

        Raises:
            ConfigurationError: If a setting is unusable
        """
        if not self.api_base:
            raise ConfigurationError("api_base is required")
        if self.timeout_connect <= 0:
            raise ConfigurationError("timeout_connect must be positive")
        if self.timeout_read <= 0:
            raise ConfigurationError("timeout_read must be positive")
        if self.max_network_retries < 0:
            raise ConfigurationError("max_network_retries must not be negative")

    def __repr__(self) -> str:
        return (
            f"ClientConfig(api_base={self.api_base!r}, "
            f"api_key=***REDACTED***, "
            f"api_version={self.api_version!r})"
        )


class RequestOptions(BaseModel):
    """Per-call transport overrides"""

    model_config = ConfigDict(frozen=True, extra="forbid")

    api_key: Optional[str] = None
    api_base: Optional[str] = None
    api_version: Optional[str] = None
    connect_account: Optional[str] = None
    idempotency_key: Optional[str] = None
    expand: List[str] = Field(default_factory=list)
    headers: Dict[str, str] = Field(default_factory=dict)
    timeout: Optional[float] = None

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v):
        return check_api_key(v)

    @classmethod
    def coerce(
        cls, opts: Union["RequestOptions", Mapping[str, Any], None]
    ) -> "RequestOptions":
        """
        Build options from a mapping, an instance, or nothing.

        Raises:
            ConfigurationError: On unknown or malformed option keys
        """
        if opts is None:
            return cls()
        if isinstance(opts, cls):
            return opts
        try:
            return cls.model_validate(dict(opts))
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid request options: {e}") from e
