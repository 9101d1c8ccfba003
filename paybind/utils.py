"""
paybind utilities
"""

import secrets
import time
from typing import Any, Iterable, List, Mapping, Optional, Tuple

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

MAX_IDEMPOTENCY_KEY_LENGTH = 255


def make_idempotency_key(provided: Optional[str] = None) -> str:
    """
    Validate a caller-supplied idempotency key or generate one.

    Raises:
        ValueError: If provided key is longer than 255 characters

    Examples:
        >>> make_idempotency_key("order-12345")
        'order-12345'
        >>> make_idempotency_key()  # doctest: +SKIP
        'paybind-1705420800000-a1b2c3d4e5f6a1b2c3d4e5f6'
    """
    if provided:
        if len(provided) > MAX_IDEMPOTENCY_KEY_LENGTH:
            raise ValueError("Idempotency key too long (max 255 characters)")
        return provided

    ts = int(time.time() * 1000)
    rand = secrets.token_hex(12)
    return f"paybind-{ts}-{rand}"


def _encode_scalar(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def flatten_params(params: Mapping[str, Any], prefix: str = "") -> List[Tuple[str, str]]:
    """
    Flatten nested params into bracketed form pairs.

    Nested mappings become ``a[b]``, lists become ``a[0]``, ``a[1]``. None
    encodes as an empty value.

    Example:
        >>> flatten_params({"metadata": {"order": 7}, "types": ["card"]})
        [('metadata[order]', '7'), ('types[0]', 'card')]
    """
    pairs: List[Tuple[str, str]] = []

    for key, value in params.items():
        name = f"{prefix}[{key}]" if prefix else str(key)
        pairs.extend(_flatten_value(name, value))

    return pairs


def _flatten_value(name: str, value: Any) -> List[Tuple[str, str]]:
    if isinstance(value, Mapping):
        if not value:
            return [(name, "")]
        return flatten_params(value, name)
    if isinstance(value, (list, tuple)):
        if not value:
            return [(name, "")]
        pairs: List[Tuple[str, str]] = []
        for index, item in enumerate(value):
            pairs.extend(_flatten_value(f"{name}[{index}]", item))
        return pairs
    return [(name, _encode_scalar(value))]


def requests_session_with_retries(
    total: int = 0,
    backoff_factor: float = 0.5,
    status_forcelist: Iterable[int] = (429, 500, 502, 503, 504),
) -> requests.Session:
    """
    Create a requests session with automatic retries

    Args:
        total: Maximum number of retries (0 disables retrying)
        backoff_factor: Backoff factor for exponential backoff
        status_forcelist: HTTP status codes to retry on

    Returns:
        Configured requests session
    """
    session = requests.Session()

    retries = Retry(
        total=total,
        backoff_factor=backoff_factor,
        status_forcelist=status_forcelist,
        allowed_methods=frozenset(["GET", "POST", "DELETE"]),
        raise_on_status=False,
        respect_retry_after_header=True,
    )

    adapter = HTTPAdapter(max_retries=retries)
    session.mount("https://", adapter)
    session.mount("http://", adapter)

    return session
