"""
Requests-based HTTP adapter (synchronous).
"""

from typing import Dict, Optional, Tuple

import requests

from .adapter import FormPairs, HTTPAdapter, Timeout
from ..exceptions import ConnectivityError, TimeoutError as PaybindTimeoutError
from ..utils import requests_session_with_retries


class RequestsAdapter(HTTPAdapter):
    """
    Synchronous HTTP adapter using requests library.

    Features:
    - Optional retries with exponential backoff
    - Connection pooling via session
    - Configurable timeouts
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        max_retries: int = 0,
        backoff_factor: float = 0.5,
        verify_ssl: bool = True,
    ):
        """
        Initialize requests adapter.

        Args:
            session: Optional requests.Session instance (used as given)
            max_retries: Maximum number of retry attempts
            backoff_factor: Retry backoff factor
            verify_ssl: Verify SSL certificates
        """
        self.session = session or requests_session_with_retries(
            total=max_retries, backoff_factor=backoff_factor
        )
        self.session.verify = verify_ssl

    def send(
        self,
        method: str,
        url: str,
        headers: Dict[str, str],
        params: Optional[FormPairs] = None,
        data: Optional[FormPairs] = None,
        timeout: Timeout = 30.0,
    ) -> Tuple[int, str, Dict[str, str]]:
        try:
            response = self.session.request(
                method=method,
                url=url,
                headers=headers,
                params=params,
                data=data,
                timeout=timeout,
            )

            return (
                response.status_code,
                response.text,
                dict(response.headers),
            )

        except requests.exceptions.Timeout as e:
            raise PaybindTimeoutError(f"Request timed out: {e}") from e

        except requests.exceptions.RequestException as e:
            raise ConnectivityError(f"Network request failed: {e}") from e
