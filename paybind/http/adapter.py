"""
Base HTTP adapter interface.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Tuple, Union

FormPairs = List[Tuple[str, str]]
Timeout = Union[float, Tuple[float, float]]


class HTTPAdapter(ABC):
    """
    Abstract base class for HTTP adapters.

    Allows pluggable HTTP clients, and in-memory doubles in tests.
    """

    @abstractmethod
    def send(
        self,
        method: str,
        url: str,
        headers: Dict[str, str],
        params: Optional[FormPairs] = None,
        data: Optional[FormPairs] = None,
        timeout: Timeout = 30.0,
    ) -> Tuple[int, str, Dict[str, str]]:
        """
        Send HTTP request.

        Args:
            method: HTTP method (GET, POST, DELETE)
            url: Request URL without query string
            headers: Request headers
            params: Query string pairs
            data: Form-encoded body pairs
            timeout: Seconds, or a (connect, read) tuple

        Returns:
            Tuple of (status_code, response_text, response_headers)

        Raises:
            ConnectivityError: On network connectivity issues
            TimeoutError: On request timeout
        """
        raise NotImplementedError
