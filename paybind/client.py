"""
paybind API client
"""

import logging
import time
from typing import Any, Dict, Optional

from paybind.__version__ import __version__
from paybind.config import ClientConfig
from paybind.decoder import decode_response, header_value
from paybind.exceptions import AuthenticationError, ConfigurationError, ConnectivityError
from paybind.http.adapter import HTTPAdapter
from paybind.http.requests_adapter import RequestsAdapter
from paybind.logging_setup import sanitize_for_logging, setup_logging
from paybind.metrics import metrics_request
from paybind.request import Request
from paybind.resources.payment_intents import PaymentIntentService
from paybind.utils import flatten_params, make_idempotency_key

logger = logging.getLogger("paybind.client")


class ApiClient:
    """
    Authenticated transport for the payments API.

    Holds configuration and a pooled HTTP adapter; nothing about a single
    call survives it. Resource services hang off the client.

    Example:
        >>> from paybind import ApiClient, ClientConfig
        >>> client = ApiClient(ClientConfig(api_key="sk_test_..."))
        >>> intent = client.payment_intents.create(
        ...     {"amount": 2000, "currency": "usd", "payment_method_types": ["card"]}
        ... )
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        http_adapter: Optional[HTTPAdapter] = None,
    ):
        """
        Initialize the client

        Args:
            config: Client configuration (read from the environment if omitted)
            http_adapter: Optional custom HTTP adapter

        Raises:
            ConfigurationError: If configuration is invalid
        """
        self.config = config or ClientConfig()
        self.config.validate_settings()

        if self.config.debug:
            setup_logging(debug=True)

        if not self.config.api_key:
            logger.warning("No API key configured - each call must pass one in its options")

        self.http = http_adapter or RequestsAdapter(
            max_retries=self.config.max_network_retries,
            backoff_factor=self.config.retry_backoff_factor,
            verify_ssl=self.config.verify_ssl,
        )

        self.payment_intents = PaymentIntentService(self)

        logger.debug(
            "paybind client initialized (version %s, base %s)", __version__, self.config.api_base
        )

    def _headers(self, request: Request) -> Dict[str, str]:
        opts = request.options
        api_key = opts.api_key or self.config.api_key
        if not api_key:
            raise AuthenticationError(
                "No API key provided. Set STRIPE_API_KEY or pass api_key in the options"
            )

        headers = {
            "Authorization": f"Bearer {api_key}",
            "Accept": "application/json",
            "Content-Type": "application/x-www-form-urlencoded",
            "User-Agent": f"paybind-python/{__version__}",
        }

        api_version = opts.api_version or self.config.api_version
        if api_version:
            headers["Stripe-Version"] = api_version
        if opts.connect_account:
            headers["Stripe-Account"] = opts.connect_account
        if request.method == "POST":
            try:
                headers["Idempotency-Key"] = make_idempotency_key(opts.idempotency_key)
            except ValueError as e:
                raise ConfigurationError(str(e)) from e

        headers.update(opts.headers)
        return headers

    def _url(self, request: Request) -> str:
        base = (request.options.api_base or self.config.api_base).rstrip("/")
        return f"{base}/{request.endpoint}"

    def _params(self, request: Request) -> Dict[str, Any]:
        params = dict(request.params)
        if request.options.expand:
            params["expand"] = list(request.options.expand)
        return params

    def send(self, request: Request) -> Any:
        """
        Send a request and decode the response.

        Args:
            request: Request descriptor

        Returns:
            Decoded record, ListObject, or plain JSON

        Raises:
            ClientError: On 4xx responses
            ServiceError: On 5xx responses or an unreadable body
            ConnectivityError: If no response was received
        """
        url = self._url(request)
        headers = self._headers(request)
        params = self._params(request)
        pairs = flatten_params(params)

        timeout = (
            self.config.timeout_connect,
            request.options.timeout or self.config.timeout_read,
        )

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "%s %s: %s",
                request.method,
                url,
                sanitize_for_logging(params),
                extra={"endpoint": request.endpoint, "method": request.method},
            )

        start = time.time()
        try:
            status, text, resp_headers = self.http.send(
                method=request.method,
                url=url,
                headers=headers,
                params=pairs if request.method != "POST" else None,
                data=pairs if request.method == "POST" else None,
                timeout=timeout,
            )
        except ConnectivityError as e:
            metrics_request(request.endpoint, request.method, 0, time.time() - start)
            logger.error("%s %s failed: %s", request.method, url, e)
            raise

        metrics_request(request.endpoint, request.method, status, time.time() - start)

        request_id = header_value(resp_headers, "Request-Id")
        logger.debug(
            "Response %d from %s",
            status,
            request.endpoint,
            extra={"request_id": request_id, "endpoint": request.endpoint, "status": status},
        )
        if status >= 400:
            logger.warning(
                "%s %s returned %d (request_id: %s)",
                request.method,
                request.endpoint,
                status,
                request_id,
            )

        return decode_response(status, text, resp_headers)
