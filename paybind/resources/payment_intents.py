"""
Payment Intents resource

API reference: https://stripe.com/docs/api/payment_intents
"""

from typing import (
    TYPE_CHECKING,
    Any,
    Dict,
    Iterator,
    List,
    Mapping,
    Optional,
    TypedDict,
    Union,
)

from paybind.models import ListObject, PaymentIntent
from paybind.request import (
    cast_to_id,
    get_id,
    make_request,
    new_request,
    put_endpoint,
    put_method,
    put_params,
)

if TYPE_CHECKING:
    from paybind.client import ApiClient
    from paybind.config import RequestOptions

PLURAL_ENDPOINT = "payment_intents"

IntentRef = Union[str, PaymentIntent, Mapping[str, Any]]
Options = Union["RequestOptions", Mapping[str, Any], None]


class PaymentIntentCreateParams(TypedDict, total=False):
    amount: int
    currency: str
    payment_method_types: List[str]
    application_fee_amount: int
    capture_method: str
    confirm: bool
    confirmation_method: str
    customer: str
    description: str
    metadata: Dict[str, str]
    on_behalf_of: str
    payment_method: str
    receipt_email: str
    return_url: str
    save_payment_method: bool
    shipping: Dict[str, Any]
    source: str
    statement_descriptor: str
    transfer_data: Dict[str, str]
    transfer_group: str


class PaymentIntentUpdateParams(TypedDict, total=False):
    amount: int
    application_fee_amount: int
    currency: str
    customer: str
    description: str
    metadata: Dict[str, str]
    payment_method: str
    payment_method_types: List[str]
    receipt_email: str
    save_payment_method: bool
    shipping: Dict[str, Any]
    source: str
    statement_descriptor: str
    transfer_group: str


class PaymentIntentRetrieveParams(TypedDict, total=False):
    client_secret: str


class PaymentIntentConfirmParams(TypedDict, total=False):
    client_secret: str
    payment_method: str
    receipt_email: str
    return_url: str
    save_payment_method: bool
    shipping: Dict[str, Any]
    source: str


class PaymentIntentCaptureParams(TypedDict, total=False):
    amount_to_capture: int
    application_fee_amount: int


class PaymentIntentCancelParams(TypedDict, total=False):
    cancellation_reason: str


class PaymentIntentListParams(TypedDict, total=False):
    created: Union[int, Dict[str, int]]
    customer: str
    ending_before: Union[str, PaymentIntent]
    limit: int
    starting_after: Union[str, PaymentIntent]


class PaymentIntentService:
    """
    Payment Intents API.

    Operations taking an intent accept its id or a fetched record; both
    build the same endpoint. Params are sent as given.
    """

    def __init__(self, client: "ApiClient"):
        self.client = client

    def _path(self, intent: IntentRef, action: Optional[str] = None) -> str:
        path = f"{PLURAL_ENDPOINT}/{get_id(intent)}"
        if action:
            path = f"{path}/{action}"
        return path

    def _post(self, path: str, params: Optional[Mapping[str, Any]], opts: Options) -> Any:
        request = new_request(opts)
        request = put_endpoint(request, path)
        request = put_method(request, "post")
        request = put_params(request, params)
        return make_request(request, self.client)

    def create(
        self, params: PaymentIntentCreateParams, opts: Options = None
    ) -> PaymentIntent:
        """
        Create a payment intent.

        Example:
            >>> client.payment_intents.create(
            ...     {"amount": 2000, "currency": "usd", "payment_method_types": ["card"]},
            ...     {"idempotency_key": "order-12345"},
            ... )
        """
        return self._post(PLURAL_ENDPOINT, params, opts)

    def retrieve(
        self,
        intent: IntentRef,
        params: Optional[PaymentIntentRetrieveParams] = None,
        opts: Options = None,
    ) -> PaymentIntent:
        """Retrieve a payment intent."""
        request = new_request(opts)
        request = put_endpoint(request, self._path(intent))
        request = put_method(request, "get")
        request = put_params(request, params)
        return make_request(request, self.client)

    def update(
        self,
        intent: IntentRef,
        params: PaymentIntentUpdateParams,
        opts: Options = None,
    ) -> PaymentIntent:
        """
        Update a payment intent.

        Returns the updated intent as a new record; the record passed in is
        left untouched.
        """
        return self._post(self._path(intent), params, opts)

    def confirm(
        self,
        intent: IntentRef,
        params: Optional[PaymentIntentConfirmParams] = None,
        opts: Options = None,
    ) -> PaymentIntent:
        """Confirm a payment intent."""
        return self._post(self._path(intent, "confirm"), params, opts)

    def capture(
        self,
        intent: IntentRef,
        params: Optional[PaymentIntentCaptureParams] = None,
        opts: Options = None,
    ) -> PaymentIntent:
        """Capture the funds of an uncaptured payment intent."""
        return self._post(self._path(intent, "capture"), params, opts)

    def cancel(
        self,
        intent: IntentRef,
        params: Optional[PaymentIntentCancelParams] = None,
        opts: Options = None,
    ) -> PaymentIntent:
        """Cancel a payment intent."""
        return self._post(self._path(intent, "cancel"), params, opts)

    def list(
        self, params: Optional[PaymentIntentListParams] = None, opts: Options = None
    ) -> ListObject:
        """
        List payment intents, newest first.

        ``starting_after`` and ``ending_before`` accept ids or records.
        """
        request = new_request(opts)
        request = put_endpoint(request, PLURAL_ENDPOINT)
        request = put_method(request, "get")
        request = put_params(request, params or {})
        request = cast_to_id(request, ["starting_after", "ending_before"])
        return make_request(request, self.client)

    def list_all(
        self, params: Optional[PaymentIntentListParams] = None, opts: Options = None
    ) -> Iterator[PaymentIntent]:
        """
        Yield every payment intent, fetching pages lazily.

        Pages forward from ``starting_after``; when ``ending_before`` is
        given, pages backwards instead.
        """
        params = dict(params or {})
        backwards = params.get("ending_before") is not None

        while True:
            page = self.list(params, opts)
            yield from page.data or []

            cursor = page.first_id if backwards else page.last_id
            if not page.has_more or cursor is None:
                return
            params = dict(params)
            params["ending_before" if backwards else "starting_after"] = cursor
