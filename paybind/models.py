"""
paybind data models

Records mirror the API's JSON structurally: no renaming, no computed fields.
Unknown fields are kept. Records are frozen, so a record's id never changes
after the API assigns it; updates return new records. Validation is strict:
values are kept exactly as sent, and a body that does not fit the declared
types is rejected rather than coerced. Every declared field accepts null.
"""

from typing import Any, Dict, Iterator, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class ApiObject(BaseModel):
    """Any API object. Subclasses declare known fields of specific types."""

    model_config = ConfigDict(frozen=True, extra="allow", strict=True)

    id: Optional[str] = None
    object: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """The structural mapping this record was decoded from."""
        return self.model_dump(exclude_unset=True)


# An expandable relation is either a bare id or the embedded record
Expandable = Union[str, ApiObject, None]


class ListObject(ApiObject):
    """Paginated collection wrapper"""

    object: str = "list"
    data: Optional[List[Any]] = Field(default_factory=list)
    has_more: Optional[bool] = False
    url: Optional[str] = None
    total_count: Optional[int] = None

    @property
    def first_id(self) -> Optional[str]:
        return _item_id(self.data[0]) if self.data else None

    @property
    def last_id(self) -> Optional[str]:
        return _item_id(self.data[-1]) if self.data else None

    def __iter__(self) -> Iterator[Any]:  # type: ignore[override]
        return iter(self.data or [])

    def __len__(self) -> int:
        return len(self.data or [])


def _item_id(item: Any) -> Optional[str]:
    if isinstance(item, ApiObject):
        return item.id
    if isinstance(item, dict):
        return item.get("id")
    return None


class PaymentIntent(ApiObject):
    """
    A payment intent.

    Amounts are integers in the smallest currency unit. Timestamps are Unix
    seconds. ``customer``, ``review``, ``source``, ``on_behalf_of`` and
    ``payment_method`` are expandable.
    """

    object: str = "payment_intent"
    amount: Optional[int] = None
    amount_capturable: Optional[int] = None
    amount_received: Optional[int] = None
    application_fee_amount: Optional[int] = None
    canceled_at: Optional[int] = None
    cancellation_reason: Optional[str] = None
    capture_method: Optional[str] = None
    charges: Optional[ListObject] = None
    client_secret: Optional[str] = None
    confirmation_method: Optional[str] = None
    created: Optional[int] = None
    currency: Optional[str] = None
    customer: Expandable = None
    description: Optional[str] = None
    last_payment_error: Optional[Any] = None
    livemode: Optional[bool] = None
    metadata: Optional[Dict[str, Any]] = None
    next_action: Optional[Any] = None
    on_behalf_of: Expandable = None
    payment_method: Expandable = None
    payment_method_types: Optional[List[str]] = None
    receipt_email: Optional[str] = None
    review: Expandable = None
    shipping: Optional[Dict[str, Any]] = None
    source: Expandable = None
    statement_descriptor: Optional[str] = None
    status: Optional[str] = None
    transfer_data: Optional[Dict[str, Any]] = None
    transfer_group: Optional[str] = None


OBJECT_CLASSES = {
    "list": ListObject,
    "payment_intent": PaymentIntent,
}


def convert(value: Any) -> Any:
    """
    Convert decoded JSON into records.

    Mappings carrying an ``object`` key become the registered record class
    (ApiObject when unregistered). Other mappings stay mappings with their
    values converted.
    """
    if isinstance(value, list):
        return [convert(item) for item in value]
    if not isinstance(value, dict):
        return value

    converted = {key: convert(item) for key, item in value.items()}
    object_name = value.get("object")
    if not isinstance(object_name, str):
        return converted

    cls = OBJECT_CLASSES.get(object_name, ApiObject)
    return cls.model_validate(converted)
