"""
Tagged-tuple results.

For callers that prefer branching on a value over catching exceptions:

    >>> status, value = attempt(client.payment_intents.retrieve, "pi_123")
    >>> if status == "error" and value.kind == ErrorKind.CLIENT_ERROR:
    ...     ...
"""

from typing import Any, Callable, Tuple

from paybind.exceptions import PaybindError

OK = "ok"
ERROR = "error"


def attempt(fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Tuple[str, Any]:
    """
    Call fn and tag the outcome.

    Returns:
        ("ok", result) on success, ("error", ErrorRecord) on a PaybindError
    """
    try:
        return OK, fn(*args, **kwargs)
    except PaybindError as e:
        return ERROR, e.record
