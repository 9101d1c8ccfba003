"""
API resources
"""

from paybind.resources.payment_intents import PaymentIntentService

__all__ = ["PaymentIntentService"]
