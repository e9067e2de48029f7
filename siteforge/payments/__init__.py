"""Payment gateway integration."""

from siteforge.payments.razorpay_gateway import (
    PaymentGatewayUnavailableError,
    PaymentIntent,
    PaymentSignatureMismatchError,
    RazorpayGateway,
    expected_signature,
    verify_signature,
)
from siteforge.payments.service import OrderData, confirm_payment

__all__ = [
    "PaymentGatewayUnavailableError",
    "PaymentIntent",
    "PaymentSignatureMismatchError",
    "RazorpayGateway",
    "expected_signature",
    "verify_signature",
    "OrderData",
    "confirm_payment",
]
