"""Razorpay integration: order (payment intent) creation and signature checks."""

from __future__ import annotations

import hashlib
import hmac
import logging
import time
from dataclasses import dataclass

import httpx

logger = logging.getLogger(__name__)


class PaymentGatewayUnavailableError(Exception):
    pass


class PaymentSignatureMismatchError(Exception):
    pass


@dataclass(frozen=True)
class PaymentIntent:
    order_id: str
    amount: int  # minor units (paise)
    currency: str
    key_id: str


def expected_signature(order_id: str, payment_id: str, secret: str) -> str:
    """Hex HMAC-SHA256 of ``"<order_id>|<payment_id>"``."""
    message = f"{order_id}|{payment_id}".encode()
    return hmac.new(secret.encode(), message, hashlib.sha256).hexdigest()


def verify_signature(order_id: str, payment_id: str, signature: str, secret: str) -> bool:
    expected = expected_signature(order_id, payment_id, secret)
    return hmac.compare_digest(expected, signature or "")


class RazorpayGateway:
    def __init__(
        self,
        client: httpx.AsyncClient,
        key_id: str | None,
        key_secret: str | None,
        base_url: str = "https://api.razorpay.com/v1",
        currency: str = "INR",
    ):
        self._client = client
        self.key_id = key_id or ""
        self._key_secret = key_secret or ""
        self._base_url = base_url.rstrip("/")
        self.currency = currency

    async def create_order(self, amount: float) -> PaymentIntent:
        """Create a gateway order for ``amount`` in major units (rupees)."""
        if not self.key_id or not self._key_secret:
            raise PaymentGatewayUnavailableError("Razorpay credentials are not configured.")
        payload = {
            "amount": int(round(amount * 100)),
            "currency": self.currency,
            "receipt": f"receipt_{int(time.time() * 1000)}",
        }
        try:
            response = await self._client.post(
                f"{self._base_url}/orders",
                json=payload,
                auth=(self.key_id, self._key_secret),
            )
            response.raise_for_status()
            body = response.json()
            gateway_order_id = body["id"]
        except (httpx.HTTPError, ValueError, KeyError, TypeError) as e:
            logger.error("Razorpay order creation failed: %s", e)
            raise PaymentGatewayUnavailableError(str(e)) from e

        logger.info("Razorpay Order Created: %s", gateway_order_id)
        return PaymentIntent(
            order_id=gateway_order_id,
            amount=body.get("amount", payload["amount"]),
            currency=body.get("currency", self.currency),
            key_id=self.key_id,
        )

    def verify(self, order_id: str, payment_id: str, signature: str) -> None:
        """Raise PaymentSignatureMismatchError unless the signature matches."""
        if not self._key_secret or not verify_signature(order_id, payment_id, signature, self._key_secret):
            logger.error("Payment Verification FAILED: Signatures do not match.")
            raise PaymentSignatureMismatchError("Payment verification failed. Signature mismatch.")
