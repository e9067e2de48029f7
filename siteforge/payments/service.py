"""Turn a verified payment into a persisted order."""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from siteforge.orders import Contact, Order, OrderStatus, OrderStore, PaymentStatus
from siteforge.payments.razorpay_gateway import RazorpayGateway

logger = logging.getLogger(__name__)


class OrderData(BaseModel):
    """Client-supplied order details sent alongside the payment confirmation."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    business_name: str = ""
    business_type: str = ""
    phone: str = ""
    email: str = ""
    selected_design_style: str = ""
    selected_website_html: str = ""


def confirm_payment(
    gateway: RazorpayGateway,
    orders: OrderStore,
    order_id: str,
    payment_id: str,
    signature: str,
    order_data: OrderData,
    advance_amount: int = 199,
    final_amount: int = 3999,
) -> Order:
    """Verify the gateway signature, then record an advance-paid order."""
    gateway.verify(order_id, payment_id, signature)

    order = Order(
        order_id=order_id,
        business_name=order_data.business_name,
        business_type=order_data.business_type,
        user_id=Contact(phone=order_data.phone, email=order_data.email),
        selected_design_style=order_data.selected_design_style,
        selected_website_html=order_data.selected_website_html,
        payment_status=PaymentStatus.ADVANCE_PAID,
        order_status=OrderStatus.NEW,
        advance_amount=advance_amount,
        final_amount=final_amount,
        razorpay_payment_id=payment_id,
    )
    orders.upsert(order)
    logger.info("New order created for %s (payment %s).", order.business_name, payment_id)
    return order
