"""Order schema, statuses and admin update payload.

Wire keys follow the admin panel's expectations: camelCase, with ``_id`` for
the order id and ``razorpay_payment_id`` kept verbatim.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class PaymentStatus(str, Enum):
    ADVANCE_PAID = "advance_paid"
    FULL_PAID = "full_paid"


class OrderStatus(str, Enum):
    NEW = "new"
    CONTACTED = "contacted"
    DELIVERED = "delivered"


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Contact(_CamelModel):
    phone: str = ""
    email: str = ""


class Order(_CamelModel):
    order_id: str = Field(alias="_id")
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    business_name: str
    business_type: str
    user_id: Contact = Field(default_factory=Contact)
    selected_design_style: str = ""
    selected_website_html: str = ""
    payment_status: PaymentStatus = PaymentStatus.ADVANCE_PAID
    order_status: OrderStatus = OrderStatus.NEW
    advance_amount: int = 199
    final_amount: int = 3999
    delivery_url: str = ""
    razorpay_payment_id: str | None = Field(default=None, alias="razorpay_payment_id")


class OrderUpdate(_CamelModel):
    """Body for PUT /api/admin/orders/{id}."""

    order_status: OrderStatus
    payment_status: PaymentStatus
    delivery_url: str | None = None


class OrderSummary(_CamelModel):
    """Dashboard counters for the admin panel."""

    total_orders: int = 0
    new: int = 0
    contacted: int = 0
    delivered: int = 0
    revenue: int = 0
