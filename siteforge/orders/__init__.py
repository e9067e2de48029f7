"""Order records and admin-side business rules."""

from siteforge.orders.models import (
    Contact,
    Order,
    OrderStatus,
    OrderSummary,
    OrderUpdate,
    PaymentStatus,
)
from siteforge.orders.rules import apply_order_update, summarize_orders, update_order
from siteforge.orders.store import InMemoryOrderStore, OrderNotFoundError, OrderStore, demo_orders

__all__ = [
    "Contact",
    "Order",
    "OrderStatus",
    "OrderSummary",
    "OrderUpdate",
    "PaymentStatus",
    "OrderStore",
    "InMemoryOrderStore",
    "OrderNotFoundError",
    "apply_order_update",
    "summarize_orders",
    "update_order",
    "demo_orders",
]
