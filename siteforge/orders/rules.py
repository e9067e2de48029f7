"""Order business rules shared by the API and the CLI."""

from __future__ import annotations

import logging
from typing import Iterable

from siteforge.orders.models import Order, OrderStatus, OrderSummary, OrderUpdate, PaymentStatus
from siteforge.orders.store import OrderNotFoundError, OrderStore

logger = logging.getLogger(__name__)


def apply_order_update(order: Order, update: OrderUpdate) -> Order:
    """Return ``order`` with the admin update applied.

    A non-empty delivery URL that differs from the stored one marks the order
    delivered, whatever status the caller asked for.
    """
    changes: dict = {
        "order_status": update.order_status,
        "payment_status": update.payment_status,
    }
    if update.delivery_url and update.delivery_url != order.delivery_url:
        changes["delivery_url"] = update.delivery_url
        changes["order_status"] = OrderStatus.DELIVERED
    return order.model_copy(update=changes)


def summarize_orders(orders: Iterable[Order]) -> OrderSummary:
    summary = OrderSummary()
    for order in orders:
        summary.total_orders += 1
        if order.order_status is OrderStatus.NEW:
            summary.new += 1
        elif order.order_status is OrderStatus.CONTACTED:
            summary.contacted += 1
        elif order.order_status is OrderStatus.DELIVERED:
            summary.delivered += 1

        if order.payment_status is PaymentStatus.FULL_PAID:
            summary.revenue += order.final_amount
        else:
            summary.revenue += order.advance_amount
    return summary


def update_order(store: OrderStore, order_id: str, update: OrderUpdate) -> Order:
    order = store.get(order_id)
    if order is None:
        raise OrderNotFoundError(order_id)
    updated = store.upsert(apply_order_update(order, update))
    logger.info(
        "Order %s updated: status=%s payment=%s delivery_url=%s",
        order_id, updated.order_status.value, updated.payment_status.value, updated.delivery_url or "-",
    )
    return updated
