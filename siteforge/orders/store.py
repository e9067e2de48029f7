"""Order storage: in-memory, behind a protocol a persistent store can satisfy."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from threading import Lock
from typing import Protocol

from siteforge.orders.models import Contact, Order, OrderStatus, PaymentStatus

logger = logging.getLogger(__name__)


class OrderNotFoundError(KeyError):
    pass


class OrderStore(Protocol):
    def list(self) -> list[Order]: ...
    def get(self, order_id: str) -> Order | None: ...
    def upsert(self, order: Order) -> Order: ...


class InMemoryOrderStore:
    """Thread-safe in-memory order store."""

    def __init__(self, orders: list[Order] | None = None) -> None:
        self._orders: dict[str, Order] = {o.order_id: o for o in orders or []}
        self._lock = Lock()

    def list(self) -> list[Order]:
        """All orders, newest first."""
        with self._lock:
            orders = list(self._orders.values())
        return sorted(orders, key=lambda o: o.created_at, reverse=True)

    def get(self, order_id: str) -> Order | None:
        with self._lock:
            return self._orders.get(order_id)

    def upsert(self, order: Order) -> Order:
        with self._lock:
            self._orders[order.order_id] = order
        return order


def _demo_page(title: str, body_class: str, heading_class: str, text: str) -> str:
    return (
        f'<html><head><title>{title}</title><script src="https://cdn.tailwindcss.com"></script></head>'
        f'<body class="{body_class} p-10"><h1 class="text-4xl {heading_class}">{title}</h1>'
        f'<p class="text-lg mt-4">{text}</p></body></html>'
    )


def demo_orders(now: datetime | None = None) -> list[Order]:
    """Three sample orders so the admin panel has something to show."""
    now = now or datetime.now(timezone.utc)
    return [
        Order(
            order_id="ord1001",
            created_at=now - timedelta(days=3),
            business_name="Innovate Tech Solutions",
            business_type="IT Consulting",
            user_id=Contact(phone="9876543210", email="innovate@tech.com"),
            selected_design_style="Tech & Futuristic",
            selected_website_html=_demo_page(
                "Innovate Tech Solutions", "bg-gray-900 text-white", "text-cyan-400",
                "This is the Tech & Futuristic design chosen by the client. Order ID: ord1001",
            ),
            payment_status=PaymentStatus.ADVANCE_PAID,
            order_status=OrderStatus.NEW,
        ),
        Order(
            order_id="ord1002",
            created_at=now - timedelta(days=7),
            business_name="The Green Cafe",
            business_type="Organic Restaurant",
            user_id=Contact(phone="8877665544", email="green@cafe.com"),
            selected_design_style="Natural & Earthy",
            selected_website_html=_demo_page(
                "The Green Cafe", "bg-green-50 text-green-900", "text-green-700",
                "This is the Natural & Earthy design. Order ID: ord1002",
            ),
            payment_status=PaymentStatus.FULL_PAID,
            order_status=OrderStatus.DELIVERED,
            delivery_url="https://thegreencafe.live",
        ),
        Order(
            order_id="ord1003",
            created_at=now - timedelta(days=1),
            business_name="Modern Home Decor",
            business_type="E-commerce Store",
            user_id=Contact(phone="7766554433", email="sales@modernhome.com"),
            selected_design_style="Modern & Clean",
            selected_website_html=_demo_page(
                "Modern Home Decor", "bg-white text-gray-800", "text-gray-800",
                "This is the Modern & Clean design. Order ID: ord1003",
            ),
            payment_status=PaymentStatus.ADVANCE_PAID,
            order_status=OrderStatus.CONTACTED,
        ),
    ]
