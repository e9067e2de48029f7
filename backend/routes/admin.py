"""Admin API routes: login, order list, order updates, dashboard stats."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from backend.auth import check_admin_password
from backend.deps import get_state
from siteforge.orders import OrderNotFoundError, OrderUpdate, summarize_orders, update_order
from siteforge.state import AppState

logger = logging.getLogger(__name__)
router = APIRouter()


class LoginRequest(BaseModel):
    password: str = ""


@router.post("/admin/login")
async def login(request: LoginRequest, state: AppState = Depends(get_state)):
    """Compare against the shared admin password."""
    if not check_admin_password(request.password, state.settings.admin_password):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid password")
    return {"success": True, "message": "Login successful"}


@router.get("/admin/orders")
async def list_orders(state: AppState = Depends(get_state)):
    """All orders, newest first."""
    orders = state.orders.list()
    return {"success": True, "orders": [o.model_dump(mode="json", by_alias=True) for o in orders]}


@router.put("/admin/orders/{order_id}")
async def put_order(order_id: str, update: OrderUpdate, state: AppState = Depends(get_state)):
    """Update statuses and delivery URL; a new delivery URL marks the order delivered."""
    try:
        order = update_order(state.orders, order_id, update)
    except OrderNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Order not found")
    return {"success": True, "order": order.model_dump(mode="json", by_alias=True)}


@router.get("/admin/stats")
async def stats(state: AppState = Depends(get_state)):
    """Dashboard counters: orders per status and collected revenue."""
    summary = summarize_orders(state.orders.list())
    return {"success": True, "stats": summary.model_dump(by_alias=True)}
