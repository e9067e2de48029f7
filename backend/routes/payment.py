"""Payment API routes: Razorpay order creation and payment verification."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from backend.deps import get_state
from siteforge.payments import (
    OrderData,
    PaymentGatewayUnavailableError,
    PaymentSignatureMismatchError,
    confirm_payment,
)
from siteforge.state import AppState

logger = logging.getLogger(__name__)
router = APIRouter()


class CreatePaymentOrderRequest(BaseModel):
    amount: float = Field(gt=0)


class VerifyPaymentRequest(BaseModel):
    razorpay_order_id: str
    razorpay_payment_id: str
    razorpay_signature: str
    order_data: OrderData = Field(default_factory=OrderData, alias="orderData")


@router.post("/payment/create-order")
async def create_payment_order(request: CreatePaymentOrderRequest, state: AppState = Depends(get_state)):
    """Create a gateway order for the advance payment."""
    try:
        intent = await state.gateway.create_order(request.amount)
    except PaymentGatewayUnavailableError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create payment order.",
        )
    return {
        "success": True,
        "orderId": intent.order_id,
        "amount": intent.amount,
        "currency": intent.currency,
        "razorpayKeyId": intent.key_id,
    }


@router.post("/payment/verify-payment")
async def verify_payment(request: VerifyPaymentRequest, state: AppState = Depends(get_state)):
    """Check the gateway signature and record the order."""
    try:
        confirm_payment(
            state.gateway,
            state.orders,
            request.razorpay_order_id,
            request.razorpay_payment_id,
            request.razorpay_signature,
            request.order_data,
            advance_amount=state.settings.advance_amount,
            final_amount=state.settings.final_amount,
        )
    except PaymentSignatureMismatchError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return {"success": True, "message": "Payment verified and order confirmed."}
