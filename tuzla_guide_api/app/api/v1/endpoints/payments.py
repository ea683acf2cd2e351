"""
Payment endpoints for API v1.

Creating a payment records a pending transaction and returns the QR
payload for the client.  Status updates come from whoever observes the
settlement (wallet callback, operator, client polling a chain); the
service accepts any status string.
"""

from fastapi import APIRouter, Depends, HTTPException, Path, status

from tuzla_guide_api.app.core.errors import NotFoundError
from tuzla_guide_api.app.core.security import get_current_caller
from tuzla_guide_api.app.schemas.payment import (
    PaymentCreate,
    PaymentStatusUpdate,
    PaymentTransaction,
)
from tuzla_guide_api.app.services.payment_service import PaymentService


router = APIRouter()


@router.post("/", response_model=PaymentTransaction, status_code=status.HTTP_201_CREATED)
async def create_payment(
    payment: PaymentCreate,
    caller: str = Depends(get_current_caller),
) -> PaymentTransaction:
    """Create a pending payment for an attraction (404 if it does not exist)."""
    try:
        return await PaymentService.create_payment(payment, caller)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get("/{transaction_id}", response_model=PaymentTransaction)
async def get_payment(
    transaction_id: str = Path(..., description="Transaction id"),
) -> PaymentTransaction:
    payment = await PaymentService.get_payment(transaction_id)
    if payment is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Payment {transaction_id} not found",
        )
    return payment


@router.put(
    "/{transaction_id}/status",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(get_current_caller)],
)
async def update_payment_status(
    data: PaymentStatusUpdate,
    transaction_id: str = Path(..., description="Transaction id"),
) -> None:
    """Overwrite the status of a transaction.  Returns 204, or 404 for unknown ids."""
    try:
        await PaymentService.update_status(transaction_id, data.status)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return None
