"""
Pydantic models for payment transactions.

A transaction records the intent to pay for an attraction.  It is
created as ``pending`` together with an opaque payment‑instruction
payload (``qr_code_data``) that the client renders as a scannable
code.  Settlement happens outside this service; an external caller
reports the outcome through the status update operation.
"""

from datetime import datetime

from pydantic import BaseModel, Field


STATUS_PENDING = "pending"
STATUS_COMPLETED = "completed"
STATUS_FAILED = "failed"

# Largest value an SQLite INTEGER column can hold.
MAX_AMOUNT = 2**63 - 1


class PaymentCreate(BaseModel):
    """Schema for creating a payment transaction."""

    attraction_id: int = Field(..., examples=[2])
    amount: int = Field(..., ge=0, le=MAX_AMOUNT, examples=[300], description="Amount in the smallest currency unit")
    currency: str = Field("USD", examples=["EUR"])
    payment_method: str = Field(..., examples=["ICP"], description="Payment method label, e.g. USDT or ICP")


class PaymentStatusUpdate(BaseModel):
    # Any string is accepted; see ``PaymentService.update_status``.
    status: str = Field(..., examples=[STATUS_COMPLETED])


class PaymentTransaction(BaseModel):
    """Schema for reading a payment transaction."""

    id: str
    user_id: str
    attraction_id: int
    amount: int
    currency: str
    payment_method: str
    status: str = Field(STATUS_PENDING, examples=[STATUS_PENDING])
    qr_code_data: str = Field(..., description="Opaque payment instruction rendered as a QR code")
    created_at: datetime

    model_config = {
        "from_attributes": True,
    }
