"""
Business logic for payments.

Payments are tracked, not settled.  ``create_payment`` records a
``pending`` transaction together with the payment‑instruction payload a
client renders as a QR code.  Confirmation happens off‑service (a
wallet, an exchange, an operator) and is reported back through
``update_status``.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Optional
from urllib.parse import urlencode

from ..core.errors import NotFoundError
from ..core.store import get_store
from ..schemas.payment import STATUS_PENDING, PaymentCreate, PaymentTransaction
from .persistence_service import PersistenceService


PAYMENT_URI_PREFIX = "tuzlaguide:pay?"


def build_payment_instruction(attraction_name: str, amount: int, currency: str) -> str:
    """Derive the QR payload from attraction name, amount and currency.

    The result is deterministic: equal inputs give equal payloads.
    """
    query = urlencode({"attraction": attraction_name, "amount": amount, "currency": currency})
    return PAYMENT_URI_PREFIX + query


class PaymentService:
    """Payment transaction tracker."""

    @classmethod
    async def create_payment(cls, data: PaymentCreate, caller: str) -> PaymentTransaction:
        """Create a pending transaction for an existing attraction.

        Raises ``NotFoundError`` if the attraction does not exist.
        """
        logger = logging.getLogger(__name__)
        store = get_store()
        with store.lock:
            attraction = store.get_attraction(data.attraction_id)
            if attraction is None:
                raise NotFoundError(f"Attraction {data.attraction_id} not found")
            transaction_id = f"tx_{uuid.uuid4().hex}"
            while store.has_payment(transaction_id):
                transaction_id = f"tx_{uuid.uuid4().hex}"
            payment = PaymentTransaction(
                id=transaction_id,
                user_id=caller,
                attraction_id=data.attraction_id,
                amount=data.amount,
                currency=data.currency,
                payment_method=data.payment_method,
                status=STATUS_PENDING,
                qr_code_data=build_payment_instruction(attraction.name, data.amount, data.currency),
                created_at=datetime.now(timezone.utc),
            )
            store.put_payment(payment)
            PersistenceService.after_write()
        logger.info(
            "Caller %s created payment %s for attraction %s: %s %s via %s",
            caller, payment.id, data.attraction_id, data.amount, data.currency, data.payment_method,
        )
        return payment

    @classmethod
    async def get_payment(cls, transaction_id: str) -> Optional[PaymentTransaction]:
        return get_store().get_payment(transaction_id)

    @classmethod
    async def update_status(cls, transaction_id: str, status: str) -> PaymentTransaction:
        """Overwrite the status of a transaction.

        Any status string and any transition is accepted; the intended
        lifecycle (``pending`` → ``completed`` | ``failed``) is not
        enforced here.  Raises ``NotFoundError`` for unknown ids.
        """
        logger = logging.getLogger(__name__)
        store = get_store()
        with store.lock:
            payment = store.get_payment(transaction_id)
            if payment is None:
                raise NotFoundError(f"Payment {transaction_id} not found")
            previous = payment.status
            payment.status = status
            store.put_payment(payment)
            PersistenceService.after_write()
        logger.info("Payment %s status %s -> %s", transaction_id, previous, status)
        return payment
