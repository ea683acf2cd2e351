from urllib.parse import parse_qs, urlsplit

import pydantic
import pytest

from tuzla_guide_api.app.core.errors import NotFoundError
from tuzla_guide_api.app.schemas.payment import MAX_AMOUNT, PaymentCreate
from tuzla_guide_api.app.services.payment_service import PaymentService, build_payment_instruction
from tuzla_guide_api.app.services.persistence_service import load_snapshot, save_snapshot


def _payment(attraction_id: int = 2, amount: int = 300, currency: str = "EUR") -> PaymentCreate:
    return PaymentCreate(
        attraction_id=attraction_id, amount=amount, currency=currency, payment_method="ICP"
    )


@pytest.mark.asyncio
async def test_create_payment_is_pending_with_payload(seeded_store) -> None:
    payment = await PaymentService.create_payment(_payment(), "alice")

    assert payment.status == "pending"
    assert payment.qr_code_data
    assert payment.user_id == "alice"
    assert payment.attraction_id == 2
    assert payment.amount == 300
    assert payment.currency == "EUR"
    assert payment.payment_method == "ICP"
    assert await PaymentService.get_payment(payment.id) == payment


@pytest.mark.asyncio
async def test_payload_is_derived_from_name_amount_and_currency(seeded_store) -> None:
    first = await PaymentService.create_payment(_payment(), "alice")
    second = await PaymentService.create_payment(_payment(), "bob")

    assert first.id != second.id
    assert first.qr_code_data == second.qr_code_data
    query = parse_qs(urlsplit(first.qr_code_data).query)
    assert query == {"attraction": ["Freedom Square"], "amount": ["300"], "currency": ["EUR"]}


def test_build_payment_instruction_differs_per_input() -> None:
    base = build_payment_instruction("Freedom Square", 300, "EUR")

    assert build_payment_instruction("Freedom Square", 300, "EUR") == base
    assert build_payment_instruction("Freedom Square", 301, "EUR") != base
    assert build_payment_instruction("Freedom Square", 300, "USD") != base
    assert build_payment_instruction("Turalibeg Mosque", 300, "EUR") != base


@pytest.mark.asyncio
async def test_update_status_changes_only_status(seeded_store) -> None:
    payment = await PaymentService.create_payment(_payment(), "alice")

    await PaymentService.update_status(payment.id, "completed")

    updated = await PaymentService.get_payment(payment.id)
    assert updated.status == "completed"
    assert updated.model_dump(exclude={"status"}) == payment.model_dump(exclude={"status"})


@pytest.mark.asyncio
async def test_create_payment_for_unknown_attraction_changes_nothing(seeded_store) -> None:
    before = seeded_store.snapshot()

    with pytest.raises(NotFoundError):
        await PaymentService.create_payment(_payment(attraction_id=17), "alice")

    assert seeded_store.snapshot() == before


@pytest.mark.asyncio
async def test_update_status_of_unknown_transaction(seeded_store) -> None:
    with pytest.raises(NotFoundError):
        await PaymentService.update_status("tx_missing", "completed")


@pytest.mark.asyncio
async def test_get_unknown_payment_is_none(seeded_store) -> None:
    assert await PaymentService.get_payment("tx_missing") is None


@pytest.mark.asyncio
async def test_status_transitions_are_not_checked(seeded_store) -> None:
    # Known gap: any string and any transition is accepted, including
    # leaving a terminal state.  Kept until the payment provider
    # contract defines the legal transitions.
    payment = await PaymentService.create_payment(_payment(), "alice")

    await PaymentService.update_status(payment.id, "completed")
    await PaymentService.update_status(payment.id, "pending")
    await PaymentService.update_status(payment.id, "refunded?")

    assert (await PaymentService.get_payment(payment.id)).status == "refunded?"


def test_amount_beyond_sqlite_integer_is_rejected() -> None:
    with pytest.raises(pydantic.ValidationError):
        _payment(amount=MAX_AMOUNT + 1)


@pytest.mark.asyncio
async def test_largest_amount_still_persists(seeded_store) -> None:
    payment = await PaymentService.create_payment(_payment(amount=MAX_AMOUNT), "alice")

    save_snapshot(seeded_store.snapshot())

    persisted = load_snapshot().payment_transactions
    assert [(p.id, p.amount) for p in persisted] == [(payment.id, MAX_AMOUNT)]
