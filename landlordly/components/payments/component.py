"""
Payments component - rent payment records.

Records only: nothing here moves money. The payment list is seeded with
demo history the first time it is read.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from pydantic import TypeAdapter

from landlordly.core.services.documents import load_or_seed, write_document
from landlordly.domain.entities import Payment
from landlordly.domain.seed import demo_payments
from landlordly.rules.models import Rules

from .models import MakePaymentInput, PaymentNotFoundError, UpdatePaymentStatusInput
from .ports import KeyValueStorePort, TimePort

logger = logging.getLogger(__name__)

_PAYMENTS = TypeAdapter(list[Payment])

_EPOCH = datetime.min.replace(tzinfo=UTC)


def run_list_payments(*, store: KeyValueStorePort, rules: Rules) -> list[Payment]:
    seed = demo_payments() if rules.demo.seed_data else []
    return load_or_seed(store, rules.storage.keys.payments, _PAYMENTS, seed)


def run_make_payment(
    inp: MakePaymentInput,
    *,
    store: KeyValueStorePort,
    rules: Rules,
    clock: TimePort,
) -> Payment:
    payment = Payment(
        tenant_id=inp.tenant_id,
        unit_id=inp.unit_id,
        amount=inp.amount,
        status=inp.status,
        due_date=inp.due_date,
        paid_date=inp.paid_date,
        late_fee=inp.late_fee,
        receipt_url=inp.receipt_url,
        created_at=clock.now_utc(),
    )
    payments = run_list_payments(store=store, rules=rules)
    payments.append(payment)
    write_document(store, rules.storage.keys.payments, _PAYMENTS, payments)

    logger.info("Recorded %s payment %s for tenant %s", payment.status, payment.id, payment.tenant_id)
    return payment


def run_get_payment_history(tenant_id: str, *, store: KeyValueStorePort, rules: Rules) -> list[Payment]:
    """Completed payments for a tenant, most recently paid first."""
    history = [
        p
        for p in run_list_payments(store=store, rules=rules)
        if p.tenant_id == tenant_id and p.status == "completed"
    ]
    return sorted(history, key=lambda p: p.paid_date or _EPOCH, reverse=True)


def run_get_upcoming_payments(tenant_id: str, *, store: KeyValueStorePort, rules: Rules) -> list[Payment]:
    """Pending payments for a tenant, earliest due date first."""
    upcoming = [
        p
        for p in run_list_payments(store=store, rules=rules)
        if p.tenant_id == tenant_id and p.status == "pending"
    ]
    return sorted(upcoming, key=lambda p: p.due_date)


def run_update_payment_status(
    inp: UpdatePaymentStatusInput,
    *,
    store: KeyValueStorePort,
    rules: Rules,
    clock: TimePort,
) -> Payment:
    """Set a payment's status; paid_date is stamped on completion and cleared otherwise."""
    payments = run_list_payments(store=store, rules=rules)
    for idx, payment in enumerate(payments):
        if payment.id == inp.payment_id:
            paid_date = clock.now_utc() if inp.status == "completed" else None
            updated = payment.model_copy(update={"status": inp.status, "paid_date": paid_date})
            payments[idx] = updated
            write_document(store, rules.storage.keys.payments, _PAYMENTS, payments)
            return updated

    raise PaymentNotFoundError(inp.payment_id)
