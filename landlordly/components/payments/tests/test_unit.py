"""
Payments component unit tests.
"""

from __future__ import annotations

from datetime import UTC, date, datetime

import pytest

from landlordly.adapters.memory_store import InMemoryKeyValueStore
from landlordly.components.payments import (
    MakePaymentInput,
    PaymentNotFoundError,
    UpdatePaymentStatusInput,
    run_get_payment_history,
    run_get_upcoming_payments,
    run_list_payments,
    run_make_payment,
    run_update_payment_status,
)
from landlordly.rules.loader import load_rules
from landlordly.rules.models import Rules

NOW = datetime(2024, 3, 2, 9, 30, 0, tzinfo=UTC)


class MockTimePort:
    def now_utc(self) -> datetime:
        return NOW


@pytest.fixture
def rules() -> Rules:
    return load_rules()


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


class TestPaymentQueries:
    def test_seeded_history(self, store, rules) -> None:
        assert len(run_list_payments(store=store, rules=rules)) == 3

    def test_history_newest_paid_first(self, store, rules) -> None:
        history = run_get_payment_history("2", store=store, rules=rules)

        assert [p.id for p in history] == ["2", "1"]

    def test_upcoming_earliest_due_first(self, store, rules) -> None:
        run_make_payment(
            MakePaymentInput(tenant_id="2", unit_id="1", amount=2500, due_date=date(2024, 2, 15)),
            store=store,
            rules=rules,
            clock=MockTimePort(),
        )

        upcoming = run_get_upcoming_payments("2", store=store, rules=rules)

        assert [p.due_date for p in upcoming] == [date(2024, 2, 15), date(2024, 3, 1)]

    def test_other_tenant_sees_nothing(self, store, rules) -> None:
        assert run_get_payment_history("3", store=store, rules=rules) == []
        assert run_get_upcoming_payments("3", store=store, rules=rules) == []


class TestPaymentMutations:
    def test_make_payment_appends(self, store, rules) -> None:
        payment = run_make_payment(
            MakePaymentInput(tenant_id="2", unit_id="1", amount=2500, due_date=date(2024, 4, 1)),
            store=store,
            rules=rules,
            clock=MockTimePort(),
        )

        payments = run_list_payments(store=store, rules=rules)
        assert len(payments) == 4
        assert payments[-1] == payment
        assert payment.created_at == NOW

    def test_complete_stamps_paid_date(self, store, rules) -> None:
        updated = run_update_payment_status(
            UpdatePaymentStatusInput(payment_id="3", status="completed"),
            store=store,
            rules=rules,
            clock=MockTimePort(),
        )

        assert updated.paid_date == NOW
        assert run_get_upcoming_payments("2", store=store, rules=rules) == []
        assert run_get_payment_history("2", store=store, rules=rules)[0].id == "3"

    def test_non_completed_clears_paid_date(self, store, rules) -> None:
        updated = run_update_payment_status(
            UpdatePaymentStatusInput(payment_id="1", status="late"),
            store=store,
            rules=rules,
            clock=MockTimePort(),
        )

        assert updated.status == "late"
        assert updated.paid_date is None

    def test_naive_paid_date_is_utc(self, store, rules) -> None:
        payment = run_make_payment(
            MakePaymentInput(
                tenant_id="2",
                unit_id="1",
                amount=2500,
                due_date=date(2024, 4, 1),
                status="completed",
                paid_date=datetime(2024, 4, 1),
            ),
            store=store,
            rules=rules,
            clock=MockTimePort(),
        )

        assert payment.paid_date == datetime(2024, 4, 1, tzinfo=UTC)
        history = run_get_payment_history("2", store=store, rules=rules)
        assert [p.id for p in history] == [payment.id, "2", "1"]

    def test_naive_stored_paid_date_is_utc(self, store, rules) -> None:
        store.set_item(
            "payments",
            '[{"id": "9", "tenantId": "2", "unitId": "1", "amount": 10, "status": "completed",'
            ' "dueDate": "2024-05-01", "paidDate": "2024-05-01T08:00:00", "createdAt": "2024-05-01T08:00:00"},'
            ' {"id": "8", "tenantId": "2", "unitId": "1", "amount": 10, "status": "completed",'
            ' "dueDate": "2024-04-01", "paidDate": "2024-04-01T08:00:00Z", "createdAt": "2024-04-01T08:00:00Z"}]',
        )

        history = run_get_payment_history("2", store=store, rules=rules)

        assert [p.id for p in history] == ["9", "8"]
        assert history[0].paid_date.tzinfo is not None

    def test_unknown_payment(self, store, rules) -> None:
        with pytest.raises(PaymentNotFoundError):
            run_update_payment_status(
                UpdatePaymentStatusInput(payment_id="nope", status="completed"),
                store=store,
                rules=rules,
                clock=MockTimePort(),
            )
