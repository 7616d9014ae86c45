from dataclasses import dataclass
from datetime import date, datetime

from landlordly.domain.entities import PaymentStatus


@dataclass
class MakePaymentInput:
    tenant_id: str
    unit_id: str
    amount: float
    due_date: date
    status: PaymentStatus = "pending"
    paid_date: datetime | None = None
    late_fee: float | None = None
    receipt_url: str | None = None


@dataclass
class UpdatePaymentStatusInput:
    payment_id: str
    status: PaymentStatus


class PaymentNotFoundError(Exception):
    """Raised when a payment id does not match any stored payment."""

    def __init__(self, payment_id: str) -> None:
        self.payment_id = payment_id
        super().__init__(f"Payment not found: {payment_id}")
