"""
Payments component - Rent payment records.
"""

from .component import (
    run_get_payment_history,
    run_get_upcoming_payments,
    run_list_payments,
    run_make_payment,
    run_update_payment_status,
)
from .models import MakePaymentInput, PaymentNotFoundError, UpdatePaymentStatusInput
from .ports import KeyValueStorePort, TimePort

__all__ = [
    # Entry points
    "run_list_payments",
    "run_make_payment",
    "run_get_payment_history",
    "run_get_upcoming_payments",
    "run_update_payment_status",
    # Models
    "MakePaymentInput",
    "UpdatePaymentStatusInput",
    "PaymentNotFoundError",
    # Ports
    "KeyValueStorePort",
    "TimePort",
]
