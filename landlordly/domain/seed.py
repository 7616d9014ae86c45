"""
Demo data written to the store the first time a collection is read.

Each function returns fresh model instances so callers can mutate freely.
"""

from datetime import UTC, date, datetime

from landlordly.domain.entities import Account, Payment, Property, Unit


def _at(y: int, m: int, d: int) -> datetime:
    return datetime(y, m, d, tzinfo=UTC)


def demo_accounts() -> list[Account]:
    return [
        Account(
            id="1",
            email="john.landlord@example.com",
            name="John Smith",
            phone="+1 (555) 123-4567",
            role="landlord",
            two_factor_enabled=True,
            created_at=_at(2023, 1, 15),
        ),
        Account(
            id="2",
            email="sarah.tenant@example.com",
            name="Sarah Johnson",
            phone="+1 (555) 987-6543",
            role="tenant",
            created_at=_at(2023, 6, 20),
        ),
    ]


def demo_properties() -> list[Property]:
    return [
        Property(
            id="1",
            landlord_id="1",
            name="Sunset Apartments",
            address="123 Main St, San Francisco, CA 94102",
            created_at=_at(2023, 1, 15),
        ),
        Property(
            id="2",
            landlord_id="1",
            name="Bay View Complex",
            address="456 Ocean Ave, San Francisco, CA 94112",
            created_at=_at(2023, 3, 10),
        ),
    ]


def demo_units() -> list[Unit]:
    return [
        Unit(
            id="1",
            property_id="1",
            unit_number="101",
            rent_amount=2500,
            tenant_id="2",
            status="occupied",
            lease_start=date(2023, 6, 1),
            lease_end=date(2024, 5, 31),
        ),
        Unit(id="2", property_id="1", unit_number="102", rent_amount=2300, status="vacant"),
        Unit(
            id="3",
            property_id="2",
            unit_number="201",
            rent_amount=3200,
            tenant_id="3",
            status="occupied",
            lease_start=date(2023, 8, 1),
            lease_end=date(2024, 7, 31),
        ),
    ]


def demo_payments() -> list[Payment]:
    return [
        Payment(
            id="1",
            tenant_id="2",
            unit_id="1",
            amount=2500,
            status="completed",
            due_date=date(2024, 1, 1),
            paid_date=_at(2024, 1, 1),
            created_at=_at(2024, 1, 1),
        ),
        Payment(
            id="2",
            tenant_id="2",
            unit_id="1",
            amount=2500,
            status="completed",
            due_date=date(2024, 2, 1),
            paid_date=_at(2024, 1, 30),
            created_at=_at(2024, 2, 1),
        ),
        Payment(
            id="3",
            tenant_id="2",
            unit_id="1",
            amount=2500,
            status="pending",
            due_date=date(2024, 3, 1),
            created_at=_at(2024, 3, 1),
        ),
    ]
