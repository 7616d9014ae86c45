from dataclasses import dataclass, field
from datetime import date
from typing import Any

from landlordly.domain.entities import UnitStatus


@dataclass
class AddPropertyInput:
    landlord_id: str
    name: str
    address: str
    image: str | None = None


@dataclass
class AddUnitInput:
    property_id: str
    unit_number: str
    rent_amount: float
    status: UnitStatus = "vacant"
    tenant_id: str | None = None
    lease_start: date | None = None
    lease_end: date | None = None


@dataclass
class UpdateUnitInput:
    unit_id: str
    updates: dict[str, Any] = field(default_factory=dict)


class NotFoundError(Exception):
    """Raised when an id does not match any stored record."""

    def __init__(self, kind: str, record_id: str) -> None:
        self.kind = kind
        self.record_id = record_id
        super().__init__(f"{kind} not found: {record_id}")
