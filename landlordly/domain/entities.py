from datetime import UTC, date, datetime
from typing import Annotated, Literal
from uuid import uuid4

from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# --- Enums / Literals ---
RoleType = Literal["tenant", "landlord"]
UnitStatus = Literal["vacant", "occupied"]
PaymentStatus = Literal["pending", "completed", "failed", "late"]


def _new_id() -> str:
    return str(uuid4())


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _assume_utc(value: datetime) -> datetime:
    # Naive timestamps are read as UTC so they compare with clock values
    return value.replace(tzinfo=UTC) if value.tzinfo is None else value


UtcDatetime = Annotated[datetime, AfterValidator(_assume_utc)]


class StoredModel(BaseModel):
    """Base for documents persisted in the key-value store (camelCase on disk)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- Invites ---

class InviteCode(StoredModel):
    code: str
    used: bool = False
    # Only written when invite expiry is configured
    issued_at: UtcDatetime | None = None
    expires_at: UtcDatetime | None = None

    def is_expired(self, now: datetime) -> bool:
        return self.expires_at is not None and self.expires_at <= now

# --- Accounts ---

class Account(StoredModel):
    id: str = Field(default_factory=_new_id)
    email: str
    name: str
    role: RoleType
    phone: str | None = None
    avatar: str | None = None
    two_factor_enabled: bool = False
    created_at: UtcDatetime = Field(default_factory=_utcnow)

# --- Properties ---

class Property(StoredModel):
    id: str = Field(default_factory=_new_id)
    landlord_id: str
    name: str
    address: str
    image: str | None = None
    created_at: UtcDatetime = Field(default_factory=_utcnow)

class Unit(StoredModel):
    id: str = Field(default_factory=_new_id)
    property_id: str
    unit_number: str
    rent_amount: float
    tenant_id: str | None = None
    lease_start: date | None = None
    lease_end: date | None = None
    status: UnitStatus = "vacant"

# --- Payments ---

class Payment(StoredModel):
    id: str = Field(default_factory=_new_id)
    tenant_id: str
    unit_id: str
    amount: float
    status: PaymentStatus = "pending"
    due_date: date
    paid_date: UtcDatetime | None = None
    late_fee: float | None = None
    receipt_url: str | None = None
    created_at: UtcDatetime = Field(default_factory=_utcnow)
