from dataclasses import dataclass

from landlordly.core.ports.storage import DocumentCorruptError
from landlordly.domain.entities import InviteCode, RoleType


@dataclass
class IssueInviteInput:
    # Defaults come from rules.invites when unset
    code_length: int | None = None
    alphabet: str | None = None


@dataclass
class IssueInviteOutput:
    code: str
    link: str
    invite: InviteCode


@dataclass
class RedeemInviteInput:
    role: RoleType
    code: str


@dataclass
class RedeemInviteOutput:
    invite: InviteCode | None = None
    skipped: bool = False


class InviteError(Exception):
    """Base exception for invite issuance and redemption."""


class InviteRequiredError(InviteError):
    """Raised when a tenant signs up without an invite code."""

    def __init__(self) -> None:
        super().__init__("An invite code is required for tenant signup")


class InviteInvalidError(InviteError):
    """Raised when a code was never issued, is already used, or has expired."""

    def __init__(self, code: str) -> None:
        self.code = code
        super().__init__(f"Invite code '{code}' is invalid or has been used")


class InviteGenerationError(InviteError):
    """Raised when no collision-free code could be generated."""

    def __init__(self, attempts: int) -> None:
        self.attempts = attempts
        super().__init__(f"Could not generate a unique invite code after {attempts} attempts")


class InviteRegistryCorruptError(DocumentCorruptError, InviteError):
    """Raised when the stored invite registry cannot be parsed."""
