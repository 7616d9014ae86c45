from dataclasses import dataclass
from typing import Literal

from landlordly.domain.entities import Account, RoleType

DemoProvider = Literal["apple", "google"]


@dataclass
class SignupForm:
    """Raw signup screen fields, before any validation."""

    name: str
    email: str
    password: str
    confirm_password: str
    role: RoleType = "tenant"
    invite_code: str = ""


@dataclass
class SignupInput:
    email: str
    name: str
    role: RoleType


@dataclass
class LoginInput:
    email: str
    password: str


@dataclass
class AccountOutput:
    account: Account


@dataclass(frozen=True)
class ValidationError:
    """Validation error with actionable message."""

    field: str
    code: str
    message: str


class AccountError(Exception):
    """Base exception for the account directory."""


class AccountCreationError(AccountError):
    """Raised when the account record could not be persisted."""

    def __init__(self, email: str, reason: str = "") -> None:
        self.email = email
        self.reason = reason
        message = f"Failed to create account for {email}"
        super().__init__(f"{message} ({reason})" if reason else message)


class InvalidCredentialsError(AccountError):
    """Raised when no account matches the login email."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__("Invalid credentials")
