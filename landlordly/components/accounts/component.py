"""
Accounts component - the account directory and the signed-in account.

Two keys are involved: the directory of known accounts (seeded with the
demo landlord and tenant on first read) and the current account record.
Passwords are checked for form shape only; login matches on email.
"""

from __future__ import annotations

import logging
from typing import cast

from pydantic import TypeAdapter

from landlordly.core.ports.storage import StorageError
from landlordly.core.services.documents import load_or_seed, read_document, write_document
from landlordly.domain.entities import Account, RoleType
from landlordly.domain.seed import demo_accounts
from landlordly.rules.models import Rules

from .models import (
    AccountCreationError,
    AccountOutput,
    DemoProvider,
    InvalidCredentialsError,
    LoginInput,
    SignupForm,
    SignupInput,
    ValidationError,
)
from .ports import KeyValueStorePort, TimePort

logger = logging.getLogger(__name__)

_ACCOUNT = TypeAdapter(Account)
_DIRECTORY = TypeAdapter(list[Account])


# --- Validation ---


def validate_signup_form(form: SignupForm, rules: Rules) -> list[ValidationError]:
    """
    Validate the signup screen fields.

    Missing fields are reported alone; password checks run only once every
    field is filled in.
    """
    errors: list[ValidationError] = []

    for field_name in ("name", "email", "password", "confirm_password"):
        if not getattr(form, field_name):
            errors.append(
                ValidationError(
                    field=field_name,
                    code="required",
                    message="Please fill in all fields",
                )
            )
    if errors:
        return errors

    if form.password != form.confirm_password:
        errors.append(
            ValidationError(
                field="confirm_password",
                code="mismatch",
                message="Passwords do not match",
            )
        )

    min_length = rules.accounts.min_password_length
    if len(form.password) < min_length:
        errors.append(
            ValidationError(
                field="password",
                code="min_length",
                message=f"Password must be at least {min_length} characters",
            )
        )

    return errors


# --- Directory ---


def _load_directory(store: KeyValueStorePort, rules: Rules) -> list[Account]:
    seed = demo_accounts() if rules.accounts.seed_demo_accounts else []
    return load_or_seed(store, rules.storage.keys.accounts, _DIRECTORY, seed)


def _set_current(store: KeyValueStorePort, rules: Rules, account: Account) -> None:
    write_document(store, rules.storage.keys.current_user, _ACCOUNT, account)


def _restore_directory(store: KeyValueStorePort, key: str, accounts: list[Account]) -> None:
    try:
        write_document(store, key, _DIRECTORY, accounts)
    except StorageError:
        logger.exception("Could not remove unfinished account from %s", key)


def run_list_accounts(*, store: KeyValueStorePort, rules: Rules) -> list[Account]:
    return _load_directory(store, rules)


def run_signup(
    inp: SignupInput,
    *,
    store: KeyValueStorePort,
    rules: Rules,
    clock: TimePort,
) -> AccountOutput:
    """
    Create an account, add it to the directory and sign it in.

    Any storage failure is raised as AccountCreationError. If the account
    cannot be signed in after it was added to the directory, the directory
    is written back without it. Invite redemption, if any, has already
    happened and is not undone.
    """
    account = Account(
        email=inp.email,
        name=inp.name,
        role=inp.role,
        created_at=clock.now_utc(),
    )

    key = rules.storage.keys.accounts
    try:
        accounts = _load_directory(store, rules)
        write_document(store, key, _DIRECTORY, [*accounts, account])
    except StorageError as e:
        logger.error("Account creation failed for %s: %s", inp.email, e)
        raise AccountCreationError(inp.email, str(e)) from e

    try:
        _set_current(store, rules, account)
    except StorageError as e:
        logger.error("Could not sign in new account %s: %s", inp.email, e)
        _restore_directory(store, key, accounts)
        raise AccountCreationError(inp.email, str(e)) from e

    logger.info("Created %s account %s", account.role, account.id)
    return AccountOutput(account=account)


def run_login(
    inp: LoginInput,
    *,
    store: KeyValueStorePort,
    rules: Rules,
) -> AccountOutput:
    account = next(
        (a for a in _load_directory(store, rules) if a.email == inp.email),
        None,
    )
    if account is None:
        raise InvalidCredentialsError(inp.email)

    _set_current(store, rules, account)
    return AccountOutput(account=account)


def run_demo_login(
    provider: DemoProvider,
    *,
    store: KeyValueStorePort,
    rules: Rules,
) -> AccountOutput:
    """Social sign-in stand-in: signs in the first tenant (or first account)."""
    accounts = _load_directory(store, rules)
    if not accounts:
        raise InvalidCredentialsError(provider)

    account = next((a for a in accounts if a.role == "tenant"), accounts[0])
    _set_current(store, rules, account)
    logger.info("Demo %s login as %s", provider, account.id)
    return AccountOutput(account=account)


def run_logout(*, store: KeyValueStorePort, rules: Rules) -> None:
    store.remove_item(rules.storage.keys.current_user)


def run_current_account(*, store: KeyValueStorePort, rules: Rules) -> Account | None:
    return read_document(store, rules.storage.keys.current_user, _ACCOUNT)


def run_switch_role(*, store: KeyValueStorePort, rules: Rules) -> Account | None:
    """Toggle the signed-in account between tenant and landlord."""
    current = run_current_account(store=store, rules=rules)
    if current is None:
        return None

    new_role = cast(RoleType, "landlord" if current.role == "tenant" else "tenant")
    updated = current.model_copy(update={"role": new_role})
    _set_current(store, rules, updated)
    return updated
