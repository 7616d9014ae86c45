"""
Screen flows - the boundary where component errors become user alerts.

Each flow keeps a loading flag for the duration of a submission; a second
submission while one is running is refused instead of queued. Nothing is
retried. Messages match what the mobile screens show.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from urllib.parse import parse_qs, urlparse

from landlordly.components.accounts import (
    AccountCreationError,
    SignupForm,
    SignupInput,
    run_signup,
    validate_signup_form,
)
from landlordly.components.invite import (
    ClipboardPort,
    InviteError,
    InviteInvalidError,
    InviteRequiredError,
    IssueInviteInput,
    IssueInviteOutput,
    RandomPort,
    RedeemInviteInput,
    run_issue,
    run_redeem,
)
from landlordly.core.ports.storage import KeyValueStorePort, StorageError
from landlordly.core.ports.time import TimePort
from landlordly.domain.entities import Account
from landlordly.rules.models import Rules

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Alert:
    title: str
    message: str


INVITE_CREATED = Alert("Invite Created", "Link copied to clipboard. Send it to your tenant.")
INVITE_SAVE_FAILED = Alert("Error", "Could not save invite.")
NO_INVITE_CODE = Alert("No Code", "Generate an invite code first.")
INVITE_REQUIRED = Alert("Invite Required", "Tenants must use an invite link from a property manager.")
INVITE_INVALID = Alert("Invalid Invite", "Your invite link is invalid or has been used.")
SIGNUP_FAILED = Alert("Error", "Failed to create account")


@dataclass
class FlowResult:
    success: bool
    alert: Alert | None = None
    account: Account | None = None
    invite: IssueInviteOutput | None = None
    params: dict[str, str] = field(default_factory=dict)


class SubmissionInProgressError(RuntimeError):
    """Raised when a flow is submitted again before the previous submission finished."""


def parse_invite_link(link: str | None) -> str | None:
    """Extract the invite query parameter from a signup deep link."""
    if not link:
        return None
    values = parse_qs(urlparse(link).query).get("invite")
    return values[0] if values else None


class _Flow:
    def __init__(self, *, store: KeyValueStorePort, rules: Rules, clock: TimePort) -> None:
        self.store = store
        self.rules = rules
        self.clock = clock
        self.loading = False

    @contextmanager
    def _busy(self) -> Iterator[None]:
        if self.loading:
            raise SubmissionInProgressError(f"{type(self).__name__} is already submitting")
        self.loading = True
        try:
            yield
        finally:
            self.loading = False


class InviteFlow(_Flow):
    """Landlord screen that generates tenant invite links."""

    def __init__(
        self,
        *,
        store: KeyValueStorePort,
        rules: Rules,
        clock: TimePort,
        clipboard: ClipboardPort | None = None,
        rng: RandomPort | None = None,
    ) -> None:
        super().__init__(store=store, rules=rules, clock=clock)
        self.clipboard = clipboard
        self.rng = rng
        self.last_code = ""

    def generate(self) -> FlowResult:
        with self._busy():
            try:
                out = run_issue(
                    IssueInviteInput(),
                    store=self.store,
                    rules=self.rules,
                    clock=self.clock,
                    clipboard=self.clipboard,
                    rng=self.rng,
                )
            except (StorageError, InviteError) as e:
                logger.warning("Invite generation failed: %s", e)
                return FlowResult(success=False, alert=INVITE_SAVE_FAILED)

        # Only a persisted code is ever shown as usable
        self.last_code = out.code
        return FlowResult(success=True, alert=INVITE_CREATED, invite=out)

    def signup_params(self) -> FlowResult:
        """Route parameters for opening signup with the last generated code."""
        if not self.last_code:
            return FlowResult(success=False, alert=NO_INVITE_CODE)
        return FlowResult(success=True, params={"invite": self.last_code})


class SignupFlow(_Flow):
    """Signup screen: form checks, invite redemption, then account creation."""

    def __init__(
        self,
        *,
        store: KeyValueStorePort,
        rules: Rules,
        clock: TimePort,
        invite_link: str | None = None,
    ) -> None:
        super().__init__(store=store, rules=rules, clock=clock)
        self.prefilled_code = parse_invite_link(invite_link) or ""
        # Arriving through an invite link pins the role to tenant
        self.role_locked = bool(self.prefilled_code)

    def submit(self, form: SignupForm) -> FlowResult:
        errors = validate_signup_form(form, self.rules)
        if errors:
            return FlowResult(success=False, alert=Alert("Error", errors[0].message))

        role = "tenant" if self.role_locked else form.role
        code = form.invite_code or self.prefilled_code

        with self._busy():
            try:
                run_redeem(
                    RedeemInviteInput(role=role, code=code),
                    store=self.store,
                    rules=self.rules,
                    clock=self.clock,
                )
            except InviteRequiredError:
                return FlowResult(success=False, alert=INVITE_REQUIRED)
            except InviteInvalidError:
                return FlowResult(success=False, alert=INVITE_INVALID)
            except StorageError as e:
                logger.warning("Invite redemption failed: %s", e)
                return FlowResult(success=False, alert=SIGNUP_FAILED)

            try:
                out = run_signup(
                    SignupInput(email=form.email, name=form.name, role=role),
                    store=self.store,
                    rules=self.rules,
                    clock=self.clock,
                )
            except AccountCreationError as e:
                # The invite stays consumed
                logger.warning("Signup failed after invite redemption: %s", e)
                return FlowResult(success=False, alert=SIGNUP_FAILED)

        return FlowResult(success=True, account=out.account)
