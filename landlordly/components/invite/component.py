"""
Invite component - tenant invite issuance and redemption.

The registry is a single JSON list under one key. Issuance appends an
unused code; redemption flips one matching entry to used. Both are full
read-modify-write cycles with no version check, so two clients redeeming
the same code at the same moment can both succeed. That gap is accepted
for a single-device store and is not patched here.
"""

from __future__ import annotations

import logging
import secrets
from datetime import timedelta
from urllib.parse import urlencode

from pydantic import TypeAdapter

from landlordly.core.ports.storage import DocumentCorruptError
from landlordly.core.services.documents import read_document, write_document
from landlordly.domain.entities import InviteCode
from landlordly.rules.models import Rules

from .models import (
    InviteGenerationError,
    InviteInvalidError,
    InviteRegistryCorruptError,
    InviteRequiredError,
    IssueInviteInput,
    IssueInviteOutput,
    RedeemInviteInput,
    RedeemInviteOutput,
)
from .ports import ClipboardPort, KeyValueStorePort, RandomPort, TimePort

logger = logging.getLogger(__name__)

_REGISTRY = TypeAdapter(list[InviteCode])


# --- Registry ---


def load_registry(store: KeyValueStorePort, key: str) -> list[InviteCode]:
    """Read the registry; an absent key is an empty registry."""
    try:
        invites = read_document(store, key, _REGISTRY)
    except DocumentCorruptError as e:
        raise InviteRegistryCorruptError(key, e.reason) from e
    return invites if invites is not None else []


def save_registry(store: KeyValueStorePort, key: str, invites: list[InviteCode]) -> None:
    """Overwrite the registry with the full list."""
    write_document(store, key, _REGISTRY, invites)


def _load_for_update(store: KeyValueStorePort, rules: Rules) -> list[InviteCode]:
    key = rules.storage.keys.invites
    try:
        return load_registry(store, key)
    except InviteRegistryCorruptError:
        if not rules.invites.reset_corrupt_registry:
            raise
        logger.warning("Invite registry under %r is corrupt; starting from an empty registry", key)
        return []


# --- Issuer ---


def generate_code(length: int, alphabet: str, rng: RandomPort | None = None) -> str:
    """Draw length characters from alphabet. The result is always uppercase."""
    rng = rng or secrets.SystemRandom()
    return "".join(rng.choice(alphabet) for _ in range(length)).upper()


def build_invite_link(base_url: str, signup_path: str, code: str) -> str:
    """<base_url><signup_path>?invite=<code>"""
    path = signup_path if signup_path.startswith("/") else f"/{signup_path}"
    return f"{base_url.rstrip('/')}{path}?{urlencode({'invite': code}, safe='')}"


def run_issue(
    inp: IssueInviteInput,
    *,
    store: KeyValueStorePort,
    rules: Rules,
    clock: TimePort,
    clipboard: ClipboardPort | None = None,
    rng: RandomPort | None = None,
) -> IssueInviteOutput:
    """
    Generate a code, append it to the registry and return the shareable link.

    Raises StorageError (including a corrupt registry) or
    InviteGenerationError; in either case no code was persisted.
    """
    cfg = rules.invites
    length = inp.code_length or cfg.code_length
    alphabet = (inp.alphabet or cfg.alphabet).upper()

    invites = _load_for_update(store, rules)

    code = generate_code(length, alphabet, rng)
    if cfg.ensure_unique:
        existing = {i.code for i in invites}
        attempts = 1
        while code in existing:
            if attempts >= cfg.max_generation_attempts:
                raise InviteGenerationError(attempts)
            code = generate_code(length, alphabet, rng)
            attempts += 1

    invite = InviteCode(code=code, used=False)
    if cfg.expires_after_days is not None:
        now = clock.now_utc()
        invite.issued_at = now
        invite.expires_at = now + timedelta(days=cfg.expires_after_days)

    invites.append(invite)
    save_registry(store, rules.storage.keys.invites, invites)

    link = build_invite_link(rules.app.base_url, rules.app.signup_path, code)
    logger.info("Issued invite %s (registry size %d)", code, len(invites))

    if clipboard is not None:
        try:
            clipboard.copy(link)
        except Exception:
            # The invite is persisted; the link is still returned to the caller
            logger.warning("Could not copy invite link to clipboard", exc_info=True)

    return IssueInviteOutput(code=code, link=link, invite=invite)


# --- Redeemer ---


def run_redeem(
    inp: RedeemInviteInput,
    *,
    store: KeyValueStorePort,
    rules: Rules,
    clock: TimePort,
) -> RedeemInviteOutput:
    """
    Validate and consume an invite code for signup.

    Landlords skip the check entirely. Tenants need an unused, unexpired
    code that matches exactly (unless rules.invites.normalize_case is on).
    The registry is saved before this returns, so the caller creates the
    account only after the code is already consumed.
    """
    if inp.role != "tenant":
        return RedeemInviteOutput(skipped=True)

    code = inp.code
    if rules.invites.normalize_case:
        code = code.strip().upper()

    if not code:
        raise InviteRequiredError()

    invites = _load_for_update(store, rules)
    now = clock.now_utc()

    found = next(
        (i for i in invites if i.code == code and not i.used and not i.is_expired(now)),
        None,
    )
    if found is None:
        logger.warning("Rejected invite code %r", code)
        raise InviteInvalidError(code)

    found.used = True
    save_registry(store, rules.storage.keys.invites, invites)

    logger.info("Redeemed invite %s", code)
    return RedeemInviteOutput(invite=found)


def run_list(*, store: KeyValueStorePort, rules: Rules) -> list[InviteCode]:
    """All issued invites in issuance order."""
    return load_registry(store, rules.storage.keys.invites)
