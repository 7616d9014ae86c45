"""
Invite component - Tenant invite issuance and redemption.
"""

from .component import (
    build_invite_link,
    generate_code,
    load_registry,
    run_issue,
    run_list,
    run_redeem,
    save_registry,
)
from .models import (
    InviteError,
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

__all__ = [
    # Entry points
    "run_issue",
    "run_redeem",
    "run_list",
    # Registry
    "load_registry",
    "save_registry",
    # Helpers
    "generate_code",
    "build_invite_link",
    # Input models
    "IssueInviteInput",
    "RedeemInviteInput",
    # Output models
    "IssueInviteOutput",
    "RedeemInviteOutput",
    # Errors
    "InviteError",
    "InviteRequiredError",
    "InviteInvalidError",
    "InviteGenerationError",
    "InviteRegistryCorruptError",
    # Ports
    "ClipboardPort",
    "KeyValueStorePort",
    "RandomPort",
    "TimePort",
]
