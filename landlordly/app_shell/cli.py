import argparse
import logging
import sys
from pathlib import Path

from landlordly.adapters.clipboard import InMemoryClipboard
from landlordly.adapters.clock import SystemClock
from landlordly.adapters.local_store import create_local_store
from landlordly.app_shell.flows import InviteFlow, SignupFlow
from landlordly.components.accounts import (
    InvalidCredentialsError,
    LoginInput,
    SignupForm,
    run_current_account,
    run_login,
    run_logout,
)
from landlordly.components.invite import run_list
from landlordly.core.ports.storage import KeyValueStorePort, StorageError
from landlordly.rules.loader import load_rules
from landlordly.rules.models import Rules

logger = logging.getLogger("landlordly.cli")


def get_rules(path: str | None) -> Rules:
    try:
        return load_rules(Path(path) if path else None)
    except (FileNotFoundError, ValueError) as e:
        logger.error(str(e))
        sys.exit(1)


def handle_issue_invite(store: KeyValueStorePort, rules: Rules, args: argparse.Namespace) -> int:
    clipboard = InMemoryClipboard()
    flow = InviteFlow(store=store, rules=rules, clock=SystemClock(), clipboard=clipboard)
    result = flow.generate()
    if not result.success or result.invite is None:
        logger.error(result.alert.message if result.alert else "Could not save invite.")
        return 1

    print(f"Code: {result.invite.code}")
    print(f"Link: {result.invite.link}")
    return 0


def handle_list_invites(store: KeyValueStorePort, rules: Rules, args: argparse.Namespace) -> int:
    invites = run_list(store=store, rules=rules)
    if not invites:
        print("No invites issued.")
        return 0

    if args.unused:
        invites = [i for i in invites if not i.used]
        if not invites:
            print("No unused invites.")
            return 0

    for invite in invites:
        status = "used" if invite.used else "unused"
        expiry = f"  expires {invite.expires_at.isoformat()}" if invite.expires_at else ""
        print(f"{invite.code}  {status}{expiry}")
    return 0


def handle_signup(store: KeyValueStorePort, rules: Rules, args: argparse.Namespace) -> int:
    flow = SignupFlow(store=store, rules=rules, clock=SystemClock(), invite_link=args.link)
    form = SignupForm(
        name=args.name,
        email=args.email,
        password=args.password,
        confirm_password=args.password,
        role=args.role,
        invite_code=args.invite or "",
    )
    result = flow.submit(form)
    if not result.success or result.account is None:
        alert = result.alert
        logger.error(f"{alert.title}: {alert.message}" if alert else "Signup failed")
        return 1

    print(f"Created {result.account.role} account {result.account.id} for {result.account.email}")
    return 0


def handle_login(store: KeyValueStorePort, rules: Rules, args: argparse.Namespace) -> int:
    try:
        out = run_login(LoginInput(email=args.email, password=args.password), store=store, rules=rules)
    except InvalidCredentialsError as e:
        logger.error(str(e))
        return 1

    print(f"Signed in as {out.account.name} ({out.account.role})")
    return 0


def handle_whoami(store: KeyValueStorePort, rules: Rules, args: argparse.Namespace) -> int:
    account = run_current_account(store=store, rules=rules)
    if account is None:
        print("Not signed in.")
        return 1

    print(f"{account.name} <{account.email}> ({account.role})")
    return 0


def handle_logout(store: KeyValueStorePort, rules: Rules, args: argparse.Namespace) -> int:
    run_logout(store=store, rules=rules)
    print("Signed out.")
    return 0


HANDLERS = {
    "issue-invite": handle_issue_invite,
    "list-invites": handle_list_invites,
    "signup": handle_signup,
    "login": handle_login,
    "whoami": handle_whoami,
    "logout": handle_logout,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Landlordly CLI")
    parser.add_argument("--data-dir", help="Storage directory (default: $LANDLORDLY_DATA_DIR or ./data)")
    parser.add_argument("--rules", help="Rules file (default: $LANDLORDLY_RULES_PATH or packaged rules)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # issue-invite
    subparsers.add_parser("issue-invite", help="Generate a tenant invite code and link")

    # list-invites
    list_parser = subparsers.add_parser("list-invites", help="Show issued invite codes")
    list_parser.add_argument("--unused", action="store_true", help="Only show unused codes")

    # signup
    signup_parser = subparsers.add_parser("signup", help="Create an account")
    signup_parser.add_argument("--role", choices=["tenant", "landlord"], default="tenant")
    signup_parser.add_argument("--email", required=True)
    signup_parser.add_argument("--name", required=True)
    signup_parser.add_argument("--password", required=True)
    invite_group = signup_parser.add_mutually_exclusive_group()
    invite_group.add_argument("--invite", help="Invite code (tenants)")
    invite_group.add_argument("--link", help="Invite link to take the code from (tenants)")

    # login
    login_parser = subparsers.add_parser("login", help="Sign in by email")
    login_parser.add_argument("--email", required=True)
    login_parser.add_argument("--password", default="")

    # whoami / logout
    subparsers.add_parser("whoami", help="Show the signed-in account")
    subparsers.add_parser("logout", help="Sign out")

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    rules = get_rules(args.rules)
    store = create_local_store(args.data_dir)

    try:
        return HANDLERS[args.command](store, rules, args)
    except StorageError as e:
        logger.error(f"Storage error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
