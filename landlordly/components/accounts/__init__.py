"""
Accounts component - Account directory, signup and the signed-in account.
"""

from .component import (
    run_current_account,
    run_demo_login,
    run_list_accounts,
    run_login,
    run_logout,
    run_signup,
    run_switch_role,
    validate_signup_form,
)
from .models import (
    AccountCreationError,
    AccountError,
    AccountOutput,
    InvalidCredentialsError,
    LoginInput,
    SignupForm,
    SignupInput,
    ValidationError,
)
from .ports import KeyValueStorePort, TimePort

__all__ = [
    # Entry points
    "run_signup",
    "run_login",
    "run_demo_login",
    "run_logout",
    "run_current_account",
    "run_switch_role",
    "run_list_accounts",
    "validate_signup_form",
    # Models
    "SignupForm",
    "SignupInput",
    "LoginInput",
    "AccountOutput",
    "ValidationError",
    # Errors
    "AccountError",
    "AccountCreationError",
    "InvalidCredentialsError",
    # Ports
    "KeyValueStorePort",
    "TimePort",
]
