from pydantic import BaseModel, Field, field_validator


class AppRules(BaseModel):
    name: str
    base_url: str
    signup_path: str

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

class StorageKeys(BaseModel):
    invites: str = "invites"
    current_user: str = "user"
    accounts: str = "accounts"
    properties: str = "properties"
    units: str = "units"
    payments: str = "payments"

class StorageRules(BaseModel):
    keys: StorageKeys = Field(default_factory=StorageKeys)

class InviteRules(BaseModel):
    code_length: int = Field(ge=4, le=32)
    alphabet: str = Field(min_length=2)
    normalize_case: bool = False
    ensure_unique: bool = False
    max_generation_attempts: int = Field(default=5, ge=1)
    expires_after_days: int | None = Field(default=None, ge=1)
    reset_corrupt_registry: bool = False

    @field_validator("alphabet")
    @classmethod
    def uppercase_alphabet(cls, v: str) -> str:
        # Codes are always issued uppercase
        upper = v.upper()
        if len(set(upper)) != len(upper):
            raise ValueError("alphabet must not contain duplicate characters (case-insensitive)")
        return upper

class AccountRules(BaseModel):
    min_password_length: int = Field(ge=1)
    seed_demo_accounts: bool = True

class DemoRules(BaseModel):
    seed_data: bool = True

class Rules(BaseModel):
    app: AppRules
    storage: StorageRules = Field(default_factory=StorageRules)
    invites: InviteRules
    accounts: AccountRules
    demo: DemoRules = Field(default_factory=DemoRules)
