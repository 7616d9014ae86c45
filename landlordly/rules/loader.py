import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from landlordly.rules.models import Rules

# Packaged default rules file
DEFAULT_RULES_PATH = Path(__file__).with_name("rules.yaml")

RULES_PATH_ENV = "LANDLORDLY_RULES_PATH"


def resolve_rules_path(explicit: str | Path | None = None) -> Path:
    """
    Pick the rules file: explicit argument, then LANDLORDLY_RULES_PATH,
    then the packaged default.
    """
    if explicit is not None:
        return Path(explicit)

    env_path = os.environ.get(RULES_PATH_ENV)
    if env_path:
        return Path(env_path)

    return DEFAULT_RULES_PATH


def load_rules(path: Path | None = None) -> Rules:
    """
    Load and validate the rules file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if the YAML or the schema is invalid.
    """
    path = resolve_rules_path(path)
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found at: {path}")

    with open(path) as f:
        content = f.read()

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    try:
        return Rules.model_validate(data)
    except ValidationError as e:
        # Re-raise with a clear message for the caller/logs
        raise ValueError(f"Rules validation failed:\n{e}") from e
