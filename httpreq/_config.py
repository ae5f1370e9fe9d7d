from os import environ as env
from typing import Literal, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ValidationError

from ._utils.constants import (
    ENV_CA_BUNDLE,
    ENV_DEBUG,
    ENV_DISABLE_SSL_VERIFY,
    ENV_TIMEOUT,
    ENV_TRUST_STORE,
    FALLBACK_CA_BUNDLE_VARS,
)
from .models.exceptions import InvalidConfigError


def _env_flag(name: str) -> bool:
    return env.get(name, "").lower() in ("1", "true", "yes", "on")


def _env_ca_bundle() -> Optional[str]:
    for name in (ENV_CA_BUNDLE, *FALLBACK_CA_BUNDLE_VARS):
        if env.get(name):
            return env[name]
    return None


class Config(BaseModel):
    """Settings shared by every request sent through the default transport."""

    timeout: float = 30.0
    verify_ssl: bool = True
    follow_redirects: bool = True
    debug: bool = False
    trust_store: Literal["system", "certifi"] = "system"
    ca_bundle: Optional[str] = None

    @classmethod
    def from_env(cls) -> "Config":
        """Builds the settings from the environment (and a ``.env`` file, if any).

        Raises:
            InvalidConfigError: If a variable holds an invalid value.
        """
        load_dotenv()

        values = {
            "verify_ssl": not _env_flag(ENV_DISABLE_SSL_VERIFY),
            "debug": _env_flag(ENV_DEBUG),
            "ca_bundle": _env_ca_bundle(),
        }
        if env.get(ENV_TIMEOUT):
            values["timeout"] = env[ENV_TIMEOUT]
        if env.get(ENV_TRUST_STORE):
            values["trust_store"] = env[ENV_TRUST_STORE].lower()

        try:
            return cls(**values)
        except ValidationError as e:
            fields = ", ".join(str(err["loc"][0]) for err in e.errors())
            raise InvalidConfigError(f"Invalid configuration for: {fields}") from e
