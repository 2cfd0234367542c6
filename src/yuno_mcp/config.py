"""Yuno client configuration.

Credentials and endpoints are read once at startup, either from the
environment or from a credential store adapter, and held for the lifetime
of the process.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from .errors import ConfigError

if TYPE_CHECKING:
    from .credentials import CredentialStoreAdapter

# ---------------------------------------------------------------------------
# Environments
# ---------------------------------------------------------------------------

API_KEY_PREFIX_TO_SUFFIX: dict[str, str] = {
    "dev": "-dev",
    "staging": "-staging",
    "sandbox": "-sandbox",
    "prod": "",
}

API_URL_TEMPLATE = "https://api{suffix}.y.uno/v1"
DASHBOARD_URL_TEMPLATE = "https://dashboard-api{suffix}.y.uno/v1"


class OutputFormat(str, Enum):
    """Shape of the content a tool hands back to the host."""

    TEXT = "text"
    OBJECT = "object"


def environment_suffix(public_api_key: str) -> str:
    """Return the hostname suffix for the environment encoded in the key prefix.

    Public keys look like ``sandbox_XXXX``; the part before the first
    underscore names the environment.
    """
    prefix = public_api_key.split("_", 1)[0]
    if prefix not in API_KEY_PREFIX_TO_SUFFIX:
        raise ConfigError(
            f"Unrecognized public API key prefix '{prefix}'. "
            f"Expected one of: {', '.join(API_KEY_PREFIX_TO_SUFFIX)}"
        )
    return API_KEY_PREFIX_TO_SUFFIX[prefix]


def _parse_timeout(raw: str | None) -> float | None:
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError as e:
        raise ConfigError(f"YUNO_HTTP_TIMEOUT must be a number, got '{raw}'") from e


def parse_output_format(raw: str | None) -> OutputFormat:
    """Parse an output format name, defaulting to text."""
    if not raw:
        return OutputFormat.TEXT
    try:
        return OutputFormat(raw.lower())
    except ValueError as e:
        raise ConfigError(f"Output format must be 'text' or 'object', got '{raw}'") from e


# ---------------------------------------------------------------------------
# Client configuration
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class YunoConfig:
    """Everything the Yuno client needs to talk to the API."""

    account_code: str
    public_api_key: str
    private_secret_key: str
    api_url: str | None = None
    """Explicit API base URL; derived from the public key prefix when unset."""

    dashboard_url: str | None = None
    """Explicit dashboard API base URL used by the routing tools."""

    timeout: float | None = None
    """Per-request timeout in seconds; None waits indefinitely."""

    @property
    def base_url(self) -> str:
        if self.api_url:
            return self.api_url.rstrip("/")
        return API_URL_TEMPLATE.format(suffix=environment_suffix(self.public_api_key))

    @property
    def dashboard_base_url(self) -> str:
        if self.dashboard_url:
            return self.dashboard_url.rstrip("/")
        return DASHBOARD_URL_TEMPLATE.format(suffix=environment_suffix(self.public_api_key))

    @classmethod
    def from_env(cls) -> YunoConfig:
        """Build a config from ``YUNO_*`` environment variables."""
        missing = [
            name
            for name in ("YUNO_ACCOUNT_CODE", "YUNO_PUBLIC_API_KEY", "YUNO_PRIVATE_SECRET_KEY")
            if not os.getenv(name)
        ]
        if missing:
            raise ConfigError(f"Missing environment variables: {', '.join(missing)}")
        return cls(
            account_code=os.environ["YUNO_ACCOUNT_CODE"],
            public_api_key=os.environ["YUNO_PUBLIC_API_KEY"],
            private_secret_key=os.environ["YUNO_PRIVATE_SECRET_KEY"],
            api_url=os.getenv("YUNO_API_URL") or None,
            dashboard_url=os.getenv("YUNO_DASHBOARD_URL") or None,
            timeout=_parse_timeout(os.getenv("YUNO_HTTP_TIMEOUT")),
        )

    @classmethod
    def from_credentials(cls, credentials: CredentialStoreAdapter) -> YunoConfig:
        """Build a config from a credential store adapter.

        Optional endpoint settings still come from the environment.
        """
        values = {
            "account_code": credentials.get("yuno_account_code"),
            "public_api_key": credentials.get("yuno_public_api_key"),
            "private_secret_key": credentials.get("yuno_private_secret_key"),
        }
        missing = [name for name, value in values.items() if not value]
        if missing:
            raise ConfigError(f"Missing Yuno credentials: {', '.join(missing)}")
        return cls(
            **values,
            api_url=os.getenv("YUNO_API_URL") or None,
            dashboard_url=os.getenv("YUNO_DASHBOARD_URL") or None,
            timeout=_parse_timeout(os.getenv("YUNO_HTTP_TIMEOUT")),
        )
