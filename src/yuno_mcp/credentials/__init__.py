"""
Credential specs and lookup for the Yuno tools.

Usage:
    from yuno_mcp.credentials import CredentialStoreAdapter

    credentials = CredentialStoreAdapter.default()
    credentials.get("yuno_public_api_key")
"""

from .base import CredentialSpec
from .health_check import HealthCheckResult, YunoHealthChecker
from .store import CredentialStoreAdapter
from .yuno import YUNO_API_TOOLS, YUNO_CREDENTIALS

CREDENTIAL_SPECS: dict[str, CredentialSpec] = {
    **YUNO_CREDENTIALS,
}

__all__ = [
    "CREDENTIAL_SPECS",
    "CredentialSpec",
    "CredentialStoreAdapter",
    "HealthCheckResult",
    "YUNO_API_TOOLS",
    "YunoHealthChecker",
]
