"""
Credential health checks for the Yuno API.

Makes one lightweight authenticated request to confirm the key pair is
accepted before the server starts handing out tools.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import httpx

from ..config import API_URL_TEMPLATE, environment_suffix
from ..errors import ConfigError


@dataclass
class HealthCheckResult:
    """Result of a credential health check."""

    valid: bool
    """Whether the credential is valid."""

    message: str
    """Human-readable status message."""

    details: dict[str, Any] = field(default_factory=dict)
    """Additional details (e.g., error codes)."""


class YunoHealthChecker:
    """Health checker for the Yuno public/private key pair."""

    PROBE_PATH = "/customers"
    PROBE_PARAMS = {"merchant_customer_id": "yuno-mcp-health-check"}
    TIMEOUT = 10.0

    def check(
        self,
        public_api_key: str,
        private_secret_key: str,
        base_url: str | None = None,
    ) -> HealthCheckResult:
        """
        Validate the key pair by looking up a customer that does not exist.

        A 404 still proves the keys were accepted.
        """
        if base_url is None:
            try:
                base_url = API_URL_TEMPLATE.format(suffix=environment_suffix(public_api_key))
            except ConfigError as e:
                return HealthCheckResult(valid=False, message=str(e), details={"error": "prefix"})

        try:
            with httpx.Client(timeout=self.TIMEOUT) as client:
                response = client.get(
                    f"{base_url.rstrip('/')}{self.PROBE_PATH}",
                    headers={
                        "Accept": "application/json",
                        "public-api-key": public_api_key,
                        "private-secret-key": private_secret_key,
                    },
                    params=self.PROBE_PARAMS,
                )

                if response.status_code in (200, 404):
                    return HealthCheckResult(valid=True, message="Yuno credentials valid")
                elif response.status_code in (401, 403):
                    return HealthCheckResult(
                        valid=False,
                        message="Yuno API keys are invalid or lack access",
                        details={"status_code": response.status_code},
                    )
                else:
                    return HealthCheckResult(
                        valid=False,
                        message=f"Yuno API returned status {response.status_code}",
                        details={"status_code": response.status_code},
                    )
        except httpx.TimeoutException:
            return HealthCheckResult(
                valid=False,
                message="Yuno API request timed out",
                details={"error": "timeout"},
            )
        except httpx.RequestError as e:
            return HealthCheckResult(
                valid=False,
                message=f"Failed to connect to Yuno: {e}",
                details={"error": str(e)},
            )
