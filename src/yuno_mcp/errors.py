"""Exceptions raised by the Yuno client and the tool dispatcher."""

from __future__ import annotations

from typing import Any


class YunoError(Exception):
    """Base class for every error raised by this package."""


class ConfigError(YunoError):
    """Configuration is missing or malformed."""


class ClientNotInitializedError(YunoError):
    """A tool needing the Yuno client was invoked before the client existed."""

    def __init__(self, reason: str | None = None):
        message = "Yuno client not initialized"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.reason = reason


class YunoAPIError(YunoError):
    """The Yuno API could not be reached or answered with an error."""

    def __init__(self, message: str, status: int | None = None, body: Any = None):
        super().__init__(message)
        self.message = message
        self.status = status
        self.body = body

    def __str__(self) -> str:
        if self.status is None:
            return self.message
        return f"Yuno API error (HTTP {self.status}): {self.message}"


class RoutingSessionError(YunoError):
    """A routing tool was used without an active dashboard session."""


class ToolInputError(YunoError):
    """Tool arguments failed schema validation."""

    def __init__(self, method: str, violations: list[str]):
        self.method = method
        self.violations = violations
        details = "\n".join(f"- {v}" for v in violations)
        super().__init__(f"Invalid input for {method}:\n{details}")
