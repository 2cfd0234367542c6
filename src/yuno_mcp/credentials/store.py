"""Credential lookup used by tool registration."""

from __future__ import annotations

import os

from .base import CredentialSpec


class CredentialStoreAdapter:
    """Resolve credential values by name.

    Explicit values win; otherwise the credential's environment variable is read at
    lookup time.
    """

    def __init__(
        self,
        specs: dict[str, CredentialSpec],
        values: dict[str, str] | None = None,
        use_env: bool = True,
    ):
        self._specs = specs
        self._values = dict(values or {})
        self._use_env = use_env

    def get(self, name: str) -> str | None:
        """Return the credential value for ``name``, or None when unset."""
        value = self._values.get(name)
        if value:
            return value
        spec = self._specs.get(name)
        if spec is not None and self._use_env:
            return os.getenv(spec.env_var) or None
        return None

    def missing(self) -> list[str]:
        """Names of required credentials that resolve to nothing."""
        return [name for name, spec in self._specs.items() if spec.required and not self.get(name)]

    @classmethod
    def default(cls) -> CredentialStoreAdapter:
        from . import CREDENTIAL_SPECS

        return cls(CREDENTIAL_SPECS)

    @classmethod
    def for_testing(cls, values: dict[str, str]) -> CredentialStoreAdapter:
        """Adapter backed only by ``values``; the environment is ignored."""
        from . import CREDENTIAL_SPECS

        return cls(CREDENTIAL_SPECS, values=values, use_env=False)
