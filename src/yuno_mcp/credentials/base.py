"""Describes a credential an integration needs."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class CredentialSpec:
    """Describes one secret a set of tools needs and where to find it."""

    env_var: str
    """Environment variable the value is read from."""

    tools: list[str] = field(default_factory=list)
    """Tool names that cannot run without this credential."""

    required: bool = True
    startup_required: bool = False
    """Whether the server refuses to start without it."""

    help_url: str = ""
    description: str = ""
    api_key_instructions: str = ""
