"""Shared fixtures for Yuno MCP tests."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock

import pytest
from fastmcp import FastMCP

from yuno_mcp.client import YunoResponse
from yuno_mcp.config import OutputFormat
from yuno_mcp.credentials import CredentialStoreAdapter
from yuno_mcp.tools import register_all_tools

ACCOUNT_CODE = "9104911d-5df9-429e-8488-ad41abea1a4b"
PUBLIC_KEY = "sandbox_gAAAAABtest"
SECRET_KEY = "gAAAAABsecret"


@pytest.fixture
def make_response():
    """Factory for the YunoResponse a mocked resource method returns."""

    def _make(
        body: Any, status: int = 200, headers: dict[str, str] | None = None
    ) -> YunoResponse:
        return YunoResponse(
            body=body,
            status=status,
            headers=headers if headers is not None else {"content-type": "application/json"},
        )

    return _make


@pytest.fixture
def mcp() -> FastMCP:
    """Create a fresh FastMCP instance for testing."""
    return FastMCP("test-server")


@pytest.fixture
def mock_credentials() -> CredentialStoreAdapter:
    """Create a CredentialStoreAdapter with mock test credentials."""
    return CredentialStoreAdapter.for_testing(
        {
            "yuno_account_code": ACCOUNT_CODE,
            "yuno_public_api_key": PUBLIC_KEY,
            "yuno_private_secret_key": SECRET_KEY,
        }
    )


@pytest.fixture
def mock_client() -> AsyncMock:
    """Stand-in YunoClient; every resource method is awaitable."""
    client = AsyncMock()
    client.account_code = ACCOUNT_CODE
    return client


@pytest.fixture
def tools(mcp: FastMCP, mock_client: AsyncMock) -> dict[str, Any]:
    """Registered tools answering in text mode, keyed by method name."""
    register_all_tools(mcp, client=mock_client)
    return mcp._tool_manager._tools


@pytest.fixture
def object_tools(mock_client: AsyncMock) -> dict[str, Any]:
    """Registered tools answering in object mode."""
    server = FastMCP("test-object-server")
    register_all_tools(server, client=mock_client, output_format=OutputFormat.OBJECT)
    return server._tool_manager._tools
