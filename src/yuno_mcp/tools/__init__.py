"""
Yuno Tools - Yuno payment API endpoints as FastMCP tools.

Usage:
    from fastmcp import FastMCP
    from yuno_mcp.tools import register_all_tools
    from yuno_mcp.credentials import CredentialStoreAdapter

    mcp = FastMCP("yuno-mcp")
    credentials = CredentialStoreAdapter.default()
    register_all_tools(mcp, credentials=credentials)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastmcp import FastMCP

from ..config import OutputFormat
from .base import ToolDefinition
from .checkouts import CHECKOUT_TOOLS
from .customers import CUSTOMER_TOOLS
from .documentation import DOCUMENTATION_TOOLS
from .installment_plans import INSTALLMENT_PLAN_TOOLS
from .payment_links import PAYMENT_LINK_TOOLS
from .payment_methods import PAYMENT_METHOD_TOOLS
from .payments import PAYMENT_TOOLS
from .recipients import RECIPIENT_TOOLS
from .registry import ClientProvider, YunoTool
from .routing import ROUTING_TOOLS
from .subscriptions import SUBSCRIPTION_TOOLS

if TYPE_CHECKING:
    from ..client import YunoClient
    from ..credentials import CredentialStoreAdapter

ALL_TOOLS: list[ToolDefinition] = [
    *CUSTOMER_TOOLS,
    *PAYMENT_METHOD_TOOLS,
    *CHECKOUT_TOOLS,
    *SUBSCRIPTION_TOOLS,
    *PAYMENT_TOOLS,
    *PAYMENT_LINK_TOOLS,
    *RECIPIENT_TOOLS,
    *INSTALLMENT_PLAN_TOOLS,
    *DOCUMENTATION_TOOLS,
    *ROUTING_TOOLS,
]


def register_all_tools(
    mcp: FastMCP,
    credentials: CredentialStoreAdapter | None = None,
    output_format: OutputFormat = OutputFormat.TEXT,
    client: YunoClient | None = None,
) -> list[str]:
    """
    Register all Yuno tools with a FastMCP server.

    Args:
        mcp: FastMCP server instance
        credentials: Optional CredentialStoreAdapter instance.
                     If not provided, the client is configured from YUNO_* env vars.
        output_format: Whether tools answer with pretty JSON text or structured objects
        client: Pre-built client; skips lazy construction

    Returns:
        List of registered tool names
    """
    provider = ClientProvider(credentials=credentials, client=client)
    for definition in ALL_TOOLS:
        mcp.add_tool(YunoTool.from_definition(definition, provider, output_format))
    return [definition.method for definition in ALL_TOOLS]


__all__ = ["ALL_TOOLS", "ToolDefinition", "register_all_tools"]
