"""
Yuno MCP - Yuno payment platform tools for FastMCP.

Usage:
    from fastmcp import FastMCP
    from yuno_mcp.tools import register_all_tools
    from yuno_mcp.credentials import CredentialStoreAdapter

    mcp = FastMCP("yuno-mcp")
    register_all_tools(mcp, credentials=CredentialStoreAdapter.default())
"""

__version__ = "1.2.3"
