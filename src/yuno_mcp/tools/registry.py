"""FastMCP adapter for Yuno tool definitions."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult
from mcp.types import TextContent as MCPTextContent
from pydantic import Field

from ..client import YunoClient
from ..config import OutputFormat, YunoConfig
from ..errors import ClientNotInitializedError, ConfigError
from .base import ObjectContent, ToolDefinition, ToolOutput, dispatch, to_json

if TYPE_CHECKING:
    from ..credentials import CredentialStoreAdapter

logger = logging.getLogger(__name__)


class ClientProvider:
    """Builds the Yuno client on first use and keeps it for the process."""

    def __init__(
        self,
        credentials: CredentialStoreAdapter | None = None,
        client: YunoClient | None = None,
    ):
        self._credentials = credentials
        self._client = client

    def __call__(self) -> YunoClient:
        if self._client is None:
            try:
                if self._credentials is not None:
                    config = YunoConfig.from_credentials(self._credentials)
                else:
                    config = YunoConfig.from_env()
                base_url = config.base_url
                client = YunoClient(config)
            except ConfigError as e:
                raise ClientNotInitializedError(str(e)) from e
            self._client = client
            logger.info("Yuno client initialized against %s", base_url)
        return self._client


def to_tool_result(output: ToolOutput) -> ToolResult:
    """Convert the envelope into MCP content; an object item also becomes structured content."""
    content: list[MCPTextContent] = []
    structured: dict[str, Any] | None = None
    for item in output.content:
        if isinstance(item, ObjectContent):
            if structured is None:
                structured = item.object if isinstance(item.object, dict) else {"result": item.object}
            content.append(MCPTextContent(type="text", text=to_json(item.object)))
        else:
            content.append(MCPTextContent(type="text", text=item.text))
    return ToolResult(content=content, structured_content=structured)


class YunoTool(Tool):
    """A FastMCP tool backed by a ToolDefinition and the shared dispatcher."""

    definition: Any = Field(exclude=True)
    client_provider: Any = Field(exclude=True)
    output_format: Any = Field(default=OutputFormat.TEXT, exclude=True)

    @classmethod
    def from_definition(
        cls,
        definition: ToolDefinition,
        client_provider: ClientProvider,
        output_format: OutputFormat = OutputFormat.TEXT,
    ) -> YunoTool:
        return cls(
            name=definition.method,
            description=definition.description,
            parameters=definition.schema.model_json_schema(),
            definition=definition,
            client_provider=client_provider,
            output_format=output_format,
        )

    async def invoke(self, arguments: dict[str, Any] | None) -> ToolOutput:
        """Run the tool and return the raw envelope."""
        return await dispatch(self.definition, arguments, self.client_provider, self.output_format)

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        return to_tool_result(await self.invoke(arguments))
