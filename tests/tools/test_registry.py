"""Tests for FastMCP registration and the client provider."""

from __future__ import annotations

import json

import pytest
from fastmcp import FastMCP

from yuno_mcp.client import YunoClient
from yuno_mcp.credentials import CredentialStoreAdapter
from yuno_mcp.errors import ClientNotInitializedError
from yuno_mcp.tools import ALL_TOOLS, register_all_tools
from yuno_mcp.tools.base import ObjectContent, TextContent, ToolOutput
from yuno_mcp.tools.registry import ClientProvider, to_tool_result

ENV_VARS = ("YUNO_ACCOUNT_CODE", "YUNO_PUBLIC_API_KEY", "YUNO_PRIVATE_SECRET_KEY")


class TestRegistration:
    def test_registers_all_tools_in_order(self, mcp: FastMCP, mock_client):
        names = register_all_tools(mcp, client=mock_client)

        assert len(names) == 46
        assert len(set(names)) == 46
        assert names[0] == "customerCreate"
        assert names[-1] == "routingLogOut"
        assert set(mcp._tool_manager._tools) == set(names)

    def test_parameters_come_from_input_model(self, tools):
        params = tools["customerRetrieve"].parameters

        assert params["required"] == ["customerId"]
        assert params["properties"]["customerId"]["minLength"] == 36
        assert params["properties"]["customerId"]["maxLength"] == 64

    def test_descriptions(self, tools):
        assert tools["customerCreate"].description == "Create a new customer in Yuno."

    def test_tool_catalogue(self):
        names = [definition.method for definition in ALL_TOOLS]
        for expected in (
            "paymentMethodEnroll",
            "checkoutSessionCreateOtt",
            "subscriptionCancel",
            "paymentCaptureAuthorization",
            "paymentLinkCancel",
            "recipientDelete",
            "installmentPlanRetrieveAll",
            "documentationRead",
            "routingPost",
        ):
            assert expected in names


class TestClientProvider:
    def test_prebuilt_client_returned(self, mock_client):
        assert ClientProvider(client=mock_client)() is mock_client

    def test_builds_once_from_credentials(self, mock_credentials):
        provider = ClientProvider(credentials=mock_credentials)

        client = provider()

        assert isinstance(client, YunoClient)
        assert client.config.base_url == "https://api-sandbox.y.uno/v1"
        assert provider() is client

    def test_missing_credentials(self):
        provider = ClientProvider(credentials=CredentialStoreAdapter.for_testing({}))

        with pytest.raises(ClientNotInitializedError, match="not initialized"):
            provider()

    def test_unknown_key_prefix_stays_uninitialized(self):
        provider = ClientProvider(
            credentials=CredentialStoreAdapter.for_testing(
                {
                    "yuno_account_code": "acc-123",
                    "yuno_public_api_key": "live_x",
                    "yuno_private_secret_key": "secret",
                }
            )
        )

        for _ in range(2):
            with pytest.raises(ClientNotInitializedError, match="prefix 'live'"):
                provider()

    def test_falls_back_to_environment(self, monkeypatch):
        for name in ENV_VARS:
            monkeypatch.delenv(name, raising=False)

        with pytest.raises(ClientNotInitializedError, match="YUNO_ACCOUNT_CODE"):
            ClientProvider()()


class TestToolResult:
    def test_text_items(self):
        result = to_tool_result(ToolOutput([TextContent("one"), TextContent("two")]))

        assert [item.text for item in result.content] == ["one", "two"]
        assert result.structured_content is None

    def test_object_becomes_structured_content(self):
        result = to_tool_result(ToolOutput([ObjectContent({"id": "p1"}), TextContent("hdrs")]))

        assert result.structured_content == {"id": "p1"}
        assert json.loads(result.content[0].text) == {"id": "p1"}
        assert result.content[1].text == "hdrs"

    def test_non_dict_object_is_wrapped(self):
        result = to_tool_result(ToolOutput([ObjectContent([1, 2])]))

        assert result.structured_content == {"result": [1, 2]}


class TestRun:
    @pytest.mark.asyncio
    async def test_run_returns_mcp_content(self, tools, mock_client, make_response):
        mock_client.customers.retrieve.return_value = make_response({"id": "c" * 36})

        result = await tools["customerRetrieve"].run({"customerId": "c" * 36})

        assert json.loads(result.content[0].text) == {"id": "c" * 36}

    @pytest.mark.asyncio
    async def test_uninitialized_client_reported_as_text(self):
        server = FastMCP("no-credentials")
        register_all_tools(server, credentials=CredentialStoreAdapter.for_testing({}))
        tool = server._tool_manager._tools["customerRetrieve"]

        output = await tool.invoke({"customerId": "c" * 36})

        assert len(output.content) == 1
        assert output.content[0].text.startswith("Yuno client not initialized")

    @pytest.mark.asyncio
    async def test_unknown_key_prefix_reported_on_every_call(self):
        server = FastMCP("live-key")
        credentials = CredentialStoreAdapter.for_testing(
            {
                "yuno_account_code": "acc-123",
                "yuno_public_api_key": "live_x",
                "yuno_private_secret_key": "secret",
            }
        )
        register_all_tools(server, credentials=credentials)
        tool = server._tool_manager._tools["customerRetrieve"]

        first = await tool.invoke({"customerId": "c" * 36})
        second = await tool.invoke({"customerId": "c" * 36})

        assert first.content[0].text.startswith("Yuno client not initialized")
        assert second.content[0].text == first.content[0].text
