"""Tests for the customer tools."""

from __future__ import annotations

import json

import pytest

from yuno_mcp.errors import YunoAPIError
from yuno_mcp.tools.base import ObjectContent

CUSTOMER_ID = "3f6d7c1e-2b4a-4c8e-9d1f-0a5b6c7d8e9f"


class TestCustomerCreate:
    @pytest.mark.asyncio
    async def test_forwards_input_unchanged(self, tools, mock_client, make_response):
        mock_client.customers.create.return_value = make_response(
            {"id": "cus_123", "email": "test@example.com"}
        )

        output = await tools["customerCreate"].invoke(
            {"merchant_customer_id": "abc", "email": "test@example.com"}
        )

        mock_client.customers.create.assert_awaited_once_with(
            {"merchant_customer_id": "abc", "email": "test@example.com"}
        )
        assert len(output.content) == 1
        text = output.content[0].text
        assert '"cus_123"' in text
        assert '"test@example.com"' in text

    @pytest.mark.asyncio
    async def test_text_round_trips(self, tools, mock_client, make_response):
        body = {"id": "cus_123", "metadata": [{"key": "tier", "value": "gold"}], "phone": None}
        mock_client.customers.create.return_value = make_response(body)

        output = await tools["customerCreate"].invoke(
            {"merchant_customer_id": "abc", "email": "test@example.com"}
        )

        assert json.loads(output.content[0].text) == body

    @pytest.mark.asyncio
    async def test_object_mode_returns_raw_body(self, object_tools, mock_client, make_response):
        body = {"id": "cus_123", "email": "test@example.com"}
        mock_client.customers.create.return_value = make_response(body)

        output = await object_tools["customerCreate"].invoke(
            {"merchant_customer_id": "abc", "email": "test@example.com"}
        )

        assert output.content == [ObjectContent(body)]

    @pytest.mark.asyncio
    async def test_requires_email(self, tools, mock_client):
        output = await tools["customerCreate"].invoke({"merchant_customer_id": "abc"})

        assert "email" in output.content[0].text
        mock_client.customers.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_nested_address_validated(self, tools, mock_client):
        output = await tools["customerCreate"].invoke(
            {
                "merchant_customer_id": "abc",
                "email": "test@example.com",
                "billing_address": {"address_line_1": "Main 1", "city": "Bogota"},
            }
        )

        assert "billing_address.state" in output.content[0].text
        mock_client.customers.create.assert_not_called()


class TestCustomerRetrieve:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("length", [36, 64])
    async def test_id_length_bounds_accepted(self, tools, mock_client, make_response, length):
        mock_client.customers.retrieve.return_value = make_response({"id": "x"})

        await tools["customerRetrieve"].invoke({"customerId": "c" * length})

        mock_client.customers.retrieve.assert_awaited_once_with("c" * length)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("length", [35, 65])
    async def test_id_length_bounds_rejected(self, tools, mock_client, length):
        output = await tools["customerRetrieve"].invoke({"customerId": "c" * length})

        assert output.content[0].text.startswith("Invalid input for customerRetrieve:")
        assert "customerId" in output.content[0].text
        mock_client.customers.retrieve.assert_not_called()

    @pytest.mark.asyncio
    async def test_api_error_reported(self, tools, mock_client):
        mock_client.customers.retrieve.side_effect = YunoAPIError(
            "Customer not found", status=404
        )

        output = await tools["customerRetrieve"].invoke({"customerId": CUSTOMER_ID})

        assert output.content[0].text == "Yuno API error (HTTP 404): Customer not found"


class TestCustomerRetrieveByExternalId:
    @pytest.mark.asyncio
    async def test_looks_up_by_merchant_id(self, tools, mock_client, make_response):
        mock_client.customers.retrieve_by_external_id.return_value = make_response({"id": "x"})

        await tools["customerRetrieveByExternalId"].invoke({"merchant_customer_id": "abc"})

        mock_client.customers.retrieve_by_external_id.assert_awaited_once_with("abc")


class TestCustomerUpdate:
    @pytest.mark.asyncio
    async def test_only_id_sends_empty_update(self, tools, mock_client, make_response):
        mock_client.customers.update.return_value = make_response({"id": CUSTOMER_ID})

        await tools["customerUpdate"].invoke({"customerId": CUSTOMER_ID})

        mock_client.customers.update.assert_awaited_once_with(CUSTOMER_ID, {})

    @pytest.mark.asyncio
    async def test_sends_only_supplied_fields(self, tools, mock_client, make_response):
        mock_client.customers.update.return_value = make_response({"id": CUSTOMER_ID})

        await tools["customerUpdate"].invoke(
            {"customerId": CUSTOMER_ID, "first_name": "Ana", "gender": "F"}
        )

        mock_client.customers.update.assert_awaited_once_with(
            CUSTOMER_ID, {"first_name": "Ana", "gender": "F"}
        )
