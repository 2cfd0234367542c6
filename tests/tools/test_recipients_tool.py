"""Tests for the recipient tools."""

from __future__ import annotations

import pytest

from tests.conftest import ACCOUNT_CODE


class TestRecipientCreate:
    @pytest.mark.asyncio
    async def test_account_defaulted(self, tools, mock_client, make_response):
        mock_client.recipients.create.return_value = make_response({"id": "rec_1"})

        await tools["recipientCreate"].invoke(
            {"national_entity": "INDIVIDUAL", "first_name": "Ana", "email": "ana@example.com"}
        )

        sent = mock_client.recipients.create.call_args.args[0]
        assert sent["account_id"] == ACCOUNT_CODE
        assert sent["email"] == "ana@example.com"

    @pytest.mark.asyncio
    async def test_national_entity_restricted(self, tools, mock_client):
        output = await tools["recipientCreate"].invoke({"national_entity": "COMPANY"})

        assert "national_entity" in output.content[0].text
        mock_client.recipients.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_email_validated(self, tools, mock_client):
        output = await tools["recipientCreate"].invoke(
            {"national_entity": "INDIVIDUAL", "email": "ana-at-example"}
        )

        assert "email" in output.content[0].text
        mock_client.recipients.create.assert_not_called()


class TestRecipientById:
    @pytest.mark.asyncio
    async def test_retrieve(self, tools, mock_client, make_response):
        mock_client.recipients.retrieve.return_value = make_response({"id": "rec_1"})

        await tools["recipientRetrieve"].invoke({"recipientId": "rec_1"})

        mock_client.recipients.retrieve.assert_awaited_once_with("rec_1")

    @pytest.mark.asyncio
    async def test_update_strips_id(self, tools, mock_client, make_response):
        mock_client.recipients.update.return_value = make_response({})

        await tools["recipientUpdate"].invoke({"recipientId": "rec_1", "website": "https://a.co"})

        mock_client.recipients.update.assert_awaited_once_with(
            "rec_1", {"website": "https://a.co"}
        )

    @pytest.mark.asyncio
    async def test_delete(self, tools, mock_client, make_response):
        mock_client.recipients.delete.return_value = make_response(None, status=204)

        output = await tools["recipientDelete"].invoke({"recipientId": "rec_1"})

        mock_client.recipients.delete.assert_awaited_once_with("rec_1")
        assert output.content[0].text == "null"
