"""Tests for the payment link tools."""

from __future__ import annotations

import pytest

from tests.conftest import ACCOUNT_CODE

LINK = {
    "country": "CO",
    "amount": {"currency": "COP", "value": 5000},
    "payment_method_types": ["CARD"],
}


class TestPaymentLinkCreate:
    @pytest.mark.asyncio
    async def test_account_defaulted(self, tools, mock_client, make_response):
        mock_client.payment_links.create.return_value = make_response({"code": "pl_1"})

        await tools["paymentLinkCreate"].invoke(LINK)

        sent = mock_client.payment_links.create.call_args.args[0]
        assert sent == {**LINK, "account_id": ACCOUNT_CODE}

    @pytest.mark.asyncio
    async def test_payment_method_types_required(self, tools, mock_client):
        output = await tools["paymentLinkCreate"].invoke(
            {"country": "CO", "amount": {"currency": "COP", "value": 5000}}
        )

        assert "payment_method_types" in output.content[0].text
        mock_client.payment_links.create.assert_not_called()


class TestPaymentLinkByCode:
    @pytest.mark.asyncio
    async def test_retrieve(self, tools, mock_client, make_response):
        mock_client.payment_links.retrieve.return_value = make_response({"code": "pl_1"})

        await tools["paymentLinkRetrieve"].invoke({"paymentLinkId": "pl_1"})

        mock_client.payment_links.retrieve.assert_awaited_once_with("pl_1")

    @pytest.mark.asyncio
    async def test_cancel(self, tools, mock_client, make_response):
        mock_client.payment_links.cancel.return_value = make_response({"status": "CANCELLED"})

        await tools["paymentLinkCancel"].invoke(
            {"paymentLinkId": "pl_1", "body": {"paymentLinkId": "pl_1"}}
        )

        mock_client.payment_links.cancel.assert_awaited_once_with(
            "pl_1", {"paymentLinkId": "pl_1"}
        )
