"""Tests for the subscription tools."""

from __future__ import annotations

import pytest

from tests.conftest import ACCOUNT_CODE

SUBSCRIPTION_ID = "d1e2f3a4-b5c6-4d7e-8f9a-0b1c2d3e4f5a"

SUBSCRIPTION = {
    "name": "Gold plan",
    "country": "CO",
    "amount": {"currency": "COP", "value": 20000},
    "frequency": {"type": "MONTH", "value": 1},
    "customer_payer": {"id": "cus_1"},
}


class TestSubscriptionCreate:
    @pytest.mark.asyncio
    async def test_account_defaulted(self, tools, mock_client, make_response):
        mock_client.subscriptions.create.return_value = make_response({"id": SUBSCRIPTION_ID})

        await tools["subscriptionCreate"].invoke(SUBSCRIPTION)

        sent = mock_client.subscriptions.create.call_args.args[0]
        assert sent == {**SUBSCRIPTION, "account_id": ACCOUNT_CODE}

    @pytest.mark.asyncio
    async def test_frequency_type_restricted(self, tools, mock_client):
        output = await tools["subscriptionCreate"].invoke(
            {**SUBSCRIPTION, "frequency": {"type": "YEAR", "value": 1}}
        )

        assert "frequency.type" in output.content[0].text
        mock_client.subscriptions.create.assert_not_called()


class TestSubscriptionLifecycle:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "method,call",
        [
            ("subscriptionRetrieve", "retrieve"),
            ("subscriptionPause", "pause"),
            ("subscriptionResume", "resume"),
            ("subscriptionCancel", "cancel"),
        ],
    )
    async def test_by_id(self, tools, mock_client, make_response, method, call):
        getattr(mock_client.subscriptions, call).return_value = make_response({"status": "OK"})

        await tools[method].invoke({"subscriptionId": SUBSCRIPTION_ID})

        getattr(mock_client.subscriptions, call).assert_awaited_once_with(SUBSCRIPTION_ID)

    @pytest.mark.asyncio
    async def test_update_strips_id(self, tools, mock_client, make_response):
        mock_client.subscriptions.update.return_value = make_response({})

        await tools["subscriptionUpdate"].invoke(
            {"subscriptionId": SUBSCRIPTION_ID, "amount": {"currency": "COP", "value": 25000}}
        )

        mock_client.subscriptions.update.assert_awaited_once_with(
            SUBSCRIPTION_ID, {"amount": {"currency": "COP", "value": 25000}}
        )
