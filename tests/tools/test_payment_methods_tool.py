"""Tests for the payment method tools."""

from __future__ import annotations

import uuid

import pytest

from tests.conftest import ACCOUNT_CODE

CUSTOMER_ID = "3f6d7c1e-2b4a-4c8e-9d1f-0a5b6c7d8e9f"
PAYMENT_METHOD_ID = "0c1d2e3f-4a5b-4c6d-8e7f-9a0b1c2d3e4f"


class TestPaymentMethodEnroll:
    @pytest.mark.asyncio
    async def test_defaults_body_account(self, tools, mock_client, make_response):
        mock_client.payment_methods.enroll.return_value = make_response({"status": "ENROLLED"})

        output = await tools["paymentMethodEnroll"].invoke(
            {"customerId": CUSTOMER_ID, "body": {"country": "CO", "type": "CARD"}}
        )

        customer_id, body, key = mock_client.payment_methods.enroll.call_args.args
        assert customer_id == CUSTOMER_ID
        assert body == {"country": "CO", "type": "CARD", "account_id": ACCOUNT_CODE}
        assert uuid.UUID(key).version == 4
        assert output.content[1].text.startswith("Response Headers (HTTP 200):")

    @pytest.mark.asyncio
    async def test_supplied_key_forwarded(self, tools, mock_client, make_response):
        mock_client.payment_methods.enroll.return_value = make_response({})
        key = str(uuid.uuid4())

        await tools["paymentMethodEnroll"].invoke(
            {
                "customerId": CUSTOMER_ID,
                "body": {"country": "CO", "type": "CARD"},
                "idempotencyKey": key,
            }
        )

        assert mock_client.payment_methods.enroll.call_args.args[2] == key

    @pytest.mark.asyncio
    async def test_card_data_validated(self, tools, mock_client):
        output = await tools["paymentMethodEnroll"].invoke(
            {
                "customerId": CUSTOMER_ID,
                "body": {
                    "country": "CO",
                    "type": "CARD",
                    "card_data": {
                        "number": "4111",
                        "expiration_month": 13,
                        "expiration_year": 2030,
                    },
                },
            }
        )

        text = output.content[0].text
        assert "body.card_data.number" in text
        assert "body.card_data.expiration_month" in text
        mock_client.payment_methods.enroll.assert_not_called()


class TestPaymentMethodLookups:
    @pytest.mark.asyncio
    async def test_retrieve(self, tools, mock_client, make_response):
        mock_client.payment_methods.retrieve.return_value = make_response({})

        await tools["paymentMethodRetrieve"].invoke(
            {"customer_id": CUSTOMER_ID, "payment_method_id": PAYMENT_METHOD_ID}
        )

        mock_client.payment_methods.retrieve.assert_awaited_once_with(
            CUSTOMER_ID, PAYMENT_METHOD_ID
        )

    @pytest.mark.asyncio
    async def test_retrieve_enrolled(self, tools, mock_client, make_response):
        mock_client.payment_methods.retrieve_enrolled.return_value = make_response([])

        output = await tools["paymentMethodRetrieveEnrolled"].invoke({"customer_id": CUSTOMER_ID})

        mock_client.payment_methods.retrieve_enrolled.assert_awaited_once_with(CUSTOMER_ID)
        assert output.content[0].text == "[]"

    @pytest.mark.asyncio
    async def test_unenroll(self, tools, mock_client, make_response):
        mock_client.payment_methods.unenroll.return_value = make_response({"status": "UNENROLLED"})

        await tools["paymentMethodUnenroll"].invoke(
            {"customer_id": CUSTOMER_ID, "payment_method_id": PAYMENT_METHOD_ID}
        )

        mock_client.payment_methods.unenroll.assert_awaited_once_with(
            CUSTOMER_ID, PAYMENT_METHOD_ID
        )

    @pytest.mark.asyncio
    async def test_short_payment_method_id_rejected(self, tools, mock_client):
        output = await tools["paymentMethodUnenroll"].invoke(
            {"customer_id": CUSTOMER_ID, "payment_method_id": "pm_1"}
        )

        assert "payment_method_id" in output.content[0].text
        mock_client.payment_methods.unenroll.assert_not_called()
