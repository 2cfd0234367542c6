"""
Payment tools - create, authorize, capture, cancel and refund payments.

Mutating calls carry an X-Idempotency-Key; one is generated when the caller
does not supply it. Every payment tool appends the HTTP status and response
headers as a second content item.

API Reference: https://docs.y.uno/reference/create-payment
"""

from __future__ import annotations

from ..schemas.payments import (
    PaymentCancel,
    PaymentCancelOrRefund,
    PaymentCaptureAuthorization,
    PaymentCreate,
    PaymentRefund,
    PaymentRetrieve,
    PaymentRetrieveByMerchantOrderId,
)
from .base import api_tool

payment_create = api_tool(
    "paymentCreate",
    "Create a new payment in Yuno.",
    PaymentCreate,
    lambda client, p, key: client.payments.create(p["payment"], key),
    account_field="payment.account_id",
    idempotent=True,
    include_headers=True,
)

payment_retrieve = api_tool(
    "paymentRetrieve",
    "Retrieve a payment by ID in Yuno.",
    PaymentRetrieve,
    lambda client, p: client.payments.retrieve(p["payment_id"]),
    include_headers=True,
)

payment_retrieve_by_merchant_order_id = api_tool(
    "paymentRetrieveByMerchantOrderId",
    "Retrieve payments by merchant order ID in Yuno.",
    PaymentRetrieveByMerchantOrderId,
    lambda client, p: client.payments.retrieve_by_merchant_order_id(p["merchant_order_id"]),
    include_headers=True,
)

payment_refund = api_tool(
    "paymentRefund",
    "Refund a payment in Yuno.",
    PaymentRefund,
    lambda client, p, key: client.payments.refund(
        p["paymentId"], p["transactionId"], p["body"], key
    ),
    idempotent=True,
    include_headers=True,
)

payment_cancel_or_refund = api_tool(
    "paymentCancelOrRefund",
    "Cancel or refund a payment in Yuno.",
    PaymentCancelOrRefund,
    lambda client, p, key: client.payments.cancel_or_refund(p["paymentId"], p["body"], key),
    idempotent=True,
    include_headers=True,
)

payment_cancel_or_refund_with_transaction = api_tool(
    "paymentCancelOrRefundWithTransaction",
    "Cancel or refund a payment with transaction in Yuno.",
    PaymentRefund,
    lambda client, p, key: client.payments.cancel_or_refund_with_transaction(
        p["paymentId"], p["transactionId"], p["body"], key
    ),
    idempotent=True,
    include_headers=True,
)

payment_cancel = api_tool(
    "paymentCancel",
    "Cancel a payment in Yuno.",
    PaymentCancel,
    lambda client, p, key: client.payments.cancel(
        p["paymentId"], p["transactionId"], p["body"], key
    ),
    idempotent=True,
    include_headers=True,
)

payment_authorize = api_tool(
    "paymentAuthorize",
    "Authorize a payment in Yuno without capturing it.",
    PaymentCreate,
    lambda client, p, key: client.payments.authorize(p["payment"], key),
    account_field="payment.account_id",
    idempotent=True,
    include_headers=True,
)

payment_capture_authorization = api_tool(
    "paymentCaptureAuthorization",
    "Capture an authorized payment in Yuno.",
    PaymentCaptureAuthorization,
    lambda client, p, key: client.payments.capture_authorization(
        p["paymentId"], p["transactionId"], p["body"], key
    ),
    idempotent=True,
    include_headers=True,
)

PAYMENT_TOOLS = [
    payment_create,
    payment_retrieve,
    payment_retrieve_by_merchant_order_id,
    payment_refund,
    payment_cancel_or_refund,
    payment_cancel_or_refund_with_transaction,
    payment_cancel,
    payment_authorize,
    payment_capture_authorization,
]
