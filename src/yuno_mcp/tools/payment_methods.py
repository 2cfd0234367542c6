"""
Payment method tools - enroll, list and unenroll a customer's saved methods.

API Reference: https://docs.y.uno/reference/enroll-payment-method-api
"""

from __future__ import annotations

from ..schemas.payment_methods import (
    PaymentMethodEnroll,
    PaymentMethodRef,
    PaymentMethodRetrieveEnrolled,
)
from .base import api_tool

payment_method_enroll = api_tool(
    "paymentMethodEnroll",
    "Enroll or create a payment method for a customer.",
    PaymentMethodEnroll,
    lambda client, p, key: client.payment_methods.enroll(p["customerId"], p["body"], key),
    account_field="body.account_id",
    idempotent=True,
    include_headers=True,
)

payment_method_retrieve = api_tool(
    "paymentMethodRetrieve",
    "Retrieve an enrolled payment method by customer and payment method id.",
    PaymentMethodRef,
    lambda client, p: client.payment_methods.retrieve(p["customer_id"], p["payment_method_id"]),
    include_headers=True,
)

payment_method_retrieve_enrolled = api_tool(
    "paymentMethodRetrieveEnrolled",
    "Retrieve all enrolled payment methods for a customer.",
    PaymentMethodRetrieveEnrolled,
    lambda client, p: client.payment_methods.retrieve_enrolled(p["customer_id"]),
    include_headers=True,
)

payment_method_unenroll = api_tool(
    "paymentMethodUnenroll",
    "Unenroll a saved payment method for the customer.",
    PaymentMethodRef,
    lambda client, p: client.payment_methods.unenroll(p["customer_id"], p["payment_method_id"]),
    include_headers=True,
)

PAYMENT_METHOD_TOOLS = [
    payment_method_enroll,
    payment_method_retrieve,
    payment_method_retrieve_enrolled,
    payment_method_unenroll,
]
