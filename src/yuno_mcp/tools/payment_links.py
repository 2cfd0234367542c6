"""
Payment link tools.

API Reference: https://docs.y.uno/reference/create-payment-link
"""

from __future__ import annotations

from ..schemas.payment_links import PaymentLinkCancel, PaymentLinkCreate, PaymentLinkRef
from .base import api_tool

payment_link_create = api_tool(
    "paymentLinkCreate",
    "Create a payment link in Yuno.",
    PaymentLinkCreate,
    lambda client, p: client.payment_links.create(p),
    account_field="account_id",
)

payment_link_retrieve = api_tool(
    "paymentLinkRetrieve",
    "Retrieve a payment link in Yuno by its ID.",
    PaymentLinkRef,
    lambda client, p: client.payment_links.retrieve(p["paymentLinkId"]),
)

payment_link_cancel = api_tool(
    "paymentLinkCancel",
    "Cancel a payment link in Yuno by its ID.",
    PaymentLinkCancel,
    lambda client, p: client.payment_links.cancel(p["paymentLinkId"], p["body"]),
)

PAYMENT_LINK_TOOLS = [
    payment_link_create,
    payment_link_retrieve,
    payment_link_cancel,
]
