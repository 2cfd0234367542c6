"""
Checkout session tools.

API Reference: https://docs.y.uno/reference/create-checkout-session
"""

from __future__ import annotations

from ..schemas.checkouts import CheckoutSessionCreate, CheckoutSessionCreateOtt, CheckoutSessionRef
from .base import api_tool, without

checkout_session_create = api_tool(
    "checkoutSessionCreate",
    "Create a new checkout session in Yuno.",
    CheckoutSessionCreate,
    lambda client, p: client.checkout_sessions.create(p),
    account_field="account_id",
)

checkout_session_retrieve_payment_methods = api_tool(
    "checkoutSessionRetrievePaymentMethods",
    "Retrieve payment methods for a checkout session in Yuno.",
    CheckoutSessionRef,
    lambda client, p: client.checkout_sessions.retrieve_payment_methods(p["sessionId"]),
)

checkout_session_create_ott = api_tool(
    "checkoutSessionCreateOtt",
    "Generate a One Time Token (OTT) for a checkout session in Yuno.",
    CheckoutSessionCreateOtt,
    lambda client, p: client.checkout_sessions.create_ott(p["sessionId"], without(p, "sessionId")),
)

CHECKOUT_TOOLS = [
    checkout_session_create,
    checkout_session_retrieve_payment_methods,
    checkout_session_create_ott,
]
