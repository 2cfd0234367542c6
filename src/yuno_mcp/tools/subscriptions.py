"""
Subscription tools - recurring charges against a customer's payment method.

API Reference: https://docs.y.uno/reference/create-subscription
"""

from __future__ import annotations

from ..schemas.subscriptions import SubscriptionCreate, SubscriptionRef, SubscriptionUpdate
from .base import api_tool, without

subscription_create = api_tool(
    "subscriptionCreate",
    "Create a subscription in Yuno.",
    SubscriptionCreate,
    lambda client, p: client.subscriptions.create(p),
    account_field="account_id",
)

subscription_retrieve = api_tool(
    "subscriptionRetrieve",
    "Retrieve a subscription in Yuno by its ID.",
    SubscriptionRef,
    lambda client, p: client.subscriptions.retrieve(p["subscriptionId"]),
)

subscription_pause = api_tool(
    "subscriptionPause",
    "Pause a subscription in Yuno by its ID.",
    SubscriptionRef,
    lambda client, p: client.subscriptions.pause(p["subscriptionId"]),
)

subscription_resume = api_tool(
    "subscriptionResume",
    "Resume a subscription in Yuno by its ID.",
    SubscriptionRef,
    lambda client, p: client.subscriptions.resume(p["subscriptionId"]),
)

subscription_update = api_tool(
    "subscriptionUpdate",
    "Update a subscription in Yuno by its ID.",
    SubscriptionUpdate,
    lambda client, p: client.subscriptions.update(
        p["subscriptionId"], without(p, "subscriptionId")
    ),
)

subscription_cancel = api_tool(
    "subscriptionCancel",
    "Cancel a subscription in Yuno by its ID.",
    SubscriptionRef,
    lambda client, p: client.subscriptions.cancel(p["subscriptionId"]),
)

SUBSCRIPTION_TOOLS = [
    subscription_create,
    subscription_retrieve,
    subscription_pause,
    subscription_resume,
    subscription_update,
    subscription_cancel,
]
