"""
Recipient tools - marketplace sellers that receive split payments.

API Reference: https://docs.y.uno/reference/create-recipient-1
"""

from __future__ import annotations

from ..schemas.recipients import RecipientCreate, RecipientRef, RecipientUpdate
from .base import api_tool, without

recipient_create = api_tool(
    "recipientCreate",
    "Create a recipient in Yuno.",
    RecipientCreate,
    lambda client, p: client.recipients.create(p),
    account_field="account_id",
)

recipient_retrieve = api_tool(
    "recipientRetrieve",
    "Retrieve a recipient in Yuno by its ID.",
    RecipientRef,
    lambda client, p: client.recipients.retrieve(p["recipientId"]),
)

recipient_update = api_tool(
    "recipientUpdate",
    "Update a recipient in Yuno by its ID.",
    RecipientUpdate,
    lambda client, p: client.recipients.update(p["recipientId"], without(p, "recipientId")),
)

recipient_delete = api_tool(
    "recipientDelete",
    "Delete a recipient in Yuno by its ID.",
    RecipientRef,
    lambda client, p: client.recipients.delete(p["recipientId"]),
)

RECIPIENT_TOOLS = [
    recipient_create,
    recipient_retrieve,
    recipient_update,
    recipient_delete,
]
