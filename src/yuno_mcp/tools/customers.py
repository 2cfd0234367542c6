"""
Customer tools - create, look up and update Yuno customers.

API Reference: https://docs.y.uno/reference/create-customer
"""

from __future__ import annotations

from ..schemas.customers import (
    CustomerCreate,
    CustomerRetrieve,
    CustomerRetrieveByExternalId,
    CustomerUpdate,
)
from .base import api_tool, without

customer_create = api_tool(
    "customerCreate",
    "Create a new customer in Yuno.",
    CustomerCreate,
    lambda client, p: client.customers.create(p),
)

customer_retrieve = api_tool(
    "customerRetrieve",
    "Retrieve a customer by ID.",
    CustomerRetrieve,
    lambda client, p: client.customers.retrieve(p["customerId"]),
)

customer_retrieve_by_external_id = api_tool(
    "customerRetrieveByExternalId",
    "Retrieve a customer by external merchant_customer_id.",
    CustomerRetrieveByExternalId,
    lambda client, p: client.customers.retrieve_by_external_id(p["merchant_customer_id"]),
)

customer_update = api_tool(
    "customerUpdate",
    "Update a customer by ID.",
    CustomerUpdate,
    lambda client, p: client.customers.update(p["customerId"], without(p, "customerId")),
)

CUSTOMER_TOOLS = [
    customer_create,
    customer_retrieve,
    customer_retrieve_by_external_id,
    customer_update,
]
