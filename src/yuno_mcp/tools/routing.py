"""
Routing tools - build and publish payment routing workflows.

These go through the Yuno Dashboard API, which needs a login session rather
than the API key pair. ``routingLogin`` opens the session on the shared
client; the other routing tools reuse it until ``routingLogOut``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..schemas.routing import (
    RoutingCreate,
    RoutingGetProviders,
    RoutingLogin,
    RoutingLogOut,
    RoutingUpdate,
    RoutingVersionRef,
)
from .base import api_tool

if TYPE_CHECKING:
    from ..client import YunoClient, YunoResponse


async def _create_workflow(client: YunoClient, payload: dict[str, Any]) -> YunoResponse:
    if payload.get("username") and payload.get("password"):
        await client.routing.login(payload["username"], payload["password"])
    return await client.routing.create(payload["name"], payload["payment_method"])


routing_login = api_tool(
    "routingLogin",
    "Log in to the Yuno Dashboard to manage routing workflows.",
    RoutingLogin,
    lambda client, p: client.routing.login(p["username"], p["password"]),
)

routing_create = api_tool(
    "routingCreate",
    "Create a new routing workflow in the Yuno Dashboard (logs in first when credentials are given).",
    RoutingCreate,
    _create_workflow,
)

routing_get_providers = api_tool(
    "routingGetProviders",
    "List the provider connections available for a payment method.",
    RoutingGetProviders,
    lambda client, p: client.routing.get_connections(p["paymentMethod"]),
)

routing_retrieve = api_tool(
    "routingRetrieve",
    "Retrieve a routing workflow version by its code.",
    RoutingVersionRef,
    lambda client, p: client.routing.retrieve(p["versionCode"]),
)

routing_update = api_tool(
    "routingUpdate",
    "Save the condition sets and routes of a routing workflow version.",
    RoutingUpdate,
    lambda client, p: client.routing.update(p),
)

routing_post = api_tool(
    "routingPost",
    "Publish a routing workflow version.",
    RoutingVersionRef,
    lambda client, p: client.routing.publish(p["versionCode"]),
)

routing_log_out = api_tool(
    "routingLogOut",
    "Log out of the Yuno Dashboard and drop the routing session.",
    RoutingLogOut,
    lambda client, p: client.routing.logout(),
)

ROUTING_TOOLS = [
    routing_login,
    routing_create,
    routing_get_providers,
    routing_retrieve,
    routing_update,
    routing_post,
    routing_log_out,
]
