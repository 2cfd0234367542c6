"""
Tool plumbing shared by every Yuno tool module.

A tool is declared once as a ToolDefinition: the method name the host calls,
a description, the pydantic model its input must satisfy, and a handler
factory. ``dispatch`` validates raw input against the model, resolves the
client, runs the handler and turns any failure into a text item, so the host
always receives a well-formed envelope.
"""

from __future__ import annotations

import json
import logging
import uuid
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Literal

from pydantic import BaseModel, ValidationError

from ..config import OutputFormat
from ..errors import ClientNotInitializedError, ToolInputError

if TYPE_CHECKING:
    from ..client import YunoClient, YunoResponse

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Envelope
# ---------------------------------------------------------------------------


@dataclass
class TextContent:
    text: str
    type: Literal["text"] = "text"

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "text": self.text}


@dataclass
class ObjectContent:
    object: Any
    type: Literal["object"] = "object"

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "object": self.object}


@dataclass
class ToolOutput:
    """Ordered content items handed back to the host."""

    content: list[TextContent | ObjectContent] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"content": [item.to_dict() for item in self.content]}


def to_json(value: Any) -> str:
    """Pretty JSON with a 4-space indent."""
    return json.dumps(value, indent=4, ensure_ascii=False)


def envelope(
    body: Any,
    output: OutputFormat,
    *,
    status: int | None = None,
    headers: dict[str, str] | None = None,
) -> ToolOutput:
    """Wrap a response body, optionally followed by a response-headers item."""
    first: TextContent | ObjectContent
    if output is OutputFormat.OBJECT:
        first = ObjectContent(body)
    else:
        first = TextContent(to_json(body))
    items: list[TextContent | ObjectContent] = [first]
    if headers is not None:
        items.append(TextContent(f"Response Headers (HTTP {status}):\n{to_json(headers)}"))
    return ToolOutput(items)


# ---------------------------------------------------------------------------
# Definitions
# ---------------------------------------------------------------------------


@dataclass
class HandlerContext:
    client: YunoClient | None
    output: OutputFormat = OutputFormat.TEXT


Handler = Callable[[dict[str, Any]], Awaitable[ToolOutput]]


@dataclass(frozen=True)
class ToolDefinition:
    method: str
    description: str
    schema: type[BaseModel]
    handler: Callable[[HandlerContext], Handler]
    requires_client: bool = True


def without(payload: dict[str, Any], *keys: str) -> dict[str, Any]:
    """Copy of ``payload`` minus the path/identifier keys."""
    return {k: v for k, v in payload.items() if k not in keys}


def _apply_default_account(
    payload: dict[str, Any], path: str, account_code: str, as_list: bool
) -> None:
    *parents, leaf = path.split(".")
    target: Any = payload
    for key in parents:
        target = target.get(key)
        if not isinstance(target, dict):
            return
    if not target.get(leaf):
        target[leaf] = [account_code] if as_list else account_code


def api_tool(
    method: str,
    description: str,
    schema: type[BaseModel],
    call: Callable[..., Awaitable[YunoResponse]],
    *,
    account_field: str | None = None,
    account_as_list: bool = False,
    idempotent: bool = False,
    include_headers: bool = False,
) -> ToolDefinition:
    """
    Declare a tool that makes exactly one Yuno API call.

    Args:
        method: Tool name exposed to the host
        description: Human-readable description
        schema: Input model
        call: ``(client, payload)`` coroutine, or ``(client, payload, key)`` when idempotent
        account_field: Dotted path filled with the configured account code when empty
        account_as_list: Fill the account field with a one-element list
        idempotent: Pop ``idempotencyKey`` from the payload, generating a UUID4 if absent
        include_headers: Append the HTTP status and response headers as a second item

    Returns:
        ToolDefinition ready for registration

    Example:
        api_tool(
            "customerRetrieve",
            "Retrieve a customer by ID.",
            CustomerRetrieve,
            lambda client, p: client.customers.retrieve(p["customerId"]),
        )
    """

    def factory(ctx: HandlerContext) -> Handler:
        async def handler(payload: dict[str, Any]) -> ToolOutput:
            client = ctx.client
            if account_field:
                _apply_default_account(payload, account_field, client.account_code, account_as_list)
            if idempotent:
                key = payload.pop("idempotencyKey", None) or str(uuid.uuid4())
                response = await call(client, payload, key)
            else:
                response = await call(client, payload)
            if include_headers:
                return envelope(
                    response.body, ctx.output, status=response.status, headers=response.headers
                )
            return envelope(response.body, ctx.output)

        return handler

    return ToolDefinition(method=method, description=description, schema=schema, handler=factory)


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------


def _describe(error: dict[str, Any]) -> str:
    loc = ".".join(str(part) for part in error.get("loc", ()))
    return f"{loc}: {error['msg']}" if loc else error["msg"]


def validate(tool: ToolDefinition, arguments: dict[str, Any] | None) -> dict[str, Any]:
    """Validate raw arguments; returns only the fields the caller actually set."""
    try:
        model = tool.schema.model_validate_json(json.dumps(arguments or {}))
    except ValidationError as e:
        raise ToolInputError(tool.method, [_describe(err) for err in e.errors()]) from e
    return model.model_dump(mode="json", exclude_unset=True, by_alias=True)


async def dispatch(
    tool: ToolDefinition,
    arguments: dict[str, Any] | None,
    get_client: Callable[[], YunoClient | None],
    output: OutputFormat = OutputFormat.TEXT,
) -> ToolOutput:
    """Run one tool invocation; never raises."""
    try:
        payload = validate(tool, arguments)
        client = None
        if tool.requires_client:
            client = get_client()
            if client is None:
                raise ClientNotInitializedError()
        return await tool.handler(HandlerContext(client=client, output=output))(payload)
    except Exception as e:
        logger.warning("Tool %s failed: %s", tool.method, e)
        return ToolOutput([TextContent(str(e))])
