"""
Documentation tool - fetch Yuno API reference pages and SDK guides as Markdown.

Needs no Yuno credentials. Keywords that span several pages fetch them
concurrently.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx

from ..config import OutputFormat
from ..schemas.documentation import DocumentationRead
from .base import HandlerContext, TextContent, ToolDefinition, ToolOutput

logger = logging.getLogger(__name__)

_REFERENCE = "https://docs.y.uno/reference/{}.md"
_DOCS = "https://docs.y.uno/docs/{}.md"
_UNOFFICIAL = "https://raw.githubusercontent.com/latiscript/yuno-js/refs/heads/main/{}"


def _sdk_pages(platform: str) -> list[str]:
    return [
        _DOCS.format(slug)
        for slug in (
            f"{platform}-sdk-integrations",
            f"requirements-{platform}",
            f"full-checkout-{platform}",
            f"lite-checkout-{platform}",
            f"enrollment-{platform}",
            f"seamless-sdk-payment-{platform}",
            f"headless-sdk-payment-{platform}",
            f"headless-sdk-enrollment-{platform}",
            f"sdk-customizations-{platform}",
        )
    ]


DOCUMENTATION: dict[str, list[str]] = {
    "createCustomer": [_REFERENCE.format("create-customer")],
    "retrieveCustomer": [_REFERENCE.format("retrieve-customer")],
    "retrieveCustomerByExternalId": [_REFERENCE.format("retrieve-customer-by-external-id")],
    "updateCustomer": [_REFERENCE.format("update-customer")],
    "enrollPaymentMethod": [_REFERENCE.format("enroll-payment-method-api")],
    "retrievePaymentMethod": [_REFERENCE.format("retrieve-enrolled-payment-method-by-id-api")],
    "retrieveEnrolledPaymentMethods": [_REFERENCE.format("retrieve-enrolled-payment-methods-api")],
    "unenrollPaymentMethod": [_REFERENCE.format("unenroll-payment-method-checkout")],
    "createCheckoutSession": [_REFERENCE.format("create-checkout-session")],
    "retrievePaymentMethodsForCheckoutSession": [
        _REFERENCE.format("retrieve-payment-methods-for-checkout")
    ],
    "createOttForCheckoutSession": [_DOCS.format("yuno-testing-gateway")],
    "createPayment": [_REFERENCE.format("create-payment")],
    "retrievePayment": [_REFERENCE.format("retrieve-payment-by-id")],
    "retrievePaymentByMerchantOrderId": [
        _REFERENCE.format("retrieve-payment-by-merchant-order-id")
    ],
    "refundPayment": [_REFERENCE.format("refund-payment")],
    "cancelOrRefundPayment": [_REFERENCE.format("cancel-or-refund-a-payment")],
    "cancelOrRefundWithTransactionPayment": [
        _REFERENCE.format("cancel-or-refund-payment-with-transaction")
    ],
    "cancelPayment": [_REFERENCE.format("cancel-payment")],
    "authorizePayment": [_REFERENCE.format("authorize-payment")],
    "captureAuthorizationPayment": [_REFERENCE.format("capture-authorization")],
    "createPaymentLink": [_REFERENCE.format("create-payment-link")],
    "retrievePaymentLink": [_REFERENCE.format("retrieve-payment-link")],
    "cancelPaymentLink": [_REFERENCE.format("cancel-payment-link")],
    "createSubscription": [_REFERENCE.format("create-subscription")],
    "retrieveSubscription": [_REFERENCE.format("retrieve-subscription")],
    "pauseSubscription": [_REFERENCE.format("pause-subscription")],
    "resumeSubscription": [_REFERENCE.format("resume-subscription")],
    "updateSubscription": [_REFERENCE.format("update-subscription")],
    "cancelSubscription": [_REFERENCE.format("cancel-subscription")],
    "createRecipient": [_REFERENCE.format("create-recipient-1")],
    "retrieveRecipient": [_REFERENCE.format("get-recipient")],
    "updateRecipient": [_REFERENCE.format("update-recipient-1")],
    "deleteRecipient": [_REFERENCE.format("delete-recipient")],
    "createRecipientOnboarding": [_REFERENCE.format("create-onboarding")],
    "createInstallmentPlan": [_REFERENCE.format("create-installments-plan")],
    "retrieveInstallmentPlan": [_REFERENCE.format("get-installments-plan")],
    "retrieveAllInstallmentPlans": [_REFERENCE.format("get-installments-plan-by-account")],
    "updateInstallmentPlan": [_REFERENCE.format("update-plan")],
    "deleteInstallmentPlan": [_REFERENCE.format("delete-installments-plan-by-id")],
    "guides": [
        _DOCS.format("yuno-sdks"),
        _DOCS.format("country-coverage-yuno-sdk"),
    ],
    "web": [
        _DOCS.format(slug)
        for slug in (
            "web-sdk-integrations",
            "full-checkout-sdk",
            "lite-checkout-sdk",
            "enrollment-lite-sdk",
            "seamless-sdk-payment-web",
            "secure-fields-payment",
            "secure-fields-enrollment",
            "headless-sdk-payment",
            "headless-sdk-enrollment",
            "sdk-customizations",
        )
    ],
    # Served without the .md suffix
    "web_v_1_1": ["https://docs.y.uno/docs/yuno-web-sdk-v11"],
    "android": _sdk_pages("android"),
    "android_release_notes": [_DOCS.format("release-notes-android-sdk")],
    "ios": _sdk_pages("ios"),
    "unofficial.node": [
        _UNOFFICIAL.format("packages/yuno-node/README.md"),
        _UNOFFICIAL.format("examples/react-express/express/src/index.ts"),
    ],
    "unofficial.react": [
        _UNOFFICIAL.format("packages/yuno-react/README.md"),
        _UNOFFICIAL.format("examples/react-express/react/src/components/Full.tsx"),
    ],
}

# Keywords answered as one item per page, each with its own label.
SEPARATE_ITEMS: dict[str, tuple[str, ...]] = {
    "guides": ("", ""),
    "unofficial.node": ("latiscript/yuno-node: ", "latiscript/yuno-node example: "),
    "unofficial.react": ("latiscript/yuno-react: ", "latiscript/yuno-react example: "),
}

FETCH_TIMEOUT = 30.0


async def fetch_pages(urls: list[str]) -> list[str]:
    """Fetch every URL concurrently and return the bodies in order."""
    async with httpx.AsyncClient(timeout=FETCH_TIMEOUT, follow_redirects=True) as client:

        async def fetch(url: str) -> str:
            logger.debug("GET %s", url)
            response = await client.get(url)
            return response.text

        return list(await asyncio.gather(*(fetch(url) for url in urls)))


def _documentation_handler(ctx: HandlerContext):
    async def handler(payload: dict[str, Any]) -> ToolOutput:
        if ctx.output is not OutputFormat.TEXT:
            raise ValueError("Documentation tool only supports text output")

        keyword = payload["documentation_type"]
        urls = DOCUMENTATION.get(keyword)
        if not urls:
            return ToolOutput([TextContent("Documentation not found")])

        pages = await fetch_pages(urls)
        labels = SEPARATE_ITEMS.get(keyword)
        if labels:
            return ToolOutput([TextContent(f"{label}{page}") for label, page in zip(labels, pages)])
        return ToolOutput([TextContent("\n\n".join(pages))])

    return handler


documentation_read = ToolDefinition(
    method="documentationRead",
    description="Read Yuno documentation: API reference pages by operation, or SDK guides.",
    schema=DocumentationRead,
    handler=_documentation_handler,
    requires_client=False,
)

DOCUMENTATION_TOOLS = [documentation_read]
