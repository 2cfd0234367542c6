"""
Yuno API client.

Thin async wrapper over one long-lived httpx.AsyncClient. Each call is a single
request/response cycle: credentials are injected as headers, the JSON body is
parsed, and any transport failure or non-2xx answer becomes a YunoAPIError.
Nothing is retried.

API Reference: https://docs.y.uno/reference
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import quote

import httpx

from .config import YunoConfig
from .errors import RoutingSessionError, YunoAPIError

logger = logging.getLogger(__name__)


@dataclass
class YunoResponse:
    """Parsed body plus the HTTP status and headers it came with."""

    body: Any
    status: int
    headers: dict[str, str] = field(default_factory=dict)


def _segment(value: str) -> str:
    return quote(str(value), safe="")


def _error_message(body: Any, response: httpx.Response) -> str:
    if isinstance(body, dict):
        if body.get("message"):
            return str(body["message"])
        messages = body.get("messages")
        if isinstance(messages, list) and messages:
            return "; ".join(str(m) for m in messages)
        if body.get("code"):
            return str(body["code"])
    if isinstance(body, str) and body:
        return body
    return response.reason_phrase or "Request failed"


class YunoClient:
    """Async client for the Yuno payments API and the dashboard routing API."""

    def __init__(self, config: YunoConfig, http_client: httpx.AsyncClient | None = None):
        self.config = config
        self.account_code = config.account_code
        self._http = http_client or httpx.AsyncClient(timeout=config.timeout)
        self._routing_token: str | None = None

        self.customers = _Customers(self)
        self.payment_methods = _PaymentMethods(self)
        self.checkout_sessions = _CheckoutSessions(self)
        self.payments = _Payments(self)
        self.payment_links = _PaymentLinks(self)
        self.subscriptions = _Subscriptions(self)
        self.recipients = _Recipients(self)
        self.installment_plans = _InstallmentPlans(self)
        self.routing = _Routing(self)

    async def __aenter__(self) -> YunoClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def close(self) -> None:
        await self._http.aclose()

    # --- Transport ---

    def _api_headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "public-api-key": self.config.public_api_key,
            "private-secret-key": self.config.private_secret_key,
        }

    async def send(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> YunoResponse:
        """Perform one request and normalize the outcome."""
        logger.debug("%s %s", method, url)
        try:
            response = await self._http.request(
                method, url, headers=headers, params=params, json=json
            )
        except httpx.HTTPError as e:
            raise YunoAPIError(f"Request to {url} failed: {e}") from e

        body: Any = None
        if response.content:
            try:
                body = response.json()
            except ValueError as e:
                if response.is_success:
                    raise YunoAPIError(
                        "Malformed JSON in Yuno API response",
                        status=response.status_code,
                        body=response.text,
                    ) from e
                body = response.text

        if not response.is_success:
            raise YunoAPIError(
                _error_message(body, response), status=response.status_code, body=body
            )

        return YunoResponse(body=body, status=response.status_code, headers=dict(response.headers))

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
        idempotency_key: str | None = None,
    ) -> YunoResponse:
        """Call a payments API endpoint relative to the configured base URL."""
        headers = self._api_headers()
        if idempotency_key:
            headers["X-Idempotency-Key"] = idempotency_key
        return await self.send(
            method, f"{self.config.base_url}{path}", headers, params=params, json=json
        )

    async def dashboard_request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
        authenticated: bool = True,
    ) -> YunoResponse:
        """Call a dashboard API endpoint with the routing session token."""
        headers = {"Content-Type": "application/json"}
        if authenticated:
            if not self._routing_token:
                raise RoutingSessionError(
                    "Not logged in to the Yuno Dashboard. Call routingLogin first."
                )
            headers["Authorization"] = f"Bearer {self._routing_token}"
        return await self.send(
            method, f"{self.config.dashboard_base_url}{path}", headers, params=params, json=json
        )


class _Resource:
    def __init__(self, client: YunoClient):
        self._client = client


class _Customers(_Resource):
    async def create(self, customer: dict[str, Any]) -> YunoResponse:
        return await self._client.request("POST", "/customers", json=customer)

    async def retrieve(self, customer_id: str) -> YunoResponse:
        return await self._client.request("GET", f"/customers/{_segment(customer_id)}")

    async def retrieve_by_external_id(self, merchant_customer_id: str) -> YunoResponse:
        return await self._client.request(
            "GET", "/customers", params={"merchant_customer_id": merchant_customer_id}
        )

    async def update(self, customer_id: str, update_fields: dict[str, Any]) -> YunoResponse:
        return await self._client.request(
            "PATCH", f"/customers/{_segment(customer_id)}", json=update_fields
        )


class _PaymentMethods(_Resource):
    async def enroll(
        self, customer_id: str, body: dict[str, Any], idempotency_key: str
    ) -> YunoResponse:
        return await self._client.request(
            "POST",
            f"/customers/{_segment(customer_id)}/payment-methods",
            json=body,
            idempotency_key=idempotency_key,
        )

    async def retrieve(self, customer_id: str, payment_method_id: str) -> YunoResponse:
        return await self._client.request(
            "GET",
            f"/customers/{_segment(customer_id)}/payment-methods/{_segment(payment_method_id)}",
        )

    async def retrieve_enrolled(self, customer_id: str) -> YunoResponse:
        return await self._client.request(
            "GET", f"/customers/{_segment(customer_id)}/payment-methods"
        )

    async def unenroll(self, customer_id: str, payment_method_id: str) -> YunoResponse:
        return await self._client.request(
            "POST",
            f"/customers/{_segment(customer_id)}/payment-methods/"
            f"{_segment(payment_method_id)}/unenroll",
        )


class _CheckoutSessions(_Resource):
    async def create(self, checkout_session: dict[str, Any]) -> YunoResponse:
        return await self._client.request("POST", "/checkout/sessions", json=checkout_session)

    async def retrieve_payment_methods(self, session_id: str) -> YunoResponse:
        return await self._client.request(
            "GET", f"/checkout/sessions/{_segment(session_id)}/payment-methods"
        )

    async def create_ott(self, session_id: str, ott_request: dict[str, Any]) -> YunoResponse:
        return await self._client.request(
            "POST", f"/checkout/sessions/{_segment(session_id)}/one-time-token", json=ott_request
        )


class _Payments(_Resource):
    async def create(self, payment: dict[str, Any], idempotency_key: str) -> YunoResponse:
        return await self._client.request(
            "POST", "/payments", json=payment, idempotency_key=idempotency_key
        )

    async def retrieve(self, payment_id: str) -> YunoResponse:
        return await self._client.request("GET", f"/payments/{_segment(payment_id)}")

    async def retrieve_by_merchant_order_id(self, merchant_order_id: str) -> YunoResponse:
        return await self._client.request(
            "GET", "/payments", params={"merchant_order_id": merchant_order_id}
        )

    async def refund(
        self, payment_id: str, transaction_id: str, body: dict[str, Any], idempotency_key: str
    ) -> YunoResponse:
        return await self._client.request(
            "POST",
            f"/payments/{_segment(payment_id)}/transactions/{_segment(transaction_id)}/refund",
            json=body,
            idempotency_key=idempotency_key,
        )

    async def cancel_or_refund(
        self, payment_id: str, body: dict[str, Any], idempotency_key: str
    ) -> YunoResponse:
        return await self._client.request(
            "POST",
            f"/payments/{_segment(payment_id)}/cancel-or-refund",
            json=body,
            idempotency_key=idempotency_key,
        )

    async def cancel_or_refund_with_transaction(
        self, payment_id: str, transaction_id: str, body: dict[str, Any], idempotency_key: str
    ) -> YunoResponse:
        return await self._client.request(
            "POST",
            f"/payments/{_segment(payment_id)}/transactions/"
            f"{_segment(transaction_id)}/cancel-or-refund",
            json=body,
            idempotency_key=idempotency_key,
        )

    async def cancel(
        self, payment_id: str, transaction_id: str, body: dict[str, Any], idempotency_key: str
    ) -> YunoResponse:
        return await self._client.request(
            "POST",
            f"/payments/{_segment(payment_id)}/transactions/{_segment(transaction_id)}/cancel",
            json=body,
            idempotency_key=idempotency_key,
        )

    async def authorize(self, payment: dict[str, Any], idempotency_key: str) -> YunoResponse:
        """Create a card payment that is authorized but not captured."""
        payment = copy.deepcopy(payment)
        card = ((payment.get("payment_method") or {}).get("detail") or {}).get("card")
        if isinstance(card, dict):
            card["capture"] = False
        return await self._client.request(
            "POST", "/payments", json=payment, idempotency_key=idempotency_key
        )

    async def capture_authorization(
        self, payment_id: str, transaction_id: str, body: dict[str, Any], idempotency_key: str
    ) -> YunoResponse:
        return await self._client.request(
            "POST",
            f"/payments/{_segment(payment_id)}/transactions/{_segment(transaction_id)}/capture",
            json=body,
            idempotency_key=idempotency_key,
        )


class _PaymentLinks(_Resource):
    async def create(self, payment_link: dict[str, Any]) -> YunoResponse:
        return await self._client.request("POST", "/payment-links", json=payment_link)

    async def retrieve(self, payment_link_id: str) -> YunoResponse:
        return await self._client.request("GET", f"/payment-links/{_segment(payment_link_id)}")

    async def cancel(self, payment_link_id: str, body: dict[str, Any]) -> YunoResponse:
        return await self._client.request(
            "POST", f"/payment-links/{_segment(payment_link_id)}/cancel", json=body
        )


class _Subscriptions(_Resource):
    async def create(self, subscription: dict[str, Any]) -> YunoResponse:
        return await self._client.request("POST", "/subscriptions", json=subscription)

    async def retrieve(self, subscription_id: str) -> YunoResponse:
        return await self._client.request("GET", f"/subscriptions/{_segment(subscription_id)}")

    async def pause(self, subscription_id: str) -> YunoResponse:
        return await self._client.request(
            "POST", f"/subscriptions/{_segment(subscription_id)}/pause"
        )

    async def resume(self, subscription_id: str) -> YunoResponse:
        return await self._client.request(
            "POST", f"/subscriptions/{_segment(subscription_id)}/resume"
        )

    async def update(self, subscription_id: str, update_fields: dict[str, Any]) -> YunoResponse:
        return await self._client.request(
            "PATCH", f"/subscriptions/{_segment(subscription_id)}", json=update_fields
        )

    async def cancel(self, subscription_id: str) -> YunoResponse:
        return await self._client.request(
            "POST", f"/subscriptions/{_segment(subscription_id)}/cancel"
        )


class _Recipients(_Resource):
    def _account_params(self) -> dict[str, str]:
        return {"account_id": self._client.account_code}

    async def create(self, recipient: dict[str, Any]) -> YunoResponse:
        return await self._client.request("POST", "/recipients", json=recipient)

    async def retrieve(self, recipient_id: str) -> YunoResponse:
        return await self._client.request(
            "GET", f"/recipients/{_segment(recipient_id)}", params=self._account_params()
        )

    async def update(self, recipient_id: str, update_fields: dict[str, Any]) -> YunoResponse:
        return await self._client.request(
            "PATCH",
            f"/recipients/{_segment(recipient_id)}",
            params=self._account_params(),
            json=update_fields,
        )

    async def delete(self, recipient_id: str) -> YunoResponse:
        return await self._client.request(
            "DELETE", f"/recipients/{_segment(recipient_id)}", params=self._account_params()
        )


class _InstallmentPlans(_Resource):
    async def create(self, plan: dict[str, Any]) -> YunoResponse:
        return await self._client.request("POST", "/installments-plans", json=plan)

    async def retrieve(self, plan_id: str) -> YunoResponse:
        return await self._client.request("GET", f"/installments-plans/{_segment(plan_id)}")

    async def retrieve_all(self, account_id: str) -> YunoResponse:
        return await self._client.request(
            "GET", "/installments-plans", params={"account_id": account_id}
        )

    async def update(self, plan_id: str, update_fields: dict[str, Any]) -> YunoResponse:
        return await self._client.request(
            "PATCH", f"/installments-plans/{_segment(plan_id)}", json=update_fields
        )

    async def delete(self, plan_id: str) -> YunoResponse:
        return await self._client.request("DELETE", f"/installments-plans/{_segment(plan_id)}")


class _Routing(_Resource):
    """Routing workflows live behind the dashboard API and a login session."""

    @property
    def logged_in(self) -> bool:
        return self._client._routing_token is not None

    async def login(self, email: str, password: str) -> YunoResponse:
        response = await self._client.dashboard_request(
            "POST",
            "/auth/login",
            json={"email": email, "password": password},
            authenticated=False,
        )
        token = response.body.get("access_token") if isinstance(response.body, dict) else None
        if token:
            self._client._routing_token = token
        return response

    async def logout(self) -> YunoResponse:
        response = await self._client.dashboard_request("POST", "/auth/logout")
        self._client._routing_token = None
        return response

    async def create(self, name: str, payment_method: str) -> YunoResponse:
        return await self._client.dashboard_request(
            "POST",
            "/routing/workflows",
            json={"name": name, "payment_method_type": payment_method},
        )

    async def get_connections(self, payment_method: str) -> YunoResponse:
        return await self._client.dashboard_request(
            "GET", "/routing/integrations", params={"payment_method_type": payment_method}
        )

    async def retrieve(self, version_code: str) -> YunoResponse:
        return await self._client.dashboard_request(
            "GET", f"/routing/versions/{_segment(version_code)}"
        )

    async def update(self, workflow_request: dict[str, Any]) -> YunoResponse:
        version_code = workflow_request["updateRoute"]["version"]["code"]
        return await self._client.dashboard_request(
            "PUT", f"/routing/versions/{_segment(version_code)}", json=workflow_request
        )

    async def publish(self, version_code: str) -> YunoResponse:
        return await self._client.dashboard_request(
            "POST", f"/routing/versions/{_segment(version_code)}/publish"
        )
