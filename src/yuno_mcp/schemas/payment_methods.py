"""Payment method enrollment models."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from .shared import CardData, CountryCode, IdempotencyKey, YunoId, YunoModel


class ProviderData(YunoModel):
    id: str | None = None
    payment_method_token: str | None = None


class EnrollVerify(YunoModel):
    vault_on_success: bool | None = None
    currency: str | None = None


class PaymentMethodEnrollBody(YunoModel):
    account_id: YunoId | None = Field(
        default=None, description="Yuno account; defaults to the configured account code"
    )
    country: CountryCode
    type: str = Field(min_length=3, max_length=255, description="Payment method type, e.g. CARD")
    workflow: Literal["DIRECT"] | None = None
    provider_data: ProviderData | None = Field(
        default=None, description="Provider data for token migration, only if agreed with Yuno"
    )
    card_data: CardData | None = Field(
        default=None, description="Card details for DIRECT workflow (PCI merchants only)"
    )
    callback_url: str | None = Field(default=None, min_length=3, max_length=255)
    verify: EnrollVerify | None = None


class PaymentMethodEnroll(YunoModel):
    customerId: YunoId = Field(description="The unique identifier of the customer (MIN 36, MAX 64)")
    body: PaymentMethodEnrollBody
    idempotencyKey: IdempotencyKey = None


class PaymentMethodRef(YunoModel):
    customer_id: YunoId
    payment_method_id: YunoId


class PaymentMethodRetrieveEnrolled(YunoModel):
    customer_id: YunoId
