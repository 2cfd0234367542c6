"""Checkout session and one-time token models."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import EmailStr, Field

from .shared import (
    Address,
    Amount,
    BrowserInfo,
    CardData,
    CountryCode,
    Document,
    MetadataEntry,
    Phone,
    YunoId,
    YunoModel,
)


class AlternativeAmount(YunoModel):
    currency: str | None = Field(default=None, min_length=3, max_length=3)
    value: int | float | None = None


class InstallmentOption(YunoModel):
    installment: int = Field(description="The number of monthly installments")
    rate: float = Field(description="The rate applied to the final amount (percentage)")


class CheckoutInstallments(YunoModel):
    plan_id: str | None = Field(default=None, description="Installment plan created in Yuno")
    plan: list[InstallmentOption] | None = None


class CheckoutSessionCreate(YunoModel):
    account_id: YunoId | None = Field(
        default=None, description="Yuno account; defaults to the configured account code"
    )
    customer_id: YunoId | None = Field(default=None, description="The customer's Yuno id")
    merchant_order_id: str = Field(min_length=3, max_length=255)
    payment_description: str = Field(min_length=1, max_length=255)
    callback_url: str | None = Field(
        default=None,
        min_length=3,
        max_length=526,
        description="Where the customer is redirected after the purchase",
    )
    country: CountryCode
    amount: Amount | None = None
    alternative_amount: AlternativeAmount | None = None
    workflow: Literal["SDK_CHECKOUT", "CHECKOUT", "SDK_SEAMLESS"] | None = None
    metadata: list[MetadataEntry] | None = None
    installments: CheckoutInstallments | None = None


class CheckoutSessionRef(YunoModel):
    sessionId: str = Field(description="The unique identifier of the checkout session")


class OttCard(CardData):
    expiration_year: int = Field(ge=20, le=99, description="Card expiration year (YY)")
    security_code: str = Field(description="Card security code (CVV)")
    holder_name: str = Field(description="Cardholder name")


class OttCustomer(YunoModel):
    browser_info: BrowserInfo
    first_name: str | None = None
    last_name: str | None = None
    email: EmailStr | None = None
    gender: str | None = None
    date_of_birth: str | None = None
    document: Document | None = None
    phone: Phone | None = None
    billing_address: Address | None = None
    shipping_address: Address | None = None


class OttPaymentMethod(YunoModel):
    type: str = Field(description="Payment method type, e.g. CARD or NEQUI")
    vault_on_success: bool
    card: OttCard | None = None
    customer: OttCustomer
    vaulted_token: str | None = None


class ThreeDSecure(YunoModel):
    three_d_secure_setup_id: str | None = None


class CheckoutSessionCreateOtt(YunoModel):
    sessionId: str = Field(description="The unique identifier of the checkout session")
    payment_method: OttPaymentMethod
    three_d_secure: ThreeDSecure
    installment: Any = None
    third_party_data: Any = None
    device_fingerprints: Any = None
