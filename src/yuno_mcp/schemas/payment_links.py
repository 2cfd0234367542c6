"""Payment link models."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from .shared import (
    Address,
    Amount,
    Availability,
    CountryCode,
    Document,
    MetadataEntry,
    Phone,
    YunoId,
    YunoModel,
)


class Tax(YunoModel):
    type: str
    value: int | float
    tax_base: int | float | None = None
    percentage: int | float | None = None


class LinkPayer(YunoModel):
    id: YunoId | None = None
    merchant_customer_id: str | None = Field(default=None, min_length=3, max_length=255)
    first_name: str | None = Field(default=None, min_length=1, max_length=255)
    last_name: str | None = Field(default=None, min_length=1, max_length=255)
    gender: str | None = Field(default=None, min_length=1, max_length=2)
    date_of_birth: str | None = Field(default=None, min_length=10, max_length=10)
    email: str | None = Field(default=None, min_length=3, max_length=255)
    nationality: CountryCode | None = None
    document: Document | None = None
    billing_address: Address | None = None
    shipping_address: Address | None = None
    phone: Phone | None = None
    ip_address: str | None = Field(default=None, min_length=1, max_length=45)


class PaymentLinkCreate(YunoModel):
    account_id: str | None = Field(
        default=None, description="Yuno account; defaults to the configured account code"
    )
    description: str | None = Field(default=None, max_length=255)
    country: CountryCode
    merchant_order_id: str | None = Field(default=None, min_length=3, max_length=255)
    amount: Amount
    capture: bool | None = Field(default=None, description="Capture immediately; true by default")
    type: str | None = None
    payment_method: Any = None
    installments_plan: Any = None
    timezone: str | None = Field(default=None, description="Availability timezone, e.g. UTC +03:00")
    payments_number: int | None = None
    split_payment_methods: bool | None = None
    taxes: list[Tax] | None = None
    customer_payer: LinkPayer | None = None
    additional_data: Any = None
    callback_url: str | None = None
    one_time_use: bool | None = None
    availability: Availability | None = None
    payment_method_types: list[str]
    metadata: list[MetadataEntry] | None = None
    vault_on_success: bool | None = None


class PaymentLinkRef(YunoModel):
    paymentLinkId: str = Field(description="The unique identifier of the payment link")


class PaymentLinkCancelBody(YunoModel):
    paymentLinkId: str = Field(description="The code of the payment link to cancel")


class PaymentLinkCancel(YunoModel):
    paymentLinkId: str = Field(description="The unique identifier of the payment link to cancel")
    body: PaymentLinkCancelBody
