"""Subscription models."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field

from .shared import Amount, Availability, CardData, CountryCode, MetadataEntry, YunoModel


class Frequency(YunoModel):
    type: Literal["DAY", "WEEK", "MONTH"]
    value: int


class BillingCycles(YunoModel):
    total: int


class SubscriptionPayer(YunoModel):
    id: str = Field(description="The unique identifier of the customer")


class SubscriptionPaymentMethod(YunoModel):
    type: str
    vaulted_token: str | None = None


class SubscriptionCreate(YunoModel):
    account_id: str | None = Field(
        default=None, description="Yuno account; defaults to the configured account code"
    )
    name: str = Field(min_length=3, max_length=255)
    description: str | None = Field(default=None, min_length=3, max_length=255)
    merchant_reference: str | None = Field(default=None, min_length=3, max_length=255)
    country: CountryCode
    amount: Amount
    additional_data: Any = None
    frequency: Frequency | None = None
    billing_cycles: BillingCycles | None = None
    customer_payer: SubscriptionPayer
    payment_method: SubscriptionPaymentMethod | None = None
    trial_period: Any = None
    availability: Any = None
    metadata: list[MetadataEntry] | None = None
    retries: Any = None
    initial_payment_validation: bool | None = None
    billing_date: Any = None


class SubscriptionRef(YunoModel):
    subscriptionId: str = Field(description="The unique identifier of the subscription")


class UpdateAmount(YunoModel):
    currency: str
    value: int | float


class UpdateCard(YunoModel):
    verify: bool | None = None
    card_data: CardData | None = None


class UpdatePaymentMethod(YunoModel):
    type: str
    vaulted_token: str
    card: UpdateCard | None = None


class Retries(YunoModel):
    retry_on_decline: bool | None = None
    amount: int | None = None


class SubscriptionUpdate(YunoModel):
    subscriptionId: str = Field(description="The unique identifier of the subscription to update")
    name: str | None = None
    description: str | None = None
    merchant_reference: str | None = None
    country: str | None = None
    amount: UpdateAmount | None = None
    frequency: Frequency | None = None
    billing_cycles: BillingCycles | None = None
    customer_payer: SubscriptionPayer | None = None
    payment_method: UpdatePaymentMethod | None = None
    availability: Availability | None = None
    retries: Retries | None = None
    metadata: list[MetadataEntry] | None = None
