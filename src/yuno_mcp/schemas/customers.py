"""Customer request models."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from .shared import Address, CountryCode, Document, MetadataEntry, Phone, YunoId, YunoModel

Gender = Literal["M", "F", "NB"]


class CustomerCreate(YunoModel):
    merchant_customer_id: str = Field(min_length=1, max_length=255)
    merchant_customer_created_at: str | None = None
    first_name: str | None = Field(default=None, min_length=1, max_length=255)
    last_name: str | None = Field(default=None, min_length=1, max_length=255)
    gender: Gender | None = None
    date_of_birth: str | None = Field(
        default=None, min_length=10, max_length=10, description="YYYY-MM-DD"
    )
    email: str = Field(min_length=3, max_length=255)
    nationality: CountryCode | None = None
    country: CountryCode | None = None
    document: Document | None = None
    phone: Phone | None = None
    billing_address: Address | None = None
    shipping_address: Address | None = None
    metadata: list[MetadataEntry] | None = None


class CustomerRetrieve(YunoModel):
    customerId: YunoId = Field(description="The unique identifier of the customer (MIN 36, MAX 64)")


class CustomerRetrieveByExternalId(YunoModel):
    merchant_customer_id: str = Field(
        description="The unique identifier of the customer in the merchant's system"
    )


class CustomerUpdate(YunoModel):
    customerId: YunoId = Field(
        description="The unique identifier of the customer to update (MIN 36, MAX 64)"
    )
    first_name: str | None = None
    last_name: str | None = None
    gender: Gender | None = None
    date_of_birth: str | None = None
    email: str | None = None
    nationality: str | None = None
    country: str | None = None
    document: Document | None = None
    phone: Phone | None = None
    billing_address: Address | None = None
    shipping_address: Address | None = None
    metadata: list[MetadataEntry] | None = None
    merchant_customer_created_at: str | None = None
