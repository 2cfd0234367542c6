"""Building blocks shared by the Yuno request models."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

YunoId = Annotated[str, Field(min_length=36, max_length=64)]
CountryCode = Annotated[str, Field(min_length=2, max_length=2, description="ISO 3166-1 alpha-2")]
CurrencyCode = Annotated[str, Field(min_length=3, max_length=3, description="ISO 4217")]

UUID_PATTERN = r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"

IdempotencyKey = Annotated[
    str | None,
    Field(
        pattern=UUID_PATTERN,
        description="UUID forwarded as X-Idempotency-Key; a random one is generated when omitted",
    ),
]


class YunoModel(BaseModel):
    """Base for request models; fields the API adds later pass through untouched.

    Validation is strict: "100" is not accepted where a number is expected.
    """

    model_config = ConfigDict(extra="allow", strict=True)


class Address(YunoModel):
    address_line_1: str
    address_line_2: str | None = None
    country: CountryCode | None = None
    state: str
    city: str
    zip_code: str
    neighborhood: str | None = None


class MetadataEntry(YunoModel):
    key: str
    value: str


class Phone(YunoModel):
    number: str
    country_code: str


class Document(YunoModel):
    document_type: str
    document_number: str


class CardData(YunoModel):
    number: str = Field(min_length=8, max_length=19)
    expiration_month: int = Field(ge=1, le=12)
    expiration_year: int = Field(ge=1, le=9999)
    security_code: str | None = Field(default=None, min_length=3, max_length=4)
    holder_name: str | None = Field(default=None, min_length=3, max_length=26)
    type: str | None = None
    brand: str | None = None


class BrowserInfo(YunoModel):
    browser_time_difference: str
    color_depth: str
    java_enabled: bool
    screen_width: str
    screen_height: str
    user_agent: str
    language: str
    javascript_enabled: bool
    accept_browser: str
    accept_content: str
    accept_header: str


class Amount(YunoModel):
    currency: CurrencyCode
    value: int | float = Field(ge=0, description="The payment amount")


class Availability(YunoModel):
    start_at: str | None = None
    finish_at: str | None = None
