"""Recipient (marketplace seller) models."""

from __future__ import annotations

from typing import Literal

from pydantic import EmailStr, Field

from .shared import Address, CountryCode, CurrencyCode, Document, Phone, YunoId, YunoModel

NationalEntity = Literal["INDIVIDUAL", "ENTITY"]
EntityType = Literal["GOVERNMENTAL", "PUBLIC", "NON_PROFIT", "PRIVATE"]


class LegalRepresentative(YunoModel):
    merchant_reference: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    date_of_birth: str | None = None
    country: CountryCode | None = None
    nationality: CountryCode | None = None
    title: str | None = None
    publicly_exposed_person: bool | None = None
    ultimate_beneficial_owner: bool | None = None


class BankWithdrawal(YunoModel):
    code: str = Field(min_length=3, max_length=3)
    branch: str = Field(min_length=3, max_length=3)
    branch_digit: str | None = Field(default=None, min_length=3, max_length=3)
    account: str = Field(min_length=3, max_length=250)
    account_digit: str | None = Field(default=None, min_length=3, max_length=250)
    account_type: Literal["CHECKINGS", "SAVINGS"]
    routing: str | None = None
    country: CountryCode
    currency: CurrencyCode
    payout_schedule: Literal["DAY", "WEEK", "MONTH", "HOLD"] | None = None


class WithdrawalMethods(YunoModel):
    bank: BankWithdrawal | None = None


class DocumentationItem(YunoModel):
    file_name: str = Field(min_length=3, max_length=255)
    content_type: Literal["application/pdf", "image/jpeg", "image/png"]
    content_category: str = Field(description="e.g. IDENTIFICATION_DOCUMENT, BANK_STATEMENT")
    content: str = Field(description="Base64-encoded content (max 2MB)")


class OnboardingProvider(YunoModel):
    id: str = Field(description="Provider id, e.g. PAGARME, STRIPE, ADYEN")
    connection_id: str
    recipient_id: str | None = None
    recipient_type: Literal["MEAL", "FOOD", "MULTI_BENEFITS", "FLEET"] | None = None


class Onboarding(YunoModel):
    account_id: str | None = None
    type: Literal["PREVIOUSLY_ONBOARDED", "ONBOARD_ONTO_THE_PROVIDER"]
    workflow: Literal["HOSTED_BY_PROVIDER", "DIRECT"]
    description: str | None = None
    callback_url: str | None = None
    provider: OnboardingProvider
    documentation: list[DocumentationItem] | None = None
    withdrawal_methods: WithdrawalMethods | None = None


class TermsOfService(YunoModel):
    acceptance: bool
    date: str
    ip: str | None = None


class RecipientCreate(YunoModel):
    account_id: YunoId | None = Field(
        default=None, description="Yuno account; defaults to the configured account code"
    )
    merchant_recipient_id: str | None = None
    national_entity: NationalEntity = Field(description="INDIVIDUAL or ENTITY")
    entity_type: EntityType | None = None
    first_name: str | None = None
    last_name: str | None = None
    date_of_birth: str | None = Field(default=None, description="YYYY-MM-DD")
    legal_name: str | None = Field(default=None, description="Required for ENTITY")
    email: EmailStr | None = None
    country: CountryCode | None = None
    website: str | None = None
    industry: str | None = None
    merchant_category_code: str | None = None
    document: Document | None = None
    phone: Phone | None = None
    address: Address | None = None
    legal_representatives: list[LegalRepresentative] | None = Field(
        default=None, description="Required for ENTITY"
    )
    withdrawal_methods: WithdrawalMethods | None = None
    documentation: list[DocumentationItem] | None = None
    onboardings: list[Onboarding] | None = None
    terms_of_service: TermsOfService | None = None


class RecipientRef(YunoModel):
    recipientId: str = Field(description="The unique identifier of the recipient")


class TermsOfServiceUpdate(YunoModel):
    acceptance: bool | None = None
    date: str | None = None
    ip: str | None = None


class RecipientUpdate(YunoModel):
    recipientId: str = Field(description="The unique identifier of the recipient to update")
    merchant_recipient_id: str | None = None
    national_entity: NationalEntity | None = None
    entity_type: EntityType | None = None
    first_name: str | None = None
    last_name: str | None = None
    legal_name: str | None = None
    email: str | None = None
    date_of_birth: str | None = None
    country: CountryCode | None = None
    website: str | None = None
    industry: str | None = None
    merchant_category_code: str | None = None
    document: Document | None = None
    phone: Phone | None = None
    address: Address | None = None
    legal_representatives: list[LegalRepresentative] | None = None
    withdrawal_methods: WithdrawalMethods | None = None
    documentation: list[DocumentationItem] | None = None
    onboardings: list[Onboarding] | None = None
    terms_of_service: TermsOfServiceUpdate | None = None
