"""Installment plan models."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from .shared import Availability, CountryCode, YunoModel

InstallmentType = Literal["MERCHANT_INSTALLMENTS", "ISSUER_INSTALLMENTS"]


class FinancialCost(YunoModel):
    type: str = Field(min_length=3, max_length=255, description="e.g. CFT, TEA, CET, CAT")
    rate: float = Field(ge=0, le=100000)


class InstallmentOption(YunoModel):
    installment: int = Field(description="Number of monthly installments")
    rate: float = Field(description="Multiplier applied to the final amount, e.g. 1.20 for 20%")
    financial_costs: list[FinancialCost] | None = None
    type: InstallmentType | None = None


class PlanAmount(YunoModel):
    currency: str = Field(min_length=3, max_length=3)
    min_value: int | float | None = None
    max_value: int | float | None = None


class InstallmentPlanCreate(YunoModel):
    name: str
    account_id: list[str] | None = Field(
        default=None, description="Account ids; defaults to the configured account code"
    )
    merchant_reference: str
    installments_plan: list[InstallmentOption]
    country_code: CountryCode | None = None
    brand: list[str] | None = None
    issuer: str | None = None
    iin: list[str] | None = None
    first_installment_deferral: int | None = Field(default=None, le=3)
    amount: PlanAmount | None = None
    availability: Availability | None = None


class InstallmentPlanRef(YunoModel):
    planId: str = Field(description="The unique identifier of the installment plan")


class InstallmentPlanRetrieveAll(YunoModel):
    accountId: str = Field(description="The account_id to list installment plans for")


class InstallmentOptionUpdate(YunoModel):
    installment: int | None = None
    rate: float | None = None
    financial_costs: list[FinancialCost] | None = None
    type: InstallmentType | None = None


class PlanAmountUpdate(YunoModel):
    currency: str | None = Field(default=None, min_length=3, max_length=3)
    min_value: int | float | None = None
    max_value: int | float | None = None


class InstallmentPlanUpdate(YunoModel):
    planId: str = Field(description="The unique identifier of the installment plan to update")
    name: str | None = None
    account_id: list[str] | None = None
    merchant_reference: str | None = None
    installments_plan: list[InstallmentOptionUpdate] | None = None
    country_code: CountryCode | None = None
    scheme: str | None = Field(default=None, description="Card scheme")
    brand: list[str] | None = None
    issuer: str | None = None
    iin: list[str] | None = None
    first_installment_deferral: int | None = Field(default=None, le=3)
    amount: PlanAmountUpdate | None = None
    availability: Availability | None = None
