"""Payment lifecycle models: create, authorize, refund, cancel, capture."""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import Field

from .shared import (
    Address,
    Amount,
    CardData,
    Document,
    IdempotencyKey,
    MetadataEntry,
    Phone,
    YunoId,
    YunoModel,
)

SettlementCurrency = Literal[
    "ARS", "BOV", "BOB", "BRL", "CLP", "COP", "CRC", "USD", "SVC",
    "GTQ", "HNL", "MXN", "NIO", "PAB", "PYG", "PEN", "UYU",
]  # fmt: skip

OperationReason = Literal["DUPLICATE", "FRAUDULENT", "REQUESTED_BY_CUSTOMER"]


class DeviceFingerprint(YunoModel):
    provider_id: str | None = None
    id: str | None = None


class PayerBrowserInfo(YunoModel):
    user_agent: str | None = Field(default=None, min_length=3, max_length=255)
    accept_header: str | None = None
    platform: str | None = None
    color_depth: str | None = Field(default=None, min_length=1, max_length=5)
    screen_height: str | None = Field(default=None, min_length=3, max_length=255)
    screen_width: str | None = Field(default=None, min_length=3, max_length=255)
    javascript_enabled: bool | None = None
    language: str | None = Field(default=None, min_length=1, max_length=5)
    accept_browser: str | None = None
    accept_content: str | None = None
    java_enabled: bool | None = None
    browser_time_difference: str | None = None


class Geolocation(YunoModel):
    latitude: str | None = Field(default=None, min_length=1, max_length=11)
    longitude: str | None = Field(default=None, min_length=1, max_length=11)


class CustomerPayer(YunoModel):
    id: YunoId | None = None
    merchant_customer_id: str | None = Field(default=None, min_length=1, max_length=255)
    merchant_customer_created_at: str | None = Field(
        default=None, min_length=27, max_length=27, description="ISO 8601"
    )
    first_name: str | None = Field(default=None, min_length=1, max_length=255)
    last_name: str | None = Field(default=None, min_length=1, max_length=255)
    gender: str | None = Field(default=None, min_length=1, max_length=2)
    date_of_birth: str | None = Field(default=None, min_length=10, max_length=10)
    email: str | None = Field(default=None, min_length=1, max_length=255)
    nationality: str | None = Field(default=None, min_length=2, max_length=2)
    ip_address: str | None = Field(default=None, min_length=1, max_length=45)
    device_fingerprints: list[DeviceFingerprint] | None = Field(default=None, max_length=4000)
    browser_info: PayerBrowserInfo | None = None
    document: Document | None = None
    billing_address: Address | None = None
    shipping_address: Address | None = None
    phone: Phone | None = None
    geolocation: Geolocation | None = None


class StoredCredentials(YunoModel):
    reason: str | None = None
    usage: str | None = None
    subscription_agreement_id: str | None = None
    network_transaction_id: str | None = None


class CardDetail(YunoModel):
    capture: bool | None = None
    installments: int | None = None
    first_installment_deferral: int | None = None
    soft_descriptor: str | None = None
    card_data: CardData
    verify: bool | None = None
    stored_credentials: StoredCredentials | None = None


class PaymentMethodDetail(YunoModel):
    card: CardDetail | None = None


class PaymentMethod(YunoModel):
    token: str | None = None
    vaulted_token: str | None = None
    type: str = Field(description="Payment method type")
    detail: PaymentMethodDetail | None = None
    vault_on_success: bool | None = None


class PaymentBody(YunoModel):
    account_id: str | None = Field(
        default=None, description="Yuno account; defaults to the configured account code"
    )
    description: str
    additional_data: Any = None
    country: str = Field(description="Customer's country (ISO 3166-1)")
    merchant_order_id: str
    merchant_reference: str | None = None
    amount: Amount
    customer_payer: CustomerPayer | None = None
    workflow: Literal["SDK_CHECKOUT", "DIRECT", "REDIRECT"]
    payment_method: PaymentMethod
    callback_url: str | None = None
    fraud_screening: Any = None
    split_marketplace: Any = None
    metadata: list[MetadataEntry] | None = None


class PaymentCreate(YunoModel):
    payment: PaymentBody
    idempotencyKey: IdempotencyKey = None


class PaymentRetrieve(YunoModel):
    payment_id: str = Field(description="The unique identifier of the payment")


class PaymentRetrieveByMerchantOrderId(YunoModel):
    merchant_order_id: str = Field(description="The merchant_order_id used when paying")


class ResponseAdditionalData(YunoModel):
    receipt: bool | None = None
    receipt_language: Literal["ES", "EN", "PT"] | None = None


class OperationAmount(YunoModel):
    currency: SettlementCurrency | None = None
    value: str | None = None


class RefundPayer(YunoModel):
    id: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None


class RefundBody(YunoModel):
    description: str | None = Field(default=None, min_length=3, max_length=255)
    reason: OperationReason | None = None
    merchant_reference: str = Field(min_length=3, max_length=255)
    amount: OperationAmount | None = None
    simplified_mode: bool | None = None
    response_additional_data: ResponseAdditionalData | None = None
    customer_payer: RefundPayer


class CancelBody(YunoModel):
    description: str | None = Field(default=None, min_length=3, max_length=255)
    reason: OperationReason | Literal[""] | None = None
    merchant_reference: str = Field(min_length=3, max_length=255)
    response_additional_data: ResponseAdditionalData | None = None


class CaptureAmount(YunoModel):
    currency: SettlementCurrency
    value: str


class CaptureBody(YunoModel):
    merchant_reference: str = Field(min_length=3, max_length=255)
    amount: CaptureAmount | None = None
    reason: str = Field(min_length=3, max_length=255)
    simplified_mode: bool | None = None


PaymentId = Annotated[
    str, Field(min_length=36, max_length=64, description="The unique identifier of the payment")
]
TransactionId = Annotated[
    str, Field(min_length=36, max_length=64, description="The unique identifier of the transaction")
]


class PaymentRefund(YunoModel):
    paymentId: PaymentId
    transactionId: TransactionId
    body: RefundBody
    idempotencyKey: IdempotencyKey = None


class PaymentCancelOrRefund(YunoModel):
    paymentId: PaymentId
    body: RefundBody
    idempotencyKey: IdempotencyKey = None


class PaymentCancel(YunoModel):
    paymentId: PaymentId
    transactionId: TransactionId
    body: CancelBody
    idempotencyKey: IdempotencyKey = None


class PaymentCaptureAuthorization(YunoModel):
    paymentId: PaymentId
    transactionId: TransactionId
    body: CaptureBody
    idempotencyKey: IdempotencyKey = None
