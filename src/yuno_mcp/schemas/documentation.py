"""Documentation lookup model."""

from __future__ import annotations

from typing import Literal

from .shared import YunoModel

DocumentationType = Literal[
    "createCustomer",
    "retrieveCustomer",
    "retrieveCustomerByExternalId",
    "updateCustomer",
    "enrollPaymentMethod",
    "retrievePaymentMethod",
    "retrieveEnrolledPaymentMethods",
    "unenrollPaymentMethod",
    "createCheckoutSession",
    "retrievePaymentMethodsForCheckoutSession",
    "createOttForCheckoutSession",
    "createPayment",
    "retrievePayment",
    "retrievePaymentByMerchantOrderId",
    "refundPayment",
    "cancelOrRefundPayment",
    "cancelOrRefundWithTransactionPayment",
    "cancelPayment",
    "authorizePayment",
    "captureAuthorizationPayment",
    "createPaymentLink",
    "retrievePaymentLink",
    "cancelPaymentLink",
    "createSubscription",
    "retrieveSubscription",
    "pauseSubscription",
    "resumeSubscription",
    "updateSubscription",
    "cancelSubscription",
    "createRecipient",
    "retrieveRecipient",
    "updateRecipient",
    "deleteRecipient",
    "createRecipientOnboarding",
    "createInstallmentPlan",
    "retrieveInstallmentPlan",
    "retrieveAllInstallmentPlans",
    "updateInstallmentPlan",
    "deleteInstallmentPlan",
    "guides",
    "web",
    "web_v_1_1",
    "android",
    "android_release_notes",
    "ios",
    "unofficial.node",
    "unofficial.react",
]


class DocumentationRead(YunoModel):
    documentation_type: DocumentationType
