"""
Yuno tool credentials.
Contains the account code and the API key pair used by every Yuno API tool.
"""

from .base import CredentialSpec

YUNO_API_TOOLS = [
    "customerCreate",
    "customerRetrieve",
    "customerRetrieveByExternalId",
    "customerUpdate",
    "paymentMethodEnroll",
    "paymentMethodRetrieve",
    "paymentMethodRetrieveEnrolled",
    "paymentMethodUnenroll",
    "checkoutSessionCreate",
    "checkoutSessionRetrievePaymentMethods",
    "checkoutSessionCreateOtt",
    "subscriptionCreate",
    "subscriptionRetrieve",
    "subscriptionPause",
    "subscriptionResume",
    "subscriptionUpdate",
    "subscriptionCancel",
    "paymentCreate",
    "paymentRetrieve",
    "paymentRetrieveByMerchantOrderId",
    "paymentRefund",
    "paymentCancelOrRefund",
    "paymentCancelOrRefundWithTransaction",
    "paymentCancel",
    "paymentAuthorize",
    "paymentCaptureAuthorization",
    "paymentLinkCreate",
    "paymentLinkRetrieve",
    "paymentLinkCancel",
    "recipientCreate",
    "recipientRetrieve",
    "recipientUpdate",
    "recipientDelete",
    "installmentPlanCreate",
    "installmentPlanRetrieve",
    "installmentPlanRetrieveAll",
    "installmentPlanUpdate",
    "installmentPlanDelete",
    "routingLogin",
    "routingCreate",
    "routingGetProviders",
    "routingRetrieve",
    "routingUpdate",
    "routingPost",
    "routingLogOut",
]

_HELP_URL = "https://docs.y.uno/docs/authentication"

_INSTRUCTIONS = """To get your Yuno credentials:
1. Log in to the Yuno Dashboard at https://dashboard.y.uno
2. Navigate to Developers -> Credentials
3. Copy the Account code, the Public API key and the Private secret key
Note: Sandbox keys start with sandbox_ and never move real money"""

YUNO_CREDENTIALS = {
    "yuno_account_code": CredentialSpec(
        env_var="YUNO_ACCOUNT_CODE",
        tools=YUNO_API_TOOLS,
        help_url=_HELP_URL,
        description="Yuno account code, used as the default account_id on create requests",
        api_key_instructions=_INSTRUCTIONS,
    ),
    "yuno_public_api_key": CredentialSpec(
        env_var="YUNO_PUBLIC_API_KEY",
        tools=YUNO_API_TOOLS,
        help_url=_HELP_URL,
        description="Yuno public API key; its prefix selects the environment",
        api_key_instructions=_INSTRUCTIONS,
    ),
    "yuno_private_secret_key": CredentialSpec(
        env_var="YUNO_PRIVATE_SECRET_KEY",
        tools=YUNO_API_TOOLS,
        help_url=_HELP_URL,
        description="Yuno private secret key sent with every API request",
        api_key_instructions=_INSTRUCTIONS,
    ),
}
