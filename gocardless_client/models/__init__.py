"""Contains all the data models used in inputs/outputs"""

from .api_error_response import ApiErrorResponse
from .api_error_response_error import ApiErrorResponseError
from .api_error_response_error_errors_item import ApiErrorResponseErrorErrorsItem
from .api_error_response_error_errors_item_links import ApiErrorResponseErrorErrorsItemLinks
from .api_error_type import ApiErrorType
from .balance import Balance
from .balance_balance_type import BalanceBalanceType
from .balance_currency import BalanceCurrency
from .balance_links import BalanceLinks
from .balance_list_response import BalanceListResponse
from .creditor_bank_account import CreditorBankAccount
from .creditor_bank_account_account_type import CreditorBankAccountAccountType
from .creditor_bank_account_create_request import CreditorBankAccountCreateRequest
from .creditor_bank_account_links import CreditorBankAccountLinks
from .creditor_bank_account_list_response import CreditorBankAccountListResponse
from .creditor_bank_account_response import CreditorBankAccountResponse
from .creditor_bank_account_verification_status import CreditorBankAccountVerificationStatus
from .gc_string_enum import GcStringEnum
from .list_meta import ListMeta
from .list_meta_cursors import ListMetaCursors
from .metadata import Metadata
from .payout import Payout
from .payout_currency import PayoutCurrency
from .payout_fx import PayoutFx
from .payout_fx_fx_currency import PayoutFxFxCurrency
from .payout_links import PayoutLinks
from .payout_list_response import PayoutListResponse
from .payout_payout_type import PayoutPayoutType
from .payout_response import PayoutResponse
from .payout_status import PayoutStatus
from .webhook import Webhook
from .webhook_list_response import WebhookListResponse
from .webhook_request_headers import WebhookRequestHeaders
from .webhook_response import WebhookResponse
from .webhook_response_headers import WebhookResponseHeaders

__all__ = (
    "ApiErrorResponse",
    "ApiErrorResponseError",
    "ApiErrorResponseErrorErrorsItem",
    "ApiErrorResponseErrorErrorsItemLinks",
    "ApiErrorType",
    "Balance",
    "BalanceBalanceType",
    "BalanceCurrency",
    "BalanceLinks",
    "BalanceListResponse",
    "CreditorBankAccount",
    "CreditorBankAccountAccountType",
    "CreditorBankAccountCreateRequest",
    "CreditorBankAccountLinks",
    "CreditorBankAccountListResponse",
    "CreditorBankAccountResponse",
    "CreditorBankAccountVerificationStatus",
    "GcStringEnum",
    "ListMeta",
    "ListMetaCursors",
    "Metadata",
    "Payout",
    "PayoutCurrency",
    "PayoutFx",
    "PayoutFxFxCurrency",
    "PayoutLinks",
    "PayoutListResponse",
    "PayoutPayoutType",
    "PayoutResponse",
    "PayoutStatus",
    "Webhook",
    "WebhookListResponse",
    "WebhookRequestHeaders",
    "WebhookResponse",
    "WebhookResponseHeaders",
)
