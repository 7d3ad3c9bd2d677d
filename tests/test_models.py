import datetime

import pytest

from gocardless_client.errors import CapacityExceeded, InvalidEnumValue
from gocardless_client.models import (
    Balance,
    BalanceBalanceType,
    BalanceCurrency,
    BalanceListResponse,
    CreditorBankAccount,
    CreditorBankAccountAccountType,
    CreditorBankAccountCreateRequest,
    CreditorBankAccountLinks,
    CreditorBankAccountResponse,
    CreditorBankAccountVerificationStatus,
    Metadata,
    Payout,
    PayoutFxFxCurrency,
    PayoutPayoutType,
    PayoutResponse,
    PayoutStatus,
    WebhookResponse,
)
from gocardless_client.types import UNSET


def test_balance_with_future_balance_type():
    """Test that an unrecognised balance_type decodes to UNKNOWN without failing"""
    balance = Balance.from_dict(
        {
            "amount": 1200,
            "balance_type": "some_future_type",
            "currency": "GBP",
            "last_updated_at": "2024-03-01T10:15:00.000Z",
            "links": {"creditor": "CR123"},
        }
    )

    assert balance.balance_type is BalanceBalanceType.UNKNOWN
    assert balance.currency is BalanceCurrency.GBP
    assert balance.amount == 1200
    assert balance.links.creditor == "CR123"
    assert balance.last_updated_at == datetime.datetime(2024, 3, 1, 10, 15, tzinfo=datetime.timezone.utc)
    assert balance.to_dict()["balance_type"] == "unknown"


def test_balance_list_envelope(load_fixture):
    balances = BalanceListResponse.from_dict(load_fixture("balances.json"))

    assert [b.balance_type for b in balances.balances] == [
        BalanceBalanceType.CONFIRMED_FUNDS,
        BalanceBalanceType.UNKNOWN,
    ]
    assert balances.meta.cursors.after == "BAL2"
    assert balances.meta.cursors.before is None
    assert balances.meta.limit == 50


def test_absent_fields_are_unset():
    balance = Balance.from_dict({})

    assert balance.amount is UNSET
    assert balance.balance_type is UNSET
    assert balance.to_dict() == {}


def test_null_enum_fields_stay_null():
    """Test that a JSON null in an enumerated field decodes to None and is written back as null"""
    balance = Balance.from_dict({"amount": 1, "balance_type": None, "currency": None})
    payout = Payout.from_dict({"id": "PO1", "currency": None, "payout_type": None, "status": None})
    account = CreditorBankAccount.from_dict({"id": "BA1", "verification_status": None})

    assert balance.balance_type is None
    assert balance.currency is None
    assert balance.to_dict() == {"amount": 1, "balance_type": None, "currency": None}
    assert payout.status is None
    assert payout.payout_type is None
    assert payout.to_dict() == {"id": "PO1", "currency": None, "payout_type": None, "status": None}
    assert account.verification_status is None
    assert account.to_dict()["verification_status"] is None


def test_non_string_enum_values_decode_to_unknown():
    payout = Payout.from_dict({"status": ["paid"], "fx": {"fx_currency": {"code": "GBP"}}})
    account = CreditorBankAccount.from_dict({"account_type": 1})

    assert payout.status is PayoutStatus.UNKNOWN
    assert payout.fx.fx_currency is PayoutFxFxCurrency.UNKNOWN
    assert account.account_type is CreditorBankAccountAccountType.UNKNOWN



def test_payout_fields(load_fixture):
    payout = PayoutResponse.from_dict(load_fixture("payout.json")).payouts

    assert payout.id == "PO123"
    assert payout.arrival_date == datetime.date(2024, 3, 4)
    assert payout.payout_type is PayoutPayoutType.MERCHANT
    assert payout.status is PayoutStatus.PENDING
    assert payout.tax_currency is None
    assert payout.links.creditor_bank_account == "BA123"
    assert payout.fx.fx_currency is PayoutFxFxCurrency.GBP
    assert payout.fx.exchange_rate is None
    assert payout.fx.estimated_exchange_rate == "1.1234567890"
    assert isinstance(payout.metadata, Metadata)
    assert payout.metadata["salesforce_id"] == "ABCD1234"


def test_payout_unknown_status_and_unmodelled_fields_survive():
    """Test that new statuses and new fields from the API pass through to_dict"""
    payout = Payout.from_dict({"id": "PO1", "status": "in_transit", "amount_in_flight": 10, "arrival_date": None})

    assert payout.status is PayoutStatus.UNKNOWN
    assert payout.arrival_date is None
    assert payout["amount_in_flight"] == 10
    assert payout.to_dict() == {"id": "PO1", "status": "unknown", "amount_in_flight": 10, "arrival_date": None}


def test_payout_metadata_over_capacity_is_rejected():
    with pytest.raises(CapacityExceeded):
        Payout.from_dict({"metadata": {"a": "1", "b": "2", "c": "3", "d": "4"}})


def test_creditor_bank_account_fields(load_fixture):
    account = CreditorBankAccountResponse.from_dict(load_fixture("creditor_bank_account.json")).creditor_bank_accounts

    assert account.id == "BA123"
    assert account.account_type is None
    assert account.enabled is True
    assert account.verification_status is CreditorBankAccountVerificationStatus.SUCCESSFUL
    assert account.links.creditor == "CR123"
    assert len(account.metadata) == 0


def test_webhook_fields(load_fixture):
    webhook = WebhookResponse.from_dict(load_fixture("webhook.json")).webhooks

    assert webhook.id == "WB123"
    assert webhook.successful is True
    assert webhook.response_code == 200
    assert webhook.request_headers["Webhook-Signature"] == "abc"
    assert webhook.response_headers.to_dict() == {"Server": "nginx"}
    assert webhook.to_dict()["request_headers"]["Content-Type"] == "application/json"


def test_create_request_body():
    body = CreditorBankAccountCreateRequest(
        account_holder_name="Nude Wines",
        links=CreditorBankAccountLinks(creditor="CR123"),
        account_number="55779911",
        branch_code="200000",
        country_code="GB",
        account_type=CreditorBankAccountAccountType.CHECKING,
        metadata=Metadata(internal_ref="acc-1"),
    )

    assert body.to_dict() == {
        "account_holder_name": "Nude Wines",
        "links": {"creditor": "CR123"},
        "account_number": "55779911",
        "account_type": "checking",
        "branch_code": "200000",
        "country_code": "GB",
        "metadata": {"internal_ref": "acc-1"},
    }


def test_create_request_rejects_unknown_account_type():
    body = CreditorBankAccountCreateRequest(
        account_holder_name="Nude Wines",
        links=CreditorBankAccountLinks(creditor="CR123"),
        account_type=CreditorBankAccountAccountType.UNKNOWN,
    )

    with pytest.raises(InvalidEnumValue):
        body.to_dict()
