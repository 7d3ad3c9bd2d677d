import datetime
import json
import logging
from unittest.mock import patch

import httpx
import pytest

from gocardless_client import AuthenticatedClient, Environment
from gocardless_client.api import API
from gocardless_client.api.balances import list_balances
from gocardless_client.api.creditor_bank_accounts import (
    create_a_creditor_bank_account,
    disable_a_creditor_bank_account,
    get_a_creditor_bank_account,
    list_creditor_bank_accounts,
)
from gocardless_client.api.payouts import get_a_payout, list_payouts
from gocardless_client.api.webhooks import get_a_webhook, list_webhooks, retry_a_webhook
from gocardless_client.errors import InvalidEnumValue, InvalidStateError, UnexpectedStatus
from gocardless_client.models import (
    BalanceBalanceType,
    CreditorBankAccountCreateRequest,
    CreditorBankAccountLinks,
    PayoutCurrency,
    PayoutStatus,
)


def _create_body():
    return CreditorBankAccountCreateRequest(
        account_holder_name="Nude Wines",
        links=CreditorBankAccountLinks(creditor="CR123"),
        iban="GB60BARC20000055779911",
    )


def test_request_headers(make_client, sent_requests, load_fixture):
    """Test that every request carries the auth, version and client headers"""
    client = make_client(lambda request: httpx.Response(200, json=load_fixture("balances.json")))

    list_balances.sync(client=client, creditor="CR123")

    headers = sent_requests[0].headers
    assert headers["Authorization"] == "Bearer sandbox_token"
    assert headers["GoCardless-Version"] == "2015-07-06"
    assert headers["GoCardless-Client-Library"] == "gocardless-client-python"
    assert headers["GoCardless-Client-Version"] == "0.1.0"
    assert headers["User-Agent"].startswith("gocardless-client-python/0.1.0")


def test_custom_headers_are_sent(make_client, sent_requests, load_fixture):
    client = make_client(lambda request: httpx.Response(200, json=load_fixture("balances.json")))
    client = client.with_headers({"GoCardless-Version": "2030-01-01", "X-Trace": "abc"})

    list_balances.sync(client=client, creditor="CR123")

    assert sent_requests[0].headers["GoCardless-Version"] == "2030-01-01"
    assert sent_requests[0].headers["X-Trace"] == "abc"


def test_for_environment():
    client = AuthenticatedClient.for_environment("token", Environment.SANDBOX)
    assert str(client.get_httpx_client().base_url).rstrip("/") == "https://api-sandbox.gocardless.com"

    assert AuthenticatedClient.for_environment("token")._base_url == "https://api.gocardless.com"


def test_list_balances(make_client, sent_requests, load_fixture):
    client = make_client(lambda request: httpx.Response(200, json=load_fixture("balances.json")))

    response = list_balances.sync_detailed(client=client, creditor="CR123", limit=10)

    request = sent_requests[0]
    assert request.method == "GET"
    assert request.url.path == "/balances"
    assert dict(request.url.params) == {"creditor": "CR123", "limit": "10"}
    assert response.status_code == 200
    assert response.parsed.balances[1].balance_type is BalanceBalanceType.UNKNOWN


def test_list_payouts_filters(make_client, sent_requests):
    """Test enum and created_at filters are sent as the API expects them"""
    client = make_client(lambda request: httpx.Response(200, json={"payouts": [], "meta": {"cursors": {}, "limit": 50}}))

    payouts = list_payouts.sync(
        client=client,
        currency=PayoutCurrency.GBP,
        status=PayoutStatus.PAID,
        created_at_gte=datetime.datetime(2024, 1, 1, tzinfo=datetime.timezone.utc),
        after="PO123",
    )

    params = sent_requests[0].url.params
    assert params["currency"] == "GBP"
    assert params["status"] == "paid"
    assert params["created_at[gte]"] == "2024-01-01T00:00:00+00:00"
    assert params["after"] == "PO123"
    assert "created_at[lt]" not in params
    assert payouts.payouts == []


def test_list_payouts_rejects_unknown_filter(make_client, sent_requests):
    client = make_client(lambda request: httpx.Response(200, json={}))

    with pytest.raises(InvalidEnumValue):
        list_payouts.sync(client=client, status=PayoutStatus.UNKNOWN)

    assert sent_requests == []


def test_get_a_payout(make_client, sent_requests, load_fixture):
    client = make_client(lambda request: httpx.Response(200, json=load_fixture("payout.json")))

    payout = get_a_payout.sync("PO123", client=client)

    assert sent_requests[0].url.path == "/payouts/PO123"
    assert payout.payouts.id == "PO123"


@patch("gocardless_client.api.creditor_bank_accounts.create_a_creditor_bank_account.uuid.uuid4")
def test_create_creditor_bank_account(mock_uuid4, make_client, sent_requests, load_fixture):
    """Test the create envelope and the generated idempotency key"""
    mock_uuid4.return_value = "6f1c9a3e-0000-4000-8000-000000000001"
    client = make_client(lambda request: httpx.Response(201, json=load_fixture("creditor_bank_account.json")))

    response = create_a_creditor_bank_account.sync_detailed(client=client, body=_create_body())

    request = sent_requests[0]
    assert request.method == "POST"
    assert request.url.path == "/creditor_bank_accounts"
    assert request.headers["Idempotency-Key"] == "6f1c9a3e-0000-4000-8000-000000000001"
    assert json.loads(request.content) == {
        "creditor_bank_accounts": {
            "account_holder_name": "Nude Wines",
            "links": {"creditor": "CR123"},
            "iban": "GB60BARC20000055779911",
        }
    }
    assert response.status_code == 201
    assert response.parsed.creditor_bank_accounts.id == "BA123"
    mock_uuid4.assert_called_once()


def test_create_uses_given_idempotency_key(make_client, sent_requests, load_fixture):
    client = make_client(lambda request: httpx.Response(201, json=load_fixture("creditor_bank_account.json")))

    create_a_creditor_bank_account.sync(client=client, body=_create_body(), idempotency_key="my-key")

    assert sent_requests[0].headers["Idempotency-Key"] == "my-key"


def _conflict_then_fetch(load_fixture):
    def handler(request):
        if request.method == "POST":
            return httpx.Response(409, json=load_fixture("idempotent_creation_conflict.json"))
        return httpx.Response(200, json=load_fixture("creditor_bank_account.json"))

    return handler


def test_idempotency_conflict_returns_existing_resource(make_client, sent_requests, load_fixture, caplog):
    """Test that a repeated create fetches the account created the first time"""
    client = make_client(_conflict_then_fetch(load_fixture))

    with caplog.at_level(logging.WARNING):
        account = create_a_creditor_bank_account.sync(client=client, body=_create_body(), idempotency_key="my-key")

    assert account.creditor_bank_accounts.id == "BA123"
    assert [(r.method, r.url.path) for r in sent_requests] == [
        ("POST", "/creditor_bank_accounts"),
        ("GET", "/creditor_bank_accounts/BA123"),
    ]
    assert "BA123" in caplog.text


def test_idempotency_conflict_can_raise(make_client, sent_requests, load_fixture):
    client = make_client(_conflict_then_fetch(load_fixture), error_on_idempotency_conflict=True)

    with pytest.raises(InvalidStateError) as exc_info:
        create_a_creditor_bank_account.sync(client=client, body=_create_body())

    assert exc_info.value.conflicting_resource_id == "BA123"
    assert len(sent_requests) == 1


def test_other_invalid_state_errors_are_raised(make_client):
    body = {
        "error": {
            "message": "Bank account already disabled",
            "type": "invalid_state",
            "code": 422,
            "errors": [{"reason": "disable_failed", "message": "Bank account already disabled"}],
        }
    }
    client = make_client(lambda request: httpx.Response(422, json=body))

    with pytest.raises(InvalidStateError) as exc_info:
        disable_a_creditor_bank_account.sync("BA123", client=client)

    assert exc_info.value.conflicting_resource_id is None


def test_list_creditor_bank_accounts_boolean_filter(make_client, sent_requests):
    client = make_client(
        lambda request: httpx.Response(200, json={"creditor_bank_accounts": [], "meta": {"cursors": {}, "limit": 50}})
    )

    list_creditor_bank_accounts.sync(client=client, creditor="CR123", enabled=False)

    assert dict(sent_requests[0].url.params) == {"creditor": "CR123", "enabled": "false"}


def test_get_and_disable_creditor_bank_account(make_client, sent_requests, load_fixture):
    client = make_client(lambda request: httpx.Response(200, json=load_fixture("creditor_bank_account.json")))

    get_a_creditor_bank_account.sync("BA123", client=client)
    disable_a_creditor_bank_account.sync("BA123", client=client)

    assert sent_requests[0].url.path == "/creditor_bank_accounts/BA123"
    disable = sent_requests[1]
    assert disable.method == "POST"
    assert disable.url.path == "/creditor_bank_accounts/BA123/actions/disable"
    assert json.loads(disable.content) == {"data": {}}


def test_webhook_endpoints(make_client, sent_requests, load_fixture):
    def handler(request):
        if request.url.path == "/webhooks":
            return httpx.Response(200, json={"webhooks": [], "meta": {"cursors": {}, "limit": 50}})
        return httpx.Response(200, json=load_fixture("webhook.json"))

    client = make_client(handler)

    list_webhooks.sync(client=client, is_test=True, successful=False)
    webhook = get_a_webhook.sync("WB123", client=client)
    retried = retry_a_webhook.sync("WB123", client=client)

    assert dict(sent_requests[0].url.params) == {"is_test": "true", "successful": "false"}
    assert webhook.webhooks.url == "https://example.com/webhooks"
    assert sent_requests[2].url.path == "/webhooks/WB123/actions/retry"
    assert json.loads(sent_requests[2].content) == {"data": {}}
    assert retried.webhooks.id == "WB123"


def test_unexpected_status(make_client):
    client = make_client(lambda request: httpx.Response(204))
    assert get_a_payout.sync_detailed("PO123", client=client).parsed is None

    strict_client = make_client(lambda request: httpx.Response(204), raise_on_unexpected_status=True)
    with pytest.raises(UnexpectedStatus) as exc_info:
        get_a_payout.sync("PO123", client=strict_client)
    assert exc_info.value.status_code == 204


def test_api_facade(make_client, sent_requests, load_fixture):
    client = make_client(lambda request: httpx.Response(200, json=load_fixture("payout.json")))
    api = API(client)

    response = api.payouts.get("PO123")

    assert response.parsed.payouts.id == "PO123"
    assert sent_requests[0].url.path == "/payouts/PO123"


@pytest.mark.asyncio
async def test_async_list_balances(make_client, sent_requests, load_fixture):
    client = make_client(lambda request: httpx.Response(200, json=load_fixture("balances.json")))

    async with client:
        balances = await list_balances.asyncio(client=client, creditor="CR123")

    assert sent_requests[0].headers["Authorization"] == "Bearer sandbox_token"
    assert balances.meta.cursors.after == "BAL2"


@pytest.mark.asyncio
async def test_async_idempotency_conflict(make_client, sent_requests, load_fixture):
    client = make_client(_conflict_then_fetch(load_fixture))

    account = await create_a_creditor_bank_account.asyncio(client=client, body=_create_body())

    assert account.creditor_bank_accounts.id == "BA123"
    assert sent_requests[1].url.path == "/creditor_bank_accounts/BA123"
