import httpx
import pytest

from gocardless_client import errors
from gocardless_client.api.balances import list_balances
from gocardless_client.api.creditor_bank_accounts import create_a_creditor_bank_account
from gocardless_client.models import ApiErrorType, CreditorBankAccountCreateRequest, CreditorBankAccountLinks


def _error_body(error_type, code, message="Something is wrong"):
    return {"error": {"message": message, "type": error_type, "code": code, "errors": []}}


def test_validation_failed(make_client, load_fixture):
    """Test a 422 response exposes the individual field errors"""
    client = make_client(lambda request: httpx.Response(422, json=load_fixture("validation_failed.json")))
    body = CreditorBankAccountCreateRequest(
        account_holder_name="Nude Wines",
        links=CreditorBankAccountLinks(creditor="CR123"),
        iban="not-an-iban",
    )

    with pytest.raises(errors.ValidationFailedError) as exc_info:
        create_a_creditor_bank_account.sync(client=client, body=body)

    error = exc_info.value
    assert error.status_code == 422
    assert error.code == 422
    assert error.type is ApiErrorType.VALIDATION_FAILED
    assert error.message == "Validation failed"
    assert str(error) == "Validation failed"
    assert error.request_id == "0ab4e4fb-b3c0-4e4c-9a5e-6b6b1e4d7bd2"
    assert error.documentation_url.endswith("#validation_failed")
    assert error.errors[0].field == "iban"
    assert error.errors[0].request_pointer == "/creditor_bank_accounts/iban"


@pytest.mark.parametrize(
    "status_code, body_type, expected_class, expected_type",
    [
        (401, "invalid_api_usage", errors.AuthenticationFailedError, ApiErrorType.AUTHENTICATION_FAILED),
        (403, "invalid_api_usage", errors.InsufficientPermissionsError, ApiErrorType.INSUFFICIENT_PERMISSIONS),
        (429, "invalid_api_usage", errors.RateLimitReachedError, ApiErrorType.RATE_LIMIT_REACHED),
        (400, "invalid_api_usage", errors.InvalidApiUsageError, ApiErrorType.INVALID_API_USAGE),
        (500, "gocardless", errors.InternalError, ApiErrorType.GOCARDLESS),
    ],
)
def test_status_and_type_mapping(make_client, status_code, body_type, expected_class, expected_type):
    client = make_client(lambda request: httpx.Response(status_code, json=_error_body(body_type, status_code)))

    with pytest.raises(expected_class) as exc_info:
        list_balances.sync(client=client, creditor="CR123")

    assert exc_info.value.type is expected_type
    assert exc_info.value.errors == []
    assert exc_info.value.documentation_url is None


def test_html_error_page(make_client):
    """Test a proxy error page that is not a GoCardless error document"""
    html = "<html><body><h1>502 Bad Gateway</h1></body></html>"
    client = make_client(lambda request: httpx.Response(502, text=html, headers={"Content-Type": "text/html"}))

    with pytest.raises(errors.GoCardlessApiError) as exc_info:
        list_balances.sync(client=client, creditor="CR123")

    error = exc_info.value
    assert type(error) is errors.GoCardlessApiError
    assert error.type is ApiErrorType.GOCARDLESS
    assert error.code == 502
    assert error.message == errors.GENERIC_ERROR_MESSAGE
    assert error.content == html.encode()


def test_json_without_error_envelope(make_client):
    client = make_client(lambda request: httpx.Response(500, json={"status": "down"}))

    with pytest.raises(errors.GoCardlessApiError) as exc_info:
        list_balances.sync(client=client, creditor="CR123")

    assert exc_info.value.code == 500
    assert exc_info.value.message == errors.GENERIC_ERROR_MESSAGE


def test_unrecognised_error_type(make_client):
    client = make_client(lambda request: httpx.Response(418, json=_error_body("brand_new_type", 418)))

    with pytest.raises(errors.GoCardlessApiError) as exc_info:
        list_balances.sync(client=client, creditor="CR123")

    assert type(exc_info.value) is errors.GoCardlessApiError
    assert exc_info.value.type is ApiErrorType.UNKNOWN


def test_hierarchy():
    assert issubclass(errors.GoCardlessApiError, errors.GoCardlessError)
    assert issubclass(errors.UnexpectedStatus, errors.GoCardlessError)
    assert issubclass(errors.InvalidEnumValue, ValueError)
    assert issubclass(errors.CapacityExceeded, errors.MetadataError)
