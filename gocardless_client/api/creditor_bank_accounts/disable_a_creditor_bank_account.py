from http import HTTPStatus
from typing import Any, Optional

import httpx

from ... import errors
from ...client import AuthenticatedClient
from ...models.creditor_bank_account_response import CreditorBankAccountResponse
from ...types import Response


def _get_kwargs(
    identity: str,
) -> dict[str, Any]:
    headers: dict[str, Any] = {}

    _kwargs: dict[str, Any] = {
        "method": "post",
        "url": f"/creditor_bank_accounts/{identity}/actions/disable",
    }

    _kwargs["json"] = {"data": {}}

    headers["Content-Type"] = "application/json"

    _kwargs["headers"] = headers
    return _kwargs


def _parse_response(
    *, client: AuthenticatedClient, response: httpx.Response
) -> Optional[CreditorBankAccountResponse]:
    if response.status_code == 200:
        response_200 = CreditorBankAccountResponse.from_dict(response.json())

        return response_200
    if response.status_code >= 400:
        raise errors.api_error_from_response(response)
    if client.raise_on_unexpected_status:
        raise errors.UnexpectedStatus(response.status_code, response.content)
    else:
        return None


def _build_response(
    *, client: AuthenticatedClient, response: httpx.Response
) -> Response[CreditorBankAccountResponse]:
    return Response(
        status_code=HTTPStatus(response.status_code),
        content=response.content,
        headers=response.headers,
        parsed=_parse_response(client=client, response=response),
    )


def sync_detailed(
    identity: str,
    *,
    client: AuthenticatedClient,
) -> Response[CreditorBankAccountResponse]:
    """Creditor Bank Accounts - Disable

     Immediately disables the bank account, no money can be paid out to a disabled account.

    This will return a `disable_failed` error if the bank account has already been disabled.

    A disabled bank account can be re-enabled by creating a new bank account resource with the same
    details.

    Args:
        identity (str): Unique identifier, beginning with "BA".

    Raises:
        errors.InvalidStateError: If the bank account is already disabled.
        errors.GoCardlessApiError: If the server returns any other error response.
        errors.UnexpectedStatus: If the server returns an undocumented status code and Client.raise_on_unexpected_status is True.
        httpx.TimeoutException: If the request takes longer than Client.timeout.

    Returns:
        Response[CreditorBankAccountResponse]
    """

    kwargs = _get_kwargs(
        identity=identity,
    )

    response = client.get_httpx_client().request(
        **kwargs,
    )

    return _build_response(client=client, response=response)


def sync(
    identity: str,
    *,
    client: AuthenticatedClient,
) -> Optional[CreditorBankAccountResponse]:
    """Creditor Bank Accounts - Disable

     Immediately disables the bank account. See sync_detailed for details.

    Returns:
        CreditorBankAccountResponse
    """

    return sync_detailed(
        identity=identity,
        client=client,
    ).parsed


async def asyncio_detailed(
    identity: str,
    *,
    client: AuthenticatedClient,
) -> Response[CreditorBankAccountResponse]:
    """Creditor Bank Accounts - Disable

     Immediately disables the bank account. See sync_detailed for details.

    Returns:
        Response[CreditorBankAccountResponse]
    """

    kwargs = _get_kwargs(
        identity=identity,
    )

    response = await client.get_async_httpx_client().request(**kwargs)

    return _build_response(client=client, response=response)


async def asyncio(
    identity: str,
    *,
    client: AuthenticatedClient,
) -> Optional[CreditorBankAccountResponse]:
    """Creditor Bank Accounts - Disable

     Immediately disables the bank account. See sync_detailed for details.

    Returns:
        CreditorBankAccountResponse
    """

    return (
        await asyncio_detailed(
            identity=identity,
            client=client,
        )
    ).parsed
