import logging
import uuid
from http import HTTPStatus
from typing import Any, Optional, Union

import httpx

from ... import errors
from ...client import AuthenticatedClient
from ...models.creditor_bank_account_create_request import CreditorBankAccountCreateRequest
from ...models.creditor_bank_account_response import CreditorBankAccountResponse
from ...types import UNSET, Response, Unset
from . import get_a_creditor_bank_account

logger = logging.getLogger(__name__)


def _get_kwargs(
    *,
    body: CreditorBankAccountCreateRequest,
    idempotency_key: Union[Unset, str] = UNSET,
) -> dict[str, Any]:
    headers: dict[str, Any] = {}
    if isinstance(idempotency_key, Unset):
        idempotency_key = str(uuid.uuid4())
    headers["Idempotency-Key"] = idempotency_key

    _kwargs: dict[str, Any] = {
        "method": "post",
        "url": "/creditor_bank_accounts",
    }

    _kwargs["json"] = {"creditor_bank_accounts": body.to_dict()}

    headers["Content-Type"] = "application/json"

    _kwargs["headers"] = headers
    return _kwargs


def _parse_response(
    *, client: AuthenticatedClient, response: httpx.Response
) -> Optional[CreditorBankAccountResponse]:
    if response.status_code in (200, 201):
        response_201 = CreditorBankAccountResponse.from_dict(response.json())

        return response_201
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


def _conflicting_resource_id(client: AuthenticatedClient, error: errors.InvalidStateError) -> Optional[str]:
    if client.error_on_idempotency_conflict:
        return None
    conflicting_id = error.conflicting_resource_id
    if conflicting_id is not None:
        logger.warning(f"Idempotency key already used, fetching existing creditor bank account {conflicting_id}")
    return conflicting_id


def sync_detailed(
    *,
    client: AuthenticatedClient,
    body: CreditorBankAccountCreateRequest,
    idempotency_key: Union[Unset, str] = UNSET,
) -> Response[CreditorBankAccountResponse]:
    """Creditor Bank Accounts - Create

     Creates a new creditor bank account object.

    Every create carries an ``Idempotency-Key`` header; one is generated when not given. If the
    key was already used for a creditor bank account, that account is fetched and returned
    instead, unless Client.error_on_idempotency_conflict is True.

    Args:
        idempotency_key (Union[Unset, str]): Key identifying this create across retries.
        body (CreditorBankAccountCreateRequest): Creates a new creditor bank account object.

    Raises:
        errors.ValidationFailedError: If the bank details are rejected.
        errors.InvalidStateError: On an idempotency conflict with Client.error_on_idempotency_conflict set.
        errors.GoCardlessApiError: If the server returns any other error response.
        errors.InvalidEnumValue: If ``body.account_type`` is the UNKNOWN sentinel.
        errors.UnexpectedStatus: If the server returns an undocumented status code and Client.raise_on_unexpected_status is True.
        httpx.TimeoutException: If the request takes longer than Client.timeout.

    Returns:
        Response[CreditorBankAccountResponse]
    """

    kwargs = _get_kwargs(
        body=body,
        idempotency_key=idempotency_key,
    )

    response = client.get_httpx_client().request(
        **kwargs,
    )

    try:
        return _build_response(client=client, response=response)
    except errors.InvalidStateError as error:
        conflicting_id = _conflicting_resource_id(client, error)
        if conflicting_id is None:
            raise
        return get_a_creditor_bank_account.sync_detailed(conflicting_id, client=client)


def sync(
    *,
    client: AuthenticatedClient,
    body: CreditorBankAccountCreateRequest,
    idempotency_key: Union[Unset, str] = UNSET,
) -> Optional[CreditorBankAccountResponse]:
    """Creditor Bank Accounts - Create

     Creates a new creditor bank account object. See sync_detailed for the idempotency behaviour.

    Returns:
        CreditorBankAccountResponse
    """

    return sync_detailed(
        client=client,
        body=body,
        idempotency_key=idempotency_key,
    ).parsed


async def asyncio_detailed(
    *,
    client: AuthenticatedClient,
    body: CreditorBankAccountCreateRequest,
    idempotency_key: Union[Unset, str] = UNSET,
) -> Response[CreditorBankAccountResponse]:
    """Creditor Bank Accounts - Create

     Creates a new creditor bank account object. See sync_detailed for the idempotency behaviour.

    Returns:
        Response[CreditorBankAccountResponse]
    """

    kwargs = _get_kwargs(
        body=body,
        idempotency_key=idempotency_key,
    )

    response = await client.get_async_httpx_client().request(**kwargs)

    try:
        return _build_response(client=client, response=response)
    except errors.InvalidStateError as error:
        conflicting_id = _conflicting_resource_id(client, error)
        if conflicting_id is None:
            raise
        return await get_a_creditor_bank_account.asyncio_detailed(conflicting_id, client=client)


async def asyncio(
    *,
    client: AuthenticatedClient,
    body: CreditorBankAccountCreateRequest,
    idempotency_key: Union[Unset, str] = UNSET,
) -> Optional[CreditorBankAccountResponse]:
    """Creditor Bank Accounts - Create

     Creates a new creditor bank account object. See sync_detailed for the idempotency behaviour.

    Returns:
        CreditorBankAccountResponse
    """

    return (
        await asyncio_detailed(
            client=client,
            body=body,
            idempotency_key=idempotency_key,
        )
    ).parsed
