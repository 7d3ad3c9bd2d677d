import datetime
from http import HTTPStatus
from typing import Any, Optional, Union

import httpx

from ... import errors
from ...client import AuthenticatedClient
from ...models.creditor_bank_account_list_response import CreditorBankAccountListResponse
from ...types import UNSET, Response, Unset


def _get_kwargs(
    *,
    after: Union[Unset, str] = UNSET,
    before: Union[Unset, str] = UNSET,
    created_at_gt: Union[Unset, datetime.datetime] = UNSET,
    created_at_gte: Union[Unset, datetime.datetime] = UNSET,
    created_at_lt: Union[Unset, datetime.datetime] = UNSET,
    created_at_lte: Union[Unset, datetime.datetime] = UNSET,
    creditor: Union[Unset, str] = UNSET,
    enabled: Union[Unset, bool] = UNSET,
    limit: Union[Unset, int] = UNSET,
) -> dict[str, Any]:
    params: dict[str, Any] = {}

    params["after"] = after

    params["before"] = before

    for operator, value in (
        ("gt", created_at_gt),
        ("gte", created_at_gte),
        ("lt", created_at_lt),
        ("lte", created_at_lte),
    ):
        if not isinstance(value, Unset):
            params[f"created_at[{operator}]"] = value.isoformat()

    params["creditor"] = creditor

    json_enabled: Union[Unset, str] = UNSET
    if not isinstance(enabled, Unset):
        json_enabled = "true" if enabled else "false"

    params["enabled"] = json_enabled

    params["limit"] = limit

    params = {k: v for k, v in params.items() if v is not UNSET and v is not None}

    _kwargs: dict[str, Any] = {
        "method": "get",
        "url": "/creditor_bank_accounts",
        "params": params,
    }

    return _kwargs


def _parse_response(
    *, client: AuthenticatedClient, response: httpx.Response
) -> Optional[CreditorBankAccountListResponse]:
    if response.status_code == 200:
        response_200 = CreditorBankAccountListResponse.from_dict(response.json())

        return response_200
    if response.status_code >= 400:
        raise errors.api_error_from_response(response)
    if client.raise_on_unexpected_status:
        raise errors.UnexpectedStatus(response.status_code, response.content)
    else:
        return None


def _build_response(
    *, client: AuthenticatedClient, response: httpx.Response
) -> Response[CreditorBankAccountListResponse]:
    return Response(
        status_code=HTTPStatus(response.status_code),
        content=response.content,
        headers=response.headers,
        parsed=_parse_response(client=client, response=response),
    )


def sync_detailed(
    *,
    client: AuthenticatedClient,
    after: Union[Unset, str] = UNSET,
    before: Union[Unset, str] = UNSET,
    created_at_gt: Union[Unset, datetime.datetime] = UNSET,
    created_at_gte: Union[Unset, datetime.datetime] = UNSET,
    created_at_lt: Union[Unset, datetime.datetime] = UNSET,
    created_at_lte: Union[Unset, datetime.datetime] = UNSET,
    creditor: Union[Unset, str] = UNSET,
    enabled: Union[Unset, bool] = UNSET,
    limit: Union[Unset, int] = UNSET,
) -> Response[CreditorBankAccountListResponse]:
    """Creditor Bank Accounts - List

     Returns a cursor-paginated list of your creditor bank accounts.

    Args:
        after (Union[Unset, str]): Cursor pointing to the start of the desired set.
        before (Union[Unset, str]): Cursor pointing to the end of the desired set.
        created_at_gt (Union[Unset, datetime.datetime]): Limit to records created after the given time.
        created_at_gte (Union[Unset, datetime.datetime]): Limit to records created on or after the given time.
        created_at_lt (Union[Unset, datetime.datetime]): Limit to records created before the given time.
        created_at_lte (Union[Unset, datetime.datetime]): Limit to records created on or before the given time.
        creditor (Union[Unset, str]): Unique identifier, beginning with "CR".
        enabled (Union[Unset, bool]): Get enabled or disabled creditor bank accounts.
        limit (Union[Unset, int]): Number of records to return.

    Raises:
        errors.GoCardlessApiError: If the server returns an error response.
        errors.UnexpectedStatus: If the server returns an undocumented status code and Client.raise_on_unexpected_status is True.
        httpx.TimeoutException: If the request takes longer than Client.timeout.

    Returns:
        Response[CreditorBankAccountListResponse]
    """

    kwargs = _get_kwargs(
        after=after,
        before=before,
        created_at_gt=created_at_gt,
        created_at_gte=created_at_gte,
        created_at_lt=created_at_lt,
        created_at_lte=created_at_lte,
        creditor=creditor,
        enabled=enabled,
        limit=limit,
    )

    response = client.get_httpx_client().request(
        **kwargs,
    )

    return _build_response(client=client, response=response)


def sync(
    *,
    client: AuthenticatedClient,
    after: Union[Unset, str] = UNSET,
    before: Union[Unset, str] = UNSET,
    created_at_gt: Union[Unset, datetime.datetime] = UNSET,
    created_at_gte: Union[Unset, datetime.datetime] = UNSET,
    created_at_lt: Union[Unset, datetime.datetime] = UNSET,
    created_at_lte: Union[Unset, datetime.datetime] = UNSET,
    creditor: Union[Unset, str] = UNSET,
    enabled: Union[Unset, bool] = UNSET,
    limit: Union[Unset, int] = UNSET,
) -> Optional[CreditorBankAccountListResponse]:
    """Creditor Bank Accounts - List

     Returns a cursor-paginated list of your creditor bank accounts.

    Returns:
        CreditorBankAccountListResponse
    """

    return sync_detailed(
        client=client,
        after=after,
        before=before,
        created_at_gt=created_at_gt,
        created_at_gte=created_at_gte,
        created_at_lt=created_at_lt,
        created_at_lte=created_at_lte,
        creditor=creditor,
        enabled=enabled,
        limit=limit,
    ).parsed


async def asyncio_detailed(
    *,
    client: AuthenticatedClient,
    after: Union[Unset, str] = UNSET,
    before: Union[Unset, str] = UNSET,
    created_at_gt: Union[Unset, datetime.datetime] = UNSET,
    created_at_gte: Union[Unset, datetime.datetime] = UNSET,
    created_at_lt: Union[Unset, datetime.datetime] = UNSET,
    created_at_lte: Union[Unset, datetime.datetime] = UNSET,
    creditor: Union[Unset, str] = UNSET,
    enabled: Union[Unset, bool] = UNSET,
    limit: Union[Unset, int] = UNSET,
) -> Response[CreditorBankAccountListResponse]:
    kwargs = _get_kwargs(
        after=after,
        before=before,
        created_at_gt=created_at_gt,
        created_at_gte=created_at_gte,
        created_at_lt=created_at_lt,
        created_at_lte=created_at_lte,
        creditor=creditor,
        enabled=enabled,
        limit=limit,
    )

    response = await client.get_async_httpx_client().request(**kwargs)

    return _build_response(client=client, response=response)


async def asyncio(
    *,
    client: AuthenticatedClient,
    after: Union[Unset, str] = UNSET,
    before: Union[Unset, str] = UNSET,
    created_at_gt: Union[Unset, datetime.datetime] = UNSET,
    created_at_gte: Union[Unset, datetime.datetime] = UNSET,
    created_at_lt: Union[Unset, datetime.datetime] = UNSET,
    created_at_lte: Union[Unset, datetime.datetime] = UNSET,
    creditor: Union[Unset, str] = UNSET,
    enabled: Union[Unset, bool] = UNSET,
    limit: Union[Unset, int] = UNSET,
) -> Optional[CreditorBankAccountListResponse]:
    return (
        await asyncio_detailed(
            client=client,
            after=after,
            before=before,
            created_at_gt=created_at_gt,
            created_at_gte=created_at_gte,
            created_at_lt=created_at_lt,
            created_at_lte=created_at_lte,
            creditor=creditor,
            enabled=enabled,
            limit=limit,
        )
    ).parsed
