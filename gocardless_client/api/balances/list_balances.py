from http import HTTPStatus
from typing import Any, Optional, Union

import httpx

from ... import errors
from ...client import AuthenticatedClient
from ...models.balance_list_response import BalanceListResponse
from ...types import UNSET, Response, Unset


def _get_kwargs(
    *,
    creditor: str,
    after: Union[Unset, str] = UNSET,
    before: Union[Unset, str] = UNSET,
    limit: Union[Unset, int] = UNSET,
) -> dict[str, Any]:
    params: dict[str, Any] = {}

    params["creditor"] = creditor

    params["after"] = after

    params["before"] = before

    params["limit"] = limit

    params = {k: v for k, v in params.items() if v is not UNSET and v is not None}

    _kwargs: dict[str, Any] = {
        "method": "get",
        "url": "/balances",
        "params": params,
    }

    return _kwargs


def _parse_response(*, client: AuthenticatedClient, response: httpx.Response) -> Optional[BalanceListResponse]:
    if response.status_code == 200:
        response_200 = BalanceListResponse.from_dict(response.json())

        return response_200
    if response.status_code >= 400:
        raise errors.api_error_from_response(response)
    if client.raise_on_unexpected_status:
        raise errors.UnexpectedStatus(response.status_code, response.content)
    else:
        return None


def _build_response(*, client: AuthenticatedClient, response: httpx.Response) -> Response[BalanceListResponse]:
    return Response(
        status_code=HTTPStatus(response.status_code),
        content=response.content,
        headers=response.headers,
        parsed=_parse_response(client=client, response=response),
    )


def sync_detailed(
    *,
    client: AuthenticatedClient,
    creditor: str,
    after: Union[Unset, str] = UNSET,
    before: Union[Unset, str] = UNSET,
    limit: Union[Unset, int] = UNSET,
) -> Response[BalanceListResponse]:
    """Balances - List

     Returns a cursor-paginated list of balances for a given creditor. This endpoint is rate limited to 60
    requests per minute.

    Args:
        creditor (str): ID of a creditor.
        after (Union[Unset, str]): Cursor pointing to the start of the desired set.
        before (Union[Unset, str]): Cursor pointing to the end of the desired set.
        limit (Union[Unset, int]): Number of records to return.

    Raises:
        errors.GoCardlessApiError: If the server returns an error response.
        errors.UnexpectedStatus: If the server returns an undocumented status code and Client.raise_on_unexpected_status is True.
        httpx.TimeoutException: If the request takes longer than Client.timeout.

    Returns:
        Response[BalanceListResponse]
    """

    kwargs = _get_kwargs(
        creditor=creditor,
        after=after,
        before=before,
        limit=limit,
    )

    response = client.get_httpx_client().request(
        **kwargs,
    )

    return _build_response(client=client, response=response)


def sync(
    *,
    client: AuthenticatedClient,
    creditor: str,
    after: Union[Unset, str] = UNSET,
    before: Union[Unset, str] = UNSET,
    limit: Union[Unset, int] = UNSET,
) -> Optional[BalanceListResponse]:
    """Balances - List

     Returns a cursor-paginated list of balances for a given creditor.

    Args:
        creditor (str): ID of a creditor.
        after (Union[Unset, str]): Cursor pointing to the start of the desired set.
        before (Union[Unset, str]): Cursor pointing to the end of the desired set.
        limit (Union[Unset, int]): Number of records to return.

    Raises:
        errors.GoCardlessApiError: If the server returns an error response.
        errors.UnexpectedStatus: If the server returns an undocumented status code and Client.raise_on_unexpected_status is True.
        httpx.TimeoutException: If the request takes longer than Client.timeout.

    Returns:
        BalanceListResponse
    """

    return sync_detailed(
        client=client,
        creditor=creditor,
        after=after,
        before=before,
        limit=limit,
    ).parsed


async def asyncio_detailed(
    *,
    client: AuthenticatedClient,
    creditor: str,
    after: Union[Unset, str] = UNSET,
    before: Union[Unset, str] = UNSET,
    limit: Union[Unset, int] = UNSET,
) -> Response[BalanceListResponse]:
    """Balances - List

     Returns a cursor-paginated list of balances for a given creditor.

    Args:
        creditor (str): ID of a creditor.
        after (Union[Unset, str]): Cursor pointing to the start of the desired set.
        before (Union[Unset, str]): Cursor pointing to the end of the desired set.
        limit (Union[Unset, int]): Number of records to return.

    Raises:
        errors.GoCardlessApiError: If the server returns an error response.
        errors.UnexpectedStatus: If the server returns an undocumented status code and Client.raise_on_unexpected_status is True.
        httpx.TimeoutException: If the request takes longer than Client.timeout.

    Returns:
        Response[BalanceListResponse]
    """

    kwargs = _get_kwargs(
        creditor=creditor,
        after=after,
        before=before,
        limit=limit,
    )

    response = await client.get_async_httpx_client().request(**kwargs)

    return _build_response(client=client, response=response)


async def asyncio(
    *,
    client: AuthenticatedClient,
    creditor: str,
    after: Union[Unset, str] = UNSET,
    before: Union[Unset, str] = UNSET,
    limit: Union[Unset, int] = UNSET,
) -> Optional[BalanceListResponse]:
    """Balances - List

     Returns a cursor-paginated list of balances for a given creditor.

    Args:
        creditor (str): ID of a creditor.
        after (Union[Unset, str]): Cursor pointing to the start of the desired set.
        before (Union[Unset, str]): Cursor pointing to the end of the desired set.
        limit (Union[Unset, int]): Number of records to return.

    Raises:
        errors.GoCardlessApiError: If the server returns an error response.
        errors.UnexpectedStatus: If the server returns an undocumented status code and Client.raise_on_unexpected_status is True.
        httpx.TimeoutException: If the request takes longer than Client.timeout.

    Returns:
        BalanceListResponse
    """

    return (
        await asyncio_detailed(
            client=client,
            creditor=creditor,
            after=after,
            before=before,
            limit=limit,
        )
    ).parsed
