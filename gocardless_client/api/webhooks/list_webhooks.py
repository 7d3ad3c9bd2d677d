import datetime
from http import HTTPStatus
from typing import Any, Optional, Union

import httpx

from ... import errors
from ...client import AuthenticatedClient
from ...models.webhook_list_response import WebhookListResponse
from ...types import UNSET, Response, Unset


def _get_kwargs(
    *,
    after: Union[Unset, str] = UNSET,
    before: Union[Unset, str] = UNSET,
    created_at_gt: Union[Unset, datetime.datetime] = UNSET,
    created_at_gte: Union[Unset, datetime.datetime] = UNSET,
    created_at_lt: Union[Unset, datetime.datetime] = UNSET,
    created_at_lte: Union[Unset, datetime.datetime] = UNSET,
    is_test: Union[Unset, bool] = UNSET,
    limit: Union[Unset, int] = UNSET,
    successful: Union[Unset, bool] = UNSET,
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

    json_is_test: Union[Unset, str] = UNSET
    if not isinstance(is_test, Unset):
        json_is_test = "true" if is_test else "false"

    params["is_test"] = json_is_test

    params["limit"] = limit

    json_successful: Union[Unset, str] = UNSET
    if not isinstance(successful, Unset):
        json_successful = "true" if successful else "false"

    params["successful"] = json_successful

    params = {k: v for k, v in params.items() if v is not UNSET and v is not None}

    _kwargs: dict[str, Any] = {
        "method": "get",
        "url": "/webhooks",
        "params": params,
    }

    return _kwargs


def _parse_response(*, client: AuthenticatedClient, response: httpx.Response) -> Optional[WebhookListResponse]:
    if response.status_code == 200:
        response_200 = WebhookListResponse.from_dict(response.json())

        return response_200
    if response.status_code >= 400:
        raise errors.api_error_from_response(response)
    if client.raise_on_unexpected_status:
        raise errors.UnexpectedStatus(response.status_code, response.content)
    else:
        return None


def _build_response(*, client: AuthenticatedClient, response: httpx.Response) -> Response[WebhookListResponse]:
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
    is_test: Union[Unset, bool] = UNSET,
    limit: Union[Unset, int] = UNSET,
    successful: Union[Unset, bool] = UNSET,
) -> Response[WebhookListResponse]:
    """Webhooks - List

     Returns a cursor-paginated list of your webhooks.

    Args:
        after (Union[Unset, str]): Cursor pointing to the start of the desired set.
        before (Union[Unset, str]): Cursor pointing to the end of the desired set.
        created_at_gt (Union[Unset, datetime.datetime]): Limit to records created after the given time.
        created_at_gte (Union[Unset, datetime.datetime]): Limit to records created on or after the given time.
        created_at_lt (Union[Unset, datetime.datetime]): Limit to records created before the given time.
        created_at_lte (Union[Unset, datetime.datetime]): Limit to records created on or before the given time.
        is_test (Union[Unset, bool]): Show only test/non test webhooks.
        limit (Union[Unset, int]): Number of records to return.
        successful (Union[Unset, bool]): Show only successful/failed webhooks.

    Raises:
        errors.GoCardlessApiError: If the server returns an error response.
        errors.UnexpectedStatus: If the server returns an undocumented status code and Client.raise_on_unexpected_status is True.
        httpx.TimeoutException: If the request takes longer than Client.timeout.

    Returns:
        Response[WebhookListResponse]
    """

    kwargs = _get_kwargs(
        after=after,
        before=before,
        created_at_gt=created_at_gt,
        created_at_gte=created_at_gte,
        created_at_lt=created_at_lt,
        created_at_lte=created_at_lte,
        is_test=is_test,
        limit=limit,
        successful=successful,
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
    is_test: Union[Unset, bool] = UNSET,
    limit: Union[Unset, int] = UNSET,
    successful: Union[Unset, bool] = UNSET,
) -> Optional[WebhookListResponse]:
    """Webhooks - List

     Returns a cursor-paginated list of your webhooks.

    Returns:
        WebhookListResponse
    """

    return sync_detailed(
        client=client,
        after=after,
        before=before,
        created_at_gt=created_at_gt,
        created_at_gte=created_at_gte,
        created_at_lt=created_at_lt,
        created_at_lte=created_at_lte,
        is_test=is_test,
        limit=limit,
        successful=successful,
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
    is_test: Union[Unset, bool] = UNSET,
    limit: Union[Unset, int] = UNSET,
    successful: Union[Unset, bool] = UNSET,
) -> Response[WebhookListResponse]:
    """Webhooks - List

     Returns a cursor-paginated list of your webhooks.

    Returns:
        Response[WebhookListResponse]
    """

    kwargs = _get_kwargs(
        after=after,
        before=before,
        created_at_gt=created_at_gt,
        created_at_gte=created_at_gte,
        created_at_lt=created_at_lt,
        created_at_lte=created_at_lte,
        is_test=is_test,
        limit=limit,
        successful=successful,
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
    is_test: Union[Unset, bool] = UNSET,
    limit: Union[Unset, int] = UNSET,
    successful: Union[Unset, bool] = UNSET,
) -> Optional[WebhookListResponse]:
    """Webhooks - List

     Returns a cursor-paginated list of your webhooks.

    Returns:
        WebhookListResponse
    """

    return (
        await asyncio_detailed(
            client=client,
            after=after,
            before=before,
            created_at_gt=created_at_gt,
            created_at_gte=created_at_gte,
            created_at_lt=created_at_lt,
            created_at_lte=created_at_lte,
            is_test=is_test,
            limit=limit,
            successful=successful,
        )
    ).parsed
