from http import HTTPStatus
from typing import Any, Optional

import httpx

from ... import errors
from ...client import AuthenticatedClient
from ...models.payout_response import PayoutResponse
from ...types import Response


def _get_kwargs(
    identity: str,
) -> dict[str, Any]:
    _kwargs: dict[str, Any] = {
        "method": "get",
        "url": f"/payouts/{identity}",
    }

    return _kwargs


def _parse_response(*, client: AuthenticatedClient, response: httpx.Response) -> Optional[PayoutResponse]:
    if response.status_code == 200:
        response_200 = PayoutResponse.from_dict(response.json())

        return response_200
    if response.status_code >= 400:
        raise errors.api_error_from_response(response)
    if client.raise_on_unexpected_status:
        raise errors.UnexpectedStatus(response.status_code, response.content)
    else:
        return None


def _build_response(*, client: AuthenticatedClient, response: httpx.Response) -> Response[PayoutResponse]:
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
) -> Response[PayoutResponse]:
    """Payouts - Get

     Retrieves the details of a single payout. For an example of how to reconcile the transactions in a
    payout, see the payouts guide.

    Args:
        identity (str): Unique identifier, beginning with "PO".

    Raises:
        errors.GoCardlessApiError: If the server returns an error response.
        errors.UnexpectedStatus: If the server returns an undocumented status code and Client.raise_on_unexpected_status is True.
        httpx.TimeoutException: If the request takes longer than Client.timeout.

    Returns:
        Response[PayoutResponse]
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
) -> Optional[PayoutResponse]:
    """Payouts - Get

     Retrieves the details of a single payout.

    Args:
        identity (str): Unique identifier, beginning with "PO".

    Returns:
        PayoutResponse
    """

    return sync_detailed(
        identity=identity,
        client=client,
    ).parsed


async def asyncio_detailed(
    identity: str,
    *,
    client: AuthenticatedClient,
) -> Response[PayoutResponse]:
    """Payouts - Get

     Retrieves the details of a single payout.

    Args:
        identity (str): Unique identifier, beginning with "PO".

    Returns:
        Response[PayoutResponse]
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
) -> Optional[PayoutResponse]:
    """Payouts - Get

     Retrieves the details of a single payout.

    Args:
        identity (str): Unique identifier, beginning with "PO".

    Returns:
        PayoutResponse
    """

    return (
        await asyncio_detailed(
            identity=identity,
            client=client,
        )
    ).parsed
