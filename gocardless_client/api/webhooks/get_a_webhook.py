from http import HTTPStatus
from typing import Any, Optional

import httpx

from ... import errors
from ...client import AuthenticatedClient
from ...models.webhook_response import WebhookResponse
from ...types import Response


def _get_kwargs(
    identity: str,
) -> dict[str, Any]:
    _kwargs: dict[str, Any] = {
        "method": "get",
        "url": f"/webhooks/{identity}",
    }

    return _kwargs


def _parse_response(*, client: AuthenticatedClient, response: httpx.Response) -> Optional[WebhookResponse]:
    if response.status_code == 200:
        response_200 = WebhookResponse.from_dict(response.json())

        return response_200
    if response.status_code >= 400:
        raise errors.api_error_from_response(response)
    if client.raise_on_unexpected_status:
        raise errors.UnexpectedStatus(response.status_code, response.content)
    else:
        return None


def _build_response(*, client: AuthenticatedClient, response: httpx.Response) -> Response[WebhookResponse]:
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
) -> Response[WebhookResponse]:
    """Webhooks - Get

     Retrieves the details of an existing webhook.

    Args:
        identity (str): Unique identifier, beginning with "WB".

    Raises:
        errors.GoCardlessApiError: If the server returns an error response.
        errors.UnexpectedStatus: If the server returns an undocumented status code and Client.raise_on_unexpected_status is True.
        httpx.TimeoutException: If the request takes longer than Client.timeout.

    Returns:
        Response[WebhookResponse]
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
) -> Optional[WebhookResponse]:
    """Webhooks - Get

     Retrieves the details of an existing webhook.

    Returns:
        WebhookResponse
    """

    return sync_detailed(
        identity=identity,
        client=client,
    ).parsed


async def asyncio_detailed(
    identity: str,
    *,
    client: AuthenticatedClient,
) -> Response[WebhookResponse]:
    kwargs = _get_kwargs(
        identity=identity,
    )

    response = await client.get_async_httpx_client().request(**kwargs)

    return _build_response(client=client, response=response)


async def asyncio(
    identity: str,
    *,
    client: AuthenticatedClient,
) -> Optional[WebhookResponse]:
    return (
        await asyncio_detailed(
            identity=identity,
            client=client,
        )
    ).parsed
