import datetime
from http import HTTPStatus
from typing import Any, Optional, Union

import httpx

from ... import errors
from ...client import AuthenticatedClient
from ...models.payout_currency import PayoutCurrency
from ...models.payout_list_response import PayoutListResponse
from ...models.payout_payout_type import PayoutPayoutType
from ...models.payout_status import PayoutStatus
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
    creditor_bank_account: Union[Unset, str] = UNSET,
    currency: Union[Unset, PayoutCurrency] = UNSET,
    limit: Union[Unset, int] = UNSET,
    payout_type: Union[Unset, PayoutPayoutType] = UNSET,
    reference: Union[Unset, str] = UNSET,
    status: Union[Unset, PayoutStatus] = UNSET,
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

    params["creditor_bank_account"] = creditor_bank_account

    json_currency: Union[Unset, str] = UNSET
    if not isinstance(currency, Unset):
        json_currency = PayoutCurrency.to_wire(currency)

    params["currency"] = json_currency

    params["limit"] = limit

    json_payout_type: Union[Unset, str] = UNSET
    if not isinstance(payout_type, Unset):
        json_payout_type = PayoutPayoutType.to_wire(payout_type)

    params["payout_type"] = json_payout_type

    params["reference"] = reference

    json_status: Union[Unset, str] = UNSET
    if not isinstance(status, Unset):
        json_status = PayoutStatus.to_wire(status)

    params["status"] = json_status

    params = {k: v for k, v in params.items() if v is not UNSET and v is not None}

    _kwargs: dict[str, Any] = {
        "method": "get",
        "url": "/payouts",
        "params": params,
    }

    return _kwargs


def _parse_response(*, client: AuthenticatedClient, response: httpx.Response) -> Optional[PayoutListResponse]:
    if response.status_code == 200:
        response_200 = PayoutListResponse.from_dict(response.json())

        return response_200
    if response.status_code >= 400:
        raise errors.api_error_from_response(response)
    if client.raise_on_unexpected_status:
        raise errors.UnexpectedStatus(response.status_code, response.content)
    else:
        return None


def _build_response(*, client: AuthenticatedClient, response: httpx.Response) -> Response[PayoutListResponse]:
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
    creditor_bank_account: Union[Unset, str] = UNSET,
    currency: Union[Unset, PayoutCurrency] = UNSET,
    limit: Union[Unset, int] = UNSET,
    payout_type: Union[Unset, PayoutPayoutType] = UNSET,
    reference: Union[Unset, str] = UNSET,
    status: Union[Unset, PayoutStatus] = UNSET,
) -> Response[PayoutListResponse]:
    """Payouts - List

     Returns a cursor-paginated list of your payouts.

    Args:
        after (Union[Unset, str]): Cursor pointing to the start of the desired set.
        before (Union[Unset, str]): Cursor pointing to the end of the desired set.
        created_at_gt (Union[Unset, datetime.datetime]): Limit to records created after the given time.
        created_at_gte (Union[Unset, datetime.datetime]): Limit to records created on or after the given time.
        created_at_lt (Union[Unset, datetime.datetime]): Limit to records created before the given time.
        created_at_lte (Union[Unset, datetime.datetime]): Limit to records created on or before the given time.
        creditor (Union[Unset, str]): Unique identifier, beginning with "CR".
        creditor_bank_account (Union[Unset, str]): Unique identifier, beginning with "BA".
        currency (Union[Unset, PayoutCurrency]): ISO 4217 currency code.
        limit (Union[Unset, int]): Number of records to return.
        payout_type (Union[Unset, PayoutPayoutType]): Whether a payout contains merchant revenue or partner fees.
        reference (Union[Unset, str]): Reference which appears on the creditor's bank statement.
        status (Union[Unset, PayoutStatus]): `pending`, `paid` or `bounced`.

    Raises:
        errors.GoCardlessApiError: If the server returns an error response.
        errors.InvalidEnumValue: If an enum filter is the UNKNOWN sentinel.
        errors.UnexpectedStatus: If the server returns an undocumented status code and Client.raise_on_unexpected_status is True.
        httpx.TimeoutException: If the request takes longer than Client.timeout.

    Returns:
        Response[PayoutListResponse]
    """

    kwargs = _get_kwargs(
        after=after,
        before=before,
        created_at_gt=created_at_gt,
        created_at_gte=created_at_gte,
        created_at_lt=created_at_lt,
        created_at_lte=created_at_lte,
        creditor=creditor,
        creditor_bank_account=creditor_bank_account,
        currency=currency,
        limit=limit,
        payout_type=payout_type,
        reference=reference,
        status=status,
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
    creditor_bank_account: Union[Unset, str] = UNSET,
    currency: Union[Unset, PayoutCurrency] = UNSET,
    limit: Union[Unset, int] = UNSET,
    payout_type: Union[Unset, PayoutPayoutType] = UNSET,
    reference: Union[Unset, str] = UNSET,
    status: Union[Unset, PayoutStatus] = UNSET,
) -> Optional[PayoutListResponse]:
    """Payouts - List

     Returns a cursor-paginated list of your payouts. See sync_detailed for the arguments.

    Returns:
        PayoutListResponse
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
        creditor_bank_account=creditor_bank_account,
        currency=currency,
        limit=limit,
        payout_type=payout_type,
        reference=reference,
        status=status,
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
    creditor_bank_account: Union[Unset, str] = UNSET,
    currency: Union[Unset, PayoutCurrency] = UNSET,
    limit: Union[Unset, int] = UNSET,
    payout_type: Union[Unset, PayoutPayoutType] = UNSET,
    reference: Union[Unset, str] = UNSET,
    status: Union[Unset, PayoutStatus] = UNSET,
) -> Response[PayoutListResponse]:
    """Payouts - List

     Returns a cursor-paginated list of your payouts. See sync_detailed for the arguments.

    Returns:
        Response[PayoutListResponse]
    """

    kwargs = _get_kwargs(
        after=after,
        before=before,
        created_at_gt=created_at_gt,
        created_at_gte=created_at_gte,
        created_at_lt=created_at_lt,
        created_at_lte=created_at_lte,
        creditor=creditor,
        creditor_bank_account=creditor_bank_account,
        currency=currency,
        limit=limit,
        payout_type=payout_type,
        reference=reference,
        status=status,
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
    creditor_bank_account: Union[Unset, str] = UNSET,
    currency: Union[Unset, PayoutCurrency] = UNSET,
    limit: Union[Unset, int] = UNSET,
    payout_type: Union[Unset, PayoutPayoutType] = UNSET,
    reference: Union[Unset, str] = UNSET,
    status: Union[Unset, PayoutStatus] = UNSET,
) -> Optional[PayoutListResponse]:
    """Payouts - List

     Returns a cursor-paginated list of your payouts. See sync_detailed for the arguments.

    Returns:
        PayoutListResponse
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
            creditor=creditor,
            creditor_bank_account=creditor_bank_account,
            currency=currency,
            limit=limit,
            payout_type=payout_type,
            reference=reference,
            status=status,
        )
    ).parsed
