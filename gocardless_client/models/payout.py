import datetime
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeVar, Union, cast

from attrs import define as _attrs_define
from attrs import field as _attrs_field
from dateutil.parser import isoparse

from ..models.metadata import Metadata
from ..models.payout_currency import PayoutCurrency
from ..models.payout_payout_type import PayoutPayoutType
from ..models.payout_status import PayoutStatus
from ..types import UNSET, Unset

if TYPE_CHECKING:
    from ..models.payout_fx import PayoutFx
    from ..models.payout_links import PayoutLinks


T = TypeVar("T", bound="Payout")


@_attrs_define
class Payout:
    """Payouts represent transfers from GoCardless to a creditor. Each payout contains the funds collected from one or
    many payments. Payouts are created automatically after a payment has been successfully collected.

        Attributes:
            amount (Union[Unset, int]): Amount in minor unit (e.g. pence in GBP, cents in EUR).
            arrival_date (Union[None, Unset, datetime.date]): Date the payout is due to arrive in the creditor's bank
                account. `None` while the payout hasn't been paid yet.
            created_at (Union[Unset, datetime.datetime]): Fixed timestamp, recording when this resource was created.
            currency (Union[PayoutCurrency, None, Unset]): ISO 4217 currency code.
            deducted_fees (Union[Unset, int]): Fees that have already been deducted from the payout amount in minor
                unit. Can be negative when transaction fees are refunded.
            fx (Union[Unset, PayoutFx]): Foreign exchange details of the payout.
            id (Union[Unset, str]): Unique identifier, beginning with "PO".
            links (Union[Unset, PayoutLinks]): Resources linked to this Payout
            metadata (Union[Unset, Metadata]): Key-value store of custom data. Up to 3 keys are permitted, with key
                names up to 50 characters and values up to 500 characters.
            payout_type (Union[PayoutPayoutType, None, Unset]): Whether a payout contains merchant revenue or partner fees.
            reference (Union[Unset, str]): Reference which appears on the creditor's bank statement.
            status (Union[PayoutStatus, None, Unset]): `pending`, `paid` or `bounced`.
            tax_currency (Union[None, Unset, str]): ISO 4217 code for the currency in which tax is paid out to the tax
                authorities of your tax jurisdiction. `None` if tax is not applicable.
    """

    amount: Union[Unset, int] = UNSET
    arrival_date: Union[None, Unset, datetime.date] = UNSET
    created_at: Union[Unset, datetime.datetime] = UNSET
    currency: Union[PayoutCurrency, None, Unset] = UNSET
    deducted_fees: Union[Unset, int] = UNSET
    fx: Union[Unset, "PayoutFx"] = UNSET
    id: Union[Unset, str] = UNSET
    links: Union[Unset, "PayoutLinks"] = UNSET
    metadata: Union[Unset, Metadata] = UNSET
    payout_type: Union[PayoutPayoutType, None, Unset] = UNSET
    reference: Union[Unset, str] = UNSET
    status: Union[PayoutStatus, None, Unset] = UNSET
    tax_currency: Union[None, Unset, str] = UNSET
    additional_properties: dict[str, Any] = _attrs_field(init=False, factory=dict)

    def to_dict(self) -> dict[str, Any]:
        amount = self.amount

        arrival_date: Union[None, Unset, str]
        if isinstance(self.arrival_date, Unset):
            arrival_date = UNSET
        elif isinstance(self.arrival_date, datetime.date):
            arrival_date = self.arrival_date.isoformat()
        else:
            arrival_date = self.arrival_date

        created_at: Union[Unset, str] = UNSET
        if not isinstance(self.created_at, Unset):
            created_at = self.created_at.isoformat()

        currency: Union[None, Unset, str]
        if isinstance(self.currency, Unset):
            currency = UNSET
        elif isinstance(self.currency, PayoutCurrency):
            currency = self.currency.value
        else:
            currency = self.currency

        deducted_fees = self.deducted_fees

        fx: Union[Unset, dict[str, Any]] = UNSET
        if not isinstance(self.fx, Unset):
            fx = self.fx.to_dict()

        id = self.id

        links: Union[Unset, dict[str, Any]] = UNSET
        if not isinstance(self.links, Unset):
            links = self.links.to_dict()

        metadata: Union[Unset, dict[str, Any]] = UNSET
        if not isinstance(self.metadata, Unset):
            metadata = self.metadata.to_dict()

        payout_type: Union[None, Unset, str]
        if isinstance(self.payout_type, Unset):
            payout_type = UNSET
        elif isinstance(self.payout_type, PayoutPayoutType):
            payout_type = self.payout_type.value
        else:
            payout_type = self.payout_type

        reference = self.reference

        status: Union[None, Unset, str]
        if isinstance(self.status, Unset):
            status = UNSET
        elif isinstance(self.status, PayoutStatus):
            status = self.status.value
        else:
            status = self.status

        tax_currency: Union[None, Unset, str]
        if isinstance(self.tax_currency, Unset):
            tax_currency = UNSET
        else:
            tax_currency = self.tax_currency

        field_dict: dict[str, Any] = {}
        field_dict.update(self.additional_properties)
        field_dict.update({})
        if amount is not UNSET:
            field_dict["amount"] = amount
        if arrival_date is not UNSET:
            field_dict["arrival_date"] = arrival_date
        if created_at is not UNSET:
            field_dict["created_at"] = created_at
        if currency is not UNSET:
            field_dict["currency"] = currency
        if deducted_fees is not UNSET:
            field_dict["deducted_fees"] = deducted_fees
        if fx is not UNSET:
            field_dict["fx"] = fx
        if id is not UNSET:
            field_dict["id"] = id
        if links is not UNSET:
            field_dict["links"] = links
        if metadata is not UNSET:
            field_dict["metadata"] = metadata
        if payout_type is not UNSET:
            field_dict["payout_type"] = payout_type
        if reference is not UNSET:
            field_dict["reference"] = reference
        if status is not UNSET:
            field_dict["status"] = status
        if tax_currency is not UNSET:
            field_dict["tax_currency"] = tax_currency

        return field_dict

    @classmethod
    def from_dict(cls: type[T], src_dict: Mapping[str, Any]) -> T:
        from ..models.payout_fx import PayoutFx
        from ..models.payout_links import PayoutLinks

        d = dict(src_dict)
        amount = d.pop("amount", UNSET)

        def _parse_arrival_date(data: object) -> Union[None, Unset, datetime.date]:
            if data is None:
                return data
            if isinstance(data, Unset):
                return data
            if not isinstance(data, str):
                raise TypeError()
            return isoparse(data).date()

        arrival_date = _parse_arrival_date(d.pop("arrival_date", UNSET))

        _created_at = d.pop("created_at", UNSET)
        created_at: Union[Unset, datetime.datetime]
        if isinstance(_created_at, Unset):
            created_at = UNSET
        else:
            created_at = isoparse(_created_at)

        def _parse_currency(data: object) -> Union[None, PayoutCurrency, Unset]:
            if data is None:
                return data
            if isinstance(data, Unset):
                return data
            return PayoutCurrency.from_wire(data)

        currency = _parse_currency(d.pop("currency", UNSET))

        deducted_fees = d.pop("deducted_fees", UNSET)

        _fx = d.pop("fx", UNSET)
        fx: Union[Unset, PayoutFx]
        if isinstance(_fx, Unset):
            fx = UNSET
        else:
            fx = PayoutFx.from_dict(_fx)

        id = d.pop("id", UNSET)

        _links = d.pop("links", UNSET)
        links: Union[Unset, PayoutLinks]
        if isinstance(_links, Unset):
            links = UNSET
        else:
            links = PayoutLinks.from_dict(_links)

        _metadata = d.pop("metadata", UNSET)
        metadata: Union[Unset, Metadata]
        if isinstance(_metadata, Unset):
            metadata = UNSET
        else:
            metadata = Metadata.from_dict(_metadata)

        def _parse_payout_type(data: object) -> Union[None, PayoutPayoutType, Unset]:
            if data is None:
                return data
            if isinstance(data, Unset):
                return data
            return PayoutPayoutType.from_wire(data)

        payout_type = _parse_payout_type(d.pop("payout_type", UNSET))

        reference = d.pop("reference", UNSET)

        def _parse_status(data: object) -> Union[None, PayoutStatus, Unset]:
            if data is None:
                return data
            if isinstance(data, Unset):
                return data
            return PayoutStatus.from_wire(data)

        status = _parse_status(d.pop("status", UNSET))

        def _parse_tax_currency(data: object) -> Union[None, Unset, str]:
            if data is None:
                return data
            if isinstance(data, Unset):
                return data
            return cast(Union[None, Unset, str], data)

        tax_currency = _parse_tax_currency(d.pop("tax_currency", UNSET))

        payout = cls(
            amount=amount,
            arrival_date=arrival_date,
            created_at=created_at,
            currency=currency,
            deducted_fees=deducted_fees,
            fx=fx,
            id=id,
            links=links,
            metadata=metadata,
            payout_type=payout_type,
            reference=reference,
            status=status,
            tax_currency=tax_currency,
        )

        payout.additional_properties = d
        return payout

    @property
    def additional_keys(self) -> list[str]:
        return list(self.additional_properties.keys())

    def __getitem__(self, key: str) -> Any:
        return self.additional_properties[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self.additional_properties[key] = value

    def __delitem__(self, key: str) -> None:
        del self.additional_properties[key]

    def __contains__(self, key: str) -> bool:
        return key in self.additional_properties
