import datetime
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeVar, Union

from attrs import define as _attrs_define
from attrs import field as _attrs_field
from dateutil.parser import isoparse

from ..models.balance_balance_type import BalanceBalanceType
from ..models.balance_currency import BalanceCurrency
from ..types import UNSET, Unset

if TYPE_CHECKING:
    from ..models.balance_links import BalanceLinks


T = TypeVar("T", bound="Balance")


@_attrs_define
class Balance:
    """Returns the balances for a creditor. These balances are the same as what's shown in the dashboard with one
    exception (mentioned below under balance_type).

    These balances will typically be 3-5 minutes old.

        Attributes:
            amount (Union[Unset, int]): The total amount in the balance, defined as the sum of all debits subtracted
                from the sum of all credits, in the lowest denomination for the currency (e.g. pence in GBP, cents in
                EUR).
            balance_type (Union[BalanceBalanceType, None, Unset]): Type of the balance. `pending_payments_submitted`,
                `confirmed_funds` or `pending_payouts`.
            currency (Union[BalanceCurrency, None, Unset]): ISO 4217 currency code.
            last_updated_at (Union[Unset, datetime.datetime]): Dynamic timestamp recording when this resource was last
                updated.
            links (Union[Unset, BalanceLinks]): Resources linked to this Balance
    """

    amount: Union[Unset, int] = UNSET
    balance_type: Union[BalanceBalanceType, None, Unset] = UNSET
    currency: Union[BalanceCurrency, None, Unset] = UNSET
    last_updated_at: Union[Unset, datetime.datetime] = UNSET
    links: Union[Unset, "BalanceLinks"] = UNSET
    additional_properties: dict[str, Any] = _attrs_field(init=False, factory=dict)

    def to_dict(self) -> dict[str, Any]:
        amount = self.amount

        balance_type: Union[None, Unset, str]
        if isinstance(self.balance_type, Unset):
            balance_type = UNSET
        elif isinstance(self.balance_type, BalanceBalanceType):
            balance_type = self.balance_type.value
        else:
            balance_type = self.balance_type

        currency: Union[None, Unset, str]
        if isinstance(self.currency, Unset):
            currency = UNSET
        elif isinstance(self.currency, BalanceCurrency):
            currency = self.currency.value
        else:
            currency = self.currency

        last_updated_at: Union[Unset, str] = UNSET
        if not isinstance(self.last_updated_at, Unset):
            last_updated_at = self.last_updated_at.isoformat()

        links: Union[Unset, dict[str, Any]] = UNSET
        if not isinstance(self.links, Unset):
            links = self.links.to_dict()

        field_dict: dict[str, Any] = {}
        field_dict.update(self.additional_properties)
        field_dict.update({})
        if amount is not UNSET:
            field_dict["amount"] = amount
        if balance_type is not UNSET:
            field_dict["balance_type"] = balance_type
        if currency is not UNSET:
            field_dict["currency"] = currency
        if last_updated_at is not UNSET:
            field_dict["last_updated_at"] = last_updated_at
        if links is not UNSET:
            field_dict["links"] = links

        return field_dict

    @classmethod
    def from_dict(cls: type[T], src_dict: Mapping[str, Any]) -> T:
        from ..models.balance_links import BalanceLinks

        d = dict(src_dict)
        amount = d.pop("amount", UNSET)

        def _parse_balance_type(data: object) -> Union[None, BalanceBalanceType, Unset]:
            if data is None:
                return data
            if isinstance(data, Unset):
                return data
            return BalanceBalanceType.from_wire(data)

        balance_type = _parse_balance_type(d.pop("balance_type", UNSET))

        def _parse_currency(data: object) -> Union[None, BalanceCurrency, Unset]:
            if data is None:
                return data
            if isinstance(data, Unset):
                return data
            return BalanceCurrency.from_wire(data)

        currency = _parse_currency(d.pop("currency", UNSET))

        _last_updated_at = d.pop("last_updated_at", UNSET)
        last_updated_at: Union[Unset, datetime.datetime]
        if isinstance(_last_updated_at, Unset):
            last_updated_at = UNSET
        else:
            last_updated_at = isoparse(_last_updated_at)

        _links = d.pop("links", UNSET)
        links: Union[Unset, BalanceLinks]
        if isinstance(_links, Unset):
            links = UNSET
        else:
            links = BalanceLinks.from_dict(_links)

        balance = cls(
            amount=amount,
            balance_type=balance_type,
            currency=currency,
            last_updated_at=last_updated_at,
            links=links,
        )

        balance.additional_properties = d
        return balance

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
