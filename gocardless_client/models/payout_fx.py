from collections.abc import Mapping
from typing import Any, TypeVar, Union, cast

from attrs import define as _attrs_define
from attrs import field as _attrs_field

from ..models.payout_fx_fx_currency import PayoutFxFxCurrency
from ..types import UNSET, Unset

T = TypeVar("T", bound="PayoutFx")


@_attrs_define
class PayoutFx:
    """Foreign exchange details of a payout. Present only if payouts will be (or were) made via foreign exchange.

    Attributes:
        estimated_exchange_rate (Union[None, Unset, str]): Estimated rate that will be used in the foreign exchange of
            the `amount` into the `fx_currency`. Present only before a resource is paid out. Has up to 10 decimal
            places.
        exchange_rate (Union[None, Unset, str]): Rate used in the foreign exchange of the `amount` into the
            `fx_currency`. Present only after a resource is paid out. Has up to 10 decimal places.
        fx_amount (Union[None, Unset, int]): Amount that was paid out in the `fx_currency` after foreign exchange.
        fx_currency (Union[None, PayoutFxFxCurrency, Unset]): Currency in which amounts will be paid out.
    """

    estimated_exchange_rate: Union[None, Unset, str] = UNSET
    exchange_rate: Union[None, Unset, str] = UNSET
    fx_amount: Union[None, Unset, int] = UNSET
    fx_currency: Union[None, PayoutFxFxCurrency, Unset] = UNSET
    additional_properties: dict[str, Any] = _attrs_field(init=False, factory=dict)

    def to_dict(self) -> dict[str, Any]:
        estimated_exchange_rate: Union[None, Unset, str]
        if isinstance(self.estimated_exchange_rate, Unset):
            estimated_exchange_rate = UNSET
        else:
            estimated_exchange_rate = self.estimated_exchange_rate

        exchange_rate: Union[None, Unset, str]
        if isinstance(self.exchange_rate, Unset):
            exchange_rate = UNSET
        else:
            exchange_rate = self.exchange_rate

        fx_amount: Union[None, Unset, int]
        if isinstance(self.fx_amount, Unset):
            fx_amount = UNSET
        else:
            fx_amount = self.fx_amount

        fx_currency: Union[None, Unset, str]
        if isinstance(self.fx_currency, Unset):
            fx_currency = UNSET
        elif isinstance(self.fx_currency, PayoutFxFxCurrency):
            fx_currency = self.fx_currency.value
        else:
            fx_currency = self.fx_currency

        field_dict: dict[str, Any] = {}
        field_dict.update(self.additional_properties)
        field_dict.update({})
        if estimated_exchange_rate is not UNSET:
            field_dict["estimated_exchange_rate"] = estimated_exchange_rate
        if exchange_rate is not UNSET:
            field_dict["exchange_rate"] = exchange_rate
        if fx_amount is not UNSET:
            field_dict["fx_amount"] = fx_amount
        if fx_currency is not UNSET:
            field_dict["fx_currency"] = fx_currency

        return field_dict

    @classmethod
    def from_dict(cls: type[T], src_dict: Mapping[str, Any]) -> T:
        d = dict(src_dict)

        def _parse_estimated_exchange_rate(data: object) -> Union[None, Unset, str]:
            if data is None:
                return data
            if isinstance(data, Unset):
                return data
            return cast(Union[None, Unset, str], data)

        estimated_exchange_rate = _parse_estimated_exchange_rate(d.pop("estimated_exchange_rate", UNSET))

        def _parse_exchange_rate(data: object) -> Union[None, Unset, str]:
            if data is None:
                return data
            if isinstance(data, Unset):
                return data
            return cast(Union[None, Unset, str], data)

        exchange_rate = _parse_exchange_rate(d.pop("exchange_rate", UNSET))

        def _parse_fx_amount(data: object) -> Union[None, Unset, int]:
            if data is None:
                return data
            if isinstance(data, Unset):
                return data
            return cast(Union[None, Unset, int], data)

        fx_amount = _parse_fx_amount(d.pop("fx_amount", UNSET))

        def _parse_fx_currency(data: object) -> Union[None, PayoutFxFxCurrency, Unset]:
            if data is None:
                return data
            if isinstance(data, Unset):
                return data
            return PayoutFxFxCurrency.from_wire(data)

        fx_currency = _parse_fx_currency(d.pop("fx_currency", UNSET))

        payout_fx = cls(
            estimated_exchange_rate=estimated_exchange_rate,
            exchange_rate=exchange_rate,
            fx_amount=fx_amount,
            fx_currency=fx_currency,
        )

        payout_fx.additional_properties = d
        return payout_fx

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
