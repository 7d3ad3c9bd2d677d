from collections.abc import Mapping
from typing import Any, TypeVar, Union

from attrs import define as _attrs_define
from attrs import field as _attrs_field

from ..types import UNSET, Unset

T = TypeVar("T", bound="PayoutLinks")


@_attrs_define
class PayoutLinks:
    """Resources linked to this Payout

    Attributes:
        creditor (Union[Unset, str]): ID of the creditor who will receive this payout, i.e. the owner of the
            `creditor_bank_account`.
        creditor_bank_account (Union[Unset, str]): ID of the bank account which this will be sent to.
    """

    creditor: Union[Unset, str] = UNSET
    creditor_bank_account: Union[Unset, str] = UNSET
    additional_properties: dict[str, Any] = _attrs_field(init=False, factory=dict)

    def to_dict(self) -> dict[str, Any]:
        creditor = self.creditor

        creditor_bank_account = self.creditor_bank_account

        field_dict: dict[str, Any] = {}
        field_dict.update(self.additional_properties)
        field_dict.update({})
        if creditor is not UNSET:
            field_dict["creditor"] = creditor
        if creditor_bank_account is not UNSET:
            field_dict["creditor_bank_account"] = creditor_bank_account

        return field_dict

    @classmethod
    def from_dict(cls: type[T], src_dict: Mapping[str, Any]) -> T:
        d = dict(src_dict)
        creditor = d.pop("creditor", UNSET)

        creditor_bank_account = d.pop("creditor_bank_account", UNSET)

        payout_links = cls(
            creditor=creditor,
            creditor_bank_account=creditor_bank_account,
        )

        payout_links.additional_properties = d
        return payout_links

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
