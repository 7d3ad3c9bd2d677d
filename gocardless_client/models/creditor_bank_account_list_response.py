from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeVar

from attrs import define as _attrs_define
from attrs import field as _attrs_field

if TYPE_CHECKING:
    from ..models.creditor_bank_account import CreditorBankAccount
    from ..models.list_meta import ListMeta


T = TypeVar("T", bound="CreditorBankAccountListResponse")


@_attrs_define
class CreditorBankAccountListResponse:
    """
    Attributes:
        creditor_bank_accounts (list['CreditorBankAccount']):
        meta (ListMeta): Pagination details of a cursor-paginated list
    """

    creditor_bank_accounts: list["CreditorBankAccount"]
    meta: "ListMeta"
    additional_properties: dict[str, Any] = _attrs_field(init=False, factory=dict)

    def to_dict(self) -> dict[str, Any]:
        creditor_bank_accounts = []
        for creditor_bank_accounts_item_data in self.creditor_bank_accounts:
            creditor_bank_accounts_item = creditor_bank_accounts_item_data.to_dict()
            creditor_bank_accounts.append(creditor_bank_accounts_item)

        meta = self.meta.to_dict()

        field_dict: dict[str, Any] = {}
        field_dict.update(self.additional_properties)
        field_dict.update(
            {
                "creditor_bank_accounts": creditor_bank_accounts,
                "meta": meta,
            }
        )

        return field_dict

    @classmethod
    def from_dict(cls: type[T], src_dict: Mapping[str, Any]) -> T:
        from ..models.creditor_bank_account import CreditorBankAccount
        from ..models.list_meta import ListMeta

        d = dict(src_dict)
        creditor_bank_accounts = []
        _creditor_bank_accounts = d.pop("creditor_bank_accounts")
        for creditor_bank_accounts_item_data in _creditor_bank_accounts:
            creditor_bank_accounts_item = CreditorBankAccount.from_dict(creditor_bank_accounts_item_data)

            creditor_bank_accounts.append(creditor_bank_accounts_item)

        meta = ListMeta.from_dict(d.pop("meta"))

        creditor_bank_account_list_response = cls(
            creditor_bank_accounts=creditor_bank_accounts,
            meta=meta,
        )

        creditor_bank_account_list_response.additional_properties = d
        return creditor_bank_account_list_response

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
