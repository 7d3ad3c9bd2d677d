from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeVar

from attrs import define as _attrs_define
from attrs import field as _attrs_field

if TYPE_CHECKING:
    from ..models.creditor_bank_account import CreditorBankAccount


T = TypeVar("T", bound="CreditorBankAccountResponse")


@_attrs_define
class CreditorBankAccountResponse:
    """
    Attributes:
        creditor_bank_accounts (CreditorBankAccount):
    """

    creditor_bank_accounts: "CreditorBankAccount"
    additional_properties: dict[str, Any] = _attrs_field(init=False, factory=dict)

    def to_dict(self) -> dict[str, Any]:
        creditor_bank_accounts = self.creditor_bank_accounts.to_dict()

        field_dict: dict[str, Any] = {}
        field_dict.update(self.additional_properties)
        field_dict.update(
            {
                "creditor_bank_accounts": creditor_bank_accounts,
            }
        )

        return field_dict

    @classmethod
    def from_dict(cls: type[T], src_dict: Mapping[str, Any]) -> T:
        from ..models.creditor_bank_account import CreditorBankAccount

        d = dict(src_dict)
        creditor_bank_accounts = CreditorBankAccount.from_dict(d.pop("creditor_bank_accounts"))

        creditor_bank_account_response = cls(
            creditor_bank_accounts=creditor_bank_accounts,
        )

        creditor_bank_account_response.additional_properties = d
        return creditor_bank_account_response

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
