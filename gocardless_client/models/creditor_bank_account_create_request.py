from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeVar, Union

from attrs import define as _attrs_define
from attrs import field as _attrs_field

from ..models.creditor_bank_account_account_type import CreditorBankAccountAccountType
from ..models.metadata import Metadata
from ..types import UNSET, Unset

if TYPE_CHECKING:
    from ..models.creditor_bank_account_links import CreditorBankAccountLinks


T = TypeVar("T", bound="CreditorBankAccountCreateRequest")


@_attrs_define
class CreditorBankAccountCreateRequest:
    """Creates a new creditor bank account object.

    Attributes:
        account_holder_name (str): Name of the account holder, as known by the bank.
        links (CreditorBankAccountLinks): The creditor that will own this bank account.
        account_number (Union[Unset, str]): Bank account number. Alternatively you can provide an `iban`.
        account_type (Union[Unset, CreditorBankAccountAccountType]): Bank account type. Required for USD-denominated
            bank accounts, must not be provided for other currencies.
        bank_code (Union[Unset, str]): Bank code.
        branch_code (Union[Unset, str]): Branch code.
        country_code (Union[Unset, str]): ISO 3166-1 alpha-2 code. Defaults to the country code of the `iban` if
            supplied, otherwise is required.
        currency (Union[Unset, str]): ISO 4217 currency code.
        iban (Union[Unset, str]): International Bank Account Number. Alternatively you can provide local details.
        metadata (Union[Unset, Metadata]): Key-value store of custom data. Up to 3 keys are permitted, with key
            names up to 50 characters and values up to 500 characters.
        set_as_default_payout_account (Union[Unset, bool]): When `True`, GoCardless will pay out to this bank account.
            Defaults to `False`.
    """

    account_holder_name: str
    links: "CreditorBankAccountLinks"
    account_number: Union[Unset, str] = UNSET
    account_type: Union[Unset, CreditorBankAccountAccountType] = UNSET
    bank_code: Union[Unset, str] = UNSET
    branch_code: Union[Unset, str] = UNSET
    country_code: Union[Unset, str] = UNSET
    currency: Union[Unset, str] = UNSET
    iban: Union[Unset, str] = UNSET
    metadata: Union[Unset, Metadata] = UNSET
    set_as_default_payout_account: Union[Unset, bool] = UNSET
    additional_properties: dict[str, Any] = _attrs_field(init=False, factory=dict)

    def to_dict(self) -> dict[str, Any]:
        account_holder_name = self.account_holder_name

        links = self.links.to_dict()

        account_number = self.account_number

        account_type: Union[Unset, str] = UNSET
        if not isinstance(self.account_type, Unset):
            account_type = CreditorBankAccountAccountType.to_wire(self.account_type)

        bank_code = self.bank_code

        branch_code = self.branch_code

        country_code = self.country_code

        currency = self.currency

        iban = self.iban

        metadata: Union[Unset, dict[str, Any]] = UNSET
        if not isinstance(self.metadata, Unset):
            metadata = self.metadata.to_dict()

        set_as_default_payout_account = self.set_as_default_payout_account

        field_dict: dict[str, Any] = {}
        field_dict.update(self.additional_properties)
        field_dict.update(
            {
                "account_holder_name": account_holder_name,
                "links": links,
            }
        )
        if account_number is not UNSET:
            field_dict["account_number"] = account_number
        if account_type is not UNSET:
            field_dict["account_type"] = account_type
        if bank_code is not UNSET:
            field_dict["bank_code"] = bank_code
        if branch_code is not UNSET:
            field_dict["branch_code"] = branch_code
        if country_code is not UNSET:
            field_dict["country_code"] = country_code
        if currency is not UNSET:
            field_dict["currency"] = currency
        if iban is not UNSET:
            field_dict["iban"] = iban
        if metadata is not UNSET:
            field_dict["metadata"] = metadata
        if set_as_default_payout_account is not UNSET:
            field_dict["set_as_default_payout_account"] = set_as_default_payout_account

        return field_dict

    @classmethod
    def from_dict(cls: type[T], src_dict: Mapping[str, Any]) -> T:
        from ..models.creditor_bank_account_links import CreditorBankAccountLinks

        d = dict(src_dict)
        account_holder_name = d.pop("account_holder_name")

        links = CreditorBankAccountLinks.from_dict(d.pop("links"))

        account_number = d.pop("account_number", UNSET)

        _account_type = d.pop("account_type", UNSET)
        account_type: Union[Unset, CreditorBankAccountAccountType]
        if isinstance(_account_type, Unset):
            account_type = UNSET
        else:
            account_type = CreditorBankAccountAccountType.from_wire(_account_type)

        bank_code = d.pop("bank_code", UNSET)

        branch_code = d.pop("branch_code", UNSET)

        country_code = d.pop("country_code", UNSET)

        currency = d.pop("currency", UNSET)

        iban = d.pop("iban", UNSET)

        _metadata = d.pop("metadata", UNSET)
        metadata: Union[Unset, Metadata]
        if isinstance(_metadata, Unset):
            metadata = UNSET
        else:
            metadata = Metadata.from_dict(_metadata)

        set_as_default_payout_account = d.pop("set_as_default_payout_account", UNSET)

        creditor_bank_account_create_request = cls(
            account_holder_name=account_holder_name,
            links=links,
            account_number=account_number,
            account_type=account_type,
            bank_code=bank_code,
            branch_code=branch_code,
            country_code=country_code,
            currency=currency,
            iban=iban,
            metadata=metadata,
            set_as_default_payout_account=set_as_default_payout_account,
        )

        creditor_bank_account_create_request.additional_properties = d
        return creditor_bank_account_create_request

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
