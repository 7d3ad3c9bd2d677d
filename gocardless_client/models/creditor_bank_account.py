import datetime
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeVar, Union

from attrs import define as _attrs_define
from attrs import field as _attrs_field
from dateutil.parser import isoparse

from ..models.creditor_bank_account_account_type import CreditorBankAccountAccountType
from ..models.creditor_bank_account_verification_status import CreditorBankAccountVerificationStatus
from ..models.metadata import Metadata
from ..types import UNSET, Unset

if TYPE_CHECKING:
    from ..models.creditor_bank_account_links import CreditorBankAccountLinks


T = TypeVar("T", bound="CreditorBankAccount")


@_attrs_define
class CreditorBankAccount:
    """Creditor Bank Accounts hold the bank details of a creditor. These are the bank accounts which your payouts will
    be sent to.

    Creditor bank accounts must be unique; creating a duplicate fails with a `bank_account_exists` error whose
    `links[creditor_bank_account]` holds the existing record.

        Attributes:
            account_holder_name (Union[Unset, str]): Name of the account holder, as known by the bank. Transliterated,
                upcased and truncated to 18 characters.
            account_number_ending (Union[Unset, str]): The last few digits of the account number.
            account_type (Union[CreditorBankAccountAccountType, None, Unset]): Bank account type. Only set for
                USD-denominated bank accounts.
            bank_name (Union[Unset, str]): Name of bank, taken from the bank details.
            country_code (Union[Unset, str]): ISO 3166-1 alpha-2 code.
            created_at (Union[Unset, datetime.datetime]): Fixed timestamp, recording when this resource was created.
            currency (Union[Unset, str]): ISO 4217 currency code.
            enabled (Union[Unset, bool]): Whether the bank account is enabled or disabled.
            id (Union[Unset, str]): Unique identifier, beginning with "BA".
            links (Union[Unset, CreditorBankAccountLinks]): Resources linked to this CreditorBankAccount
            metadata (Union[Unset, Metadata]): Key-value store of custom data. Up to 3 keys are permitted, with key
                names up to 50 characters and values up to 500 characters.
            verification_status (Union[CreditorBankAccountVerificationStatus, None, Unset]): Verification status of the Bank
                Account.
    """

    account_holder_name: Union[Unset, str] = UNSET
    account_number_ending: Union[Unset, str] = UNSET
    account_type: Union[CreditorBankAccountAccountType, None, Unset] = UNSET
    bank_name: Union[Unset, str] = UNSET
    country_code: Union[Unset, str] = UNSET
    created_at: Union[Unset, datetime.datetime] = UNSET
    currency: Union[Unset, str] = UNSET
    enabled: Union[Unset, bool] = UNSET
    id: Union[Unset, str] = UNSET
    links: Union[Unset, "CreditorBankAccountLinks"] = UNSET
    metadata: Union[Unset, Metadata] = UNSET
    verification_status: Union[CreditorBankAccountVerificationStatus, None, Unset] = UNSET
    additional_properties: dict[str, Any] = _attrs_field(init=False, factory=dict)

    def to_dict(self) -> dict[str, Any]:
        account_holder_name = self.account_holder_name

        account_number_ending = self.account_number_ending

        account_type: Union[None, Unset, str]
        if isinstance(self.account_type, Unset):
            account_type = UNSET
        elif isinstance(self.account_type, CreditorBankAccountAccountType):
            account_type = self.account_type.value
        else:
            account_type = self.account_type

        bank_name = self.bank_name

        country_code = self.country_code

        created_at: Union[Unset, str] = UNSET
        if not isinstance(self.created_at, Unset):
            created_at = self.created_at.isoformat()

        currency = self.currency

        enabled = self.enabled

        id = self.id

        links: Union[Unset, dict[str, Any]] = UNSET
        if not isinstance(self.links, Unset):
            links = self.links.to_dict()

        metadata: Union[Unset, dict[str, Any]] = UNSET
        if not isinstance(self.metadata, Unset):
            metadata = self.metadata.to_dict()

        verification_status: Union[None, Unset, str]
        if isinstance(self.verification_status, Unset):
            verification_status = UNSET
        elif isinstance(self.verification_status, CreditorBankAccountVerificationStatus):
            verification_status = self.verification_status.value
        else:
            verification_status = self.verification_status

        field_dict: dict[str, Any] = {}
        field_dict.update(self.additional_properties)
        field_dict.update({})
        if account_holder_name is not UNSET:
            field_dict["account_holder_name"] = account_holder_name
        if account_number_ending is not UNSET:
            field_dict["account_number_ending"] = account_number_ending
        if account_type is not UNSET:
            field_dict["account_type"] = account_type
        if bank_name is not UNSET:
            field_dict["bank_name"] = bank_name
        if country_code is not UNSET:
            field_dict["country_code"] = country_code
        if created_at is not UNSET:
            field_dict["created_at"] = created_at
        if currency is not UNSET:
            field_dict["currency"] = currency
        if enabled is not UNSET:
            field_dict["enabled"] = enabled
        if id is not UNSET:
            field_dict["id"] = id
        if links is not UNSET:
            field_dict["links"] = links
        if metadata is not UNSET:
            field_dict["metadata"] = metadata
        if verification_status is not UNSET:
            field_dict["verification_status"] = verification_status

        return field_dict

    @classmethod
    def from_dict(cls: type[T], src_dict: Mapping[str, Any]) -> T:
        from ..models.creditor_bank_account_links import CreditorBankAccountLinks

        d = dict(src_dict)
        account_holder_name = d.pop("account_holder_name", UNSET)

        account_number_ending = d.pop("account_number_ending", UNSET)

        def _parse_account_type(data: object) -> Union[CreditorBankAccountAccountType, None, Unset]:
            if data is None:
                return data
            if isinstance(data, Unset):
                return data
            return CreditorBankAccountAccountType.from_wire(data)

        account_type = _parse_account_type(d.pop("account_type", UNSET))

        bank_name = d.pop("bank_name", UNSET)

        country_code = d.pop("country_code", UNSET)

        _created_at = d.pop("created_at", UNSET)
        created_at: Union[Unset, datetime.datetime]
        if isinstance(_created_at, Unset):
            created_at = UNSET
        else:
            created_at = isoparse(_created_at)

        currency = d.pop("currency", UNSET)

        enabled = d.pop("enabled", UNSET)

        id = d.pop("id", UNSET)

        _links = d.pop("links", UNSET)
        links: Union[Unset, CreditorBankAccountLinks]
        if isinstance(_links, Unset):
            links = UNSET
        else:
            links = CreditorBankAccountLinks.from_dict(_links)

        _metadata = d.pop("metadata", UNSET)
        metadata: Union[Unset, Metadata]
        if isinstance(_metadata, Unset):
            metadata = UNSET
        else:
            metadata = Metadata.from_dict(_metadata)

        def _parse_verification_status(data: object) -> Union[None, CreditorBankAccountVerificationStatus, Unset]:
            if data is None:
                return data
            if isinstance(data, Unset):
                return data
            return CreditorBankAccountVerificationStatus.from_wire(data)

        verification_status = _parse_verification_status(d.pop("verification_status", UNSET))

        creditor_bank_account = cls(
            account_holder_name=account_holder_name,
            account_number_ending=account_number_ending,
            account_type=account_type,
            bank_name=bank_name,
            country_code=country_code,
            created_at=created_at,
            currency=currency,
            enabled=enabled,
            id=id,
            links=links,
            metadata=metadata,
            verification_status=verification_status,
        )

        creditor_bank_account.additional_properties = d
        return creditor_bank_account

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
