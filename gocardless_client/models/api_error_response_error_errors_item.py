from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeVar, Union

from attrs import define as _attrs_define
from attrs import field as _attrs_field

from ..types import UNSET, Unset

if TYPE_CHECKING:
    from ..models.api_error_response_error_errors_item_links import ApiErrorResponseErrorErrorsItemLinks


T = TypeVar("T", bound="ApiErrorResponseErrorErrorsItem")


@_attrs_define
class ApiErrorResponseErrorErrorsItem:
    """An individual error object from an error response

    Attributes:
        reason (Union[Unset, str]): A key defining the cause of the error.
        message (Union[Unset, str]): A short message describing the error.
        field (Union[Unset, str]): For validation errors, the invalid field name.
        request_pointer (Union[Unset, str]): For validation errors, a JSON pointer to the invalid field.
        links (Union[Unset, ApiErrorResponseErrorErrorsItemLinks]): Resources linked to the error.
    """

    reason: Union[Unset, str] = UNSET
    message: Union[Unset, str] = UNSET
    field: Union[Unset, str] = UNSET
    request_pointer: Union[Unset, str] = UNSET
    links: Union[Unset, "ApiErrorResponseErrorErrorsItemLinks"] = UNSET
    additional_properties: dict[str, Any] = _attrs_field(init=False, factory=dict)

    def to_dict(self) -> dict[str, Any]:
        reason = self.reason

        message = self.message

        field = self.field

        request_pointer = self.request_pointer

        links: Union[Unset, dict[str, Any]] = UNSET
        if not isinstance(self.links, Unset):
            links = self.links.to_dict()

        field_dict: dict[str, Any] = {}
        field_dict.update(self.additional_properties)
        field_dict.update({})
        if reason is not UNSET:
            field_dict["reason"] = reason
        if message is not UNSET:
            field_dict["message"] = message
        if field is not UNSET:
            field_dict["field"] = field
        if request_pointer is not UNSET:
            field_dict["request_pointer"] = request_pointer
        if links is not UNSET:
            field_dict["links"] = links

        return field_dict

    @classmethod
    def from_dict(cls: type[T], src_dict: Mapping[str, Any]) -> T:
        from ..models.api_error_response_error_errors_item_links import ApiErrorResponseErrorErrorsItemLinks

        d = dict(src_dict)
        reason = d.pop("reason", UNSET)

        message = d.pop("message", UNSET)

        field = d.pop("field", UNSET)

        request_pointer = d.pop("request_pointer", UNSET)

        _links = d.pop("links", UNSET)
        links: Union[Unset, ApiErrorResponseErrorErrorsItemLinks]
        if isinstance(_links, Unset):
            links = UNSET
        else:
            links = ApiErrorResponseErrorErrorsItemLinks.from_dict(_links)

        api_error_response_error_errors_item = cls(
            reason=reason,
            message=message,
            field=field,
            request_pointer=request_pointer,
            links=links,
        )

        api_error_response_error_errors_item.additional_properties = d
        return api_error_response_error_errors_item

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
