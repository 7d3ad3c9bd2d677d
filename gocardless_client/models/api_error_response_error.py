from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeVar, Union

from attrs import define as _attrs_define
from attrs import field as _attrs_field

from ..models.api_error_type import ApiErrorType
from ..types import UNSET, Unset

if TYPE_CHECKING:
    from ..models.api_error_response_error_errors_item import ApiErrorResponseErrorErrorsItem


T = TypeVar("T", bound="ApiErrorResponseError")


@_attrs_define
class ApiErrorResponseError:
    """
    Attributes:
        message (str): A short message describing the error.
        type (ApiErrorType): The type of the error.
        code (int): The HTTP status code.
        documentation_url (Union[Unset, str]): URL of the documentation describing the error.
        request_id (Union[Unset, str]): ID of the request, quote it to the support team to find your error quickly.
        errors (Union[Unset, list['ApiErrorResponseErrorErrorsItem']]): The individual errors.
    """

    message: str
    type: ApiErrorType
    code: int
    documentation_url: Union[Unset, str] = UNSET
    request_id: Union[Unset, str] = UNSET
    errors: Union[Unset, list["ApiErrorResponseErrorErrorsItem"]] = UNSET
    additional_properties: dict[str, Any] = _attrs_field(init=False, factory=dict)

    def to_dict(self) -> dict[str, Any]:
        message = self.message

        type = self.type.value

        code = self.code

        documentation_url = self.documentation_url

        request_id = self.request_id

        errors: Union[Unset, list[dict[str, Any]]] = UNSET
        if not isinstance(self.errors, Unset):
            errors = []
            for errors_item_data in self.errors:
                errors_item = errors_item_data.to_dict()
                errors.append(errors_item)

        field_dict: dict[str, Any] = {}
        field_dict.update(self.additional_properties)
        field_dict.update(
            {
                "message": message,
                "type": type,
                "code": code,
            }
        )
        if documentation_url is not UNSET:
            field_dict["documentation_url"] = documentation_url
        if request_id is not UNSET:
            field_dict["request_id"] = request_id
        if errors is not UNSET:
            field_dict["errors"] = errors

        return field_dict

    @classmethod
    def from_dict(cls: type[T], src_dict: Mapping[str, Any]) -> T:
        from ..models.api_error_response_error_errors_item import ApiErrorResponseErrorErrorsItem

        d = dict(src_dict)
        message = d.pop("message")

        type = ApiErrorType.from_wire(d.pop("type"))

        code = d.pop("code")

        documentation_url = d.pop("documentation_url", UNSET)

        request_id = d.pop("request_id", UNSET)

        errors = []
        _errors = d.pop("errors", UNSET)
        for errors_item_data in _errors or []:
            errors_item = ApiErrorResponseErrorErrorsItem.from_dict(errors_item_data)

            errors.append(errors_item)

        api_error_response_error = cls(
            message=message,
            type=type,
            code=code,
            documentation_url=documentation_url,
            request_id=request_id,
            errors=errors,
        )

        api_error_response_error.additional_properties = d
        return api_error_response_error

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
